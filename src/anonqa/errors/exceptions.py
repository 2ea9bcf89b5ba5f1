"""Custom exception classes for the Anonymous QA Bot."""


class AnonQAError(Exception):
    """Base exception for the bot."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class ValidationError(AnonQAError):
    """Request payload could not be decoded."""

    def __init__(self, message: str, details=None):
        super().__init__("VALIDATION_ERROR", message, details, status_code=400)


class NotFoundError(AnonQAError):
    """Route or resource not found."""

    def __init__(self, message: str = "Not found"):
        super().__init__("NOT_FOUND", message, status_code=404)


class AuthenticationError(AnonQAError):
    """Request signature missing, stale or invalid."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__("UNAUTHORIZED", message, status_code=401)


class SlackAPIError(AnonQAError):
    """Slack Web API call failed at the transport or API level."""

    def __init__(self, message: str, slack_error: str | None = None):
        self.slack_error = slack_error
        details = {"slack_error": slack_error} if slack_error else None
        super().__init__("SLACK_API_ERROR", message, details, status_code=502)
