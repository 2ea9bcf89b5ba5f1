"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Slack
    slack_signing_secret: str = ""
    slack_bot_token: str = ""
    slack_target_channel: str = ""
    slack_api_base_url: str = "https://slack.com/api"
    slack_timeout_seconds: float = 10.0

    # OpenAI (commentary is skipped when no key is configured)
    openai_api_key: str = ""
    openai_model: str = "gpt-3.5-turbo"
    openai_max_tokens: int = 150
    openai_temperature: float = 0.7

    # Server
    host: str = "0.0.0.0"
    port: int = 10000
    log_level: str = "info"

    # Dev mode: colored console logs instead of JSON
    dev_mode: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def relay_configured(self) -> bool:
        """Return True when both the bot token and the target channel are set."""
        return bool(self.slack_bot_token and self.slack_target_channel)


settings = Settings()
