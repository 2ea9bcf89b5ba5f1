"""AI rewrite and commentary for anonymous messages.

The commentary is optional: when no OpenAI client is configured, or the call
fails for any reason, the message is relayed as submitted.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Literal

logger = logging.getLogger(__name__)

Language = Literal["en", "ru"]

_CYRILLIC_RE = re.compile("[\u0400-\u04FF]")
_CYRILLIC_THRESHOLD = 0.2

_PROMPTS: dict[str, tuple[str, str]] = {
    "en": (
        "You are an assistant responsible for rewriting anonymous user messages "
        "submitted through a Slack slash command. Your goals: "
        "1) Preserve the original meaning of the user's message. "
        "2) Improve clarity, structure, and tone. "
        "3) Add a short, friendly, supportive commentary from yourself (the AI) after the message. "
        "4) Do NOT reveal or imply anything about the original sender's identity. "
        "5) Keep the response concise but helpful.",
        'Rewrite this message for clarity and add commentary:\n\n"{message}"',
    ),
    "ru": (
        "Ты ассистент, отвечающий за переписывание анонимных сообщений от пользователей "
        "через Slack команду. Твои цели: "
        "1) Сохранить исходный смысл сообщения. "
        "2) Улучшить ясность, структуру и тон. "
        "3) Добавить короткий, дружеский, поддерживающий комментарий от себя после сообщения. "
        "4) НЕ раскрывай и не намекай ничего об идентичности отправителя. "
        "5) Кратко, но полезно.",
        'Переписать сообщение с улучшением ясности и добавить комментарий:\n\n"{message}"',
    ),
}


def detect_language(text: str) -> Language:
    """Guess between Russian and English.

    Russian when Cyrillic characters make up more than 20% of the text.
    """
    if not text:
        return "en"
    cyrillic = len(_CYRILLIC_RE.findall(text))
    if cyrillic > len(text) * _CYRILLIC_THRESHOLD:
        return "ru"
    return "en"


def build_prompts(message: str, language: Language) -> tuple[str, str]:
    """Return (system_prompt, user_prompt) for the given language."""
    system_prompt, user_template = _PROMPTS.get(language, _PROMPTS["en"])
    return system_prompt, user_template.format(message=message)


class CommentaryService:
    """Generates rewritten text plus commentary through OpenAI chat completions."""

    def __init__(
        self,
        client: Any | None,
        model: str = "gpt-3.5-turbo",
        max_tokens: int = 150,
        temperature: float = 0.7,
    ):
        self._client = client
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature

    @property
    def enabled(self) -> bool:
        return self._client is not None

    async def get_commentary(self, message: str) -> str | None:
        """Return AI commentary for ``message``, or None when unavailable."""
        if self._client is None:
            logger.info("OpenAI API key not configured, skipping AI commentary")
            return None

        language = detect_language(message)
        logger.debug("Detected language %s for message %r", language, message[:50])
        system_prompt, user_prompt = build_prompts(message, language)

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
            content = response.choices[0].message.content
        except Exception as exc:
            # Commentary is best-effort; the relay continues without it
            logger.error("AI commentary failed: %s", exc)
            return None

        if not content or not content.strip():
            return None
        return content.strip()


def create_commentary_service(
    api_key: str,
    model: str = "gpt-3.5-turbo",
    max_tokens: int = 150,
    temperature: float = 0.7,
) -> CommentaryService:
    """Build a CommentaryService, with an AsyncOpenAI client only when a key is set."""
    client = None
    if api_key:
        from openai import AsyncOpenAI

        client = AsyncOpenAI(api_key=api_key)
    return CommentaryService(client, model=model, max_tokens=max_tokens, temperature=temperature)
