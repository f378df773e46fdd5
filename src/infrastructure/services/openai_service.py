from __future__ import annotations

import logging

import openai
from openai import AsyncOpenAI

from src.application.errors import (
    InvalidClassificationResponse,
    MisconfiguredCredential,
    ServiceUnavailable,
)
from src.application.interfaces.classifier import ClassificationRequest
from src.config.settings import Settings

logger = logging.getLogger(__name__)


class OpenAIService:
    """Performance classifier backed by OpenAI chat completions in JSON mode."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str = "gpt-4o-mini",
        temperature: float = 0.2,
        timeout: float = 60.0,
        client: AsyncOpenAI | None = None,
    ):
        self.model = model
        self.temperature = temperature
        # Exactly one attempt per summary request
        self.client = client or AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    async def classify(self, request: ClassificationRequest) -> str:
        """
        Send the classification request and return the raw response text.

        Raises:
            MisconfiguredCredential: If the API key is rejected
            ServiceUnavailable: For transport, rate limit or server errors
            InvalidClassificationResponse: If the completion has no content
        """
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": request.instruction},
                    {"role": "user", "content": request.report_json},
                ],
                response_format={"type": "json_object"},
                temperature=self.temperature,
            )
        except (openai.AuthenticationError, openai.PermissionDeniedError) as exc:
            logger.error("OpenAI rejected the configured credential: %s", exc)
            raise MisconfiguredCredential("OpenAI rejected the configured API key") from exc
        except openai.APIError as exc:
            logger.error("OpenAI classification request failed: %s", exc)
            raise ServiceUnavailable("Performance classification service is unavailable") from exc

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise InvalidClassificationResponse("Empty response from classification service")
        logger.debug("OpenAI returned %d characters", len(content))
        return content


def build_classifier(settings: Settings) -> OpenAIService | None:
    """Classifier from settings, or None when no API key is configured."""
    if not settings.classifier_configured:
        return None
    return OpenAIService(
        settings.openai_api_key.get_secret_value(),
        model=settings.openai_model,
        temperature=settings.openai_temperature,
        timeout=settings.openai_timeout_seconds,
    )
