"""Text-generation HTTP client producing natural-language score explanations"""

import asyncio
import logging
from typing import Any

import httpx

from credixai.config import settings
from credixai.domain.exceptions import ExplanationNotConfiguredError, ExplanationServiceError
from credixai.domain.explanation import (
    EMPTY_RESPONSE_MESSAGE,
    NOT_CONFIGURED_MESSAGE,
    SERVICE_FAILED_MESSAGE,
    build_explanation_prompt,
)
from credixai.domain.models import Explanation, ExplanationStatus, PredictionResult
from credixai.infrastructure.observability.metrics import explanation_latency_histogram, record_explanation


def _extract_text(response: httpx.Response) -> str:
    """Join the text parts of the first candidate; no candidates means no text"""
    try:
        data: Any = response.json()
        candidates = data.get("candidates") or []
        if not candidates:
            return ""
        parts = candidates[0].get("content", {}).get("parts", [])
        return "".join(part.get("text", "") for part in parts).strip()
    except (ValueError, AttributeError, TypeError, KeyError, IndexError) as e:
        raise ExplanationServiceError(f"Malformed response from text-generation API: {e}") from e


class ExplanationClient:
    """Client for the Gemini generateContent endpoint"""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_base: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.base_url = (base_url or settings.gemini_api_base).rstrip("/")
        self.model = model or settings.gemini_model
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.max_retries = max(1, max_retries if max_retries is not None else settings.explanation_max_retries)
        self.backoff_base = backoff_base if backoff_base is not None else settings.explanation_backoff_base
        self.transport = transport
        self.language = settings.explanation_language
        self.highlight = settings.highlight_factor_count

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, prompt: str) -> str:
        """
        Send a prompt and return the generated text.

        Retry strategy:
        - Exponential backoff: base, 2*base, 4*base ... (base * 2^(attempt-1))
        - Retries on 5xx errors, timeouts and network failures
        - 4xx errors fail immediately

        Raises:
            ExplanationNotConfiguredError: No API key configured
            ExplanationServiceError: On timeout, HTTP errors, or invalid response
        """
        if not self.is_configured:
            raise ExplanationNotConfiguredError("No API key configured for text generation")

        url = f"{self.base_url}/v1beta/models/{self.model}:generateContent"
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        headers = {"x-goog-api-key": self.api_key}

        attempt = 0
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            while True:
                attempt += 1
                try:
                    with explanation_latency_histogram.time():
                        response = await client.post(url, json=payload, headers=headers)
                    response.raise_for_status()
                    return _extract_text(response)

                except httpx.HTTPStatusError as e:
                    status = e.response.status_code
                    if status < 500 or attempt >= self.max_retries:
                        raise ExplanationServiceError(f"Text-generation API error: {status}") from e
                except httpx.TimeoutException as e:
                    if attempt >= self.max_retries:
                        raise ExplanationServiceError(f"Text-generation API timeout after {self.timeout}s") from e
                except httpx.RequestError as e:
                    if attempt >= self.max_retries:
                        raise ExplanationServiceError(f"Text-generation API unreachable: {e}") from e

                backoff = self.backoff_base * (2 ** (attempt - 1))
                logging.warning(f"Text-generation attempt {attempt} failed, retrying in {backoff}s")
                await asyncio.sleep(backoff)

    async def explain(self, result: PredictionResult) -> Explanation:
        """
        Explain a scored result in plain language.

        Never raises for a missing key or a failed call; each maps to its
        fixed fallback text and status instead.
        """
        prompt = build_explanation_prompt(result, self.language, self.highlight)

        try:
            text = await self.generate(prompt)
        except ExplanationNotConfiguredError:
            logging.warning("Explanation requested but no API key is configured")
            explanation = Explanation(text=NOT_CONFIGURED_MESSAGE, status=ExplanationStatus.NOT_CONFIGURED)
        except ExplanationServiceError as e:
            logging.error(f"Text-generation API error: {e}")
            explanation = Explanation(text=SERVICE_FAILED_MESSAGE, status=ExplanationStatus.FAILED)
        else:
            if text:
                explanation = Explanation(text=text, status=ExplanationStatus.GENERATED)
            else:
                explanation = Explanation(text=EMPTY_RESPONSE_MESSAGE, status=ExplanationStatus.FAILED)

        record_explanation(explanation.status)
        return explanation
