"""Unit tests for the text-generation client"""

import json
import httpx
import pytest
from credixai.domain.exceptions import ExplanationNotConfiguredError, ExplanationServiceError
from credixai.domain.explanation import EMPTY_RESPONSE_MESSAGE, NOT_CONFIGURED_MESSAGE, SERVICE_FAILED_MESSAGE
from credixai.domain.models import ExplanationStatus
from credixai.domain.scoring import evaluate_borrower
from credixai.infrastructure.clients.explainer import ExplanationClient


def test_explicit_zero_timeout_kept():
    """Test an explicit zero timeout is not replaced by the default"""
    assert ExplanationClient(api_key="test-key", timeout=0).timeout == 0


async def test_generate_sends_prompt_and_returns_text(explainer_factory, reply):
    """Test request shape and text extraction"""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=reply("  Your score is 669.  "))

    client = explainer_factory(handler)
    text = await client.generate("Explain please")

    assert text == "Your score is 669."
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/v1beta/models/gemini-test:generateContent"
    assert request.headers["x-goog-api-key"] == "test-key"
    assert json.loads(request.content) == {"contents": [{"parts": [{"text": "Explain please"}]}]}


async def test_generate_joins_text_parts(explainer_factory):
    """Test multi-part candidates are concatenated"""
    body = {"candidates": [{"content": {"parts": [{"text": "Part one. "}, {"text": "Part two."}]}}]}
    client = explainer_factory(lambda request: httpx.Response(200, json=body))

    assert await client.generate("prompt") == "Part one. Part two."


async def test_generate_without_key_raises():
    """Test missing key fails before any network call"""
    client = ExplanationClient(api_key="")
    with pytest.raises(ExplanationNotConfiguredError):
        await client.generate("prompt")


async def test_generate_retries_server_errors(explainer_factory, reply):
    """Test 5xx responses are retried until success"""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) < 3:
            return httpx.Response(503)
        return httpx.Response(200, json=reply("Recovered"))

    client = explainer_factory(handler, max_retries=3)

    assert await client.generate("prompt") == "Recovered"
    assert len(calls) == 3


async def test_generate_gives_up_after_max_retries(explainer_factory):
    """Test persistent 5xx raises after the final attempt"""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500)

    client = explainer_factory(handler, max_retries=2)

    with pytest.raises(ExplanationServiceError):
        await client.generate("prompt")
    assert len(calls) == 2


async def test_generate_client_errors_not_retried(explainer_factory):
    """Test 4xx fails immediately"""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(403, json={"error": {"message": "API key not valid"}})

    client = explainer_factory(handler)

    with pytest.raises(ExplanationServiceError, match="403"):
        await client.generate("prompt")
    assert len(calls) == 1


async def test_generate_timeout(explainer_factory):
    """Test timeouts surface as service errors"""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = explainer_factory(handler, max_retries=2)

    with pytest.raises(ExplanationServiceError, match="timeout"):
        await client.generate("prompt")


async def test_generate_malformed_body(explainer_factory):
    """Test non-JSON body is a service error"""
    client = explainer_factory(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(ExplanationServiceError):
        await client.generate("prompt")


async def test_explain_generated(explainer_factory, reply, default_borrower):
    """Test successful explanation carries the generated text"""
    prompts = []

    def handler(request: httpx.Request) -> httpx.Response:
        prompts.append(json.loads(request.content)["contents"][0]["parts"][0]["text"])
        return httpx.Response(200, json=reply("您的信用評分為 669 分。"))

    client = explainer_factory(handler)
    explanation = await client.explain(evaluate_borrower(default_borrower))

    assert explanation.status == ExplanationStatus.GENERATED
    assert explanation.text == "您的信用評分為 669 分。"
    assert not explanation.is_fallback
    assert "Final credit score: 669" in prompts[0]


async def test_explain_not_configured_fallback(unconfigured_explainer, default_borrower):
    """Test missing key returns the configuration fallback"""
    explanation = await unconfigured_explainer.explain(evaluate_borrower(default_borrower))

    assert explanation.status == ExplanationStatus.NOT_CONFIGURED
    assert explanation.text == NOT_CONFIGURED_MESSAGE
    assert explanation.is_fallback


async def test_explain_service_failure_fallback(explainer_factory, default_borrower):
    """Test network failure returns the service fallback"""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = explainer_factory(handler, max_retries=2)
    explanation = await client.explain(evaluate_borrower(default_borrower))

    assert explanation.status == ExplanationStatus.FAILED
    assert explanation.text == SERVICE_FAILED_MESSAGE


async def test_explain_empty_candidates_fallback(explainer_factory, default_borrower):
    """Test a reply without text returns the empty-response fallback"""
    client = explainer_factory(lambda request: httpx.Response(200, json={"candidates": []}))
    explanation = await client.explain(evaluate_borrower(default_borrower))

    assert explanation.status == ExplanationStatus.FAILED
    assert explanation.text == EMPTY_RESPONSE_MESSAGE


def test_fallback_messages_distinct():
    """Test each failure kind has its own message"""
    assert len({NOT_CONFIGURED_MESSAGE, SERVICE_FAILED_MESSAGE, EMPTY_RESPONSE_MESSAGE}) == 3
