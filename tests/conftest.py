"""Pytest fixtures for testing"""

import pytest
from dataclasses import replace
from typing import Callable
import httpx
from fastapi.testclient import TestClient
from credixai.api.main import create_app
from credixai.api.dependencies import get_explanation_client
from credixai.domain.models import BorrowerInput, DEFAULT_INPUTS
from credixai.infrastructure.clients.explainer import ExplanationClient


def gemini_reply(text: str) -> dict:
    """generateContent response body carrying a single text candidate"""
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


def make_explanation_client(
    handler: Callable[[httpx.Request], httpx.Response],
    api_key: str = "test-key",
    max_retries: int = 3,
) -> ExplanationClient:
    """Explanation client wired to an in-memory transport, no backoff delay"""
    return ExplanationClient(
        api_key=api_key,
        base_url="https://genai.test",
        model="gemini-test",
        timeout=1.0,
        max_retries=max_retries,
        backoff_base=0,
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def default_borrower() -> BorrowerInput:
    """Borrower with the form's default inputs"""
    return DEFAULT_INPUTS


@pytest.fixture
def borrower_factory() -> Callable[..., BorrowerInput]:
    """Build borrowers by overriding individual default inputs"""

    def build(**overrides) -> BorrowerInput:
        return replace(DEFAULT_INPUTS, **overrides)

    return build


@pytest.fixture
def unconfigured_explainer() -> ExplanationClient:
    """Client with no API key; never touches the network"""
    return make_explanation_client(lambda request: httpx.Response(500), api_key="")


@pytest.fixture
def client(unconfigured_explainer: ExplanationClient) -> TestClient:
    """Create FastAPI test client with no text-generation credentials"""
    app = create_app()
    app.dependency_overrides[get_explanation_client] = lambda: unconfigured_explainer
    return TestClient(app)


@pytest.fixture
def explainer_factory() -> Callable[..., ExplanationClient]:
    """Factory for explanation clients backed by a request handler"""
    return make_explanation_client


@pytest.fixture
def reply() -> Callable[[str], dict]:
    """Factory for generateContent response bodies"""
    return gemini_reply
