"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from credixai.infrastructure.clients.explainer import ExplanationClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_explanation_client() -> ExplanationClient:
    """Provide text-generation client instance"""
    return ExplanationClient()
