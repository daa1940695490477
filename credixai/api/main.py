"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from credixai.api.middleware import RequestIDMiddleware, MetricsMiddleware
from credixai.api.v1 import explanation, inputs, score
from credixai.infrastructure.observability.logging import setup_logging
from credixai.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="CrediXAI",
        description="Explainable credit score simulator with SHAP-style attribution",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(score.router, prefix="/v1", tags=["scoring"])
    app.include_router(explanation.router, prefix="/v1", tags=["explanations"])
    app.include_router(inputs.router, prefix="/v1", tags=["inputs"])

    return app


app = create_app()
