"""FastAPI application factory"""

from typing import Optional
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from decision_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from decision_gateway.api.v1 import decision
from decision_gateway.domain.decision_engine import DecisionEngine
from decision_gateway.domain.models import LoanLimits
from decision_gateway.infrastructure.observability.logging import setup_logging
from decision_gateway.config import Settings, settings as default_settings

setup_logging(default_settings.log_level, default_settings.service_name)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create the gateway with its decision engine.

    Loan limits are validated here, so a misconfigured service never starts.
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Loan Decision Gateway",
        description="Loan approval decision service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.decision_engine = DecisionEngine(LoanLimits.from_settings(settings))

    # RequestIDMiddleware wraps MetricsMiddleware
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(decision.router, prefix="/v1", tags=["decisions"])

    return app


app = create_app()
