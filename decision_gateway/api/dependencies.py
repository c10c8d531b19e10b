"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from decision_gateway.domain.decision_engine import DecisionEngine


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_decision_engine(request: Request) -> DecisionEngine:
    """Provide the engine built by create_app"""
    return request.app.state.decision_engine
