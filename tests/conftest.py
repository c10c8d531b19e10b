"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Callable
from fastapi.testclient import TestClient
from decision_gateway.api.main import create_app
from decision_gateway.api.dependencies import get_decision_engine
from decision_gateway.domain.decision_engine import DecisionEngine
from decision_gateway.domain.models import LoanLimits


TODAY = date(2026, 10, 16)


def _check_digit(digits: str) -> str:
    """Estonian personal code checksum over the first ten digits"""
    check = sum(int(d) * ((i % 9) + 1) for i, d in enumerate(digits)) % 11
    if check == 10:
        check = sum(int(d) * (((i + 2) % 9) + 1) for i, d in enumerate(digits)) % 11
    return str(check % 10)


@pytest.fixture
def personal_code_factory() -> Callable[[str, str, str], str]:
    """Build a checksum-valid personal code from century digit, YYMMDD and serial"""

    def factory(century_digit: str, birth_date: str, serial: str) -> str:
        digits = f"{century_digit}{birth_date}{serial}"
        return digits + _check_digit(digits)

    return factory


@pytest.fixture
def limits() -> LoanLimits:
    """Loan limits matching the production defaults"""
    return LoanLimits(
        minimum_loan_amount=2000,
        maximum_loan_amount=10000,
        minimum_loan_period=12,
        maximum_loan_period=60,
        segment_1_credit_modifier=100,
        segment_2_credit_modifier=300,
        segment_3_credit_modifier=1000,
    )


@pytest.fixture
def engine(limits: LoanLimits) -> DecisionEngine:
    """Decision engine with a fixed clock"""
    return DecisionEngine(limits, clock=lambda: TODAY)


@pytest.fixture
def client(engine: DecisionEngine) -> TestClient:
    """Create FastAPI test client with the fixed-clock engine"""
    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: engine
    return TestClient(app)
