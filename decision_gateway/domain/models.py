"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, fields
from typing import Optional


@dataclass(frozen=True)
class LoanRequest:
    """Loan application as received from the customer"""

    personal_code: str
    loan_amount: int  # EUR
    loan_period: int  # months


@dataclass(frozen=True)
class Decision:
    """Output of the decision engine: an approved offer or a rejection reason"""

    loan_amount: Optional[int]
    loan_period: Optional[int]
    error_message: Optional[str] = None

    def __post_init__(self) -> None:
        offer = (self.loan_amount, self.loan_period)
        if self.error_message is None:
            if None in offer:
                raise ValueError("approved decision needs both loan_amount and loan_period")
        elif offer != (None, None):
            raise ValueError("rejected decision cannot carry an offer")

    @classmethod
    def approved(cls, loan_amount: int, loan_period: int) -> "Decision":
        return cls(loan_amount=loan_amount, loan_period=loan_period)

    @classmethod
    def rejected(cls, error_message: str) -> "Decision":
        return cls(loan_amount=None, loan_period=None, error_message=error_message)

    @property
    def is_approved(self) -> bool:
        return self.error_message is None


@dataclass(frozen=True)
class LoanLimits:
    """
    Business constants the decision engine works with.

    Built once at startup and shared read-only between requests.
    """

    minimum_loan_amount: int = 2000
    maximum_loan_amount: int = 10000
    minimum_loan_period: int = 12
    maximum_loan_period: int = 60
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000
    minimum_applicant_age: int = 18

    def __post_init__(self) -> None:
        for field in fields(self):
            if getattr(self, field.name) <= 0:
                raise ValueError(f"{field.name} must be positive")
        if self.minimum_loan_amount > self.maximum_loan_amount:
            raise ValueError("minimum_loan_amount exceeds maximum_loan_amount")
        if self.minimum_loan_period > self.maximum_loan_period:
            raise ValueError("minimum_loan_period exceeds maximum_loan_period")

    @classmethod
    def from_settings(cls, settings) -> "LoanLimits":
        return cls(
            minimum_loan_amount=settings.minimum_loan_amount,
            maximum_loan_amount=settings.maximum_loan_amount,
            minimum_loan_period=settings.minimum_loan_period,
            maximum_loan_period=settings.maximum_loan_period,
            segment_1_credit_modifier=settings.segment_1_credit_modifier,
            segment_2_credit_modifier=settings.segment_2_credit_modifier,
            segment_3_credit_modifier=settings.segment_3_credit_modifier,
            minimum_applicant_age=settings.minimum_applicant_age,
        )
