"""Decision engine - core business logic for loan approval"""

from datetime import date
from typing import Callable, Optional

from decision_gateway.domain.exceptions import (
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    NoValidLoanError,
)
from decision_gateway.domain.models import Decision, LoanLimits, LoanRequest
from decision_gateway.domain.personal_code import (
    EstonianPersonalCodeValidator,
    PersonalCodeValidator,
)
from decision_gateway.utils.date_utils import age_in_years


def get_segment(personal_code: str) -> int:
    """Last four digits of the personal code as an integer (0-9999)"""
    return int(personal_code[-4:])


def get_segment_name(segment: int) -> str:
    """
    Map a personal code segment to its credit bucket.

    Segment bands:
    - 0000 - 2499: debt (no loan)
    - 2500 - 4999: segment_1
    - 5000 - 7499: segment_2
    - 7500 - 9999: segment_3
    """
    if segment < 2500:
        return "debt"
    elif segment < 5000:
        return "segment_1"
    elif segment < 7500:
        return "segment_2"
    else:
        return "segment_3"


class DecisionEngine:
    """
    Calculates the approved loan amount and period for a customer.

    The amount depends on the customer's credit modifier, which is
    determined by the last four digits of their personal code.
    """

    def __init__(
        self,
        limits: LoanLimits,
        validator: Optional[PersonalCodeValidator] = None,
        clock: Callable[[], date] = date.today,
    ):
        self.limits = limits
        self.validator = validator or EstonianPersonalCodeValidator()
        self.clock = clock

    def evaluate(self, request: LoanRequest) -> Decision:
        return self.calculate_approved_loan(
            request.personal_code, request.loan_amount, request.loan_period
        )

    def calculate_approved_loan(self, personal_code: str, loan_amount: int, loan_period: int) -> Decision:
        """
        Main entry point: validate the request and find the best loan offer.

        The offer is the highest amount reachable at the requested period. When
        even the minimum amount is out of reach, the period is extended month by
        month up to the maximum period.

        Raises:
            InvalidPersonalCodeError: Invalid code or applicant under age
            InvalidLoanAmountError: Amount outside configured bounds
            InvalidLoanPeriodError: Period outside configured bounds
            NoValidLoanError: Debt segment, or minimum amount unreachable
        """
        personal_code = self.verify_inputs(personal_code, loan_amount, loan_period)

        credit_modifier = self.get_credit_modifier(personal_code)
        if credit_modifier == 0:
            raise NoValidLoanError("No valid loan found!")

        return self.find_approved_loan(credit_modifier, loan_period)

    def find_approved_loan(self, credit_modifier: int, requested_period: int) -> Decision:
        """Smallest period >= requested at which the minimum amount is reachable"""
        limits = self.limits
        loan_period = min(requested_period, limits.maximum_loan_period)
        loan_amount = self.highest_valid_loan_amount(credit_modifier, loan_period)

        while loan_amount < limits.minimum_loan_amount and loan_period < limits.maximum_loan_period:
            loan_period += 1
            loan_amount = self.highest_valid_loan_amount(credit_modifier, loan_period)

        if loan_amount < limits.minimum_loan_amount:
            raise NoValidLoanError("No valid loan found!")

        return Decision.approved(min(loan_amount, limits.maximum_loan_amount), loan_period)

    @staticmethod
    def highest_valid_loan_amount(credit_modifier: int, loan_period: int) -> int:
        return credit_modifier * loan_period

    def get_credit_modifier(self, personal_code: str) -> int:
        segment_name = get_segment_name(get_segment(personal_code))
        if segment_name == "debt":
            return 0
        return getattr(self.limits, f"{segment_name}_credit_modifier")

    def verify_inputs(self, personal_code: str, loan_amount: int, loan_period: int) -> str:
        """
        Check all inputs against business rules, in priority order.

        Returns the compacted personal code.
        """
        if not self.validator.is_valid(personal_code):
            raise InvalidPersonalCodeError("Invalid personal ID code!")
        personal_code = self.validator.compact(personal_code)

        if not self.is_old_enough(personal_code):
            raise InvalidPersonalCodeError("To approve a loan you must be an adult!")

        limits = self.limits
        if not limits.minimum_loan_amount <= loan_amount <= limits.maximum_loan_amount:
            raise InvalidLoanAmountError("Invalid loan amount!")
        if not limits.minimum_loan_period <= loan_period <= limits.maximum_loan_period:
            raise InvalidLoanPeriodError("Invalid loan period!")

        return personal_code

    def is_old_enough(self, personal_code: str) -> bool:
        birth_date = self.validator.birth_date(personal_code)
        return age_in_years(birth_date, self.clock()) >= self.limits.minimum_applicant_age
