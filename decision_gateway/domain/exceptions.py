"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPersonalCodeError(DomainException):
    """Personal code failed validation or the applicant is under age"""

    pass


class InvalidLoanAmountError(DomainException):
    """Requested amount is outside the configured bounds"""

    pass


class InvalidLoanPeriodError(DomainException):
    """Requested period is outside the configured bounds"""

    pass


class NoValidLoanError(DomainException):
    """No loan can be offered for the given applicant and period"""

    pass
