"""Estonian personal code (isikukood) validation backed by python-stdnum"""

from datetime import date
from typing import Protocol

from stdnum.ee import ik
from stdnum.exceptions import ValidationError

from decision_gateway.domain.exceptions import InvalidPersonalCodeError


class PersonalCodeValidator(Protocol):
    """Capability the decision engine needs from a national ID library"""

    def compact(self, personal_code: str) -> str: ...

    def is_valid(self, personal_code: str) -> bool: ...

    def birth_date(self, personal_code: str) -> date: ...


class EstonianPersonalCodeValidator:
    """
    Validator for Estonian personal codes.

    Format: GYYMMDDSSSC
    - G: sex and century of birth (1-8)
    - YYMMDD: birth date
    - SSS: serial number
    - C: checksum
    """

    def compact(self, personal_code: str) -> str:
        return ik.compact(personal_code)

    def is_valid(self, personal_code: str) -> bool:
        return ik.is_valid(personal_code)

    def birth_date(self, personal_code: str) -> date:
        """Decode the birth date, resolving the century from the first digit"""
        try:
            return ik.get_birth_date(personal_code)
        except ValidationError as e:
            raise InvalidPersonalCodeError("Invalid personal ID code!") from e
