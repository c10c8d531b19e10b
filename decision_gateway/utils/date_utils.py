"""Date manipulation utilities"""

from datetime import date


def age_in_years(birth_date: date, today: date) -> int:
    """Completed years of age on `today` (birthday-adjusted)"""
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age
