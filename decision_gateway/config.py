"""Configuration management using Pydantic Settings"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from decision_gateway.domain.models import LoanLimits


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-decision-gateway"
    log_level: str = "INFO"

    # Loan amount bounds (EUR)
    minimum_loan_amount: int = 2000
    maximum_loan_amount: int = 10000

    # Loan period bounds (months)
    minimum_loan_period: int = 12
    maximum_loan_period: int = 60

    # Credit modifiers per personal code segment
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000

    minimum_applicant_age: int = 18

    @model_validator(mode="after")
    def check_loan_limits(self) -> "Settings":
        """Fail at startup on inconsistent loan limits"""
        LoanLimits.from_settings(self)
        return self


settings = Settings()
