"""Application settings loaded from environment variables."""

import os
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SalaryPolicyKind = Literal["standard", "tax_deducted", "bonus_enhanced"]


def _env_file() -> str | None:
    if os.getenv("PYTEST_CURRENT_TEST"):
        return None
    return ".env"


class Settings(BaseSettings):
    """HRIS configuration. All values come from environment variables."""

    # Organization
    company_name: str = Field(default="Mehra Software Company")

    # Notifications
    hr_notification_email: str = Field(default="hr@mehrasoftware.com")
    hr_notification_phone: str = Field(default="+1-555-0123")

    # Salary
    salary_policy: SalaryPolicyKind = Field(default="standard")
    tax_rate: float = Field(default=0.20)
    bonus_multiplier: float = Field(default=1.5)

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_file=_env_file(), env_file_encoding="utf-8")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        if os.getenv("PYTEST_CURRENT_TEST"):
            return (init_settings,)
        return (init_settings, env_settings, dotenv_settings, file_secret_settings)


settings = Settings()
