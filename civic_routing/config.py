"""Application configuration via Pydantic Settings.

NOTE: We explicitly map the .env variable names (DEPARTMENTS_CSV_PATH,
KEYWORD_RULES_PATH, etc.) to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Department directory / keyword rule table
    departments_csv_path: str = Field(
        default="data/departments.csv",
        validation_alias="DEPARTMENTS_CSV_PATH",
    )
    keyword_rules_path: str = Field(default="", validation_alias="KEYWORD_RULES_PATH")

    # Intake limits
    description_max_length: int = Field(default=500, validation_alias="DESCRIPTION_MAX_LENGTH")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
