from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    DEFAULT_DENOMINATION: int = Field(
        default=12,
        ge=0,
        le=255,
        description="Denomination used when a quantity is parsed without one",
    )

    DIVISION_DENOMINATION: Optional[int] = Field(
        default=None,
        ge=0,
        le=255,
        description="Minimum denomination of division results (default: larger operand)",
    )

    STRICT_PRECISION: bool = Field(
        default=False,
        description="Should parsing reject values with more fractional digits than allowed?",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if value.upper() not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Must be one of {valid_levels}"
            )
        return value.upper()

    @model_validator(mode="after")
    def validate_denomination_relationships(self) -> "Settings":
        if (
            self.DIVISION_DENOMINATION is not None
            and self.DIVISION_DENOMINATION < self.DEFAULT_DENOMINATION
        ):
            raise ValueError(
                f"DIVISION_DENOMINATION ({self.DIVISION_DENOMINATION}) "
                f"should not be lower than DEFAULT_DENOMINATION ({self.DEFAULT_DENOMINATION})"
            )
        return self


@lru_cache()
def get_settings() -> Settings:
    from quantity.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.info("Settings loaded successfully")
        return settings

    except Exception as e:
        logger.error(f"Failed to load settings: {e}", exc_info=True)
        raise
