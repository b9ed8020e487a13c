from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from decimoney.domain.values.numeric_context import CanonicalWidth, RoundingPolicy


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

    MONEY_DEFAULTS_PRECISION: Optional[int] = Field(
        default=None,
        ge=0,
        description="Precision of the default numeric context (0 means unlimited)",
        examples=[16, 256],
    )

    MONEY_DEFAULTS_ROUNDING_MODE: Optional[str] = Field(
        default=None,
        description="Rounding mode paired with MONEY_DEFAULTS_PRECISION "
        "(HALF_UP when not set)",
        examples=["HALF_EVEN"],
    )

    MONEY_DEFAULTS_MATH_CONTEXT: Optional[str] = Field(
        default=None,
        description="Canonical width used when no explicit precision is set "
        "[DECIMAL32, DECIMAL64, DECIMAL128, UNLIMITED]",
        examples=["DECIMAL128"],
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

    @field_validator("MONEY_DEFAULTS_ROUNDING_MODE")
    @classmethod
    def validate_rounding_mode(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return RoundingPolicy.parse(value).value

    @field_validator("MONEY_DEFAULTS_MATH_CONTEXT")
    @classmethod
    def validate_math_context(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return CanonicalWidth.parse(value).value


@lru_cache()
def get_settings() -> Settings:
    from decimoney.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.info("Settings loaded successfully")
        return settings

    except Exception as e:
        logger.error(f"Failed to load settings: {e}", exc_info=True)
        raise
