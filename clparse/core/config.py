"""clparse configuration settings."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """clparse configuration settings.

    Environment Variables:
        CLPARSE_PREFIX: Environment prefix, empty in production
        CLPARSE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        CLPARSE_DEFAULT_VALUE_SEPARATOR: Separator used by list options that
            do not declare their own
        CLPARSE_TRUE_VALUES: JSON list of spellings converted to True
        CLPARSE_FALSE_VALUES: JSON list of spellings converted to False

    Example:
        ```python
        from clparse.core.config import settings

        if settings.is_production:
            # JSON logs...
        ```
    """

    PREFIX: str = Field(default="", alias="CLPARSE_PREFIX")
    LOG_LEVEL: str = Field(default="INFO", alias="CLPARSE_LOG_LEVEL")
    DEFAULT_VALUE_SEPARATOR: str = Field(
        default=",", alias="CLPARSE_DEFAULT_VALUE_SEPARATOR"
    )
    TRUE_VALUES: list[str] = Field(
        default=["true", "1", "yes", "on"], alias="CLPARSE_TRUE_VALUES"
    )
    FALSE_VALUES: list[str] = Field(
        default=["false", "0", "no", "off"], alias="CLPARSE_FALSE_VALUES"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("DEFAULT_VALUE_SEPARATOR")
    @classmethod
    def _single_character(cls, v: Any) -> Any:
        """Value separators are matched one character at a time."""
        if not isinstance(v, str) or len(v) != 1:
            raise ValueError("DEFAULT_VALUE_SEPARATOR must be a single character")
        return v

    @field_validator("TRUE_VALUES", "FALSE_VALUES")
    @classmethod
    def _lowercase(cls, v: list[str]) -> list[str]:
        return [item.lower() for item in v]

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)


# Create the singleton settings instance
settings = Settings()
