"""
Organisationsnummer configuration management using pydantic-settings.

Values are read from ORGANISATIONSNUMMER_* environment variables or a .env
file in the working directory.
"""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ORGANISATIONSNUMMER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Century printed in the long format when the input had none
    default_century: str = Field(
        default="20",
        description="Century prefix used for long format when none was given",
    )

    # Prefixes allowed in front of a genuine organisationsnummer
    accepted_prefixes: list[str] = Field(
        default=["16", "20"],
        description="Two-digit prefixes accepted on organisation numbers",
    )

    log_level: str = Field(default="INFO", description="Logging level for the CLI")

    @field_validator("default_century")
    @classmethod
    def validate_default_century(cls, v: str) -> str:
        """Century must be exactly two digits."""
        if len(v) != 2 or not v.isdigit():
            raise ValueError("DEFAULT_CENTURY must be two digits")
        return v

    @field_validator("accepted_prefixes")
    @classmethod
    def validate_accepted_prefixes(cls, v: list[str]) -> list[str]:
        """Every accepted prefix must be exactly two digits."""
        for prefix in v:
            if len(prefix) != 2 or not prefix.isdigit():
                raise ValueError(f"Invalid prefix {prefix!r}, expected two digits")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return v.upper()

    @model_validator(mode="after")
    def validate_default_is_accepted(self) -> "Settings":
        """The default century must round-trip through parse."""
        if self.default_century not in self.accepted_prefixes:
            raise ValueError(
                "DEFAULT_CENTURY must be one of ACCEPTED_PREFIXES "
                f"({', '.join(self.accepted_prefixes)})"
            )
        return self


# Global settings instance
settings = Settings()
