from functools import lru_cache

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DOG_IMAGE = (
    "https://img.freepik.com/premium-photo/cute-confused-little-dog-with-question-marks_488220-4972.jpg?w=2000"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    database_url: str = Field(alias="DATABASE_URL")
    dog_api_key: str = Field(default="", validation_alias=AliasChoices("DOG_API_KEY", "API_KEY"))
    dog_api_url: str = Field(default="https://api.thedogapi.com/v1/breeds", alias="DOG_API_URL")
    dog_api_timeout_seconds: float | None = Field(default=None, alias="DOG_API_TIMEOUT_SECONDS")
    default_dog_image: str = Field(default=DEFAULT_DOG_IMAGE, alias="DEFAULT_DOG_IMAGE")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    seed_temperaments_on_startup: bool = Field(default=False, alias="SEED_TEMPERAMENTS_ON_STARTUP")

    @model_validator(mode="after")
    def validate_required_runtime(self) -> "Settings":
        if not self.database_url.strip():
            raise ValueError("DATABASE_URL is required")
        if not self.dog_api_url.strip():
            raise ValueError("DOG_API_URL must not be empty")
        if self.dog_api_timeout_seconds is not None and self.dog_api_timeout_seconds <= 0:
            raise ValueError("DOG_API_TIMEOUT_SECONDS must be > 0")
        if self.log_level.upper() not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported LOG_LEVEL: {self.log_level}")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
