"""Composer Configuration."""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from media_policy import DEFAULT_KEY_NAMESPACE, DEFAULT_MAX_BYTES, MEDIA_WILDCARDS, UploadPolicy


class ComposerSettings(BaseSettings):
    """Post composer settings."""

    # Backend REST API
    api_base_url: str = Field(
        "http://localhost:5000",
        validation_alias=AliasChoices("COMPOSER_API_BASE_URL", "API_URL"),
    )
    api_timeout_seconds: float = Field(15.0, gt=0)

    # Media relay / public bucket
    relay_base_url: str = Field(
        "http://localhost:8787",
        validation_alias=AliasChoices("COMPOSER_RELAY_BASE_URL", "WORKER_URL"),
    )
    public_base_url: str = Field(
        "http://localhost:8787",
        description="Public bucket URL that stored keys are resolved against",
        validation_alias=AliasChoices("COMPOSER_PUBLIC_BASE_URL", "R2_PUBLIC_URL"),
    )
    key_namespace: str = Field(DEFAULT_KEY_NAMESPACE, pattern=r"^[A-Za-z0-9_\-]+/$")
    max_file_size: int = Field(DEFAULT_MAX_BYTES, ge=1)
    upload_timeout_seconds: float = Field(60.0, gt=0)
    compensate_orphaned_uploads: bool = True

    # AI assist (disabled without a key)
    openai_api_key: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("COMPOSER_OPENAI_API_KEY", "OPENAI_API_KEY"),
    )
    openai_model: str = "gpt-4o-mini"
    openai_temperature: float = Field(0.7, ge=0, le=2)

    # Location autocomplete (disabled without a key)
    kakao_rest_api_key: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("COMPOSER_KAKAO_REST_API_KEY", "KAKAO_REST_API_KEY"),
    )
    suggest_debounce_seconds: float = Field(0.3, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="COMPOSER_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        validate_default=True,
    )

    def upload_policy(self) -> UploadPolicy:
        return UploadPolicy(
            max_bytes=self.max_file_size,
            allowed_mime_types=MEDIA_WILDCARDS,
            key_namespace=self.key_namespace,
        )


@lru_cache
def get_settings() -> ComposerSettings:
    return ComposerSettings()
