"""
Runtime Settings (FastAPI Official Pattern)

Environment-driven configuration, varies per deployment.
Reference: https://fastapi.tiangolo.com/advanced/settings/
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from media_policy import ALLOWED_MIME_TYPES, DEFAULT_KEY_NAMESPACE, DEFAULT_MAX_BYTES, UploadPolicy


class Settings(BaseSettings):
    """Runtime configuration for the media relay."""

    app_name: str = "Media Relay"

    allowed_origins: str = Field(
        "*",
        description="Value of Access-Control-Allow-Origin on every response",
        validation_alias=AliasChoices("RELAY_ALLOWED_ORIGINS", "ALLOWED_ORIGINS"),
    )
    max_file_size: int = Field(
        DEFAULT_MAX_BYTES,
        ge=1,
        description="Upload ceiling in bytes",
        validation_alias=AliasChoices("RELAY_MAX_FILE_SIZE", "MAX_FILE_SIZE"),
    )
    key_namespace: str = Field(
        DEFAULT_KEY_NAMESPACE,
        pattern=r"^[A-Za-z0-9_\-]+/$",
        validation_alias=AliasChoices("RELAY_KEY_NAMESPACE"),
    )

    storage_backend: Literal["s3", "memory"] = Field(
        "s3",
        validation_alias=AliasChoices("RELAY_STORAGE_BACKEND"),
    )
    s3_bucket: str = Field(
        "powder-feed-media",
        validation_alias=AliasChoices("RELAY_S3_BUCKET"),
    )
    s3_endpoint_url: Optional[str] = Field(
        None,
        description="S3-compatible endpoint (e.g. https://<account>.r2.cloudflarestorage.com)",
        validation_alias=AliasChoices("RELAY_S3_ENDPOINT_URL"),
    )
    aws_region: str = Field(
        "auto",
        validation_alias=AliasChoices("RELAY_AWS_REGION", "AWS_REGION"),
    )
    aws_access_key_id: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("RELAY_AWS_ACCESS_KEY_ID", "AWS_ACCESS_KEY_ID"),
    )
    aws_secret_access_key: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("RELAY_AWS_SECRET_ACCESS_KEY", "AWS_SECRET_ACCESS_KEY"),
    )

    model_config = SettingsConfigDict(
        env_prefix="RELAY_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        validate_default=True,
    )

    def upload_policy(self) -> UploadPolicy:
        return UploadPolicy(
            max_bytes=self.max_file_size,
            allowed_mime_types=ALLOWED_MIME_TYPES,
            key_namespace=self.key_namespace,
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance (FastAPI pattern)."""
    return Settings()
