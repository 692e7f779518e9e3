"""Presenter configuration."""

import os

from pydantic import BaseModel, field_validator

from article_presenter.exceptions import ConfigurationError

DEFAULT_VIDEO_THUMBNAIL_WIDTH = 880
DEFAULT_VIDEO_THUMBNAIL_QUALITY = 80


class PresenterConfig(BaseModel):
    """Settings shared by every presenter.

    Attributes:
        app_domain: Public host name of the application (e.g. "dev.to")
        cloudinary_cloud_name: Cloudinary account used for asset URLs
        video_thumbnail_width: Width requested for video thumbnails
        video_thumbnail_quality: JPEG quality requested for video thumbnails
    """

    app_domain: str
    cloudinary_cloud_name: str | None = None
    video_thumbnail_width: int = DEFAULT_VIDEO_THUMBNAIL_WIDTH
    video_thumbnail_quality: int = DEFAULT_VIDEO_THUMBNAIL_QUALITY

    model_config = {"frozen": True}

    @field_validator("app_domain")
    @classmethod
    def app_domain_must_be_host(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("app_domain must not be empty")
        if "://" in value or value.endswith("/"):
            raise ValueError("app_domain must be a bare host name")
        return value

    @classmethod
    def from_env(cls, environ: dict | None = None) -> "PresenterConfig":
        """Build a config from APP_DOMAIN and CLOUDINARY_CLOUD_NAME.

        Raises:
            ConfigurationError: If APP_DOMAIN is not set
        """
        environ = os.environ if environ is None else environ
        app_domain = environ.get("APP_DOMAIN")
        if not app_domain:
            raise ConfigurationError("APP_DOMAIN is not set")
        return cls(
            app_domain=app_domain,
            cloudinary_cloud_name=environ.get("CLOUDINARY_CLOUD_NAME") or None,
        )
