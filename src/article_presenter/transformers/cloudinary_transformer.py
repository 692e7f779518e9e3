"""Cloudinary fetch-URL transformer for article assets."""

import logging

from article_presenter.config import (
    DEFAULT_VIDEO_THUMBNAIL_QUALITY,
    DEFAULT_VIDEO_THUMBNAIL_WIDTH,
    PresenterConfig,
)

from .transformer import AssetUrlTransformer

logger = logging.getLogger(__name__)

CLOUDINARY_BASE_URL = "https://res.cloudinary.com"


class CloudinaryUrlTransformer(AssetUrlTransformer):
    """Route asset URLs through Cloudinary's remote fetch API.

    Without a cloud name, URLs are returned unchanged so that development
    setups without a CDN still serve the original asset.

    Attributes:
        cloud_name: Cloudinary account name
        width: Maximum width of the delivered image
        quality: Delivered image quality (1-100)
    """

    def __init__(
        self,
        cloud_name: str | None = None,
        width: int = DEFAULT_VIDEO_THUMBNAIL_WIDTH,
        quality: int = DEFAULT_VIDEO_THUMBNAIL_QUALITY,
    ):
        self.cloud_name = cloud_name
        self.width = width
        self.quality = quality

    @classmethod
    def from_config(cls, config: PresenterConfig) -> "CloudinaryUrlTransformer":
        return cls(
            cloud_name=config.cloudinary_cloud_name,
            width=config.video_thumbnail_width,
            quality=config.video_thumbnail_quality,
        )

    @property
    def transformation(self) -> str:
        return f"c_limit,f_auto,fl_progressive,q_{self.quality},w_{self.width}"

    def transform(self, url: str | None) -> str | None:
        """Build a Cloudinary fetch URL for an asset.

        Args:
            url: Raw asset URL, or None

        Returns:
            The Cloudinary URL, the unchanged URL when no cloud is
            configured, or None for a missing asset

        Examples:
            >>> CloudinaryUrlTransformer("demo").transform("https://cdn.com/a.png")
            'https://res.cloudinary.com/demo/image/fetch/c_limit,f_auto,fl_progressive,q_80,w_880/https://cdn.com/a.png'
        """
        if not url:
            return None
        if not self.cloud_name:
            logger.debug(f"No Cloudinary cloud configured, serving {url} directly")
            return url
        if url.startswith(f"{CLOUDINARY_BASE_URL}/{self.cloud_name}/"):
            return url
        return f"{CLOUDINARY_BASE_URL}/{self.cloud_name}/image/fetch/{self.transformation}/{url}"
