"""Base class for asset URL transformers.

Asset URL transformers rewrite a raw asset URL (e.g. a video thumbnail) into
the URL a browser should load, typically routed through an image CDN.
"""

from abc import ABC, abstractmethod


class AssetUrlTransformer(ABC):
    """Abstract base class for asset URL transformers."""

    @abstractmethod
    def transform(self, url: str | None) -> str | None:
        """Rewrite an asset URL.

        Args:
            url: Raw asset URL, or None

        Returns:
            The URL to serve, or None when there is no asset
        """
        pass
