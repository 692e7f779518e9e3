"""Transformers for rewriting asset URLs."""

from .cloudinary_transformer import CloudinaryUrlTransformer
from .transformer import AssetUrlTransformer

__all__ = ["AssetUrlTransformer", "CloudinaryUrlTransformer"]
