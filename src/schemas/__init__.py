"""Schema definitions for Article Presenter."""

from .article import Article, Organization
from .front_matter import FrontMatter
from .title_length import TitleLengthClassification
from .video_metadata import VideoMetadata

__all__ = [
    "Article",
    "FrontMatter",
    "Organization",
    "TitleLengthClassification",
    "VideoMetadata",
]
