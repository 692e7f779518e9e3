"""Presenters that derive display values from articles."""

from .article_presenter import ArticlePresenter
from .collection_presenter import ArticleCollectionPresenter
from .filters import FILTERS, create_environment
from .presenter import Presenter

__all__ = [
    "ArticlePresenter",
    "ArticleCollectionPresenter",
    "Presenter",
    "FILTERS",
    "create_environment",
]
