"""Presenter for ordered collections of articles."""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from article_presenter.config import PresenterConfig
from article_presenter.parsers import FrontMatterParser
from article_presenter.transformers import AssetUrlTransformer
from schemas.article import Article

from .article_presenter import ArticlePresenter

logger = logging.getLogger(__name__)


class ArticleCollectionPresenter(Sequence):
    """An ordered sequence of ArticlePresenters sharing one configuration.

    Serialization applies the single-article contract to each item, in order.
    """

    def __init__(
        self,
        articles: Iterable[Article],
        config: PresenterConfig,
        parser: FrontMatterParser | None = None,
        asset_url_transformer: AssetUrlTransformer | None = None,
    ):
        self._presenters = [
            ArticlePresenter(
                article,
                config,
                parser=parser,
                asset_url_transformer=asset_url_transformer,
            )
            for article in articles
        ]

    def __getitem__(self, index):
        return self._presenters[index]

    def __len__(self) -> int:
        return len(self._presenters)

    def as_json(
        self,
        only: Iterable[str] | None = None,
        methods: Iterable[str] | None = None,
    ) -> list[dict[str, Any]]:
        """Serialize every article with the same field and method selection.

        Args:
            only: Raw field names to include (default: all fields)
            methods: Derivation method names to include

        Returns:
            One mapping per article, in collection order
        """
        only = list(only) if only is not None else None
        methods = list(methods) if methods is not None else None
        logger.debug(f"Serializing {len(self)} articles")
        return [presenter.as_json(only=only, methods=methods) for presenter in self._presenters]
