"""Article presenter.

Derives display values from an Article snapshot: share paths, canonical
URLs, descriptions, tag lists, title buckets, campaign tracking parameters,
and video metadata. Every method is a pure function of the snapshot, the
configuration, and the injected collaborators.
"""

import logging
from datetime import timezone
from functools import cached_property

from article_presenter.config import PresenterConfig
from article_presenter.exceptions import MissingFieldError
from article_presenter.parsers import FrontMatterParser, YAMLFrontMatterParser
from article_presenter.transformers import AssetUrlTransformer, CloudinaryUrlTransformer
from schemas.article import Article
from schemas.front_matter import FrontMatter
from schemas.title_length import TitleLengthClassification
from schemas.video_metadata import VideoMetadata

from .filters import (
    SENTENCE_TERMINATORS,
    collapse_whitespace,
    ensure_period,
    format_tagged_with,
    parse_tag_list,
    truncate_text,
)
from .presenter import Presenter

logger = logging.getLogger(__name__)

DISCUSS_TAG = "discuss"
DISCUSS_COMMENTS_COUNT = 75
DEFAULT_COMMENTS_COUNT = 25

DEFAULT_PLACEMENT = "additional_box"

# (minimum exclusive length, classification), longest first
TITLE_LENGTH_BUCKETS = (
    (100, TitleLengthClassification.LONGEST),
    (80, TitleLengthClassification.LONGER),
    (60, TitleLengthClassification.LONG),
    (20, TitleLengthClassification.MEDIUM),
)


class ArticlePresenter(Presenter):
    """Presents a single Article for display.

    Attributes:
        article: The wrapped Article snapshot
        config: Presenter configuration (application domain, CDN settings)
        parser: Front-matter parser for the article markdown
        asset_url_transformer: Transformer for video thumbnail URLs
    """

    SERIALIZABLE_METHODS = frozenset({
        "current_state_path",
        "processed_canonical_url",
        "url",
        "description_and_tags",
        "comments_to_show_count",
        "cached_tag_list_array",
        "title_length_classification",
        "internal_utm_params",
        "video_metadata",
        "published_at_int",
    })

    def __init__(
        self,
        article: Article,
        config: PresenterConfig,
        parser: FrontMatterParser | None = None,
        asset_url_transformer: AssetUrlTransformer | None = None,
    ):
        super().__init__(article)
        self.config = config
        self.parser = parser or YAMLFrontMatterParser()
        self.asset_url_transformer = (
            asset_url_transformer or CloudinaryUrlTransformer.from_config(config)
        )

    @property
    def article(self) -> Article:
        return self.object

    @cached_property
    def front_matter(self) -> FrontMatter:
        """Front matter parsed once per presenter."""
        return self.parser.parse(self.article.body_markdown)

    def current_state_path(self) -> str:
        """Share path: public for published articles, preview link for drafts."""
        path = f"/{self.article.username}/{self.article.slug}"
        if self.article.published:
            return path
        return f"{path}?preview={self.article.password}"

    def url(self) -> str:
        """Absolute article URL on the application domain."""
        return f"https://{self.config.app_domain}{self.article.path}"

    def processed_canonical_url(self) -> str:
        """Custom canonical URL when set, otherwise the article URL."""
        canonical_url = (self.article.canonical_url or "").strip()
        if canonical_url:
            return canonical_url
        return self.url()

    def cached_tag_list_array(self) -> list[str]:
        return parse_tag_list(self.article.cached_tag_list)

    def comments_to_show_count(self) -> int:
        if DISCUSS_TAG in self.cached_tag_list_array():
            return DISCUSS_COMMENTS_COUNT
        return DEFAULT_COMMENTS_COUNT

    def title_length_classification(self) -> TitleLengthClassification:
        length = len(self.article.title)
        for minimum, classification in TITLE_LENGTH_BUCKETS:
            if length > minimum:
                return classification
        return TitleLengthClassification.SHORT

    def description_and_tags(self) -> str:
        """Summary sentence followed by a "Tagged with" clause.

        A search-optimized replacement wins outright. Otherwise the base is
        the stored description, the front-matter description, the truncated
        body text, or "A post by <author>", in that order.

        Returns:
            Description text ending with a period
        """
        replacement = self.article.search_optimized_description_replacement
        if replacement and replacement.strip():
            return replacement

        description = self._base_description()
        tagged_with = format_tagged_with(self._description_tags())
        if not tagged_with:
            return description
        return f"{description} {tagged_with}"

    def _description_tags(self) -> list[str]:
        # Cached tags only stand in when the markdown declares no tags key
        if self.front_matter.tags is not None:
            return self.front_matter.tags
        return self.cached_tag_list_array()

    def _base_description(self) -> str:
        for candidate in (self.article.description, self.front_matter.description):
            candidate = collapse_whitespace(candidate)
            if candidate:
                return ensure_period(candidate)

        body_text = collapse_whitespace(self.front_matter.plain_body)
        if body_text:
            return ensure_period(truncate_text(body_text), terminators=SENTENCE_TERMINATORS)

        logger.debug(f"Article {self.article.id} has no body text, describing by author")
        return ensure_period(f"A post by {self.article.user_name}")

    def internal_utm_params(self, place: str = DEFAULT_PLACEMENT) -> str:
        """Query string tracking where an internal article link was shown.

        Args:
            place: Placement the link appears in

        Returns:
            Query string starting with "?"
        """
        org_slug = self.article.organization.slug if self.article.organization else ""

        if self.article.boosted_additional_articles:
            campaign = f"{org_slug}_boosted"
        else:
            campaign = "regular"

        params = [
            f"utm_source={place}",
            "utm_medium=internal",
            f"utm_campaign={campaign}",
            f"booster_org={org_slug}",
        ]
        return f"?{'&'.join(params)}"

    def video_metadata(self) -> VideoMetadata:
        return VideoMetadata(
            id=self.article.id,
            video_code=self.article.video_code,
            video_source_url=self.article.video_source_url,
            video_thumbnail_url=self.asset_url_transformer.transform(
                self.article.video_thumbnail_url
            ),
            video_closed_caption_track_url=self.article.video_closed_caption_track_url,
        )

    def published_at_int(self) -> int:
        """Publication time as Unix epoch seconds.

        Naive timestamps are read as UTC.

        Raises:
            MissingFieldError: If the article has no publication time
        """
        published_at = self.article.published_at
        if published_at is None:
            raise MissingFieldError("published_at")
        if published_at.tzinfo is None:
            published_at = published_at.replace(tzinfo=timezone.utc)
        return int(published_at.timestamp())
