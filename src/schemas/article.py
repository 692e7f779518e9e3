"""Article domain object."""

from datetime import datetime

from pydantic import BaseModel, model_validator


class Organization(BaseModel):
    """An organization an article can be published under.

    Attributes:
        slug: URL-safe organization identifier
        name: Display name of the organization
    """

    slug: str
    name: str | None = None

    model_config = {"frozen": True}


class Article(BaseModel):
    """Read-only snapshot of an article as handed to the presenters.

    Attributes:
        id: Opaque article identifier
        title: Article title
        body_markdown: Raw markdown, possibly starting with a front-matter block
        canonical_url: Custom canonical URL (may carry stray whitespace)
        slug: Article slug
        username: Author username
        user_name: Author display name
        published: Whether the article is public
        password: Draft preview token
        cached_tag_list: Comma-separated tag snapshot
        boosted_additional_articles: Promoted placement flag
        organization: Publishing organization, if any
        published_at: Publication timestamp
        description: Stored description
        search_optimized_description_replacement: Description override
        video_code: Video identifier
        video_source_url: Video stream URL
        video_thumbnail_url: Raw video thumbnail URL
        video_closed_caption_track_url: Caption track URL
        path: Base path (defaults to /username/slug)
    """

    id: int | str
    title: str
    body_markdown: str = ""
    canonical_url: str | None = None
    slug: str
    username: str
    user_name: str = ""
    published: bool = False
    password: str | None = None
    cached_tag_list: str = ""
    boosted_additional_articles: bool = False
    organization: Organization | None = None
    published_at: datetime | None = None
    description: str | None = None
    search_optimized_description_replacement: str | None = None
    video_code: str | None = None
    video_source_url: str | None = None
    video_thumbnail_url: str | None = None
    video_closed_caption_track_url: str | None = None
    path: str | None = None

    model_config = {"extra": "allow", "frozen": True}

    @model_validator(mode="before")
    @classmethod
    def default_path(cls, data):
        if isinstance(data, dict) and not data.get("path"):
            if data.get("username") and data.get("slug"):
                data = {**data, "path": f"/{data['username']}/{data['slug']}"}
        return data
