"""Video metadata projection."""

from pydantic import BaseModel


class VideoMetadata(BaseModel):
    """Video fields of an article, with the thumbnail routed through the CDN."""

    id: int | str
    video_code: str | None = None
    video_source_url: str | None = None
    video_thumbnail_url: str | None = None
    video_closed_caption_track_url: str | None = None
