"""Front matter extracted from article markdown."""

from pydantic import BaseModel


class FrontMatter(BaseModel):
    """Result of splitting article markdown into front matter and body.

    Attributes:
        description: Description declared in the front matter
        tags: Tags declared in the front matter, in declaration order, or
            None when the front matter has no tags key
        body: Markdown following the front-matter block
        plain_body: Body reduced to plain text
    """

    description: str | None = None
    tags: list[str] | None = None
    body: str = ""
    plain_body: str = ""
