"""YAML front-matter parser.

Splits article markdown of the form

    ---
    title: Title
    description: A short summary
    tags: python, discuss
    ---

    Body text...

into its front-matter fields and a plain-text body. Markdown syntax is
stripped from the body with regular expressions; no HTML is rendered.
"""

import logging
import re

import yaml

from article_presenter.exceptions import FrontMatterError
from schemas.front_matter import FrontMatter

from .parser import FrontMatterParser

logger = logging.getLogger(__name__)

FRONT_MATTER_PATTERN = re.compile(r"\A\s*---[ \t]*\n(.*?)^---[ \t]*$\n?", re.DOTALL | re.MULTILINE)

TAG_SEPARATOR_PATTERN = re.compile(r"[,\s]+")


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF.

    Examples:
        >>> normalize_newlines("---\\r\\ntags: a\\r\\n---\\r\\n")
        '---\\ntags: a\\n---\\n'
    """
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_tags(value) -> list[str]:
    """Normalize a front-matter tags value into a list of tag names.

    Accepts a comma/space separated string or a YAML list.

    Examples:
        >>> split_tags("python, discuss")
        ['python', 'discuss']
        >>> split_tags(["python", "webdev"])
        ['python', 'webdev']
        >>> split_tags(None)
        []
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        items = [str(item).strip() for item in value if item is not None]
    else:
        items = TAG_SEPARATOR_PATTERN.split(str(value))
    return [item for item in items if item]


def markdown_to_plain_text(markdown: str) -> str:
    """Reduce markdown to plain text.

    Removes HTML tags, images, code fences, emphasis markers, heading and
    list markers, and keeps link text. Whitespace runs collapse to a single
    space.

    Examples:
        >>> markdown_to_plain_text("## Hello *world*, see [docs](https://x.io)")
        'Hello world, see docs'
    """
    if not markdown:
        return ""

    text = normalize_newlines(markdown)
    text = re.sub(r"```[^\n]*\n(.*?)```", r"\1", text, flags=re.DOTALL)
    text = re.sub(r"<!--.*?-->", "", text, flags=re.DOTALL)
    text = re.sub(r"<[^>]+>", "", text)
    text = re.sub(r"!\[[^\]]*\]\([^)]*\)", "", text)
    text = re.sub(r"\[([^\]]*)\]\([^)]*\)", r"\1", text)
    text = re.sub(r"\{%.*?%\}", "", text, flags=re.DOTALL)

    # Block-level markers
    text = re.sub(r"^[ \t]{0,3}#{1,6}[ \t]*", "", text, flags=re.MULTILINE)
    text = re.sub(r"^[ \t]*>[ \t]?", "", text, flags=re.MULTILINE)
    text = re.sub(r"^[ \t]*(?:[-*+]|\d+\.)[ \t]+", "", text, flags=re.MULTILINE)
    text = re.sub(r"^[ \t]*(?:-{3,}|\*{3,}|_{3,})[ \t]*$", "", text, flags=re.MULTILINE)

    # Inline markers
    text = re.sub(r"(\*{1,3})(\S(?:.*?\S)?)\1", r"\2", text)
    text = re.sub(r"(?<!\w)(_{1,3})(\S(?:.*?\S)?)\1(?!\w)", r"\2", text)
    text = re.sub(r"`([^`]*)`", r"\1", text)

    return re.sub(r"\s+", " ", text).strip()


class YAMLFrontMatterParser(FrontMatterParser):
    """Parse front matter with PyYAML.

    Markdown without a leading ``---`` block is treated as all body.
    """

    def parse(self, body_markdown: str) -> FrontMatter:
        """Parse article markdown.

        Args:
            body_markdown: Raw markdown, possibly starting with front matter

        Returns:
            FrontMatter with description, tags, and body text

        Raises:
            FrontMatterError: If the front-matter block is not a YAML mapping
        """
        body_markdown = normalize_newlines(body_markdown or "")
        match = FRONT_MATTER_PATTERN.match(body_markdown)
        if match is None:
            return FrontMatter(body=body_markdown, plain_body=markdown_to_plain_text(body_markdown))

        fields = self._load_fields(match.group(1))
        body = body_markdown[match.end():]

        description = fields.get("description")
        if description is not None:
            description = str(description).strip() or None

        front_matter = FrontMatter(
            description=description,
            tags=split_tags(fields["tags"]) if "tags" in fields else None,
            body=body,
            plain_body=markdown_to_plain_text(body),
        )
        logger.debug(
            f"Parsed front matter: description={front_matter.description!r}, "
            f"tags={front_matter.tags}"
        )
        return front_matter

    def _load_fields(self, block: str) -> dict:
        """Load the YAML block as a mapping."""
        try:
            fields = yaml.safe_load(block)
        except yaml.YAMLError as e:
            raise FrontMatterError(f"Invalid front matter: {e}") from e

        if fields is None:
            return {}
        if not isinstance(fields, dict):
            raise FrontMatterError(
                f"Front matter must be a mapping, got {type(fields).__name__}"
            )
        return fields
