"""Base class for front-matter parsers."""

from abc import ABC, abstractmethod

from schemas.front_matter import FrontMatter


class FrontMatterParser(ABC):
    """Abstract base class for front-matter parsers.

    Parsers split raw article markdown into its front-matter fields and a
    plain-text body. They never render markdown to HTML.
    """

    @abstractmethod
    def parse(self, body_markdown: str) -> FrontMatter:
        """Parse article markdown.

        Args:
            body_markdown: Raw markdown, possibly starting with front matter

        Returns:
            FrontMatter with description, tags, and body text
        """
        pass
