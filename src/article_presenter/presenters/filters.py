"""Text filters for article presentation.

The presenters build descriptions and tag lists from these helpers, and the
same functions are registered as Jinja2 filters for templates that render
article data.
"""

import re

from jinja2 import BaseLoader, Environment

DESCRIPTION_LENGTH = 104
OMISSION = "..."
SENTENCE_TERMINATORS = ".?!"


def parse_tag_list(tag_list: str | None) -> list[str]:
    """Split a comma-separated tag list into tag names.

    Args:
        tag_list: Tag names separated by commas, e.g. "discuss, python"

    Returns:
        Trimmed, non-empty tag names in their original order

    Examples:
        >>> parse_tag_list("discuss, python")
        ['discuss', 'python']
        >>> parse_tag_list("")
        []
    """
    if not tag_list:
        return []
    return [tag.strip() for tag in tag_list.split(",") if tag.strip()]


def truncate_text(
    text: str,
    length: int = DESCRIPTION_LENGTH,
    separator: str | None = " ",
    omission: str = OMISSION,
) -> str:
    """Truncate text to at most ``length`` characters, omission included.

    When a separator is given the cut happens at the last separator that
    still leaves room for the omission, so words are never split.

    Args:
        text: Text to truncate
        length: Maximum length of the result
        separator: Preferred break string, or None to cut anywhere
        omission: Marker appended when text is cut

    Returns:
        The text unchanged if short enough, otherwise the cut text plus omission

    Examples:
        >>> truncate_text("Once upon a time in a world far far away", 27)
        'Once upon a time in a...'
    """
    if not text or len(text) <= length:
        return text or ""

    stop = max(length - len(omission), 0)
    if separator:
        index = text.rfind(separator, 0, stop + len(separator))
        if index != -1:
            stop = index
    return f"{text[:stop]}{omission}"


def ensure_period(text: str, terminators: str = ".") -> str:
    """Terminate a sentence with a period unless it already ends in a terminator.

    Args:
        text: Sentence to terminate
        terminators: Characters that already end the sentence

    Examples:
        >>> ensure_period("A post by Jane")
        'A post by Jane.'
        >>> ensure_period("A post by Jane Jr.")
        'A post by Jane Jr.'
        >>> ensure_period("Is this it?", SENTENCE_TERMINATORS)
        'Is this it?'
    """
    text = text.rstrip()
    if text.endswith(tuple(terminators)):
        return text
    return f"{text}."


def format_tagged_with(tags: list[str]) -> str:
    """Format a "Tagged with" clause.

    Examples:
        >>> format_tagged_with(["python", "discuss"])
        'Tagged with python, discuss.'
        >>> format_tagged_with([])
        ''
    """
    if not tags:
        return ""
    return f"Tagged with {', '.join(tags)}."


def collapse_whitespace(text: str | None) -> str:
    """Collapse newlines and whitespace runs into single spaces."""
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


# Registry of all filters for easy registration with Jinja2
FILTERS = {
    "parse_tag_list": parse_tag_list,
    "truncate_text": truncate_text,
    "ensure_period": ensure_period,
    "format_tagged_with": format_tagged_with,
    "collapse_whitespace": collapse_whitespace,
}


def create_environment(loader: BaseLoader | None = None) -> Environment:
    """Create a Jinja2 environment with the article filters registered.

    Args:
        loader: Template loader (default: none, for from_string templates)

    Returns:
        Configured Jinja2 Environment with autoescaping enabled
    """
    env = Environment(loader=loader, autoescape=True)
    for name, func in FILTERS.items():
        env.filters[name] = func
    return env
