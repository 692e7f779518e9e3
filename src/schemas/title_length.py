"""Title length buckets."""

from enum import Enum


class TitleLengthClassification(str, Enum):
    """Display bucket for an article title, from longest to shortest."""

    LONGEST = "longest"
    LONGER = "longer"
    LONG = "long"
    MEDIUM = "medium"
    SHORT = "short"
