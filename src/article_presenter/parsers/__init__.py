"""Front-matter parsers for article markdown."""

from .parser import FrontMatterParser
from .yaml_parser import YAMLFrontMatterParser

__all__ = ["FrontMatterParser", "YAMLFrontMatterParser"]
