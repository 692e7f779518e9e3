"""Pytest fixtures for Article Presenter tests."""

import json

import pytest

from article_presenter.config import PresenterConfig
from schemas.article import Article


@pytest.fixture
def presenter_config():
    """Presenter config without a CDN, so asset URLs pass through."""
    return PresenterConfig(app_domain="dev.to")


@pytest.fixture
def sample_article_record():
    """Sample article record as returned by the content API."""
    return {
        "id": 42,
        "title": "Understanding Python Decorators",
        "body_markdown": (
            "---\n"
            "title: Understanding Python Decorators\n"
            "published: true\n"
            "description:\n"
            "tags: python, discuss\n"
            "---\n"
            "\n"
            "Decorators wrap functions."
        ),
        "canonical_url": None,
        "slug": "understanding-python-decorators-4k2",
        "username": "jane_doe",
        "user_name": "Jane Doe",
        "published": True,
        "password": "s3cr3t-preview-token",
        "cached_tag_list": "python, discuss",
        "boosted_additional_articles": False,
        "organization": None,
        "published_at": "2026-01-15T14:00:00Z",
        "search_optimized_description_replacement": None,
        "video_code": None,
        "video_source_url": None,
        "video_thumbnail_url": None,
        "video_closed_caption_track_url": None,
    }


@pytest.fixture
def make_article(sample_article_record):
    """Factory building Articles from the sample record plus overrides."""

    def _make_article(**overrides) -> Article:
        return Article.model_validate({**sample_article_record, **overrides})

    return _make_article


@pytest.fixture
def sample_article_file(tmp_path, sample_article_record):
    """Write the sample article record to a JSON file."""
    article_path = tmp_path / "article.json"
    article_path.write_text(json.dumps(sample_article_record, indent=2))
    return article_path
