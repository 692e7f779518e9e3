"""Tests for the CLI module."""

import json

import pytest

from article_presenter.cli import main


@pytest.fixture(autouse=True)
def clear_app_domain(monkeypatch):
    monkeypatch.delenv("APP_DOMAIN", raising=False)
    monkeypatch.delenv("CLOUDINARY_CLOUD_NAME", raising=False)


class TestCLI:
    """Tests for the top-level parser."""

    def test_no_command_prints_help(self, capsys):
        result = main([])

        assert result == 0
        assert "usage: article-presenter" in capsys.readouterr().out


class TestCLIPresent:
    """Tests for the present command."""

    def test_present_single_article(self, sample_article_file, capsys):
        """present prints selected fields and derived values."""
        result = main([
            "present",
            "--article", str(sample_article_file),
            "--only", "id", "title",
            "--methods", "url", "comments_to_show_count",
            "--app-domain", "dev.to",
        ])

        assert result == 0
        output = json.loads(capsys.readouterr().out)
        assert output == {
            "id": 42,
            "title": "Understanding Python Decorators",
            "url": "https://dev.to/jane_doe/understanding-python-decorators-4k2",
            "comments_to_show_count": 75,
        }

    def test_present_article_list(self, tmp_path, sample_article_record, capsys):
        """A JSON list of records is presented as a collection."""
        records = [
            {**sample_article_record, "id": 1},
            {**sample_article_record, "id": 2, "published": False, "password": "tok"},
        ]
        article_path = tmp_path / "articles.json"
        article_path.write_text(json.dumps(records))

        result = main([
            "present",
            "--article", str(article_path),
            "--only", "id",
            "--methods", "current_state_path",
            "--app-domain", "dev.to",
        ])

        assert result == 0
        output = json.loads(capsys.readouterr().out)
        assert output == [
            {"id": 1, "current_state_path": "/jane_doe/understanding-python-decorators-4k2"},
            {"id": 2, "current_state_path": "/jane_doe/understanding-python-decorators-4k2?preview=tok"},
        ]

    def test_present_reads_app_domain_from_environment(self, sample_article_file, monkeypatch, capsys):
        monkeypatch.setenv("APP_DOMAIN", "forem.example")

        result = main([
            "present",
            "--article", str(sample_article_file),
            "--only", "id",
            "--methods", "processed_canonical_url",
        ])

        assert result == 0
        output = json.loads(capsys.readouterr().out)
        expected = "https://forem.example/jane_doe/understanding-python-decorators-4k2"
        assert output["processed_canonical_url"] == expected

    def test_present_missing_file(self, tmp_path, caplog):
        result = main([
            "present",
            "--article", str(tmp_path / "missing.json"),
            "--app-domain", "dev.to",
        ])

        assert result == 1
        assert "Article file not found" in caplog.text

    def test_present_without_app_domain(self, sample_article_file, caplog):
        result = main(["present", "--article", str(sample_article_file)])

        assert result == 1
        assert "APP_DOMAIN is not set" in caplog.text

    def test_present_unknown_method(self, sample_article_file, caplog):
        result = main([
            "present",
            "--article", str(sample_article_file),
            "--methods", "delete",
            "--app-domain", "dev.to",
        ])

        assert result == 1
        assert "Unknown method: delete" in caplog.text

    def test_present_invalid_record(self, tmp_path, caplog):
        article_path = tmp_path / "article.json"
        article_path.write_text(json.dumps({"id": 1, "title": "No slug"}))

        result = main(["present", "--article", str(article_path), "--app-domain", "dev.to"])

        assert result == 1
        assert "Failed to present article" in caplog.text

    def test_present_invalid_json(self, tmp_path, caplog):
        article_path = tmp_path / "article.json"
        article_path.write_text("{not json")

        result = main(["present", "--article", str(article_path), "--app-domain", "dev.to"])

        assert result == 1
        assert "Failed to present article" in caplog.text

    def test_present_unreadable_path(self, tmp_path, caplog):
        """A directory passed as the article file is reported, not raised."""
        result = main(["present", "--article", str(tmp_path), "--app-domain", "dev.to"])

        assert result == 1
        assert "Failed to present article" in caplog.text

    def test_present_non_utf8_file(self, tmp_path, caplog):
        article_path = tmp_path / "article.json"
        article_path.write_bytes(b"\xff\xfe\x00bad")

        result = main(["present", "--article", str(article_path), "--app-domain", "dev.to"])

        assert result == 1
        assert "Failed to present article" in caplog.text

    def test_present_undated_article(self, tmp_path, sample_article_record, caplog):
        """Asking for published_at_int on an undated article fails."""
        article_path = tmp_path / "article.json"
        article_path.write_text(json.dumps({**sample_article_record, "published_at": None}))

        result = main([
            "present",
            "--article", str(article_path),
            "--methods", "published_at_int",
            "--app-domain", "dev.to",
        ])

        assert result == 1
        assert "Article has no value for 'published_at'" in caplog.text


class TestCLIUtmParams:
    """Tests for the utm-params command."""

    def test_default_placement(self, sample_article_file, capsys):
        result = main([
            "utm-params",
            "--article", str(sample_article_file),
            "--app-domain", "dev.to",
        ])

        assert result == 0
        expected = "?utm_source=additional_box&utm_medium=internal&utm_campaign=regular&booster_org="
        assert capsys.readouterr().out.strip() == expected

    def test_custom_placement(self, tmp_path, sample_article_record, capsys):
        article_path = tmp_path / "article.json"
        record = {
            **sample_article_record,
            "boosted_additional_articles": True,
            "organization": {"slug": "acme"},
        }
        article_path.write_text(json.dumps(record))

        result = main([
            "-v",
            "utm-params",
            "--article", str(article_path),
            "--place", "homepage",
            "--app-domain", "dev.to",
        ])

        assert result == 0
        expected = "?utm_source=homepage&utm_medium=internal&utm_campaign=acme_boosted&booster_org=acme"
        assert capsys.readouterr().out.strip() == expected

    def test_missing_file(self, tmp_path, caplog):
        result = main([
            "utm-params",
            "--article", str(tmp_path / "missing.json"),
            "--app-domain", "dev.to",
        ])

        assert result == 1
        assert "Article file not found" in caplog.text
