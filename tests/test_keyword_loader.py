"""Tests for keyword configuration loading"""

import json

import pytest

import pdf_coordinates.config as config
from pdf_coordinates.errors import ConfigurationError
from pdf_coordinates.keyword_loader import create_sample_keywords, load_keywords
from pdf_coordinates.models import KeywordPattern


class TestLoadKeywords:
    """Test cases for load_keywords."""

    def test_loads_in_order(self, make_keywords):
        path = make_keywords([("date_label", "Date"), ("total", "Total")])

        patterns = load_keywords(str(path))

        assert patterns == [KeywordPattern("date_label", "Date"), KeywordPattern("total", "Total")]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_keywords(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "keywords.json"
        path.write_text("{keywords: [", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_keywords(str(path))

    @pytest.mark.parametrize("payload", [
        {},
        {"fields": []},
        [],
        "keywords",
    ])
    def test_missing_keywords_list(self, tmp_path, payload):
        path = tmp_path / "keywords.json"
        path.write_text(json.dumps(payload), encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_keywords(str(path))

    def test_keywords_not_a_list(self, tmp_path):
        path = tmp_path / "keywords.json"
        path.write_text(json.dumps({"keywords": {"field": "a", "keyword": "b"}}), encoding="utf-8")

        with pytest.raises(ConfigurationError, match="must be a list"):
            load_keywords(str(path))

    def test_malformed_entries_are_kept_unusable(self, tmp_path):
        """Entries are not validated; malformed ones load but never match."""
        path = tmp_path / "keywords.json"
        path.write_text(json.dumps({"keywords": [
            {"field": "date", "keyword": "Date"},
            {"field": "no_keyword"},
            "text entry",
            {"field": "regex", "regex": "^Total", "description": "ignored"},
        ]}), encoding="utf-8")

        patterns = load_keywords(str(path))

        assert len(patterns) == 4
        assert [p.is_usable() for p in patterns] == [True, False, False, False]
        assert not any(p.matches("Total") for p in patterns)

    def test_empty_list(self, tmp_path):
        path = tmp_path / "keywords.json"
        path.write_text(json.dumps({"keywords": []}), encoding="utf-8")

        assert load_keywords(str(path)) == []


class TestCreateSampleKeywords:
    """Test cases for create_sample_keywords."""

    def test_writes_three_entries(self, tmp_path):
        path = tmp_path / "nested" / "keywords.json"

        create_sample_keywords(str(path))

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data == config.SAMPLE_KEYWORDS
        assert len(data["keywords"]) == 3

    def test_sample_loads(self, tmp_path):
        path = tmp_path / "keywords.json"
        create_sample_keywords(str(path))

        patterns = load_keywords(str(path))

        assert [p.field for p in patterns] == ["date", "name", "signature"]
        assert all(p.is_usable() for p in patterns)

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(ConfigurationError):
            create_sample_keywords(str(tmp_path))
