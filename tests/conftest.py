"""Shared fixtures for the coordinates extractor tests."""

import json
import sys
from pathlib import Path

import pymupdf
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def make_pdf(tmp_path):
    """Factory writing a PDF with text placed at baseline points.

    Usage: make_pdf([(x, y, text), ...], width=612, height=792, extra_pages=[...])
    """
    def _make(items, width=612, height=792, extra_pages=None, name="form.pdf"):
        path = tmp_path / name
        doc = pymupdf.open()
        for page_items in [items] + list(extra_pages or []):
            page = doc.new_page(width=width, height=height)
            for x, y, text in page_items:
                page.insert_text((x, y), text, fontsize=11)
        doc.save(str(path))
        doc.close()
        return path

    return _make


@pytest.fixture
def make_keywords(tmp_path):
    """Factory writing a keyword file from (field, keyword) pairs."""
    def _make(pairs, name="keywords.json"):
        path = tmp_path / name
        payload = {"keywords": [{"field": f, "keyword": k} for f, k in pairs]}
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _make
