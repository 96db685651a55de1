"""Tests for PDF text sources"""

import pytest

from pdf_coordinates.errors import ConfigurationError, InputError, PDFParseError
from pdf_coordinates.models import TemplateConfig
from pdf_coordinates.normalizer import CoordinateNormalizer
from pdf_coordinates.pdf_extractor import (
    PdfplumberTextSource,
    PyMuPDFTextSource,
    get_text_source,
)


BACKENDS = [PyMuPDFTextSource, PdfplumberTextSource]


def fragment_by_text(page_text, text):
    matches = [f for f in page_text.fragments if f.text == text]
    assert matches, f"No fragment '{text}' in {[f.text for f in page_text.fragments]}"
    return matches[0]


class TestTextSources:
    """Behavior shared by every backend."""

    @pytest.mark.parametrize("source_class", BACKENDS)
    def test_page_size(self, make_pdf, source_class):
        pdf = make_pdf([(100, 700, "Date: 01/02/2024")])

        page_text = source_class().get_first_page_fragments(str(pdf))

        assert page_text.page_width == pytest.approx(612)
        assert page_text.page_height == pytest.approx(792)
        assert page_text.y_axis_origin == source_class.y_axis_origin

    @pytest.mark.parametrize("source_class", BACKENDS)
    def test_fragment_text_and_x(self, make_pdf, source_class):
        pdf = make_pdf([(100, 700, "Date: 01/02/2024"), (100, 100, "Signature")])

        page_text = source_class().get_first_page_fragments(str(pdf))
        date = fragment_by_text(page_text, "Date: 01/02/2024")

        assert date.raw_x == pytest.approx(100, abs=1)
        assert date.raw_width > 0
        assert date.raw_height > 0
        fragment_by_text(page_text, "Signature")

    @pytest.mark.parametrize("source_class", BACKENDS)
    def test_first_page_only(self, make_pdf, source_class):
        pdf = make_pdf([(72, 72, "First page")], extra_pages=[[(72, 72, "Second page")]])

        page_text = source_class().get_first_page_fragments(str(pdf))
        texts = [f.text for f in page_text.fragments]

        assert "First page" in texts
        assert "Second page" not in texts

    @pytest.mark.parametrize("source_class", BACKENDS)
    def test_no_empty_fragments(self, make_pdf, source_class):
        pdf = make_pdf([(72, 72, "   "), (72, 200, "Total")])

        page_text = source_class().get_first_page_fragments(str(pdf))

        assert [f.text for f in page_text.fragments] == ["Total"]

    @pytest.mark.parametrize("source_class", BACKENDS)
    def test_missing_file(self, tmp_path, source_class):
        with pytest.raises(InputError, match="not found"):
            source_class().get_first_page_fragments(str(tmp_path / "missing.pdf"))

    @pytest.mark.parametrize("source_class", BACKENDS)
    def test_not_a_pdf(self, tmp_path, source_class):
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"this is not a pdf document")

        with pytest.raises(PDFParseError):
            source_class().get_first_page_fragments(str(path))


class TestAxisConventions:
    """Each backend reports raw Y in its own fixed convention."""

    def test_pymupdf_measures_from_top(self, make_pdf):
        pdf = make_pdf([(100, 700, "Date: 01/02/2024")])

        date = fragment_by_text(PyMuPDFTextSource().get_first_page_fragments(str(pdf)), "Date: 01/02/2024")

        # Top edge of text whose baseline is 700 pt below the page top
        assert 680 < date.raw_y < 700

    def test_pdfplumber_measures_from_bottom(self, make_pdf):
        pdf = make_pdf([(100, 700, "Date: 01/02/2024")])

        date = fragment_by_text(PdfplumberTextSource().get_first_page_fragments(str(pdf)), "Date: 01/02/2024")

        # Top edge, 792 - ~691 pt above the page bottom
        assert 92 < date.raw_y < 112

    def test_normalized_y_agrees_across_backends(self, make_pdf):
        """After normalization both backends anchor the text on its top edge."""
        pdf = make_pdf([(100, 700, "Date: 01/02/2024")])
        template = TemplateConfig(width=210)

        normalized = {}
        for source_class in BACKENDS:
            page_text = source_class().get_first_page_fragments(str(pdf))
            normalizer = CoordinateNormalizer.for_page(template, page_text)
            date = [f for f in normalizer.normalize_all(page_text.fragments) if f.text.startswith("Date")][0]
            normalized[source_class.name] = date

        pymupdf_date = normalized["pymupdf"]
        pdfplumber_date = normalized["pdfplumber"]
        assert pymupdf_date.x == pdfplumber_date.x == 34
        # Same anchor; only the fonts' ascent metrics differ between libraries
        assert abs(pymupdf_date.y - pdfplumber_date.y) <= 1
        assert 234 <= pymupdf_date.y <= 238

    def test_template_y_is_top_edge_for_both_backends(self, make_pdf):
        """At scale 1 the template Y sits just above the baseline for both backends."""
        pdf = make_pdf([(100, 700, "Date: 01/02/2024")])
        template = TemplateConfig(width=612)

        for source_class in BACKENDS:
            page_text = source_class().get_first_page_fragments(str(pdf))
            normalizer = CoordinateNormalizer.for_page(template, page_text)
            date = fragment_by_text(page_text, "Date: 01/02/2024")
            y = normalizer.normalize(date).y

            assert 685 <= y < 700, f"{source_class.name}: {y}"


class TestGetTextSource:

    def test_default_backend(self):
        assert isinstance(get_text_source(), PyMuPDFTextSource)

    def test_by_name(self):
        assert isinstance(get_text_source("pdfplumber"), PdfplumberTextSource)

    def test_unknown_backend(self):
        with pytest.raises(ConfigurationError):
            get_text_source("pdfjs")
