"""
PDF text extraction module.

This module reads the first page of a PDF and turns its text into
TextFragment objects with raw positions in PDF points. Two backends are
available and each reports raw Y positions in its own fixed convention:

- pymupdf: one fragment per text span, Y measured from the page top
- pdfplumber: one fragment per text line, Y measured from the page bottom

Both backends anchor Y on the top edge of the text, so after normalization
the same PDF gives the same template Y whichever backend read it.

The normalizer reads the convention from PageText.y_axis_origin.
"""

import logging
from pathlib import Path

import pdfplumber
import pymupdf

import pdf_coordinates.config as config
from pdf_coordinates.errors import ConfigurationError, InputError, PDFParseError
from pdf_coordinates.models import PageText, TextFragment


class PageTextSource:
    """Base class for backends that read text fragments from page 1 of a PDF."""

    name = ""
    y_axis_origin = config.Y_AXIS_TOP

    def get_first_page_fragments(self, pdf_path) -> PageText:
        """
        Read page 1 of a PDF.

        Args:
            pdf_path: Path to the PDF file

        Returns:
            PageText with the page size and non-empty fragments

        Raises:
            InputError: If the file does not exist
            PDFParseError: If the file cannot be parsed or has no pages
        """
        path = Path(pdf_path)
        if not path.is_file():
            raise InputError(f"PDF file not found: {pdf_path}")

        page_text = self._read_first_page(path)
        logging.info(
            f"{self.name}: {len(page_text.fragments)} fragment(s) on page 1 "
            f"({page_text.page_width:.1f} x {page_text.page_height:.1f} pt)"
        )
        return page_text

    def _read_first_page(self, path: Path) -> PageText:
        raise NotImplementedError


class PyMuPDFTextSource(PageTextSource):
    """Text spans from PyMuPDF; raw Y is the top edge of the span bbox."""

    name = config.BACKEND_PYMUPDF
    y_axis_origin = config.Y_AXIS_TOP

    def _read_first_page(self, path: Path) -> PageText:
        try:
            doc = pymupdf.open(str(path), filetype="pdf")
        except Exception as e:
            raise PDFParseError(f"Cannot parse PDF {path}: {e}") from e

        with doc:
            if doc.page_count == 0:
                raise PDFParseError(f"PDF has no pages: {path}")

            page = doc[0]
            page_text = PageText(
                page_width=float(page.rect.width),
                page_height=float(page.rect.height),
                y_axis_origin=self.y_axis_origin,
            )

            text_dict = page.get_text("dict")
            for block in text_dict.get("blocks", []):
                if block.get("type") != 0:  # Text blocks only
                    continue
                for line in block.get("lines", []):
                    for span in line.get("spans", []):
                        text = (span.get("text") or "").strip()
                        if not text:
                            continue
                        x0, y0, x1, y1 = span["bbox"]
                        page_text.fragments.append(TextFragment(
                            text=text,
                            raw_x=x0,
                            raw_y=y0,
                            raw_width=x1 - x0,
                            raw_height=y1 - y0,
                        ))

        return page_text


class PdfplumberTextSource(PageTextSource):
    """Text lines from pdfplumber; raw Y is the line's top edge in PDF user space."""

    name = config.BACKEND_PDFPLUMBER
    y_axis_origin = config.Y_AXIS_BOTTOM

    def _read_first_page(self, path: Path) -> PageText:
        try:
            pdf = pdfplumber.open(path)
        except Exception as e:
            raise PDFParseError(f"Cannot parse PDF {path}: {e}") from e

        with pdf:
            if not pdf.pages:
                raise PDFParseError(f"PDF has no pages: {path}")

            page = pdf.pages[0]
            page_height = float(page.height)
            page_text = PageText(
                page_width=float(page.width),
                page_height=page_height,
                y_axis_origin=self.y_axis_origin,
            )

            try:
                lines = page.extract_text_lines(strip=True)
            except Exception as e:
                raise PDFParseError(f"Cannot read text from {path}: {e}") from e

            for line in lines:
                text = (line.get("text") or "").strip()
                if not text:
                    continue
                page_text.fragments.append(TextFragment(
                    text=text,
                    raw_x=float(line["x0"]),
                    raw_y=page_height - float(line["top"]),
                    raw_width=float(line["x1"]) - float(line["x0"]),
                    raw_height=float(line["bottom"]) - float(line["top"]),
                ))

        return page_text


TEXT_SOURCES = {
    PyMuPDFTextSource.name: PyMuPDFTextSource,
    PdfplumberTextSource.name: PdfplumberTextSource,
}


def get_text_source(name: str = config.DEFAULT_BACKEND) -> PageTextSource:
    """
    Create the text source for a backend name.

    Raises:
        ConfigurationError: If the backend is unknown
    """
    try:
        return TEXT_SOURCES[name]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown PDF backend '{name}'. Choose from: {', '.join(config.BACKENDS)}"
        )
