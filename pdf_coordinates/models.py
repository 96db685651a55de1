"""
Data models for the coordinates extractor.

This module defines the structures passed between the pipeline stages:
keyword patterns, raw text fragments read from the PDF, the template
transform, and the coordinate results written to the output.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

import pdf_coordinates.config as config


@dataclass(frozen=True)
class KeywordPattern:
    """
    A field name and the literal keyword that identifies it.

    Attributes:
        field: Name the match is recorded under in the output
        keyword: Literal substring, compared case-insensitively

    Entries loaded from a malformed configuration keep whatever values they
    had; a pattern without a usable field or keyword never matches.
    """
    field: Optional[str]
    keyword: Optional[str]

    def is_usable(self) -> bool:
        """Return True if both field and keyword are non-empty strings."""
        return (
            isinstance(self.field, str) and bool(self.field)
            and isinstance(self.keyword, str) and bool(self.keyword)
        )

    def matches(self, text: str) -> bool:
        """Check whether the keyword occurs in text, ignoring case."""
        if not self.is_usable():
            return False
        return self.keyword.lower() in text.lower()


@dataclass
class TextFragment:
    """
    One run of text on a PDF page with its raw position and size.

    Attributes:
        text: Trimmed text content
        raw_x: Left edge in PDF points
        raw_y: Vertical position in PDF points, measured from the edge named
            by the owning PageText's y_axis_origin
        raw_width: Width in PDF points
        raw_height: Height in PDF points
    """
    text: str
    raw_x: float
    raw_y: float
    raw_width: float
    raw_height: float


@dataclass
class PageText:
    """
    Text fragments of a single page together with the page size.

    Attributes:
        page_width: Page width in PDF points
        page_height: Page height in PDF points
        fragments: Non-empty fragments in reading order
        y_axis_origin: "top" or "bottom", fixed by the backend
    """
    page_width: float
    page_height: float
    fragments: List[TextFragment] = field(default_factory=list)
    y_axis_origin: str = config.Y_AXIS_TOP


@dataclass
class TemplateConfig:
    """
    Target coordinate space the raw positions are scaled into.

    Attributes:
        origin_x: Offset added to every X coordinate
        origin_y: Offset added to every Y coordinate
        width: Template width; sets the X scale factor
        height: Template height; when None, Y uses the X scale factor
    """
    origin_x: float = config.DEFAULT_TEMPLATE_X
    origin_y: float = config.DEFAULT_TEMPLATE_Y
    width: float = config.DEFAULT_TEMPLATE_WIDTH
    height: Optional[float] = config.DEFAULT_TEMPLATE_HEIGHT


@dataclass
class NormalizedFragment:
    """A text fragment with coordinates in template space."""
    text: str
    x: int
    y: int
    width: int
    height: int


@dataclass
class CoordinateResult:
    """
    Template-space position of a fragment that matched a keyword.

    Attributes:
        field: Field name of the matching keyword
        x: Left edge
        y: Vertical position
        width: Fragment width
        height: Fragment height
        match_text: Full text of the matching fragment
    """
    field: str
    x: int
    y: int
    width: int
    height: int
    match_text: str

    def to_dict(self, include_match_text: bool = True) -> Dict[str, Union[int, str]]:
        """Convert the result to the record stored under its field name."""
        record: Dict[str, Union[int, str]] = {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }
        if include_match_text:
            record["matchText"] = self.match_text
        return record
