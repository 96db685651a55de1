"""
Coordinate normalization.

Maps raw PDF positions into the template coordinate space with independent
X and Y scale factors. Output Y always grows downward from the template
origin, whichever convention the text source reported.
"""

import math
from typing import List, Tuple

import pdf_coordinates.config as config
from pdf_coordinates.errors import InputError
from pdf_coordinates.models import NormalizedFragment, PageText, TemplateConfig, TextFragment


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return int(math.floor(value + 0.5))


def compute_scale(template: TemplateConfig, page_width: float, page_height: float) -> Tuple[float, float]:
    """
    Compute the X and Y scale factors for a page.

    Args:
        template: Target template
        page_width: Page width in PDF points
        page_height: Page height in PDF points

    Returns:
        (scale_x, scale_y); scale_y equals scale_x when the template has no height

    Raises:
        InputError: If the page has a non-positive dimension
    """
    if page_width <= 0 or page_height <= 0:
        raise InputError(f"Invalid page size: {page_width} x {page_height}")

    scale_x = template.width / page_width
    if template.height is None:
        scale_y = scale_x
    else:
        scale_y = template.height / page_height
    return scale_x, scale_y


class CoordinateNormalizer:
    """Scales the fragments of one page into template space."""

    def __init__(self, template: TemplateConfig, page_width: float, page_height: float,
                 y_axis_origin: str = config.Y_AXIS_TOP):
        if y_axis_origin not in config.Y_AXIS_ORIGINS:
            raise ValueError(f"Unknown Y axis origin: {y_axis_origin}")

        self.template = template
        self.page_width = page_width
        self.page_height = page_height
        self.y_axis_origin = y_axis_origin
        self.scale_x, self.scale_y = compute_scale(template, page_width, page_height)

    @classmethod
    def for_page(cls, template: TemplateConfig, page_text: PageText) -> "CoordinateNormalizer":
        """Build a normalizer from a text source result."""
        return cls(template, page_text.page_width, page_text.page_height, page_text.y_axis_origin)

    def page_y(self, raw_y: float) -> float:
        """Convert a raw Y position to a distance from the page top."""
        if self.y_axis_origin == config.Y_AXIS_BOTTOM:
            return self.page_height - raw_y
        return raw_y

    def normalize(self, fragment: TextFragment) -> NormalizedFragment:
        """Scale one fragment into template space."""
        return NormalizedFragment(
            text=fragment.text.strip(),
            x=round_half_up(self.template.origin_x + fragment.raw_x * self.scale_x),
            y=round_half_up(self.template.origin_y + self.page_y(fragment.raw_y) * self.scale_y),
            width=round_half_up(fragment.raw_width * self.scale_x),
            height=round_half_up(fragment.raw_height * self.scale_y),
        )

    def normalize_all(self, fragments: List[TextFragment]) -> List[NormalizedFragment]:
        """Scale fragments, dropping any whose text is empty after trimming."""
        return [self.normalize(fragment) for fragment in fragments if fragment.text.strip()]
