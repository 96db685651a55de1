"""
Validation of user-supplied settings.
"""

import math
from typing import List

from pdf_coordinates.errors import ConfigurationError
from pdf_coordinates.models import KeywordPattern, TemplateConfig


def validate_template(template: TemplateConfig) -> bool:
    """
    Validate that a template can scale page coordinates.

    Args:
        template: Template settings

    Returns:
        True if validation passes

    Raises:
        ConfigurationError: If a value is NaN or infinite, or width or height
            is not positive
    """
    values = {
        "x": template.origin_x,
        "y": template.origin_y,
        "width": template.width,
    }
    if template.height is not None:
        values["height"] = template.height

    for name, value in values.items():
        if not math.isfinite(value):
            raise ConfigurationError(f"Template {name} must be a finite number: {value}")

    if template.width <= 0:
        raise ConfigurationError(f"Template width must be positive: {template.width}")

    if template.height is not None and template.height <= 0:
        raise ConfigurationError(f"Template height must be positive: {template.height}")

    return True


def count_usable_patterns(patterns: List[KeywordPattern]) -> int:
    """Count patterns that can match anything."""
    return sum(1 for pattern in patterns if pattern.is_usable())
