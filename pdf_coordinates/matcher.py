"""
Keyword matching against normalized text fragments.
"""

import logging
from typing import Dict, Iterable, List, Optional

from pdf_coordinates.models import CoordinateResult, KeywordPattern, NormalizedFragment


def find_pattern(text: str, patterns: Iterable[KeywordPattern]) -> Optional[KeywordPattern]:
    """Return the first pattern whose keyword occurs in text, or None."""
    for pattern in patterns:
        if pattern.matches(text):
            return pattern
    return None


def match_fragments(fragments: List[NormalizedFragment],
                    patterns: List[KeywordPattern]) -> List[CoordinateResult]:
    """
    Match fragments against keyword patterns.

    Each fragment is checked against the patterns in list order and yields at
    most one result, for the first pattern that matches. A field can collect
    results from several fragments.

    Args:
        fragments: Normalized fragments in page order
        patterns: Keyword patterns in priority order

    Returns:
        Coordinate results in fragment order
    """
    results = []
    for fragment in fragments:
        if not fragment.text.strip():
            continue

        pattern = find_pattern(fragment.text, patterns)
        if pattern is None:
            continue

        logging.debug(f"'{fragment.text}' matched keyword '{pattern.keyword}' -> {pattern.field}")
        results.append(CoordinateResult(
            field=pattern.field,
            x=fragment.x,
            y=fragment.y,
            width=fragment.width,
            height=fragment.height,
            match_text=fragment.text,
        ))

    return results


def build_coordinate_map(results: List[CoordinateResult]) -> Dict[str, CoordinateResult]:
    """
    Key results by field name.

    A later result for a field replaces the earlier one; the field keeps the
    position where it was first inserted.
    """
    coordinates: Dict[str, CoordinateResult] = {}
    for result in results:
        coordinates[result.field] = result
    return coordinates
