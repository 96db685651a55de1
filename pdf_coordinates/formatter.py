"""
Output encodings for coordinate results.

JSON:

    {"coordinates": {"date": {"x": 34, "y": 240, "width": 27, "height": 4,
                              "matchText": "Date: 01/02/2024"}}}

Array literal (PHP short-array syntax):

    [
        'date' => ['x' => 34, 'y' => 240, 'width' => 27, 'height' => 4],
    ]
"""

import json
import os
from typing import Dict

import pdf_coordinates.config as config
from pdf_coordinates.errors import OutputError
from pdf_coordinates.models import CoordinateResult


def to_payload(coordinates: Dict[str, CoordinateResult], include_match_text: bool = True) -> Dict:
    """Build the {"coordinates": {...}} envelope."""
    return {
        "coordinates": {
            field: result.to_dict(include_match_text=include_match_text)
            for field, result in coordinates.items()
        }
    }


def format_json(coordinates: Dict[str, CoordinateResult]) -> str:
    """Encode results as pretty-printed JSON, including matchText."""
    return json.dumps(to_payload(coordinates), indent=config.JSON_INDENT, ensure_ascii=False)


def _quote(value: str) -> str:
    """Single-quote a string for an array literal."""
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _single_line_comment(text: str) -> str:
    return " ".join(text.split())


def format_array(coordinates: Dict[str, CoordinateResult], with_comments: bool = False) -> str:
    """
    Encode results as an associative-array literal.

    Args:
        coordinates: Field to result mapping
        with_comments: Append the matched text as a `//` comment after each
            entry. Used for console output only; files are written without it.

    Returns:
        Array literal text
    """
    lines = ["["]
    for field, result in coordinates.items():
        record = result.to_dict(include_match_text=False)
        values = ", ".join(f"{_quote(key)} => {value}" for key, value in record.items())
        line = f"{config.ARRAY_INDENT}{_quote(field)} => [{values}],"
        if with_comments:
            line += f" // {_single_line_comment(result.match_text)}"
        lines.append(line)
    lines.append("]")
    return "\n".join(lines)


def format_results(coordinates: Dict[str, CoordinateResult], output_format: str,
                   with_comments: bool = False) -> str:
    """
    Encode results in the named format.

    Raises:
        ValueError: If the format is unknown
    """
    if output_format == config.FORMAT_JSON:
        return format_json(coordinates)
    if output_format == config.FORMAT_ARRAY:
        return format_array(coordinates, with_comments=with_comments)
    raise ValueError(f"Unknown output format: {output_format}")


def write_output(content: str, output_path: str) -> None:
    """
    Write encoded results to a file.

    Args:
        content: Encoded results
        output_path: Destination path; parent directories are created

    Raises:
        OutputError: If the file cannot be written
    """
    try:
        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
            f.write("\n")
    except OSError as e:
        raise OutputError(f"Failed to write {output_path}: {e}")
