"""
Keyword configuration loading.

A keyword file is a JSON object with a `keywords` list of
{"field": ..., "keyword": ...} records. List order is match priority.
"""

import json
import logging
import os
from typing import List

import pdf_coordinates.config as config
from pdf_coordinates.errors import ConfigurationError
from pdf_coordinates.models import KeywordPattern


def load_keywords(file_path: str) -> List[KeywordPattern]:
    """
    Load keyword patterns from a JSON configuration file.

    Args:
        file_path: Path to the keyword file

    Returns:
        Keyword patterns in file order

    Raises:
        ConfigurationError: If the file is missing, is not valid JSON, or has
            no `keywords` list
    """
    if not os.path.isfile(file_path):
        raise ConfigurationError(f"Keyword file not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {file_path}: {e}")
    except OSError as e:
        raise ConfigurationError(f"Failed to read {file_path}: {e}")

    if not isinstance(data, dict) or "keywords" not in data:
        raise ConfigurationError(f"Missing 'keywords' list in {file_path}")

    entries = data["keywords"]
    if not isinstance(entries, list):
        raise ConfigurationError(f"'keywords' must be a list in {file_path}")

    patterns = []
    for entry in entries:
        if isinstance(entry, dict):
            pattern = KeywordPattern(field=entry.get("field"), keyword=entry.get("keyword"))
        else:
            pattern = KeywordPattern(field=None, keyword=None)
        if not pattern.is_usable():
            logging.debug(f"Keyword entry will never match: {entry!r}")
        patterns.append(pattern)

    logging.info(f"Loaded {len(patterns)} keyword(s) from {file_path}")
    return patterns


def create_sample_keywords(file_path: str) -> None:
    """
    Write the sample keyword configuration.

    Args:
        file_path: Destination path; parent directories are created

    Raises:
        ConfigurationError: If the file cannot be written
    """
    try:
        parent = os.path.dirname(file_path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(config.SAMPLE_KEYWORDS, f, indent=config.JSON_INDENT, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        raise ConfigurationError(f"Failed to write {file_path}: {e}")

    logging.info(f"Sample keyword file written: {file_path}")
