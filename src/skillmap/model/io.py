"""
Document Loading
================
Reads the skill map document (a JSON array of item objects) from disk.
"""
import json
import logging
from typing import List

from skillmap.model.items import RawItem, parse_items

logger = logging.getLogger(__name__)


class DocumentError(Exception):
    """The document could not be read or decoded."""


def load_items(filepath: str) -> List[RawItem]:
    """
    Read and parse the document at ``filepath``.

    Raises:
        DocumentError: If the file cannot be read, is not valid JSON, is not
            an array, or an entry lacks a required key.
    """
    logger.info(f"Loading skill map from: {filepath}")
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DocumentError(f"Could not read '{filepath}': {e}") from e

    if not isinstance(data, list):
        raise DocumentError(f"Expected a JSON array in '{filepath}', got {type(data).__name__}.")

    try:
        items = parse_items(data)
    except (KeyError, ValueError, TypeError, AttributeError) as e:
        raise DocumentError(f"Invalid item in '{filepath}': {e}") from e

    logger.debug(f"Parsed {len(items)} items.")
    return items

