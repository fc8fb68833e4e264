"""
Rule-based extraction of product fields from free-form text.

Every pattern in FIELD_PATTERNS scans the whole input independently; the
first match of each pattern wins. When a label occurs more than once with
different values, the extra values are reported by `find_conflicts` and
logged, but never used to override the first match.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from domain.catalog import ExtractedFields

from .patterns import FIELD_PATTERNS

logger = logging.getLogger(__name__)


def extract(text: str) -> ExtractedFields:
    """Apply every field pattern to `text` and return the trimmed values that matched."""
    extracted = ExtractedFields()
    if not text:
        return extracted

    for key, pattern in FIELD_PATTERNS.items():
        match = pattern.search(text)
        if match:
            extracted[key] = match.group(1).strip()

    conflicts = find_conflicts(text)
    for key, values in conflicts.items():
        logger.warning("Field %r matched %d different values, using the first: %s", key, len(values), values)

    return extracted


def find_conflicts(text: str) -> Dict[str, List[str]]:
    """
    Report fields whose pattern matches more than once with different values.

    Returns:
        Mapping of field key -> distinct trimmed values in order of appearance
        (only for keys with two or more distinct values).
    """
    conflicts: Dict[str, List[str]] = {}
    if not text:
        return conflicts

    for key, pattern in FIELD_PATTERNS.items():
        values: List[str] = []
        for match in pattern.finditer(text):
            value = match.group(1).strip()
            if value not in values:
                values.append(value)
        if len(values) > 1:
            conflicts[key] = values

    return conflicts
