"""
Label patterns for free-form product text.

One case-insensitive pattern per semantic key. Each pattern looks for one of
its trigger labels followed by whitespace and/or a colon, and captures the
value that follows. Most values run to the end of the line; description runs
to the next blank line (or end of input) and price captures only the leading
number after an optional currency marker.
"""

from __future__ import annotations

import re
from typing import Dict, Pattern

# label, then separator; the separator may span a line break ("Brand:\nAcme")
_SEP = r"[\s:]+"
_REST_OF_LINE = r"(.+?)(?:\n|$)"

FIELD_PATTERNS: Dict[str, Pattern[str]] = {
    "name": re.compile(r"(?:product name|name|title)" + _SEP + _REST_OF_LINE, re.IGNORECASE),
    "brand": re.compile(r"(?:brand|manufacturer)" + _SEP + _REST_OF_LINE, re.IGNORECASE),
    "price": re.compile(
        r"(?:price|selling price|mrp)" + _SEP + r"(?:rs\.?|inr|₹)?\s*(\d+(?:\.\d+)?)",
        re.IGNORECASE,
    ),
    "category": re.compile(r"(?:category|type)" + _SEP + _REST_OF_LINE, re.IGNORECASE),
    "description": re.compile(
        r"(?:description|details)" + _SEP + r"(.+?)(?:\r?\n[ \t\r]*\n|\Z)",
        re.IGNORECASE | re.DOTALL,
    ),
    "size": re.compile(r"(?:size)" + _SEP + _REST_OF_LINE, re.IGNORECASE),
    "color": re.compile(r"(?:color|colour)" + _SEP + _REST_OF_LINE, re.IGNORECASE),
    "material": re.compile(r"(?:material|fabric)" + _SEP + _REST_OF_LINE, re.IGNORECASE),
    "weight": re.compile(r"(?:weight)" + _SEP + _REST_OF_LINE, re.IGNORECASE),
    "sku": re.compile(r"(?:sku|product id|item code)" + _SEP + _REST_OF_LINE, re.IGNORECASE),
}
