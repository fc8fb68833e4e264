"""
Fallback listing identifiers.

When the product text carries no SKU, each platform identifier field gets a
freshly generated value of the form "<PREFIX><epoch milliseconds>", e.g.
"SKU1760781234567". Values are time-derived: two calls within the same
millisecond yield the same number, so uniqueness across rapid successive
calls is not guaranteed.
"""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(frozen=True)
class IdentifierConfig:
    sku_prefix: str = "SKU"
    product_id_prefix: str = "PID"
    style_id_prefix: str = "STYLE"


DEFAULT_IDENTIFIERS = IdentifierConfig()


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def generate_identifier(prefix: str) -> str:
    """Return `prefix` followed by the current wall-clock time in milliseconds."""
    if not prefix:
        raise ValueError("Identifier prefix must be a non-empty string")
    return f"{prefix}{_now_ms()}"
