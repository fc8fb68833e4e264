"""
Keyword-based message intent classification.

Intents are checked in a fixed priority order and the first branch whose
keywords appear in the lowercased message wins. Platforms are collected
independently by substring match; a catalog request naming no platform
targets all of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from domain.platforms import PLATFORM_ORDER

CATALOG = "catalog"
TASK = "task"
HELP = "help"
ANALYZE = "analyze"
GENERAL = "general"

INTENT_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (CATALOG, ("catalog", "listing", "product")),
    (TASK, ("task", "remind", "schedule")),
    (HELP, ("help", "how")),
    (ANALYZE, ("analyze", "check")),
)

REQUIREMENT_KEYWORDS = ("requirement", "guideline")


@dataclass(frozen=True)
class Classification:
    intent: str
    platforms: List[str] = field(default_factory=list)


def _contains_any(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(k in text for k in keywords)


def classify(message: str) -> Classification:
    lowered = (message or "").lower()

    intent = GENERAL
    for candidate, keywords in INTENT_KEYWORDS:
        if _contains_any(lowered, keywords):
            intent = candidate
            break

    platforms = [p for p in PLATFORM_ORDER if p in lowered]
    if not platforms and intent == CATALOG:
        platforms = list(PLATFORM_ORDER)

    return Classification(intent=intent, platforms=platforms)


def mentions_analysis(message: str) -> bool:
    """True when the message carries an analyze keyword, whatever intent won."""
    return _contains_any((message or "").lower(), dict(INTENT_KEYWORDS)[ANALYZE])


def asks_for_requirements(message: str) -> bool:
    return _contains_any((message or "").lower(), REQUIREMENT_KEYWORDS)
