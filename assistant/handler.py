"""
Chat request orchestration.

Single entry point for the UI: handle_request takes the boundary payload
{"message", "catalogData", "rawData"}, routes it by intent and returns the
reply text plus, for listing creation only, a new catalog list. The caller's
catalog is never mutated. Any failure becomes the fixed apology with status 500.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from domain.catalog import MISSING_SENTINEL, CatalogRow, ExtractedFields, validate_catalog
from domain.platforms import PLATFORM_ORDER, get_platform_spec, listing_key
from extraction import extract
from fields import generate

from . import responses
from .intent import ANALYZE, CATALOG, HELP, TASK, asks_for_requirements, classify, mentions_analysis

logger = logging.getLogger(__name__)

STATUS_OK = 200
STATUS_ERROR = 500


@dataclass(frozen=True)
class ChatResult:
    response: str
    updated_catalog: Optional[List[CatalogRow]] = None
    status: int = STATUS_OK

    def to_payload(self) -> Dict[str, Any]:
        """Boundary shape: updatedCatalog is only present when the catalog changed."""
        payload: Dict[str, Any] = {"response": self.response}
        if self.updated_catalog is not None:
            payload["updatedCatalog"] = self.updated_catalog
        return payload


def build_catalog_row(extracted: ExtractedFields, platforms: Sequence[str]) -> CatalogRow:
    """Merge the raw extracted fields with one listing block per platform."""
    row: CatalogRow = dict(extracted)
    for platform in platforms:
        row.update(generate(extracted, platform))
    return row


def find_missing_fields(row: Mapping[str, Any], platforms: Sequence[str]) -> List[str]:
    """List "platform: Label" for every required field that is absent, empty or still the sentinel."""
    missing: List[str] = []
    for platform in platforms:
        for label in get_platform_spec(platform).required:
            value = row.get(listing_key(platform, label))
            if value in (None, "") or value == MISSING_SENTINEL:
                missing.append(f"{platform}: {label}")
    return missing


def _analyze(catalog: List[CatalogRow], platforms: Sequence[str]) -> ChatResult:
    if not catalog:
        return ChatResult(responses.NO_CATALOG)

    targets = list(platforms) or list(PLATFORM_ORDER)
    missing = find_missing_fields(catalog[0], targets)
    logger.info("Catalog analysis: %d missing required fields across %s", len(missing), targets)
    return ChatResult(responses.analysis_report(missing, targets))


def _requirements(platforms: Sequence[str]) -> ChatResult:
    spec = get_platform_spec(platforms[0] if platforms else PLATFORM_ORDER[0])
    return ChatResult(responses.platform_requirements(spec))


def respond(message: str, catalog: List[CatalogRow], raw_text: str) -> ChatResult:
    """Route an already validated request by intent."""
    classification = classify(message)
    intent, platforms = classification.intent, classification.platforms
    logger.info("Message classified as %r for platforms %s", intent, platforms)

    if intent == CATALOG:
        if raw_text.strip():
            extracted = extract(raw_text)
            row = build_catalog_row(extracted, platforms)
            updated = [*catalog, row]
            logger.info("Appended catalog row %d (%d fields)", len(updated), len(row))
            return ChatResult(
                responses.listing_created(extracted, platforms),
                updated_catalog=updated,
            )
        # "listing requirements" and "analyze my catalog" hit a catalog keyword first
        if asks_for_requirements(message):
            return _requirements(platforms)
        if mentions_analysis(message):
            return _analyze(catalog, platforms)
        return ChatResult(responses.listing_guidance(platforms))

    if intent == ANALYZE:
        return _analyze(catalog, platforms)

    if intent == HELP:
        if asks_for_requirements(message):
            return _requirements(platforms)
        return ChatResult(responses.capabilities())

    if intent == TASK:
        return ChatResult(responses.TASK_HELP)

    return ChatResult(responses.greeting())


def _parse_payload(payload: Any) -> tuple[str, List[CatalogRow], str]:
    if not isinstance(payload, Mapping):
        raise ValueError(f"Request payload must be an object, got {type(payload).__name__}")

    message = payload.get("message")
    if not isinstance(message, str):
        raise ValueError("Request field 'message' must be a string")

    raw_text = payload.get("rawData") or ""
    if not isinstance(raw_text, str):
        raise ValueError("Request field 'rawData' must be a string")

    catalog = validate_catalog(payload.get("catalogData"))
    return message, catalog, raw_text


def handle_request(payload: Any) -> ChatResult:
    """Validate the boundary payload and respond; never raises."""
    try:
        message, catalog, raw_text = _parse_payload(payload)
        return respond(message, catalog, raw_text)
    except Exception:
        logger.exception("Error processing chat request")
        return ChatResult(responses.APOLOGY, status=STATUS_ERROR)
