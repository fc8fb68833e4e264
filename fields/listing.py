"""
Platform listing generation.

Turns ExtractedFields into one marketplace block of a catalog row:
- build_field_mapping derives a value for every known field label
  (direct copies, MRP markup, fallback identifiers, key features, image placeholder).
- generate emits one "<PLATFORM>_<Label>" key per required label (the mapped
  value or MISSING_SENTINEL) and one per optional label that has a value.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from config.settings import KEY_FEATURE_SENTENCES, MRP_MARKUP
from domain.catalog import IMAGE_PLACEHOLDER, MISSING_SENTINEL, CatalogRow, ExtractedFields, validate_extracted
from domain.platforms import get_platform_spec, listing_key

from .identifiers import DEFAULT_IDENTIFIERS, IdentifierConfig, generate_identifier

logger = logging.getLogger(__name__)

# label -> extracted key, for labels that copy a field unchanged
DIRECT_LABELS: Dict[str, str] = {
    "Product Name": "name",
    "Brand": "brand",
    "Category": "category",
    "Price": "price",
    "Selling Price": "price",
    "Listing Price": "price",
    "Description": "description",
    "Product Description": "description",
    "Size": "size",
    "Color": "color",
    "Material": "material",
    "Weight": "weight",
    "Package Weight": "weight",
}

IMAGE_LABELS = ("Images", "Product Image", "Product Images")


def _to_number(value) -> Optional[float]:
    """Convert a numeric-like string to float. Return None if not possible."""
    if value is None:
        return None
    try:
        s = str(value).strip()
        if not s:
            return None
        return float(s)
    except ValueError:
        return None


def derive_mrp(price: Optional[str], markup: float = MRP_MARKUP) -> str:
    """MRP = price * markup with two decimals ("500" -> "600.00"); empty when price is missing or non-numeric."""
    number = _to_number(price)
    if number is None:
        return ""
    return f"{number * markup:.2f}"


def derive_key_features(description: Optional[str], limit: int = KEY_FEATURE_SENTENCES) -> str:
    """First `limit` fragments of the description split on '.', rejoined with '. '."""
    if not description:
        return ""
    return ". ".join(description.split(".")[:limit])


def build_field_mapping(
    fields: ExtractedFields,
    identifiers: IdentifierConfig = DEFAULT_IDENTIFIERS,
) -> Dict[str, str]:
    """Map every known platform field label to its value ("" when nothing can be derived)."""
    mapping: Dict[str, str] = {
        label: fields.get(key) or "" for label, key in DIRECT_LABELS.items()
    }

    mapping["MRP"] = derive_mrp(fields.get("price"))

    # Each identifier label gets its own generated value when there is no SKU
    sku = fields.get("sku")
    mapping["SKU"] = sku or generate_identifier(identifiers.sku_prefix)
    mapping["Product ID"] = sku or generate_identifier(identifiers.product_id_prefix)
    mapping["Style ID"] = sku or generate_identifier(identifiers.style_id_prefix)

    mapping["Key Features"] = derive_key_features(fields.get("description"))

    for label in IMAGE_LABELS:
        mapping[label] = IMAGE_PLACEHOLDER

    return mapping


def generate(fields: ExtractedFields, platform: str) -> CatalogRow:
    """
    Build the listing block for one marketplace.

    Args:
        fields: Output of the extractor
        platform: One of amazon, flipkart, meesho, myntra

    Returns:
        Mapping of "<PLATFORM>_<Label_With_Underscores>" -> value

    Raises:
        UnknownPlatformError: If `platform` is not in the registry
        CatalogSchemaError: If a known field holds a non-string value
    """
    spec = get_platform_spec(platform)
    mapping = build_field_mapping(validate_extracted(fields))

    listing: CatalogRow = {}
    for label in spec.required:
        listing[listing_key(platform, label)] = mapping.get(label) or MISSING_SENTINEL

    for label in spec.optional:
        value = mapping.get(label)
        if value:
            listing[listing_key(platform, label)] = value

    missing = sum(1 for v in listing.values() if v == MISSING_SENTINEL)
    logger.debug("Generated %s listing: %d fields, %d missing", platform, len(listing), missing)
    return listing
