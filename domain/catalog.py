"""
Catalog schema definitions.

ExtractedFields is the normalized output of the text extractor: a fixed set
of semantic keys, each present only when its pattern matched.

CatalogRow is one product record in the catalog: the raw extracted fields
merged with zero or more platform blocks ("AMAZON_Brand", "MYNTRA_Style_ID", ...).
Uploaded spreadsheet rows share the same flat shape, so every row that
crosses the request boundary is validated into string keys and scalar values.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, TypedDict, Union

MISSING_SENTINEL = "[REQUIRED]"
IMAGE_PLACEHOLDER = "[Image URLs]"

FIELD_KEYS = (
    "name",
    "brand",
    "price",
    "category",
    "description",
    "size",
    "color",
    "material",
    "weight",
    "sku",
)

CatalogValue = Union[str, int, float]
CatalogRow = Dict[str, CatalogValue]


class ExtractedFields(TypedDict, total=False):
    name: str
    brand: str
    price: str
    category: str
    description: str
    size: str
    color: str
    material: str
    weight: str
    sku: str


class CatalogSchemaError(ValueError):
    """Raised when a catalog or one of its rows does not have the flat key -> scalar shape."""
    pass


def is_catalog_value(value: Any) -> bool:
    # bool is an int subclass but never a spreadsheet scalar here
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def validate_row(row: Any, index: int = 0) -> CatalogRow:
    """Return a shallow copy of `row` after checking keys are strings and values are scalars."""
    if not isinstance(row, Mapping):
        raise CatalogSchemaError(f"Catalog row {index} must be a mapping, got {type(row).__name__}")

    validated: CatalogRow = {}
    for key, value in row.items():
        if not isinstance(key, str):
            raise CatalogSchemaError(f"Catalog row {index} has a non-string key: {key!r}")
        if not is_catalog_value(value):
            raise CatalogSchemaError(
                f"Catalog row {index} field {key!r} must be a string or number, got {type(value).__name__}"
            )
        validated[key] = value
    return validated


def validate_catalog(rows: Any) -> List[CatalogRow]:
    """Validate a whole catalog. None is treated as an empty catalog."""
    if rows is None:
        return []
    if not isinstance(rows, (list, tuple)):
        raise CatalogSchemaError(f"Catalog must be a list of rows, got {type(rows).__name__}")
    return [validate_row(row, idx) for idx, row in enumerate(rows)]


def validate_extracted(fields: Any) -> ExtractedFields:
    """Keep only known semantic keys; every kept value must be a string."""
    if not isinstance(fields, Mapping):
        raise CatalogSchemaError(f"Extracted fields must be a mapping, got {type(fields).__name__}")

    validated = ExtractedFields()
    for key in FIELD_KEYS:
        if key not in fields:
            continue
        value = fields[key]
        if not isinstance(value, str):
            raise CatalogSchemaError(f"Extracted field {key!r} must be a string, got {type(value).__name__}")
        validated[key] = value
    return validated
