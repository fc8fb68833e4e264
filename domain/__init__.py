from .catalog import (
    FIELD_KEYS,
    IMAGE_PLACEHOLDER,
    MISSING_SENTINEL,
    CatalogRow,
    CatalogSchemaError,
    CatalogValue,
    ExtractedFields,
    validate_catalog,
    validate_extracted,
    validate_row,
)
from .platforms import (
    PLATFORM_ORDER,
    PLATFORM_SPECS,
    PlatformSpec,
    UnknownPlatformError,
    get_platform_spec,
    listing_key,
)
