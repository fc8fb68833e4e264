"""
Marketplace field tables.

Each supported marketplace has an ordered list of required field labels and
an ordered list of optional field labels. The registry is built once at
import time and exposed read-only.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

PLATFORM_ORDER: Tuple[str, ...] = ("amazon", "flipkart", "meesho", "myntra")


@dataclass(frozen=True)
class PlatformSpec:
    platform: str
    required: Tuple[str, ...]
    optional: Tuple[str, ...]

    @property
    def prefix(self) -> str:
        return self.platform.upper()


class UnknownPlatformError(KeyError):
    """Raised for a marketplace identifier outside the fixed registry."""
    pass


PLATFORM_SPECS: Mapping[str, PlatformSpec] = MappingProxyType(
    {
        "amazon": PlatformSpec(
            platform="amazon",
            required=(
                "Product Name", "Brand", "Category", "Price", "MRP", "SKU",
                "Description", "Key Features", "Images",
            ),
            optional=("Weight", "Dimensions", "Color", "Size", "Material", "HSN Code", "GST"),
        ),
        "flipkart": PlatformSpec(
            platform="flipkart",
            required=(
                "Product Name", "Brand", "Category", "Listing Price", "MRP", "Product ID",
                "Description", "Key Features", "Product Image",
            ),
            optional=("Package Weight", "Package Dimensions", "Color", "Size", "Material", "HSN Code"),
        ),
        "meesho": PlatformSpec(
            platform="meesho",
            required=(
                "Product Name", "Category", "Price", "Product Description", "Product Images",
                "Size", "Color",
            ),
            optional=("Brand", "Material", "Weight", "HSN Code", "Return Policy"),
        ),
        "myntra": PlatformSpec(
            platform="myntra",
            required=(
                "Product Name", "Brand", "Category", "MRP", "Selling Price", "Style ID",
                "Description", "Size", "Color", "Images",
            ),
            optional=("Material", "Care Instructions", "Occasion", "Pattern", "Fit"),
        ),
    }
)


def get_platform_spec(platform: str) -> PlatformSpec:
    try:
        return PLATFORM_SPECS[platform]
    except KeyError:
        raise UnknownPlatformError(
            f"Unknown platform {platform!r}. Expected one of: {', '.join(PLATFORM_ORDER)}"
        ) from None


def listing_key(platform: str, label: str) -> str:
    """Build the catalog column for a platform field, e.g. ('amazon', 'Key Features') -> 'AMAZON_Key_Features'."""
    label_part = re.sub(r"\s+", "_", label)
    return f"{platform.upper()}_{label_part}"
