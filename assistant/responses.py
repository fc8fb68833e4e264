"""Text templates for assistant replies."""

from __future__ import annotations

from typing import List, Sequence

from config.settings import ANALYSIS_REPORT_LIMIT, ASSISTANT_NAME
from domain.catalog import ExtractedFields
from domain.platforms import PlatformSpec, get_platform_spec

APOLOGY = "I apologize, but I encountered an error processing your request. Please try again."
NO_CATALOG = "No catalog loaded. Please upload a catalog file first."

LISTING_TIPS = (
    "Use high-quality images (minimum 1000x1000px)",
    "Write detailed descriptions with keywords",
    "Include accurate measurements and specifications",
    "Add all relevant attributes for better discoverability",
)


def listing_created(extracted: ExtractedFields, platforms: Sequence[str]) -> str:
    lines = [
        f"I've processed your product data and created listings for {', '.join(platforms)}.",
        "",
        f"Product: {extracted.get('name') or 'New Product'}",
    ]
    if extracted.get("brand"):
        lines.append(f"Brand: {extracted['brand']}")
    if extracted.get("price"):
        lines.append(f"Price: ₹{extracted['price']}")

    lines += ["", "Generated fields for:"]
    for platform in platforms:
        spec = get_platform_spec(platform)
        lines.append(f"- {spec.prefix}: {len(spec.required)} required fields filled")

    lines += [
        "",
        "The catalog has been updated. Please review and add images, then download to use for listing.",
    ]
    return "\n".join(lines)


def listing_guidance(platforms: Sequence[str]) -> str:
    targets = ", ".join(platforms) if platforms else "all platforms"
    return (
        "To create product listings, please:\n"
        "1. Upload your catalog file (Excel/CSV)\n"
        "2. Switch to the Catalog Manager tab\n"
        "3. Paste your raw product data in the text area\n"
        f"4. I'll automatically format it for {targets}\n"
        "\n"
        "Or you can tell me the product details and I'll help format them!"
    )


def analysis_report(missing: List[str], platforms: Sequence[str]) -> str:
    if missing:
        shown = "\n".join(missing[:ANALYSIS_REPORT_LIMIT])
        return (
            f"Analysis complete! Found {len(missing)} missing required fields:\n\n"
            f"{shown}\n\n"
            "Provide the missing information and I'll update your catalog."
        )
    return (
        f"Great! Your catalog looks complete for {', '.join(platforms)}. "
        "All required fields are filled. You're ready to list your products!"
    )


def _numbered(labels: Sequence[str]) -> str:
    return "\n".join(f"{i}. {label}" for i, label in enumerate(labels, start=1))


def platform_requirements(spec: PlatformSpec) -> str:
    tips = "\n".join(f"- {tip}" for tip in LISTING_TIPS)
    return (
        f"{spec.prefix} Listing Requirements:\n\n"
        f"Required Fields:\n{_numbered(spec.required)}\n\n"
        f"Optional but Recommended:\n{_numbered(spec.optional)}\n\n"
        f"Tips:\n{tips}"
    )


def capabilities() -> str:
    return (
        f"I'm {ASSISTANT_NAME}, your personal AI assistant! I can help you with:\n\n"
        "📋 Daily Tasks:\n"
        "- Task reminders and scheduling\n"
        "- Quick notes and organization\n"
        "- Daily planning\n\n"
        "🛒 E-commerce Catalog Management:\n"
        "- Format product data for Amazon, Flipkart, Meesho, Myntra\n"
        "- Auto-fill catalog sheets with product information\n"
        "- Check for missing required fields\n"
        "- Generate platform-specific listings\n\n"
        "📦 How to use:\n"
        "1. Upload your catalog Excel file\n"
        "2. Paste raw product data in the Catalog Manager\n"
        "3. I'll automatically format it for all platforms\n"
        "4. Download the updated catalog\n\n"
        "Just ask me anything or paste your product data!"
    )


TASK_HELP = (
    "Task Management:\n\n"
    "I can help you with:\n"
    '- Set reminders: "Remind me to check inventory at 3 PM"\n'
    "- Daily schedule: \"What's on my agenda today?\"\n"
    '- Quick tasks: "Add checking Amazon orders to my todo list"\n\n'
    "For catalog-related tasks, switch to the Catalog Manager tab and I'll help you "
    "process your product listings efficiently!"
)


def greeting() -> str:
    return (
        f"Hello! I'm {ASSISTANT_NAME}, ready to assist you. I can help with:\n\n"
        "- Daily task management and reminders\n"
        "- E-commerce catalog processing for Amazon, Flipkart, Meesho, and Myntra\n"
        "- Product listing preparation and data formatting\n\n"
        "What would you like help with today?"
    )


def catalog_loaded(count: int) -> str:
    return (
        f"Catalog loaded successfully! I found {count} items. You can now provide raw data "
        "and I'll help you fill in the details for Amazon, Flipkart, Meesho, and Myntra."
    )
