"""
Central configuration for the listing assistant.

This module defines:
- Spreadsheet limits to prevent memory issues and oversized uploads.
- Listing derivation constants (MRP markup, key feature count).
- Reporting limits used by the chat responses and catalog preview.
- Environment overrides (via dotenv) for the assistant name and log level.

All values are constants and should be imported where needed (no runtime logic here).
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


ASSISTANT_NAME = os.getenv("ASSISTANT_NAME", "JARVIS")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

MAX_FILE_SIZE_MB = 50

MAX_SHEET_ROWS = 10_000
MAX_SHEET_COLS = 500

CATALOG_SHEET_NAME = "Catalog"
CATALOG_PREVIEW_ROWS = 10

MRP_MARKUP = 1.2
KEY_FEATURE_SENTENCES = 5

ANALYSIS_REPORT_LIMIT = 10
