from .logging_config import setup_logging
from .settings import (
    ANALYSIS_REPORT_LIMIT,
    ASSISTANT_NAME,
    CATALOG_PREVIEW_ROWS,
    CATALOG_SHEET_NAME,
    KEY_FEATURE_SENTENCES,
    LOG_LEVEL,
    MAX_FILE_SIZE_MB,
    MAX_SHEET_COLS,
    MAX_SHEET_ROWS,
    MRP_MARKUP,
)

__all__ = [
    "ANALYSIS_REPORT_LIMIT",
    "ASSISTANT_NAME",
    "CATALOG_PREVIEW_ROWS",
    "CATALOG_SHEET_NAME",
    "KEY_FEATURE_SENTENCES",
    "LOG_LEVEL",
    "MAX_FILE_SIZE_MB",
    "MAX_SHEET_COLS",
    "MAX_SHEET_ROWS",
    "MRP_MARKUP",
    "setup_logging",
]
