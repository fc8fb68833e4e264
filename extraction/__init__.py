from .extractor import extract, find_conflicts
from .patterns import FIELD_PATTERNS
