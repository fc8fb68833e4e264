from .handler import ChatResult, build_catalog_row, find_missing_fields, handle_request, respond
from .intent import Classification, classify
