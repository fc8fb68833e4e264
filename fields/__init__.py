from .identifiers import DEFAULT_IDENTIFIERS, IdentifierConfig, generate_identifier
from .listing import build_field_mapping, derive_key_features, derive_mrp, generate
