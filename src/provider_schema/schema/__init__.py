"""Decode schemas, encoders and their version dispatch tables."""

from .builder import add_asset_id, process_description, process_field, schema
from .encoder import (
    add_asset_version,
    add_version,
    asset_description_to_fields,
    description_to_fields,
    to_asset_field,
    to_field,
    to_fields,
)
from .versions import (
    ASSET_VERSION_MAP,
    DATA_TO_FIELDS,
    PROVIDER_VERSION_MAP,
    discover_asset_ids,
    parse_asset_data,
    parse_provider_data,
)

__all__ = [
    "schema",
    "process_field",
    "add_asset_id",
    "process_description",
    "to_fields",
    "to_field",
    "add_version",
    "description_to_fields",
    "add_asset_version",
    "to_asset_field",
    "asset_description_to_fields",
    "PROVIDER_VERSION_MAP",
    "ASSET_VERSION_MAP",
    "DATA_TO_FIELDS",
    "discover_asset_ids",
    "parse_provider_data",
    "parse_asset_data",
]
