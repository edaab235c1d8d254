"""Field store, key templating and diffing shared by decode and encode paths."""

from .differ import get_fields_diff
from .store import FieldStore, build_field_store, field_attr, get_field_value, to_hash
from .templates import (
    description_key,
    get_asset_id_from_key,
    render_key,
    replace_key,
)

__all__ = [
    "FieldStore",
    "build_field_store",
    "field_attr",
    "get_field_value",
    "to_hash",
    "render_key",
    "replace_key",
    "description_key",
    "get_asset_id_from_key",
    "get_fields_diff",
]
