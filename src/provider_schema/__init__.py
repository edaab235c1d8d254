"""
provider-schema

Decode, encode and diff data provider records stored as flat key/value
triples.
"""

__version__ = "0.1.0"

from .api import (
    get_difference_by_data,
    get_difference_by_fields,
    get_fields,
    get_fields_from_asset,
    get_fields_from_data,
    get_provider_assets,
    get_provider_data,
    is_provider,
)
from .constants import (
    DATA_PROVIDER_DESCRIPTION_PATTERN,
    AssetFieldPattern,
    AssetStatus,
    DataEntryType,
    DataProviderKey,
    DataProviderVersion,
    Placeholder,
    ResponseStatus,
    StatusTier,
    is_valid_asset_id,
    is_valid_status,
)
from .domain import (
    EmptyFieldError,
    ErrorResponse,
    InvalidStatusError,
    MissingFieldError,
    ProviderSchemaError,
    Response,
    ResponseError,
    SuccessResponse,
    TypeMismatchError,
    UnsupportedVersionError,
    WrongValueTypeError,
)
from .models import (
    DataTxField,
    DetailedAsset,
    MinimalAsset,
    ProviderAsset,
    ProviderData,
    parse_asset,
)

__all__ = [
    "__version__",
    "get_provider_data",
    "get_provider_assets",
    "get_fields",
    "get_fields_from_data",
    "get_fields_from_asset",
    "get_difference_by_data",
    "get_difference_by_fields",
    "is_provider",
    "AssetStatus",
    "StatusTier",
    "DataProviderVersion",
    "ResponseStatus",
    "DataEntryType",
    "DataProviderKey",
    "AssetFieldPattern",
    "Placeholder",
    "DATA_PROVIDER_DESCRIPTION_PATTERN",
    "is_valid_status",
    "is_valid_asset_id",
    "DataTxField",
    "ProviderData",
    "MinimalAsset",
    "DetailedAsset",
    "ProviderAsset",
    "parse_asset",
    "ProviderSchemaError",
    "MissingFieldError",
    "TypeMismatchError",
    "EmptyFieldError",
    "WrongValueTypeError",
    "UnsupportedVersionError",
    "InvalidStatusError",
    "ResponseError",
    "SuccessResponse",
    "ErrorResponse",
    "Response",
]
