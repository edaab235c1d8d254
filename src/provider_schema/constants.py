"""
Protocol constants for data provider records.

Status codes, protocol versions, field type tokens and the key patterns used
to address provider and asset fields in a flat key/value record.
"""

import re
from enum import IntEnum, StrEnum
from typing import Any


class AssetStatus(IntEnum):
    """Asset verification status levels"""

    SCAM = -2
    SUSPICIOUS = -1
    NOT_VERIFIED = 0
    DETAILED = 1
    VERIFIED = 2


class StatusTier(StrEnum):
    """Schema tier selected by asset status"""

    MINIMAL = "minimal"
    DETAILED = "detailed"


class DataProviderVersion(IntEnum):
    """Data provider protocol versions"""

    BETA = 0


class EntityKind(StrEnum):
    """Structured entities carried by a data record"""

    PROVIDER = "provider"
    ASSET = "asset"


class ResponseStatus(StrEnum):
    """Response status tokens"""

    ERROR = "error"
    OK = "ok"
    EMPTY = "empty"


class DataEntryType(StrEnum):
    """Field type tokens"""

    INTEGER = "integer"
    STRING = "string"
    BINARY = "binary"
    BOOLEAN = "boolean"


class DataProviderKey(StrEnum):
    """Fixed provider key names"""

    VERSION = "data_provider_version"
    NAME = "data_provider_name"
    LINK = "data_provider_link"
    EMAIL = "data_provider_email"
    LANG_LIST = "data_provider_lang_list"
    LOGO = "data_provider_logo"


class Placeholder(StrEnum):
    """Placeholder tokens used in key patterns"""

    ASSET_ID = "<ASSET_ID>"
    LANG = "<LANG>"


DATA_PROVIDER_DESCRIPTION_PATTERN = "data_provider_description_<LANG>"


class AssetFieldPattern(StrEnum):
    """Key patterns for asset fields"""

    VERSION = "version_<ASSET_ID>"
    STATUS = "status_<ASSET_ID>"
    LOGO = "logo_<ASSET_ID>"
    DESCRIPTION = "description_<LANG>_<ASSET_ID>"
    LINK = "link_<ASSET_ID>"
    TICKER = "ticker_<ASSET_ID>"
    EMAIL = "email_<ASSET_ID>"


MINIMAL_STATUSES = frozenset(
    {AssetStatus.SCAM, AssetStatus.SUSPICIOUS, AssetStatus.NOT_VERIFIED}
)
DETAILED_STATUSES = frozenset({AssetStatus.DETAILED, AssetStatus.VERIFIED})
STATUS_VALUES = frozenset(int(status) for status in AssetStatus)

# Base58 alphabet: no 0, O, I or l
ASSET_ID_RE = re.compile(r"[1-9A-HJ-NP-Za-km-z]{1,64}")


def is_valid_status(value: Any) -> bool:
    """Check whether a value is one of the known asset status codes."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value in STATUS_VALUES


def is_valid_asset_id(value: Any) -> bool:
    """Check whether a value looks like a Base58 asset id (1-64 chars)."""
    return isinstance(value, str) and ASSET_ID_RE.fullmatch(value) is not None


def status_tier(status: AssetStatus) -> StatusTier:
    """Map a validated status to its schema tier."""
    if status in MINIMAL_STATUSES:
        return StatusTier.MINIMAL
    return StatusTier.DETAILED
