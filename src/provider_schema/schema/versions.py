"""
Version and status-tier dispatch.

Decode schemas are registered per protocol version (and, for assets, per
status tier) in closed tables built at import time. Encoders are registered
per entity kind and always write the current protocol version.
"""

import logging
from collections.abc import Callable
from typing import Any

from provider_schema.constants import (
    AssetFieldPattern,
    AssetStatus,
    DataEntryType,
    DataProviderKey,
    DataProviderVersion,
    EntityKind,
    StatusTier,
    is_valid_status,
    status_tier,
)
from provider_schema.core.store import FieldStore, get_field_value
from provider_schema.core.templates import get_asset_id_from_key, render_key, replace_key
from provider_schema.domain.errors import (
    InvalidStatusError,
    ProviderSchemaError,
    UnsupportedVersionError,
)
from provider_schema.domain.results import ErrorResponse, Response, ResponseError

from .builder import Parser, add_asset_id, process_description, process_field, schema
from .encoder import (
    add_asset_version,
    add_version,
    asset_description_to_fields,
    description_to_fields,
    to_asset_field,
    to_field,
    to_fields,
)

LOGGER = logging.getLogger(__name__)

CURRENT_VERSION = DataProviderVersion.BETA

PROVIDER_VERSION_MAP: dict[DataProviderVersion, Parser] = {
    DataProviderVersion.BETA: schema(
        process_field(DataProviderKey.VERSION, "version", DataEntryType.INTEGER),
        process_field(DataProviderKey.NAME, "name", DataEntryType.STRING),
        process_field(DataProviderKey.LINK, "link", DataEntryType.STRING),
        process_field(DataProviderKey.EMAIL, "email", DataEntryType.STRING),
        process_description(),
    ),
}


def _beta_minimal_asset(asset_id: str) -> Parser:
    key = replace_key(asset_id)
    return schema(
        process_field(key(AssetFieldPattern.VERSION), "version", DataEntryType.INTEGER),
        add_asset_id(asset_id),
        process_field(key(AssetFieldPattern.STATUS), "status", DataEntryType.INTEGER),
        process_field(key(AssetFieldPattern.LINK), "link", DataEntryType.STRING, required=False),
        process_field(
            key(AssetFieldPattern.TICKER), "ticker", DataEntryType.STRING, required=False
        ),
        process_field(key(AssetFieldPattern.EMAIL), "email", DataEntryType.STRING, required=False),
        process_description(asset_id, required=False),
    )


def _beta_detailed_asset(asset_id: str) -> Parser:
    key = replace_key(asset_id)
    return schema(
        process_field(key(AssetFieldPattern.VERSION), "version", DataEntryType.INTEGER),
        add_asset_id(asset_id),
        process_field(key(AssetFieldPattern.STATUS), "status", DataEntryType.INTEGER),
        process_field(key(AssetFieldPattern.LOGO), "logo", DataEntryType.STRING),
        process_field(key(AssetFieldPattern.LINK), "link", DataEntryType.STRING),
        process_field(key(AssetFieldPattern.TICKER), "ticker", DataEntryType.STRING),
        process_field(key(AssetFieldPattern.EMAIL), "email", DataEntryType.STRING),
        process_description(asset_id),
    )


ASSET_VERSION_MAP: dict[tuple[DataProviderVersion, StatusTier], Callable[[str], Parser]] = {
    (DataProviderVersion.BETA, StatusTier.MINIMAL): _beta_minimal_asset,
    (DataProviderVersion.BETA, StatusTier.DETAILED): _beta_detailed_asset,
}

DATA_TO_FIELDS = {
    EntityKind.PROVIDER: to_fields(
        add_version(CURRENT_VERSION),
        to_field("name", DataProviderKey.NAME, DataEntryType.STRING),
        to_field("link", DataProviderKey.LINK, DataEntryType.STRING),
        to_field("email", DataProviderKey.EMAIL, DataEntryType.STRING),
        description_to_fields(),
    ),
    EntityKind.ASSET: to_fields(
        add_asset_version(CURRENT_VERSION),
        to_asset_field(
            "status", AssetFieldPattern.STATUS, DataEntryType.INTEGER, required=True
        ),
        to_asset_field("logo", AssetFieldPattern.LOGO, DataEntryType.STRING),
        to_asset_field("link", AssetFieldPattern.LINK, DataEntryType.STRING),
        to_asset_field("ticker", AssetFieldPattern.TICKER, DataEntryType.STRING),
        to_asset_field("email", AssetFieldPattern.EMAIL, DataEntryType.STRING),
        asset_description_to_fields(),
    ),
}


def as_version(value: Any) -> DataProviderVersion | None:
    """Known protocol version for a raw field value, or None."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    try:
        return DataProviderVersion(value)
    except ValueError:
        return None


def parse_provider_data(store: FieldStore) -> Response:
    """
    Decode the provider profile with the schema of its declared version

    Args:
        store: Field store of the whole record

    Returns:
        Provider response; a version failure yields one ``version`` error
    """
    try:
        raw_version = get_field_value(store, DataProviderKey.VERSION, DataEntryType.INTEGER)
        version = as_version(raw_version)
        parser = PROVIDER_VERSION_MAP.get(version) if version is not None else None
        if parser is None:
            raise UnsupportedVersionError("provider", raw_version)
    except ProviderSchemaError as e:
        LOGGER.warning("Cannot select provider schema: %s", e)
        return ErrorResponse(content={}, errors=[ResponseError(path="version", error=e)])

    LOGGER.debug("Decoding provider with schema version %s", version.name)
    return parser(store)


def discover_asset_ids(store: FieldStore) -> list[str]:
    """Asset ids with a status key, in the order their keys first appear."""
    ids: list[str] = []
    for key in store:
        asset_id = get_asset_id_from_key(key)
        if asset_id is not None:
            ids.append(asset_id)
    return ids


def parse_asset_data(store: FieldStore) -> list[Response]:
    """
    Decode every asset present in the record

    Each asset is decoded independently; a failing asset does not affect the
    others.

    Args:
        store: Field store of the whole record

    Returns:
        One response per discovered asset id, in discovery order
    """
    return [parse_asset(store, asset_id) for asset_id in discover_asset_ids(store)]


def parse_asset(store: FieldStore, asset_id: str) -> Response:
    """Decode one asset with the schema selected by its version and status tier."""
    try:
        raw_version = get_field_value(
            store, render_key(AssetFieldPattern.VERSION, asset_id=asset_id), DataEntryType.INTEGER
        )
    except ProviderSchemaError as e:
        return _asset_failure(asset_id, "version", e)

    try:
        raw_status = get_field_value(
            store, render_key(AssetFieldPattern.STATUS, asset_id=asset_id), DataEntryType.INTEGER
        )
        if not is_valid_status(raw_status):
            raise InvalidStatusError(raw_status)
    except ProviderSchemaError as e:
        return _asset_failure(asset_id, "status", e)

    tier = status_tier(AssetStatus(raw_status))
    version = as_version(raw_version)
    factory = ASSET_VERSION_MAP.get((version, tier)) if version is not None else None
    if factory is None:
        return _asset_failure(asset_id, "version", UnsupportedVersionError("asset", raw_version))

    LOGGER.debug("Decoding asset %s with %s schema version %s", asset_id, tier, version.name)
    return factory(asset_id)(store)


def _asset_failure(asset_id: str, path: str, error: ProviderSchemaError) -> ErrorResponse:
    LOGGER.warning("Cannot select schema for asset %s: %s", asset_id, error)
    return ErrorResponse(content={"id": asset_id}, errors=[ResponseError(path=path, error=error)])
