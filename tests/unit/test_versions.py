"""
Unit tests for version and status-tier dispatch
"""

import logging

from provider_schema.constants import (
    AssetStatus,
    DataEntryType,
    DataProviderKey,
    DataProviderVersion,
    ResponseStatus,
    StatusTier,
)
from provider_schema.core.store import build_field_store
from provider_schema.domain.errors import (
    InvalidStatusError,
    MissingFieldError,
    TypeMismatchError,
    UnsupportedVersionError,
)
from provider_schema.schema.versions import (
    ASSET_VERSION_MAP,
    PROVIDER_VERSION_MAP,
    as_version,
    discover_asset_ids,
    parse_asset_data,
    parse_provider_data,
)
from tests.utils import field


class TestDispatchTables:
    def test_provider_versions(self) -> None:
        assert set(PROVIDER_VERSION_MAP) == {DataProviderVersion.BETA}

    def test_asset_versions_cover_both_tiers(self) -> None:
        assert set(ASSET_VERSION_MAP) == {
            (DataProviderVersion.BETA, StatusTier.MINIMAL),
            (DataProviderVersion.BETA, StatusTier.DETAILED),
        }

    def test_as_version(self) -> None:
        assert as_version(0) is DataProviderVersion.BETA
        assert as_version(999) is None
        assert as_version("0") is None
        assert as_version(False) is None


class TestParseProviderData:
    def test_missing_version(self) -> None:
        result = parse_provider_data({})

        assert result.status == ResponseStatus.ERROR
        assert result.content == {}
        assert len(result.errors) == 1
        assert result.errors[0].path == "version"
        assert isinstance(result.errors[0].error, MissingFieldError)

    def test_unsupported_version(self, caplog) -> None:
        store = build_field_store([field(DataProviderKey.VERSION, "integer", 999)])

        with caplog.at_level(logging.WARNING, logger="provider_schema.schema.versions"):
            result = parse_provider_data(store)

        assert [e.path for e in result.errors] == ["version"]
        error = result.errors[0].error
        assert isinstance(error, UnsupportedVersionError)
        assert error.message == "Unsupported provider version: 999"
        assert "Unsupported provider version" in caplog.text

    def test_version_with_wrong_declared_type(self) -> None:
        store = build_field_store([field(DataProviderKey.VERSION, "string", "0")])
        result = parse_provider_data(store)

        assert result.status == ResponseStatus.ERROR
        assert isinstance(result.errors[0].error, TypeMismatchError)

    def test_version_failure_short_circuits_schema(self, provider_fields) -> None:
        fields = [f for f in provider_fields if f["key"] != DataProviderKey.VERSION]
        fields.append(field(DataProviderKey.VERSION, "integer", 7))
        result = parse_provider_data(build_field_store(fields))

        assert len(result.errors) == 1
        assert result.content == {}


class TestParseAssetData:
    def test_discovery_order(self, builder) -> None:
        fields = (
            builder.asset("B2", AssetStatus.SCAM)
            + builder.asset("A1", AssetStatus.SUSPICIOUS)
            + [field("status_<B2>", "integer", AssetStatus.NOT_VERIFIED)]
        )
        store = build_field_store(fields)

        assert discover_asset_ids(store) == ["B2", "A1"]
        results = parse_asset_data(store)
        assert [r.content["id"] for r in results] == ["B2", "A1"]
        assert results[0].content["status"] == AssetStatus.NOT_VERIFIED

    def test_no_assets(self, provider_fields) -> None:
        assert parse_asset_data(build_field_store(provider_fields)) == []

    def test_minimal_tier_schema(self, builder) -> None:
        store = build_field_store(builder.asset("A1", AssetStatus.SUSPICIOUS, ticker="SUS"))
        [result] = parse_asset_data(store)

        assert result.status == ResponseStatus.OK
        assert result.content == {
            "id": "A1",
            "version": 0,
            "status": AssetStatus.SUSPICIOUS,
            "ticker": "SUS",
        }

    def test_detailed_tier_requires_fields(self, builder) -> None:
        store = build_field_store(builder.asset("A1", AssetStatus.DETAILED, ticker="DTL"))
        [result] = parse_asset_data(store)

        assert result.status == ResponseStatus.ERROR
        assert [e.path for e in result.errors] == ["logo", "link", "email", "description"]
        assert result.content["ticker"] == "DTL"

    def test_unsupported_asset_version(self, builder) -> None:
        store = build_field_store(builder.asset("A1", AssetStatus.SCAM, version=999))
        [result] = parse_asset_data(store)

        assert result.status == ResponseStatus.ERROR
        assert result.content == {"id": "A1"}
        assert result.errors[0].path == "version"
        assert result.errors[0].error.message == "Unsupported asset version: 999"

    def test_missing_asset_version(self) -> None:
        store = build_field_store([field("status_<A1>", "integer", AssetStatus.SCAM)])
        [result] = parse_asset_data(store)

        assert result.errors[0].path == "version"
        assert isinstance(result.errors[0].error, MissingFieldError)

    def test_invalid_status(self, builder) -> None:
        store = build_field_store(builder.asset("A1", 999))
        [result] = parse_asset_data(store)

        assert result.status == ResponseStatus.ERROR
        assert result.content == {"id": "A1"}
        assert result.errors[0].path == "status"
        assert isinstance(result.errors[0].error, InvalidStatusError)
        assert "Invalid asset status" in result.errors[0].error.message

    def test_status_with_wrong_declared_type(self) -> None:
        store = build_field_store(
            [field("version_<A1>", "integer", 0), field("status_<A1>", "string", "-2")]
        )
        [result] = parse_asset_data(store)

        assert result.errors[0].path == "status"
        assert isinstance(result.errors[0].error, TypeMismatchError)

    def test_failing_asset_does_not_affect_others(self, builder) -> None:
        fields = (
            builder.asset("BAD", -50)
            + builder.asset("GOOD", AssetStatus.SCAM)
            + builder.asset("OLD", AssetStatus.SCAM, version=999)
        )
        results = parse_asset_data(build_field_store(fields))

        assert [r.status for r in results] == [
            ResponseStatus.ERROR,
            ResponseStatus.OK,
            ResponseStatus.ERROR,
        ]
        assert results[1].content == {"id": "GOOD", "version": 0, "status": -2}
