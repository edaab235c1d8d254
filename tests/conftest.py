from typing import Any

import pytest

from provider_schema.constants import AssetStatus, DataProviderVersion
from provider_schema.models import DetailedAsset, MinimalAsset, ProviderData
from tests.utils import SCAM_ID, VERIFIED_ID, FieldBuilder


@pytest.fixture
def builder() -> FieldBuilder:
    return FieldBuilder()


@pytest.fixture
def provider_data() -> dict[str, Any]:
    """Decoded provider content"""
    return {
        "version": DataProviderVersion.BETA,
        "name": "Provider name",
        "link": "https://some.provider.com",
        "email": "provider@mail.ru",
        "description": {"en": "Some en description!"},
    }


@pytest.fixture
def provider_model(provider_data) -> ProviderData:
    return ProviderData.model_validate(provider_data)


@pytest.fixture
def provider_fields(builder) -> list[dict[str, Any]]:
    """Raw provider triples"""
    return builder.provider()


@pytest.fixture
def verified_asset() -> dict[str, Any]:
    """Decoded verified asset content"""
    return {
        "id": VERIFIED_ID,
        "version": DataProviderVersion.BETA,
        "status": AssetStatus.VERIFIED,
        "ticker": "BTC",
        "link": "https://btc.com",
        "email": "support@btc.com",
        "logo": "some-logo",
        "description": {"en": "Some BTC en description"},
    }


@pytest.fixture
def verified_model(verified_asset) -> DetailedAsset:
    return DetailedAsset.model_validate(verified_asset)


@pytest.fixture
def verified_asset_fields(builder) -> list[dict[str, Any]]:
    return builder.asset(
        VERIFIED_ID,
        AssetStatus.VERIFIED,
        logo="some-logo",
        link="https://btc.com",
        ticker="BTC",
        email="support@btc.com",
        description={"en": "Some BTC en description"},
    )


@pytest.fixture
def scam_asset() -> dict[str, Any]:
    return {"id": SCAM_ID, "version": DataProviderVersion.BETA, "status": AssetStatus.SCAM}


@pytest.fixture
def scam_model(scam_asset) -> MinimalAsset:
    return MinimalAsset.model_validate(scam_asset)


@pytest.fixture
def scam_asset_fields(builder) -> list[dict[str, Any]]:
    return builder.asset(SCAM_ID, AssetStatus.SCAM)
