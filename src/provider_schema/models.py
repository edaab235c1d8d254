"""
Pydantic models for data provider records.

A record travels as a list of ``DataTxField`` triples; ``ProviderData`` and the
two asset shapes are the structured views decoded from (and encoded into)
those triples.
"""

from typing import Any, Dict, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

from .constants import (
    DETAILED_STATUSES,
    MINIMAL_STATUSES,
    AssetStatus,
    DataEntryType,
    DataProviderVersion,
    StatusTier,
    is_valid_status,
    status_tier,
)


def value_matches_type(value: Any, entry_type: str) -> bool:
    """Check a runtime value against a declared field type (bool is not an integer)."""
    if entry_type == DataEntryType.INTEGER:
        return isinstance(value, int) and not isinstance(value, bool)
    if entry_type in (DataEntryType.STRING, DataEntryType.BINARY):
        return isinstance(value, str)
    if entry_type == DataEntryType.BOOLEAN:
        return isinstance(value, bool)
    return False


class DataTxField(BaseModel):
    """Single key/type/value triple of a data record"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str
    type: DataEntryType
    value: Union[StrictBool, StrictInt, StrictStr]

    @model_validator(mode="after")
    def _check_value_type(self) -> "DataTxField":
        if not value_matches_type(self.value, self.type):
            raise ValueError(
                f"value {self.value!r} does not match field type '{self.type.value}'"
            )
        return self


class ProviderData(BaseModel):
    """Data provider profile"""

    model_config = ConfigDict(extra="forbid")

    version: DataProviderVersion
    name: str
    link: str
    email: str
    description: Optional[Dict[str, str]] = None  # lang code: text

    @field_validator("description")
    @classmethod
    def _empty_description_is_none(
        cls, value: Optional[Dict[str, str]]
    ) -> Optional[Dict[str, str]]:
        # No languages encode the same as no description
        return value or None


class BaseAsset(BaseModel):
    """Fields shared by every asset shape"""

    model_config = ConfigDict(extra="forbid")

    id: str
    version: DataProviderVersion
    status: AssetStatus

    @property
    def tier(self) -> StatusTier:
        return status_tier(self.status)


class MinimalAsset(BaseAsset):
    """Scam, suspicious or not verified asset"""

    link: Optional[str] = None
    ticker: Optional[str] = None
    email: Optional[str] = None
    description: Optional[Dict[str, str]] = None

    @field_validator("description")
    @classmethod
    def _empty_description_is_none(
        cls, value: Optional[Dict[str, str]]
    ) -> Optional[Dict[str, str]]:
        return value or None

    @model_validator(mode="after")
    def _check_tier(self) -> "MinimalAsset":
        if self.status not in MINIMAL_STATUSES:
            raise ValueError(f"status {self.status.name} requires a detailed asset")
        return self


class DetailedAsset(BaseAsset):
    """Detailed or verified asset"""

    logo: str
    link: str
    ticker: str
    email: str
    description: Dict[str, str] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_tier(self) -> "DetailedAsset":
        if self.status not in DETAILED_STATUSES:
            raise ValueError(f"status {self.status.name} requires a minimal asset")
        return self


ProviderAsset = Union[MinimalAsset, DetailedAsset]
Entity = Union[ProviderData, MinimalAsset, DetailedAsset]


def parse_asset(data: Dict[str, Any]) -> ProviderAsset:
    """
    Build the asset model matching the status tier of ``data``

    Args:
        data: Asset attributes, e.g. the content of a decoded asset response

    Returns:
        MinimalAsset or DetailedAsset

    Raises:
        pydantic.ValidationError: If the attributes do not fit the selected model
    """
    status = data.get("status")
    if is_valid_status(status) and status in DETAILED_STATUSES:
        return DetailedAsset.model_validate(data)
    return MinimalAsset.model_validate(data)


def entity_to_dict(entity: BaseModel) -> Dict[str, Any]:
    """Dump a model to the plain mapping the encoder reads."""
    return entity.model_dump(mode="json", exclude_none=True)
