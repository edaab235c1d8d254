"""
Public entry points: decode a record, encode an entity, diff two records.

Entities are passed as models (``ProviderData``, ``MinimalAsset``,
``DetailedAsset``) or as plain mappings with the same attributes. Models are
dispatched by type; mappings by shape, an asset being anything that carries
both ``id`` and ``status``.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from .constants import EntityKind
from .core.differ import get_fields_diff
from .core.store import Triple, build_field_store
from .domain.results import Response
from .models import BaseAsset, DataTxField, ProviderData, entity_to_dict
from .schema.versions import DATA_TO_FIELDS, parse_asset_data, parse_provider_data

ASSET_ONLY_FIELDS = ("id", "status")


def get_provider_data(fields: Iterable[Triple]) -> Response:
    """Decode the provider profile from a record's triples."""
    return parse_provider_data(build_field_store(fields))


def get_provider_assets(fields: Iterable[Triple]) -> list[Response]:
    """Decode every asset of a record, one response per asset in discovery order."""
    return parse_asset_data(build_field_store(fields))


def get_fields_from_data(data: ProviderData | Mapping[str, Any]) -> list[DataTxField]:
    """Encode provider data into triples."""
    return DATA_TO_FIELDS[EntityKind.PROVIDER](_attributes(data))


def get_fields_from_asset(data: BaseAsset | Mapping[str, Any]) -> list[DataTxField]:
    """Encode an asset into triples."""
    return DATA_TO_FIELDS[EntityKind.ASSET](_attributes(data))


def is_provider(data: Any) -> bool:
    """True unless ``data`` is an asset model or carries every asset-only field."""
    if isinstance(data, ProviderData):
        return True
    if isinstance(data, BaseAsset):
        return False
    if isinstance(data, Mapping):
        return not all(name in data for name in ASSET_ONLY_FIELDS)
    return not all(hasattr(data, name) for name in ASSET_ONLY_FIELDS)


def entity_kind(data: Any) -> EntityKind:
    return EntityKind.PROVIDER if is_provider(data) else EntityKind.ASSET


def get_fields(data: Any) -> list[DataTxField]:
    """
    Encode a provider or an asset into triples

    Args:
        data: Entity model or attribute mapping

    Returns:
        Triples in canonical order

    Raises:
        EmptyFieldError: If a required attribute is missing
        WrongValueTypeError: If an attribute has the wrong type
    """
    return DATA_TO_FIELDS[entity_kind(data)](_attributes(data))


def get_difference_by_data(previous: Any, next_data: Any) -> list[Triple]:
    """
    Triples to write to turn ``previous`` into ``next_data``

    Either side may be an entity or an already encoded triple sequence.
    """
    return get_fields_diff(_to_triples(previous), _to_triples(next_data))


def get_difference_by_fields(
    previous: Iterable[Triple], next_fields: Iterable[Triple]
) -> list[Triple]:
    """Triples of ``next_fields`` that are new or changed compared to ``previous``."""
    return get_fields_diff(previous, next_fields)


def _to_triples(some: Any) -> Sequence[Triple]:
    if isinstance(some, Sequence) and not isinstance(some, (str, bytes)):
        return some
    return get_fields(some)


def _attributes(data: Any) -> Mapping[str, Any]:
    if isinstance(data, BaseModel):
        return entity_to_dict(data)
    if isinstance(data, Mapping):
        return data
    return vars(data)
