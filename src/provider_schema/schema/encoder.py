"""
Encoder - turns entity attributes into ordered data record triples.

Producers read from a plain attribute mapping (see ``models.entity_to_dict``)
and return one triple or a list of triples. ``to_fields`` concatenates their
output in declaration order, which is the canonical field order.
"""

from collections.abc import Callable, Mapping
from typing import Any

from provider_schema.constants import (
    AssetFieldPattern,
    DataEntryType,
    DataProviderKey,
)
from provider_schema.core.templates import description_key, render_key
from provider_schema.domain.errors import EmptyFieldError, WrongValueTypeError
from provider_schema.models import DataTxField, value_matches_type

Data = Mapping[str, Any]
Produced = DataTxField | list[DataTxField]
Producer = Callable[[Data], Produced]

_EXPECTED_KIND = {
    DataEntryType.INTEGER: "number",
    DataEntryType.STRING: "string",
    DataEntryType.BINARY: "string",
    DataEntryType.BOOLEAN: "boolean",
}


def to_fields(*producers: Producer) -> Callable[[Data], list[DataTxField]]:
    """
    Build an encoder from field producers

    Args:
        *producers: Functions returning a triple or a list of triples

    Returns:
        Function turning an attribute mapping into a flat list of triples
    """

    def encode(data: Data) -> list[DataTxField]:
        fields: list[DataTxField] = []
        for producer in producers:
            result = producer(data)
            if isinstance(result, list):
                fields.extend(result)
            else:
                fields.append(result)
        return fields

    return encode


def check_type(value: Any, entry_type: DataEntryType) -> None:
    """Raise WrongValueTypeError unless ``value`` fits ``entry_type``."""
    if not value_matches_type(value, entry_type):
        raise WrongValueTypeError(type(value).__name__, _EXPECTED_KIND[entry_type])


def make_field(key: str, entry_type: DataEntryType, value: Any) -> DataTxField:
    """Build a triple from an already type-checked value."""
    if entry_type == DataEntryType.INTEGER:
        value = int(value)
    elif entry_type in (DataEntryType.STRING, DataEntryType.BINARY):
        value = str(value)
    return DataTxField(key=str(key), type=entry_type, value=value)


def to_field(name: str, key: str, entry_type: DataEntryType) -> Producer:
    """Required provider attribute -> one triple under a fixed key."""

    def produce(data: Data) -> DataTxField:
        value = data.get(name)
        if value is None:
            raise EmptyFieldError(name)
        check_type(value, entry_type)
        return make_field(key, entry_type, value)

    return produce


def add_version(version: int) -> Producer:
    """Provider protocol version triple."""
    return lambda _data: make_field(DataProviderKey.VERSION, DataEntryType.INTEGER, version)


def description_to_fields() -> Producer:
    """
    Provider description -> one triple per language plus the language list

    The language list is written last and joins the codes in the same order
    as the description triples. A provider without a description gets an
    empty language list.
    """

    def produce(data: Data) -> list[DataTxField]:
        description = description_of(data)
        fields = [_description_field(lang, text) for lang, text in description.items()]
        fields.append(
            make_field(DataProviderKey.LANG_LIST, DataEntryType.STRING, ",".join(description))
        )
        return fields

    return produce


def description_of(data: Data) -> Mapping[str, Any]:
    """Description mapping of an entity, empty when absent."""
    description = data.get("description")
    if description is None:
        return {}
    if not isinstance(description, Mapping):
        raise WrongValueTypeError(type(description).__name__, "object")
    return description


def asset_id_of(data: Data) -> str:
    """Asset id, required to render every asset key."""
    asset_id = data.get("id")
    if asset_id is None:
        raise EmptyFieldError("id")
    check_type(asset_id, DataEntryType.STRING)
    return asset_id


def add_asset_version(version: int) -> Producer:
    """Asset protocol version triple."""

    def produce(data: Data) -> DataTxField:
        key = render_key(AssetFieldPattern.VERSION, asset_id=asset_id_of(data))
        return make_field(key, DataEntryType.INTEGER, version)

    return produce


def to_asset_field(
    name: str,
    pattern: AssetFieldPattern,
    entry_type: DataEntryType,
    required: bool = False,
) -> Producer:
    """
    Asset attribute -> triple under the asset-scoped key

    Args:
        name: Attribute name
        pattern: Key pattern containing the asset id placeholder
        entry_type: Declared triple type
        required: Raise EmptyFieldError when absent instead of producing nothing

    Returns:
        Field producer
    """

    def produce(data: Data) -> Produced:
        value = data.get(name)
        if value is None:
            if required:
                raise EmptyFieldError(name)
            return []
        check_type(value, entry_type)
        return make_field(render_key(pattern, asset_id=asset_id_of(data)), entry_type, value)

    return produce


def asset_description_to_fields() -> Producer:
    """Asset description -> one triple per language (no language list)."""

    def produce(data: Data) -> list[DataTxField]:
        description = description_of(data)
        asset_id = asset_id_of(data)
        return [_description_field(lang, text, asset_id) for lang, text in description.items()]

    return produce


def _description_field(lang: str, text: Any, asset_id: str | None = None) -> DataTxField:
    check_type(lang, DataEntryType.STRING)
    if text is None:
        text = ""
    check_type(text, DataEntryType.STRING)
    return make_field(description_key(lang, asset_id), DataEntryType.STRING, text)
