"""Builders for raw key/type/value triples used across tests."""

from __future__ import annotations

from typing import Any

from provider_schema.constants import DataEntryType, DataProviderKey, DataProviderVersion


def field(key: str, entry_type: str, value: Any) -> dict[str, Any]:
    """Raw triple as it arrives from a data record."""
    return {"key": key, "type": entry_type, "value": value}


class FieldBuilder:
    """Build raw triple lists for providers and assets."""

    def provider(
        self,
        *,
        version: int = DataProviderVersion.BETA,
        name: str | None = "Provider name",
        link: str | None = "https://some.provider.com",
        email: str | None = "provider@mail.ru",
        description: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        if description is None:
            description = {"en": "Some en description!"}
        fields = [field(DataProviderKey.VERSION, DataEntryType.INTEGER, int(version))]
        for key, value in (
            (DataProviderKey.NAME, name),
            (DataProviderKey.LINK, link),
            (DataProviderKey.EMAIL, email),
        ):
            if value is not None:
                fields.append(field(key, DataEntryType.STRING, value))
        fields.append(field(DataProviderKey.LANG_LIST, DataEntryType.STRING, ",".join(description)))
        for lang, text in description.items():
            fields.append(field(f"data_provider_description_<{lang}>", DataEntryType.STRING, text))
        return fields

    def asset(
        self,
        asset_id: str,
        status: int,
        *,
        version: int = DataProviderVersion.BETA,
        **attributes: Any,
    ) -> list[dict[str, Any]]:
        """Asset triples; ``description`` is a lang -> text mapping, other attributes strings."""
        fields = [
            field(f"version_<{asset_id}>", DataEntryType.INTEGER, int(version)),
            field(f"status_<{asset_id}>", DataEntryType.INTEGER, int(status)),
        ]
        description = attributes.pop("description", None) or {}
        for name, value in attributes.items():
            fields.append(field(f"{name}_<{asset_id}>", DataEntryType.STRING, value))
        for lang, text in description.items():
            fields.append(field(f"description_<{lang}>_<{asset_id}>", DataEntryType.STRING, text))
        return fields

    @staticmethod
    def without(fields: list[dict[str, Any]], key: str) -> list[dict[str, Any]]:
        return [item for item in fields if item["key"] != key]

    @staticmethod
    def keyed(fields: list[Any]) -> dict[str, Any]:
        """Index triples (models or mappings) by key for order-insensitive comparison."""
        result = {}
        for item in fields:
            if isinstance(item, dict):
                result[item["key"]] = (str(item["type"]), item["value"])
            else:
                result[item.key] = (str(item.type), item.value)
        return result
