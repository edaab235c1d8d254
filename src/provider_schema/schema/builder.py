"""
Schema builder - composes field processors into a decode function.

A processor receives the shared error list once and returns a step that reads
from the field store and writes into the partial content. Every failure is
caught inside the step: required fields record a ``ResponseError``, optional
fields are skipped silently. One failing field never stops the others.
"""

from collections.abc import Callable
from typing import Any

from provider_schema.constants import DataEntryType, DataProviderKey
from provider_schema.core.store import FieldStore, get_field_value
from provider_schema.core.templates import description_key
from provider_schema.domain.errors import FieldDecodeError
from provider_schema.domain.results import Response, ResponseError, build_response

Content = dict[str, Any]
Step = Callable[[Content, FieldStore], Content]
Processor = Callable[[list[ResponseError]], Step]
Parser = Callable[[FieldStore], Response]


def schema(*processors: Processor) -> Parser:
    """
    Build a parser from field processors

    Processors run in declaration order; the order only affects the order of
    collected errors.

    Args:
        *processors: Field processors (see ``process_field``)

    Returns:
        Function turning a field store into a response
    """

    def parse(store: FieldStore) -> Response:
        errors: list[ResponseError] = []
        content: Content = {}
        for processor in processors:
            content = processor(errors)(content, store)
        return build_response(content, errors)

    return parse


def process_field(
    from_key: str,
    to: str,
    entry_type: DataEntryType,
    required: bool = True,
) -> Processor:
    """
    Copy one field from the store into the content

    Args:
        from_key: Record key to read
        to: Content attribute to write
        entry_type: Expected declared type
        required: Record an error under ``to`` when the field cannot be read

    Returns:
        Field processor
    """

    def bind(errors: list[ResponseError]) -> Step:
        def step(content: Content, store: FieldStore) -> Content:
            try:
                content[to] = get_field_value(store, from_key, entry_type)
            except FieldDecodeError as e:
                if required:
                    errors.append(ResponseError(path=to, error=e))
            return content

        return step

    return bind


def add_asset_id(asset_id: str) -> Processor:
    """Write the asset id into the content."""

    def bind(_errors: list[ResponseError]) -> Step:
        def step(content: Content, _store: FieldStore) -> Content:
            content["id"] = asset_id
            return content

        return step

    return bind


def split_lang_list(lang_list: str) -> list[str]:
    """Split a comma-separated language list, dropping empty codes."""
    return [lang for lang in lang_list.split(",") if lang]


def process_description(asset_id: str | None = None, required: bool = True) -> Processor:
    """
    Collect per-language descriptions into ``content["description"]``

    Languages come from the provider-level language list for both provider
    and asset descriptions. A missing language list is reported once under
    ``description``; a missing language under ``description.<lang>``.

    Args:
        asset_id: Asset whose descriptions to read, None for the provider
        required: Record errors for missing entries

    Returns:
        Field processor
    """

    def bind(errors: list[ResponseError]) -> Step:
        def step(content: Content, store: FieldStore) -> Content:
            try:
                lang_list = get_field_value(store, DataProviderKey.LANG_LIST, DataEntryType.STRING)
            except FieldDecodeError as e:
                if required:
                    errors.append(ResponseError(path="description", error=e))
                return content

            description: dict[str, str] = {}
            for lang in split_lang_list(str(lang_list)):
                key = description_key(lang, asset_id)
                try:
                    description[lang] = get_field_value(store, key, DataEntryType.STRING)
                except FieldDecodeError as e:
                    if required:
                        errors.append(ResponseError(path=f"description.{lang}", error=e))

            if description:
                content["description"] = description
            return content

        return step

    return bind
