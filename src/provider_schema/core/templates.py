"""
Key templating for provider and asset fields.

Placeholders are replaced by the angle-bracket-wrapped value, so asset
``ABC`` turns ``status_<ASSET_ID>`` into ``status_<ABC>``.
"""

import re
from collections.abc import Callable

from provider_schema.constants import (
    DATA_PROVIDER_DESCRIPTION_PATTERN,
    AssetFieldPattern,
    Placeholder,
)

_WRAPPED_RE = re.compile(r"<(.+?)>")


def wrap(value: str) -> str:
    return f"<{value}>"


def render_key(pattern: str, asset_id: str | None = None, lang: str | None = None) -> str:
    """
    Substitute placeholders in a key pattern

    Args:
        pattern: Key pattern, e.g. ``description_<LANG>_<ASSET_ID>``
        asset_id: Value for the asset id placeholder
        lang: Value for the language placeholder

    Returns:
        Rendered key
    """
    key = str(pattern)
    if asset_id is not None:
        key = key.replace(Placeholder.ASSET_ID, wrap(asset_id), 1)
    if lang is not None:
        key = key.replace(Placeholder.LANG, wrap(lang), 1)
    return key


def replace_key(asset_id: str, lang: str | None = None) -> Callable[[str], str]:
    """Bind an asset id (and optionally a language) for rendering several patterns."""
    return lambda pattern: render_key(pattern, asset_id=asset_id, lang=lang)


def description_key(lang: str, asset_id: str | None = None) -> str:
    """Key of one description language, provider-level when ``asset_id`` is None."""
    if asset_id is None:
        return render_key(DATA_PROVIDER_DESCRIPTION_PATTERN, lang=lang)
    return render_key(AssetFieldPattern.DESCRIPTION, asset_id=asset_id, lang=lang)


def get_asset_id_from_key(key: str) -> str | None:
    """
    Recover the asset id from an asset status key

    Only ``status_<id>`` keys identify an asset. The id is the first wrapped
    group of the key, and the key must render back exactly from it.

    Args:
        key: Any record key

    Returns:
        Asset id, or None if the key is not a status key
    """
    prefix = str(AssetFieldPattern.STATUS).replace(Placeholder.ASSET_ID, "")
    if not key.startswith(prefix):
        return None

    match = _WRAPPED_RE.search(key)
    if match is None:
        return None

    asset_id = match.group(1)
    if render_key(AssetFieldPattern.STATUS, asset_id=asset_id) != key:
        return None
    return asset_id
