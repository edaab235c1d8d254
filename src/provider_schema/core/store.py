"""
Field store - keyed lookup over a list of data record triples.

Triples may be ``DataTxField`` models or plain mappings with ``key``, ``type``
and ``value`` entries. Keys are treated as opaque strings.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from provider_schema.domain.errors import MissingFieldError, TypeMismatchError

T = TypeVar("T")

# Field triple as accepted on input: a DataTxField or a mapping
Triple = Any
FieldStore = dict[str, Triple]


def field_attr(item: Triple, name: str) -> Any:
    """Read ``key``/``type``/``value`` from a triple model or mapping."""
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def to_hash(attr: str) -> Callable[[Iterable[T]], dict[str, T]]:
    """
    Build a function that indexes items by one of their attributes

    Later items overwrite earlier ones with the same attribute value; the
    entry keeps the position of its first occurrence.

    Args:
        attr: Attribute (or mapping entry) to index by

    Returns:
        Function mapping an iterable of items to a ``{attr value: item}`` dict
    """

    def index(items: Iterable[T]) -> dict[str, T]:
        result: dict[str, T] = {}
        for item in items:
            result[str(field_attr(item, attr))] = item
        return result

    return index


def build_field_store(triples: Iterable[Triple]) -> FieldStore:
    """Index triples by key."""
    return to_hash("key")(triples)


def get_field_value(store: FieldStore, key: str, expected_type: str) -> Any:
    """
    Extract a field value, enforcing its declared type

    Only the declared ``type`` of the stored triple is compared; the runtime
    type of the value is not inspected.

    Args:
        store: Field store built by ``build_field_store``
        key: Field key
        expected_type: Expected ``DataEntryType``

    Returns:
        The raw field value

    Raises:
        MissingFieldError: If the key is not in the store
        TypeMismatchError: If the declared type differs from ``expected_type``
    """
    item = store.get(key)
    if item is None:
        raise MissingFieldError(key)

    declared = field_attr(item, "type")
    if declared != expected_type:
        raise TypeMismatchError(str(declared), str(expected_type))

    return field_attr(item, "value")
