"""
Field differ - incremental update between two triple lists.

Reports triples of the next list that are new or changed. Keys dropped from
the next list are not reported.
"""

from collections.abc import Iterable

from .store import Triple, build_field_store, field_attr


def get_fields_diff(previous: Iterable[Triple], next_fields: Iterable[Triple]) -> list[Triple]:
    """
    Compute the triples of ``next_fields`` that differ from ``previous``

    A triple is kept when its key is absent from ``previous`` or when the
    previous triple has a different type or value.

    Args:
        previous: Triples currently stored
        next_fields: Triples to be stored

    Returns:
        Subset of ``next_fields``, in its original order
    """
    previous_store = build_field_store(previous)
    changed: list[Triple] = []

    for item in next_fields:
        key = str(field_attr(item, "key"))
        if key not in previous_store:
            changed.append(item)
            continue

        prev = previous_store[key]
        if _differs(field_attr(prev, "type"), field_attr(item, "type")) or _differs(
            field_attr(prev, "value"), field_attr(item, "value")
        ):
            changed.append(item)

    return changed


def _differs(old: object, new: object) -> bool:
    # True == 1 in Python, but a bool/int swap is still a change
    return old != new or isinstance(old, bool) != isinstance(new, bool)
