"""
Helpers for flat options maps.
"""

from typing import Any, Mapping, MutableMapping


def remove_keys(d: MutableMapping, *keys: Any) -> MutableMapping:
    """
    Remove ``keys`` from ``d`` in place.

    Keys not present are ignored. Returns ``d`` itself.
    """
    for key in keys:
        d.pop(key, None)
    return d


def retain_keys(d: Mapping, *keys: Any) -> dict:
    """
    Return a new dict with only the entries of ``d`` whose key is in ``keys``.

    Order follows ``d``. Keys not present in ``d`` are silently skipped and
    ``d`` is never modified.
    """
    wanted = list(keys)
    return {k: v for k, v in d.items() if k in wanted}
