"""
Built-in predicates for option checks.

Every function here either is a predicate or returns one: a plain
``value -> bool`` callable usable as the check of a schema entry.
"""

from __future__ import annotations

import re
from typing import Any

from .types import CheckFn


def is_boolean(value: Any) -> bool:
    """
    True only for the two boolean literals.

    Usage:
        is_boolean(True)     # True
        is_boolean(1)        # False
        is_boolean("true")   # False
    """
    return value is True or value is False


def one_of(*choices: Any) -> CheckFn:
    """
    Accept a value equal to one of the given choices.

    Matching is type-exact, so ``True`` does not match ``1``.

    Usage:
        one_of("short", "average", "long")
    """
    allowed = tuple(choices)

    def check(x: Any) -> bool:
        return any(x == c and type(x) is type(c) for c in allowed)

    return check


def is_type(*types: type) -> CheckFn:
    """
    Accept instances of any of the given types.

    ``bool`` is an ``int`` subclass; booleans are rejected for ``int`` unless
    ``bool`` is listed explicitly.

    Usage:
        is_type(int)
        is_type(str, bytes)
    """
    allow_bool = bool in types

    def check(x: Any) -> bool:
        if isinstance(x, bool) and not allow_bool:
            return False
        return isinstance(x, types)

    return check


def between(lower: Any, upper: Any, inclusive: bool = True) -> CheckFn:
    """Accept values between bounds. Incomparable values are rejected."""

    def check(x: Any) -> bool:
        try:
            if inclusive:
                return bool(lower <= x <= upper)
            return bool(lower < x < upper)
        except TypeError:
            return False

    return check


def matches(pattern: str) -> CheckFn:
    """
    Accept strings matching a regex pattern.

    Usage:
        matches(r"^[a-z_]+$")
    """
    compiled = re.compile(pattern)

    def check(x: Any) -> bool:
        return isinstance(x, str) and compiled.match(x) is not None

    return check


def is_optional(inner: CheckFn) -> CheckFn:
    """Accept ``None`` or anything ``inner`` accepts."""

    def check(x: Any) -> bool:
        return x is None or bool(inner(x))

    return check
