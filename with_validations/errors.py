"""
Error taxonomy for option resolution.

Every error is raised synchronously by the resolver; there is no partial
result. Each class also derives from the closest builtin so callers can
catch e.g. ``ValueError`` without importing this module.
"""

from typing import Any, Iterable


class OptionsError(Exception):
    """Base class for all option resolution errors."""


class InvocationError(OptionsError, TypeError):
    """The resolver was called without a usable key request."""


class UnknownKeyError(OptionsError, LookupError):
    """A requested key is not declared in the schema."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Key {key!r} not found in OPTIONS")


class InvalidValueError(OptionsError, ValueError):
    """A supplied value was rejected by its key's check."""

    def __init__(self, key: Any, value: Any):
        self.key = key
        self.value = value
        super().__init__(
            f"{value!r} ({type(value).__name__}) is not a valid value for key {key!r}."
        )


class StrictnessViolation(OptionsError, ValueError):
    """Strict mode found options outside the requested keys."""

    def __init__(self, keys: Iterable[Any]):
        self.keys = sorted(keys, key=str)
        names = ", ".join(str(k) for k in self.keys)
        super().__init__(f"The following keys are not supported: {names}")
