"""
Type definitions for with_validations.

Provides a minimal Result type (Ok/Err), type aliases and the
SupportsValidation protocol shared by the mixin and the wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    Hashable,
    Iterable,
    Mapping,
    Protocol,
    Sequence,
    TypeVar,
    Union,
    runtime_checkable,
)

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


# Type aliases
CheckFn = Callable[[Any], bool]
OptionKey = Hashable
Options = Mapping[Any, Any]
# Any callable is taken as a thunk and called, so a callable option key
# (e.g. a class) must be wrapped in a list or tuple.
KeyRequest = Union[OptionKey, Sequence[OptionKey], Callable[[], Any]]


@runtime_checkable
class SupportsValidation(Protocol):
    """Anything that can resolve options against a declared schema."""

    def validate(
        self,
        keys: KeyRequest,
        options: Options | None = None,
        strict: bool | None = None,
    ) -> Any: ...

    def extract_options(
        self, keys: OptionKey | Iterable[OptionKey], options: Options
    ) -> dict: ...

    def is_boolean(self, value: Any) -> bool: ...
