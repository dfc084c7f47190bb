"""
Schema declaration for with_validations.

A schema maps each option key to an ``Option``: its default value and the
check a supplied value must pass. Hosts usually declare it as a plain dict of
``(default, check)`` pairs; ``to_schema`` freezes that into a read-only
mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Annotated, Any, Mapping

from pydantic import AfterValidator, ConfigDict, create_model

from .types import CheckFn

Schema = Mapping[Any, "Option"]


@dataclass(frozen=True, slots=True)
class Option:
    """A single schema entry."""

    default: Any
    check: CheckFn

    def accepts(self, value: Any) -> bool:
        return bool(self.check(value))


def to_option(entry: Any) -> Option:
    """
    Coerce a schema entry to an Option.

    Conversion rules:
        Option -> pass through
        (default, check) pair -> Option(default, check)
    """
    if isinstance(entry, Option):
        return entry

    if isinstance(entry, (tuple, list)):
        if len(entry) != 2:
            raise TypeError(
                f"Schema entry must be a (default, check) pair, got {len(entry)} items"
            )
        default, check = entry
        if not callable(check):
            raise TypeError(f"Check must be callable, got {type(check).__name__}")
        return Option(default=default, check=check)

    raise TypeError(f"Cannot convert {type(entry).__name__} to Option")


def to_schema(declaration: Mapping[Any, Any]) -> Schema:
    """
    Freeze a schema declaration into a read-only mapping of Options.

    Already frozen schemas are returned as is.

    Usage:
        OPTIONS = to_schema({
            "compact": (False, is_boolean),
            "size": ("average", one_of("short", "average", "long")),
        })
    """
    if isinstance(declaration, MappingProxyType) and all(
        isinstance(v, Option) for v in declaration.values()
    ):
        return declaration

    if not isinstance(declaration, Mapping):
        raise TypeError(f"Schema must be a mapping, got {type(declaration).__name__}")

    return MappingProxyType({k: to_option(v) for k, v in declaration.items()})


def defaults(schema: Mapping[Any, Any]) -> dict:
    """Return a new dict of ``key -> default`` in declaration order."""
    return {k: opt.default for k, opt in to_schema(schema).items()}


def to_pydantic(name: str, schema: Mapping[Any, Any]) -> type:
    """
    Compile a schema to a Pydantic model.

    Each key becomes a field defaulting to its declared default. Supplied
    values run through the key's check; defaults are not validated. Extra
    fields are forbidden, mirroring strict resolution.

    Args:
        name: Name of the generated model class
        schema: Schema or raw declaration; keys must be valid identifiers

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        Settings = to_pydantic("Settings", {"compact": (False, is_boolean)})
        Settings(compact=True).compact
    """
    frozen = to_schema(schema)

    fields: dict[str, Any] = {}
    for key, opt in frozen.items():
        if not isinstance(key, str) or not key.isidentifier():
            raise TypeError(f"Cannot use {key!r} as a Pydantic field name")
        fields[key] = (Annotated[Any, AfterValidator(_after_check(key, opt))], opt.default)

    return create_model(name, __config__=ConfigDict(extra="forbid"), **fields)


def _after_check(key: str, opt: Option):
    """Build a Pydantic after-validator from an Option's check."""

    def run(value: Any) -> Any:
        if not opt.accepts(value):
            raise ValueError(
                f"{value!r} ({type(value).__name__}) is not a valid value for key {key!r}."
            )
        return value

    return run
