"""
Class-level and instance-level bindings of the resolver.

Both delegate to ``core.validate`` with the schema passed explicitly.
"""

from __future__ import annotations

from typing import Any, ClassVar, Iterable, Mapping

from . import core
from .predicates import is_boolean
from .schema import Schema, to_schema
from .types import Err, KeyRequest, Ok, OptionKey


class WithValidations:
    """
    Mixin giving a class a declared options schema.

    Subclasses declare ``OPTIONS`` as ``{key: (default, check), ...}``. The
    declaration is frozen when the class is created, so a malformed entry
    fails at import time. ``validate``, ``check_options`` and
    ``extract_options`` are classmethods and ``is_boolean`` is a
    staticmethod, so they behave the same on the class and on instances.

    Example:
        class Transliterator(WithValidations):
            OPTIONS = {
                "compact": (False, is_boolean),
                "with_pinyin": (True, is_boolean),
                "thread_count": (8, is_type(int)),
            }

            def run(self, text, options=None):
                threads = self.validate("thread_count", options)
                ...

            @classmethod
            def run_all(cls, texts, options=None):
                compact, with_pinyin = cls.validate(["compact", "with_pinyin"], options)
                ...
    """

    OPTIONS: ClassVar[Schema] = to_schema({})

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        # Only freeze what this class declares; otherwise it inherits
        if "OPTIONS" in cls.__dict__:
            cls.OPTIONS = to_schema(cls.__dict__["OPTIONS"])

    @classmethod
    def validate(
        cls,
        keys: KeyRequest,
        options: Mapping[Any, Any] | None = None,
        strict: bool | None = None,
    ) -> Any:
        """Resolve ``keys`` from ``options`` against ``OPTIONS``."""
        return core.validate(keys, cls.OPTIONS, options, strict)

    @classmethod
    def check_options(
        cls,
        keys: KeyRequest,
        options: Mapping[Any, Any] | None = None,
        strict: bool | None = None,
    ) -> Ok[Any] | Err[Any]:
        return core.check(keys, cls.OPTIONS, options, strict)

    @classmethod
    def extract_options(
        cls, keys: OptionKey | Iterable[OptionKey], options: Mapping[Any, Any]
    ) -> dict:
        return core.extract_options(keys, options)

    @classmethod
    def option_keys(cls) -> list:
        return list(cls.OPTIONS)

    is_boolean = staticmethod(is_boolean)


class OptionsValidator:
    """
    Wrapper holding a schema, for code without a host class.

    Usage:
        csv_options = OptionsValidator({
            "delimiter": (",", is_type(str)),
            "strict": (False, is_boolean),
        })
        delimiter = csv_options.validate("delimiter", options)
    """

    def __init__(self, schema: Mapping[Any, Any]):
        self.schema = to_schema(schema)

    def __repr__(self) -> str:
        return f"OptionsValidator({list(self.schema)!r})"

    def validate(
        self,
        keys: KeyRequest,
        options: Mapping[Any, Any] | None = None,
        strict: bool | None = None,
    ) -> Any:
        return core.validate(keys, self.schema, options, strict)

    def check_options(
        self,
        keys: KeyRequest,
        options: Mapping[Any, Any] | None = None,
        strict: bool | None = None,
    ) -> Ok[Any] | Err[Any]:
        return core.check(keys, self.schema, options, strict)

    def extract_options(
        self, keys: OptionKey | Iterable[OptionKey], options: Mapping[Any, Any]
    ) -> dict:
        return core.extract_options(keys, options)

    def keys(self) -> list:
        return list(self.schema)

    is_boolean = staticmethod(is_boolean)
