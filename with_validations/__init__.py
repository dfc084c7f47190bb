"""
with_validations - declare option schemas once, resolve options per call.

Usage:
    from with_validations import WithValidations, is_boolean, one_of

    class Annotator(WithValidations):
        OPTIONS = {
            "compact": (False, is_boolean),
            "with_pinyin": (True, is_boolean),
            "size": ("average", one_of("short", "average", "long")),
        }

        def annotate(self, text, options=None):
            compact, size = self.validate(["compact", "size"], options)
            ...
"""

from .context import is_strict, validation_context
from .core import check, extract_options, validate
from .dict_utils import remove_keys, retain_keys
from .errors import (
    InvalidValueError,
    InvocationError,
    OptionsError,
    StrictnessViolation,
    UnknownKeyError,
)
from .mixin import OptionsValidator, WithValidations
from .predicates import between, is_boolean, is_optional, is_type, matches, one_of
from .schema import Option, defaults, to_option, to_pydantic, to_schema
from .types import Err, Ok, SupportsValidation

__all__ = [
    # Result types
    "Ok",
    "Err",
    # Resolution
    "validate",
    "check",
    "extract_options",
    "validation_context",
    "is_strict",
    # Bindings
    "WithValidations",
    "OptionsValidator",
    "SupportsValidation",
    # Schema
    "Option",
    "to_option",
    "to_schema",
    "defaults",
    "to_pydantic",
    # Predicates
    "is_boolean",
    "one_of",
    "is_type",
    "between",
    "matches",
    "is_optional",
    # Options-map helpers
    "remove_keys",
    "retain_keys",
    # Errors
    "OptionsError",
    "InvocationError",
    "UnknownKeyError",
    "InvalidValueError",
    "StrictnessViolation",
]
