"""
Core option resolution for with_validations.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from .context import is_strict
from .dict_utils import remove_keys, retain_keys
from .errors import (
    InvalidValueError,
    InvocationError,
    OptionsError,
    StrictnessViolation,
    UnknownKeyError,
)
from .schema import to_schema
from .types import Err, KeyRequest, Ok, OptionKey

logger = logging.getLogger(__name__)


def validate(
    keys: KeyRequest,
    schema: Mapping[Any, Any],
    options: Mapping[Any, Any] | None = None,
    strict: bool | None = None,
) -> Any:
    """
    Resolve the requested keys from an options map.

    Args:
        keys: A single key, a list/tuple of keys, or a zero-argument callable
              returning either. Any callable is called, so a callable
              option key must be passed inside a list or tuple
        schema: ``key -> Option`` or raw ``key -> (default, check)`` mapping
        options: Caller-supplied options; ``None`` is treated as ``{}``
        strict: Reject options outside ``keys``. ``None`` uses the ambient
               setting from ``validation_context``

    Returns:
        The single resolved value if one key was requested, otherwise a list
        of resolved values in request order

    Raises:
        InvocationError: If no keys are given or the request is empty
        StrictnessViolation: In strict mode, if options holds keys outside
            the request (even keys the schema declares)
        UnknownKeyError: If a requested key is not in the schema. Unhashable
            keys are reported before strictness is checked
        InvalidValueError: If a supplied value fails its key's check

    Note:
        Supplied values are checked; defaults are returned as declared.

    Examples:
        validate("compact", OPTIONS, options)
        compact, size = validate(["compact", "size"], OPTIONS, options)
        validate(lambda: ["compact"], OPTIONS, options, strict=True)
    """
    requested = _normalize_keys(keys)
    frozen = to_schema(schema)
    options = {} if options is None else options
    if strict is None:
        strict = is_strict()

    # Leftovers are computed on a copy; the caller's map is never touched
    leftover = remove_keys(dict(options), *requested)
    if leftover and strict:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rejecting unsupported option keys: %s", list(leftover))
        raise StrictnessViolation(leftover.keys())

    values = []
    for key in requested:
        if key not in frozen:
            raise UnknownKeyError(key)

        opt = frozen[key]
        if key in options:
            value = options[key]
            if not opt.accepts(value):
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Option %r rejected value %r", key, value)
                raise InvalidValueError(key, value)
            values.append(value)
        else:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Option %r not supplied, using default %r", key, opt.default)
            values.append(opt.default)

    return values if len(values) > 1 else values[0]


def check(
    keys: KeyRequest,
    schema: Mapping[Any, Any],
    options: Mapping[Any, Any] | None = None,
    strict: bool | None = None,
) -> Ok[Any] | Err[OptionsError]:
    """
    Resolve like ``validate`` but return a result instead of raising.

    Returns:
        Ok(resolved) if resolution succeeds
        Err(error) holding the OptionsError otherwise
    """
    try:
        return Ok(validate(keys, schema, options, strict))
    except OptionsError as e:
        return Err(e)


def extract_options(
    keys: OptionKey | Iterable[OptionKey], options: Mapping[Any, Any]
) -> dict:
    """
    Return a new dict with only the options whose key is in ``keys``.

    Use this to narrow an options map before handing it to code that rejects
    keys it doesn't know. Keys in ``keys`` missing from ``options`` are
    ignored. A string or any other non-iterable is taken as a single key.
    Nothing is validated.

    Example:
        def parse(text, options=None):
            options = options or {}
            compact = validate("compact", OPTIONS, options)
            reader_opts = extract_options(["delimiter", "quotechar"], options)
            return csv.reader(io.StringIO(text), **reader_opts)
    """
    if isinstance(keys, (str, bytes)) or not isinstance(keys, Iterable):
        keys = [keys]
    return retain_keys(options, *keys)


def _normalize_keys(keys: KeyRequest) -> list:
    """Turn a key request into an ordered list of keys."""
    if keys is None:
        raise InvocationError("No keys given")

    if callable(keys):
        keys = keys()

    if keys is None:
        raise InvocationError("Key request is empty")

    if isinstance(keys, (list, tuple)):
        if len(keys) == 0:
            raise InvocationError("Key request is empty")
        keys = list(keys)
    else:
        keys = [keys]

    # A schema only holds hashable keys; anything else is unknown
    for key in keys:
        try:
            hash(key)
        except TypeError:
            raise UnknownKeyError(key) from None

    return keys
