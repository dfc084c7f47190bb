"""
Context manager for resolution configuration (e.g., strict mode).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Ambient strictness for calls that pass strict=None
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return _strict_mode.get()


@contextmanager
def validation_context(*, strict: bool = False):
    """
    Context manager for resolution configuration.

    Args:
        strict: If True, validate() calls that don't pass ``strict``
               themselves reject options outside the requested keys.
               An explicit ``strict=True/False`` on the call always wins.

    Example:
        from with_validations import WithValidations, is_boolean, validation_context

        class Renderer(WithValidations):
            OPTIONS = {"compact": (False, is_boolean)}

            def render(self, options=None):
                return self.validate("compact", options)

        Renderer().render({"compact": True, "typo": 1})   # True, "typo" ignored

        with validation_context(strict=True):
            Renderer().render({"compact": True, "typo": 1})   # StrictnessViolation!
    """
    token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(token)
