"""
Context manager for validation configuration (loose vs exact mode).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for exact mode
_exact_mode: ContextVar[bool] = ContextVar("exact_mode", default=False)


def is_exact() -> bool:
    """Check if exact mode is currently enabled."""
    return _exact_mode.get()


@contextmanager
def validation_context(*, exact: bool = False):
    """
    Context manager for validation configuration.

    Args:
        exact: If True, calling a validator directly (``v(value)``) runs it
               in exact mode, so object shapes reject undeclared keys.
               Explicit ``validate`` / ``validate_exact`` calls are unaffected.

    Example:
        from shapeguard import object_, string, validation_context

        User = object_("User", {"name": string})

        User({"name": "a", "extra": 1})  # Ok, loose by default

        with validation_context(exact=True):
            User({"name": "a", "extra": 1})  # Err, extra key
    """
    token = _exact_mode.set(exact)
    try:
        yield
    finally:
        _exact_mode.reset(token)
