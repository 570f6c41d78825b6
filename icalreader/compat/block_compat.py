"""Switch for validating that BEGIN and END lines are balanced."""

from collections.abc import Generator
import contextlib
import contextvars


_strict_blocks = contextvars.ContextVar("strict_blocks", default=False)


@contextlib.contextmanager
def enable_strict_blocks() -> Generator[None]:
    """Context manager to reject content with mismatched BEGIN and END lines."""
    token = _strict_blocks.set(True)
    try:
        yield
    finally:
        _strict_blocks.reset(token)


def is_strict_blocks_enabled() -> bool:
    """Check if BEGIN and END balance checking is enabled."""
    return _strict_blocks.get()
