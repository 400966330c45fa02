"""
Context manager for decoding configuration (e.g., capturing given values).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for recording offending inputs in reports
_capture_given: ContextVar[bool] = ContextVar("capture_given", default=True)


def is_capturing_given() -> bool:
    """Check if reports currently record the offending input values."""
    return _capture_given.get()


@contextmanager
def decoding_context(*, capture_given: bool = True):
    """
    Context manager for decoding configuration.

    Args:
        capture_given: If False, reports do not keep the input values that
               failed to decode. Use this when inputs may carry secrets and
               reports end up in logs.

    Example:
        from unravel import decoding_context, record, string

        Credentials = record({"user": string, "token": string})

        # Normal: the report remembers the offending value
        Credentials.decode({"user": "alice", "token": 42})

        # Redacted: the report only carries locations and error kinds
        with decoding_context(capture_given=False):
            Credentials.decode({"user": "alice", "token": 42})
    """
    token = _capture_given.set(capture_given)
    try:
        yield
    finally:
        _capture_given.reset(token)
