"""
Process-wide fail-fast policy.

When enabled, errors raised by tasks and consequences are re-raised to the
caller as soon as they have been reported, aborting the rest of the
performance. The flag is read on every error, so it may be toggled between
two tasks of the same performance.
"""

import threading
from typing import Optional

from screenplay.config.settings import get_settings

_lock = threading.Lock()
_throw_immediately: Optional[bool] = None


def throw_errors_immediately() -> None:
    """Enable fail-fast for the rest of the run."""
    global _throw_immediately
    with _lock:
        _throw_immediately = True


def stop_throwing_errors_immediately() -> None:
    """Disable fail-fast for the rest of the run."""
    global _throw_immediately
    with _lock:
        _throw_immediately = False


def should_throw_errors_immediately() -> bool:
    """Current fail-fast flag, falling back to ``Settings.fail_fast``."""
    with _lock:
        explicit = _throw_immediately
    if explicit is None:
        return get_settings().fail_fast
    return explicit


def reset_fail_fast_policy() -> None:
    """Forget any explicit setting so the configured default applies again."""
    global _throw_immediately
    with _lock:
        _throw_immediately = None
