"""
Configuration module exports.
"""

from screenplay.config.policy import (
    reset_fail_fast_policy,
    should_throw_errors_immediately,
    stop_throwing_errors_immediately,
    throw_errors_immediately,
)
from screenplay.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "throw_errors_immediately",
    "stop_throwing_errors_immediately",
    "should_throw_errors_immediately",
    "reset_fail_fast_policy",
]
