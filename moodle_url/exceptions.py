# ============================================================================
# moodle_url/exceptions.py
# ============================================================================
"""
Exceptions for the Moodle URL toolkit and the input guard shared by its
public helpers.

The helpers themselves never raise on malformed input; the exceptions exist
for strict entry points (``parse_valid_url``) and configuration validation.
"""

from typing import Any, Callable, Dict, Optional
import functools
import inspect
import logging

logger = logging.getLogger(__name__)


class MoodleUrlError(Exception):
    """Base exception for all Moodle URL toolkit errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_exception = original_exception

    def __str__(self) -> str:
        base_msg = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base_msg} (Details: {details_str})"
        return base_msg


class InvalidUrlError(MoodleUrlError):
    """Raised by strict parsing when a URL is not acceptable."""

    def __init__(self, url: Any, reason: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"Invalid URL {url!r}: {reason}",
            {"reason": reason, **(details or {})}
        )
        self.url = url
        self.reason = reason


class ConfigurationError(MoodleUrlError):
    """Raised when configuration is invalid."""
    pass


def guard_string_inputs(*arg_names: str, default: Any = None):
    """
    Decorator implementing the type guard of the public URL helpers.

    If any of the named arguments is not a ``str`` the wrapped function is
    not called and ``default`` is returned instead.

    Args:
        arg_names: Names of the parameters that must be strings
        default: Value returned when the guard fails

    Usage:
        @guard_string_inputs("url", default="")
        def remove_protocol(url):
            ...
    """
    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)
        unknown = [name for name in arg_names if name not in signature.parameters]
        if unknown:
            raise TypeError(f"{func.__name__} has no parameters named {unknown}")

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            bound = signature.bind(*args, **kwargs)
            for name in arg_names:
                value = bound.arguments.get(name)
                if not isinstance(value, str):
                    logger.debug(
                        f"{func.__name__}: argument '{name}' is {type(value).__name__}, "
                        f"not str; returning {default!r}"
                    )
                    return default
            return func(*args, **kwargs)
        return wrapper
    return decorator
