"""
Language Profile Errors
=======================
Exception hierarchy shared by the catalog, the resource caches and the
language profiles.

Three kinds of failure are distinguished:
- ConfigurationError: malformed configuration handed in by the caller
- ResourceUnavailableError: a resource location is missing or unreadable
- CheckerConstructionError: a checker factory raised during catalog assembly

All of them propagate to the immediate caller.
"""

import functools
from typing import Any, Callable, Dict, Optional

__version__ = "1.0.0"


class LanguageProfileError(Exception):
    """Base exception for the language profile package."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR",
                 details: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a status/response dict."""
        return {
            'success': False,
            'error': {
                'code': self.code,
                'message': self.message,
                'details': self.details
            }
        }


class ConfigurationError(LanguageProfileError):
    """Malformed catalog, rule or profile configuration."""
    def __init__(self, message: str, key: Optional[str] = None, **kwargs):
        super().__init__(message, code="CONFIGURATION_ERROR",
                         details={'key': key, **kwargs})


class ResourceUnavailableError(LanguageProfileError):
    """A required resource location is missing, unreadable or unusable."""
    def __init__(self, message: str, resource: Optional[str] = None,
                 location: Optional[str] = None, **kwargs):
        super().__init__(message, code="RESOURCE_UNAVAILABLE",
                         details={'resource': resource, 'location': location, **kwargs})


class CheckerConstructionError(LanguageProfileError):
    """A checker constructor failed while a catalog tier was being built."""
    def __init__(self, message: str, rule_id: Optional[str] = None, **kwargs):
        super().__init__(message, code="CHECKER_CONSTRUCTION_ERROR",
                         details={'rule_id': rule_id, **kwargs})


def translate_errors(rule_id: str):
    """
    Decorator that maps arbitrary exceptions onto the profile hierarchy.

    Our own errors pass through untouched, I/O errors become
    ResourceUnavailableError and anything else a CheckerConstructionError.
    The original exception is always chained.
    """
    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except LanguageProfileError:
                raise
            except OSError as e:
                raise ResourceUnavailableError(
                    f"Checker {rule_id} could not read a resource: {e}",
                    resource=rule_id,
                    location=getattr(e, 'filename', None)
                ) from e
            except Exception as e:
                raise CheckerConstructionError(
                    f"Checker {rule_id} failed to construct: {type(e).__name__}: {e}",
                    rule_id=rule_id
                ) from e
        return wrapper
    return decorator
