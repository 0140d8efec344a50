"""Error taxonomy for reporting.

Only two domain errors are ever raised: ``ParseError`` for records that do
not decompose into a bug and ``ConfigError`` for unusable configuration.
Everything else is reported under the ``generic`` category.

Public API:
- classify_error(exc) -> ErrorInfo
"""
from __future__ import annotations

from dataclasses import dataclass

from .config import ConfigError
from .parser import ParseError


@dataclass
class ErrorInfo:
    category: str
    message: str
    original_type: str


def classify_error(exc: BaseException) -> ErrorInfo:
    """Map an exception onto a reporting category.

    - ParseError -> 'parse'
    - ConfigError -> 'config'
    - Fallback -> 'generic'
    """
    msg = str(exc) if exc else ""
    if isinstance(exc, ParseError):
        return ErrorInfo("parse", msg, exc.__class__.__name__)
    if isinstance(exc, ConfigError):
        return ErrorInfo("config", msg, exc.__class__.__name__)
    return ErrorInfo("generic", msg, exc.__class__.__name__)


__all__ = ["ErrorInfo", "classify_error"]
