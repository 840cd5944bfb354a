"""Domain-level error types raised by the controller factory.

The factory degrades silently for malformed registrations and unknown
blueprint names; the errors here cover the cases that must fail loudly.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class FactoryError(Exception):
    """Coded factory error (``code`` is stable, ``message`` is for humans)."""

    def __init__(self, code: str, message: str, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = dict(meta or {})

    def __repr__(self) -> str:
        return f"FactoryError(code={self.code!r}, message={self.message!r})"


class SelectorError(ValueError):
    """Raised when a selector string cannot be parsed."""

    def __init__(self, selector: str, reason: str):
        super().__init__(f"Invalid selector {selector!r}: {reason}")
        self.selector = selector
        self.reason = reason


__all__ = ["FactoryError", "SelectorError"]
