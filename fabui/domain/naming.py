"""Naming helpers for classes generated from blueprint names."""

from __future__ import annotations

import re
from typing import Optional

_WORD_PATTERN = re.compile(r"[A-Za-z0-9]+")


def class_name_for(name: Optional[str], suffix: str = "Controller", fallback: str = "Anonymous") -> str:
    """Return a CamelCase class name such as ``TodoListController`` for ``"todo-list"``."""

    words = _WORD_PATTERN.findall(name or "")
    stem = "".join(word[:1].upper() + word[1:] for word in words) or fallback
    if stem[0].isdigit():
        stem = f"{fallback}{stem}"
    if stem.endswith(suffix):
        return stem
    return f"{stem}{suffix}"


__all__ = ["class_name_for"]
