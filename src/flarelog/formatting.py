"""
Message formatting rules shared by every log operation.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

NAME_SEPARATOR = "+"


def is_truthy(value: Any) -> bool:
    """Truthiness as JavaScript sees it.

    ``None``, ``False``, numeric zero, ``NaN`` and empty strings are falsy. Everything
    else is truthy, empty containers included.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    if isinstance(value, (str, bytes)):
        return len(value) != 0
    return True


def render_display_name(name: str) -> str:
    """Render a compound name: ``"one+two"`` -> ``"[one] [two]"``."""
    return " ".join(f"[{segment}]" for segment in name.split(NAME_SEPARATOR))


def render_notes(notes: Mapping[str, Any] | None) -> str:
    if not notes:
        return ""

    truthy_notes = [label for label, value in notes.items() if is_truthy(value)]
    if not truthy_notes:
        return ""
    return f" ({', '.join(truthy_notes)})"


def format_message(display_name: str, message: Any, notes: Mapping[str, Any] | None = None) -> str:
    """Build ``"{display_name} {message}{suffix}"`` with the notes suffix."""
    return f"{display_name} {message}{render_notes(notes)}"
