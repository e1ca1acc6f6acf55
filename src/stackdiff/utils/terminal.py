# utils/terminal.py
import os
from typing import Optional, TextIO

from .config import get_settings


def supports_color(stream: TextIO, override: Optional[bool] = None) -> bool:
    """Decide whether ANSI codes should reach ``stream``."""
    if override is not None:
        return override
    configured = get_settings().color
    if configured is not None:
        return configured
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
