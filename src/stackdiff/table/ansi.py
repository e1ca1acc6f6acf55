# table/ansi.py
import re

# CSI sequences such as "\033[31m" or "\033[0m"
_RX_ANSI = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def strip_ansi(text: str) -> str:
    return _RX_ANSI.sub("", text)


def visible_width(text: str) -> int:
    """Printable length of ``text`` once every escape run is removed."""
    return len(strip_ansi(text))
