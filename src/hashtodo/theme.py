"""Color & style helpers.

Decisions:
- Styles are always generated; click.echo strips them when stdout is not a
  terminal, so piping ``t`` into another tool yields plain text.
- FORCE_COLOR keeps styles even when not a TTY; NO_COLOR drops them always.
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Palette overridable via T_LABEL_COLOR / T_DONE_COLOR (hex, e.g. #476EAE).
"""
from __future__ import annotations
import os
from typing import Optional

_TRUTHY = {"1", "true", "yes", "on"}
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = any(tok in _COLORTERM for tok in ("truecolor", "24bit"))


def echo_color() -> Optional[bool]:
    """Value for click.echo's ``color`` argument (None lets click decide)."""
    if os.environ.get("NO_COLOR") is not None:
        return False
    if os.environ.get("FORCE_COLOR", "").strip().lower() in _TRUTHY:
        return True
    return None


def _code(part: str) -> str:
    return f"\033[{part}m"


def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    idx = 16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)
    return f"\033[38;5;{idx}m"


def _from_hex(hex_code: str) -> str:
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)


def _palette(env_name: str, default: str) -> str:
    value = os.environ.get(env_name, "").strip()
    return value if _is_hex(value) else default


RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_LABEL = _palette('T_LABEL_COLOR', '#476EAE')
HEX_DONE = _palette('T_DONE_COLOR', '#A7E399')

LABEL_COLOR = _from_hex(HEX_LABEL) + BOLD
DONE_COLOR = _from_hex(HEX_DONE)


def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not styles or not text:
        return text
    return ''.join(styles) + text + RESET


__all__ = ['color', 'echo_color', 'RESET', 'BOLD', 'DIM', 'LABEL_COLOR', 'DONE_COLOR',
           'HEX_LABEL', 'HEX_DONE']
