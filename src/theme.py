"""Color & style helpers for the console.

Decisions:
- Truecolor preferred; falls back to the 256-color cube if unsupported.
- Disabled when stdout is not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette comes from TRACKER_PRIMARY / TRACKER_DONE, read when the Theme is
  built so values loaded from .env by config are picked up.
"""
from __future__ import annotations
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_DONE_DEFAULT = '#A7E399'
DONE_MARKER = '[X]'


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _valid_hex(value: Optional[str]) -> bool:
    if not value:
        return False
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)


def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    return f"\033[38;5;{16 + 36 * r6 + 6 * g6 + b6}m"


@dataclass(frozen=True)
class Theme:
    enabled: bool = False
    truecolor: bool = False
    hex_primary: str = HEX_PRIMARY_DEFAULT
    hex_done: str = HEX_DONE_DEFAULT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, isatty: Optional[bool] = None) -> Theme:
        env = os.environ if environ is None else environ
        force = env.get('FORCE_COLOR', '').lower() in {'1', 'true', 'yes', 'on'}
        tty = sys.stdout.isatty() if isatty is None else isatty
        enabled = (force or tty) and env.get('NO_COLOR') is None
        colorterm = env.get('COLORTERM', '').lower()
        primary = env.get('TRACKER_PRIMARY')
        done = env.get('TRACKER_DONE')
        return cls(
            enabled=enabled,
            truecolor=enabled and any(tok in colorterm for tok in ('truecolor', '24bit')),
            hex_primary='#' + primary.lstrip('#') if _valid_hex(primary) else HEX_PRIMARY_DEFAULT,
            hex_done='#' + done.lstrip('#') if _valid_hex(done) else HEX_DONE_DEFAULT,
        )

    def code(self, part: str) -> str:
        return f"\033[{part}m" if self.enabled else ''

    def from_hex(self, hex_code: str) -> str:
        if not self.enabled:
            return ''
        r, g, b = _hex_to_rgb(hex_code)
        if self.truecolor:
            return _fg_truecolor(r, g, b)
        return _fg_256(r, g, b)

    def color(self, text: str, *styles: str) -> str:
        if not self.enabled:
            return text
        return ''.join(styles) + text + self.code('0')

    @property
    def primary(self) -> str:
        return self.from_hex(self.hex_primary)

    @property
    def bold(self) -> str:
        return self.code('1')

    def highlight_done(self, text: str) -> str:
        """Color every done marker in a response."""
        if not self.enabled:
            return text
        return text.replace(DONE_MARKER, self.color(DONE_MARKER, self.from_hex(self.hex_done), self.bold))
