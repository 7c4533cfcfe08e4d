# src/todo_keeper/view/theme.py

"""Console themes and ANSI styling helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_raw(cls, raw: str | None, default: Theme | None = None) -> Theme:
        fallback = default if default is not None else cls.LIGHT
        if not raw:
            return fallback
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return fallback


@dataclass(frozen=True, slots=True)
class Palette:
    text: str
    muted: str
    accent: str


RESET = "\033[0m"
STRIKE = "\033[9m"

# 256-color foregrounds; light theme assumes a light terminal background.
_PALETTES: dict[Theme, Palette] = {
    Theme.LIGHT: Palette(text="\033[38;5;236m", muted="\033[38;5;244m", accent="\033[38;5;25m"),
    Theme.DARK: Palette(text="\033[38;5;253m", muted="\033[38;5;245m", accent="\033[38;5;117m"),
}


def palette_for(theme: Theme) -> Palette:
    return _PALETTES[theme]


def style(text: str, *codes: str, enabled: bool = True) -> str:
    if not enabled or not codes:
        return text
    return "".join(codes) + text + RESET
