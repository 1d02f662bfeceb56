"""Application event model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ButtonPressed:
    """Keypad or footer button pressed event."""

    button_id: str


@dataclass(frozen=True, slots=True)
class KeyPressed:
    """Key down event carrying a normalized key name."""

    key: str
