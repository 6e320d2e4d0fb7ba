"""Busy indicator cycling through braille glyphs."""

from __future__ import annotations

from dataclasses import dataclass

SPINNER_CHARS = ("⣷", "⣯", "⣟", "⡿", "⢿", "⣻", "⣽", "⣾")


@dataclass
class Spinner:
    """Tracks the current spinner frame and whether work is pending."""

    idx: int = 0
    pending: bool = False

    def update(self) -> None:
        """Advance the spinner graphic by one frame."""
        self.idx = (self.idx + 1) % len(SPINNER_CHARS)

    def set_state(self, pending: bool) -> None:
        self.pending = pending

    def symbol(self) -> str:
        """The glyph to draw: the current frame while pending, else a blank."""
        return SPINNER_CHARS[self.idx] if self.pending else " "