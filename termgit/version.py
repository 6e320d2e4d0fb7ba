"""Application version."""

from __future__ import annotations

import re
from dataclasses import dataclass

_U32_MAX = 2**32 - 1


def _parse_part(text: str) -> int:
    if not text.isascii() or not text.isdigit():
        return 0
    value = int(text)
    return value if value <= _U32_MAX else 0


@dataclass(frozen=True)
class Version:
    """A major.minor.patch version, shown as ``v<major>.<minor>.<patch>``."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, text: str) -> Version:
        """Read a version string; parts that are missing or not numbers are 0."""
        core = re.split(r"[-+]", text.strip(), maxsplit=1)[0]
        parts = core.split(".")
        parts += [""] * (3 - len(parts))
        return cls(*(_parse_part(p) for p in parts[:3]))

    def __str__(self) -> str:
        return f"v{self.major}.{self.minor}.{self.patch}"