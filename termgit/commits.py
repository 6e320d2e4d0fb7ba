"""Commit identifiers, log entries and the batch of log entries on screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Iterator

SLICE_OFFSET_RELOAD_THRESHOLD = 100
_SHORT_HASH_LEN = 7


@dataclass(frozen=True)
class CommitId:
    """A commit hash."""

    hex: str

    def short(self) -> str:
        return self.hex[:_SHORT_HASH_LEN]

    def __str__(self) -> str:
        return self.hex


@dataclass(frozen=True)
class CommitInfo:
    """Summary of a commit as read from the repository."""

    message: str
    time: int
    author: str
    id: CommitId


def time_to_string(secs: int, short: bool) -> str:
    """Format seconds since the epoch as a date (and time) in local time."""
    moment = datetime.fromtimestamp(secs, tz=timezone.utc).astimezone()
    return moment.strftime("%Y-%m-%d" if short else "%Y-%m-%d %H:%M:%S")


@dataclass(frozen=True)
class LogEntry:
    """A commit prepared for display in the log."""

    time: str
    author: str
    msg: str
    hash_short: str
    id: CommitId

    @classmethod
    def from_commit(cls, info: CommitInfo) -> LogEntry:
        return cls(
            time=time_to_string(info.time, True),
            author=info.author,
            msg=info.message,
            hash_short=info.id.short(),
            id=info.id,
        )


@dataclass
class ItemBatch:
    """A window of log entries starting at `index_offset` in the full log."""

    index_offset: int = 0
    items: list[LogEntry] = field(default_factory=list)

    @property
    def last_idx(self) -> int:
        return self.index_offset + len(self.items)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def clear(self) -> None:
        self.items.clear()

    def set_items(self, start_index: int, commits: Iterable[CommitInfo]) -> None:
        """Replace the batch with `commits`, the first being at `start_index`."""
        self.items = [LogEntry.from_commit(c) for c in commits]
        self.index_offset = start_index

    def needs_data(self, idx: int, idx_max: int) -> bool:
        """Whether the entries around `idx` reach beyond this batch."""
        want_min = max(idx - SLICE_OFFSET_RELOAD_THRESHOLD, 0)
        want_max = min(idx + SLICE_OFFSET_RELOAD_THRESHOLD, idx_max)
        return want_max >= self.last_idx or want_min < self.index_offset