"""Flat, indented tree of changed files built from a status list."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Iterable, Iterator, Union

_U8_MAX = 255


class StatusItemType(enum.Enum):
    """Kind of change of a file in the repository status."""

    NEW = "New"
    MODIFIED = "Modified"
    DELETED = "Deleted"
    RENAMED = "Renamed"
    TYPECHANGE = "Typechange"


@dataclass(frozen=True)
class StatusItem:
    """A changed file: its path relative to the repository and its status."""

    path: str
    status: StatusItemType


@dataclass
class TreeItemInfo:
    """Information shared by every item of a file tree."""

    indent: int
    path: str
    full_path: str
    visible: bool = True


@dataclass(frozen=True)
class PathCollapsed:
    """Collapse state of a folder item."""

    collapsed: bool


TreeItemKind = Union[PathCollapsed, StatusItem]


def _indent_of(path: PurePosixPath) -> int:
    indent = max(len(path.parents) - 1, 0)
    if indent > _U8_MAX:
        raise ValueError(f"path nested too deeply: {path}")
    return indent


@dataclass(eq=False)
class FileTreeItem:
    """A folder or a file of the tree; items compare by their full path."""

    info: TreeItemInfo
    kind: TreeItemKind = field(default_factory=lambda: PathCollapsed(False))

    @classmethod
    def from_status(cls, item: StatusItem) -> FileTreeItem:
        path = PurePosixPath(item.path)
        name = path.name
        if name in ("", ".."):
            raise ValueError(f"invalid file name {item!r}")
        return cls(TreeItemInfo(_indent_of(path), name, item.path), item)

    @classmethod
    def from_path(cls, path: str | PurePosixPath, collapsed: bool) -> FileTreeItem:
        posix = PurePosixPath(path)
        if not posix.parts:
            raise ValueError("failed to create item from path")
        return cls(
            TreeItemInfo(_indent_of(posix), posix.parts[-1], str(posix)),
            PathCollapsed(collapsed),
        )

    def is_file(self) -> bool:
        return isinstance(self.kind, StatusItem)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileTreeItem):
            return NotImplemented
        return self.info.full_path == other.info.full_path

    def __lt__(self, other: FileTreeItem) -> bool:
        return self.info.full_path < other.info.full_path

    def __hash__(self) -> int:
        return hash(self.info.full_path)


@dataclass
class FileTreeItems:
    """The items of a file tree in display order, folders before their content."""

    items: list[FileTreeItem] = field(default_factory=list)
    file_count: int = 0

    @classmethod
    def build(cls, items: Iterable[StatusItem], collapsed: Iterable[str] = ()) -> FileTreeItems:
        """Build the tree; folders whose full path is in `collapsed` start collapsed."""
        collapsed_paths = set(collapsed)
        nodes: list[FileTreeItem] = []
        paths_added: set[str] = set()
        count = 0
        for entry in items:
            for ancestor in reversed(PurePosixPath(entry.path).parents):
                if ancestor.parent == ancestor:
                    continue
                key = str(ancestor)
                if key in paths_added:
                    continue
                paths_added.add(key)
                nodes.append(FileTreeItem.from_path(ancestor, key in collapsed_paths))
            nodes.append(FileTreeItem.from_status(entry))
            count += 1
        return cls(nodes, count)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> FileTreeItem:
        return self.items[index]

    def __iter__(self) -> Iterator[FileTreeItem]:
        return iter(self.items)

    def find_parent_index(self, index: int) -> int:
        """Index of the closest item above `index` with a smaller indent, or 0."""
        indent = self.items[index].info.indent
        return next(
            (i for i in range(index - 1, -1, -1) if self.items[i].info.indent < indent),
            0,
        )

    def multiple_items_at_path(self, index: int) -> bool:
        """Whether another item at the same level follows the subtree of `index`."""
        items = self.items
        if index + 2 >= len(items):
            return False
        indent = items[index].info.indent
        probe = index + 1
        last = len(items) - 1
        while probe < last and indent < items[probe].info.indent:
            probe += 1
        return items[probe].info.indent == indent