"""File tree of a status list with a selection and folder collapse states."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Iterable

from termgit.filetree import FileTreeItem, FileTreeItems, PathCollapsed, StatusItem


@dataclass
class StatusTree:
    """A file tree together with the selected index.

    `available_selections` lists the indices that can be selected: folders
    that are alone in their parent are folded into it and cannot be selected.
    """

    tree: FileTreeItems = field(default_factory=FileTreeItems)
    selection: int | None = None
    available_selections: list[int] = field(default_factory=list)

    def update(self, items: Iterable[StatusItem]) -> None:
        """Rebuild from a new list, keeping selection and collapse states."""
        last_collapsed = self.all_collapsed()
        selected = self.selected_item()
        last_index = self.selection if self.selection is not None else 0

        self.tree = FileTreeItems.build(items, last_collapsed)
        first = 0 if len(self.tree) else None

        if selected is None:
            self.selection = first
        else:
            found = self._find_last_selection(selected.info.full_path, last_index)
            self.selection = found if found is not None else first

        self._update_visibility(None, 0, True)
        self.available_selections = self._setup_available_selections()

        # now that visibility is set, make sure the selection is visible
        if self.selection is not None:
            self.selection = self.find_visible_idx(self.selection)

    def selected_item(self) -> FileTreeItem | None:
        if self.selection is None:
            return None
        return self.tree[self.selection]

    def is_empty(self) -> bool:
        return len(self.tree) == 0

    def all_collapsed(self) -> set[str]:
        """Full paths of all collapsed folders."""
        return {
            item.info.full_path
            for item in self.tree
            if isinstance(item.kind, PathCollapsed) and item.kind.collapsed
        }

    def is_visible_index(self, idx: int) -> bool:
        return self.tree[idx].info.visible

    def find_visible_idx(self, idx: int) -> int:
        """The closest visible index at or above `idx`, or 0."""
        while idx > 0 and not self.is_visible_index(idx):
            idx -= 1
        return idx

    def collapse(self, path: str, index: int) -> None:
        """Mark the folder at `index` collapsed and hide the items under `path`."""
        item = self.tree[index]
        if isinstance(item.kind, PathCollapsed):
            item.kind = PathCollapsed(True)

        prefix = f"{path}/"
        for item in self.tree.items[index + 1:]:
            if not item.info.full_path.startswith(prefix):
                return
            item.info.visible = False

    def expand(self, path: str, index: int) -> None:
        """Mark the folder at `index` expanded and show the items under `path`
        that are not inside a folder still collapsed."""
        item = self.tree[index]
        if isinstance(item.kind, PathCollapsed):
            item.kind = PathCollapsed(False)
        self._update_visibility(f"{path}/", index + 1, False)

    def _find_last_selection(self, last_selection: str, last_index: int) -> int | None:
        if self.is_empty():
            return None
        items = self.tree.items
        pos = bisect_left(items, last_selection, key=lambda e: e.info.full_path)
        if pos < len(items) and items[pos].info.full_path == last_selection:
            return pos
        return min(last_index, len(items) - 1)

    def _setup_available_selections(self) -> list[int]:
        items = self.tree.items
        limit = max(len(items) - 2, 0)
        result: list[int] = []
        skip = 0
        for index in range(len(items)):
            if skip:
                skip -= 1
                continue
            result.append(index)
            probe = index
            while probe < limit and items[probe].info.indent < items[probe + 1].info.indent:
                probe += 1
                # files are never folded, nor folders sharing their parent
                if items[probe].is_file() or self.tree.multiple_items_at_path(probe):
                    break
                skip += 1
        return result

    def _update_visibility(self, prefix: str | None, start_idx: int, set_defaults: bool) -> None:
        # inside a collapsed sub folder everything stays hidden
        inner_collapsed: str | None = None

        for item in self.tree.items[start_idx:]:
            full_path = item.info.full_path
            if inner_collapsed is not None:
                if full_path.startswith(inner_collapsed):
                    if set_defaults:
                        item.info.visible = False
                    continue
                inner_collapsed = None

            if isinstance(item.kind, PathCollapsed) and item.kind.collapsed:
                inner_collapsed = f"{full_path}/"

            if prefix is None or full_path.startswith(prefix):
                item.info.visible = True
            elif set_defaults:
                item.info.visible = False
            else:
                return