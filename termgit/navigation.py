"""Moving the selection of a status tree with the arrow and jump keys."""

from __future__ import annotations

import enum
from typing import NamedTuple

from termgit.filetree import PathCollapsed
from termgit.statustree import StatusTree


class MoveSelection(enum.Enum):
    """Direction in which to move the selection."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"
    HOME = "Home"
    END = "End"


class _SelectionChange(NamedTuple):
    new_index: int
    changes: bool


def _position_in_available(tree: StatusTree, current_index: int) -> int:
    """Position of `current_index` in the available selections, or of the
    closest available index above it; 0 when there is none."""
    positions = {idx: pos for pos, idx in enumerate(tree.available_selections)}
    return next(
        (positions[i] for i in range(current_index, -1, -1) if i in positions),
        0,
    )


def _selection_updown(tree: StatusTree, current_index: int, up: bool) -> _SelectionChange:
    available = tree.available_selections
    pos = _position_in_available(tree, current_index) if available else 0
    last_pos = max(len(available) - 1, 0)

    while True:
        if up:
            pos = max(pos - 1, 0)
        elif pos + 1 <= last_pos:
            pos += 1
        else:
            # cannot move down any further
            return _SelectionChange(current_index, False)
        new_index = available[pos]
        if tree.is_visible_index(new_index):
            return _SelectionChange(new_index, False)


def _selection_end(tree: StatusTree) -> _SelectionChange:
    new_index = max(len(tree.tree) - 1, 0)
    while new_index > 0 and not tree.is_visible_index(new_index):
        new_index -= 1
    return _SelectionChange(new_index, False)


def _selection_right(tree: StatusTree, current: int) -> _SelectionChange:
    item = tree.tree[current]
    if isinstance(item.kind, PathCollapsed):
        if item.kind.collapsed:
            tree.expand(item.info.full_path, current)
            return _SelectionChange(current, True)
        return _selection_updown(tree, current, False)
    return _SelectionChange(current, False)


def _selection_left(tree: StatusTree, current: int) -> _SelectionChange:
    item = tree.tree[current]
    if isinstance(item.kind, PathCollapsed) and not item.kind.collapsed:
        tree.collapse(item.info.full_path, current)
        return _SelectionChange(current, True)

    parent = tree.tree.find_parent_index(current)
    while parent not in tree.available_selections and parent != 0:
        parent = tree.tree.find_parent_index(parent)
    return _SelectionChange(parent, False)


def move_selection(tree: StatusTree, direction: MoveSelection) -> bool:
    """Move the selection of `tree`; True when the selection or the
    collapse state of a folder changed."""
    selection = tree.selection
    if selection is None:
        return False

    match direction:
        case MoveSelection.UP:
            change = _selection_updown(tree, selection, True)
        case MoveSelection.DOWN:
            change = _selection_updown(tree, selection, False)
        case MoveSelection.LEFT:
            change = _selection_left(tree, selection)
        case MoveSelection.RIGHT:
            change = _selection_right(tree, selection)
        case MoveSelection.HOME:
            change = _SelectionChange(0, False)
        case MoveSelection.END:
            change = _selection_end(tree)
        case _:
            raise ValueError(f"unknown direction: {direction!r}")

    tree.selection = change.new_index
    return change.new_index != selection or change.changes