# termgit

Building blocks for a terminal user interface for git. Each one is a plain Python object, so you can use and test it without a terminal. The package has no dependencies beyond the standard library.

## Modules

- `termgit.keys` handles key events and key bindings.
  - `KeyCode`, `KeyModifiers` and `KeyEvent` describe a key press.
  - `KeyConfig` holds the key for every action and has defaults for all of them.
  - `KeyConfig.to_dict` / `KeyConfig.from_dict` convert a config to and from a mapping.
  - `KeyConfig.save(path)` and `KeyConfig.read_file(path)` write and read the config as JSON.
  - `KeyConfig.init(path)` loads the file. When the file is missing, it first writes the defaults there. On any error it falls back to the defaults.
  - `get_hint(event)` returns a short label such as `^c`, `⇧D` or `⏎`.
  - `get_modifier_hint(modifiers)` returns the symbol for a single modifier.
- `termgit.filetree` builds a flat, indented tree from a list of changed files.
  - The inputs are `StatusItem` values, each with a `StatusItemType`.
  - `FileTreeItems.build(items, collapsed)` puts every folder before its content.
  - The tree also has `find_parent_index` and `multiple_items_at_path`.
- `termgit.statustree` provides `StatusTree`, a file tree with a selection.
  - `update(items)` rebuilds the tree and keeps the selected item and the collapsed folders.
  - `collapse(path, index)` and `expand(path, index)` fold and unfold folders. They update which items are visible.
- `termgit.navigation` moves the selection of a `StatusTree`.
  - `move_selection(tree, direction)` takes a `MoveSelection`: `UP`, `DOWN`, `LEFT`, `RIGHT`, `HOME` or `END`.
  - A folder that is the only item in its parent is folded into the parent and is skipped.
  - Moving left collapses an open folder or jumps to the parent folder. Moving right expands a collapsed folder.
  - It returns `True` when the selection or a collapse state changed.
- `termgit.commits` covers the commit log.
  - `CommitId` (its `short()` returns 7 characters), `CommitInfo` and `LogEntry` describe commits.
  - `ItemBatch` is a window of log entries. `needs_data(idx, idx_max)` tells you when the entries within 100 of `idx` reach past the window.
  - `time_to_string(secs, short)` formats a Unix time in local time.
- `termgit.ui` holds layout geometry.
  - `Rect` and `Size` are the basic shapes.
  - `rect_inside` and `centered_rect_absolute` size and place rectangles.
  - `calc_scroll_top` scrolls a list so the selection stays in view.
  - `scrollbar_position(area, lines, pos)` gives the cell for the scrollbar marker, or `None` when no bar is needed.
- `termgit.spinner` provides `Spinner`, a busy indicator that cycles through braille glyphs. `symbol()` returns a blank while nothing is pending.
- `termgit.version` provides `Version`, a `major.minor.patch` value. `Version.parse` reads one from text, and the value prints as `v1.2.3`.

## Example

```python
from termgit.filetree import StatusItem, StatusItemType
from termgit.statustree import StatusTree
from termgit.navigation import MoveSelection, move_selection

tree = StatusTree()
tree.update([StatusItem("a/b", StatusItemType.MODIFIED)])
move_selection(tree, MoveSelection.DOWN)
print(tree.selection)  # 1
```

## What this package does not do

There is no application to run and no command. The package does not:

- read a git repository or talk to git;
- draw anything on a terminal or read keys from one;
- provide colour themes, a text input widget or UI message texts;
- provide an event queue between components.

You supply the list of changed files and the commits yourself. Rendering the trees, batches and geometry is also up to you.

## Tests

```
pip install -e .[test]
pytest
```