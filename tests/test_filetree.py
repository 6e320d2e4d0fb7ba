import pytest

from termgit.filetree import (
    FileTreeItem,
    FileTreeItems,
    PathCollapsed,
    StatusItem,
    StatusItemType,
    TreeItemInfo,
)


def to_status(paths):
    return [StatusItem(p, StatusItemType.MODIFIED) for p in paths]


def test_simple():
    items = to_status(["file.txt"])
    res = FileTreeItems.build(items, set())
    assert res.items == [
        FileTreeItem(TreeItemInfo(0, "file.txt", "file.txt", True), items[0])
    ]
    assert res.items[0].info == TreeItemInfo(0, "file.txt", "file.txt", True)
    assert res.items[0].kind == items[0]

    items = to_status(["file.txt", "file2.txt"])
    res = FileTreeItems.build(items, set())
    assert len(res.items) == 2
    assert res.items[1].info.path == items[1].path


def test_folder():
    items = to_status(["a/file.txt"])
    res = [i.info.full_path for i in FileTreeItems.build(items, set()).items]
    assert res == ["a", items[0].path]


def test_indent():
    items = to_status(["a/b/file.txt"])
    res = [(i.info.indent, i.info.path) for i in FileTreeItems.build(items, set())]
    assert res == [(0, "a"), (1, "b"), (2, "file.txt")]


def test_indent_folder_file_name():
    items = to_status(["a/b", "a.txt"])
    res = [(i.info.indent, i.info.path) for i in FileTreeItems.build(items, set())]
    assert res == [(0, "a"), (1, "b"), (0, "a.txt")]


def test_folder_dup():
    items = to_status(["a/file.txt", "a/file2.txt"])
    res = [i.info.full_path for i in FileTreeItems.build(items, set()).items]
    assert res == ["a", items[0].path, items[1].path]


def test_multiple_items_at_path():
    res = FileTreeItems.build(to_status(["a/b/c/d", "a/b/e/f"]), set())
    assert res.multiple_items_at_path(0) is False
    assert res.multiple_items_at_path(1) is False
    assert res.multiple_items_at_path(2) is True


def test_find_parent():
    res = FileTreeItems.build(to_status(["a/b/c", "a/b/d"]), set())
    assert res.find_parent_index(3) == 1


def test_find_parent_of_top_level_is_zero():
    res = FileTreeItems.build(to_status(["a/b", "c"]), set())
    assert res.find_parent_index(2) == 0


def test_collapsed_state_applied():
    res = FileTreeItems.build(to_status(["a/b/c"]), {"a/b"})
    assert res[0].kind == PathCollapsed(False)
    assert res[1].kind == PathCollapsed(True)
    assert res[2].is_file()
    assert not res[0].is_file()


def test_invalid_file_name():
    with pytest.raises(ValueError):
        FileTreeItem.from_status(StatusItem("", StatusItemType.NEW))


def test_from_path():
    item = FileTreeItem.from_path("a/b", True)
    assert item.info == TreeItemInfo(1, "b", "a/b", True)
    assert item.kind == PathCollapsed(True)