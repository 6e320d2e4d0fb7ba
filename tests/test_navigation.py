from termgit.filetree import StatusItem, StatusItemType
from termgit.navigation import MoveSelection, move_selection
from termgit.statustree import StatusTree


def to_status(paths):
    return [StatusItem(p, StatusItemType.MODIFIED) for p in paths]


def make_tree(paths):
    tree = StatusTree()
    tree.update(to_status(paths))
    return tree


def visibles(tree):
    return [item.info.visible for item in tree.tree]


def test_selection():
    tree = make_tree(["a/b"])
    assert move_selection(tree, MoveSelection.DOWN)
    assert tree.selection == 1
    assert move_selection(tree, MoveSelection.LEFT)
    assert tree.selection == 0


def test_selection_skips_collapsed():
    tree = make_tree(["a/b/c", "a/d"])
    tree.collapse("a/b", 1)
    tree.selection = 1
    assert move_selection(tree, MoveSelection.DOWN)
    assert tree.selection == 3


def test_folders_fold_up_if_alone_in_directory():
    tree = make_tree(["a/b/c/d", "a/e/f/g", "a/h/i/j"])
    tree.selection = 0
    for expected in (1, 3, 4, 6, 7, 9):
        assert move_selection(tree, MoveSelection.DOWN)
        assert tree.selection == expected


def test_folders_fold_up_if_alone_in_directory_2():
    tree = make_tree(["a/b/c/d/e/f/g/h"])
    tree.selection = 0
    assert move_selection(tree, MoveSelection.DOWN)
    assert tree.selection == 7


def test_folders_fold_up_down_with_selection_left_right():
    tree = make_tree(["a/b/c/d", "a/e/f/g", "a/h/i/j"])
    tree.selection = 0

    assert move_selection(tree, MoveSelection.LEFT)
    assert tree.selection == 0

    move_selection(tree, MoveSelection.LEFT)
    move_selection(tree, MoveSelection.LEFT)
    assert tree.selection == 0

    assert move_selection(tree, MoveSelection.RIGHT)  # unfold 0
    assert tree.selection == 0

    assert move_selection(tree, MoveSelection.RIGHT)  # move to 1
    assert tree.selection == 1

    assert move_selection(tree, MoveSelection.LEFT)  # fold 1
    assert move_selection(tree, MoveSelection.DOWN)  # move to 4
    assert tree.selection == 4

    assert move_selection(tree, MoveSelection.LEFT)  # fold 4
    assert move_selection(tree, MoveSelection.DOWN)  # move to 7
    assert tree.selection == 7

    assert move_selection(tree, MoveSelection.RIGHT)  # move to 9
    assert tree.selection == 9

    assert move_selection(tree, MoveSelection.LEFT)  # move to 7
    assert tree.selection == 7

    assert move_selection(tree, MoveSelection.LEFT)  # fold 7
    assert tree.selection == 7

    assert move_selection(tree, MoveSelection.LEFT)  # jump to 0
    assert tree.selection == 0


def test_empty_tree_does_not_move():
    tree = StatusTree()
    assert move_selection(tree, MoveSelection.DOWN) is False
    assert tree.selection is None


def test_down_at_bottom_keeps_selection():
    tree = make_tree(["a", "b"])
    tree.selection = 1
    assert move_selection(tree, MoveSelection.DOWN) is False
    assert tree.selection == 1


def test_up_at_top_keeps_selection():
    tree = make_tree(["a", "b"])
    assert tree.selection == 0
    assert move_selection(tree, MoveSelection.UP) is False
    assert tree.selection == 0


def test_up_moves_to_previous():
    tree = make_tree(["a", "b"])
    tree.selection = 1
    assert move_selection(tree, MoveSelection.UP) is True
    assert tree.selection == 0


def test_home_and_end():
    tree = make_tree(["c", "a/b"])
    # tree: c, a, a/b
    tree.collapse("a", 1)
    assert visibles(tree) == [True, True, False]

    assert move_selection(tree, MoveSelection.END)
    assert tree.selection == 1

    assert move_selection(tree, MoveSelection.HOME)
    assert tree.selection == 0
    assert move_selection(tree, MoveSelection.HOME) is False


def test_right_on_file_changes_nothing():
    tree = make_tree(["a"])
    assert move_selection(tree, MoveSelection.RIGHT) is False
    assert tree.selection == 0


def test_left_collapses_and_right_expands():
    tree = make_tree(["a/b"])
    assert move_selection(tree, MoveSelection.LEFT) is True
    assert visibles(tree) == [True, False]
    assert tree.all_collapsed() == {"a"}

    assert move_selection(tree, MoveSelection.RIGHT) is True
    assert visibles(tree) == [True, True]
    assert tree.all_collapsed() == set()
    assert tree.selection == 0