import pytest

from fluchooser.menu import MenuItem, find_in_menu, full_find_in_menu


@pytest.fixture
def items():
    return [
        MenuItem("File", submenu=True),
        MenuItem("Open"),
        MenuItem("Save"),
        MenuItem(None),
        MenuItem("Edit", submenu=True),
        MenuItem("Copy"),
        MenuItem("Paste"),
        MenuItem(None),
        MenuItem("Quit"),
        MenuItem(""),
        MenuItem("A&B"),
        MenuItem(None),
    ]


def test_find_by_label(items):
    assert find_in_menu(items, "Open") == 1
    assert find_in_menu(items, "Quit") == 8


def test_find_missing(items):
    assert find_in_menu(items, "Nope") is None
    assert find_in_menu(items, None) is None


def test_find_never_matches_empty_label(items):
    assert find_in_menu(items, "") is None


def test_full_find_paths(items):
    assert full_find_in_menu(items, "File/Open") == 1
    assert full_find_in_menu(items, "Edit/Paste") == 6
    assert full_find_in_menu(items, "Quit") == 8


def test_full_find_leading_slash(items):
    assert full_find_in_menu(items, "/Edit/Copy") == 5


def test_full_find_ignores_shortcut_markers(items):
    assert full_find_in_menu(items, "&File/_Open") == 1
    assert full_find_in_menu(items, "A&&B") == 10


def test_full_find_child_needs_its_parent(items):
    assert full_find_in_menu(items, "Paste") is None


def test_full_find_non_submenu_in_path(items):
    assert full_find_in_menu(items, "Quit/Anything") is None


def test_full_find_missing(items):
    assert full_find_in_menu(items, "Edit/Missing") is None
    assert full_find_in_menu(items, "") is None
    assert full_find_in_menu(items, None) is None


def test_full_find_agrees_with_flat_find_for_top_level(items):
    assert full_find_in_menu(items, "File") == find_in_menu(items, "File")