import pytest

from fluchooser.navigation import Favorites, History


def test_history_back_and_forward():
    h = History()
    h.visit("/a/")
    h.visit("/b/")
    h.visit("/c/")
    assert h.current == "/c/"
    assert h.can_go_back()
    assert not h.can_go_forward()
    assert h.back() == "/b/"
    assert h.back() == "/a/"
    assert h.back() is None
    assert not h.can_go_back()
    assert h.forward() == "/b/"
    assert h.can_go_forward()


def test_history_visit_truncates_forward_entries():
    h = History()
    for p in ("/a/", "/b/", "/c/"):
        h.visit(p)
    h.back()
    h.back()
    h.visit("/d/")
    assert h.paths == ["/a/", "/d/"]
    assert not h.can_go_forward()
    assert h.forward() is None


def test_history_ignores_repeat_and_empty():
    h = History()
    h.visit("")
    assert h.current is None
    h.visit("/a/")
    h.visit("/a/")
    assert h.paths == ["/a/"]
    assert not h.can_go_back()


def test_history_clear():
    h = History()
    h.visit("/a/")
    h.visit("/b/")
    h.clear()
    assert h.current is None
    assert not h.can_go_back()
    assert not h.can_go_forward()
    assert h.back() is None


def test_favorites_round_trip(tmp_path):
    file = tmp_path / "favs"
    fav = Favorites(file)
    fav.add("/one/")
    fav.add("/two/")
    fav.add("/one/")
    assert fav.paths == ["/one/", "/two/"]
    assert file.read_text() == "/one/\n/two/\n"

    loaded = Favorites(file)
    assert loaded.load() == ["/one/", "/two/"]
    assert "/two/" in loaded
    assert len(loaded) == 2


def test_favorites_load_skips_blanks_and_duplicates(tmp_path):
    file = tmp_path / "favs"
    file.write_text("/x/\n\n/y/\n/x/\n")
    fav = Favorites(file)
    assert fav.load() == ["/x/", "/y/"]


def test_favorites_load_missing_file(tmp_path):
    fav = Favorites(tmp_path / "absent")
    assert fav.load() == []


def test_favorites_remove(tmp_path):
    file = tmp_path / "favs"
    fav = Favorites(file)
    fav.add("/one/")
    fav.add("/two/")
    fav.remove("/one/")
    assert list(fav) == ["/two/"]
    assert file.read_text() == "/two/\n"
    with pytest.raises(ValueError):
        fav.remove("/missing/")


def test_favorites_save_failure(tmp_path):
    fav = Favorites(tmp_path / "no" / "such" / "dir" / "favs")
    fav.paths.append("/a/")
    assert fav.save() is False