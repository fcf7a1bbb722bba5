import time

import pytest

from fluchooser.paths import (
    cleanup_path,
    format_date,
    format_size,
    parent_dir,
    split_dir_file,
    win2unix,
)


def test_win2unix_replaces_backslashes():
    result = win2unix("a\\b\\c")
    assert "\\" not in result
    assert result.split("/") == ["a", "b", "c"]


def test_win2unix_keeps_forward_slashes():
    assert win2unix("/usr/lib/") == "/usr/lib/"


def test_cleanup_clean_path_unchanged():
    assert cleanup_path("/usr/lib/") == "/usr/lib/"


@pytest.mark.parametrize("messy", ["/usr/./lib/", "/usr//lib/", "/usr/share/../lib/"])
def test_cleanup_normalises(messy):
    assert cleanup_path(messy) == "/usr/lib/"


def test_cleanup_converts_backslashes():
    assert cleanup_path("\\usr\\lib\\") == "/usr/lib/"


def test_cleanup_is_idempotent():
    once = cleanup_path("/a//b/./c/../d/")
    assert cleanup_path(once) == once


def test_format_size_empty_directory():
    assert format_size(0, True) == ""


def test_format_size_bytes():
    assert format_size(0, False) == "0 bytes"


def test_format_size_kilobytes():
    assert format_size(1024, False) == "1.0 KB"


@pytest.mark.parametrize(
    "size, suffix",
    [(500, " bytes"), (4096, " KB"), (3 << 20, " MB"), (5 << 30, " GB")],
)
def test_format_size_units(size, suffix):
    assert format_size(size, False).endswith(suffix)


def test_format_size_nonempty_directory_has_text():
    assert format_size(4096, True) == format_size(4096, False)


def test_format_date_example():
    assert format_date("Wed Mar 19 07:23:11 2003") == "3/19/2003 7:23 AM"


def test_format_date_afternoon_is_pm():
    assert format_date("Mon Jun  2 13:45:00 2003").endswith("PM")


def test_format_date_none():
    assert not format_date(None)


def test_format_date_timestamp_matches_ctime():
    stamp = 1_000_000_000
    assert format_date(stamp) == format_date(time.ctime(stamp))


def test_format_date_malformed():
    with pytest.raises(ValueError):
        format_date("garbage")


def test_parent_dir_of_root_is_root():
    assert parent_dir("/") == "/"


def test_parent_dir_one_level():
    assert parent_dir("/home/") == "/"


def test_parent_dir_is_prefix():
    path = "/a/b/c/"
    parent = parent_dir(path)
    assert path.startswith(parent)
    assert parent.endswith("/")
    assert len(parent) < len(path)


def test_split_dir_file_round_trip():
    path = "/a/b/file.txt"
    directory, name = split_dir_file(path)
    assert directory + name == path
    assert name == "file.txt"
    assert directory.endswith("/")


def test_split_dir_file_directory():
    assert split_dir_file("/a/") == ("/a/", "")


def test_split_dir_file_no_slash():
    directory, name = split_dir_file("name")
    assert directory.startswith("name")
    assert directory.endswith("/")
    assert not name