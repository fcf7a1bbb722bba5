import pytest

from fluchooser.patterns import (
    ALL_FILES_LABEL,
    expand_extensions,
    filename_match,
    is_probably_a_pattern,
    parse_filter,
    strip_patterns,
)


@pytest.mark.parametrize(
    "name, pattern, expected",
    [
        ("foo.txt", "*", True),
        ("foo.txt", "*.txt", True),
        ("foo.txt", "*.cpp", False),
        ("abc", "a?c", True),
        ("ac", "a?c", False),
        ("abc", "abc", True),
        ("abcd", "abc", False),
        ("", "", True),
        ("a", "", False),
        ("bat", "[bc]at", True),
        ("rat", "[bc]at", False),
        ("mat", "[a-m]at", True),
        ("zat", "[a-m]at", False),
        ("zat", "[!a-m]at", True),
        ("bat", "[^a-m]at", False),
        ("foo.cpp", "*.{cpp,h}", True),
        ("foo.h", "*.{cpp|h}", True),
        ("foo.c", "*.{cpp,h}", False),
        ("a*b", "a\\*b", True),
        ("axb", "a\\*b", False),
    ],
)
def test_filename_match(name, pattern, expected):
    assert filename_match(name, pattern, True) is expected


def test_match_case_sensitivity():
    assert filename_match("FOO.TXT", "*.txt", True) is False
    assert filename_match("FOO.TXT", "*.txt", False) is True


def test_every_name_matches_star():
    for name in ["", "a", ".hidden", "with space.tar.gz"]:
        assert filename_match(name, "*", True)


def test_is_probably_a_pattern():
    assert is_probably_a_pattern("*.c")
    assert is_probably_a_pattern("a;b")
    assert is_probably_a_pattern("file[1]")
    assert not is_probably_a_pattern("readme.txt")
    assert not is_probably_a_pattern("")


def test_parse_filter_default():
    assert parse_filter(None) == [(ALL_FILES_LABEL, "*")]
    assert parse_filter("") == [(ALL_FILES_LABEL, "*")]


def test_parse_filter_described_braces():
    text = "C++ Files (*.{cpp,h})"
    assert parse_filter(text) == [(text, "cpp,h"), (ALL_FILES_LABEL, "*")]


def test_parse_filter_bare_and_multiple():
    result = parse_filter("*.txt|Images (*.png);\t*.{c,h}")
    assert result == [
        ("*.txt", "txt"),
        ("Images (*.png)", "png"),
        ("*.{c,h}", "c,h"),
        (ALL_FILES_LABEL, "*"),
    ]


def test_parse_filter_star_not_duplicated():
    result = parse_filter("*|*.txt")
    assert result == [(ALL_FILES_LABEL, "*"), ("*.txt", "txt")]
    assert [ext for _, ext in result].count("*") == 1


def test_parse_filter_skips_malformed_and_strips_space():
    result = parse_filter("No pattern here|  *.py|Bad (foo)")
    assert result == [("*.py", "py"), (ALL_FILES_LABEL, "*")]


def test_parse_filter_extensions_expand_to_matching_globs():
    for _, ext in parse_filter("Sources (*.{cpp,h})"):
        globs = expand_extensions(ext)
        if ext == "*":
            assert globs == ["*"]
        else:
            assert any(filename_match("main.cpp", g, True) for g in globs)
            assert not any(filename_match("main.py", g, True) for g in globs)


def test_strip_patterns():
    assert strip_patterns("*.c|*.h") == ["*.c", "*.h"]
    assert strip_patterns("*.c; *.h") == ["*.c", "*.h"]
    assert strip_patterns("a;b") == ["a", "b"]
    assert strip_patterns("readme.txt") == []
    assert strip_patterns("") == []


def test_expand_extensions():
    assert expand_extensions("cpp,h") == ["*.cpp", "*.h"]
    assert expand_extensions("*") == ["*"]
    assert expand_extensions("txt,*") == ["*.txt", "*"]
    assert expand_extensions("") == []
    assert expand_extensions("a,") == ["*.a"]