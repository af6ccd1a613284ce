import pytest

from vdomhtml.scan import (
    Stream,
    find,
    find4,
    is_closing,
    is_ident,
    matches_case_insensitive,
    search_non_ident,
    to_lower,
)

SPACE = ord(" ")


def test_matches_case_insensitive():
    assert matches_case_insensitive(b"hTmL", b"html")
    assert not matches_case_insensitive(b"hTmLs", b"html")
    assert not matches_case_insensitive(b"hTmy", b"html")
    assert not matches_case_insensitive(b"/Tmy", b"html")


def test_string_search():
    assert find(b"a", SPACE) is None
    assert find(b"", SPACE) is None
    assert find(b"a ", SPACE) == 1
    assert find(b"abcd ", SPACE) == 4
    assert find(b"ab cd ", SPACE) == 2
    assert find(b"abcdefgh ", SPACE) == 8
    assert find(b"abcdefghi ", SPACE) == 9
    assert find(b"abcdefghi", SPACE) is None
    assert find(b"abcdefghiabcdefghi .", SPACE) == 18
    assert find(b"abcdefghiabcdefghi.", SPACE) is None

    count = 1000
    long = b"a" * count + b"b"
    assert find(long, ord("b")) == count


NEEDLE = b"abcd"


@pytest.mark.parametrize(
    "haystack, expected",
    [
        (b"e", None),
        (b"a", 0),
        (b"ea", 1),
        (b"ef", None),
        (b"ef a", 3),
        (b"ef g", None),
        (b"ef ghijk", None),
        (b"ef ghijkl", None),
        (b"ef ghijkla", 9),
        (b"ef ghiajklm", 6),
        (b"ef ghibjklm", 6),
        (b"ef ghicjklm", 6),
        (b"ef ghidjklm", 6),
        (b"ef ghijklmnopqrstua", 18),
        (b"ef ghijklmnopqrstub", 18),
        (b"ef ghijklmnopqrstuc", 18),
        (b"ef ghijklmnopqrstud", 18),
        (b"ef ghijklmnopqrstu", None),
    ],
)
def test_string_search_4(haystack, expected):
    assert find4(haystack, NEEDLE) == expected


@pytest.mark.parametrize(
    "haystack, expected",
    [
        (b"this-is-a-very-long-identifier<", 30),
        (b"0123456789Abc_-<", 15),
        (b"0123456789Abc-<", 14),
        (b"0123456789Abcdef_-<", 18),
        (b"", None),
        (b"short", None),
        (b"short_<", 6),
        (b"0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-_", None),
        (b"0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-_<", 64),
        (b"0123456789ab<defghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-_<", 12),
    ],
)
def test_search_non_ident(haystack, expected):
    assert search_non_ident(haystack) == expected


def test_is_ident():
    assert all(is_ident(c) for c in b"azAZ09-_:+/")
    assert not any(is_ident(c) for c in b"< >=\"'!.")


def test_to_lower():
    assert bytes(to_lower(c) for c in b"DocType-1") == b"doctype-1"


def test_is_closing():
    assert is_closing(ord("/"))
    assert is_closing(ord(">"))
    assert not is_closing(ord("<"))


def test_stream_expect_and_skip():
    s = Stream(b"abc")
    assert s.current() == ord("a")
    assert s.expect_and_skip(ord("b")) is None
    assert s.idx == 0
    assert s.expect_and_skip(ord("a")) == ord("a")
    assert s.idx == 1
    assert s.expect_oneof_and_skip(b"xy") is None
    assert s.expect_oneof_and_skip(b"xb") == ord("b")
    assert s.expect_and_skip_cond(ord("c"))
    assert s.is_eof()
    assert s.current() is None
    assert s.expect_and_skip(ord("c")) is None


def test_stream_advance():
    s = Stream(b"abcdef")
    assert len(s) == 6
    s.advance()
    s.advance_by(3)
    assert s.idx == 4
    assert s.current() == ord("e")
    s.advance_by(5)
    assert s.is_eof()


def test_stream_slices():
    s = Stream(b"abcdef")
    assert s.slice(1, 3) == b"bc"
    with pytest.raises(IndexError):
        s.slice(2, 10)
    assert s.slice_checked(2, 10) == b"cdef"
    s.advance_by(4)
    assert s.slice_len(4, 2) == b"ef"
    assert s.slice_len(4, 100) == b"ef"
    assert s.slice_len(0, 1) == b"abcde"