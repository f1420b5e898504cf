import pytest

from knrtools.textops import (
    lookup,
    main,
    reverse,
    squeeze,
    strcat,
    strcmp,
    strend,
    strncat,
    strncmp,
    strncpy,
    strrindex,
    to_lower,
    to_upper,
)


def test_strcat_joins():
    result = strcat("hi", "hi")
    assert result.startswith("hi") and result.endswith("hi")
    assert len(result) == 4


def test_strend_true_and_false():
    assert strend("string, end", "n") is False
    assert strend("string, end", "end") is True
    assert strend("n", "string, end") is False


@pytest.mark.parametrize("n", [0, 1, 3, 5, 10])
def test_strncpy_prefix(n):
    src = "12345"
    result = strncpy(src, n)
    assert len(result) == min(n, len(src))
    assert src.startswith(result)


def test_strncpy_negative_raises():
    with pytest.raises(ValueError):
        strncpy("abc", -1)


def test_strncat_appends_prefix():
    result = strncat("1234", "12345", 2)
    assert result.startswith("1234")
    assert len(result) == 6
    assert "12345".startswith(result[4:])


def test_strncat_negative_raises():
    with pytest.raises(ValueError):
        strncat("a", "b", -2)


def test_strncmp_source_example():
    assert strncmp("1234", "12345", 5) < 0
    assert strncmp("1234", "12345", 4) == 0
    assert strncmp("12345", "1234", 5) > 0


def test_strcmp_orders():
    assert strcmp("hello", "hello") == 0
    assert strcmp("a", "b") < 0
    assert strcmp("b", "a") > 0
    assert strcmp("", "") == 0


@pytest.mark.parametrize("pair", [("abc", "abd"), ("hi", "hello"), ("x", "")])
def test_strcmp_antisymmetric(pair):
    a, b = pair
    assert strcmp(a, b) == -strcmp(b, a)


def test_reverse_source_example():
    assert reverse("h3ll0") == "0ll3h"


@pytest.mark.parametrize("s", ["", "a", "abc", "h3ll0"])
def test_reverse_involution(s):
    assert reverse(reverse(s)) == s


def test_squeeze_source_example():
    assert squeeze("abcdf", "cd") == "abf"


def test_squeeze_removes_all_adjacent():
    result = squeeze("aabbccdd", "bc")
    assert not set(result) & set("bc")
    assert result.count("a") == 2 and result.count("d") == 2


def test_strrindex_rightmost():
    s = "hi there, hi again"
    pos = strrindex(s, "hi")
    assert s[pos:pos + 2] == "hi"
    assert "hi" not in s[pos + 1:]


def test_case_mapping():
    assert to_lower("A") == "a"
    assert to_upper("a") == "A"
    assert to_lower("1") == "1"
    assert to_upper("?") == "?"


def test_case_round_trip():
    for ch in "abcxyz":
        assert to_lower(to_upper(ch)) == ch


def test_lookup():
    words = ["hi", "hello", "good bye"]
    assert lookup("hello", words) == 1
    assert lookup("hi", words) == 0
    assert lookup("nope", words) == -1


def test_main_len(capsys):
    assert main(["len", "hello"]) == 0
    out = capsys.readouterr().out
    assert f"the string length is: {len('hello')}" in out


def test_main_bad_option(capsys):
    assert main(["size", "hello"]) == 0
    assert "incorrect" in capsys.readouterr().out


def test_main_too_few(capsys):
    assert main(["len"]) == 1
    assert "too few arguments" in capsys.readouterr().out