import pytest

from knrtools.miniformat import echo, main, minprintf


def test_plain_text_passes_through():
    assert minprintf("hello\n") == "hello\n"


def test_integer_conversion():
    assert minprintf("%d", 42) == "42"
    assert minprintf("%ld\n", 10) == "10\n"


def test_string_conversion():
    assert minprintf("%s and %s", "a", "b") == "a and b"


def test_float_conversion():
    assert minprintf("%f", 1.5) == "1.500000"


def test_unsigned_conversion_wraps_negative():
    assert minprintf("%ud", -1) == "4294967295"
    assert minprintf("%ud", 7) == "7"


def test_long_without_d_drops_character():
    assert minprintf("%lx") == ""


def test_unknown_conversion_written_as_is():
    assert minprintf("100%%") == "100%"
    assert minprintf("100%") == "100"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        minprintf("%d %d", 1)


def test_integer_conversion_rejects_float():
    with pytest.raises(TypeError):
        minprintf("%d", 1.5)


def test_echo_joins_with_spaces():
    assert echo(["a", "b", "c"]) == "a b c"
    assert echo([]) == ""


def test_main_prints_arguments(capsys):
    assert main(["hi", "there"]) == 0
    assert capsys.readouterr().out == "hi there\n"