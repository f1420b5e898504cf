import io

from knrtools.keywords import KEYWORDS, count_keywords, main


def test_counts_keywords():
    assert count_keywords(["int\n", "x\n", "int\n", "while\n"]) == {"int": 2, "while": 1}


def test_non_keywords_are_ignored():
    assert count_keywords(["hello\n", "42\n", "Int\n"]) == {}


def test_whole_line_is_the_word():
    assert count_keywords(["int x\n", "int \n"]) == {}


def test_stops_at_empty_line():
    assert count_keywords(["int\n", "\n", "int\n"]) == count_keywords(["int\n"])


def test_result_in_alphabetical_order():
    result = count_keywords(["while\n", "auto\n", "int\n", "char\n"])
    assert list(result) == sorted(result)
    assert set(result) <= set(KEYWORDS)


def test_every_keyword_is_counted():
    result = count_keywords(word + "\n" for word in KEYWORDS)
    assert set(result) == set(KEYWORDS)
    assert all(n == 1 for n in result.values())


def test_main_prints_running_counts(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("int\nint\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "       1 int\n       2 int\n"