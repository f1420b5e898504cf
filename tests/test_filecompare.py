from knrtools.filecompare import first_difference, main


def test_identical_inputs_have_no_difference():
    lines = ["a\n", "b\n"]
    assert first_difference(lines, list(lines)) is None


def test_difference_reports_line_and_both_texts():
    assert first_difference(["a\n", "b\n"], ["a\n", "c\n"]) == (2, "b\n", "c\n")


def test_first_mismatch_wins():
    diff = first_difference(["x", "y"], ["z", "w"])
    assert (diff.first, diff.second) == ("x", "z")
    assert diff.line == 1


def test_comparison_stops_at_shorter_input():
    assert first_difference(["a\n"], ["a\n", "b\n"]) is None
    assert first_difference(["a\n", "b\n"], ["a\n"]) is None


def test_accepts_generators():
    diff = first_difference(iter(["same", "one"]), (s for s in ["same", "two"]))
    assert diff.second == "two"


def test_main_prints_difference(tmp_path, capsys):
    left = tmp_path / "left.txt"
    right = tmp_path / "right.txt"
    left.write_text("a\nb\n")
    right.write_text("a\nc\n")
    assert main([str(left), str(right)]) == 0
    assert capsys.readouterr().out == "\t2\ts: b\n\t2\ts2: c\n"


def test_main_identical_files_print_nothing(tmp_path, capsys):
    path = tmp_path / "same.txt"
    path.write_text("a\nb\n")
    assert main([str(path), str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_main_too_few_arguments(capsys):
    assert main(["only-one"]) == 1
    assert "few arguments" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    other = tmp_path / "other.txt"
    other.write_text("x\n")
    assert main([str(missing), str(other)]) == 1
    out = capsys.readouterr().out
    assert "can't open" in out
    assert str(missing) in out