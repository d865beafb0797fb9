from ftprintf.demo import main


def _lines(capsys):
    assert main([]) == 0
    return capsys.readouterr().out.splitlines()


def _line(lines, prefix):
    matches = [line for line in lines if line.startswith(prefix)]
    assert len(matches) == 1, prefix
    return matches[0][len(prefix):]


def test_headings_in_order(capsys):
    lines = _lines(capsys)
    headings = [
        "STRING TEST:",
        "CHAR TEST:",
        "INT TEST:",
        "POINTER TEST:",
        "HEX TEST:",
        "UNSIGNED TEST:",
        "INVALID SPEC TEST:",
        "TOTAL CHARS TEST",
        "WRITE ERROR TEST",
    ]
    positions = [lines.index(h) for h in headings]
    assert positions == sorted(positions)


def test_string_and_char_lines(capsys):
    lines = _lines(capsys)
    assert "string 1: hello" in lines
    assert "string 2: hello" in lines
    assert "char 1: w" in lines
    assert "char 2: w" in lines


def test_pairs_agree(capsys):
    lines = _lines(capsys)
    for label in ("num ", "ptr ", "print hex ", "print unsigned "):
        assert _line(lines, label + "1") == _line(lines, label + "2")


def test_int_limits(capsys):
    lines = _lines(capsys)
    assert _line(lines, "num 1: ") == "-42, 0, 42, 2147483647, -2147483648"


def test_pointer_line_has_nil_for_none(capsys):
    lines = _lines(capsys)
    fields = _line(lines, "ptr 1:").split(" ")
    assert fields[2] == "(nil)"
    assert all(f.startswith("0x") for f in fields[:2])


def test_invalid_specifiers(capsys):
    lines = _lines(capsys)
    assert lines.count("percent 1 %") == 2
    index = lines.index("2abc %z")
    assert lines[index + 1] == str(len("2abc %z\n"))


def test_totals_agree(capsys):
    lines = _lines(capsys)
    total = _line(lines, "total: ")
    assert total == _line(lines, "total2: ")
    assert total == str(len("1one,two,3,42\n"))


def test_write_errors_report_failure(capsys):
    lines = _lines(capsys)
    tail = lines[lines.index("WRITE ERROR TEST") + 1:]
    assert tail == ["1-1", "2-1"] * 8