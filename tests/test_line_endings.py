import pytest

from backend.line_endings import LineEndingMode, apply_line_ending


@pytest.mark.parametrize(
    "mode, expected",
    [
        (LineEndingMode.LF, "a\nb\n\nc"),
        (LineEndingMode.CR, "a\rb\r\rc"),
        (LineEndingMode.CRLF, "a\r\nb\r\n\r\nc"),
    ],
)
def test_apply_line_ending(mode, expected):
    assert apply_line_ending("a\nb\n\nc", mode) == expected


def test_apply_line_ending_leaves_other_characters():
    text = "tab\there ünï \x00 end"
    assert apply_line_ending(text, LineEndingMode.CRLF) == text


def test_labels():
    assert LineEndingMode.LF.label == "\\n"
    assert LineEndingMode.CR.label == "\\r"
    assert LineEndingMode.CRLF.label == "\\r\\n"


@pytest.mark.parametrize(
    "value, expected",
    [
        (LineEndingMode.CR, LineEndingMode.CR),
        ("crlf", LineEndingMode.CRLF),
        (" LF ", LineEndingMode.LF),
        ("0", LineEndingMode.LF),
        ("1", LineEndingMode.CR),
        (2, LineEndingMode.CRLF),
    ],
)
def test_parse(value, expected):
    assert LineEndingMode.parse(value) is expected


@pytest.mark.parametrize("value", ["3", 7, "windows", None, True, ""])
def test_parse_rejects_unknown(value):
    with pytest.raises(ValueError):
        LineEndingMode.parse(value)
