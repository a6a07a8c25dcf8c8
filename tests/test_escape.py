import pytest

from pyinifile import IniConfig, escape, unescape


@pytest.mark.parametrize("raw, escaped", [
    ("a\tb", "a\\tb"),
    ("nul\0", "nul\\0"),
    ("x\r\ny", "x\\r\\ny"),
    ("C:\\temp", "C:\\\\temp"),
    ("plain", "plain"),
])
def test_escape(raw, escaped):
    assert escape(raw) == escaped
    assert unescape(escaped) == raw


def test_unknown_sequences_pass_through():
    assert unescape("\\q and \\") == "\\q and \\"


@pytest.mark.parametrize("raw", [
    "", "\\", "\\\n", "\\n", "\\\\n", "end\\", "\\0\0", "\t\\t",
])
def test_unescape_inverts_escape(raw):
    assert unescape(escape(raw)) == raw


def test_escape_mode_gates_both_ways():
    on, off = IniConfig(), IniConfig(escape=False)
    assert on.escape_value("a\nb") == "a\\nb"
    assert on.unescape_value("a\\nb") == "a\nb"
    assert off.escape_value("a\nb") == "a\nb"
    assert off.unescape_value("a\\nb") == "a\\nb"
