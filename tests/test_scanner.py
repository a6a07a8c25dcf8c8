import pytest

from pyinifile import IniConfig, ParseError, loads


def test_sections_and_pairs():
    doc = loads("[a]\nx = 1\ny=2\n[b]\nz =  3  \n")
    assert doc.to_dict() == {"a": {"x": "1", "y": "2"}, "b": {"z": "3"}}


def test_duplicate_section_merged():
    doc = loads("[a]\nx=1\n[a]\ny=2\n")
    assert doc.sections() == ["a"]
    assert doc["a"].to_dict() == {"x": "1", "y": "2"}


def test_duplicate_parameter_overwritten():
    assert loads("[a]\nx=1\nx=2\n")["a"].to_dict() == {"x": "2"}


def test_multiline_quoted_value():
    doc = loads('[a]\nv = "line1\nline2"\n')
    assert doc["a"]["v"] == "line1\nline2"


def test_quoted_value_keeps_whitespace_and_specials():
    doc = loads('[a]\nv = "  a = b ; c  "\n')
    assert doc["a"]["v"] == "  a = b ; c  "


def test_escaped_quote_inside_quotes():
    doc = loads('[a]\nv = "say \\"hi\\""\n')
    assert doc["a"]["v"] == 'say "hi"'


def test_quoted_runs_mixed_with_text():
    doc = loads('[a]\nv = "a" b "c"\n')
    assert doc["a"]["v"] == "a b c"


def test_unmatched_quote():
    with pytest.raises(ParseError) as e:
        loads('[a]\nv = "unterminated\n')
    assert e.value.reason == "unmatched quote"
    assert e.value.lineno == 2
    assert e.value.line == 'v = "unterminated'


def test_comments_and_blank_lines_ignored():
    doc = loads("; top\n\n[a]\n  # indented\nx = 1 ; trailing\n\n   \n")
    assert doc.to_dict() == {"a": {"x": "1"}}


def test_comments_never_create_properties():
    assert len(loads("; just\n# comments\n\n")) == 0


def test_escaped_special_chars():
    doc = loads("[a]\nk = a\\;b\\#c\\=d\\[e\\]\n")
    assert doc["a"]["k"] == "a;b#c=d[e]"


def test_escaped_bracket_starts_a_name():
    doc = loads("\\[odd] = 1\n")
    assert doc["global"]["[odd]"] == "1"


def test_later_separators_belong_to_value():
    assert loads("[a]\nurl = a=b=c\n")["a"]["url"] == "a=b=c"


def test_empty_value():
    assert loads("[a]\nk =\n")["a"]["k"] == ""


def test_missing_name():
    with pytest.raises(ParseError) as e:
        loads("[a]\n = value\n")
    assert e.value.reason == "missing property name before separator"


def test_line_without_separator():
    with pytest.raises(ParseError) as e:
        loads("[a]\njunk\n")
    assert e.value.reason == "could not parse line"
    assert e.value.lineno == 2
    assert e.value.line == "junk"


@pytest.mark.parametrize("text", ["[a\nx=1\n", "[a] trailing\n"])
def test_malformed_header(text):
    with pytest.raises(ParseError) as e:
        loads(text)
    assert e.value.reason == "malformed section header"
    assert e.value.lineno == 1


def test_empty_section_name():
    with pytest.raises(ParseError):
        loads("[  ]\n")


def test_header_with_indent_and_comment():
    doc = loads("  [ a ]  ; note\nx=1\n")
    assert doc.sections() == ["a"]


def test_error_reports_line():
    with pytest.raises(ParseError) as e:
        loads("[a]\nx=1\n\n[b\n")
    assert e.value.lineno == 4
    assert e.value.line == "[b"
    assert "line 4" in str(e.value)


def test_parameters_before_header_go_to_default_section():
    doc = loads("x = 1\n[a]\ny = 2\n")
    assert doc.to_dict() == {"global": {"x": "1"}, "a": {"y": "2"}}

    doc = loads("x = 1\n", IniConfig(default_section="root"))
    assert doc.sections() == ["root"]


def test_values_unescaped():
    doc = loads("[a]\nv = tab\\there\\nnext\n")
    assert doc["a"]["v"] == "tab\there\nnext"


def test_values_kept_without_escape_mode():
    doc = loads("[a]\nv = tab\\there\n", IniConfig(escape=False))
    assert doc["a"]["v"] == "tab\\there"


def test_unknown_sequences_kept():
    doc = loads("[a]\npath = C:\\Games\\yr\n")
    assert doc["a"]["path"] == "C:\\Games\\yr"


def test_line_continuation():
    doc = loads("[a]\nv = first \\\n    second\nw = 2\n")
    assert doc["a"].to_dict() == {"v": "first\nsecond", "w": "2"}


def test_continuation_outside_value():
    with pytest.raises(ParseError) as e:
        loads("[a]\nk \\\n= v\n")
    assert e.value.reason == "line continuation outside of a value"


def test_crlf_line_endings():
    doc = loads('[a]\r\nx = 1\r\ny = "2\r\n3"\r\n')
    assert doc["a"].to_dict() == {"x": "1", "y": "2\n3"}


def test_custom_separator_and_comment():
    cfg = IniConfig(comment="!", separator=":")
    doc = loads("[a]\nx: 1 ! note\n# not a comment: y\n", cfg)
    assert doc["a"].to_dict() == {"x": "1", "# not a comment": "y"}
    assert doc.config is cfg


def test_no_input():
    assert loads("").to_dict() == {}
