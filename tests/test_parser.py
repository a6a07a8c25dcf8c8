import logging
from io import StringIO

import pytest

from pyinifile import IniConfig, IniParser, ParseError, dump, load, loads


SAMPLE = """\
; sample
[server]
host = example.org
motd = "hello
world"

[paths]
root = C:\\Games\\yr
"""


def test_read(tmp_path):
    path = tmp_path / "sample.ini"
    path.write_text(SAMPLE, encoding="utf-8")
    doc = IniParser(str(path)).read()
    assert doc.to_dict() == {
        "server": {"host": "example.org", "motd": "hello\nworld"},
        "paths": {"root": "C:\\Games\\yr"},
    }


def test_write_then_read(tmp_path):
    path = str(tmp_path / "out.ini")
    doc = loads(SAMPLE)
    assert IniParser(path).write(doc)
    assert load(path) == doc


def test_write_uses_document_config(tmp_path):
    path = tmp_path / "colon.ini"
    cfg = IniConfig(separator=":")
    doc = IniParser.readstream(StringIO("[a]\nx: 1\n"), cfg)
    assert dump(doc, str(path))
    assert path.read_text(encoding="utf-8") == "[a]\nx : 1\n\n"


def test_blank_lines_option(tmp_path):
    path = tmp_path / "tight.ini"
    doc = IniParser.readstream(StringIO("[a]\nx=1\n[b]\ny=2\n"))
    IniParser(str(path), blank_lines=0).write(doc)
    assert path.read_text(encoding="utf-8") == "[a]\nx = 1\n[b]\ny = 2\n"


def test_missing_file_is_none(tmp_path, caplog):
    assert load(str(tmp_path / "nope.ini")) is None
    assert "INI file not loaded" in caplog.text


def test_unwritable_path_is_false(tmp_path, caplog):
    doc = IniParser.readstream(StringIO("[a]\nx=1\n"))
    assert not IniParser(str(tmp_path)).write(doc)
    assert "INI file not saved" in caplog.text


def test_parse_error_propagates(tmp_path):
    path = tmp_path / "broken.ini"
    path.write_text('[a]\nv = "open\n', encoding="utf-8")
    with pytest.raises(ParseError):
        load(str(path))


def test_explicit_encoding(tmp_path):
    path = tmp_path / "latin.ini"
    path.write_bytes("[a]\nname = café\n".encode("latin-1"))
    doc = load(str(path), encoding="latin-1")
    assert doc["a"]["name"] == "café"


def test_undecodable_file_falls_back(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    path = tmp_path / "guess.ini"
    text = "[a]\nname = Le café était très agréable, même à l'été.\n"
    path.write_bytes(text.encode("latin-1"))
    doc = load(str(path))
    assert doc is not None
    assert doc.sections() == ["a"]
    assert len(doc["a"]["name"]) == len("Le café était très agréable, même à l'été.")
    assert str(path) in caplog.text


def test_restore(tmp_path):
    path = tmp_path / "sample.ini"
    path.write_text(SAMPLE, encoding="utf-8")
    handler = IniParser(str(path))
    doc = handler.read()
    original = doc.copy()
    doc.section("server")["host"] = "changed"
    doc.delete_section("paths")
    assert handler.restore(doc)
    assert doc == original


def test_restore_missing_file_keeps_document(tmp_path):
    doc = IniParser.readstream(StringIO("[a]\nx=1\n"))
    assert not IniParser(str(tmp_path / "nope.ini")).restore(doc)
    assert doc.to_dict() == {"a": {"x": "1"}}


def test_str():
    assert str(IniParser("a.ini", encoding="gbk")) == "INI file: a.ini (gbk)"
