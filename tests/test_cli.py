"""Tests for the unistring CLI."""
import pytest
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))
from unistring.cli import main


@pytest.fixture
def no_config(tmp_path, monkeypatch):
    monkeypatch.setenv("UNISTRING_CONFIG", str(tmp_path / "absent.yaml"))


def run(capsys, *argv):
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err


def test_length(capsys, no_config):
    assert run(capsys, "length", "e\u0301x") == (0, "2\n", "")


def test_slice(capsys, no_config):
    code, out, _ = run(capsys, "slice", "gleam", "-2", "2")
    assert code == 0
    assert out == "am\n"


def test_split_and_graphemes(capsys, no_config):
    _, out, _ = run(capsys, "split", "home/a/b/", "--on", "/")
    assert out == "home\na\nb\n\n"
    _, out, _ = run(capsys, "graphemes", "ab")
    assert out == "a\nb\n"


def test_pad(capsys, no_config):
    _, out, _ = run(capsys, "pad-left", "121", "5", "--with", ".")
    assert out == "..121\n"
    _, out, _ = run(capsys, "pad-right", "121", "5")
    assert out == "121  \n"


def test_pad_uses_config(capsys, tmp_path, monkeypatch):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text('pad_with: "0"\n', encoding="utf-8")
    monkeypatch.setenv("UNISTRING_CONFIG", str(cfg))
    _, out, _ = run(capsys, "pad-left", "7", "3")
    assert out == "007\n"


def test_pad_with_empty_fails(capsys, no_config):
    code, out, err = run(capsys, "pad-left", "121", "5", "--with", "")
    assert code == 1
    assert out == ""
    assert "pad-left" in err


def test_case_and_reverse(capsys, no_config):
    assert run(capsys, "capitalise", "mamouna")[1] == "Mamouna\n"
    assert run(capsys, "upper", "abc")[1] == "ABC\n"
    assert run(capsys, "lower", "ABC")[1] == "abc\n"
    assert run(capsys, "reverse", "stressed")[1] == "desserts\n"


def test_codepoints(capsys, no_config):
    assert run(capsys, "codepoints", "a\u00e9")[1] == "U+0061 U+00E9\n"


def test_replace_crop_compare(capsys, no_config):
    assert run(capsys, "replace", "a.b.c", ".", "-")[1] == "a-b-c\n"
    assert run(capsys, "crop", "The Lone Gunmen", "Lone")[1] == "Lone Gunmen\n"
    assert run(capsys, "compare", "a", "b")[1] == "LT\n"


def test_requires_subcommand(no_config):
    with pytest.raises(SystemExit):
        main([])


def test_bad_config_types_fall_back(capsys, tmp_path, monkeypatch):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("log_level: 10\npad_with: 0\n", encoding="utf-8")
    monkeypatch.setenv("UNISTRING_CONFIG", str(cfg))
    assert run(capsys, "length", "abc")[:2] == (0, "3\n")
    assert run(capsys, "pad-left", "7", "3")[:2] == (0, "  7\n")


def test_log_level_flag(capsys, no_config):
    assert run(capsys, "--log-level", "debug", "length", "ab")[:2] == (0, "2\n")
    with pytest.raises(SystemExit):
        main(["--log-level", "chatty", "length", "ab"])
