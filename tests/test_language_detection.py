from pathlib import Path

from code2xml.constants import SNIFF_BYTES
from code2xml.language_detection import get_language_from_path, is_text_file


def test_language_is_lowercased_extension():
    assert get_language_from_path(Path("src/Main.PY")) == "py"
    assert get_language_from_path(Path("app.config.ts")) == "ts"


def test_language_empty_without_extension():
    assert get_language_from_path(Path("Makefile")) == ""
    assert get_language_from_path(Path(".gitignore")) == ""


def test_text_file_detection(tmp_path):
    text = tmp_path / "a.txt"
    text.write_text("plain text")
    binary = tmp_path / "b.bin"
    binary.write_bytes(b"\x7fELF\x00\x01")
    empty = tmp_path / "empty"
    empty.write_bytes(b"")

    assert is_text_file(text)
    assert not is_text_file(binary)
    assert is_text_file(empty)


def test_nul_after_sniff_window_is_text(tmp_path):
    late = tmp_path / "late.txt"
    late.write_bytes(b"a" * SNIFF_BYTES + b"\x00")
    assert is_text_file(late)


def test_missing_file_is_not_text(tmp_path):
    assert not is_text_file(tmp_path / "nope")
