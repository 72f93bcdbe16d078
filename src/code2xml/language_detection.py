"""Code fence language tags and text/binary detection."""

import pathlib

from code2xml.constants import SNIFF_BYTES


def get_language_from_path(file_path: pathlib.Path) -> str:
    """Return the code fence language tag for a file.

    The tag is the lowercased extension without its leading dot, so most
    Markdown renderers pick the right highlighter.

    Args:
        file_path: Path to the file

    Returns:
        Language tag, or an empty string for files without an extension

    Examples:
        >>> get_language_from_path(Path("main.PY"))
        'py'
        >>> get_language_from_path(Path("Makefile"))
        ''
    """
    return file_path.suffix[1:].lower()


def is_text_file(file_path: pathlib.Path) -> bool:
    """Sniff the head of a file for NUL bytes.

    Args:
        file_path: Path to the file

    Returns:
        True for empty files and files whose first SNIFF_BYTES bytes contain
        no NUL byte, False for binaries and unreadable files
    """
    try:
        with open(file_path, "rb") as f:
            head = f.read(SNIFF_BYTES)
    except OSError:
        return False
    return b"\x00" not in head
