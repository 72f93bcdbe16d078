"""Data models for code2xml."""

import enum
import pathlib
from dataclasses import dataclass

from code2xml.constants import DEFAULT_FORMAT


class RequestKind(enum.Enum):
    """What the launched path points at."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class ConversionRequest:
    """A validated request to flatten one path into a document.

    Attributes:
        source: Resolved absolute path of the selected file or directory
        kind: Whether the source is a single file or a directory
        save_inside: Place the document inside the source directory (-i)
        output_format: Key of OUTPUT_FORMATS
        output_override: Explicit output path, bypassing placement rules
        use_gitignore: Apply the source root's .gitignore while walking
    """

    source: pathlib.Path
    kind: RequestKind
    save_inside: bool = False
    output_format: str = DEFAULT_FORMAT
    output_override: pathlib.Path | None = None
    use_gitignore: bool = True


@dataclass(frozen=True)
class FileEntry:
    """One text file ready to be rendered."""

    path: pathlib.Path
    relative_path: str
    language: str
    content: str


@dataclass
class ConversionSummary:
    output_path: pathlib.Path
    files_written: int = 0
    files_skipped: int = 0
