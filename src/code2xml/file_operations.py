"""File system operations: request resolution, output placement and the tree walk."""

import os
import pathlib
import sys
from collections.abc import Iterator

import pathspec

from code2xml.constants import (
    ALLOWED_HIDDEN_DIRS,
    DEFAULT_FORMAT,
    FALLBACK_DOCUMENT_NAME,
    IGNORE_DIRS,
    IGNORE_EXTENSIONS,
    IGNORE_FILENAMES,
    MAX_FILE_SIZE,
    OUTPUT_FORMATS,
    TEMP_SUFFIX,
)
from code2xml.errors import ConversionError, PathNotFoundError, PermissionDeniedError
from code2xml.language_detection import get_language_from_path, is_text_file
from code2xml.models import ConversionRequest, FileEntry, RequestKind


def resolve_request(
    raw_path: str,
    save_inside: bool = False,
    output_format: str = DEFAULT_FORMAT,
    output_override: str | None = None,
    use_gitignore: bool = True,
) -> ConversionRequest:
    """Validate a launched path and classify it as a file or directory request.

    Args:
        raw_path: Path exactly as passed on the command line
        save_inside: Whether -i was given
        output_format: Key of OUTPUT_FORMATS
        output_override: Explicit output path, if any
        use_gitignore: Apply the source root's .gitignore

    Returns:
        ConversionRequest for the resolved path

    Raises:
        PathNotFoundError: The path does not exist
        PermissionDeniedError: The path exists but cannot be read
        ConversionError: The path could not be resolved for another reason
    """
    try:
        source = pathlib.Path(raw_path).resolve(strict=True)
    except (FileNotFoundError, NotADirectoryError):
        raise PathNotFoundError(raw_path) from None
    except PermissionError:
        raise PermissionDeniedError(raw_path) from None
    except OSError as e:
        raise ConversionError(f"Could not open {raw_path}: {e}") from e

    if source.is_dir():
        kind = RequestKind.DIRECTORY
        # Listing a directory needs both read and search permission
        readable = os.access(source, os.R_OK | os.X_OK)
    else:
        kind = RequestKind.FILE
        readable = os.access(source, os.R_OK)
    if not readable:
        raise PermissionDeniedError(raw_path)

    return ConversionRequest(
        source=source,
        kind=kind,
        save_inside=save_inside,
        output_format=output_format,
        output_override=pathlib.Path(output_override).resolve() if output_override else None,
        use_gitignore=use_gitignore,
    )


def get_document_name(source: pathlib.Path, output_format: str) -> str:
    """Name of the generated document, e.g. ``myproject.md``."""
    stem = source.name or FALLBACK_DOCUMENT_NAME
    return f"{stem}.{OUTPUT_FORMATS[output_format]}"


def get_output_path(request: ConversionRequest) -> pathlib.Path:
    """Decide where the document goes.

    Directories get the document beside them, or inside them with -i.
    Single files always get it beside them. An explicit output path wins.

    Args:
        request: The resolved conversion request

    Returns:
        Absolute path of the document to write
    """
    if request.output_override is not None:
        return request.output_override

    name = get_document_name(request.source, request.output_format)
    if request.kind is RequestKind.DIRECTORY and request.save_inside:
        return request.source / name
    return request.source.parent / name


def load_gitignore(root_dir: pathlib.Path) -> pathspec.PathSpec | None:
    """Load the .gitignore at the source root.

    Args:
        root_dir: Source directory

    Returns:
        PathSpec of the patterns, or None if there is no readable .gitignore
    """
    gitignore_path = root_dir / ".gitignore"
    if not gitignore_path.is_file():
        return None
    try:
        with open(gitignore_path, encoding="utf-8", errors="ignore") as f:
            return pathspec.PathSpec.from_lines(pathspec.patterns.GitWildMatchPattern, f)
    except OSError as e:
        print(f"⚠ Warning: Could not read .gitignore at {gitignore_path}: {e}", file=sys.stderr)
        return None


def is_ignored_dir(name: str) -> bool:
    """Whether a directory should be pruned from the walk."""
    if name.startswith(".") and len(name) > 1 and name not in ALLOWED_HIDDEN_DIRS:
        return True
    return name in IGNORE_DIRS


def is_ignored_file(file_path: pathlib.Path) -> bool:
    """Whether a file is excluded by name or extension alone."""
    name = file_path.name
    if name.lower() in IGNORE_FILENAMES:
        return True
    # Leftover temporary document from an interrupted run
    if name.startswith(".") and name.endswith(TEMP_SUFFIX):
        return True
    return file_path.suffix.lower() in IGNORE_EXTENSIONS


def iter_candidate_files(
    source: pathlib.Path, ignore_spec: pathspec.PathSpec | None = None
) -> Iterator[pathlib.Path]:
    """Walk a directory in sorted order, pruning ignored directories.

    Args:
        source: Directory to walk; it is never pruned itself
        ignore_spec: Optional .gitignore patterns relative to source

    Yields:
        Paths of files that pass the directory, name and extension filters
    """
    for root, dirs, files in os.walk(source, topdown=True):
        root_path = pathlib.Path(root)
        relative_root = root_path.relative_to(source)

        kept_dirs = []
        for d in sorted(dirs):
            if is_ignored_dir(d):
                continue
            if ignore_spec is not None:
                # Trailing slash so patterns like "logs/" match the directory
                relative_dir = (relative_root / d).as_posix() + "/"
                if ignore_spec.match_file(relative_dir):
                    continue
            kept_dirs.append(d)
        dirs[:] = kept_dirs

        for filename in sorted(files):
            file_path = root_path / filename
            if is_ignored_file(file_path):
                continue
            if ignore_spec is not None and ignore_spec.match_file(
                (relative_root / filename).as_posix()
            ):
                continue
            yield file_path


def display_path(path: str) -> str:
    """Make a path printable as UTF-8, replacing undecodable bytes with U+FFFD."""
    return os.fsencode(path).decode("utf-8", errors="replace")


def read_entry(
    file_path: pathlib.Path, relative_path: str, output_path: pathlib.Path
) -> FileEntry | None:
    """Read one candidate file into a FileEntry.

    Args:
        file_path: File to read
        relative_path: Path shown in the document heading
        output_path: Document being written, never included in itself

    Returns:
        FileEntry, or None when the file is the output document, too large,
        binary, blank, or unreadable
    """
    if file_path.name == output_path.name:
        return None
    try:
        if file_path.resolve() == output_path:
            return None
        if file_path.stat().st_size > MAX_FILE_SIZE:
            return None
    except OSError:
        return None

    if not is_text_file(file_path):
        return None

    try:
        data = file_path.read_bytes()
    except OSError as e:
        print(f"⚠ Warning: Could not read {relative_path}: {e}", file=sys.stderr)
        return None

    content = data.decode("utf-8", errors="replace")
    if not content.strip():
        return None

    return FileEntry(
        path=file_path,
        relative_path=relative_path,
        language=get_language_from_path(file_path),
        content=content,
    )


def collect_candidates(request: ConversionRequest) -> list[tuple[pathlib.Path, str]]:
    """List the files a request covers, paired with their display paths.

    Args:
        request: The resolved conversion request

    Returns:
        (file path, relative display path) pairs in walk order
    """
    if request.kind is RequestKind.FILE:
        if is_ignored_file(request.source):
            return []
        return [(request.source, display_path(request.source.name))]

    ignore_spec = load_gitignore(request.source) if request.use_gitignore else None
    return [
        (file_path, display_path(file_path.relative_to(request.source).as_posix()))
        for file_path in iter_candidate_files(request.source, ignore_spec)
    ]
