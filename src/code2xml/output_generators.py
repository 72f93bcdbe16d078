"""Document rendering and the conversion driver."""

import os
import pathlib
import re
import sys
import tempfile
from typing import TextIO
from xml.sax.saxutils import XMLGenerator

from tqdm import tqdm

from code2xml.constants import TEMP_SUFFIX
from code2xml.errors import ConversionError
from code2xml.file_operations import (
    collect_candidates,
    display_path,
    get_output_path,
    read_entry,
)
from code2xml.models import ConversionRequest, ConversionSummary, FileEntry

# Characters XML 1.0 cannot carry, even escaped
_XML_INVALID_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def _xml_safe(text: str) -> str:
    return _XML_INVALID_CHARS.sub("", text)


class MarkdownWriter:
    """Writes each file as a heading followed by a fenced code block."""

    def __init__(self, out: TextIO, project_name: str):
        self.out = out
        self.project_name = project_name

    def start(self):
        pass

    def write_entry(self, entry: FileEntry):
        self.out.write(f"## File: {entry.relative_path}\n\n")
        self.out.write(f"```{entry.language}\n")
        self.out.write(f"{entry.content}\n")
        self.out.write("```\n\n")

    def finish(self):
        pass


class XmlWriter:
    """Streams a ``<project>`` element with one ``<file>`` child per entry."""

    def __init__(self, out: TextIO, project_name: str):
        self.out = out
        self.project_name = project_name
        self._xml = XMLGenerator(out, encoding="utf-8", short_empty_elements=True)

    def start(self):
        self._xml.startDocument()
        self._xml.startElement("project", {"name": _xml_safe(self.project_name)})
        self._xml.ignorableWhitespace("\n")

    def write_entry(self, entry: FileEntry):
        self._xml.ignorableWhitespace("  ")
        self._xml.startElement(
            "file",
            {"path": _xml_safe(entry.relative_path), "language": _xml_safe(entry.language)},
        )
        self._xml.characters(_xml_safe(entry.content))
        self._xml.endElement("file")
        self._xml.ignorableWhitespace("\n")

    def finish(self):
        self._xml.endElement("project")
        self._xml.ignorableWhitespace("\n")
        self._xml.endDocument()


WRITERS = {
    "markdown": MarkdownWriter,
    "xml": XmlWriter,
}


def render_document(
    request: ConversionRequest,
    candidates: list[tuple[pathlib.Path, str]],
    output_path: pathlib.Path,
    out: TextIO,
    verbose: bool = False,
) -> ConversionSummary:
    """Render every readable candidate into an open text stream.

    Args:
        request: The resolved conversion request
        candidates: (file path, display path) pairs from collect_candidates
        output_path: Final document path, excluded from its own content
        out: Stream to write the document to
        verbose: Print each file as it is written

    Returns:
        ConversionSummary with written and skipped counts
    """
    summary = ConversionSummary(output_path=output_path)
    project_name = display_path(request.source.name or output_path.stem)
    writer = WRITERS[request.output_format](out, project_name)
    writer.start()

    with tqdm(total=len(candidates), desc="Converting", unit="file", disable=None) as pbar:
        for file_path, relative_path in candidates:
            entry = read_entry(file_path, relative_path, output_path)
            if entry is None:
                summary.files_skipped += 1
            else:
                writer.write_entry(entry)
                summary.files_written += 1
                if verbose:
                    tqdm.write(f"  ✓ {entry.relative_path}")
            pbar.update(1)

    writer.finish()
    return summary


def create_document(request: ConversionRequest, verbose: bool = False) -> ConversionSummary:
    """Flatten the requested path into a document on disk.

    The document is written to a temporary sibling and renamed into place,
    so a failed run leaves any previous document untouched.

    Args:
        request: The resolved conversion request
        verbose: Print each file as it is written

    Returns:
        ConversionSummary describing the written document

    Raises:
        ConversionError: The document could not be written
    """
    output_path = get_output_path(request)

    print(f"📂 Source: {display_path(str(request.source))} ({request.kind.value})")
    # Candidates are listed before the temporary file exists so it is never picked up
    candidates = collect_candidates(request)
    print(f"✓ Found {len(candidates)} candidate files")

    tmp_name = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=output_path.parent, prefix=f".{output_path.name}.", suffix=TEMP_SUFFIX
        )
        with open(fd, "w", encoding="utf-8", newline="\n") as out:
            summary = render_document(request, candidates, output_path, out, verbose)
        os.replace(tmp_name, output_path)
        tmp_name = None
    except (OSError, UnicodeError) as e:
        raise ConversionError(f"Could not write to {display_path(str(output_path))}: {e}") from e
    finally:
        # Also reached on Ctrl-C, so no partial document is left behind
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                print(f"⚠ Warning: Could not remove {tmp_name}", file=sys.stderr)

    print(f"\n✅ Success! Wrote {summary.files_written} files ({summary.files_skipped} skipped)")
    print(f"📄 Output: {display_path(str(output_path))}")
    return summary
