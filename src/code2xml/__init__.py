"""Code2XML: flatten a project directory or a single file into one document.

Each readable text file becomes a heading followed by a fenced code block,
which makes a whole codebase easy to paste into a chat or a review.
"""

__version__ = "0.1.0"

from code2xml.cli import main  # noqa: E402
from code2xml.models import ConversionRequest, FileEntry, RequestKind  # noqa: E402

__all__ = ["main", "ConversionRequest", "FileEntry", "RequestKind", "__version__"]
