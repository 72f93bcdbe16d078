"""Error types raised while resolving and converting a path."""


class Code2XmlError(Exception):
    """Base class for all code2xml errors.

    Attributes:
        exit_code: Process exit status the CLI reports for this error
    """

    exit_code = 1


class ConversionError(Code2XmlError):
    """The document could not be produced or written."""

    exit_code = 1


class PathNotFoundError(Code2XmlError):
    """The requested path does not exist."""

    exit_code = 3

    def __init__(self, path):
        super().__init__(f"Path not found: {path}")
        self.path = path


class PermissionDeniedError(Code2XmlError):
    """The requested path exists but cannot be read."""

    exit_code = 4

    def __init__(self, path):
        super().__init__(f"Permission denied: {path}")
        self.path = path
