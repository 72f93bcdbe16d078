"""Command-line interface for code2xml.

The shell integration launches the tool in one of two ways::

    code2xml "<file-path>"          # file context menu
    code2xml "<dir-path>" -i        # folder background context menu
"""

import argparse
import sys

from code2xml import __version__
from code2xml.constants import DEFAULT_FORMAT, OUTPUT_FORMATS
from code2xml.errors import Code2XmlError
from code2xml.file_operations import resolve_request
from code2xml.output_generators import create_document


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="code2xml",
        description="Flatten a project directory or a single file into one Markdown document.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("path", help="The file or directory to convert.")
    parser.add_argument(
        "-i",
        "--inside",
        action="store_true",
        help="Save the document inside the directory instead of next to it.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Explicit path for the output document.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=sorted(OUTPUT_FORMATS),
        default=DEFAULT_FORMAT,
        help="Output document format.",
    )
    parser.add_argument(
        "--no-gitignore",
        action="store_true",
        help="Do not apply the source directory's .gitignore.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show every file written.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the code2xml CLI.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:]

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    try:
        request = resolve_request(
            args.path,
            save_inside=args.inside,
            output_format=args.format,
            output_override=args.output,
            use_gitignore=not args.no_gitignore,
        )
        create_document(request, verbose=args.verbose)
    except Code2XmlError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
