"""Command line options and their validation."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Sequence

from chatexport.errors import InvalidOptionsError

DEFAULT_OUTPUT_DIR = "imessage_export"

OPTION_DB_PATH = "db-path"
OPTION_COPY = "no-copy"
OPTION_DIAGNOSTIC = "diagnostics"
OPTION_EXPORT_TYPE = "format"
OPTION_EXPORT_PATH = "export-path"
OPTION_START_DATE = "start-date"
OPTION_END_DATE = "end-date"
OPTION_DISABLE_LAZY_LOADING = "no-lazy"

SUPPORTED_FILE_TYPES = "txt, html"
ABOUT = (
    "The `imessage-exporter` binary exports iMessage data to\n"
    "`txt` or `html` formats. It can also run diagnostics\n"
    "to find problems with the iMessage database."
)


def _default_db_path() -> Path:
    return Path.home() / "Library" / "Messages" / "chat.db"


def _default_export_path() -> Path:
    return Path.home() / DEFAULT_OUTPUT_DIR


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` date, raising ValueError when it is malformed."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"{value} is not a valid date! Must be YYYY-MM-DD") from None


def _supported_types() -> list[str]:
    return [kind.strip() for kind in SUPPORTED_FILE_TYPES.split(",")]


@dataclass
class Options:
    """Validated settings for one run of the exporter."""

    db_path: Path
    no_copy: bool = False
    diagnostic: bool = False
    export_type: str | None = None
    export_path: Path = Path()
    start_date: date | None = None
    end_date: date | None = None
    no_lazy: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> Options:
        """Build options from parsed arguments, raising InvalidOptionsError."""
        user_path = args.db_path
        no_copy = bool(args.no_copy)
        diagnostic = bool(args.diagnostics)
        export_type = args.format
        export_path = args.export_path
        no_lazy = bool(args.no_lazy)

        if export_type is not None and export_type not in _supported_types():
            raise InvalidOptionsError(
                f"{export_type} is not a valid export type! "
                f"Must be one of <{SUPPORTED_FILE_TYPES}>"
            )

        if no_copy and export_type is None:
            raise InvalidOptionsError(
                f"Option {OPTION_COPY} is enabled, which requires `--{OPTION_EXPORT_TYPE}`"
            )
        if export_path is not None and export_type is None:
            raise InvalidOptionsError(
                f"Option {OPTION_EXPORT_PATH} is enabled, which requires `--{OPTION_EXPORT_TYPE}`"
            )
        if no_lazy and export_type != "html":
            raise InvalidOptionsError(
                f"Option {OPTION_DISABLE_LAZY_LOADING} is enabled, "
                f"which requires `--{OPTION_EXPORT_TYPE}`"
            )

        if diagnostic and no_copy:
            raise InvalidOptionsError(f"Diagnostics are enabled; {OPTION_COPY} is disallowed")
        if diagnostic and export_path is not None:
            raise InvalidOptionsError(
                f"Diagnostics are enabled; {OPTION_EXPORT_PATH} is disallowed"
            )
        if diagnostic and export_type is not None:
            raise InvalidOptionsError(
                f"Diagnostics are enabled; {OPTION_EXPORT_TYPE} is disallowed"
            )

        try:
            start = parse_date(args.start_date) if args.start_date is not None else None
            end = parse_date(args.end_date) if args.end_date is not None else None
        except ValueError as why:
            raise InvalidOptionsError(str(why)) from None

        db_path = Path(user_path) if user_path is not None else _default_db_path()

        return cls(
            db_path=db_path,
            no_copy=no_copy,
            diagnostic=diagnostic,
            export_type=export_type,
            export_path=validate_path(export_path, export_type),
            start_date=start,
            end_date=end,
            no_lazy=no_lazy,
        )


def validate_path(export_path: str | None, export_type: str | None) -> Path:
    """Resolve the export directory and make sure it holds no export of this type."""
    resolved = Path(export_path) if export_path is not None else _default_export_path()
    if export_type is None or not resolved.exists():
        return resolved

    path_word = "Specified" if export_path is not None else "Default"
    try:
        entries = list(resolved.iterdir())
    except OSError as why:
        raise InvalidOptionsError(
            f'{path_word} export path "{resolved}" is not a valid directory: {why}'
        ) from None

    if any(entry.suffix == f".{export_type}" for entry in entries):
        raise InvalidOptionsError(
            f'{path_word} export path "{resolved}" contains existing "{export_type}" export data!'
        )
    return resolved


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(prog="iMessage Exporter", description=ABOUT)
    parser.add_argument(
        "-d",
        f"--{OPTION_DIAGNOSTIC}",
        action="store_true",
        help="Print diagnostic information and exit",
    )
    parser.add_argument(
        "-f",
        f"--{OPTION_EXPORT_TYPE}",
        metavar=SUPPORTED_FILE_TYPES,
        help="Specify a single file format to export messages into",
    )
    parser.add_argument(
        "-n",
        f"--{OPTION_COPY}",
        action="store_true",
        help="Do not copy attachments, instead reference them in-place",
    )
    parser.add_argument(
        "-p",
        f"--{OPTION_DB_PATH}",
        metavar="path/to/chat.db",
        help=(
            "Specify a custom path for the iMessage database file\n"
            f"If omitted, the default directory is {_default_db_path()}"
        ),
    )
    parser.add_argument(
        "-o",
        f"--{OPTION_EXPORT_PATH}",
        metavar="path/to/save/files",
        help=(
            "Specify a custom directory for outputting exported data\n"
            f"If omitted, the default directory is {_default_export_path()}"
        ),
    )
    parser.add_argument(
        "-s",
        f"--{OPTION_START_DATE}",
        metavar="YYYY-MM-DD",
        help="The start date filter. Only messages sent on or after this date will be included",
    )
    parser.add_argument(
        "-e",
        f"--{OPTION_END_DATE}",
        metavar="YYYY-MM-DD",
        help="The end date filter. Only messages sent before this date will be included",
    )
    parser.add_argument(
        "-l",
        f"--{OPTION_DISABLE_LAZY_LOADING}",
        action="store_true",
        help=(
            'Do not include `loading="lazy"` in HTML export `img` tags\n'
            "This will make pages load slower but PDF generation work"
        ),
    )
    return parser