"""Command line front end: inspect and reformat desktop files.

Usage:
    desktopfile groups FILE
    desktopfile keys FILE [-g GROUP]
    desktopfile get FILE KEY [-g GROUP] [-l LOCALE] [-t TYPE]
    desktopfile format FILE [-o OUT]
    desktopfile check FILE [--format rust|simple|json]

Exit codes: 0 success, 1 invalid file or missing key, 2 usage or I/O error.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from desktopfile import __version__
from desktopfile.constants import DEFAULT_GROUP
from desktopfile.diagnostics import (
    DesktopSyntaxError,
    DiagnosticFormatter,
    OutputFormat,
    StreamReadError,
)
from desktopfile.enums import ValueType
from desktopfile.loading import dump_path, dumps, load_path
from desktopfile.model import DesktopFile, Locale, Value
from desktopfile.options import Options

__all__ = ["main", "parse_args"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def parse_args(args: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("file", type=Path, help="Desktop file to read")
    common.add_argument(
        "--join-duplicate-keys",
        action="store_true",
        help="Concatenate values of repeated keys",
    )
    common.add_argument(
        "--ignore-duplicate-keys",
        action="store_true",
        help="Keep the first of repeated keys",
    )
    common.add_argument(
        "--allow-duplicate-groups",
        action="store_true",
        help="Merge repeated group headers",
    )
    common.add_argument(
        "--default-locale",
        default=None,
        help="Locale for value lookups (use 'system' for LC_ALL/LC_MESSAGES/LANG)",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser = argparse.ArgumentParser(
        prog="desktopfile",
        description="Inspect and reformat freedesktop.org desktop entry files",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("groups", parents=[common], help="List group names")

    keys = commands.add_parser("keys", parents=[common], help="List keys of a group")
    keys.add_argument("-g", "--group", default=DEFAULT_GROUP, help="Group name")

    get = commands.add_parser("get", parents=[common], help="Print the value of a key")
    get.add_argument("key", help="Key name without locale suffix")
    get.add_argument("-g", "--group", default=DEFAULT_GROUP, help="Group name")
    get.add_argument("-l", "--locale", default=None, help="Resolve for this locale")
    get.add_argument(
        "-t",
        "--type",
        dest="value_type",
        choices=[t.value for t in ValueType],
        default=ValueType.STRING.value,
        help="Coerce the value (default: string)",
    )

    fmt = commands.add_parser("format", parents=[common], help="Re-serialize the file")
    fmt.add_argument("-o", "--output", type=Path, default=None, help="Write here, not stdout")

    check = commands.add_parser("check", parents=[common], help="Report syntax errors")
    check.add_argument(
        "--format",
        dest="output_format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Diagnostic style (default: rust)",
    )

    return parser.parse_args(args)


def _build_options(parsed: argparse.Namespace) -> Options:
    flags = {
        "allow_duplicate_keys_join": parsed.join_duplicate_keys,
        "allow_duplicate_keys_ignore": parsed.ignore_duplicate_keys,
        "allow_duplicate_groups": parsed.allow_duplicate_groups,
    }
    if parsed.default_locale == "system":
        return Options.from_environment(**flags)
    return Options(default_locale=parsed.default_locale, **flags)


def _render_value(value: Value, value_type: ValueType) -> str:
    match value_type:
        case ValueType.STRING:
            return value.as_string()
        case ValueType.BOOL:
            return "true" if value.as_bool() else "false"
        case ValueType.INT:
            return str(value.as_int())
        case ValueType.FLOAT:
            return repr(value.as_float())
        case ValueType.ARRAY:
            return json.dumps([item.as_string() for item in value.as_array()], ensure_ascii=False)


def _run_command(parsed: argparse.Namespace, document: DesktopFile) -> int:
    match parsed.command:
        case "groups":
            for name in document.group_names():
                print(name)
        case "keys":
            if not document.has_group(parsed.group):
                print(f"[ERROR] No group [{parsed.group}]", file=sys.stderr)
                return EXIT_INVALID
            for key in document.get_group(parsed.group).keys():
                print(key)
        case "get":
            group = document.get_group(parsed.group)
            if not group.has_entry(parsed.key):
                print(f"[ERROR] No key {parsed.key} in [{parsed.group}]", file=sys.stderr)
                return EXIT_INVALID
            entry = group.get_entry(parsed.key)
            if parsed.locale is not None:
                value = entry.value_at_locale(Locale.parse(parsed.locale))
            else:
                value = entry.get_value()
            print(_render_value(value, ValueType(parsed.value_type)))
        case "format":
            if parsed.output is None:
                sys.stdout.write(dumps(document))
            else:
                dump_path(document, parsed.output)
        case "check":
            print(f"[OK] {parsed.file}: {len(document)} group(s)")
    return EXIT_OK


def main(args: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command line arguments (None uses sys.argv)

    Returns:
        Exit code: 0 success, 1 invalid file or missing key, 2 usage or I/O error
    """
    parsed = parse_args(args)
    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = _build_options(parsed)
    except (TypeError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        document = load_path(parsed.file, options)
    except StreamReadError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_USAGE
    except DesktopSyntaxError as e:
        output_format = OutputFormat(getattr(parsed, "output_format", OutputFormat.RUST))
        if e.diagnostic is not None:
            formatter = DiagnosticFormatter(output_format=output_format)
            print(formatter.format(e.diagnostic), file=sys.stderr)
        else:
            print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_INVALID

    logger.debug("Running '%s' on %s", parsed.command, parsed.file)
    return _run_command(parsed, document)


if __name__ == "__main__":
    sys.exit(main())
