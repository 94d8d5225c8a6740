#!/usr/bin/env python3
"""
cssmodjump - go to definition for CSS modules and i18n YAML files

Resolves the property access or import under a cursor position in a
script file to the class selector or YAML key it refers to.

Usage:
    cssmodjump FILE LINE CHARACTER

    LINE and CHARACTER are zero-based. On success the target is printed
    as path:line:character (zero-based) and the exit status is 0; exit
    status 1 means no definition, 2 an error.

Examples:
    # Class referenced as css.submitBtn, stylesheet uses .submit-btn
    cssmodjump src/Form.tsx 12 28 --camelCase camelcase

    # Import path click, with a highlighted excerpt of the target
    cssmodjump src/Form.tsx 0 30 --snippet

    # Aliased imports ('@styles/form.css')
    cssmodjump src/Form.tsx 12 28 --alias '@styles=${workspaceFolder}/src/styles'

    # Trace the resolution stages
    cssmodjump src/Form.tsx 12 28 -vvv
"""

import asyncio
import sys
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace
from typing import Dict, List, Optional

from . import __version__
from .config import AppSettings, appsettings
from .lib import DefinitionResolver, CssModJumpError, snippet_render, text_read
from .models import CamelCaseMode, Position, TextDocument


# Define CLI arguments
parser = ArgumentParser(
    description="cssmodjump - go to definition for CSS modules and i18n YAML files",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument("file", type=str, help="Script file the request is issued in")
parser.add_argument("line", type=int, help="Zero-based line of the cursor")
parser.add_argument("character", type=int, help="Zero-based column of the cursor")

parser.add_argument(
    "--camelCase",
    default=None,
    choices=[mode.value for mode in CamelCaseMode],
    help="Class-name transformation (default: from CSSMODJUMP_CAMEL_CASE / project config)",
)

parser.add_argument(
    "--alias",
    action="append",
    default=[],
    metavar="PREFIX=PATH",
    help="Import path alias; may be repeated. PATH may use ${workspaceFolder}",
)

parser.add_argument(
    "--snippet",
    action="store_true",
    help="Print a highlighted excerpt around the definition",
)

parser.add_argument(
    "--context",
    default=2,
    type=int,
    help="Lines of context shown with --snippet",
)

parser.add_argument(
    "--no-color",
    dest="color",
    action="store_false",
    help="Do not colour the --snippet excerpt",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def aliases_parse(entries: List[str]) -> Dict[str, str]:
    """
    Parse PREFIX=PATH alias arguments.

    Raises:
        ValueError: If an entry has no '=' or an empty prefix
    """
    aliases: Dict[str, str] = {}
    for entry in entries:
        prefix, sep, target = entry.partition("=")
        if not sep or not prefix:
            raise ValueError(f"Alias must look like PREFIX=PATH, got {entry!r}")
        aliases[prefix] = target
    return aliases


def settings_fromOptions(options: Namespace, base: AppSettings) -> AppSettings:
    """
    Overlay CLI options on the environment settings.

    Args:
        options: Parsed CLI arguments
        base: Settings from the environment

    Returns:
        Settings with --camelCase and --alias applied
    """
    updates: Dict[str, object] = {}
    if options.camelCase is not None:
        updates["camel_case"] = CamelCaseMode.mode_parse(options.camelCase)
    if options.alias:
        updates["path_alias"] = {**base.path_alias, **aliases_parse(options.alias)}
    return base.model_copy(update=updates) if updates else base


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - resolve one definition request and print the target.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Process exit status: 0 found, 1 no definition, 2 error
    """
    options = parser.parse_args(argv)
    if options.line < 0 or options.character < 0:
        parser.error("line and character must be zero or greater")

    try:
        settings = settings_fromOptions(options, appsettings)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        document = TextDocument.document_read(options.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        return 2

    resolver = DefinitionResolver(settings, verbosity=options.verbosity)
    position = Position(options.line, options.character)

    try:
        state = asyncio.run(resolver.resolution_run(document, position))
    except CssModJumpError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    location = state.location
    if location is None:
        if options.verbosity >= 2:
            print(f"No definition ({state.status.value})", file=sys.stderr)
        return 1

    print(location)
    if options.snippet:
        try:
            text = text_read(location.path, settings.max_file_bytes)
        except CssModJumpError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        print(snippet_render(location, text, context=options.context, color=options.color))
    return 0


if __name__ == "__main__":
    sys.exit(main())
