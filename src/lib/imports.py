"""
Import statement scanning

Recognizes stylesheet / YAML imports textually, without parsing the
script language:

    import css from "./app.module.css"
    import * as styles from '../styles.scss'
    import { Button, Title as Heading } from "./labels.i18n.yaml"
    const css = require("./app.css")

Provides the import-line matcher (is the cursor on the import itself?) and
the owner lookup that maps a bound local name back to its specifier.
"""

import re
from typing import Iterator, List, Optional

from ..models.location import ImportLineMatch


# Extensions of files the resolver can jump into
SUPPORTED_EXTENSIONS = (
    ".css",
    ".scss",
    ".sass",
    ".less",
    ".styl",
    ".stylus",
    ".yml",
    ".yaml",
)

DECLARATION_SUFFIX = ".d.ts"

_IMPORT_FROM = re.compile(
    r"""\bimport\s+(?P<binding>[^;"'`]+?)\s+from\s+(?P<quote>["'])(?P<specifier>[^"'\n]+)(?P=quote)"""
)
_REQUIRE = re.compile(
    r"""\b(?:const|let|var)\s+(?P<binding>\{[^}]*\}|[\w$]+)\s*=\s*require(?:<\w+>)?\(\s*"""
    r"""(?P<quote>["'])(?P<specifier>[^"'\n]+)(?P=quote)\s*\)"""
)
_NAMED_BINDINGS = re.compile(r"\{(?P<names>[^}]*)\}")


def specifier_isSupported(specifier: str) -> bool:
    """
    Check whether an import specifier points at a stylesheet or YAML file

    Generated declaration files (e.g., 'labels.i18n.yaml.d.ts') count as
    their source file.
    """
    name = specifier.lower()
    if name.endswith(DECLARATION_SUFFIX):
        name = name[: -len(DECLARATION_SUFFIX)]
    return name.endswith(SUPPORTED_EXTENSIONS)


def _statements_iter(text: str) -> Iterator[re.Match]:
    for pattern in (_IMPORT_FROM, _REQUIRE):
        yield from pattern.finditer(text)


def importLine_match(line: str) -> Optional[ImportLineMatch]:
    """
    Find a supported import statement on a single line

    Args:
        line: Text of the line under the cursor

    Returns:
        ImportLineMatch with the binding clause and specifier, or None
    """
    matches = sorted(_statements_iter(line), key=lambda match: match.start())
    for match in matches:
        specifier = match.group("specifier")
        if specifier_isSupported(specifier):
            return ImportLineMatch(binding=match.group("binding").strip(), specifier=specifier)
    return None


def specifierClick_check(line: str, match: Optional[ImportLineMatch], offset: int) -> bool:
    """
    Check whether the cursor sits inside one of the import's captured groups

    Each group's range starts one past the first occurrence of its text in
    the line; the cursor must be strictly inside the range. Clicking the
    module path string or the bound name both count.

    Args:
        line: Text of the line under the cursor
        match: Result of importLine_match() for that line (may be None)
        offset: Zero-based cursor offset

    Returns:
        True if the click refers to the import statement itself
    """
    if match is None:
        return False

    for group in match.groups():
        start = line.find(group) + 1
        if start < offset < start + len(group):
            return True
    return False


def bindingNames_extract(binding: str) -> List[str]:
    """
    List the local names bound by an import binding clause

    Example:
        >>> bindingNames_extract("css, { title as heading, type Row }")
        ['heading', 'Row', 'css']
        >>> bindingNames_extract("* as styles")
        ['styles']
    """
    names: List[str] = []
    remaining = binding

    named = _NAMED_BINDINGS.search(binding)
    if named:
        for part in named.group("names").split(","):
            pieces = part.split()
            if pieces:
                names.append(pieces[-1])
        remaining = binding[: named.start()] + binding[named.end():]

    for part in remaining.split(","):
        pieces = part.split()
        if pieces:
            names.append(pieces[-1])
    return names


def importModule_find(text: str, name: str) -> str:
    """
    Find the specifier of the supported import that binds a local name

    Args:
        text: Full text of the document
        name: Local name used in the property access (e.g., "css")

    Returns:
        The module specifier, or '' if no supported import binds the name
    """
    for match in _statements_iter(text):
        specifier = match.group("specifier")
        if not specifier_isSupported(specifier):
            continue
        if name in bindingNames_extract(match.group("binding")):
            return specifier
    return ""
