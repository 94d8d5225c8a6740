"""
Mapping key lookup in YAML text

Only `key:` declarations are recognized, at any indentation depth. Nested
structure, flow collections, anchors and tags are not interpreted.
"""

from pathlib import Path
from typing import Union

from ..models.location import ORIGIN, Position
from .reader import text_read


def keyPosition_find(text: str, key: str) -> Position:
    """
    Locate the first `key:` declaration in YAML text

    A line matches when, after optional leading whitespace, it holds the
    literal key followed by optional whitespace and a colon.

    Args:
        text: Full YAML text
        key: Mapping key to find

    Returns:
        Position of the key's first character, or the file origin (0, 0)
        when no line declares the key

    Example:
        >>> keyPosition_find('foo:\\n  greeting: "hi"\\n', 'greeting')
        Position(line=1, character=2)
    """
    if not key:
        return ORIGIN

    for line_number, line in enumerate(text.split("\n")):
        body = line.lstrip()
        if not body.startswith(key):
            continue
        if body[len(key):].lstrip().startswith(":"):
            return Position(line_number, len(line) - len(body))

    return ORIGIN


def keyPosition_findInFile(path: Union[str, Path], key: str, max_bytes: int) -> Position:
    """Read a YAML file (bounded) and locate a key declaration in it"""
    return keyPosition_find(text_read(path, max_bytes), key)
