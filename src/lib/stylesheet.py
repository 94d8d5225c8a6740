"""
Class selector lookup in stylesheet text

Finds the line and column of a class selector without parsing CSS. The
match only has to be the first plausible one:

    .main,        matches class "main"
    .main {       matches class "main"
    .main-sub     does not match
    .main09       does not match
    .main_bem     does not match
    .mainsuffix   does not match

With a camelCase mode active each line is transformed before the search,
because camelization is lossy: `.button--disabled` and `.button-disabled`
both end up as `css.buttonDisabled`, and there is no way back from the
used name to the source selector. Transforming can shift columns, so the
returned column is relative to the transformed line. When the transformed
line does not match, the original line is searched as well.
"""

from pathlib import Path
from typing import Optional, Union

from ..models.location import Position
from ..models.resolution import CamelCaseMode
from .casing import transformer_get
from .reader import text_read


def identifierChar_is(char: str) -> bool:
    """Check for a character that continues a class name: [A-Za-z0-9_-]"""
    return char.isascii() and (char.isalnum() or char in "_-")


def keyword_findBounded(line: str, keyword: str) -> int:
    """
    Find the first occurrence of keyword not followed by a name character

    Args:
        line: Line of stylesheet text
        keyword: Literal text to find (e.g., '.main' or 'buttonDisabled')

    Returns:
        Index of the occurrence, or -1

    Example:
        >>> keyword_findBounded('.main-sub, .main {', '.main')
        11
    """
    if not keyword:
        return -1

    start = line.find(keyword)
    while start != -1:
        end = start + len(keyword)
        if end >= len(line) or not identifierChar_is(line[end]):
            return start
        start = line.find(keyword, start + 1)
    return -1


def classKeyword_make(class_name: str, mode: CamelCaseMode) -> str:
    """
    Build the literal text searched for

    A fully camelized line has lost its '.' markers, so the bare name is
    searched; otherwise the selector form '.name' is.
    """
    if mode is CamelCaseMode.CAMELCASE:
        return class_name
    return f".{class_name}"


def classPosition_find(
    text: str, class_name: str, mode: CamelCaseMode = CamelCaseMode.NONE
) -> Optional[Position]:
    """
    Locate a class selector in stylesheet text

    Args:
        text: Full stylesheet text
        class_name: Class name as used by the importing code
        mode: Transformation applied to lines before matching

    Returns:
        Position one past the matched keyword's first character (on the
        class name itself), or None if no line matches
    """
    if not class_name:
        return None

    keyword = classKeyword_make(class_name, mode)
    transformer = transformer_get(mode)

    for line_number, original_line in enumerate(text.split("\n")):
        line = transformer(original_line) if transformer else original_line
        character = keyword_findBounded(line, keyword)

        if character == -1 and transformer is not None:
            # camelized match failed, try the raw class names too
            character = keyword_findBounded(original_line, keyword)

        if character != -1:
            return Position(line_number, character + 1)

    return None


def classPosition_findInFile(
    path: Union[str, Path],
    class_name: str,
    mode: CamelCaseMode,
    max_bytes: int,
) -> Optional[Position]:
    """Read a stylesheet (bounded) and locate a class selector in it"""
    return classPosition_find(text_read(path, max_bytes), class_name, mode)
