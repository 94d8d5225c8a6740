"""
Property-access token extraction

Finds the `obj.field` / `obj["field"]` expression under the cursor and
splits it into a Keyword.

The extractor works on a bounded character class (ASCII letters, digits,
'.', '_', '[', '"' and "'") with explicit index scans:

1. Scan backward from the cursor to the start of the run of token
   characters ending at the cursor
2. Require an accessor separator ('.', '["' or "['") between that start
   and the cursor
3. Scan forward from the start to the end of the run

Example:
    >>> word_extract('className={css.submitBtn}', 17)
    'css.submitBtn'
    >>> keyword_get('className={css.submitBtn}', 17)
    Keyword(obj='css', field='submitBtn')
"""

import string
from typing import Optional, Tuple

from ..models.location import Keyword


TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "._[\"'")
SEPARATORS = (".", '["', "['")
BRACKET_OPENERS = ('["', "['")


def separator_find(text: str, start: int = 0) -> Tuple[int, int]:
    """
    Find the leftmost accessor separator in text

    Args:
        text: Text to scan
        start: Index to start scanning from

    Returns:
        (index, length) of the separator, or (-1, 0) if there is none
    """
    for index in range(start, len(text)):
        for separator in SEPARATORS:
            if text.startswith(separator, index):
                return index, len(separator)
    return -1, 0


def word_extract(line: str, offset: int) -> str:
    """
    Extract the maximal property-access token touching the cursor

    Args:
        line: Text of the line under the cursor
        offset: Zero-based cursor offset in the line

    Returns:
        The token (e.g., 'css.submitBtn', 'css["submit'), or '' when the
        cursor is not on a property access

    Example:
        For 'styles["title"]' with the cursor inside title:
        Returns 'styles["title' (closing quote stripped)
    """
    if offset < 0:
        return ""
    offset = min(offset, len(line))

    start = offset
    while start > 0 and line[start - 1] in TOKEN_CHARS:
        start -= 1

    # Not clicking an object field
    if separator_find(line[start:offset])[0] == -1:
        return ""

    end = offset
    while end < len(line) and line[end] in TOKEN_CHARS:
        end += 1
    word = line[start:end]

    if any(opener in word for opener in BRACKET_OPENERS) and word[-1] in "\"'":
        return word[:-1]
    return word


def keyword_parse(token: str) -> Optional[Keyword]:
    """
    Split a token into alias and field at its first separator

    Only the first obj/field pair is used; anything after a second
    separator is discarded.

    Args:
        token: Token produced by word_extract()

    Returns:
        Keyword, or None if the token has no separator or an empty half
        (e.g., '...rest' from a spread expression)
    """
    index, length = separator_find(token)
    if index == -1:
        return None

    obj = token[:index]
    rest = token[index + length:]
    next_index, _ = separator_find(rest)
    field = rest if next_index == -1 else rest[:next_index]

    if not obj or not field:
        return None
    return Keyword(obj=obj, field=field)


def keyword_get(line: str, offset: int) -> Optional[Keyword]:
    """Extract and parse the property access under the cursor"""
    word = word_extract(line, offset)
    if not word:
        return None
    return keyword_parse(word)
