"""
Class-name transformers

One handler per CamelCaseMode, each applied to a whole stylesheet line
before it is searched for a class name:

- CAMELCASE: lodash-compatible camelCase of the whole line
  ('.submit-btn {' -> 'submitBtn')
- DASHES: only dash runs are collapsed ('.submit-btn {' -> '.submitBtn {')
- NONE: no transformer
"""

import re
from typing import Callable, Dict, Optional

from ..models.resolution import CamelCaseMode


ClassTransformer = Callable[[str], str]

# Word splitting rules of lodash `words()` restricted to ASCII: lower-case
# runs with an optional capital, capital runs, ordinals and digit runs.
# Anything that is not a letter or digit separates words.
_BREAK = r"[^A-Za-z0-9]"
_WORD_PATTERN = re.compile(
    "|".join(
        [
            rf"[A-Z]?[a-z]+(?={_BREAK}|[A-Z]|$)",
            rf"[A-Z]+(?={_BREAK}|[A-Z][a-z]|$)",
            r"[A-Z]?[a-z]+",
            r"[A-Z]+",
            r"[0-9]*(?:1ST|2ND|3RD|(?![123])[0-9]TH)(?=\b|[a-z_])",
            r"[0-9]*(?:1st|2nd|3rd|(?![123])[0-9]th)(?=\b|[A-Z_])",
            r"[0-9]+",
        ]
    )
)
_APOSTROPHES = re.compile("['’]")
_DASH_RUN = re.compile(r"-+(\w)", re.ASCII)


def camelCase(text: str) -> str:
    """
    Convert text to camelCase the way lodash's _.camelCase does

    Example:
        >>> camelCase('.button--disabled {')
        'buttonDisabled'
        >>> camelCase('__FOO_BAR__')
        'fooBar'
    """
    words = _WORD_PATTERN.findall(_APOSTROPHES.sub("", text))
    if not words:
        return ""
    head, tail = words[0].lower(), words[1:]
    return head + "".join(word[:1].upper() + word[1:].lower() for word in tail)


def dashesCamelCase(text: str) -> str:
    """
    Collapse dash runs, upper-casing the character that follows

    Example:
        >>> dashesCamelCase('.submit-btn, .nav--item {')
        '.submitBtn, .navItem {'
    """
    return _DASH_RUN.sub(lambda match: match.group(1).upper(), text)


_TRANSFORMERS: Dict[CamelCaseMode, ClassTransformer] = {
    CamelCaseMode.CAMELCASE: camelCase,
    CamelCaseMode.DASHES: dashesCamelCase,
}


def transformer_get(mode: CamelCaseMode) -> Optional[ClassTransformer]:
    """Return the line transformer for a mode, or None for CamelCaseMode.NONE"""
    return _TRANSFORMERS.get(mode)
