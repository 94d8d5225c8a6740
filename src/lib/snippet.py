"""
Target excerpt rendering with Pygments

Shows a few lines around a resolved definition, highlighted with the lexer
Pygments picks for the target file (CSS, SCSS, LESS, YAML, ...), with a
marker on the target line and a caret under the target column.

Example output:
      3 │ }
    > 4 │ .submit-btn {
        │  ^
      5 │   color: red;
"""

from typing import List

from pygments import highlight
from pygments.formatters import NullFormatter, TerminalFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.util import ClassNotFound

from ..models.location import Location


def lexer_get(path: str, text: str) -> Lexer:
    """Get the Pygments lexer for a file, falling back to plain text"""
    try:
        return get_lexer_for_filename(path, text, stripnl=False, ensurenl=False)
    except ClassNotFound:
        return TextLexer(stripnl=False, ensurenl=False)


def snippet_render(location: Location, text: str, context: int = 2, color: bool = True) -> str:
    """
    Render the lines around a location

    Args:
        location: Resolved definition
        text: Full text of the target file
        context: Number of lines shown before and after the target line
        color: Emit terminal colour codes

    Returns:
        Multi-line excerpt (empty string for an empty file)
    """
    lines = text.split("\n")
    target = location.position.line
    if not text or target >= len(lines):
        return ""

    first = max(0, target - context)
    last = min(len(lines), target + context + 1)
    formatter = TerminalFormatter() if color else NullFormatter()
    excerpt = highlight("\n".join(lines[first:last]), lexer_get(location.path, text), formatter)
    rendered = excerpt.split("\n")

    width = len(str(last))
    output: List[str] = []
    for offset, line_number in enumerate(range(first, last)):
        body = rendered[offset] if offset < len(rendered) else lines[line_number]
        marker = ">" if line_number == target else " "
        output.append(f"{marker} {line_number + 1:>{width}} │ {body}")
        if line_number == target:
            output.append(f"  {' ' * width} │ {' ' * location.position.character}^")
    return "\n".join(output)
