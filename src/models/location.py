"""
Location and click models

Value types passed between the token extractor, the import-line matcher,
the position resolvers and the resolution pipeline.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import List, Union


@dataclass(frozen=True)
class Position:
    """
    Zero-based (line, character) offset into a text buffer

    Attributes:
        line: Zero-based line index
        character: Zero-based column within the line

    Example:
        >>> Position(1, 2)
        Position(line=1, character=2)
    """
    line: int
    character: int

    def __post_init__(self) -> None:
        if self.line < 0 or self.character < 0:
            raise ValueError(
                f"Position components must be non-negative, got ({self.line}, {self.character})"
            )


# Top of a file: import-line clicks and the YAML key fallback land here
ORIGIN = Position(0, 0)


@dataclass(frozen=True)
class Location:
    """
    A click target: file plus position inside it

    Attributes:
        path: Absolute path of the target file
        position: Target position inside that file
    """
    path: str
    position: Position

    def __str__(self) -> str:
        return f"{self.path}:{self.position.line}:{self.position.character}"


@dataclass
class Keyword:
    """
    Alias and property name extracted from a property-access token

    Attributes:
        obj: The alias/namespace token (e.g., "css" in "css.submitBtn")
        field: The property name (e.g., "submitBtn")
    """
    obj: str
    field: str


@dataclass
class ClickInfo:
    """
    Resolved intent of a definition request

    Attributes:
        importModule: Import specifier the click refers to (e.g., "./styles.css")
        targetClass: Class or key inside that module; "" means "top of file"
    """
    importModule: str
    targetClass: str = ""


@dataclass
class ImportLineMatch:
    """
    The two captured groups of an import statement found on one line

    Attributes:
        binding: Bound-name clause (e.g., "styles", "{ Button }", "* as css")
        specifier: Module specifier without quotes (e.g., "./button.i18n.yaml")

    Example:
        For line 'import css from "./app.css"':
        ImportLineMatch(binding="css", specifier="./app.css")
    """
    binding: str
    specifier: str

    def groups(self) -> List[str]:
        return [self.binding, self.specifier]


@dataclass
class TextDocument:
    """
    Minimal editor document: a path plus its full text
    """
    path: Path
    text: str

    @classmethod
    def document_read(cls, path: Union[str, Path]) -> "TextDocument":
        """Load a document from disk as UTF-8 text"""
        document_path = Path(path).resolve()
        return cls(path=document_path, text=document_path.read_text(encoding="utf-8"))

    @property
    def directory(self) -> Path:
        return Path(self.path).parent

    def line_get(self, line: int) -> str:
        """Return the text of a zero-based line without its line ending, or ''"""
        lines = self.text.split("\n")
        if line < 0 or line >= len(lines):
            return ""
        return lines[line].rstrip("\r")
