"""Data models for scanned declarations and planned text edits."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Position(BaseModel):
    """A zero-based line/character location in a document."""

    model_config = ConfigDict(frozen=True)

    line: int
    character: int = 0


class Range(BaseModel):
    """A half-open span between two positions."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    @classmethod
    def of_line(cls, line: int, length: int) -> Range:
        """The whole text of `line`, excluding its terminator."""
        return cls(start=Position(line=line), end=Position(line=line, character=length))

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


class TextEdit(BaseModel):
    """Replace `range` with `new_text`; an empty range is an insertion."""

    model_config = ConfigDict(frozen=True)

    range: Range
    new_text: str

    @classmethod
    def insert(cls, position: Position, text: str) -> TextEdit:
        return cls(range=Range(start=position, end=position), new_text=text)

    @classmethod
    def replace(cls, range: Range, text: str) -> TextEdit:
        return cls(range=range, new_text=text)


class UseStatement(BaseModel):
    """A `use` line as found in the document."""

    model_config = ConfigDict(frozen=True)

    text: str
    line: int  # zero-based


class DeclarationLines(BaseModel):
    """Where the declaration block constructs of a file live.

    Each field is None when not found, otherwise the 1-based number of the
    construct's line (i.e. the 0-based index of the line right after it).
    """

    opening_tag: int | None = None
    declare: int | None = None
    namespace: int | None = None
    last_use_statement: int | None = None
    first_type_declaration: int | None = None

    @property
    def complete(self) -> bool:
        return None not in (
            self.opening_tag,
            self.declare,
            self.namespace,
            self.last_use_statement,
            self.first_type_declaration,
        )
