"""Immutable line-addressable view of a PHP buffer."""

from __future__ import annotations

import re
from dataclasses import dataclass

from nsresolver.parser.models import Position, Range, TextEdit

# A class reference under the cursor, namespace separators included.
WORD_WITH_NAMESPACE = re.compile(r"[a-zA-Z0-9\\]+")


@dataclass(frozen=True)
class Document:
    """The text of a document split into lines.

    Lines never contain their terminator. Edits never mutate a document;
    `apply_edits` returns a new one.
    """

    lines: tuple[str, ...]
    path: str | None = None
    eol: str = "\n"

    @classmethod
    def from_text(cls, text: str, path: str | None = None) -> Document:
        eol = "\r\n" if "\r\n" in text else "\n"
        return cls(lines=tuple(text.split(eol)), path=path, eol=eol)

    @property
    def text(self) -> str:
        return self.eol.join(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, line: int) -> str:
        return self.lines[line]

    def offset_at(self, position: Position) -> int:
        """Convert a position to a text offset, clamping past-the-end values."""
        if position.line >= self.line_count:
            return len(self.text)
        offset = sum(len(line) + len(self.eol) for line in self.lines[: position.line])
        return offset + min(position.character, len(self.lines[position.line]))

    def position_at(self, offset: int) -> Position:
        """Inverse of `offset_at`."""
        offset = max(0, offset)
        for line, text in enumerate(self.lines):
            if offset <= len(text):
                return Position(line=line, character=offset)
            offset -= len(text) + len(self.eol)
        last = self.line_count - 1
        return Position(line=last, character=len(self.lines[last]))

    def shift_position(self, position: Position, edits: list[TextEdit], edited: Document) -> Position:
        """Where `position` ends up in `edited` once `edits` are applied to this document."""
        offset = self.offset_at(position)
        delta = 0
        for e in edits:
            start, end = self.offset_at(e.range.start), self.offset_at(e.range.end)
            # text inserted at the cursor pushes it forward
            if end <= offset:
                delta += len(e.new_text.replace("\n", self.eol)) - (end - start)
        return edited.position_at(offset + delta)

    def get_text(self, range: Range) -> str:
        return self.text[self.offset_at(range.start) : self.offset_at(range.end)]

    def word_range_at(
        self, position: Position, pattern: re.Pattern[str] = WORD_WITH_NAMESPACE
    ) -> Range | None:
        """Range of the `pattern` match touching `position`, if any."""
        if position.line >= self.line_count:
            return None
        for match in pattern.finditer(self.lines[position.line]):
            if match.start() <= position.character <= match.end():
                return Range(
                    start=Position(line=position.line, character=match.start()),
                    end=Position(line=position.line, character=match.end()),
                )
        return None

    def apply_edits(self, edits: list[TextEdit]) -> Document:
        """Apply a batch of edits expressed against this document.

        The batch is atomic: overlapping edits are rejected before anything
        is applied.
        """
        spans = sorted(
            (
                (self.offset_at(e.range.start), self.offset_at(e.range.end), e.new_text)
                for e in edits
            ),
            key=lambda s: (s[0], s[1]),
        )
        for (_, prev_end, _), (start, _, _) in zip(spans, spans[1:]):
            if start < prev_end:
                raise ValueError("Overlapping edits in one batch")

        text = self.text
        for start, end, new_text in reversed(spans):
            text = text[:start] + new_text.replace("\n", self.eol) + text[end:]
        return Document(lines=tuple(text.split(self.eol)), path=self.path, eol=self.eol)
