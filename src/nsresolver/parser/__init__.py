"""Lexical scanning of PHP sources: references, use statements, declarations."""

from nsresolver.parser.extractor import extract_references
from nsresolver.parser.models import DeclarationLines, Position, Range, TextEdit, UseStatement
from nsresolver.parser.scanner import imported_names, scan_declarations

__all__ = [
    "DeclarationLines",
    "Position",
    "Range",
    "TextEdit",
    "UseStatement",
    "extract_references",
    "imported_names",
    "scan_declarations",
]
