"""Single-pass classification of a PHP file's declaration block."""

from __future__ import annotations

import re
from collections.abc import Sequence

from nsresolver.exceptions import AlreadyImportedError
from nsresolver.parser.models import DeclarationLines, UseStatement

_TYPE_DECLARATION = re.compile(r"(class|trait|interface)\s+\w+")
_INLINE_NAMESPACE = re.compile(r"^<\?php\s+namespace\s")
_IMPORTED_NAME = re.compile(r"(\w+?);")


def scan_declarations(
    lines: Sequence[str], stop_at_class: str | None = None
) -> tuple[list[UseStatement], DeclarationLines]:
    """Collect the use statements and declaration lines of a document.

    Args:
        lines: Document lines, without terminators.
        stop_at_class: FQCN about to be imported. If the document already
            contains exactly `use <stop_at_class>;` the scan aborts.

    Returns:
        The use statements in document order and the declaration lines.

    Raises:
        AlreadyImportedError: `stop_at_class` is already imported.
    """
    use_statements: list[UseStatement] = []
    found = DeclarationLines()

    for line, text in enumerate(lines):
        if stop_at_class is not None and text == f"use {stop_at_class};":
            raise AlreadyImportedError()

        # all declarations were found
        if found.complete:
            break

        if text.startswith("<?php"):
            if found.opening_tag is None:
                found.opening_tag = line + 1
            if found.namespace is None and _INLINE_NAMESPACE.match(text):
                found.namespace = line + 1
        elif text.startswith("declare"):
            if found.declare is None:
                found.declare = line + 1
        elif text.startswith("namespace "):
            if found.namespace is None:
                found.namespace = line + 1
        elif text.startswith("use "):
            use_statements.append(UseStatement(text=text, line=line))
            found.last_use_statement = line + 1
        elif _TYPE_DECLARATION.search(text):
            if found.first_type_declaration is None:
                found.first_type_declaration = line + 1

    return use_statements, found


def imported_names(lines: Sequence[str]) -> list[str]:
    """Short names (alias or last segment) imported before the first type declaration."""
    names = []
    for text in lines:
        if text.startswith("use "):
            match = _IMPORTED_NAME.search(text)
            if match:
                names.append(match.group(1))
        elif _TYPE_DECLARATION.search(text):
            break
    return names
