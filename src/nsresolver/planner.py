"""Decide how a class import is written into the declaration block.

The planner is pure: it looks at the scanned declaration state and returns
an `ImportPlan` plus the text edits that carry it out. Applying the edits
and asking the user for an alias are left to the command layer.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel

from nsresolver.parser.models import (
    DeclarationLines,
    Position,
    Range,
    TextEdit,
    UseStatement,
)

_WORD = re.compile(r"\w+")
_USE_NAME = re.compile(r"(\w+)?;")


class PlanKind(str, Enum):
    """Ways an import can be carried out."""

    INSERT = "insert"
    ALIAS_OR_REPLACE = "alias_or_replace"
    REPLACE_SELECTION = "replace_selection"


class InsertionPoint(BaseModel):
    """Where a new use line goes and the padding around it."""

    line: int
    prepend: str = ""
    append: str = "\n"


class ImportPlan(BaseModel):
    """The decision for importing one FQCN."""

    kind: PlanKind
    fqcn: str
    class_base_name: str
    insertion: InsertionPoint


def class_base_name(fqcn: str) -> str:
    """Last identifier of a qualified name (`App\\Models\\User` -> `User`)."""
    words = _WORD.findall(fqcn)
    return words[-1] if words else fqcn


def use_statement_name(text: str) -> str | None:
    """The name a use line makes available (its alias or last segment)."""
    match = _USE_NAME.search(text)
    return match.group(1) if match else None


def has_conflict(use_statements: Sequence[UseStatement], name: str) -> bool:
    """Whether an existing use statement already claims `name`."""
    return any(use_statement_name(use.text) == name for use in use_statements)


def insertion_point(lines: DeclarationLines) -> InsertionPoint:
    """Compute where the next use statement is inserted."""
    prepend = "" if lines.opening_tag is None else "\n"
    append = "\n"
    line = lines.opening_tag or 0

    if prepend == "" and lines.namespace is not None:
        prepend = "\n"

    if lines.last_use_statement is not None:
        prepend = ""
        line = lines.last_use_statement
    elif lines.namespace is not None:
        line = lines.namespace

    # keep a blank line between the declarations and the type body
    if lines.first_type_declaration is not None and any(
        lines.first_type_declaration - (preceding or 0) <= 1
        for preceding in (lines.last_use_statement, lines.namespace, lines.opening_tag)
    ):
        append = "\n\n"

    return InsertionPoint(line=line, prepend=prepend, append=append)


def plan_import(
    fqcn: str,
    replace_selection: bool,
    use_statements: Sequence[UseStatement],
    lines: DeclarationLines,
) -> ImportPlan:
    """Choose between a plain insert, an alias prompt and a selection rewrite.

    A name conflict always wins: the user has to alias the new class or
    replace the existing import before anything else can happen.
    """
    base_name = class_base_name(fqcn)

    if has_conflict(use_statements, base_name):
        kind = PlanKind.ALIAS_OR_REPLACE
    elif replace_selection:
        kind = PlanKind.REPLACE_SELECTION
    else:
        kind = PlanKind.INSERT

    return ImportPlan(
        kind=kind,
        fqcn=fqcn,
        class_base_name=base_name,
        insertion=insertion_point(lines),
    )


def use_insert_edit(fqcn: str, point: InsertionPoint, alias: str | None = None) -> TextEdit:
    """Insert `use <fqcn>[ as <alias>];` at `point`."""
    statement = f"use {fqcn}" + (f" as {alias}" if alias is not None else "") + ";"
    return TextEdit.insert(
        Position(line=point.line), f"{point.prepend}{statement}{point.append}"
    )


def use_replace_edit(fqcn: str, use_statements: Sequence[UseStatement]) -> TextEdit:
    """Point the use statement that claims `fqcn`'s short name at `fqcn` instead."""
    base_name = class_base_name(fqcn)
    for use in use_statements:
        if use_statement_name(use.text) == base_name:
            return TextEdit.replace(Range.of_line(use.line, len(use.text)), f"use {fqcn};")
    raise ValueError(f"No use statement imports {base_name}")


def word_replace_edit(range: Range, text: str) -> TextEdit:
    """Replace the reference under the cursor."""
    return TextEdit.replace(range, text)
