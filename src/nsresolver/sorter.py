"""Reorder the use block of a document."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from natsort import natsort_keygen

from nsresolver.config import ResolverConfig
from nsresolver.exceptions import NothingToSortError
from nsresolver.parser.models import Range, TextEdit, UseStatement

_natural_key = natsort_keygen()


class SortPolicy(str, Enum):
    """How use lines are compared."""

    ALPHABETICAL = "alphabetical"
    LENGTH = "length"
    NATURAL = "natural"


def policy_from_config(config: ResolverConfig) -> tuple[SortPolicy, bool]:
    """The policy and direction selected by `config`.

    `sort_natural` takes precedence; its direction follows
    `sort_alphabetically` (ascending when set).
    """
    if config.sort_natural:
        return SortPolicy.NATURAL, not config.sort_alphabetically
    if config.sort_alphabetically:
        return SortPolicy.ALPHABETICAL, False
    return SortPolicy.LENGTH, False


def sort_use_statements(
    use_statements: Sequence[UseStatement],
    policy: SortPolicy = SortPolicy.LENGTH,
    descending: bool = False,
) -> list[UseStatement]:
    """Sort use statements, keeping the original line positions.

    The returned statements occupy the same line numbers as the input, in
    the same order; only the text at each line changes.

    Raises:
        NothingToSortError: fewer than two statements.
    """
    if len(use_statements) < 2:
        raise NothingToSortError()

    if policy is SortPolicy.ALPHABETICAL:
        ordered = sorted(use_statements, key=lambda u: u.text.lower(), reverse=descending)
    elif policy is SortPolicy.NATURAL:
        ordered = sorted(use_statements, key=lambda u: _natural_key(u.text), reverse=descending)
    else:
        ordered = sorted(
            use_statements, key=lambda u: (len(u.text), u.text.lower()), reverse=descending
        )

    return [
        UseStatement(text=new.text, line=old.line)
        for old, new in zip(use_statements, ordered)
    ]


def sort_edits(
    use_statements: Sequence[UseStatement], ordered: Sequence[UseStatement]
) -> list[TextEdit]:
    """Edits rewriting each original use line with its sorted text."""
    return [
        TextEdit.replace(Range.of_line(old.line, len(old.text)), new.text)
        for old, new in zip(use_statements, ordered)
    ]
