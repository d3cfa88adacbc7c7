"""Lexical extraction of class references from PHP source text.

Each rule is a separate function so false positives and negatives can be
traced to one pattern. `extract_references` unions them.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_EXTENDS = re.compile(r"extends ([A-Z][A-Za-z0-9\-_]*)")
_FUNCTION_PARAMETERS = re.compile(r"function \S+\((.*)\)")
_NEW = re.compile(r"new ([A-Z][A-Za-z0-9\-_]*)")
_STATIC_ACCESS = re.compile(r"([A-Z][A-Za-z0-9\-_]*)::")
_INSTANCEOF = re.compile(r"instanceof ([A-Z_][A-Za-z0-9_]*)")


def find_extended(text: str) -> list[str]:
    """Parents named in `extends` clauses."""
    return _EXTENDS.findall(text)


def find_parameter_types(text: str) -> list[str]:
    """Type names of function and method parameters."""
    names = []
    for parameters in _FUNCTION_PARAMETERS.findall(text):
        for parameter in parameters.split(", "):
            name = parameter[: parameter.find(" ")] if " " in parameter else ""
            # Starts with capital letter
            if name and "A" <= name[0] <= "Z":
                names.append(name)
    return names


def find_instantiated(text: str) -> list[str]:
    """Classes instantiated with `new`."""
    return _NEW.findall(text)


def find_static_access(text: str) -> list[str]:
    """Classes used for static member access (`Foo::bar()`)."""
    return _STATIC_ACCESS.findall(text)


def find_instanceof(text: str) -> list[str]:
    """Right-hand operands of `instanceof`."""
    return _INSTANCEOF.findall(text)


RULES = (
    find_extended,
    find_parameter_types,
    find_instantiated,
    find_static_access,
    find_instanceof,
)


def extract_references(text: str) -> list[str]:
    """All class names referenced in `text`, first occurrence order, no duplicates."""
    return _unique(name for rule in RULES for name in rule(text))


def _unique(names: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(names))
