"""Resolve a short class name to the namespaces that declare it."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from pathlib import PurePath

from nsresolver.builtins import is_builtin
from nsresolver.document import Document
from nsresolver.exceptions import ClassNotFoundError

_NAMESPACE = re.compile(r"^(?:namespace|<\?php namespace)\s+(.+)?;")


def matches_class_file(path: str, short_name: str) -> bool:
    """Whether a file's base name, up to the first dot, is `short_name`."""
    return PurePath(path).name.split(".")[0] == short_name


def parse_namespace(lines: Sequence[str]) -> str | None:
    """The first namespace declared in `lines`."""
    for text in lines:
        if text.startswith("namespace ") or text.startswith("<?php namespace "):
            match = _NAMESPACE.match(text)
            if match and match.group(1):
                return match.group(1).strip()
    return None


def resolve_namespaces(short_name: str, documents: Iterable[Document]) -> list[str]:
    """Candidate FQCNs for `short_name` among `documents`.

    Documents whose path does not name the class are ignored. A built-in
    class is offered first as the bare short name; a class file without any
    namespace is assumed to declare a global class.

    Raises:
        ClassNotFoundError: no candidate at all.
    """
    candidates: list[str] = []
    seen_documents = 0

    for document in documents:
        if document.path is not None and not matches_class_file(document.path, short_name):
            continue
        seen_documents += 1
        namespace = parse_namespace(document.lines)
        if namespace is None:
            continue
        fqcn = f"{namespace}\\{short_name}"
        if fqcn not in candidates:
            candidates.append(fqcn)

    if is_builtin(short_name):
        candidates.insert(0, short_name)

    if not candidates and seen_documents > 0:
        candidates.append(short_name)

    if not candidates:
        raise ClassNotFoundError()

    return candidates
