"""Derive a file's namespace from the PSR-4 autoload map of composer.json."""

from __future__ import annotations

import logging
import re
from pathlib import Path, PurePosixPath
from typing import Any

from nsresolver.config import MANIFEST_FILE
from nsresolver.document import Document
from nsresolver.exceptions import (
    ManifestNotFoundError,
    NoAutoloadConfigError,
    NoPsr4EntryError,
)
from nsresolver.parser.models import DeclarationLines, Position, Range, TextEdit

logger = logging.getLogger("nsresolver.psr4")

_SEPARATOR_RUN = re.compile(r"\\{2,}")
_NAMESPACE_STATEMENT = re.compile(r"namespace (.+)")

Psr4Map = dict[str, list[str]]


def find_manifest(file_path: Path, workspace_root: Path) -> Path:
    """Walk up from the file's directory to the workspace root for composer.json."""
    workspace_root = workspace_root.resolve()
    current = file_path.resolve().parent
    while True:
        candidate = current / MANIFEST_FILE
        if candidate.is_file():
            logger.debug(f"Using manifest {candidate}")
            return candidate
        if current == workspace_root or current == current.parent:
            break
        current = current.parent
    raise ManifestNotFoundError()


def load_psr4_map(manifest: Any) -> Psr4Map:
    """Merge the `autoload` and `autoload-dev` PSR-4 entries of a manifest.

    Dev entries override regular ones with the same prefix. Base
    directories are always returned as lists.
    """
    if not isinstance(manifest, dict):
        raise NoAutoloadConfigError()
    autoload = manifest.get("autoload")
    autoload_dev = manifest.get("autoload-dev")
    if autoload is None and autoload_dev is None:
        raise NoAutoloadConfigError()

    psr4: Psr4Map = {}
    for section in (autoload, autoload_dev):
        entries = section.get("psr-4") if isinstance(section, dict) else None
        if not isinstance(entries, dict):
            continue
        for prefix, dirs in entries.items():
            psr4[prefix] = [dirs] if isinstance(dirs, str) else list(dirs)

    if not psr4:
        raise NoPsr4EntryError()
    return psr4


def derive_namespace(file_path: Path, project_root: Path, psr4: Psr4Map) -> str:
    """Namespace a file should declare under the PSR-4 map.

    The entry whose base directory occurs in the file's relative directory
    is used; when several do, the longest base directory wins.
    """
    if not psr4:
        raise NoPsr4EntryError()

    relative = file_path.resolve().parent.relative_to(project_root.resolve())
    relative_path = "/" + PurePosixPath(*relative.parts).as_posix()
    if not relative_path.endswith("/"):
        relative_path += "/"
    if relative_path == "/./":
        relative_path = "/"

    prefix, base_dir = _match_entry(relative_path, psr4)

    relative_path = relative_path.lstrip("/")
    if base_dir == relative_path:
        remainder = ""
    else:
        remainder = relative_path.replace(base_dir, "", 1).strip("/").replace("/", "\\")

    prefix = prefix.rstrip("\\")
    if not remainder or remainder.lower() == prefix.lower():
        # dir already namespaced
        namespace = prefix
    else:
        namespace = f"{prefix}\\{remainder}"

    return _SEPARATOR_RUN.sub(r"\\", namespace).strip("\\")


def _match_entry(relative_path: str, psr4: Psr4Map) -> tuple[str, str]:
    best: tuple[str, str] | None = None
    for prefix, dirs in psr4.items():
        for base_dir in dirs:
            base_dir = _normalize_dir(base_dir)
            if base_dir in relative_path and (best is None or len(base_dir) > len(best[1])):
                best = (prefix, base_dir)
    if best is None:
        raise NoPsr4EntryError(f"No psr-4 entry matches {relative_path.strip('/') or '/'}.")
    return best


def _normalize_dir(base_dir: str) -> str:
    base_dir = base_dir.replace("\\", "/")
    if base_dir.startswith("./"):
        base_dir = base_dir[2:]
    return base_dir


def namespace_edit(document: Document, namespace: str, lines: DeclarationLines) -> TextEdit:
    """Replace the namespace statement, or insert one after declare / the opening tag."""
    if lines.namespace is not None:
        line = lines.namespace - 1
        text = document.line_at(line)
        return TextEdit.replace(
            Range.of_line(line, len(text)),
            _NAMESPACE_STATEMENT.sub(lambda _: f"namespace {namespace};", text, count=1),
        )

    line = lines.declare or lines.opening_tag or 0
    if line == 0:
        return TextEdit.insert(Position(line=0), f"namespace {namespace};\n\n")
    return TextEdit.insert(Position(line=line), f"\nnamespace {namespace};\n")
