"""Filesystem-backed host: a PHP file inside a directory tree, driven from a terminal."""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path

from nsresolver.commands import Selection
from nsresolver.document import Document
from nsresolver.parser.models import Position, TextEdit
from nsresolver.ui.console import Console

logger = logging.getLogger("nsresolver.workspace")

# Directories never worth descending into when looking for class files.
SKIP_DIRS = {".git", ".nsresolver", ".idea", ".vscode"}


class FileSystemHost:
    """Host implementation over one open PHP file.

    Edits are applied to an in-memory document and written back to disk
    after each batch unless `dry_run` is set.
    """

    def __init__(
        self,
        file_path: Path,
        root: Path | None,
        console: Console,
        selections: list[Selection] | None = None,
        dry_run: bool = False,
    ) -> None:
        self.file_path = file_path.resolve()
        self.root = root.resolve() if root is not None else None
        self.console = console
        self.dry_run = dry_run
        self._document = Document.from_text(
            self.file_path.read_text(encoding="utf-8"), path=str(self.file_path)
        )
        self._selections: list[Selection] = list(selections or [])

    def document(self) -> Document:
        return self._document

    def selections(self) -> list[Selection]:
        return self._selections

    def workspace_root(self) -> Path | None:
        return self.root

    async def find_candidate_files(self, short_name: str, exclude: str) -> list[str]:
        """All `<short_name>.php` files under the workspace, minus excluded paths."""
        search_root = self.root or self.file_path.parent
        patterns = _expand_braces(exclude) if exclude else []
        target = f"{short_name}.php"
        found = []

        for dirpath, dirnames, filenames in os.walk(search_root):
            rel_dir = os.path.relpath(dirpath, search_root)
            dirnames[:] = sorted(
                d
                for d in dirnames
                if d not in SKIP_DIRS
                and not _should_exclude(
                    (os.path.join(rel_dir, d) if rel_dir != "." else d) + "/", patterns
                )
            )
            if target not in filenames:
                continue
            rel_path = os.path.join(rel_dir, target) if rel_dir != "." else target
            if _should_exclude(rel_path, patterns):
                continue
            found.append(str(Path(dirpath) / target))

        logger.debug(f"Found {len(found)} file(s) for {short_name}")
        return found

    async def open_document(self, path: str) -> Document:
        if Path(path).resolve() == self.file_path:
            return self._document
        return Document.from_text(
            Path(path).read_text(encoding="utf-8", errors="replace"), path=path
        )

    async def prompt_choice(self, options: list[str]) -> str | None:
        """Terminal prompt; blocks the event loop until answered."""
        return self.console.choose(options)

    async def prompt_text(self, placeholder: str) -> str | None:
        """Terminal prompt; blocks the event loop until answered."""
        return self.console.ask(placeholder)

    async def apply_edits(self, edits: list[TextEdit]) -> None:
        before = self._document
        after = before.apply_edits(edits)
        self._selections = [
            s if isinstance(s, str) else before.shift_position(s, edits, after)
            for s in self._selections
        ]
        self._document = after
        logger.debug(f"Applied {len(edits)} edit(s) to {self.file_path}")
        if not self.dry_run:
            self.file_path.write_text(after.text, encoding="utf-8")

    def notify(self, message: str, is_error: bool = False, transient: bool = False) -> None:
        if is_error:
            self.console.error(message)
        elif transient:
            self.console.status(message)
        else:
            self.console.success(message)


def parse_selection(line: int | None, column: int | None) -> Position | None:
    """A cursor from 1-based CLI coordinates."""
    if line is None:
        return None
    return Position(line=max(line - 1, 0), character=max((column or 1) - 1, 0))


def _expand_braces(pattern: str) -> list[str]:
    """Split a `{a,b}` glob list into its alternatives."""
    pattern = pattern.strip()
    if pattern.startswith("{") and pattern.endswith("}"):
        return [p.strip() for p in pattern[1:-1].split(",") if p.strip()]
    return [pattern]


def _should_exclude(path: str, patterns: list[str]) -> bool:
    """Check if a path matches any exclusion pattern."""
    path = path.replace(os.sep, "/")
    for pattern in patterns:
        # `**/x/**` must also match `x/...` at the top of the tree
        if fnmatch.fnmatch(path, pattern) or fnmatch.fnmatch("/" + path, pattern):
            return True
    return False
