"""User-facing resolver commands.

`Resolver` wires the pure engine (extractor, scanner, namespace resolver,
planner, sorter, PSR-4 deriver) to a `Host` that owns the buffer, the
filesystem and the prompts. Every public command catches resolver errors
and reports them through the host; nothing propagates past a command.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from nsresolver.config import ResolverConfig
from nsresolver.document import Document
from nsresolver.exceptions import (
    AliasConflictError,
    NoSelectionError,
    NothingToSortError,
    NoWorkspaceFolderError,
    NsResolverError,
    PromptCancelled,
)
from nsresolver.namespaces import matches_class_file, resolve_namespaces
from nsresolver.parser.extractor import extract_references
from nsresolver.parser.models import Position, TextEdit, UseStatement
from nsresolver.parser.scanner import imported_names, scan_declarations
from nsresolver.planner import (
    PlanKind,
    has_conflict,
    plan_import,
    use_insert_edit,
    use_replace_edit,
    word_replace_edit,
)
from nsresolver.psr4 import derive_namespace, find_manifest, load_psr4_map, namespace_edit
from nsresolver.sorter import policy_from_config, sort_edits, sort_use_statements

logger = logging.getLogger("nsresolver.commands")

MESSAGE_PREFIX = "PHP Namespace Resolver: "
ALIAS_PLACEHOLDER = "Enter an alias or leave it empty to replace"

# A selection is either a cursor position in the document or a class name.
Selection = Position | str


class Host(Protocol):
    """What the resolver needs from an editor or a workspace."""

    def document(self) -> Document: ...

    def selections(self) -> list[Selection]: ...

    def workspace_root(self) -> Path | None: ...

    async def find_candidate_files(self, short_name: str, exclude: str) -> list[str]: ...

    async def open_document(self, path: str) -> Document: ...

    async def prompt_choice(self, options: list[str]) -> str | None: ...

    async def prompt_text(self, placeholder: str) -> str | None: ...

    async def apply_edits(self, edits: list[TextEdit]) -> None: ...

    def notify(self, message: str, is_error: bool = False, transient: bool = False) -> None: ...


class Resolver:
    """Import, expand, sort and namespace commands over a host."""

    def __init__(self, host: Host, config: ResolverConfig | None = None) -> None:
        self.host = host
        self.config = config or ResolverConfig()
        self.errors = 0

    # -- commands ----------------------------------------------------------

    async def import_selections(self) -> None:
        """Import the class under every selection, one after another.

        Selections are re-read after each import since the host moves them
        along with the edits.
        """
        for i in range(len(self.host.selections())):
            await self.import_class(self.host.selections()[i])

    async def expand_selections(self) -> None:
        """Expand the class under every selection, one after another."""
        for i in range(len(self.host.selections())):
            await self.expand_class(self.host.selections()[i])

    async def import_class(self, selection: Selection) -> None:
        try:
            await self._import_class(selection)
        except NsResolverError as e:
            self.show_error(str(e))
        except PromptCancelled:
            logger.debug("Import cancelled")

    async def import_all(self) -> None:
        """Import every referenced class that is not imported yet."""
        document = self.host.document()
        imported = imported_names(document.lines)
        for name in extract_references(document.text):
            if name not in imported:
                await self.import_class(name)

    async def expand_class(self, selection: Selection) -> None:
        try:
            await self._expand_class(selection)
        except NsResolverError as e:
            self.show_error(str(e))
        except PromptCancelled:
            logger.debug("Expand cancelled")

    async def sort_imports(self) -> None:
        try:
            await self._sort_imports()
        except NsResolverError as e:
            self.show_error(str(e))
            return
        self.show_message("Imports are sorted.")

    async def generate_namespace(self) -> None:
        try:
            await self._generate_namespace()
        except NsResolverError as e:
            self.show_error(str(e))

    # -- implementation ----------------------------------------------------

    async def _import_class(self, selection: Selection) -> None:
        resolving = self._resolving(selection)

        if "\\" in resolving:
            fqcn = resolving[1:] if resolving.startswith("\\") else resolving
            if not fqcn or fqcn.endswith("\\"):
                raise NoSelectionError()
            replace_selection = True
        else:
            fqcn = await self._pick_class(resolving)
            replace_selection = False

        use_statements, lines = scan_declarations(self.host.document().lines, stop_at_class=fqcn)
        plan = plan_import(fqcn, replace_selection, use_statements, lines)
        logger.debug(f"Import plan for {fqcn}: {plan.kind.value}")

        if plan.kind is PlanKind.ALIAS_OR_REPLACE:
            alias = await self._ask_alias(use_statements)
            if alias == "":
                await self.host.apply_edits([use_replace_edit(fqcn, use_statements)])
                await self._auto_sort()
                self.show_message("The import is replaced.")
                return
            edits = self._selection_edits(selection, alias)
            edits.append(use_insert_edit(fqcn, plan.insertion, alias))
        elif plan.kind is PlanKind.REPLACE_SELECTION:
            edits = self._selection_edits(selection, plan.class_base_name)
            edits.append(use_insert_edit(fqcn, plan.insertion))
        else:
            edits = [use_insert_edit(fqcn, plan.insertion)]

        await self.host.apply_edits(edits)
        await self._auto_sort()
        self.show_message("The class is imported.")

    async def _expand_class(self, selection: Selection) -> None:
        # Expansion rewrites the word under a cursor; a bare name has none.
        if isinstance(selection, str):
            raise NoSelectionError()
        word_range = self.host.document().word_range_at(selection)
        if word_range is None:
            raise NoSelectionError()

        fqcn = await self._pick_class(self.host.document().get_text(word_range))
        prefix = "\\" if self.config.leading_separator else ""
        await self.host.apply_edits([word_replace_edit(word_range, prefix + fqcn)])

    async def _sort_imports(self) -> None:
        use_statements, _ = scan_declarations(self.host.document().lines)
        policy, descending = policy_from_config(self.config)
        ordered = sort_use_statements(use_statements, policy, descending)
        logger.debug(f"Sorting {len(use_statements)} use statements ({policy.value})")
        await self.host.apply_edits(sort_edits(use_statements, ordered))

    async def _auto_sort(self) -> None:
        if not self.config.auto_sort:
            return
        try:
            await self._sort_imports()
        except NothingToSortError:
            pass

    async def _generate_namespace(self) -> None:
        root = self.host.workspace_root()
        document = self.host.document()
        if root is None or document.path is None:
            raise NoWorkspaceFolderError()

        file_path = Path(document.path)
        manifest_path = find_manifest(file_path, root)
        manifest = await self.host.open_document(str(manifest_path))
        try:
            data = json.loads(manifest.text)
        except json.JSONDecodeError as e:
            raise NsResolverError(f"Invalid JSON in {manifest_path}: {e}") from e

        psr4 = load_psr4_map(data)
        namespace = derive_namespace(file_path, manifest_path.parent, psr4)
        logger.debug(f"Derived namespace {namespace} for {file_path}")

        _, lines = scan_declarations(document.lines)
        await self.host.apply_edits([namespace_edit(document, namespace, lines)])

    async def _pick_class(self, short_name: str) -> str:
        files = await self.host.find_candidate_files(short_name, self.config.exclude)
        documents = [
            await self.host.open_document(path)
            for path in files
            if matches_class_file(path, short_name)
        ]
        namespaces = resolve_namespaces(short_name, documents)
        logger.debug(f"Candidates for {short_name}: {namespaces}")

        if len(namespaces) == 1:
            return namespaces[0]

        picked = await self.host.prompt_choice(namespaces)
        if picked is None:
            raise PromptCancelled()
        return picked

    async def _ask_alias(self, use_statements: list[UseStatement]) -> str:
        """Prompt until the alias is free, empty (replace) or the prompt is dismissed."""
        while True:
            alias = await self.host.prompt_text(ALIAS_PLACEHOLDER)
            if alias is None:
                raise PromptCancelled()
            if alias and has_conflict(use_statements, alias):
                self.show_error(str(AliasConflictError()))
                continue
            return alias

    def _resolving(self, selection: Selection) -> str:
        if isinstance(selection, str):
            if not selection:
                raise NoSelectionError()
            return selection

        document = self.host.document()
        word_range = document.word_range_at(selection)
        if word_range is None:
            raise NoSelectionError()
        return document.get_text(word_range)

    def _selection_edits(self, selection: Selection, text: str) -> list[TextEdit]:
        if isinstance(selection, str):
            return []
        word_range = self.host.document().word_range_at(selection)
        if word_range is None:
            return []
        return [word_replace_edit(word_range, text)]

    # -- messages ----------------------------------------------------------

    def show_message(self, message: str, error: bool = False) -> None:
        if error:
            self.errors += 1
        if self.config.show_message_on_status_bar:
            self.host.notify(message, is_error=error, transient=True)
        else:
            self.host.notify(MESSAGE_PREFIX + message, is_error=error)

    def show_error(self, message: str) -> None:
        self.show_message(message, error=True)
