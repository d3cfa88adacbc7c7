"""Tests for import planning and insertion points."""

from __future__ import annotations

import pytest

from nsresolver.document import Document
from nsresolver.parser.models import DeclarationLines, Position, Range, UseStatement
from nsresolver.parser.scanner import scan_declarations
from nsresolver.planner import (
    InsertionPoint,
    PlanKind,
    class_base_name,
    has_conflict,
    insertion_point,
    plan_import,
    use_insert_edit,
    use_replace_edit,
    use_statement_name,
)


class TestNames:
    def test_class_base_name(self):
        assert class_base_name("App\\Models\\User") == "User"
        assert class_base_name("User") == "User"

    def test_use_statement_name(self):
        assert use_statement_name("use Acme\\User;") == "User"
        assert use_statement_name("use Acme\\User as Member;") == "Member"
        assert use_statement_name("use function Acme\\helper;") == "helper"
        assert use_statement_name("use Acme\\{A, B};") is None

    def test_has_conflict_ignores_path(self):
        uses = [UseStatement(text="use Acme\\User;", line=2)]
        assert has_conflict(uses, "User")
        assert not has_conflict(uses, "Post")


class TestInsertionPoint:
    def test_double_newline_without_blank_line(self):
        point = insertion_point(
            DeclarationLines(opening_tag=1, namespace=2, last_use_statement=5, first_type_declaration=6)
        )
        assert point == InsertionPoint(line=5, prepend="", append="\n\n")

    def test_single_newline_with_blank_line(self):
        point = insertion_point(
            DeclarationLines(opening_tag=1, namespace=2, last_use_statement=5, first_type_declaration=7)
        )
        assert point.append == "\n"
        assert point.line == 5

    def test_after_namespace(self):
        point = insertion_point(
            DeclarationLines(opening_tag=1, namespace=3, first_type_declaration=5)
        )
        assert point == InsertionPoint(line=3, prepend="\n", append="\n")

    def test_after_opening_tag(self):
        point = insertion_point(DeclarationLines(opening_tag=1, first_type_declaration=2))
        assert point == InsertionPoint(line=1, prepend="\n", append="\n\n")

    def test_empty_file(self):
        point = insertion_point(DeclarationLines())
        assert point == InsertionPoint(line=0, prepend="", append="\n")

    def test_namespace_without_opening_tag(self):
        point = insertion_point(DeclarationLines(namespace=1))
        assert point.prepend == "\n"
        assert point.line == 1


class TestPlanImport:
    def test_conflict_produces_alias_plan(self):
        uses = [UseStatement(text="use Acme\\User;", line=2)]
        lines = DeclarationLines(opening_tag=1, last_use_statement=3)
        plan = plan_import("App\\Models\\User", False, uses, lines)
        assert plan.kind is PlanKind.ALIAS_OR_REPLACE
        assert plan.class_base_name == "User"

    def test_conflict_wins_over_replace_selection(self):
        uses = [UseStatement(text="use Acme\\User;", line=2)]
        plan = plan_import("App\\Models\\User", True, uses, DeclarationLines())
        assert plan.kind is PlanKind.ALIAS_OR_REPLACE

    def test_insert(self):
        plan = plan_import("App\\Models\\Post", False, [], DeclarationLines(opening_tag=1))
        assert plan.kind is PlanKind.INSERT
        assert plan.insertion.line == 1

    def test_replace_selection(self):
        plan = plan_import("App\\Models\\Post", True, [], DeclarationLines(opening_tag=1))
        assert plan.kind is PlanKind.REPLACE_SELECTION


class TestEdits:
    def test_insert_after_last_use(self, controller_source: str):
        document = Document.from_text(controller_source)
        uses, lines = scan_declarations(document.lines)
        plan = plan_import("App\\Models\\Comment", False, uses, lines)

        result = document.apply_edits([use_insert_edit(plan.fqcn, plan.insertion)])

        assert result.lines[2:7] == (
            "use App\\Models\\Post;",
            "use Illuminate\\Http\\Request;",
            "use Acme\\User;",
            "use App\\Models\\Comment;",
            "",
        )
        assert result.lines[7].startswith("class UserController")

    def test_insert_adds_blank_line_before_class(self):
        document = Document.from_text("<?php\nnamespace App;\nclass A {}\n")
        _, lines = scan_declarations(document.lines)

        result = document.apply_edits([use_insert_edit("Foo\\Bar", insertion_point(lines))])

        assert result.text == "<?php\nnamespace App;\n\nuse Foo\\Bar;\n\nclass A {}\n"

    def test_insert_with_alias(self):
        edit = use_insert_edit("App\\Models\\User", InsertionPoint(line=3), alias="Member")
        assert edit.new_text == "use App\\Models\\User as Member;\n"
        assert edit.range.start == Position(line=3)

    def test_replace_existing_use(self, controller_source: str):
        document = Document.from_text(controller_source)
        uses, _ = scan_declarations(document.lines)

        edit = use_replace_edit("App\\Models\\User", uses)

        assert edit.range == Range.of_line(4, len("use Acme\\User;"))
        assert document.apply_edits([edit]).lines[4] == "use App\\Models\\User;"

    def test_replace_without_conflict(self):
        with pytest.raises(ValueError):
            use_replace_edit("App\\Models\\User", [])
