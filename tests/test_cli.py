"""Tests for the CLI interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from nsresolver.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def controller(php_project: Path) -> Path:
    return php_project / "src" / "Http" / "Controllers" / "UserController.php"


class TestCLIImport:
    def test_import_by_name(self, runner: CliRunner, php_project: Path, controller: Path):
        result = runner.invoke(main, ["import", str(controller), "Post", "--path", str(php_project)])
        assert result.exit_code == 0, result.output
        assert "use App\\Models\\Post;" in controller.read_text()

    def test_import_ignores_excluded_dirs(
        self, runner: CliRunner, php_project: Path, controller: Path
    ):
        result = runner.invoke(main, ["import", str(controller), "Post", "--path", str(php_project)])
        assert result.exit_code == 0
        assert "Vendor\\Pkg" not in controller.read_text()

    def test_import_under_cursor(self, runner: CliRunner, php_project: Path, controller: Path):
        result = runner.invoke(
            main,
            ["import", str(controller), "--line", "9", "--column", "21", "--path", str(php_project)],
        )
        assert result.exit_code == 0, result.output
        assert "use Helper;" in controller.read_text()

    def test_import_picks_from_prompt(
        self, runner: CliRunner, php_project: Path, controller: Path
    ):
        result = runner.invoke(
            main, ["import", str(controller), "User", "--path", str(php_project)], input="2\n"
        )
        assert result.exit_code == 0, result.output
        assert "use App\\Models\\User;" in controller.read_text()

    def test_import_dry_run(self, runner: CliRunner, php_project: Path, controller: Path):
        before = controller.read_text()
        result = runner.invoke(
            main, ["import", str(controller), "Post", "--dry-run", "--path", str(php_project)]
        )
        assert result.exit_code == 0
        assert "use App\\Models\\Post;" in result.output
        assert controller.read_text() == before

    def test_import_not_found(self, runner: CliRunner, php_project: Path, controller: Path):
        result = runner.invoke(main, ["import", str(controller), "Nope", "--path", str(php_project)])
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_import_without_selection(self, runner: CliRunner, controller: Path):
        result = runner.invoke(main, ["import", str(controller)])
        assert result.exit_code != 0


class TestCLIOtherCommands:
    def test_import_all(self, runner: CliRunner, php_project: Path, controller: Path):
        result = runner.invoke(main, ["import-all", str(controller), "--path", str(php_project)])
        assert result.exit_code == 0, result.output
        text = controller.read_text()
        assert "use App\\Models\\Post;" in text
        assert "use Helper;" in text

    def test_expand(self, runner: CliRunner, php_project: Path, controller: Path):
        result = runner.invoke(
            main,
            ["expand", str(controller), "--line", "7", "--column", "27", "--path", str(php_project)],
        )
        assert result.exit_code == 0, result.output
        assert "public function show(\\App\\Models\\Post $post)" in controller.read_text()

    def test_expand_requires_cursor(self, runner: CliRunner, php_project: Path, controller: Path):
        before = controller.read_text()

        result = runner.invoke(main, ["expand", str(controller), "Post", "--path", str(php_project)])
        assert result.exit_code != 0

        result = runner.invoke(main, ["expand", str(controller), "--path", str(php_project)])
        assert result.exit_code != 0
        assert "No class is selected" in result.output
        assert controller.read_text() == before

    def test_namespace_with_malformed_manifest(self, runner: CliRunner, tmp_path: Path):
        (tmp_path / "composer.json").write_text("[]")
        file = tmp_path / "src" / "A.php"
        file.parent.mkdir()
        file.write_text("<?php\n\nclass A {}\n")
        result = runner.invoke(main, ["namespace", str(file), "--path", str(tmp_path)])
        assert result.exit_code == 1
        assert "No autoload key" in result.output
        assert file.read_text() == "<?php\n\nclass A {}\n"

    def test_sort(self, runner: CliRunner, tmp_path: Path):
        file = tmp_path / "A.php"
        file.write_text("<?php\n\nuse Zeta\\Longer;\nuse Alpha;\n\nclass A {}\n")
        result = runner.invoke(main, ["sort", str(file), "--path", str(tmp_path)])
        assert result.exit_code == 0
        assert file.read_text() == "<?php\n\nuse Alpha;\nuse Zeta\\Longer;\n\nclass A {}\n"

    def test_sort_nothing(self, runner: CliRunner, tmp_path: Path):
        file = tmp_path / "A.php"
        file.write_text("<?php\n\nclass A {}\n")
        result = runner.invoke(main, ["sort", str(file), "--path", str(tmp_path)])
        assert result.exit_code != 0
        assert "Nothing to sort" in result.output

    def test_namespace(self, runner: CliRunner, php_project: Path):
        file = php_project / "src" / "Services" / "Billing.php"
        file.parent.mkdir(parents=True)
        file.write_text("<?php\n\nclass Billing {}\n")
        result = runner.invoke(main, ["namespace", str(file), "--path", str(php_project)])
        assert result.exit_code == 0, result.output
        assert "namespace App\\Services;" in file.read_text()


class TestCLIConfig:
    def test_config_show(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(main, ["config", "show", "--path", str(tmp_path)])
        assert result.exit_code == 0
        assert "autoSort" in result.output

    def test_config_set_and_get(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(main, ["config", "set", "autoSort", "true", "--path", str(tmp_path)])
        assert result.exit_code == 0
        assert "Set" in result.output

        result = runner.invoke(main, ["config", "get", "autoSort", "--path", str(tmp_path)])
        assert result.exit_code == 0
        assert "True" in result.output

    def test_config_unknown_key(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(main, ["config", "get", "nope", "--path", str(tmp_path)])
        assert result.exit_code != 0


class TestCLIVersion:
    def test_version(self, runner: CliRunner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
