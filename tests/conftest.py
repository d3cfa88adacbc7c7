"""Shared test fixtures for the namespace resolver."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from nsresolver.document import Document
from nsresolver.parser.models import TextEdit


CONTROLLER_SOURCE = """<?php
namespace App\\Http\\Controllers;
use App\\Models\\Post;
use Illuminate\\Http\\Request;
use Acme\\User;

class UserController extends Controller
{
    public function show(Request $request, Post $post)
    {
        $user = new Profile();
        return Cache::remember('user', 60, fn () => $user);
    }
}
"""


@pytest.fixture
def controller_source() -> str:
    """A controller with a namespace, three imports and a blank line before the class."""
    return CONTROLLER_SOURCE


@pytest.fixture
def php_project(tmp_path: Path) -> Path:
    """A temporary composer project with a handful of PHP classes."""
    (tmp_path / "composer.json").write_text(json.dumps({
        "autoload": {"psr-4": {"App\\": "src/"}},
        "autoload-dev": {"psr-4": {"Tests\\": "tests/"}},
    }))

    models = tmp_path / "src" / "Models"
    models.mkdir(parents=True)
    (models / "User.php").write_text(
        "<?php\n\nnamespace App\\Models;\n\nclass User\n{\n}\n"
    )
    (models / "Post.php").write_text(
        "<?php\n\nnamespace App\\Models;\n\nclass Post\n{\n}\n"
    )

    legacy = tmp_path / "src" / "Legacy"
    legacy.mkdir()
    (legacy / "User.php").write_text(
        "<?php\n\nnamespace App\\Legacy;\n\nclass User\n{\n}\n"
    )

    (tmp_path / "lib").mkdir()
    (tmp_path / "lib" / "Helper.php").write_text("<?php\n\nclass Helper\n{\n}\n")

    vendored = tmp_path / "node_modules" / "pkg"
    vendored.mkdir(parents=True)
    (vendored / "Post.php").write_text(
        "<?php\n\nnamespace Vendor\\Pkg;\n\nclass Post\n{\n}\n"
    )

    controllers = tmp_path / "src" / "Http" / "Controllers"
    controllers.mkdir(parents=True)
    (controllers / "UserController.php").write_text(
        "<?php\n"
        "\n"
        "namespace App\\Http\\Controllers;\n"
        "\n"
        "class UserController\n"
        "{\n"
        "    public function show(Post $post)\n"
        "    {\n"
        "        return new Helper();\n"
        "    }\n"
        "}\n"
    )
    return tmp_path


class FakeHost:
    """In-memory host with scripted prompt answers."""

    def __init__(
        self,
        text: str,
        files: dict[str, str] | None = None,
        selections: list | None = None,
        choices: list[str | None] | None = None,
        answers: list[str | None] | None = None,
        root: Path | None = None,
        path: str | None = None,
    ) -> None:
        self._document = Document.from_text(text, path=path)
        self.files = files or {}
        self._selections = list(selections or [])
        self.choices = list(choices or [])
        self.answers = list(answers or [])
        self.root = root
        self.messages: list[tuple[str, bool]] = []
        self.prompts: list[list[str] | str] = []
        self.batches: list[list[TextEdit]] = []

    @property
    def text(self) -> str:
        return self._document.text

    def document(self) -> Document:
        return self._document

    def selections(self) -> list:
        return self._selections

    def workspace_root(self) -> Path | None:
        return self.root

    async def find_candidate_files(self, short_name: str, exclude: str) -> list[str]:
        return [p for p in self.files if Path(p).name == f"{short_name}.php"]

    async def open_document(self, path: str) -> Document:
        if path in self.files:
            return Document.from_text(self.files[path], path=path)
        return Document.from_text(Path(path).read_text(), path=path)

    async def prompt_choice(self, options: list[str]) -> str | None:
        self.prompts.append(options)
        return self.choices.pop(0) if self.choices else None

    async def prompt_text(self, placeholder: str) -> str | None:
        self.prompts.append(placeholder)
        return self.answers.pop(0) if self.answers else None

    async def apply_edits(self, edits: list[TextEdit]) -> None:
        before = self._document
        after = before.apply_edits(edits)
        self._selections = [
            s if isinstance(s, str) else before.shift_position(s, edits, after)
            for s in self._selections
        ]
        self._document = after
        self.batches.append(edits)

    def notify(self, message: str, is_error: bool = False, transient: bool = False) -> None:
        self.messages.append((message, is_error))

    @property
    def errors(self) -> list[str]:
        return [m for m, is_error in self.messages if is_error]


@pytest.fixture
def fake_host_factory():
    return FakeHost
