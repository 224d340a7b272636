"""
Unit tests for the code import rendering pipeline hooks.
"""

from dataclasses import dataclass, field
from typing import Any

import pytest

from codeimport.config import CodeImportConfig
from codeimport.errors import InvalidConfigurationError, InvalidReferenceError
from codeimport.plugin import LINES_PROP, PLUGIN_NAME, CodeImportPlugin


@dataclass
class FakeCodeBlock:
    """Minimal code block implementing the hook protocol."""

    meta_options: dict[str, str] = field(default_factory=dict)
    props: dict[str, Any] = field(default_factory=dict)
    source_file_path: str | None = None
    code: list[str] = field(default_factory=list)

    def insert_lines(self, index: int, lines) -> None:
        self.code[index:index] = list(lines)


@pytest.fixture
def plugin(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.py").write_text("import os\n\nprint(os.getcwd())\n", encoding="utf-8")
    (tmp_path / "docs").mkdir()
    return CodeImportPlugin(CodeImportConfig(root_dir=str(tmp_path), line_separator="\n"))


@pytest.mark.codeimport
class TestCodeImportPluginCreation:
    """Test plugin construction."""

    def test_name(self, plugin) -> None:
        """Test the plugin name."""
        assert plugin.name == PLUGIN_NAME

    def test_from_options(self, tmp_path) -> None:
        """Test building the plugin from host options."""
        plugin = CodeImportPlugin.from_options({"rootDir": str(tmp_path)})

        assert plugin.name == "code-import"

    def test_from_options_relative_root(self) -> None:
        """Test a relative root fails before any block is processed."""
        with pytest.raises(InvalidConfigurationError):
            CodeImportPlugin.from_options({"rootDir": "relative/dir"})


@pytest.mark.codeimport
class TestPreprocessMetadata:
    """Test loading lines into block props."""

    def test_loads_lines_relative_to_document(self, plugin, tmp_path) -> None:
        """Test the file option resolves against the document directory."""
        block = FakeCodeBlock(
            meta_options={"file": "../src/app.py#L3"},
            source_file_path=str(tmp_path / "docs" / "index.md"),
        )

        plugin.preprocess_metadata(block)

        assert block.props[LINES_PROP] == ["print(os.getcwd())"]

    def test_loads_lines_with_root_placeholder(self, plugin, tmp_path) -> None:
        """Test the root placeholder in the file option."""
        block = FakeCodeBlock(
            meta_options={"file": "^<rootDir>/src/app.py#L1-L2"},
            source_file_path=str(tmp_path / "docs" / "index.md"),
        )

        plugin.preprocess_metadata(block)

        assert block.props[LINES_PROP] == ["import os", ""]

    def test_block_without_file_option(self, plugin) -> None:
        """Test blocks without the file option are left untouched."""
        block = FakeCodeBlock(meta_options={"title": "example"})

        plugin.preprocess_metadata(block)

        assert LINES_PROP not in block.props

    def test_block_without_document_uses_working_directory(self, plugin, tmp_path, monkeypatch) -> None:
        """Test a block with no source document resolves against the working directory."""
        monkeypatch.chdir(tmp_path / "src")
        block = FakeCodeBlock(meta_options={"file": "app.py#L1"})

        plugin.preprocess_metadata(block)

        assert block.props[LINES_PROP] == ["import os"]

    def test_invalid_reference_propagates(self, plugin) -> None:
        """Test parse errors reach the host."""
        block = FakeCodeBlock(meta_options={"file": "#L1"})

        with pytest.raises(InvalidReferenceError):
            plugin.preprocess_metadata(block)


@pytest.mark.codeimport
class TestPreprocessCode:
    """Test inserting loaded lines into the block."""

    def test_inserts_lines_at_top(self, plugin, tmp_path) -> None:
        """Test loaded lines are inserted before existing code."""
        block = FakeCodeBlock(
            meta_options={"file": "^<rootDir>/src/app.py#L1"},
            source_file_path=str(tmp_path / "docs" / "index.md"),
            code=["# existing"],
        )

        plugin.preprocess_metadata(block)
        plugin.preprocess_code(block)

        assert block.code == ["import os", "# existing"]

    def test_no_insert_without_lines(self, plugin) -> None:
        """Test nothing is inserted when no lines were loaded."""
        block = FakeCodeBlock(meta_options={"file": "app.py"}, code=["keep"])

        plugin.preprocess_code(block)

        assert block.code == ["keep"]

    def test_no_insert_without_file_option(self, plugin) -> None:
        """Test nothing is inserted for blocks without the file option."""
        block = FakeCodeBlock(props={LINES_PROP: ["stray"]}, code=["keep"])

        plugin.preprocess_code(block)

        assert block.code == ["keep"]
