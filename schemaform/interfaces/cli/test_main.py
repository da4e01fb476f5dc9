"""
Tests for the command-line interface.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from .main import app

runner = CliRunner()

SCHEMA = {
    "type": "object",
    "properties": {
        "title": "<h1>(.*?)</h1>",
        "links": {
            "type": "array",
            "init": "<a [^>]*>.*?</a>",
            "properties": {
                "href": 'href="(.*?)"',
                "text": ">(.*?)</a>",
            },
        },
    },
}

DOCUMENT = '<h1>Index</h1><a href="/a">A</a><a href="/b">B</a>'


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo the CLI's logging setup."""
    logger = logging.getLogger("schemaform")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def files(tmp_path: Path) -> tuple[Path, Path]:
    schema_path = tmp_path / "schema.json"
    schema_path.write_text(json.dumps(SCHEMA))
    document_path = tmp_path / "page.html"
    document_path.write_text(DOCUMENT)
    return schema_path, document_path


def test_analyze_to_file(files: tuple[Path, Path], tmp_path: Path) -> None:
    """Test analyze writes the extracted JSON."""
    schema_path, document_path = files
    output = tmp_path / "out.json"

    result = runner.invoke(
        app, ["analyze", str(schema_path), str(document_path), "--output", str(output)]
    )

    assert result.exit_code == 0
    assert json.loads(output.read_text()) == {
        "title": "Index",
        "links": [{"href": "/a", "text": "A"}, {"href": "/b", "text": "B"}],
    }


def test_analyze_to_stdout(files: tuple[Path, Path]) -> None:
    """Test analyze prints the result without --output."""
    schema_path, document_path = files

    result = runner.invoke(app, ["analyze", str(schema_path), str(document_path)])

    assert result.exit_code == 0
    assert '"title": "Index"' in result.output


def test_analyze_missing_file(files: tuple[Path, Path], tmp_path: Path) -> None:
    """Test a missing document exits with an error."""
    schema_path, _ = files

    result = runner.invoke(app, ["analyze", str(schema_path), str(tmp_path / "nope.html")])

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_validate(files: tuple[Path, Path]) -> None:
    """Test validate renders the schema tree."""
    schema_path, _ = files

    result = runner.invoke(app, ["validate", str(schema_path)])

    assert result.exit_code == 0
    assert "links" in result.output
    assert "Schema is valid" in result.output


def test_validate_invalid_schema(tmp_path: Path) -> None:
    """Test validate reports malformed schemas."""
    schema_path = tmp_path / "bad.json"
    schema_path.write_text(json.dumps({"type": "object", "properties": {"a": {"type": "uuid"}}}))

    result = runner.invoke(app, ["validate", str(schema_path)])

    assert result.exit_code == 1
    assert "unknown type" in result.output


def test_version() -> None:
    """Test version prints the package version."""
    from schemaform import __version__

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
