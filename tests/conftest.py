"""Shared pytest configuration and fixtures for all tests."""

import json
import os
import tempfile
from pathlib import Path

import pytest

# Logging is configured once per process; keep the log file out of the real home
os.environ["MD2MDC_HOME"] = tempfile.mkdtemp(prefix="md2mdc-tests-")


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests")
    config.addinivalue_line("markers", "integration: integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def write_doc(path: Path, content: str) -> Path:
    """Write a UTF-8 document, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def md2mdc_home(tmp_path: Path, monkeypatch) -> Path:
    """Point MD2MDC_HOME at an empty per-test directory (no config file)."""
    home = tmp_path / ".md2mdc"
    home.mkdir()
    monkeypatch.setenv("MD2MDC_HOME", str(home))
    return home


@pytest.fixture
def write_config(md2mdc_home: Path):
    """Write a config.json into MD2MDC_HOME."""

    def _write(data) -> Path:
        path = md2mdc_home / "config.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def docs_tree(tmp_path: Path) -> Path:
    """A small markdown tree rooted at tmp_path/docs.

    docs/
        index.md
        notes.txt
        empty/
        guide/
            other.md
            setup-notes.md
    """
    docs = tmp_path / "docs"
    write_doc(docs / "index.md", "# Index\n\nStart with [setup](guide/setup-notes.md).\n")
    write_doc(docs / "notes.txt", "not markdown\n")
    (docs / "empty").mkdir()
    write_doc(docs / "guide" / "other.md", "---\ntitle: Other\n---\n\nOther page.\n")
    write_doc(
        docs / "guide" / "setup-notes.md",
        "See [Other](./other.md) and [site](https://example.com).",
    )
    return docs
