"""Tests for md2mdc/api/convert/cmd_convert.py."""

import pytest

from md2mdc.api.convert.cmd_convert import cmd_convert
from tests.conftest import run_cmd, write_doc


def test_end_to_end_directory(docs_tree, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = run_cmd(cmd_convert, input_path="docs", output_path="out")

    assert result.success is True
    assert result.result == "Processed directory docs to out"
    assert result.output["mode"] == "directory"
    assert result.output["link_prefix"] == "out"
    assert result.output["converted_count"] == 3
    assert result.output["errors"] == []

    text = (tmp_path / "out" / "guide" / "setup-notes.mdc").read_text(encoding="utf-8")
    assert text.startswith("---\ndescription: Docs Guide: Setup Notes\nglobs:\nalwaysApply: false\n---\n\n")
    assert "[other.mdc](mdc:out/guide/other.mdc)" in text
    assert "[site](https://example.com)" in text


def test_escaping_link_left_verbatim(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_doc(tmp_path / "docs" / "guide" / "page.md", "[Escape](../../escape.md) [In](../in.md)")

    run_cmd(cmd_convert, input_path="docs", output_path="out")

    text = (tmp_path / "out" / "guide" / "page.mdc").read_text(encoding="utf-8")
    assert text.endswith("[Escape](../../escape.md) [../in.mdc](mdc:out/in.mdc)")


def test_directory_without_documents(tmp_path):
    src = tmp_path / "src"
    write_doc(src / "readme.txt", "hello")
    out = tmp_path / "out"

    result = run_cmd(cmd_convert, input_path=str(src), output_path=str(out))

    assert result.success is True
    assert result.result == f"Processed directory {src} to {out}"
    assert result.output["converted_count"] == 0
    assert result.output["error_count"] == 0
    assert [p for p in out.rglob("*") if p.is_file()] == []


def test_partial_failure_is_not_fatal(docs_tree, tmp_path):
    (docs_tree / "broken.md").write_bytes(b"\xff\xfe bad")

    result = cmd_convert(input_path=str(docs_tree), output_path=str(tmp_path / "out"))
    messages = [message for _, message in result.progress_callback(result)]

    assert result.success is True
    assert result.output["error_count"] == 1
    assert result.output["errors"][0]["source"].endswith("broken.md")
    assert "UnicodeDecodeError" in result.output["errors"][0]["error"]
    assert result.output["converted_count"] == 3
    assert any(m.startswith("Error processing") and "broken.md" in m for m in messages)
    assert sum(m.startswith("Successfully converted") for m in messages) == 3


def test_output_collision_is_reported_not_raised(tmp_path):
    src = tmp_path / "src"
    write_doc(src / "a.md", "a")
    write_doc(src / "guide" / "b.md", "b")
    write_doc(src / "z.md", "z")
    out = tmp_path / "out"
    write_doc(out / "guide", "a file where a directory belongs")

    result = run_cmd(cmd_convert, input_path=str(src), output_path=str(out))

    assert result.success is True
    assert result.output["converted_count"] == 2
    assert result.output["errors"][0]["source"] == str(src / "guide")
    assert (out / "z.mdc").is_file()


def test_progress_fractions_are_bounded(docs_tree, tmp_path):
    result = cmd_convert(input_path=str(docs_tree), output_path=str(tmp_path / "out"))
    fractions = [fraction for fraction, _ in result.progress_callback(result)]
    assert fractions == sorted(fractions)
    assert all(0.0 <= f <= 1.0 for f in fractions)
    assert fractions[-1] == pytest.approx(1.0)


def test_single_file(docs_tree, tmp_path):
    out = tmp_path / "single"
    source = docs_tree / "guide" / "setup-notes.md"

    result = run_cmd(cmd_convert, input_path=str(source), output_path=str(out))

    assert result.success is True
    assert result.output["mode"] == "file"
    assert result.output["link_prefix"] == "setup-notes.md"
    assert result.result.startswith("Processed file ")
    assert (out / "setup-notes.mdc").is_file()
    assert result.output["converted"] == [
        {"source": str(source), "destination": str(out / "setup-notes.mdc")}
    ]


def test_unrecognized_file_is_skipped(docs_tree, tmp_path):
    source = docs_tree / "notes.txt"
    result = run_cmd(cmd_convert, input_path=str(source), output_path=str(tmp_path / "out"))

    assert result.success is True
    assert result.output["mode"] == "skipped"
    assert result.result == f"Skipping {source} - not a markdown file or directory"
    assert not (tmp_path / "out").exists()


def test_missing_input(tmp_path):
    result = run_cmd(cmd_convert, input_path=str(tmp_path / "nope"), output_path=str(tmp_path / "out"))

    assert result.success is False
    assert result.output["mode"] == "missing"
    assert result.result.startswith("Path not found")


def test_invalid_config(docs_tree, tmp_path, write_config):
    write_config({"link_scheme": ""})

    result = run_cmd(cmd_convert, input_path=str(docs_tree), output_path=str(tmp_path / "out"))

    assert result.success is False
    assert result.output["mode"] == "error"
    assert "Configuration validation error" in result.result
    assert not (tmp_path / "out").exists()


def test_config_scheme_is_used(docs_tree, tmp_path, write_config):
    write_config({"link_scheme": "rule"})

    run_cmd(cmd_convert, input_path=str(docs_tree), output_path=str(tmp_path / "out"), link_prefix="r")

    text = (tmp_path / "out" / "guide" / "setup-notes.mdc").read_text(encoding="utf-8")
    assert "[other.mdc](rule:r/guide/other.mdc)" in text


def test_announce(tmp_path):
    result = cmd_convert(input_path="a", output_path="b")
    assert result.announce == "Converting a to b..."
