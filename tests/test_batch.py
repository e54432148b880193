"""tests for batch rendering."""

import io
from pathlib import Path

import pytest

from mdview.batch import discover_files, render_documents
from mdview.core.models import RenderOptions
from mdview.documents import DocumentNotFoundError
from mdview.exporters.html import HTMLExporter
from mdview.exporters.stdout import StdoutExporter


def test_discover_single_markdown_file(tmp_path: Path) -> None:
    """discovers a single markdown file."""
    md_file = tmp_path / "README.md"
    md_file.write_text("# A", encoding="utf-8")

    assert discover_files(md_file) == [md_file]


def test_discover_directory_of_markdown_files(tmp_path: Path) -> None:
    """discovers markdown files in a directory, sorted by name."""
    (tmp_path / "b.md").write_text("b", encoding="utf-8")
    (tmp_path / "a.markdown").write_text("a", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignore me", encoding="utf-8")

    files = discover_files(tmp_path)

    assert [f.name for f in files] == ["a.markdown", "b.md"]


def test_discover_named_file_with_any_suffix(tmp_path: Path) -> None:
    """returns a file named directly whatever its suffix."""
    txt_file = tmp_path / "notes.txt"
    txt_file.write_text("x", encoding="utf-8")

    assert discover_files(txt_file) == [txt_file]


def test_discover_missing_source_raises(tmp_path: Path) -> None:
    """raises DocumentNotFoundError for a missing source."""
    with pytest.raises(DocumentNotFoundError):
        discover_files(tmp_path / "missing")


def test_render_documents_writes_html(tmp_path: Path) -> None:
    """renders every document in a directory to HTML files."""
    source = tmp_path / "docs"
    source.mkdir()
    (source / "README.md").write_text("# Title", encoding="utf-8")
    (source / "guide.md").write_text("- item", encoding="utf-8")
    out = tmp_path / "out"

    result = render_documents(source, HTMLExporter(out), quiet=True)

    assert result == 0
    assert "<h1>Title</h1>" in (out / "README.html").read_text(encoding="utf-8")
    assert "<li>item</li>" in (out / "guide.html").read_text(encoding="utf-8")


def test_render_documents_defaults_title_to_name(tmp_path: Path) -> None:
    """uses the document file name as page title."""
    source = tmp_path / "guide.md"
    source.write_text("x", encoding="utf-8")

    render_documents(source, HTMLExporter(tmp_path), quiet=True)

    assert "<title>guide.md</title>" in (tmp_path / "guide.html").read_text(
        encoding="utf-8"
    )


def test_render_documents_explicit_title(tmp_path: Path) -> None:
    """keeps a title given in options."""
    source = tmp_path / "guide.md"
    source.write_text("x", encoding="utf-8")

    render_documents(
        source, HTMLExporter(tmp_path), options=RenderOptions(title="Guide"), quiet=True
    )

    assert "<title>Guide</title>" in (tmp_path / "guide.html").read_text(
        encoding="utf-8"
    )


def test_render_documents_raw(tmp_path: Path) -> None:
    """passes markdown through in raw mode."""
    source = tmp_path / "src"
    source.mkdir()
    (source / "README.md").write_bytes(b"# A\r\nb")
    out = tmp_path / "out"

    result = render_documents(source, HTMLExporter(out), raw=True, quiet=True)

    assert result == 0
    assert (out / "README.md").read_bytes() == b"# A\nb"


def test_render_documents_partial_failure(tmp_path: Path) -> None:
    """returns 1 when a document cannot be decoded."""
    source = tmp_path / "src"
    source.mkdir()
    (source / "bad.md").write_bytes(b"\xff\xfe\xfa")
    (source / "good.md").write_text("ok", encoding="utf-8")
    out = tmp_path / "out"

    result = render_documents(source, HTMLExporter(out), quiet=True)

    assert result == 1
    assert (out / "good.html").exists()
    assert not (out / "bad.html").exists()


def test_render_documents_empty_directory(tmp_path: Path) -> None:
    """returns 0 when no markdown files are found."""
    stream = io.StringIO()

    assert render_documents(tmp_path, StdoutExporter(stream), quiet=True) == 0
    assert stream.getvalue() == ""


def test_render_documents_missing_source_raises(tmp_path: Path) -> None:
    """raises DocumentNotFoundError for a missing source without package."""
    with pytest.raises(DocumentNotFoundError):
        render_documents(tmp_path / "README.md", StdoutExporter(io.StringIO()))


def test_render_documents_package_fallback(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """renders a bundled document when the source path is missing."""
    package_dir = tmp_path / "mdview_batch_docs"
    package_dir.mkdir()
    (package_dir / "__init__.py").write_text("", encoding="utf-8")
    (package_dir / "README.md").write_text("# Bundled", encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    stream = io.StringIO()

    result = render_documents(
        tmp_path / "README.md",
        StdoutExporter(stream),
        package="mdview_batch_docs",
        quiet=True,
    )

    assert result == 0
    assert "<h1>Bundled</h1>" in stream.getvalue()


def test_render_documents_dry_run(tmp_path: Path) -> None:
    """writes no files in dry run mode."""
    source = tmp_path / "README.md"
    source.write_text("x", encoding="utf-8")
    out = tmp_path / "out"

    assert render_documents(source, HTMLExporter(out), dry_run=True, quiet=True) == 0
    assert not out.exists()


def test_render_documents_named_text_file(tmp_path: Path) -> None:
    """renders a directly named file without a markdown suffix."""
    source = tmp_path / "NOTES.txt"
    source.write_text("# Notes", encoding="utf-8")
    stream = io.StringIO()

    assert render_documents(source, StdoutExporter(stream), quiet=True) == 0
    assert "<h1>Notes</h1>" in stream.getvalue()
