"""Tests for core.file_handler."""

import pytest

from core.file_handler import FileHandlerError, read_file


class TestReadFile:
    def test_read_txt(self, tmp_path):
        f = tmp_path / "sample.txt"
        f.write_text("Hello, world!", encoding="utf-8")
        assert read_file(f) == "Hello, world!"

    def test_read_md_verbatim(self, tmp_path):
        f = tmp_path / "sample.md"
        content = "# Title\n\nParagraph."
        f.write_text(content, encoding="utf-8")
        assert read_file(f) == content

    def test_latin1_fallback(self, tmp_path):
        f = tmp_path / "legacy.txt"
        f.write_bytes("café".encode("latin-1"))
        assert read_file(f) == "café"

    def test_read_docx_paragraphs(self, tmp_path):
        from docx import Document
        f = tmp_path / "sample.docx"
        doc = Document()
        doc.add_paragraph("First paragraph.")
        doc.add_paragraph("")
        doc.add_paragraph("Second paragraph.")
        doc.save(str(f))
        assert read_file(f) == "First paragraph.\n\nSecond paragraph."

    def test_corrupt_docx(self, tmp_path):
        f = tmp_path / "broken.docx"
        f.write_bytes(b"not a zip archive")
        with pytest.raises(FileHandlerError, match="Cannot read .docx"):
            read_file(f)

    def test_unsupported_extension(self, tmp_path):
        f = tmp_path / "sample.pdf"
        f.write_text("data")
        with pytest.raises(FileHandlerError, match="Unsupported file type"):
            read_file(f)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileHandlerError, match="File not found"):
            read_file(tmp_path / "nonexistent.txt")
