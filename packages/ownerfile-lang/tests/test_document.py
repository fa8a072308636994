from pathlib import Path

import pytest

from ownerfile.lang import FileDocument, TextDocument
from ownerfile.domain import DocumentError, ReadOnlyDocumentError


def test_text_document_line_offsets():
    doc = TextDocument("aaaa\nbbbb\ncccc\n")

    assert doc.line_count() == 4
    assert doc.line_start_offset(0) == 0
    assert doc.line_start_offset(2) == 10
    assert doc.line_start_offset(3) == 15

    with pytest.raises(DocumentError):
        doc.line_start_offset(4)


def test_text_document_insert_invalidates_line_offsets():
    doc = TextDocument("a\nc\n")
    doc.insert_string(2, "b\n")

    assert doc.read_text() == "a\nb\nc\n"
    assert doc.line_start_offset(2) == 4
    assert doc.is_dirty


def test_text_document_rejects_bad_offsets_and_read_only():
    doc = TextDocument("abc")
    with pytest.raises(DocumentError):
        doc.insert_string(4, "x")

    locked = TextDocument("abc", name="CODEOWNERS", read_only=True)
    with pytest.raises(ReadOnlyDocumentError, match="CODEOWNERS"):
        locked.insert_string(0, "x")
    assert locked.read_text() == "abc"


def test_text_document_normalizes_carriage_returns():
    doc = TextDocument("a\r\nb\r\n")

    assert doc.read_text() == "a\nb\n"
    assert doc.ends_with_separator()


def test_file_document_commit_writes_only_when_dirty(tmp_path: Path):
    path = tmp_path / "CODEOWNERS"
    path.write_text("a\n")
    doc = FileDocument.load(path)

    path.write_text("changed outside\n")
    doc.commit()
    assert path.read_text() == "changed outside\n"

    doc.insert_string(doc.text_length(), "b\n")
    doc.commit()
    assert path.read_text() == "a\nb\n"
    assert not doc.is_dirty


def test_file_document_keeps_windows_separators(tmp_path: Path):
    path = tmp_path / "CODEOWNERS"
    path.write_bytes(b"a\r\n")
    doc = FileDocument.load(path)

    doc.insert_string(doc.text_length(), "b\n")
    doc.commit()

    assert path.read_bytes() == b"a\r\nb\r\n"


def test_file_document_load_missing_file(tmp_path: Path):
    path = tmp_path / "CODEOWNERS"
    doc = FileDocument.load(path)

    assert doc.read_text() == ""
    doc.insert_string(0, "* @team\n")
    doc.commit()
    assert path.read_text() == "* @team\n"


def test_file_document_keeps_lone_carriage_returns(tmp_path: Path):
    path = tmp_path / "CODEOWNERS"
    path.write_bytes(b"a\rb\n")
    doc = FileDocument.load(path)

    assert doc.read_text() == "a\rb\n"
    doc.insert_string(doc.text_length(), "c\n")
    doc.commit()

    assert path.read_bytes() == b"a\rb\nc\n"
