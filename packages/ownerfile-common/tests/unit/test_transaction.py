from pathlib import Path

from ownerfile.common import TransactionManager


def test_transaction_writes_on_commit_only(tmp_path: Path):
    tm = TransactionManager(tmp_path)
    tm.add_write("nested/CODEOWNERS", "* @owner\n")

    assert tm.pending_count == 1
    assert tm.preview() == ["[WRITE] nested/CODEOWNERS"]
    assert not (tmp_path / "nested" / "CODEOWNERS").exists()

    tm.commit()

    assert (tmp_path / "nested" / "CODEOWNERS").read_text() == "* @owner\n"
    assert tm.pending_count == 0


def test_create_does_not_overwrite_existing_file(tmp_path: Path):
    existing = tmp_path / "CODEOWNERS"
    existing.write_text("keep me\n")

    tm = TransactionManager(tmp_path)
    tm.add_create("CODEOWNERS")
    assert tm.preview() == ["[CREATE] CODEOWNERS"]
    tm.commit()

    assert existing.read_text() == "keep me\n"


def test_write_preserves_separators(tmp_path: Path):
    tm = TransactionManager(tmp_path)
    tm.add_write("CODEOWNERS", "a\r\nb\r\n")
    tm.commit()

    assert (tmp_path / "CODEOWNERS").read_bytes() == b"a\r\nb\r\n"
