"""Tests for the filesystem note store."""

from pathlib import Path

import pytest

from timereg_mcp.core.store import FilesystemNoteStore, NoteFile


@pytest.fixture
def notes_root(tmp_path: Path) -> Path:
    root = tmp_path / "notes"
    (root / "Daily").mkdir(parents=True)
    (root / "Daily" / "archive").mkdir()
    (root / "Projects").mkdir()
    (root / ".obsidian").mkdir()

    (root / "Daily" / "2024-03-07.md").write_text("### 09:00 Work\n")
    (root / "Daily" / "2024-03-08.md").write_text("### 10:00 Work\n")
    (root / "Daily" / "archive" / "2023-12-01.md").write_text("# Old\n")
    (root / "Daily" / "notes.txt").write_text("not markdown")
    (root / "Projects" / "ProjectX.md").write_text("# ProjectX\n")
    (root / ".obsidian" / "2024-01-01.md").write_text("hidden")
    (root / "inbox.md").write_text("# Inbox\n")
    return root


class TestListCandidateFiles:
    def test_lists_all_markdown_without_folder(self, notes_root: Path):
        store = FilesystemNoteStore(notes_root)
        paths = [f.path for f in store.list_candidate_files()]
        assert "Daily/2024-03-07.md" in paths
        assert "Daily/archive/2023-12-01.md" in paths
        assert "Projects/ProjectX.md" in paths
        assert "inbox.md" in paths

    def test_skips_hidden_directories(self, notes_root: Path):
        store = FilesystemNoteStore(notes_root)
        paths = [f.path for f in store.list_candidate_files()]
        assert ".obsidian/2024-01-01.md" not in paths

    def test_folder_lists_direct_children_only(self, notes_root: Path):
        store = FilesystemNoteStore(notes_root)
        files = store.list_candidate_files("Daily")
        assert files == [
            NoteFile(name="2024-03-07", path="Daily/2024-03-07.md"),
            NoteFile(name="2024-03-08", path="Daily/2024-03-08.md"),
        ]

    def test_name_has_no_extension(self, notes_root: Path):
        store = FilesystemNoteStore(notes_root)
        names = {f.name for f in store.list_candidate_files()}
        assert "inbox" in names

    def test_missing_folder_returns_empty(self, notes_root: Path, caplog):
        store = FilesystemNoteStore(notes_root)
        assert store.list_candidate_files("Nope") == []
        assert any("Folder not found" in r.message for r in caplog.records)

    def test_missing_root_returns_empty(self, tmp_path: Path):
        store = FilesystemNoteStore(tmp_path / "does-not-exist")
        assert store.list_candidate_files() == []

    def test_folder_outside_root_rejected(self, notes_root: Path):
        (notes_root.parent / "outside").mkdir()
        (notes_root.parent / "outside" / "2024-03-07.md").write_text("### 09:00 Leak\n")
        store = FilesystemNoteStore(notes_root)
        with pytest.raises(ValueError, match="outside the notes root"):
            store.list_candidate_files("../outside")

    def test_folder_with_dot_segments_inside_root(self, notes_root: Path):
        store = FilesystemNoteStore(notes_root)
        files = store.list_candidate_files("Projects/../Daily")
        assert [f.path for f in files] == ["Daily/2024-03-07.md", "Daily/2024-03-08.md"]


class TestReadText:
    def test_path_outside_root_rejected(self, notes_root: Path):
        (notes_root.parent / "secret.md").write_text("secret")
        store = FilesystemNoteStore(notes_root)
        with pytest.raises(ValueError, match="outside the notes root"):
            store.read_text(NoteFile(name="secret", path="../secret.md"))

    def test_reads_content(self, notes_root: Path):
        store = FilesystemNoteStore(notes_root)
        note = NoteFile(name="2024-03-07", path="Daily/2024-03-07.md")
        assert store.read_text(note) == "### 09:00 Work\n"

    def test_missing_file_raises(self, notes_root: Path):
        store = FilesystemNoteStore(notes_root)
        with pytest.raises(OSError):
            store.read_text(NoteFile(name="2024-01-01", path="Daily/2024-01-01.md"))
