"""Note store: enumerates and reads daily note files."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoteFile:
    """Handle to a note in a store."""

    name: str  # File name without extension, e.g. "2024-03-07"
    path: str  # Relative to the store root, posix separators


class NoteStore(Protocol):
    """What the aggregator needs from a note store."""

    def list_candidate_files(self, folder: str = "") -> list[NoteFile]:
        """List markdown notes, restricted to `folder` when given."""
        ...

    def read_text(self, note: NoteFile) -> str:
        """Return the full text of a note. May raise OSError."""
        ...


def _validate_path(base_path: Path, requested_path: Path) -> Path:
    """Validate that requested_path is within base_path (prevent directory traversal).

    Returns:
        The resolved absolute path

    Raises:
        ValueError: If the path is outside base_path
    """
    base_abs = base_path.resolve()
    requested_abs = requested_path.resolve()
    try:
        requested_abs.relative_to(base_abs)
    except ValueError as e:
        raise ValueError(f"Path '{requested_path}' is outside the notes root") from e
    return requested_abs


class FilesystemNoteStore:
    """
    Note store backed by a directory of markdown files.

    Without a folder, every .md file under the root is listed (hidden files
    and directories skipped). With a folder, only the .md files directly in
    that folder are listed. Folders and note paths must stay inside the root.
    """

    def __init__(self, root: Path):
        self.root = root

    def _walk(self) -> Iterator[Path]:
        for file_path in self.root.rglob("*.md"):
            if not file_path.is_file():
                continue
            relative_parts = file_path.relative_to(self.root).parts
            if any(part.startswith(".") for part in relative_parts):
                continue
            yield file_path

    def list_candidate_files(self, folder: str = "") -> list[NoteFile]:
        if not self.root.exists():
            logger.warning("Notes root not found: %s", self.root)
            return []

        if folder:
            folder_path = _validate_path(self.root, self.root / folder)
            if not folder_path.is_dir():
                logger.warning("Folder not found: %s", folder)
                return []
            base = self.root.resolve()
            files = sorted(p for p in folder_path.glob("*.md") if p.is_file())
        else:
            base = self.root
            files = sorted(self._walk())

        return [
            NoteFile(name=p.stem, path=p.relative_to(base).as_posix())
            for p in files
        ]

    def read_text(self, note: NoteFile) -> str:
        file_path = _validate_path(self.root, self.root / note.path)
        return file_path.read_text(encoding="utf-8")
