"""Parser for time entries and frontmatter in daily notes.

Parsing never fails on malformed markdown. Fields that cannot be recovered are
left unset and surface later as validation issues.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from timereg_mcp.core.models import DailyFrontmatter, TimeEntry

logger = logging.getLogger(__name__)

# Frontmatter block anchored at the very start of the note
FRONTMATTER_PATTERN = re.compile(r"---\r?\n(.*?)\r?\n---", re.DOTALL)

# (field name, pattern, converter); first match in the block wins
FRONTMATTER_FIELDS = (
    ("location", re.compile(r"^location:[ \t]*(.+)$", re.MULTILINE), str.strip),
    ("distance", re.compile(r"^distance:[ \t]*(\d+)", re.MULTILINE), int),
    ("category", re.compile(r"^category:[ \t]*(.+)$", re.MULTILINE), str.strip),
    ("day_start", re.compile(r"^day-start:[ \t]*(\d{2}:\d{2})", re.MULTILINE), str),
    ("day_end", re.compile(r"^day-end:[ \t]*(\d{2}:\d{2})", re.MULTILINE), str),
)

HEADER_PATTERN = re.compile(r"^###\s+(\d{2}:\d{2})\s+(.+)")
PROJECT_LINK_PATTERN = re.compile(r"\[\[([^\]]+)\]\]\s*(.*)")
CLIENT_TAG_PATTERN = re.compile(r"\[client::([^\]]+)\]")
HOURS_TAG_PATTERN = re.compile(r"\[hours::([\d.]+)\]")
DATE_PATTERN = re.compile(r"(\d{4}-\d{2}-\d{2})")


def parse_frontmatter(content: str) -> DailyFrontmatter:
    """
    Extract the known fields from a leading `---` ... `---` block.

    Returns an empty DailyFrontmatter when there is no block. Each field is
    matched independently; a malformed value leaves its field unset.
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return DailyFrontmatter()

    block = match.group(1)
    values = {}
    for name, pattern, convert in FRONTMATTER_FIELDS:
        field_match = pattern.search(block)
        if not field_match:
            continue
        value = convert(field_match.group(1))
        if value == "":
            continue
        values[name] = value

    return DailyFrontmatter(**values)


@dataclass
class _OpenEntry:
    """Partial fields of the entry currently being scanned."""

    time: str
    line_number: int
    description: str
    project: str | None = None
    client: str | None = None
    hours: float | None = None
    raw_lines: list[str] = field(default_factory=list)

    def finalize(self) -> TimeEntry:
        return TimeEntry(
            time=self.time,
            description=self.description,
            project=self.project,
            client=self.client,
            hours=self.hours,
            line_number=self.line_number,
            raw_content="\n".join(self.raw_lines),
        )


class EntryScanner:
    """
    Line-by-line state machine that turns note text into TimeEntry records.

    The scanner is either without an open entry or holding one. A header line
    finalizes the open entry (if it captured a time) and opens a new one.
    Non-blank continuation lines extend the open entry. Blank lines and lines
    before the first header are ignored. `finish()` finalizes the last entry.
    """

    def __init__(self):
        self._open: _OpenEntry | None = None
        self._entries: list[TimeEntry] = []

    @property
    def has_open_entry(self) -> bool:
        return self._open is not None

    def feed(self, line_number: int, line: str) -> None:
        """Consume one source line (1-based line number)."""
        line = line.rstrip("\r")
        if not line.strip():
            return

        header = HEADER_PATTERN.match(line)
        if header:
            self._close()
            self._open = self._open_entry(line_number, line, header.group(1), header.group(2))
        elif self._open is not None:
            self._continue(line)

    def finish(self) -> list[TimeEntry]:
        """Finalize the open entry and return every entry in document order."""
        self._close()
        return list(self._entries)

    def _open_entry(self, line_number: int, line: str, time: str, rest: str) -> _OpenEntry:
        entry = _OpenEntry(
            time=time,
            line_number=line_number,
            description=rest.strip(),
            raw_lines=[line],
        )
        link = PROJECT_LINK_PATTERN.match(rest)
        if link:
            entry.project = link.group(1)
            entry.description = link.group(2).strip()
        return entry

    def _continue(self, line: str) -> None:
        entry = self._open
        entry.raw_lines.append(line)

        client = CLIENT_TAG_PATTERN.search(line)
        if client:
            entry.client = client.group(1).strip()

        hours = HOURS_TAG_PATTERN.search(line)
        if hours:
            try:
                entry.hours = float(hours.group(1))
            except ValueError:
                logger.debug("Ignoring malformed hours tag on entry at %s: %r", entry.time, hours.group(1))

    def _close(self) -> None:
        if self._open is not None and self._open.time:
            self._entries.append(self._open.finalize())
        self._open = None


def parse_time_entries(content: str) -> list[TimeEntry]:
    """Parse every `### HH:MM` entry in the note, in document order."""
    scanner = EntryScanner()
    for index, line in enumerate(content.split("\n")):
        scanner.feed(index + 1, line)
    return scanner.finish()


def sum_hours(entries: Iterable[TimeEntry]) -> float:
    """Sum the recorded hours; entries without hours count as zero."""
    return sum((entry.hours for entry in entries if entry.hours is not None), 0.0)


def _to_minutes(value: str) -> int:
    hours, _, minutes = value.partition(":")
    return int(hours or 0) * 60 + int(minutes or 0)


def calculate_hours_difference(start: str, end: str) -> float:
    """
    Hours between two HH:MM times.

    No wraparound: an end before the start gives a negative result.
    """
    return (_to_minutes(end) - _to_minutes(start)) / 60


def extract_date_from_filename(name: str) -> str | None:
    """Return the first YYYY-MM-DD substring in a file name, or None."""
    match = DATE_PATTERN.search(name)
    return match.group(1) if match else None
