"""
Core of timereg-mcp.

Parses time entries out of daily notes, validates them against the expected
hours and aggregates the results per day, week, month or arbitrary range.
"""

from timereg_mcp.core.manager import TimeDataManager, get_monday_of_week, parse_date
from timereg_mcp.core.models import (
    DailyFrontmatter,
    DailyTimeData,
    IssueKind,
    MonthData,
    TimeEntry,
    ValidationIssue,
    ValidationResult,
    ValidationStatus,
    WeekData,
)
from timereg_mcp.core.parser import (
    EntryScanner,
    calculate_hours_difference,
    extract_date_from_filename,
    parse_frontmatter,
    parse_time_entries,
)
from timereg_mcp.core.store import FilesystemNoteStore, NoteFile, NoteStore
from timereg_mcp.core.validator import get_status_display, validate

__all__ = [
    "DailyFrontmatter",
    "DailyTimeData",
    "EntryScanner",
    "FilesystemNoteStore",
    "IssueKind",
    "MonthData",
    "NoteFile",
    "NoteStore",
    "TimeDataManager",
    "TimeEntry",
    "ValidationIssue",
    "ValidationResult",
    "ValidationStatus",
    "WeekData",
    "calculate_hours_difference",
    "extract_date_from_filename",
    "get_monday_of_week",
    "get_status_display",
    "parse_date",
    "parse_frontmatter",
    "parse_time_entries",
    "validate",
]
