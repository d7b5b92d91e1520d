"""Data models for parsed and validated time registrations."""

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum


class ValidationStatus(str, Enum):
    """Overall status of a day, listed from least to most severe."""

    NO_DATA = "no-data"
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    WARNING = "warning"
    ERROR = "error"


class IssueKind(str, Enum):
    """Severity of a single validation issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class TimeEntry:
    """One logged activity, anchored by a `### HH:MM` header."""

    time: str  # HH:MM
    description: str = ""
    project: str | None = None  # From a leading [[Name]] link
    client: str | None = None  # From [client::Value]
    hours: float | None = None  # From [hours::Number]; None means not recorded
    line_number: int = 0  # 1-based line of the header
    raw_content: str = ""  # Header line plus non-blank continuation lines


@dataclass(frozen=True)
class DailyFrontmatter:
    """Optional metadata block at the top of a daily note."""

    location: str | None = None
    distance: int | None = None
    category: str | None = None
    day_start: str | None = None  # HH:MM
    day_end: str | None = None  # HH:MM


@dataclass(frozen=True)
class ValidationIssue:
    """A data-quality problem found in a day's entries."""

    kind: IssueKind
    message: str
    entry: TimeEntry | None = None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one day."""

    status: ValidationStatus
    issues: list[ValidationIssue] = field(default_factory=list)
    total_hours: float = 0.0
    expected_hours: float = 0.0
    missing_hours: float = 0.0  # expected - total; negative means surplus


@dataclass(frozen=True)
class DailyTimeData:
    """Everything known about a single day, built fresh for every query."""

    date: str  # YYYY-MM-DD
    file_path: str
    frontmatter: DailyFrontmatter
    entries: list[TimeEntry]
    total_hours: float
    expected_hours: float
    validation: ValidationResult


def _sum_total(days) -> float:
    return sum(day.total_hours for day in days)


def _sum_expected(days) -> float:
    return sum(day.expected_hours for day in days)


@dataclass(frozen=True)
class WeekData:
    """Seven consecutive days starting at `start`; `days` only holds days with a note."""

    start: date
    days: list[DailyTimeData] = field(default_factory=list)

    @property
    def year(self) -> int:
        return self.start.isocalendar()[0]

    @property
    def week_number(self) -> int:
        return self.start.isocalendar()[1]

    @property
    def end(self) -> date:
        return self.start + timedelta(days=6)

    @property
    def total_hours(self) -> float:
        return _sum_total(self.days)

    @property
    def expected_hours(self) -> float:
        return _sum_expected(self.days)

    @property
    def missing_hours(self) -> float:
        return self.expected_hours - self.total_hours

    def slots(self) -> list[DailyTimeData | None]:
        """Return the 7 calendar positions, with None where a day has no note."""
        by_date = {day.date: day for day in self.days}
        return [
            by_date.get((self.start + timedelta(days=offset)).isoformat())
            for offset in range(7)
        ]


@dataclass(frozen=True)
class MonthData:
    """One calendar month of days keyed by day of month."""

    year: int
    month: int  # 1-12
    days: dict[int, DailyTimeData] = field(default_factory=dict)

    @property
    def total_hours(self) -> float:
        return _sum_total(self.days.values())

    @property
    def expected_hours(self) -> float:
        return _sum_expected(self.days.values())

    @property
    def missing_hours(self) -> float:
        return self.expected_hours - self.total_hours

    @property
    def working_days(self) -> int:
        """Number of days in the month that expected any hours."""
        return sum(1 for day in self.days.values() if day.expected_hours > 0)
