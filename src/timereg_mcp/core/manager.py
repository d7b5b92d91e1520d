"""Aggregation of daily notes into day, range, week and month views."""

import calendar
import logging
import re
from datetime import date, datetime, timedelta

from timereg_mcp.config import TimeSettings
from timereg_mcp.core.models import DailyTimeData, MonthData, WeekData
from timereg_mcp.core.parser import (
    extract_date_from_filename,
    parse_frontmatter,
    parse_time_entries,
    sum_hours,
)
from timereg_mcp.core.store import NoteFile, NoteStore
from timereg_mcp.core.validator import validate

logger = logging.getLogger(__name__)

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_date(value: date | str) -> date:
    """Accept a date or a YYYY-MM-DD string; anything else is a ValueError."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and ISO_DATE_PATTERN.fullmatch(value):
        try:
            return date.fromisoformat(value)
        except ValueError as e:
            raise ValueError(f"Invalid date '{value}': {e}") from e
    raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD")


def format_date(value: date) -> str:
    return value.isoformat()


def get_monday_of_week(value: date | str) -> date:
    """Monday on or before the given date; a Sunday belongs to the week before."""
    day = parse_date(value)
    return day - timedelta(days=day.weekday())


def _weekday_number(day: date) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return (day.weekday() + 1) % 7


class TimeDataManager:
    """
    Builds DailyTimeData records from a note store.

    Every query re-reads and re-parses its notes; nothing is cached. A note
    that cannot be read is logged and skipped without failing the query.
    """

    def __init__(self, store: NoteStore, settings: TimeSettings):
        self.store = store
        self.settings = settings

    def is_working_day(self, value: date | str) -> bool:
        return _weekday_number(parse_date(value)) in self.settings.working_days

    def get_expected_hours_for_date(self, value: date | str) -> float:
        """Expected hours from the working-days policy, before any frontmatter override."""
        if self.is_working_day(value):
            return self.settings.expected_hours_per_day
        return 0.0

    def _candidate_files(self) -> list[NoteFile]:
        """Notes in the configured folder whose name carries a calendar date."""
        files = self.store.list_candidate_files(self.settings.daily_notes_folder)
        candidates = []
        for note in files:
            day = extract_date_from_filename(note.name)
            if day is None:
                continue
            try:
                parse_date(day)
            except ValueError:
                logger.debug("Skipping %s: %s is not a calendar date", note.path, day)
                continue
            candidates.append(note)
        return candidates

    def _find_note(self, day: str, candidates: list[NoteFile]) -> NoteFile | None:
        """One note per date: the file named exactly YYYY-MM-DD, else the lowest path."""
        matches = [f for f in candidates if extract_date_from_filename(f.name) == day]
        if not matches:
            return None
        for note in matches:
            if note.name == day:
                return note
        return min(matches, key=lambda f: f.path)

    def _process_note(self, note: NoteFile, day: str) -> DailyTimeData | None:
        try:
            content = self.store.read_text(note)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", note.path, e)
            return None

        frontmatter = parse_frontmatter(content)
        entries = parse_time_entries(content)
        expected_hours = self.get_expected_hours_for_date(day)

        validation = validate(
            entries,
            frontmatter,
            expected_hours,
            self.settings.strict_validation,
        )

        return DailyTimeData(
            date=day,
            file_path=note.path,
            frontmatter=frontmatter,
            entries=entries,
            total_hours=sum_hours(entries),
            expected_hours=expected_hours,
            validation=validation,
        )

    def get_daily_data(self, value: date | str) -> DailyTimeData | None:
        """Data for one day, or None when there is no readable note for it."""
        day = format_date(parse_date(value))
        note = self._find_note(day, self._candidate_files())
        if note is None:
            logger.debug("No daily note for %s", day)
            return None
        return self._process_note(note, day)

    def get_data_for_range(self, start: date | str, end: date | str) -> list[DailyTimeData]:
        """All days with a note in [start, end], one note per date, sorted by date."""
        start_str = format_date(parse_date(start))
        end_str = format_date(parse_date(end))
        if start_str > end_str:
            raise ValueError(f"Range start {start_str} is after end {end_str}")

        by_day: dict[str, list[NoteFile]] = {}
        for note in self._candidate_files():
            day = extract_date_from_filename(note.name)
            if start_str <= day <= end_str:
                by_day.setdefault(day, []).append(note)

        results: list[DailyTimeData] = []
        for day in sorted(by_day):
            data = self._process_note(self._find_note(day, by_day[day]), day)
            if data is not None:
                results.append(data)

        logger.debug("Range %s..%s: %d days", start_str, end_str, len(results))
        return results

    def get_week_data(self, start: date | str) -> list[DailyTimeData]:
        """
        Days with a note among the 7 dates starting at `start`.

        `start` is not moved to a Monday; use get_monday_of_week first for
        Monday-aligned weeks. Missing days are omitted.
        """
        first = parse_date(start)
        candidates = self._candidate_files()

        results = []
        for offset in range(7):
            day = format_date(first + timedelta(days=offset))
            note = self._find_note(day, candidates)
            if note is None:
                continue
            data = self._process_note(note, day)
            if data is not None:
                results.append(data)
        return results

    def get_month_data(self, year: int, month: int) -> list[DailyTimeData]:
        """Days with a note in the given month (1-12)."""
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {month}")
        last_day = calendar.monthrange(year, month)[1]
        return self.get_data_for_range(date(year, month, 1), date(year, month, last_day))

    def get_week(self, start: date | str) -> WeekData:
        first = parse_date(start)
        return WeekData(start=first, days=self.get_week_data(first))

    def get_month(self, year: int, month: int) -> MonthData:
        days = self.get_month_data(year, month)
        return MonthData(
            year=year,
            month=month,
            days={parse_date(d.date).day: d for d in days},
        )
