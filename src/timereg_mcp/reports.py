"""Markdown reports for day, week and month views."""

from datetime import timedelta

from timereg_mcp.core.models import DailyTimeData, MonthData, WeekData
from timereg_mcp.core.validator import get_status_display
from timereg_mcp.utils import format_hours, format_time

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _status_line(day: DailyTimeData) -> str:
    display = get_status_display(day.validation.status)
    return f"{display.icon} {display.label}"


def _difference_line(expected: float, total: float) -> str:
    difference = expected - total
    if difference > 0:
        return f"- Missing: {format_time(difference)}\n"
    return f"- Surplus: {format_time(-difference)}\n"


def render_day(day: DailyTimeData) -> str:
    """Full report for a single day."""
    lines = [f"# {day.date}\n\n"]
    lines.append(f"**Status:** {_status_line(day)}\n")
    lines.append(f"**File:** `{day.file_path}`\n\n")

    lines.append(f"- Total: {format_hours(day.total_hours)} ({format_time(day.total_hours)})\n")
    lines.append(
        f"- Expected: {format_hours(day.validation.expected_hours)} "
        f"({format_time(day.validation.expected_hours)})\n"
    )
    lines.append(_difference_line(day.validation.expected_hours, day.total_hours))

    fm = day.frontmatter
    details = [
        ("Location", fm.location),
        ("Distance", fm.distance),
        ("Category", fm.category),
        ("Day start", fm.day_start),
        ("Day end", fm.day_end),
    ]
    if any(value is not None for _, value in details):
        lines.append("\n## Details\n\n")
        for label, value in details:
            if value is not None:
                lines.append(f"- {label}: {value}\n")

    lines.append("\n## Entries\n\n")
    if day.entries:
        lines.append("| Time | Project | Description | Client | Hours |\n")
        lines.append("|---|---|---|---|---|\n")
        for entry in day.entries:
            hours = f"{entry.hours:g}" if entry.hours is not None else "-"
            lines.append(
                f"| {entry.time} | {entry.project or '-'} | {entry.description or '-'} "
                f"| {entry.client or '-'} | {hours} |\n"
            )
    else:
        lines.append("No time entries.\n")

    if day.validation.issues:
        lines.append("\n## Issues\n\n")
        for issue in day.validation.issues:
            lines.append(f"- [{issue.kind.value}] {issue.message}\n")

    return "".join(lines)


def render_week(week: WeekData) -> str:
    """Overview of one week, one line per calendar day."""
    lines = [f"# Week {week.week_number}, {week.year}\n\n"]
    lines.append(f"{week.start.isoformat()} to {week.end.isoformat()}\n\n")
    lines.append(f"- Total: {format_hours(week.total_hours)}\n")
    lines.append(f"- Expected: {format_hours(week.expected_hours)}\n")
    lines.append(_difference_line(week.expected_hours, week.total_hours))
    lines.append("\n## Days\n\n")

    for offset, day in enumerate(week.slots()):
        current = week.start + timedelta(days=offset)
        name = WEEKDAY_NAMES[current.weekday()]
        if day is None:
            lines.append(f"- {name} {current.isoformat()}: no note\n")
        else:
            lines.append(
                f"- {name} {day.date}: {_status_line(day)}, "
                f"{format_hours(day.total_hours)} / {day.expected_hours:g}h\n"
            )

    return "".join(lines)


def render_month(month: MonthData) -> str:
    """Overview of one month, one line per day with a note."""
    lines = [f"# {month.year}-{month.month:02d}\n\n"]
    lines.append(f"- Total: {format_hours(month.total_hours)}\n")
    lines.append(f"- Expected: {format_hours(month.expected_hours)}\n")
    lines.append(_difference_line(month.expected_hours, month.total_hours))
    lines.append(f"- Working days: {month.working_days}\n")
    lines.append("\n## Days\n\n")

    if not month.days:
        lines.append("No daily notes found.\n")
    for day_number in sorted(month.days):
        day = month.days[day_number]
        lines.append(
            f"- {day.date}: {_status_line(day)}, {day.total_hours:.1f}h / {day.expected_hours:g}h\n"
        )

    return "".join(lines)
