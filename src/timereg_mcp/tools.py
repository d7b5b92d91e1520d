"""MCP tools for timereg-mcp server.

This module defines the tools exposed by the MCP server:
- get_day: Entries and validation for one day
- get_range: All days with a note in an inclusive date range
- get_week: A week overview, Monday-aligned by default
- get_month: A month overview
- today_status: One-line status for today
"""

import logging
from dataclasses import asdict
from datetime import date

from fastmcp import FastMCP

from timereg_mcp.core import TimeDataManager, get_monday_of_week, parse_date
from timereg_mcp.core.models import DailyTimeData, ValidationIssue
from timereg_mcp.core.validator import get_status_display

logger = logging.getLogger(__name__)


def _issue_to_dict(issue: ValidationIssue) -> dict:
    return {
        "kind": issue.kind.value,
        "message": issue.message,
        "entry_line": issue.entry.line_number if issue.entry else None,
    }


def daily_to_dict(day: DailyTimeData) -> dict:
    """Serialize a day for tool output."""
    display = get_status_display(day.validation.status)
    return {
        "date": day.date,
        "file_path": day.file_path,
        "frontmatter": asdict(day.frontmatter),
        "entries": [asdict(entry) for entry in day.entries],
        "total_hours": day.total_hours,
        "expected_hours": day.expected_hours,
        "validation": {
            "status": day.validation.status.value,
            "label": display.label,
            "icon": display.icon,
            "color": display.color,
            "total_hours": day.validation.total_hours,
            "expected_hours": day.validation.expected_hours,
            "missing_hours": day.validation.missing_hours,
            "issues": [_issue_to_dict(issue) for issue in day.validation.issues],
        },
    }


def get_day(manager: TimeDataManager, day: str) -> dict:
    try:
        data = manager.get_daily_data(day)
    except ValueError as e:
        return {"date": day, "exists": False, "error": str(e)}
    if data is None:
        return {"date": day, "exists": False, "error": "No daily note found"}
    return {"exists": True, **daily_to_dict(data)}


def get_range(manager: TimeDataManager, start_date: str, end_date: str) -> dict:
    try:
        days = manager.get_data_for_range(start_date, end_date)
    except ValueError as e:
        return {"start_date": start_date, "end_date": end_date, "error": str(e)}
    return {
        "start_date": start_date,
        "end_date": end_date,
        "total_hours": sum(d.total_hours for d in days),
        "expected_hours": sum(d.expected_hours for d in days),
        "days": [daily_to_dict(d) for d in days],
    }


def get_week(manager: TimeDataManager, day: str | None = None, align_to_monday: bool = True) -> dict:
    try:
        start = parse_date(day) if day else date.today()
    except ValueError as e:
        return {"date": day, "error": str(e)}
    if align_to_monday:
        start = get_monday_of_week(start)

    week = manager.get_week(start)
    return {
        "week_number": week.week_number,
        "year": week.year,
        "start_date": week.start.isoformat(),
        "end_date": week.end.isoformat(),
        "total_hours": week.total_hours,
        "expected_hours": week.expected_hours,
        "missing_hours": week.missing_hours,
        "days": [daily_to_dict(d) for d in week.days],
    }


def get_month(manager: TimeDataManager, year: int | None = None, month: int | None = None) -> dict:
    today = date.today()
    year = year if year is not None else today.year
    month = month if month is not None else today.month
    try:
        data = manager.get_month(year, month)
    except ValueError as e:
        return {"year": year, "month": month, "error": str(e)}
    return {
        "year": data.year,
        "month": data.month,
        "total_hours": data.total_hours,
        "expected_hours": data.expected_hours,
        "missing_hours": data.missing_hours,
        "working_days": data.working_days,
        "days": [daily_to_dict(data.days[n]) for n in sorted(data.days)],
    }


def today_status(manager: TimeDataManager) -> str:
    today = date.today()
    data = manager.get_daily_data(today)
    if data is None:
        return f"{today.isoformat()}: no time registration found"
    display = get_status_display(data.validation.status)
    return (
        f"{display.icon} {data.date}: {display.label} "
        f"({data.total_hours:g}h / {data.validation.expected_hours:g}h)"
    )


def register_tools(mcp: FastMCP, manager: TimeDataManager) -> None:
    """Register all tools with the FastMCP server.

    Args:
        mcp: FastMCP server instance
        manager: Data manager used to answer queries
    """

    @mcp.tool(name="get_day")
    def get_day_tool(date: str) -> dict:
        """Get time entries and validation for one day.

        Args:
            date: Day to look up (YYYY-MM-DD)

        Returns:
            Day data with entries, totals and validation issues, or
            exists=False with an error message.
        """
        return get_day(manager, date)

    @mcp.tool(name="get_range")
    def get_range_tool(start_date: str, end_date: str) -> dict:
        """Get all days with a daily note between two dates (inclusive).

        Args:
            start_date: First day (YYYY-MM-DD)
            end_date: Last day (YYYY-MM-DD)

        Returns:
            Days sorted by date plus summed total and expected hours.
        """
        return get_range(manager, start_date, end_date)

    @mcp.tool(name="get_week")
    def get_week_tool(date: str | None = None, align_to_monday: bool = True) -> dict:
        """Get a week overview.

        Args:
            date: Any day in the week (YYYY-MM-DD); defaults to today
            align_to_monday: Start the week on the Monday on or before date

        Returns:
            Week number, totals and the days that have a note.
        """
        return get_week(manager, date, align_to_monday)

    @mcp.tool(name="get_month")
    def get_month_tool(year: int | None = None, month: int | None = None) -> dict:
        """Get a month overview.

        Args:
            year: Year; defaults to the current year
            month: Month 1-12; defaults to the current month
        """
        return get_month(manager, year, month)

    @mcp.tool(name="today_status")
    def today_status_tool() -> str:
        """One-line time registration status for today."""
        return today_status(manager)

    logger.debug("Registered time registration tools")
