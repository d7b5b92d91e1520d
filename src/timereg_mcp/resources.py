"""MCP Resources for timereg-mcp.

Resources expose day, week and month reports as read-only markdown URIs.
"""

from timereg_mcp.core import TimeDataManager, get_monday_of_week, parse_date
from timereg_mcp.reports import render_day, render_month, render_week


def get_day_resource(manager: TimeDataManager, day: str) -> str:
    """Resource: timereg://days/{date}"""
    data = manager.get_daily_data(day)
    if data is None:
        raise ValueError(f"No daily note found for {day}")
    return render_day(data)


def get_week_resource(manager: TimeDataManager, day: str) -> str:
    """Resource: timereg://weeks/{date}

    The week is the Monday-aligned week containing the given date.
    """
    monday = get_monday_of_week(parse_date(day))
    return render_week(manager.get_week(monday))


def get_month_resource(manager: TimeDataManager, year: str, month: str) -> str:
    """Resource: timereg://months/{year}/{month}"""
    try:
        year_num = int(year)
        month_num = int(month)
    except ValueError as e:
        raise ValueError(f"Invalid month '{year}/{month}': {e}") from e
    return render_month(manager.get_month(year_num, month_num))


def register_resources(mcp, manager: TimeDataManager):
    """Register all resources with the FastMCP server.

    Args:
        mcp: FastMCP server instance
        manager: Data manager used to build the reports
    """

    @mcp.resource("timereg://days/{date}")
    def day_report(date: str):
        """Report for a single day."""
        return get_day_resource(manager, date)

    @mcp.resource("timereg://weeks/{date}")
    def week_report(date: str):
        """Report for the week containing a date."""
        return get_week_resource(manager, date)

    @mcp.resource("timereg://months/{year}/{month}")
    def month_report(year: str, month: str):
        """Report for a calendar month."""
        return get_month_resource(manager, year, month)
