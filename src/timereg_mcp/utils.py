"""Formatting helpers for hour values."""


def format_time(hours: float) -> str:
    """
    Convert decimal hours to an H:MM string.

    7.5 becomes "7:30". Negative values keep their sign ("-1:15").
    """
    sign = "-" if hours < 0 else ""
    total_minutes = round(abs(hours) * 60)
    h, m = divmod(total_minutes, 60)
    return f"{sign}{h}:{m:02d}"


def format_hours(hours: float) -> str:
    """Two-decimal hours with an h suffix, e.g. "7.50h"."""
    return f"{hours:.2f}h"
