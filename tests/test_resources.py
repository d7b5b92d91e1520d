"""Tests for MCP resources and the markdown reports behind them."""

from datetime import date

import pytest

from timereg_mcp.config import TimeSettings
from timereg_mcp.core import FilesystemNoteStore, TimeDataManager
from timereg_mcp.core.models import WeekData
from timereg_mcp.reports import render_week
from timereg_mcp.resources import (
    get_day_resource,
    get_month_resource,
    get_week_resource,
)


@pytest.fixture
def manager(tmp_path):
    """Manager over a notes root with two days in one week."""
    root = tmp_path / "notes"
    root.mkdir()
    (root / "2024-03-04.md").write_text("""---
location: Office
distance: 12
---
### 09:00 [[ProjectX]] Build
[client::Acme]
[hours::7.5]
""")
    (root / "2024-03-06.md").write_text("### 10:00 Calls\n[hours::2]\n")
    return TimeDataManager(FilesystemNoteStore(root), TimeSettings())


class TestDayResource:
    def test_renders_day(self, manager):
        text = get_day_resource(manager, "2024-03-04")
        assert text.startswith("# 2024-03-04\n")
        assert "**Status:** ◐ Incomplete" in text
        assert "- Total: 7.50h (7:30)" in text
        assert "- Expected: 8.00h (8:00)" in text
        assert "- Missing: 0:30" in text
        assert "- Location: Office" in text
        assert "- Distance: 12" in text
        assert "| 09:00 | ProjectX | Build | Acme | 7.5 |" in text
        assert "- [info] Missing 0.50 hours (expected 8h, got 7.5h)" in text

    def test_renders_missing_fields(self, manager):
        text = get_day_resource(manager, "2024-03-06")
        assert "| 10:00 | - | Calls | - | 2 |" in text
        assert "- [error] Missing client for entry at 10:00" in text
        assert "## Details" not in text

    def test_missing_day_raises(self, manager):
        with pytest.raises(ValueError, match="No daily note found"):
            get_day_resource(manager, "2024-03-05")


class TestWeekResource:
    def test_renders_monday_aligned_week(self, manager):
        text = get_week_resource(manager, "2024-03-09")
        assert text.startswith("# Week 10, 2024\n")
        assert "2024-03-04 to 2024-03-10" in text
        assert "- Total: 9.50h" in text
        assert "- Expected: 16.00h" in text
        assert "- Missing: 6:30" in text
        assert "- Monday 2024-03-04: ◐ Incomplete, 7.50h / 8h" in text
        assert "- Tuesday 2024-03-05: no note" in text
        assert "- Wednesday 2024-03-06: ✗ Error, 2.00h / 8h" in text
        assert "- Sunday 2024-03-10: no note" in text

    def test_empty_week_shows_surplus_zero(self):
        text = render_week(WeekData(start=date(2024, 1, 1)))
        assert "- Surplus: 0:00" in text
        assert text.count("no note") == 7


class TestMonthResource:
    def test_renders_month(self, manager):
        text = get_month_resource(manager, "2024", "3")
        assert text.startswith("# 2024-03\n")
        assert "- Working days: 2" in text
        assert "- 2024-03-04: ◐ Incomplete, 7.5h / 8h" in text
        assert "- 2024-03-06: ✗ Error, 2.0h / 8h" in text

    def test_empty_month(self, manager):
        text = get_month_resource(manager, "2023", "12")
        assert "No daily notes found." in text

    def test_invalid_month(self, manager):
        with pytest.raises(ValueError):
            get_month_resource(manager, "2024", "march")
