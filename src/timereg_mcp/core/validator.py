"""Validation of a day's time entries against the expected hours."""

from dataclasses import dataclass

from timereg_mcp.core.models import (
    DailyFrontmatter,
    IssueKind,
    TimeEntry,
    ValidationIssue,
    ValidationResult,
    ValidationStatus,
)
from timereg_mcp.core.parser import calculate_hours_difference, sum_hours

# Shortfalls up to this many hours are treated as rounding noise
MISSING_HOURS_TOLERANCE = 0.1


def _format_number(value: float) -> str:
    """Render 8.0 as "8" and 8.5 as "8.5"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def effective_expected_hours(frontmatter: DailyFrontmatter, expected_hours: float) -> float:
    """Use the day-start/day-end span when both are set, else the policy value."""
    if frontmatter.day_start and frontmatter.day_end:
        return calculate_hours_difference(frontmatter.day_start, frontmatter.day_end)
    return expected_hours


def _check_entry(entry: TimeEntry, strict: bool) -> list[ValidationIssue]:
    issues = []
    if not entry.client:
        issues.append(
            ValidationIssue(IssueKind.ERROR, f"Missing client for entry at {entry.time}", entry)
        )
    if entry.hours is None:
        issues.append(
            ValidationIssue(IssueKind.ERROR, f"Missing hours for entry at {entry.time}", entry)
        )
    if strict:
        if not entry.project:
            issues.append(
                ValidationIssue(IssueKind.WARNING, f"No project linked for entry at {entry.time}", entry)
            )
        if not entry.description or not entry.description.strip():
            issues.append(
                ValidationIssue(IssueKind.WARNING, f"No description for entry at {entry.time}", entry)
            )
    return issues


def validate(
    entries: list[TimeEntry],
    frontmatter: DailyFrontmatter,
    expected_hours: float,
    strict: bool = False,
) -> ValidationResult:
    """
    Validate a day's entries.

    Args:
        entries: Parsed entries in document order
        frontmatter: Parsed frontmatter; day-start/day-end override expected_hours
        expected_hours: Hours expected by the working-days policy
        strict: Also warn about missing project links, descriptions and day bounds

    Returns:
        ValidationResult with issues in detection order. Status precedence is
        error, then incomplete, then warning, then complete. Surplus hours never
        raise an issue.
    """
    total_hours = sum_hours(entries)
    expected = effective_expected_hours(frontmatter, expected_hours)

    if not entries:
        return ValidationResult(
            status=ValidationStatus.NO_DATA,
            issues=[ValidationIssue(IssueKind.INFO, "No time entries found")],
            total_hours=0.0,
            expected_hours=expected,
            missing_hours=expected,
        )

    issues: list[ValidationIssue] = []
    for entry in entries:
        issues.extend(_check_entry(entry, strict))

    missing_hours = expected - total_hours
    hours_incomplete = missing_hours > MISSING_HOURS_TOLERANCE
    if hours_incomplete:
        issues.append(
            ValidationIssue(
                IssueKind.INFO,
                f"Missing {missing_hours:.2f} hours "
                f"(expected {_format_number(expected)}h, got {_format_number(total_hours)}h)",
            )
        )

    if strict and (not frontmatter.day_start or not frontmatter.day_end):
        issues.append(
            ValidationIssue(IssueKind.WARNING, "Missing day-start or day-end in frontmatter")
        )

    if any(issue.kind == IssueKind.ERROR for issue in issues):
        status = ValidationStatus.ERROR
    elif hours_incomplete:
        status = ValidationStatus.INCOMPLETE
    elif any(issue.kind == IssueKind.WARNING for issue in issues):
        status = ValidationStatus.WARNING
    else:
        status = ValidationStatus.COMPLETE

    return ValidationResult(
        status=status,
        issues=issues,
        total_hours=total_hours,
        expected_hours=expected,
        missing_hours=missing_hours,
    )


@dataclass(frozen=True)
class StatusDisplay:
    """How a status is shown to a user."""

    icon: str
    color: str
    label: str


STATUS_DISPLAY = {
    ValidationStatus.COMPLETE: StatusDisplay("✓", "#4caf50", "Complete"),
    ValidationStatus.INCOMPLETE: StatusDisplay("◐", "#2196f3", "Incomplete"),
    ValidationStatus.WARNING: StatusDisplay("⚠", "#ff9800", "Warning"),
    ValidationStatus.ERROR: StatusDisplay("✗", "#f44336", "Error"),
    ValidationStatus.NO_DATA: StatusDisplay("○", "#9e9e9e", "No Data"),
}


def get_status_display(status: ValidationStatus) -> StatusDisplay:
    """Look up the display triple; accepts the enum or its string value."""
    return STATUS_DISPLAY[ValidationStatus(status)]


def get_status_icon(status: ValidationStatus) -> str:
    return get_status_display(status).icon


def get_status_color(status: ValidationStatus) -> str:
    return get_status_display(status).color


def get_status_text(status: ValidationStatus) -> str:
    return get_status_display(status).label
