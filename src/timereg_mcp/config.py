"""Configuration module for timereg-mcp.

Loads configuration from environment variables and an optional YAML settings
file, with sensible defaults.
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

DEFAULT_WORKING_DAYS = frozenset({1, 2, 3, 4, 5})  # Monday to Friday
SETTINGS_FILENAME = ".timereg.yaml"


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _parse_working_days(value) -> frozenset[int]:
    if isinstance(value, str):
        items = [part.strip() for part in value.split(",") if part.strip()]
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = list(value)
    else:
        raise ValueError(f"Invalid working_days value {value!r}")

    days = set()
    for item in items:
        try:
            day = int(item)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid working_days value {item!r}: {e}") from e
        if not 0 <= day <= 6:
            raise ValueError(f"Working days must be between 0 (Sunday) and 6 (Saturday), got {day}")
        days.add(day)
    return frozenset(days)


def _parse_hours(value) -> float:
    try:
        hours = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid expected_hours_per_day value {value!r}: {e}") from e
    if hours <= 0:
        raise ValueError(f"Expected hours per day must be > 0, got {hours}")
    return hours


@dataclass(frozen=True)
class TimeSettings:
    """Time registration policy. Read-only input to every query."""

    daily_notes_folder: str = ""
    expected_hours_per_day: float = 8.0
    working_days: frozenset[int] = field(default_factory=lambda: DEFAULT_WORKING_DAYS)
    strict_validation: bool = False
    # Accepted but not consulted: surplus hours never produce an issue.
    warn_on_excess_hours: bool = False

    def __post_init__(self):
        object.__setattr__(self, "expected_hours_per_day", _parse_hours(self.expected_hours_per_day))
        object.__setattr__(self, "working_days", _parse_working_days(self.working_days))
        object.__setattr__(self, "strict_validation", _parse_bool(self.strict_validation))
        object.__setattr__(self, "warn_on_excess_hours", _parse_bool(self.warn_on_excess_hours))

    @classmethod
    def from_mapping(cls, data: dict) -> "TimeSettings":
        """Build settings from a mapping (e.g. a parsed YAML file); unknown keys are ignored."""
        kwargs = {}
        if data.get("daily_notes_folder") is not None:
            kwargs["daily_notes_folder"] = str(data["daily_notes_folder"]).strip("/")
        if data.get("expected_hours_per_day") is not None:
            kwargs["expected_hours_per_day"] = _parse_hours(data["expected_hours_per_day"])
        if data.get("working_days") is not None:
            kwargs["working_days"] = _parse_working_days(data["working_days"])
        if data.get("strict_validation") is not None:
            kwargs["strict_validation"] = _parse_bool(data["strict_validation"])
        if data.get("warn_on_excess_hours") is not None:
            kwargs["warn_on_excess_hours"] = _parse_bool(data["warn_on_excess_hours"])
        return cls(**kwargs)

    @classmethod
    def from_file(cls, path: Path) -> "TimeSettings":
        """Load settings from a YAML file."""
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in settings file {path}: {e}") from e

        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise ValueError(f"Settings file {path} must contain a mapping")
        return cls.from_mapping(raw)


# Environment variable -> settings key
SETTINGS_ENV_VARS = {
    "TIMEREG_DAILY_NOTES_FOLDER": "daily_notes_folder",
    "TIMEREG_EXPECTED_HOURS": "expected_hours_per_day",
    "TIMEREG_WORKING_DAYS": "working_days",
    "TIMEREG_STRICT": "strict_validation",
    "TIMEREG_WARN_ON_EXCESS": "warn_on_excess_hours",
}


@dataclass
class Config:
    """Application configuration."""

    notes_root: Path
    port: int
    settings: TimeSettings

    @classmethod
    def from_env(cls, strict_override: bool | None = None) -> "Config":
        """Load configuration from environment variables.

        Args:
            strict_override: If provided, overrides strict validation from file and env.
        """
        default_root = str(Path.home() / "Notes")
        notes_root = Path(os.getenv("TIMEREG_NOTES_ROOT", default_root)).expanduser()

        port_str = os.getenv("TIMEREG_PORT", "8080")
        try:
            port = int(port_str)
            if not 1 <= port <= 65535:
                raise ValueError(f"Port must be between 1 and 65535, got {port}")
        except ValueError as e:
            raise ValueError(f"Invalid TIMEREG_PORT value '{port_str}': {e}") from e

        # Settings file: explicit path, else <root>/.timereg.yaml when present
        settings_path = os.getenv("TIMEREG_SETTINGS")
        if settings_path:
            path = Path(settings_path).expanduser()
            if not path.is_file():
                raise ValueError(f"Settings file not found: {path}")
            settings = TimeSettings.from_file(path)
        elif (notes_root / SETTINGS_FILENAME).is_file():
            settings = TimeSettings.from_file(notes_root / SETTINGS_FILENAME)
        else:
            settings = TimeSettings()

        # Environment variables take precedence over the file
        overrides = {
            key: os.environ[env_var]
            for env_var, key in SETTINGS_ENV_VARS.items()
            if env_var in os.environ
        }
        if overrides:
            env_settings = TimeSettings.from_mapping(overrides)
            settings = replace(settings, **{key: getattr(env_settings, key) for key in overrides})

        if strict_override is not None:
            settings = replace(settings, strict_validation=strict_override)

        return cls(notes_root=notes_root, port=port, settings=settings)
