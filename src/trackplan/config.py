"""Session window table and its YAML configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterator, Tuple, Union

import yaml

from .errors import ConfigError
from .models import NETWORKING_MINUTES, NETWORKING_TITLE

MORNING = "morning"
AFTERNOON = "afternoon"
SUPPORTED_TRACK_COUNT = 2

_CLOCK_FIELDS = ("morning_start", "lunch", "afternoon_start", "networking_start")


@dataclass(frozen=True)
class SessionWindow:
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ConfigError(
                f"Session window must end after it starts ({self.start}-{self.end})."
            )

    @property
    def capacity(self) -> int:
        return self.end - self.start

    def contains(self, minute: int) -> bool:
        return self.start <= minute < self.end


@dataclass(frozen=True)
class ScheduleConfig:
    morning_start: int = 9 * 60
    lunch: int = 12 * 60
    afternoon_start: int = 13 * 60
    networking_start: int = 16 * 60
    networking_duration: int = NETWORKING_MINUTES
    track_count: int = SUPPORTED_TRACK_COUNT
    lunch_title: str = "Lunch"
    networking_title: str = NETWORKING_TITLE

    def __post_init__(self) -> None:
        morning = self.morning_window
        afternoon = self.afternoon_window
        if self.afternoon_start < self.lunch:
            raise ConfigError("Afternoon session cannot start before lunch.")
        if morning.capacity != afternoon.capacity:
            raise ConfigError(
                "Morning and afternoon windows must have the same length "
                f"({morning.capacity} != {afternoon.capacity} minutes)."
            )
        if self.networking_duration <= 0:
            raise ConfigError("Networking event duration must be positive.")
        if self.track_count != SUPPORTED_TRACK_COUNT:
            raise ConfigError(
                f"Only {SUPPORTED_TRACK_COUNT} tracks are supported, got {self.track_count}."
            )

    @property
    def morning_window(self) -> SessionWindow:
        return SessionWindow(self.morning_start, self.lunch)

    @property
    def afternoon_window(self) -> SessionWindow:
        return SessionWindow(self.afternoon_start, self.networking_start)

    @property
    def window_capacity(self) -> int:
        return self.morning_window.capacity

    def window(self, session: str) -> SessionWindow:
        if session == MORNING:
            return self.morning_window
        if session == AFTERNOON:
            return self.afternoon_window
        raise ValueError(f"Unknown session: {session}")

    def bins(self) -> Iterator[Tuple[int, str, SessionWindow]]:
        """Yield (track index, session name, window) in packing order."""
        for track_index in range(self.track_count):
            for session in (MORNING, AFTERNOON):
                yield track_index, session, self.window(session)


DEFAULT_CONFIG = ScheduleConfig()


def parse_clock(value: Union[int, str]) -> int:
    """Convert ``"HH:MM"`` (24-hour) or a minute-of-day integer to minutes."""
    if isinstance(value, bool):
        raise ConfigError(f"Invalid time value: {value!r}")
    if isinstance(value, int):
        minutes = value
    elif isinstance(value, str):
        try:
            hours, mins = value.strip().split(":", 1)
            minutes = int(hours) * 60 + int(mins)
        except ValueError as exc:
            raise ConfigError(f"Invalid time value: {value!r}") from exc
        if not 0 <= int(mins) < 60:
            raise ConfigError(f"Invalid time value: {value!r}")
    else:
        raise ConfigError(f"Invalid time value: {value!r}")
    if not 0 <= minutes < 24 * 60:
        raise ConfigError(f"Time out of range: {value!r}")
    return minutes


def _format_clock(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def config_from_dict(data: dict) -> ScheduleConfig:
    known = {f.name for f in fields(ScheduleConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    kwargs = {}
    for key, value in data.items():
        if key in _CLOCK_FIELDS:
            kwargs[key] = parse_clock(value)
        elif key in ("networking_duration", "track_count"):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{key} must be an integer, got {value!r}")
            kwargs[key] = value
        else:
            kwargs[key] = str(value)
    return ScheduleConfig(**kwargs)


def load_config(path: str) -> ScheduleConfig:
    with open(path, "r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping.")
    return config_from_dict(data)


def config_to_dict(config: ScheduleConfig) -> dict:
    return {
        "morning_start": _format_clock(config.morning_start),
        "lunch": _format_clock(config.lunch),
        "afternoon_start": _format_clock(config.afternoon_start),
        "networking_start": _format_clock(config.networking_start),
        "networking_duration": config.networking_duration,
        "track_count": config.track_count,
        "lunch_title": config.lunch_title,
        "networking_title": config.networking_title,
    }


def dump_config(config: ScheduleConfig) -> str:
    return yaml.safe_dump(config_to_dict(config), sort_keys=False)


def save_config(path: str, config: ScheduleConfig) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        yaml.safe_dump(config_to_dict(config), handle, sort_keys=False)
