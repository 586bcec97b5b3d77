"""Absolute start times for a scheduled track."""

from __future__ import annotations

from typing import List

from .config import DEFAULT_CONFIG, ScheduleConfig
from .errors import InvariantViolationError
from .models import Schedule, TimelineEntry, Track, networking_event


def _check_capacity(track: Track, config: ScheduleConfig) -> None:
    capacity = config.window_capacity
    if track.morning_minutes > capacity:
        raise InvariantViolationError(
            f"Morning session holds {track.morning_minutes} minutes, "
            f"capacity is {capacity}."
        )
    if track.afternoon_minutes > capacity:
        raise InvariantViolationError(
            f"Afternoon session holds {track.afternoon_minutes} minutes, "
            f"capacity is {capacity}."
        )


def build_timeline(
    track: Track, config: ScheduleConfig = DEFAULT_CONFIG
) -> List[TimelineEntry]:
    """Walk the track and emit ``(start, talk)`` pairs.

    The networking event goes last, at the configured start or when the
    afternoon overruns it, whichever is later.
    """
    _check_capacity(track, config)

    entries: List[TimelineEntry] = []
    clock = config.morning_start
    for talk in track.morning:
        entries.append(TimelineEntry(start=clock, talk=talk))
        clock += talk.duration

    clock = config.afternoon_start
    for talk in track.afternoon:
        entries.append(TimelineEntry(start=clock, talk=talk))
        clock += talk.duration

    event = networking_event(config.networking_title, config.networking_duration)
    entries.append(TimelineEntry(start=max(config.networking_start, clock), talk=event))
    return entries


def build_schedule_timelines(
    schedule: Schedule, config: ScheduleConfig = DEFAULT_CONFIG
) -> List[List[TimelineEntry]]:
    return [build_timeline(track, config) for track in schedule.tracks]
