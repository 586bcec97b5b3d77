"""Schedule persistence."""

from __future__ import annotations

import json
from dataclasses import asdict

from .config import DEFAULT_CONFIG, ScheduleConfig
from .models import ScheduleResult
from .renderer import format_time
from .timeline import build_schedule_timelines


def schedule_to_dict(
    result: ScheduleResult, config: ScheduleConfig = DEFAULT_CONFIG
) -> dict:
    tracks = []
    for entries in build_schedule_timelines(result.schedule, config):
        tracks.append(
            [
                {
                    "start": entry.start,
                    "time": format_time(entry.start),
                    "title": entry.talk.title,
                    "duration": entry.talk.duration,
                }
                for entry in entries
            ]
        )
    return {
        "complete": result.complete,
        "tracks": tracks,
        "unscheduled": [asdict(talk) for talk in result.unscheduled],
    }


def dumps_schedule(
    result: ScheduleResult, config: ScheduleConfig = DEFAULT_CONFIG
) -> str:
    return json.dumps(schedule_to_dict(result, config), indent=2) + "\n"


def save_schedule(
    path: str, result: ScheduleResult, config: ScheduleConfig = DEFAULT_CONFIG
) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(dumps_schedule(result, config))
