"""Text and Markdown schedule rendering."""

from __future__ import annotations

from typing import List

from .config import DEFAULT_CONFIG, ScheduleConfig
from .models import ScheduleResult, Talk, TimelineEntry
from .timeline import build_schedule_timelines


def format_time(minutes: int) -> str:
    hour = minutes // 60
    minute = minutes % 60
    period = "AM" if hour < 12 else "PM"
    if hour > 12:
        hour -= 12
    if hour == 0:
        hour = 12
    return f"{hour:02d}:{minute:02d}{period}"


def format_duration(talk: Talk) -> str:
    return "lightning" if talk.is_lightning else f"{talk.duration}min"


def _track_lines(entries: List[TimelineEntry], config: ScheduleConfig) -> List[str]:
    lines: List[str] = []
    lunch_done = False
    last = len(entries) - 1
    for position, entry in enumerate(entries):
        if not lunch_done and entry.start >= config.lunch:
            lines.append(f"{format_time(config.lunch)} {config.lunch_title}")
            lunch_done = True
        if position == last:
            lines.append(f"{format_time(entry.start)} {entry.talk.title}")
        else:
            lines.append(
                f"{format_time(entry.start)} {entry.talk.title} {format_duration(entry.talk)}"
            )
    return lines


def render_schedule_text(
    result: ScheduleResult, config: ScheduleConfig = DEFAULT_CONFIG
) -> str:
    lines: List[str] = []
    timelines = build_schedule_timelines(result.schedule, config)
    for number, entries in enumerate(timelines, start=1):
        if number > 1:
            lines.append("")
        lines.append(f"Track {number}:")
        lines.extend(_track_lines(entries, config))
    if result.unscheduled:
        lines.append("")
        lines.append("Unscheduled:")
        for talk in result.unscheduled:
            lines.append(f"{talk.title} {format_duration(talk)}")
    lines.append("")
    return "\n".join(lines)


def render_schedule_markdown(
    result: ScheduleResult, config: ScheduleConfig = DEFAULT_CONFIG
) -> str:
    lines: List[str] = ["# Conference Schedule", ""]
    timelines = build_schedule_timelines(result.schedule, config)
    for number, entries in enumerate(timelines, start=1):
        lines.append(f"## Track {number}")
        lines.append("")
        for line in _track_lines(entries, config):
            stamp, _, rest = line.partition(" ")
            lines.append(f"- **{stamp}** {rest}")
        lines.append("")
    if result.unscheduled:
        lines.append("## Unscheduled")
        lines.append("")
        for talk in result.unscheduled:
            lines.append(f"- {talk.title} ({format_duration(talk)})")
        lines.append("")
    return "\n".join(lines)
