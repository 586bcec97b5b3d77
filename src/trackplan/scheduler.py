"""First-fit-decreasing assignment of talks to tracks and sessions."""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from .config import DEFAULT_CONFIG, AFTERNOON, MORNING, ScheduleConfig
from .models import (
    PartiallyScheduled,
    Schedule,
    Scheduled,
    ScheduleResult,
    Talk,
    Track,
)

logger = logging.getLogger("trackplan")


def working_order(talks: Sequence[Talk]) -> List[int]:
    """Catalog indices sorted longest first; equal durations keep input order."""
    return sorted(range(len(talks)), key=lambda idx: (-talks[idx].duration, idx))


def schedule(
    talks: Sequence[Talk], config: ScheduleConfig = DEFAULT_CONFIG
) -> ScheduleResult:
    """Pack ``talks`` into the session windows of every track.

    Bins are filled one after another (track 1 morning, track 1
    afternoon, track 2 morning, track 2 afternoon). Each bin takes one
    pass over the working order and accepts every unused talk that still
    fits. There is no backtracking. Talks left over are returned in
    ``unscheduled`` rather than dropped.
    """
    order = working_order(talks)
    used = [False] * len(talks)
    sessions: Dict[Tuple[int, str], List[Talk]] = {}

    for track_index, session, window in config.bins():
        assigned: List[Talk] = []
        total = 0
        for idx in order:
            if used[idx]:
                continue
            talk = talks[idx]
            if total + talk.duration <= window.capacity:
                assigned.append(talk)
                used[idx] = True
                total += talk.duration
        sessions[(track_index, session)] = assigned
        logger.debug(
            "Track %d %s: %d talks, %d/%d minutes",
            track_index + 1,
            session,
            len(assigned),
            total,
            window.capacity,
        )

    tracks = tuple(
        Track(
            morning=tuple(sessions[(track_index, MORNING)]),
            afternoon=tuple(sessions[(track_index, AFTERNOON)]),
        )
        for track_index in range(config.track_count)
    )
    unscheduled = tuple(talks[idx] for idx in order if not used[idx])
    result_schedule = Schedule(tracks=tracks)

    if unscheduled:
        logger.warning(
            "%d of %d talks could not be scheduled: %s",
            len(unscheduled),
            len(talks),
            ", ".join(talk.title for talk in unscheduled),
        )
        return PartiallyScheduled(schedule=result_schedule, unscheduled=unscheduled)
    return Scheduled(schedule=result_schedule)
