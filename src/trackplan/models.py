"""Data models for trackplan."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .errors import InvalidTalkError, InvariantViolationError

LIGHTNING_MINUTES = 5
NETWORKING_TITLE = "Networking Event"
NETWORKING_MINUTES = 60


@dataclass(frozen=True)
class Talk:
    title: str
    duration: int

    def __post_init__(self) -> None:
        if not isinstance(self.title, str) or not self.title.strip():
            raise InvalidTalkError("Talk title must be a non-empty string.")
        if isinstance(self.duration, bool) or not isinstance(self.duration, int):
            raise InvalidTalkError(
                f"Duration of {self.title!r} must be an integer, got {self.duration!r}."
            )
        if self.duration <= 0:
            raise InvalidTalkError(
                f"Duration of {self.title!r} must be positive, got {self.duration}."
            )
        object.__setattr__(self, "title", self.title.strip())

    @property
    def is_lightning(self) -> bool:
        return self.duration == LIGHTNING_MINUTES


def networking_event(
    title: str = NETWORKING_TITLE, duration: int = NETWORKING_MINUTES
) -> Talk:
    return Talk(title=title, duration=duration)


@dataclass(frozen=True)
class Track:
    """Talks of one track, split into the two session windows.

    The trailing networking event is not stored here; the timeline
    builder appends it.
    """

    morning: Tuple[Talk, ...] = ()
    afternoon: Tuple[Talk, ...] = ()

    @property
    def morning_minutes(self) -> int:
        return sum(talk.duration for talk in self.morning)

    @property
    def afternoon_minutes(self) -> int:
        return sum(talk.duration for talk in self.afternoon)

    @property
    def talks(self) -> Tuple[Talk, ...]:
        return self.morning + self.afternoon


@dataclass(frozen=True)
class Schedule:
    tracks: Tuple[Track, ...]

    @property
    def track1(self) -> Track:
        return self.tracks[0]

    @property
    def track2(self) -> Track:
        return self.tracks[1]

    @property
    def scheduled_talks(self) -> Tuple[Talk, ...]:
        talks: Tuple[Talk, ...] = ()
        for track in self.tracks:
            talks += track.talks
        return talks


@dataclass(frozen=True)
class ScheduleResult:
    """Outcome of one scheduling run.

    ``schedule`` never changes after construction. Talks that did not fit
    any session window are listed in ``unscheduled`` in working order.
    """

    schedule: Schedule
    unscheduled: Tuple[Talk, ...] = field(default=())

    @property
    def complete(self) -> bool:
        return False


@dataclass(frozen=True)
class Scheduled(ScheduleResult):
    def __post_init__(self) -> None:
        if self.unscheduled:
            raise InvariantViolationError(
                f"A complete schedule cannot leave {len(self.unscheduled)} talks unscheduled."
            )

    @property
    def complete(self) -> bool:
        return True


@dataclass(frozen=True)
class PartiallyScheduled(ScheduleResult):
    def __post_init__(self) -> None:
        if not self.unscheduled:
            raise InvariantViolationError(
                "A partial schedule must list at least one unscheduled talk."
            )


@dataclass(frozen=True)
class TimelineEntry:
    start: int
    talk: Talk

    @property
    def end(self) -> int:
        return self.start + self.talk.duration
