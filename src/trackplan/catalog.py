"""Talk catalog loading and parsing."""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Iterable, List, TextIO, Union

import yaml

from .errors import CatalogError, InvalidTalkError
from .models import LIGHTNING_MINUTES, Talk

logger = logging.getLogger("trackplan")

_LINE_RE = re.compile(
    r"^(?P<title>.+?)\s+(?:(?P<minutes>[0-9]+)\s*min|(?P<lightning>lightning))$",
    re.IGNORECASE,
)

SAMPLE_TALKS = (
    ("Writing Fast Tests Against Enterprise Rails", 60),
    ("Overdoing it in Python", 45),
    ("Lua for the Masses", 30),
    ("Ruby Errors from Mismatched Gem Versions", 45),
    ("Common Ruby Errors", 45),
    ("Rails for Python Developers", LIGHTNING_MINUTES),
    ("Communicating Over Distance", 60),
    ("Accounting-Driven Development", 45),
    ("Woah", 30),
    ("Sit Down and Write", 30),
    ("Pair Programming vs Noise", 45),
    ("Rails Magic", 60),
    ("Ruby on Rails: Why We Should Move On", 60),
    ("Clojure Ate Scala (on my project)", 45),
    ("Programming in the Boondocks of Seattle", 30),
    ("Ruby vs. Clojure for Back-End Development", 30),
    ("Ruby on Rails Legacy App Maintenance", 60),
    ("A World Without HackerNews", 30),
    ("User Interface CSS in Rails Apps", 30),
)


def sample_catalog() -> List[Talk]:
    return [Talk(title, duration) for title, duration in SAMPLE_TALKS]


def parse_duration(value: Union[int, str]) -> int:
    """Accept ``45``, ``"45"``, ``"45min"`` or ``"lightning"``."""
    if isinstance(value, bool):
        raise CatalogError(f"Invalid duration: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text == "lightning":
            return LIGHTNING_MINUTES
        if text.endswith("min"):
            text = text[:-3].strip()
        if text.isdecimal() and text.isascii():
            return int(text)
    raise CatalogError(f"Invalid duration: {value!r}")


def parse_talk_line(line: str) -> Talk:
    match = _LINE_RE.match(line.strip())
    if not match:
        raise CatalogError(f"Cannot parse talk: {line.strip()!r}")
    duration = (
        LIGHTNING_MINUTES if match.group("lightning") else int(match.group("minutes"))
    )
    return Talk(match.group("title"), duration)


def parse_catalog(lines: Iterable[str]) -> List[Talk]:
    talks: List[Talk] = []
    for number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            talks.append(parse_talk_line(line))
        except (CatalogError, InvalidTalkError) as exc:
            raise CatalogError(f"Line {number}: {exc}") from exc
    return talks


def read_catalog(stream: TextIO) -> List[Talk]:
    try:
        return parse_catalog(stream)
    except UnicodeDecodeError as exc:
        raise CatalogError(f"Input is not valid UTF-8: {exc}") from exc


def _talks_from_records(records: object, source: str) -> List[Talk]:
    if records is None:
        return []
    if not isinstance(records, list):
        raise CatalogError(f"{source} must contain a list of talks.")
    talks: List[Talk] = []
    for number, record in enumerate(records, start=1):
        if not isinstance(record, dict) or "title" not in record or "duration" not in record:
            raise CatalogError(f"{source} entry {number} needs 'title' and 'duration'.")
        try:
            talks.append(Talk(str(record["title"]), parse_duration(record["duration"])))
        except (CatalogError, InvalidTalkError) as exc:
            raise CatalogError(f"{source} entry {number}: {exc}") from exc
    return talks


def load_catalog(path: str) -> List[Talk]:
    ext = os.path.splitext(path)[1].lower()
    with open(path, "r", encoding="utf-8") as handle:
        try:
            if ext in (".yml", ".yaml"):
                try:
                    talks = _talks_from_records(yaml.safe_load(handle), path)
                except yaml.YAMLError as exc:
                    raise CatalogError(f"Invalid YAML in {path}: {exc}") from exc
            elif ext == ".json":
                try:
                    talks = _talks_from_records(json.load(handle), path)
                except json.JSONDecodeError as exc:
                    raise CatalogError(f"Invalid JSON in {path}: {exc}") from exc
            else:
                talks = parse_catalog(handle)
        except UnicodeDecodeError as exc:
            raise CatalogError(f"{path} is not valid UTF-8: {exc}") from exc
    logger.info("Loaded %d talks from %s", len(talks), path)
    return talks


def format_talk_line(talk: Talk) -> str:
    suffix = "lightning" if talk.is_lightning else f"{talk.duration}min"
    return f"{talk.title} {suffix}"
