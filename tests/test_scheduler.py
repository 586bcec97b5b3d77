import logging

from trackplan.catalog import sample_catalog
from trackplan.config import ScheduleConfig
from trackplan.models import PartiallyScheduled, Scheduled, Talk
from trackplan.scheduler import schedule, working_order


def _titles(talks):
    return [talk.title for talk in talks]


def _catalog():
    return [
        Talk("A", 60),
        Talk("B", 45),
        Talk("C", 30),
        Talk("D", 5),
        Talk("E", 60),
    ]


def test_working_order_is_stable_for_equal_durations():
    talks = _catalog()
    assert [talks[i].title for i in working_order(talks)] == ["A", "E", "B", "C", "D"]


def test_first_bin_skips_talk_that_does_not_fit():
    result = schedule(_catalog())
    track1 = result.schedule.track1
    assert _titles(track1.morning) == ["A", "E", "B", "D"]
    assert track1.morning_minutes == 170
    assert _titles(track1.afternoon) == ["C"]
    assert result.schedule.track2.morning == ()
    assert result.schedule.track2.afternoon == ()
    assert isinstance(result, Scheduled)
    assert result.complete


def test_empty_catalog_gives_empty_tracks():
    result = schedule([])
    assert result.complete
    assert len(result.schedule.tracks) == 2
    for track in result.schedule.tracks:
        assert track.morning == ()
        assert track.afternoon == ()


def test_talk_of_exact_capacity_fills_morning():
    talks = [Talk("Keynote Marathon", 180), Talk("Quick", 5)]
    result = schedule(talks)
    assert _titles(result.schedule.track1.morning) == ["Keynote Marathon"]
    assert _titles(result.schedule.track1.afternoon) == ["Quick"]


def test_five_hour_long_talks_all_fit():
    talks = [Talk(f"T{i}", 60) for i in range(5)]
    result = schedule(talks)
    assert result.complete
    assert _titles(result.schedule.track1.morning) == ["T0", "T1", "T2"]
    assert _titles(result.schedule.track1.afternoon) == ["T3", "T4"]


def test_nine_hour_long_talks_all_fit():
    talks = [Talk(f"T{i}", 60) for i in range(9)]
    result = schedule(talks)
    assert result.complete
    assert len(result.schedule.scheduled_talks) == 9


def test_overflow_is_reported_not_dropped(caplog):
    talks = [Talk(f"T{i}", 60) for i in range(13)]
    with caplog.at_level(logging.WARNING, logger="trackplan"):
        result = schedule(talks)
    assert isinstance(result, PartiallyScheduled)
    assert not result.complete
    assert _titles(result.unscheduled) == ["T12"]
    assert len(result.schedule.scheduled_talks) == 12
    assert "could not be scheduled" in caplog.text


def test_talk_longer_than_any_window_is_unscheduled():
    talks = [Talk("Too Long", 200), Talk("Fine", 30)]
    result = schedule(talks)
    assert _titles(result.unscheduled) == ["Too Long"]
    assert _titles(result.schedule.track1.morning) == ["Fine"]


def test_sample_catalog_assignment():
    result = schedule(sample_catalog())
    track1, track2 = result.schedule.tracks
    assert _titles(track1.morning) == [
        "Writing Fast Tests Against Enterprise Rails",
        "Communicating Over Distance",
        "Rails Magic",
    ]
    assert _titles(track1.afternoon) == [
        "Ruby on Rails: Why We Should Move On",
        "Ruby on Rails Legacy App Maintenance",
        "Overdoing it in Python",
        "Rails for Python Developers",
    ]
    assert track2.morning_minutes == 180
    assert track2.afternoon_minutes == 165
    assert _titles(result.unscheduled) == [
        "Ruby vs. Clojure for Back-End Development",
        "A World Without HackerNews",
        "User Interface CSS in Rails Apps",
    ]


def test_capacity_and_no_duplicates_hold_for_sample():
    talks = sample_catalog()
    result = schedule(talks)
    for track in result.schedule.tracks:
        assert track.morning_minutes <= 180
        assert track.afternoon_minutes <= 180

    placed = [id(talk) for talk in result.schedule.scheduled_talks]
    placed += [id(talk) for talk in result.unscheduled]
    assert len(placed) == len(set(placed)) == len(talks)


def test_identical_talks_are_scheduled_separately():
    talks = [Talk("Same", 100), Talk("Same", 100)]
    result = schedule(talks)
    assert result.schedule.track1.morning == (talks[0],)
    assert result.schedule.track1.afternoon == (talks[1],)
    assert result.schedule.track1.morning[0] is talks[0]
    assert result.schedule.track1.afternoon[0] is talks[1]


def test_schedule_is_deterministic():
    first = schedule(sample_catalog())
    second = schedule(sample_catalog())
    assert first == second


def test_input_catalog_is_not_reordered():
    talks = _catalog()
    snapshot = list(talks)
    schedule(talks)
    assert talks == snapshot


def test_alternative_window_lengths():
    config = ScheduleConfig(
        morning_start=9 * 60,
        lunch=11 * 60,
        afternoon_start=13 * 60,
        networking_start=15 * 60,
    )
    talks = [Talk(f"T{i}", 60) for i in range(9)]
    result = schedule(talks, config)
    for track in result.schedule.tracks:
        assert track.morning_minutes == 120
        assert track.afternoon_minutes == 120
    assert _titles(result.unscheduled) == ["T8"]
