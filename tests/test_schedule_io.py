import json

from trackplan.models import Talk
from trackplan.schedule_io import dumps_schedule, save_schedule, schedule_to_dict
from trackplan.scheduler import schedule


def test_schedule_to_dict():
    result = schedule([Talk("Woah", 30), Talk("Too Long", 200)])
    data = schedule_to_dict(result)
    assert data["complete"] is False
    assert data["tracks"][0][0] == {
        "start": 540,
        "time": "09:00AM",
        "title": "Woah",
        "duration": 30,
    }
    assert data["tracks"][0][-1]["title"] == "Networking Event"
    assert data["tracks"][1] == [
        {"start": 960, "time": "04:00PM", "title": "Networking Event", "duration": 60}
    ]
    assert data["unscheduled"] == [{"title": "Too Long", "duration": 200}]


def test_save_schedule(tmp_path):
    path = tmp_path / "schedule.json"
    save_schedule(str(path), schedule([Talk("Woah", 30)]))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["complete"] is True
    assert len(data["tracks"]) == 2


def test_saved_file_matches_dumps(tmp_path):
    result = schedule([Talk("Woah", 30), Talk("Too Long", 200)])
    path = tmp_path / "schedule.json"
    save_schedule(str(path), result)
    assert path.read_text(encoding="utf-8") == dumps_schedule(result)
    assert path.read_text(encoding="utf-8").endswith("}\n")
