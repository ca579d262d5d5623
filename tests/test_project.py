import uuid
from datetime import date, datetime, time

import pytest

from seismproc.channel import SeismChannelReceiver
from seismproc.component import SeismComponent
from seismproc.core import FormatError
from seismproc.event import SeismEvent
from seismproc.horizon import SeismHorizon
from seismproc.project import SeismProject
from seismproc.receiver import SeismReceiver
from seismproc.trace import SeismTrace
from seismproc.well import SeismWell


def _make_well(name="well", receivers=2):
    well = SeismWell(name=name)
    well.add_point((1.0, 2.0, 3.0))
    for _ in range(receivers):
        receiver = SeismReceiver(name="r")
        for _ in range(3):
            receiver.add_channel(SeismChannelReceiver(name="c"))
        well.add_receiver(receiver)
    return well


def _make_project():
    project = SeismProject()
    project.set_name("demo")
    project.set_date_time(datetime(2021, 3, 4, 5, 6, 7))
    well = _make_well()
    project.add_well(well)
    horizon = SeismHorizon(name="h", nx=2, ny=1)
    horizon.add_point((0.0, 0.0, 0.0))
    horizon.add_point((1.0, 1.0, 1.0))
    project.add_horizon(horizon)
    event = SeismEvent(date_time=datetime(2021, 3, 4, 1, 2, 3))
    for receiver in well.receivers:
        component = SeismComponent(receiver.uuid, 0.5)
        for _ in range(receiver.channel_num):
            component.add_trace(SeismTrace([1.0, 2.0, 3.0]))
        event.add_component(component)
    project.add_event(event)
    return project


def _record(signal):
    calls = []
    signal.connect(lambda *args: calls.append(args))
    return calls


def test_create_default_has_standard_wells():
    project = SeismProject.create_default()
    names = sorted(well.name for well in project.wells.values())
    assert names == ["Mon_TOOLS_233", "Mon_TOOLS_244"]
    for well in project.wells.values():
        assert well.receivers_number == 8
        assert all(r.channel_num == 3 for r in well.receivers)
        assert well.points == [(0.0, 0.0, 0.0)]
    assert project.is_saved is False


def test_set_name_marks_unsaved_only_on_change(tmp_path):
    project = SeismProject()
    project.to_json(tmp_path / "p.json")
    assert project.is_saved
    project.set_name("")
    assert project.is_saved
    project.set_name("x")
    assert project.name == "x"
    assert not project.is_saved


def test_set_date_and_time():
    project = SeismProject()
    assert project.date_time is None
    project.set_date(date(2020, 1, 2))
    assert project.date_time == datetime(2020, 1, 2)
    project.set_time(time(5, 6, 7))
    assert project.date_time == datetime(2020, 1, 2, 5, 6, 7)


def test_exists_and_set_file_path(tmp_path):
    project = SeismProject()
    assert not project.exists()
    target = tmp_path / "p.json"
    target.write_text("{}")
    project.set_file_path(target)
    assert project.file_path == target
    assert project.exists()


def test_round_trip(tmp_path):
    project = _make_project()
    path = tmp_path / "project.json"
    json = project.to_json(path)
    assert project.is_saved
    assert json["name"] == "demo"
    assert json["date"] == "04.03.21 05:06:07"

    loaded = SeismProject.from_json(json, path)
    assert loaded.is_saved
    assert loaded.name == "demo"
    assert loaded.date_time == datetime(2021, 3, 4, 5, 6, 7)
    assert set(loaded.wells) == set(project.wells)
    assert set(loaded.horizons) == set(project.horizons)
    assert set(loaded.events) == set(project.events)
    (event,) = loaded.events.values()
    assert event.component_number == 2
    for component in event.components:
        assert [list(t.buffer) for t in component.traces] == [[1.0, 2.0, 3.0]] * 3
    (horizon,) = loaded.horizons.values()
    assert horizon.points == [(0.0, 0.0, 0.0), (1.0, 1.0, 1.0)]


def test_to_json_clears_stale_data(tmp_path):
    stale = tmp_path / "data" / "events" / "stale.bin"
    stale.parent.mkdir(parents=True)
    stale.write_bytes(b"old")
    SeismProject().to_json(tmp_path / "p.json")
    assert not stale.exists()
    assert (tmp_path / "data" / "wells").is_dir()
    assert (tmp_path / "data" / "horizons").is_dir()


def test_from_json_reports_missing_fields(tmp_path):
    with pytest.raises(FormatError) as info:
        SeismProject.from_json({}, tmp_path / "p.json")
    message = str(info.value)
    for key in ("name", "date", "Horizons", "Wells", "Events"):
        assert f"::{key} : not found" in message


def test_from_json_reports_bad_horizon(tmp_path):
    json = {"name": "n", "date": "", "Horizons": [{}], "Wells": [], "Events": []}
    with pytest.raises(FormatError, match=r"Horizons \(idx: 0\)"):
        SeismProject.from_json(json, tmp_path / "p.json")


def test_event_add_update_remove_signals():
    project = SeismProject()
    added = _record(project.added_event)
    updated = _record(project.updated_event)
    removed = _record(project.removed_event)
    event = SeismEvent()
    project.add_event(event)
    project.update_event(event)
    assert added == [(event,)]
    assert updated == [(event,)]
    assert project.remove_event(event.uuid) is True
    assert removed == [(event.uuid,)]
    assert project.remove_event(event.uuid) is False
    assert project.events == {}


def test_process_events():
    project = SeismProject()
    project.add_event(SeismEvent())
    project.add_event(SeismEvent())
    processed = _record(project.processed_events)
    project.process_events()
    assert processed == [()]
    assert all(e.is_processed for e in project.events.values())


def test_horizon_add_remove_and_set():
    project = SeismProject()
    first = SeismHorizon(name="a")
    project.add_horizon(first)
    assert project.remove_horizon(uuid.uuid4()) is False
    removed = _record(project.removed_horizon)
    added = _record(project.added_horizon)
    second = SeismHorizon(name="b")
    project.set_horizons({second.uuid: second})
    assert removed == [(first.uuid,)]
    assert added == [(second,)]
    assert list(project.horizons) == [second.uuid]
    assert project.remove_horizon(second.uuid) is True
    assert project.horizons == {}


def test_remove_well_announces_receivers():
    project = SeismProject()
    well = _make_well()
    project.add_well(well)
    removed_receivers = _record(project.removed_receiver)
    removed_wells = _record(project.removed_well)
    assert project.remove_well(well.uuid) is True
    assert removed_receivers == [(r.uuid,) for r in well.receivers]
    assert removed_wells == [(well.uuid,)]
    assert project.remove_well(well.uuid) is False


def test_set_wells_keeps_common_and_swaps_others():
    project = SeismProject()
    kept = _make_well("kept")
    dropped = _make_well("dropped", receivers=1)
    project.add_well(kept)
    project.add_well(dropped)
    new = _make_well("new", receivers=1)
    replacement = _make_well("replacement")
    replacement.uuid = kept.uuid
    removed_wells = _record(project.removed_well)
    added_wells = _record(project.added_well)
    added_receivers = _record(project.added_receiver)
    project.set_wells({kept.uuid: replacement, new.uuid: new})
    assert removed_wells == [(dropped.uuid,)]
    assert added_wells == [(new,)]
    assert added_receivers == [(new.receivers[0],)]
    assert project.wells[kept.uuid] is kept
    assert set(project.wells) == {kept.uuid, new.uuid}


def test_add_receiver():
    project = SeismProject()
    well = _make_well(receivers=0)
    project.add_well(well)
    receiver = SeismReceiver()
    added = _record(project.added_receiver)
    assert project.add_receiver(uuid.uuid4(), receiver) is False
    assert project.add_receiver(well.uuid, receiver) is True
    assert added == [(receiver,)]
    assert well.receivers == [receiver]


def test_remove_all_receivers():
    project = SeismProject.create_default()
    removed = _record(project.removed_receiver)
    project.remove_all_receivers()
    assert len(removed) == 16
    assert all(w.receivers_number == 0 for w in project.wells.values())


def test_to_json_rejects_directory(tmp_path):
    with pytest.raises(ValueError):
        SeismProject().to_json(tmp_path)