import pytest

from seismproc.component import SeismComponent
from seismproc.event_model import AbstractSegyReader, EventModel
from seismproc.receiver import SeismReceiver
from seismproc.well import SeismWell


class FakeReader(AbstractSegyReader):
    def __init__(self, components, fail_open=False):
        self.total = components
        self.read = 0
        self.fail_open = fail_open
        self.path = None
        self.closed = False

    def set_file_path(self, path):
        if self.fail_open:
            raise OSError("segy_open()")
        self.path = path

    def read_bin_header(self):
        pass

    def has_next_component(self):
        return self.read < self.total

    def next_component(self, receiver):
        self.read += 1
        return SeismComponent(receiver.uuid, 0.25)

    def close(self):
        self.closed = True


def _well(receivers):
    well = SeismWell(name="w")
    for _ in range(receivers):
        well.add_receiver(SeismReceiver())
    return well


def _collect(model):
    messages = []
    model.notify.connect(messages.append)
    return messages


def test_components_follow_receivers():
    reader = FakeReader(2)
    model = EventModel(reader)
    messages = _collect(model)
    well = _well(2)
    components = model.get_seism_components(well, "file.segy")
    assert [c.receiver_uuid for c in components] == [r.uuid for r in well.receivers]
    assert reader.path == "file.segy"
    assert reader.closed is True
    assert messages == []


def test_more_traces_than_receivers():
    reader = FakeReader(3)
    model = EventModel(reader)
    messages = _collect(model)
    assert model.get_seism_components(_well(2), "f.segy") == []
    assert messages == ["There are more traces in the segy-file than in receivers"]
    assert reader.closed is True


def test_more_receivers_than_traces():
    model = EventModel(FakeReader(1))
    messages = _collect(model)
    assert model.get_seism_components(_well(2), "f.segy") == []
    assert messages == ["There are more traces in receivers than in the segy-file"]


def test_open_failure_is_notified():
    reader = FakeReader(1, fail_open=True)
    model = EventModel(reader)
    messages = _collect(model)
    assert model.get_seism_components(_well(1), "f.segy") == []
    assert messages == ["segy_open()"]
    assert reader.closed is True


def test_abstract_reader_cannot_be_created():
    with pytest.raises(TypeError):
        AbstractSegyReader()