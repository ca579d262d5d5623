from seismproc.horizon_model import HorizonModel
from seismproc.point_io import PointWriter


def _model():
    model = HorizonModel()
    messages = []
    model.notify.connect(messages.append)
    return model, messages


def test_reads_binary_points(tmp_path):
    path = tmp_path / "layer.bin"
    points = [(1.5, 2.5, 3.5), (-1.0, 0.0, 4.25)]
    with PointWriter(path) as writer:
        for point in points:
            writer.write_point(point)
    model, messages = _model()
    horizon = model.get_seism_horizon_from(path)
    assert horizon.name == "layer"
    assert horizon.points == points
    assert messages == []


def test_text_file_holds_z_first(tmp_path):
    path = tmp_path / "grid.txt"
    path.write_text("3 1 2\n6 4 5\n")
    model, _ = _model()
    horizon = model.get_seism_horizon_from(path)
    assert horizon.points == [(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)]
    assert horizon.points_number == 2


def test_name_stops_at_first_dot(tmp_path):
    path = tmp_path / "top.v2.bin"
    path.write_bytes(b"")
    model, _ = _model()
    horizon = model.get_seism_horizon_from(path)
    assert horizon.name == "top"
    assert horizon.points == []


def test_missing_file_is_notified(tmp_path):
    model, messages = _model()
    assert model.get_seism_horizon_from(tmp_path / "absent.bin") is None
    assert messages == ["File can not be opened (SeismPointReader)"]


def test_incomplete_text_is_notified(tmp_path):
    path = tmp_path / "broken.txt"
    path.write_text("1 2\n")
    model, messages = _model()
    assert model.get_seism_horizon_from(path) is None
    assert len(messages) == 1
    assert "incomplete point" in messages[0]