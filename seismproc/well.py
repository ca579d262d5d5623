"""A well: its trajectory points and the receivers placed in it."""

from __future__ import annotations

import dataclasses
import os
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from .core import (
    Point,
    _f32_point,
    _FieldReader,
    _format_uuid,
    _parse_uuid,
    _to_int,
    _to_str,
)
from .point_io import PointReader, PointWriter
from .receiver import SeismReceiver


@dataclass
class SeismWell:
    DEFAULT_PATH: ClassVar[str] = "data/wells/"

    uuid: uuid.UUID = field(default_factory=uuid.uuid4)
    name: str = ""
    points: list[Point] = field(default_factory=list)
    receivers: list[SeismReceiver] = field(default_factory=list)
    path: str = ""

    def __post_init__(self) -> None:
        self.points = [_f32_point(point) for point in self.points]

    @property
    def points_number(self) -> int:
        return len(self.points)

    @property
    def receivers_number(self) -> int:
        return len(self.receivers)

    def add_point(self, point: Point) -> None:
        self.points.append(_f32_point(point))

    def get_point(self, index: int) -> Point:
        if not 0 <= index < len(self.points):
            raise IndexError(f"point index {index} out of range")
        return self.points[index]

    def add_receiver(self, receiver: SeismReceiver) -> None:
        self.receivers.append(receiver)

    def remove_receiver(self, uuid: uuid.UUID) -> bool:
        """Remove the first receiver with this UUID; report whether one was found."""
        for receiver in self.receivers:
            if receiver.uuid == uuid:
                self.receivers.remove(receiver)
                return True
        return False

    def remove_all_receivers(self) -> None:
        self.receivers.clear()

    @classmethod
    def from_json(cls, json: dict, directory: str | os.PathLike) -> SeismWell:
        fields = _FieldReader(json)
        well = cls()
        well.name = fields.read("name", _to_str, "")
        well.path = fields.read("path", _to_str, "")
        well.receivers = fields.read_items(
            "Receivers", SeismReceiver.from_json, "Receivers"
        )

        data_file = Path(directory) / well.path
        if well.path and data_file.is_file():
            well.uuid = _parse_uuid(data_file.name.split(".", 1)[0])
            with PointReader(data_file) as reader:
                well.points = list(reader)
            real = len(well.points)
            if fields.has("pointNumber"):
                if _to_int(fields.raw("pointNumber")) != real:
                    fields.fail(
                        "::pointNumber : json-value != real-size  "
                        f"(Note: real-size == {real})\n"
                    )
            else:
                fields.fail(
                    f"::pointNumber : not found  (Note: real value == {real})\n"
                )
        else:
            fields.fail("::data-file : doesn`t exist\n")

        fields.raise_if_any("\n")
        return well

    def copy(self) -> SeismWell:
        return dataclasses.replace(
            self,
            points=list(self.points),
            receivers=[receiver.copy() for receiver in self.receivers],
        )

    def to_json(self, directory: str | os.PathLike) -> dict:
        """Write the points to the data file and return the description."""
        if not self.path:
            self.path = f"{self.DEFAULT_PATH}{_format_uuid(self.uuid)}.bin"
        with PointWriter(Path(directory) / self.path) as writer:
            for point in self.points:
                writer.write_point(point)
        return {
            "name": self.name,
            "path": self.path,
            "pointNumber": self.points_number,
            "Receivers": [receiver.to_json() for receiver in self.receivers],
        }