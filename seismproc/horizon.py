"""A horizon: a grid of points stored in a separate data file."""

from __future__ import annotations

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


@dataclass
class SeismHorizon:
    DEFAULT_PATH: ClassVar[str] = "data/horizons/"

    uuid: uuid.UUID = field(default_factory=uuid.uuid4)
    name: str = ""
    nx: int = 0
    ny: int = 0
    points: list[Point] = field(default_factory=list)
    path: str = ""

    def __post_init__(self) -> None:
        self.points = [_f32_point(point) for point in self.points]

    @property
    def points_number(self) -> int:
        return len(self.points)

    def add_point(self, point: Point) -> None:
        self.points.append(_f32_point(point))

    def get_point(self, index: int) -> Point:
        if not 0 <= index < len(self.points):
            raise IndexError(f"point index {index} out of range")
        return self.points[index]

    @classmethod
    def from_json(cls, json: dict, directory: str | os.PathLike) -> SeismHorizon:
        fields = _FieldReader(json)
        horizon = cls()
        horizon.name = fields.read("name", _to_str, "")
        horizon.path = fields.read("path", _to_str, "")
        horizon.nx = fields.read("Nx", _to_int, 0)
        horizon.ny = fields.read("Ny", _to_int, 0)

        data_file = Path(directory) / horizon.path
        if horizon.path and data_file.is_file():
            horizon.uuid = _parse_uuid(data_file.name.split(".", 1)[0])
            with PointReader(data_file) as reader:
                horizon.points = list(reader)
            real = len(horizon.points)
            if fields.has("pointNumber"):
                if _to_int(fields.raw("pointNumber")) != real:
                    fields.fail(
                        "::pointNumber : json-value != real-size  "
                        f"(Note: real-size == {real})\n"
                    )
                if horizon.nx and horizon.ny and real and real != horizon.nx * horizon.ny:
                    fields.fail(
                        "::Nx,Ny : json-(Nx*Ny) != real-size of horizon\n"
                        f"(Note: real-size == {real})\n"
                    )
            else:
                fields.fail(
                    f"::pointNumber : not found  (Note: real value == {real})\n"
                )
        else:
            fields.fail("::data-file : doesn`t exist\n")

        fields.raise_if_any("\n")
        return horizon

    def copy(self) -> SeismHorizon:
        return SeismHorizon(
            self.uuid, self.name, self.nx, self.ny, list(self.points), self.path
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
            "Nx": self.nx,
            "Ny": self.ny,
        }