"""A single channel of a receiver."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .core import Point, _f32_point, _FieldReader, _point_to_json, _to_int, _to_str


@dataclass
class SeismChannelReceiver:
    name: str = ""
    channel_num: int = 0
    axis_num: int = 0
    orientation: Point = (0.0, 0.0, 0.0)
    motion: int = 0
    p_station_correction: int = 0
    s_station_correction: int = 0
    well_channel_num: int = 0

    def __post_init__(self) -> None:
        self.orientation = _f32_point(self.orientation)

    @classmethod
    def from_json(cls, json: dict) -> SeismChannelReceiver:
        fields = _FieldReader(json)
        name = fields.read("name", _to_str, "")
        channel_num = fields.read("channelNum", _to_int, 0)
        axis_num = fields.read("axisNum", _to_int, 0)
        orientation = fields.read_point("Orientation")
        motion = fields.read("motion", _to_int, 0)
        p_correction = fields.read("pStationCorrection", _to_int, 0)
        s_correction = fields.read("sStationCorrection", _to_int, 0)
        well_channel_num = fields.read("wellChannelNum", _to_int, 0)
        fields.raise_if_any()
        return cls(
            name,
            channel_num,
            axis_num,
            orientation,
            motion,
            p_correction,
            s_correction,
            well_channel_num,
        )

    def to_json(self) -> dict:
        return {
            "name": self.name,
            "channelNum": self.channel_num,
            "axisNum": self.axis_num,
            "Orientation": _point_to_json(self.orientation),
            "motion": self.motion,
            "pStationCorrection": self.p_station_correction,
            "sStationCorrection": self.s_station_correction,
            "wellChannelNum": self.well_channel_num,
        }

    def copy(self) -> SeismChannelReceiver:
        return dataclasses.replace(self)