"""A receiver made of several channels."""

from __future__ import annotations

import dataclasses
import uuid
from dataclasses import dataclass, field

from .channel import SeismChannelReceiver
from .core import (
    NULL_UUID,
    Point,
    _f32_point,
    _FieldReader,
    _format_uuid,
    _parse_uuid,
    _point_to_json,
    _to_bool,
    _to_int,
    _to_str,
)


@dataclass
class SeismReceiver:
    uuid: uuid.UUID = field(default_factory=uuid.uuid4)
    name: str = ""
    receiver_num: int = 0
    location: Point = (0.0, 0.0, 0.0)
    on: bool = False
    receiver_type: int = 0
    gain: int = 0
    sensitivity: int = 0
    v_max: int = 0
    low_freq: int = 0
    high_freq: int = 0
    well_receiver_num: int = 0
    channels: list[SeismChannelReceiver] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.location = _f32_point(self.location)

    @property
    def channel_num(self) -> int:
        return len(self.channels)

    def add_channel(self, channel: SeismChannelReceiver) -> None:
        self.channels.append(channel)

    @classmethod
    def from_json(cls, json: dict) -> SeismReceiver:
        fields = _FieldReader(json)
        receiver_uuid = fields.read(
            "uuid", lambda v: _parse_uuid(_to_str(v)), NULL_UUID
        )
        name = fields.read("name", _to_str, "")
        receiver_num = fields.read("receiverNum", _to_int, 0)
        location = fields.read_point("Location")
        on = fields.read("on", _to_bool, False)
        receiver_type = fields.read("type", _to_int, 0)
        gain = fields.read("gain", _to_int, 0)
        sensitivity = fields.read("sensitivity", _to_int, 0)
        v_max = fields.read("vMax", _to_int, 0)
        low_freq = fields.read("lowFreq", _to_int, 0)
        high_freq = fields.read("highFreq", _to_int, 0)
        well_receiver_num = fields.read("wellReceiverNum", _to_int, 0)
        channels = fields.read_items(
            "Channels", SeismChannelReceiver.from_json, "Channel"
        )
        fields.raise_if_any()
        return cls(
            receiver_uuid,
            name,
            receiver_num,
            location,
            on,
            receiver_type,
            gain,
            sensitivity,
            v_max,
            low_freq,
            high_freq,
            well_receiver_num,
            channels,
        )

    def to_json(self) -> dict:
        return {
            "uuid": _format_uuid(self.uuid),
            "name": self.name,
            "receiverNum": self.receiver_num,
            "Location": _point_to_json(self.location),
            "on": self.on,
            "type": self.receiver_type,
            "gain": self.gain,
            "sensitivity": self.sensitivity,
            "vMax": self.v_max,
            "lowFreq": self.low_freq,
            "highFreq": self.high_freq,
            "wellReceiverNum": self.well_receiver_num,
            "Channels": [channel.to_json() for channel in self.channels],
        }

    def copy(self) -> SeismReceiver:
        return dataclasses.replace(
            self, channels=[channel.copy() for channel in self.channels]
        )