"""A component: the traces a receiver recorded, with its wave picks."""

from __future__ import annotations

import dataclasses
import uuid

from .core import (
    NULL_UUID,
    Signal,
    _f32,
    _FieldReader,
    _format_uuid,
    _parse_uuid,
    _to_float,
    _to_str,
)
from .trace import SeismTrace
from .wavepick import SeismWavePick, WaveType


class SeismComponent:
    """Traces of one receiver, their sample interval and the picked arrivals."""

    def __init__(self, receiver_uuid: uuid.UUID, sample_interval: float = 0.0) -> None:
        self.receiver_uuid = receiver_uuid
        self._sample_interval = _f32(sample_interval)
        self._max_value = -1.0
        self._traces: list[SeismTrace] = []
        self._wave_picks: dict[WaveType, SeismWavePick] = {}
        self.changed = Signal()

    @property
    def sample_interval(self) -> float:
        return self._sample_interval

    @sample_interval.setter
    def sample_interval(self, value: float) -> None:
        self._sample_interval = _f32(value)

    @property
    def max_value(self) -> float:
        return self._max_value

    @property
    def traces(self) -> tuple[SeismTrace, ...]:
        return tuple(self._traces)

    @property
    def traces_number(self) -> int:
        return len(self._traces)

    @property
    def wave_picks(self) -> dict[WaveType, SeismWavePick]:
        """The picks ordered by wave type."""
        return dict(sorted(self._wave_picks.items()))

    @classmethod
    def from_json(cls, json: dict) -> SeismComponent:
        fields = _FieldReader(json)
        receiver_uuid = fields.read(
            "receiverUuid", lambda v: _parse_uuid(_to_str(v)), NULL_UUID
        )
        sample_interval = fields.read("sampleInterval", _to_float, 0.0)
        picks = fields.read_items("Waves", SeismWavePick.from_json, "Waves")
        fields.raise_if_any("\n")
        component = cls(receiver_uuid, sample_interval)
        for pick in picks:
            component._wave_picks[WaveType(pick.wave_type)] = pick
        return component

    def add_trace(self, trace: SeismTrace) -> None:
        if self._max_value < trace.max_value:
            self._max_value = trace.max_value
        self._traces.append(trace)

    def add_wave_pick(self, wave_pick: SeismWavePick) -> None:
        self._wave_picks[WaveType(wave_pick.wave_type)] = dataclasses.replace(wave_pick)
        self.changed.emit()

    def remove_wave_pick(self, wave_type: WaveType) -> None:
        self._wave_picks.pop(WaveType(wave_type), None)
        self.changed.emit()

    def get_wave_pick(self, wave_type: WaveType) -> SeismWavePick:
        """Return the pick of the given type; raise KeyError if there is none."""
        return self._wave_picks[WaveType(wave_type)]

    def copy(self) -> SeismComponent:
        other = SeismComponent(self.receiver_uuid, self._sample_interval)
        other._max_value = self._max_value
        other._traces = [trace.copy() for trace in self._traces]
        other._wave_picks = {
            wave_type: dataclasses.replace(pick)
            for wave_type, pick in self._wave_picks.items()
        }
        return other

    def to_json(self) -> dict:
        return {
            "receiverUuid": _format_uuid(self.receiver_uuid),
            "sampleInterval": float(self._sample_interval),
            "Waves": [pick.to_json() for pick in self.wave_picks.values()],
        }