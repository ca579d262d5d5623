"""Picked arrivals of P and S waves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .core import _FieldReader, _to_int, _to_str

_POLARIZATION_HALF_WIDTH = 20000


class WaveType(IntEnum):
    PWAVE = 1
    SWAVE = 2


@dataclass
class SeismWavePick:
    """An arrival pick with its polarization window."""

    wave_type: WaveType = WaveType.PWAVE
    arrival: int = 0
    polarization_left_border: int = 0
    polarization_right_border: int = 0

    @classmethod
    def at_arrival(cls, wave_type: WaveType, arrival: int) -> SeismWavePick:
        """Make a pick whose window spans a fixed width around the arrival."""
        return cls(
            WaveType(wave_type),
            arrival,
            arrival - _POLARIZATION_HALF_WIDTH,
            arrival + _POLARIZATION_HALF_WIDTH,
        )

    @classmethod
    def from_json(cls, json: dict) -> SeismWavePick:
        fields = _FieldReader(json)
        wave_type = WaveType.PWAVE
        if fields.has("type"):
            found = WaveType.__members__.get(_to_str(fields.raw("type")))
            if found is None:
                fields.fail("::type : unknown this type\n")
            else:
                wave_type = found
        else:
            fields.missing("type")
        arrival = fields.read("arrival", _to_int, 0)
        left = fields.read("polarizationLeftBorder", _to_int, 0)
        right = fields.read("polarizationRightBorder", _to_int, 0)
        fields.raise_if_any("\n")
        return cls(wave_type, arrival, left, right)

    def to_json(self) -> dict:
        return {
            "type": WaveType(self.wave_type).name,
            "arrival": self.arrival,
            "polarizationLeftBorder": self.polarization_left_border,
            "polarizationRightBorder": self.polarization_right_border,
        }