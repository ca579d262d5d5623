"""A single recorded trace of samples."""

from __future__ import annotations

import math
from array import array
from typing import Iterable


class SeismTrace:
    """Single-precision samples and the largest value seen in them."""

    def __init__(self, buffer: Iterable[float] | None = None) -> None:
        self._max_value = -1.0
        self._buffer = array("f")
        if buffer is not None:
            self.set_buffer(buffer)

    @property
    def max_value(self) -> float:
        return self._max_value

    @property
    def buffer_size(self) -> int:
        return len(self._buffer)

    @property
    def buffer(self) -> array:
        return self._buffer

    def set_buffer(self, buffer: Iterable[float]) -> None:
        """Replace the samples; the maximum only ever grows."""
        self._buffer = array("f", buffer)
        self._max_value = max(
            [self._max_value, *(v for v in self._buffer if not math.isnan(v))]
        )

    def copy(self) -> SeismTrace:
        other = SeismTrace()
        other._buffer = array("f", self._buffer)
        other._max_value = self._max_value
        return other

    def to_json(self) -> dict:
        return {"sampleNumber": len(self._buffer)}