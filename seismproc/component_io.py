"""Binary storage of component traces: a big-endian sample count, then samples."""

from __future__ import annotations

import os
import struct
from typing import BinaryIO

from .component import SeismComponent
from .core import FormatError
from .trace import SeismTrace

TRACE_IN_COMPONENT = 3

_COUNT = struct.Struct(">I")
_SIGNED_COUNT = struct.Struct(">i")


class SeismComponentReader:
    """Reads traces one after another from a data file."""

    def __init__(self, path: str | os.PathLike) -> None:
        self._file: BinaryIO = open(path, "rb")
        self._size = os.fstat(self._file.fileno()).st_size

    def __enter__(self) -> SeismComponentReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def has_next(self) -> bool:
        return self._file.tell() < self._size

    def _read(self, size: int) -> bytes:
        data = self._file.read(size)
        if len(data) < size:
            raise FormatError("::data : unexpected end of trace data\n")
        return data

    def next_trace(self) -> SeismTrace:
        (count,) = _COUNT.unpack(self._read(_COUNT.size))
        samples = struct.unpack(f">{count}f", self._read(4 * count))
        return SeismTrace(samples)

    def close(self) -> None:
        self._file.close()


class SeismComponentWriter:
    """Writes the traces of components to a data file."""

    def __init__(self, path: str | os.PathLike) -> None:
        self._file: BinaryIO = open(path, "wb")

    def __enter__(self) -> SeismComponentWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def write_component(self, component: SeismComponent) -> None:
        for trace in component.traces:
            self._write_trace(trace)

    def _write_trace(self, trace: SeismTrace) -> None:
        count = trace.buffer_size
        self._file.write(_SIGNED_COUNT.pack(count))
        self._file.write(struct.pack(f">{count}f", *trace.buffer))

    def close(self) -> None:
        self._file.close()