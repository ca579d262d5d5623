"""Reading and writing point files.

A file with the ``bin`` suffix holds little-endian single-precision x, y, z
triples. Any other file is text holding whitespace-separated z, x, y triples.
"""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import BinaryIO, Iterator

from .core import FormatError, Point, _f32_point

_POINT = struct.Struct("<3f")


class PointReader:
    """Reads points one after another from a binary or text file."""

    def __init__(self, path: str | os.PathLike) -> None:
        path = Path(path)
        self._is_bin = path.name.rpartition(".")[2] == "bin" and "." in path.name
        self._file: BinaryIO = open(path, "rb")
        self._size = os.fstat(self._file.fileno()).st_size
        self._tokens: list[str] = []
        self._position = 0
        if not self._is_bin:
            self._tokens = self._file.read().decode("utf-8").split()

    def __enter__(self) -> PointReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[Point]:
        while self.has_next():
            yield self.next()

    def has_next(self) -> bool:
        if self._is_bin:
            return self._file.tell() < self._size
        return self._position < len(self._tokens)

    def next(self) -> Point:
        if self._is_bin:
            data = self._file.read(_POINT.size)
            if len(data) < _POINT.size:
                raise FormatError("::data : incomplete point\n")
            return _POINT.unpack(data)
        triple = self._tokens[self._position : self._position + 3]
        if len(triple) < 3:
            raise FormatError("::data : incomplete point\n")
        self._position += 3
        try:
            z, x, y = (float(token) for token in triple)
        except ValueError:
            raise FormatError("::data : not a number\n") from None
        return _f32_point((x, y, z))

    def close(self) -> None:
        self._file.close()


class PointWriter:
    """Writes points as little-endian single-precision triples."""

    def __init__(self, path: str | os.PathLike) -> None:
        self._file: BinaryIO = open(path, "wb")

    def __enter__(self) -> PointWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def write_point(self, point: Point) -> None:
        self._file.write(_POINT.pack(*point))

    def close(self) -> None:
        self._file.close()