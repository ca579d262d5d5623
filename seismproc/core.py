"""Shared primitives: points, format errors, signals and JSON field readers."""

from __future__ import annotations

import struct
import uuid
from typing import Any, Callable, TypeVar

Point = tuple[float, float, float]

_T = TypeVar("_T")

NULL_UUID = uuid.UUID(int=0)


class FormatError(ValueError):
    """Raised when a stored description is incomplete or inconsistent."""


class Signal:
    """A list of callables invoked in connection order when emitted."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError("slot is not connected") from None

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _f32_point(point: Any) -> Point:
    x, y, z = point
    return (_f32(x), _f32(y), _f32(z))


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _to_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _to_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _to_bool(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def _to_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _to_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _parse_uuid(text: str) -> uuid.UUID:
    """Parse a UUID string, giving the null UUID when it is malformed."""
    try:
        return uuid.UUID(text.strip())
    except ValueError:
        return NULL_UUID


def _format_uuid(value: uuid.UUID) -> str:
    return "{" + str(value) + "}"


def _point_to_json(point: Point) -> list[float]:
    return [float(coordinate) for coordinate in point]


class _FieldReader:
    """Reads fields from a JSON object, collecting a report of what is wrong."""

    def __init__(self, json: dict) -> None:
        self._json = json
        self.errors: list[str] = []

    def has(self, key: str) -> bool:
        return key in self._json

    def raw(self, key: str) -> Any:
        return self._json.get(key)

    def missing(self, key: str) -> None:
        self.errors.append(f"::{key} : not found\n")

    def fail(self, message: str) -> None:
        self.errors.append(message)

    def read(self, key: str, convert: Callable[[Any], _T], default: _T) -> _T:
        if key in self._json:
            return convert(self._json[key])
        self.missing(key)
        return default

    def read_point(self, key: str, default: Point = (0.0, 0.0, 0.0)) -> Point:
        if key not in self._json:
            self.missing(key)
            return default
        values = _to_list(self._json[key])
        if len(values) != 3:
            self.fail(f"::{key} : is not three-dimensional\n")
            return default
        return _f32_point(_to_float(v) for v in values)

    def read_items(
        self, key: str, parse: Callable[[dict], _T], label: str
    ) -> list[_T]:
        items: list[_T] = []
        if key not in self._json:
            self.missing(key)
            return items
        for idx, obj in enumerate(_to_list(self._json[key])):
            try:
                items.append(parse(_to_dict(obj)))
            except FormatError as err:
                self.fail(f"{label} (idx: {idx})\n{err}")
        return items

    def raise_if_any(self, suffix: str = "") -> None:
        if self.errors:
            raise FormatError("".join(self.errors) + suffix)