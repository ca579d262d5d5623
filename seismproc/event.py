"""A seismic event: components recorded by receivers, with their traces."""

from __future__ import annotations

import os
import uuid
from datetime import datetime
from pathlib import Path
from typing import Mapping

from .component import SeismComponent
from .component_io import SeismComponentReader, SeismComponentWriter
from .core import (
    FormatError,
    Point,
    Signal,
    _f32_point,
    _FieldReader,
    _format_uuid,
    _parse_uuid,
    _point_to_json,
    _to_bool,
    _to_dict,
    _to_int,
    _to_list,
    _to_str,
)
from .receiver import SeismReceiver
from .well import SeismWell

_DATE_FORMAT = "%d.%m.%y %H:%M:%S"
_PROCESSED_LOCATION = (1.67, 1.113, 1.13)


def _parse_date(text: str) -> datetime | None:
    try:
        return datetime.strptime(text, _DATE_FORMAT)
    except ValueError:
        return None


def _find_receiver(
    wells: Mapping[uuid.UUID, SeismWell], receiver_uuid: uuid.UUID
) -> SeismReceiver | None:
    for well in wells.values():
        for receiver in well.receivers:
            if receiver.uuid == receiver_uuid:
                return receiver
    return None


class SeismEvent:
    """Components of one event, its date and, once processed, its location."""

    DEFAULT_PATH = "data/events/"

    def __init__(
        self, event_uuid: uuid.UUID | None = None, date_time: datetime | None = None
    ) -> None:
        self.uuid = event_uuid if event_uuid is not None else uuid.uuid4()
        self.event_type = 0
        self.path = ""
        self.date_time: datetime | None = (
            date_time if date_time is not None else datetime.now().replace(microsecond=0)
        )
        self._is_processed = False
        self._location: Point = (0.0, 0.0, 0.0)
        self._components: list[SeismComponent] = []
        self.changed = Signal()

    @property
    def is_processed(self) -> bool:
        return self._is_processed

    @property
    def location(self) -> Point:
        return self._location

    @property
    def components(self) -> tuple[SeismComponent, ...]:
        return tuple(self._components)

    @property
    def component_number(self) -> int:
        return len(self._components)

    def add_component(self, component: SeismComponent) -> None:
        self._components.append(component)
        component.changed.connect(self.changed.emit)

    def remove_component_by_receiver_uuid(self, receiver_uuid: uuid.UUID) -> bool:
        """Remove the first component of that receiver; report whether one was found."""
        for component in self._components:
            if component.receiver_uuid == receiver_uuid:
                self._components.remove(component)
                component.changed.disconnect(self.changed.emit)
                return True
        return False

    def process(self) -> None:
        self._location = _f32_point(_PROCESSED_LOCATION)
        self._is_processed = True

    def copy(self) -> SeismEvent:
        other = SeismEvent(self.uuid, self.date_time)
        other.date_time = self.date_time
        other.event_type = self.event_type
        other.path = self.path
        other._is_processed = self._is_processed
        other._location = self._location
        for component in self._components:
            other.add_component(component.copy())
        return other

    @classmethod
    def from_json(
        cls,
        json: dict,
        wells: Mapping[uuid.UUID, SeismWell],
        directory: str | os.PathLike,
    ) -> SeismEvent:
        fields = _FieldReader(json)
        event = cls()
        event.date_time = None
        event.event_type = fields.read("type", _to_int, 0)

        if fields.has("date"):
            event.date_time = _parse_date(_to_str(fields.raw("date")))
        else:
            fields.missing("date")

        if fields.has("isProcessed"):
            event._is_processed = _to_bool(fields.raw("isProcessed"))
            if event._is_processed:
                event._location = fields.read_point("Location")
        else:
            fields.missing("isProcessed")

        if fields.has("path"):
            event.path = _to_str(fields.raw("path"))
            data_file = Path(directory) / event.path
            if event.path and data_file.is_file():
                event.uuid = _parse_uuid(data_file.name.split(".", 1)[0])
                if fields.has("Components"):
                    with SeismComponentReader(data_file) as reader:
                        event._read_components(
                            _to_list(fields.raw("Components")), reader, wells, fields
                        )
                else:
                    fields.missing("Components")
            else:
                fields.fail("::data-file : doesn`t exist\n")
        else:
            fields.missing("path")

        fields.raise_if_any("\n")
        return event

    def _read_components(
        self,
        objects: list,
        reader: SeismComponentReader,
        wells: Mapping[uuid.UUID, SeismWell],
        fields: _FieldReader,
    ) -> None:
        for idx, obj in enumerate(objects):
            if not reader.has_next():
                fields.fail("::data : not enough data for event\n")
                break
            try:
                component = SeismComponent.from_json(_to_dict(obj))
                receiver = _find_receiver(wells, component.receiver_uuid)
                if receiver is None:
                    fields.fail(
                        "::receiver with uuid == "
                        f"{_format_uuid(component.receiver_uuid)} not found\n"
                    )
                    continue
                for _ in range(receiver.channel_num):
                    component.add_trace(reader.next_trace())
                self.add_component(component)
            except FormatError as err:
                fields.fail(f"Component (idx: {idx})\n{err}")
        if reader.has_next():
            fields.fail("::data : not enough components (in json)\n")

    def to_json(self, directory: str | os.PathLike) -> dict:
        """Write the traces to the data file and return the description."""
        if not self.path:
            self.path = f"{self.DEFAULT_PATH}{_format_uuid(self.uuid)}.bin"
        result: dict = {
            "type": self.event_type,
            "path": self.path,
            "date": self.date_time.strftime(_DATE_FORMAT) if self.date_time else "",
            "isProcessed": self._is_processed,
        }
        if self._is_processed:
            result["Location"] = _point_to_json(self._location)

        components_json = []
        with SeismComponentWriter(Path(directory) / self.path) as writer:
            for component in self._components:
                components_json.append(component.to_json())
                writer.write_component(component)
        result["Components"] = components_json
        return result