"""A project: events, horizons and wells saved together beside a project file."""

from __future__ import annotations

import os
import shutil
import uuid
from datetime import date, datetime, time
from pathlib import Path
from typing import Mapping

from .channel import SeismChannelReceiver
from .core import Signal, _FieldReader, _to_str
from .event import _DATE_FORMAT, _parse_date, SeismEvent
from .horizon import SeismHorizon
from .receiver import SeismReceiver
from .well import SeismWell

_DEFAULT_WELL_NAMES = ("Mon_TOOLS_233", "Mon_TOOLS_244")
_DEFAULT_RECEIVERS_PER_WELL = 8
_DEFAULT_CHANNELS_PER_RECEIVER = 3


class SeismProject:
    """Holds the project's objects and tracks whether they have been saved."""

    def __init__(self) -> None:
        self._is_saved = False
        self._name = ""
        self._date: date | None = None
        self._time: time | None = None
        self._file_path: Path | None = None
        self._events: dict[uuid.UUID, SeismEvent] = {}
        self._horizons: dict[uuid.UUID, SeismHorizon] = {}
        self._wells: dict[uuid.UUID, SeismWell] = {}

        self.added_event = Signal()
        self.updated_event = Signal()
        self.removed_event = Signal()
        self.processed_events = Signal()
        self.added_horizon = Signal()
        self.removed_horizon = Signal()
        self.added_well = Signal()
        self.removed_well = Signal()
        self.added_receiver = Signal()
        self.removed_receiver = Signal()

    @classmethod
    def create_default(cls) -> SeismProject:
        """Make a new project holding the two standard wells."""
        project = cls()
        for name in _DEFAULT_WELL_NAMES:
            well = SeismWell(name=name)
            well.add_point((0.0, 0.0, 0.0))
            for _ in range(_DEFAULT_RECEIVERS_PER_WELL):
                receiver = SeismReceiver()
                for _ in range(_DEFAULT_CHANNELS_PER_RECEIVER):
                    receiver.add_channel(SeismChannelReceiver())
                well.add_receiver(receiver)
            project._wells[well.uuid] = well
        return project

    @classmethod
    def from_json(cls, json: dict, path: str | os.PathLike) -> SeismProject:
        """Load a project whose file is at ``path``; data files are relative to it."""
        project = cls()
        project._file_path = Path(path)
        directory = project._file_path.parent
        fields = _FieldReader(json)

        project._name = fields.read("name", _to_str, "")
        if fields.has("date"):
            project._set_stored(_parse_date(_to_str(fields.raw("date"))))
        else:
            fields.missing("date")

        for horizon in fields.read_items(
            "Horizons", lambda obj: SeismHorizon.from_json(obj, directory), "Horizons"
        ):
            project._horizons[horizon.uuid] = horizon
        for well in fields.read_items(
            "Wells", lambda obj: SeismWell.from_json(obj, directory), "Wells"
        ):
            project._wells[well.uuid] = well
        for event in fields.read_items(
            "Events",
            lambda obj: SeismEvent.from_json(obj, project._wells, directory),
            "Events",
        ):
            project._events[event.uuid] = event

        project._is_saved = True
        fields.raise_if_any()
        return project

    # state

    @property
    def is_saved(self) -> bool:
        return self._is_saved

    @property
    def name(self) -> str:
        return self._name

    @property
    def date_time(self) -> datetime | None:
        if self._date is None or self._time is None:
            return None
        return datetime.combine(self._date, self._time)

    @property
    def file_path(self) -> Path | None:
        return self._file_path

    @property
    def events(self) -> dict[uuid.UUID, SeismEvent]:
        return dict(sorted(self._events.items()))

    @property
    def horizons(self) -> dict[uuid.UUID, SeismHorizon]:
        return dict(sorted(self._horizons.items()))

    @property
    def wells(self) -> dict[uuid.UUID, SeismWell]:
        return dict(sorted(self._wells.items()))

    def exists(self) -> bool:
        return self._file_path is not None and self._file_path.is_file()

    def _set_stored(self, date_time: datetime | None) -> None:
        if date_time is None:
            self._date = None
            self._time = None
        else:
            self._date = date_time.date()
            self._time = date_time.time()

    def set_name(self, name: str) -> None:
        if name != self._name:
            self._is_saved = False
            self._name = name

    def set_date(self, date: date) -> None:
        if date != self._date:
            self._is_saved = False
            self._date = date
            if self._time is None:
                self._time = time()

    def set_time(self, time: time) -> None:
        if time != self._time:
            self._is_saved = False
            self._time = time

    def set_date_time(self, date_time: datetime | None) -> None:
        if date_time != self.date_time:
            self._is_saved = False
            self._set_stored(date_time)

    def set_file_path(self, path: str | os.PathLike | None) -> None:
        new_path = Path(path) if path is not None else None
        if new_path != self._file_path:
            self._is_saved = False
            self._file_path = new_path

    # saving

    def to_json(self, path: str | os.PathLike) -> dict:
        """Rewrite the data directories beside ``path`` and return the description."""
        file_path = Path(path)
        if file_path.is_dir():
            raise ValueError(f"{file_path} is a directory, not a project file")
        self._file_path = file_path
        directory = file_path.parent

        for default_path in (
            SeismEvent.DEFAULT_PATH,
            SeismHorizon.DEFAULT_PATH,
            SeismWell.DEFAULT_PATH,
        ):
            data_dir = directory / default_path
            if data_dir.is_dir():
                shutil.rmtree(data_dir)
            data_dir.mkdir(parents=True, exist_ok=True)

        date_time = self.date_time
        result = {
            "name": self._name,
            "date": date_time.strftime(_DATE_FORMAT) if date_time else "",
            "Events": [event.to_json(directory) for event in self.events.values()],
            "Horizons": [
                horizon.to_json(directory) for horizon in self.horizons.values()
            ],
            "Wells": [well.to_json(directory) for well in self.wells.values()],
        }
        self._is_saved = True
        return result

    # events

    def add_event(self, event: SeismEvent) -> None:
        self._is_saved = False
        self._events[event.uuid] = event
        self.added_event.emit(event)

    def update_event(self, event: SeismEvent) -> None:
        self._is_saved = False
        self._events[event.uuid] = event
        self.updated_event.emit(event)

    def remove_event(self, uuid: uuid.UUID) -> bool:
        if self._events.pop(uuid, None) is None:
            return False
        self._is_saved = False
        self.removed_event.emit(uuid)
        return True

    def process_events(self) -> None:
        for event in self.events.values():
            event.process()
        self.processed_events.emit()

    # horizons

    def add_horizon(self, horizon: SeismHorizon) -> None:
        self._is_saved = False
        self._horizons[horizon.uuid] = horizon
        self.added_horizon.emit(horizon)

    def remove_horizon(self, uuid: uuid.UUID) -> bool:
        if self._horizons.pop(uuid, None) is None:
            return False
        self._is_saved = False
        self.removed_horizon.emit(uuid)
        return True

    def set_horizons(self, horizons: Mapping[uuid.UUID, SeismHorizon]) -> None:
        """Replace all horizons, announcing each removal and addition."""
        for horizon_uuid in sorted(self._horizons):
            self.removed_horizon.emit(horizon_uuid)
        self._horizons = dict(horizons)
        for _, horizon in sorted(self._horizons.items()):
            self.added_horizon.emit(horizon)

    # wells

    def add_well(self, well: SeismWell) -> None:
        self._is_saved = False
        self._wells[well.uuid] = well
        self.added_well.emit(well)

    def remove_well(self, uuid: uuid.UUID) -> bool:
        well = self._wells.get(uuid)
        if well is None:
            return False
        self._is_saved = False
        for receiver in well.receivers:
            self.removed_receiver.emit(receiver.uuid)
        del self._wells[uuid]
        self.removed_well.emit(uuid)
        return True

    def set_wells(self, wells: Mapping[uuid.UUID, SeismWell]) -> None:
        """Drop wells missing from ``wells`` and add those not yet present."""
        for well_uuid in sorted(self._wells):
            if well_uuid not in wells:
                for receiver in self._wells[well_uuid].receivers:
                    self.removed_receiver.emit(receiver.uuid)
                del self._wells[well_uuid]
                self.removed_well.emit(well_uuid)

        for well_uuid, well in sorted(wells.items()):
            if well_uuid not in self._wells:
                for receiver in well.receivers:
                    self.added_receiver.emit(receiver)
                self._wells[well_uuid] = well
                self.added_well.emit(well)

    # receivers

    def add_receiver(self, well_uuid: uuid.UUID, receiver: SeismReceiver) -> bool:
        well = self._wells.get(well_uuid)
        if well is None:
            return False
        self.added_receiver.emit(receiver)
        well.add_receiver(receiver)
        return True

    def remove_all_receivers(self) -> None:
        for well in self.wells.values():
            for receiver in well.receivers:
                self.removed_receiver.emit(receiver.uuid)
            well.remove_all_receivers()