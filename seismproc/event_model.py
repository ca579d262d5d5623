"""Building event components from a seismic data file."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod

from .component import SeismComponent
from .core import FormatError, Signal
from .receiver import SeismReceiver
from .well import SeismWell


class AbstractSegyReader(ABC):
    """A source of components, one per receiver, read from a data file."""

    @abstractmethod
    def set_file_path(self, path: str) -> None:
        """Open the file at the given path."""

    @abstractmethod
    def read_bin_header(self) -> None:
        """Read the file header that describes the traces."""

    @abstractmethod
    def has_next_component(self) -> bool:
        """Tell whether traces for another component remain."""

    @abstractmethod
    def next_component(self, receiver: SeismReceiver) -> SeismComponent:
        """Read the traces of the given receiver as one component."""

    @abstractmethod
    def close(self) -> None:
        """Close the file and forget what was read."""


class EventModel:
    """Reads the components of a well's receivers, reporting failures on ``notify``."""

    def __init__(self, reader: AbstractSegyReader) -> None:
        self._reader = reader
        self.notify = Signal()

    def get_seism_components(
        self, well: SeismWell, path: str | os.PathLike
    ) -> list[SeismComponent]:
        """Return one component per receiver, or an empty list on failure."""
        components: list[SeismComponent] = []
        try:
            self._reader.set_file_path(os.fspath(path))
            self._reader.read_bin_header()
            remaining = iter(well.receivers)
            while self._reader.has_next_component():
                receiver = next(remaining, None)
                if receiver is None:
                    raise FormatError(
                        "There are more traces in the segy-file than in receivers"
                    )
                components.append(self._reader.next_component(receiver))
            if next(remaining, None) is not None:
                raise FormatError(
                    "There are more traces in receivers than in the segy-file"
                )
        except (ValueError, OSError) as err:
            components = []
            self.notify.emit(str(err))
        finally:
            self._reader.close()
        return components