"""Loading a horizon from a point file."""

from __future__ import annotations

import os
from pathlib import Path

from .core import FormatError, Signal
from .horizon import SeismHorizon
from .point_io import PointReader


class HorizonModel:
    """Builds horizons from point files, reporting failures on ``notify``."""

    def __init__(self) -> None:
        self.notify = Signal()

    def get_seism_horizon_from(self, path: str | os.PathLike) -> SeismHorizon | None:
        """Return the horizon in the file, or None if it cannot be read."""
        path = Path(path)
        horizon = SeismHorizon(name=path.name.split(".", 1)[0])
        try:
            with PointReader(path) as reader:
                for point in reader:
                    horizon.add_point(point)
        except OSError:
            self.notify.emit("File can not be opened (SeismPointReader)")
            return None
        except FormatError as err:
            self.notify.emit(str(err))
            return None
        return horizon