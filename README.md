# seismproc

`seismproc` holds the data model of a downhole microseismic project and
reads and writes its files. It is a library with no command of its own.

## Contents

| Module | What it holds |
| --- | --- |
| `seismproc.core` | `FormatError` (a `ValueError`), `Signal`, the `Point` type |
| `seismproc.wavepick` | `WaveType` (`PWAVE`, `SWAVE`) and `SeismWavePick` |
| `seismproc.trace` | `SeismTrace`: single-precision samples and their maximum |
| `seismproc.channel` | `SeismChannelReceiver`: one channel of a receiver |
| `seismproc.receiver` | `SeismReceiver`: a receiver and its channels |
| `seismproc.component` | `SeismComponent`: the traces of one receiver and its wave picks |
| `seismproc.component_io` | `SeismComponentReader`, `SeismComponentWriter` for trace files |
| `seismproc.point_io` | `PointReader`, `PointWriter` for point files |
| `seismproc.horizon` | `SeismHorizon`: a grid of points stored in a data file |
| `seismproc.well` | `SeismWell`: trajectory points and receivers |
| `seismproc.event` | `SeismEvent`: components of one event, its date and location |
| `seismproc.event_model` | `AbstractSegyReader`, `EventModel` |
| `seismproc.horizon_model` | `HorizonModel`: builds a horizon from a point file |
| `seismproc.project` | `SeismProject`: the root object, loaded and saved as JSON |

## Installation

```
pip install seismproc
```

To run the tests, install the `test` extra:

```
pip install "seismproc[test]"
pytest
```

## Usage

Build a project and save it. `SeismProject.create_default()` gives a project
with two wells, each with eight receivers of three channels.
`to_json(path)` clears and recreates the `data/events/`, `data/horizons/` and
`data/wells/` directories beside `path`, writes the binary data files there,
and returns the JSON description; writing that description to `path` is up
to you.

```python
import json
from pathlib import Path

from seismproc.horizon import SeismHorizon
from seismproc.project import SeismProject

project = SeismProject.create_default()
project.set_name("survey")

horizon = SeismHorizon(name="top")
horizon.add_point((0.0, 0.0, 100.0))
project.add_horizon(horizon)

path = Path("survey/project.json")
path.parent.mkdir(parents=True, exist_ok=True)
path.write_text(json.dumps(project.to_json(path)))
```

Load it again. Data files are found relative to the project file's directory:

```python
loaded = SeismProject.from_json(json.loads(path.read_text()), path)
assert loaded.is_saved
```

Loading problems raise `seismproc.core.FormatError`. Its message lists every
missing or inconsistent field that was found, with the index of the item
it was found in.

### Wave picks

`SeismWavePick.at_arrival` makes a pick whose polarization borders lie 20000
on either side of the arrival.

```python
from seismproc.wavepick import SeismWavePick, WaveType

pick = SeismWavePick.at_arrival(WaveType.PWAVE, 50000)
data = pick.to_json()   # {"type": "PWAVE", "arrival": 50000, ...}
same = SeismWavePick.from_json(data)
```

### Signals

Projects, events, components and the two models announce changes through
`seismproc.core.Signal` attributes such as `SeismProject.added_well`,
`SeismComponent.changed` or `EventModel.notify`. `connect` a callable and it is
called with the emitted arguments on every `emit`.

```python
project.removed_well.connect(lambda well_uuid: print("removed", well_uuid))
```

### Reading components and horizons

`EventModel(reader).get_seism_components(well, path)` asks an
`AbstractSegyReader` for one component per receiver of the well. If the file
and the receivers do not match, or the reader fails, it emits the message on
`notify` and returns an empty list.

`HorizonModel().get_seism_horizon_from(path)` reads a point file into a new
horizon named after the file, or emits on `notify` and returns `None`.

## File formats

- Point files with the `.bin` suffix hold little-endian 32-bit floats, three
  per point (x, y, z). Any other suffix is read as whitespace-separated text
  in the order z, x, y. `PointWriter` always writes the binary form.
- Event trace files hold, for each trace, a big-endian 32-bit sample count
  followed by that many big-endian 32-bit floats.
- Dates in project and event descriptions use the form `dd.mm.yy HH:MM:SS`.

## What it does not do

- There is no SEG-Y reader. `AbstractSegyReader` only defines the interface
  that `EventModel` uses; supply your own implementation.
- There is no location algorithm. `SeismEvent.process()` only marks the event
  processed and sets a fixed location of `(1.67, 1.113, 1.13)`.
- There is no graphical interface, plotting or command-line tool.