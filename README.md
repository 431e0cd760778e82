# autoslocos

A text-mode racing game. Keep a garage of wacky vehicles, build a track
with random obstacles and watch the race play out in the terminal. The
game's menus and messages are in Spanish.

## Installing

```
pip install .
```

## Playing

```
autoslocos
autoslocos --data-dir path/to/data
```

`--data-dir` names the directory that holds the game's files (default:
`archivos` in the current directory):

- `VehiculosDefault.txt`: the vehicles the game starts with, read once at
  start-up. If it does not exist the garage starts empty.
- `vehiculos.txt`: the current garage, written at start-up and after every
  add, modify or delete.
- `tablaDePosiciones.txt`: the last saved race standings.

Each vehicle file line holds twelve `/`-separated fields: Spanish name,
English name, driver, tire type, tire size, monster-truck level, speed
class, speed in km/h, bomb, stone and liquid resistance, and the sprite.

The main menu offers:

1. **Vehicle management**: add, modify, delete, look up or list vehicles.
   Lookups match any part of the Spanish or English name; when several
   vehicles match, you pick one by driver. A new vehicle gets a Spanish
   name, an English name, a driver, one of fifteen sprites and one of nine
   presets. A preset fixes the tire type, tire size, speed class, speed in
   km/h and the resistances to bombs, stones and slippery liquid.
2. **Main game and track management**: create a track by picking a
   vehicle for each lane, or let the lanes be filled at random. Every lane
   is 80 kilometres long. Each lane can get at most one bomb (`¤`) and one
   stone (`¶`), and the whole track at most one liquid patch (`#`). An
   obstacle slows a vehicle according to its speed and the matching
   resistance. When the race is over you can view the standings and save
   them.

Both menus list any vehicle whose data does not match a valid
configuration. The game ends on option 0 or at the end of input.

## Using the library

The pieces also work without the menus:

```python
import random

from autoslocos.vehicles import Garage
from autoslocos.track import Track, format_standings

garage = Garage.load("archivos/VehiculosDefault.txt")
track = Track("Gran Premio", 80)
for position in (1, 2):
    track.add_lane(garage.at(position))
track.generate_obstacles(random.Random(7))
print(track.render())

track.run()  # uses time.monotonic and time.sleep unless given others
print(format_standings(track.standings()))
```

- `autoslocos.inputs`: text checks (`is_integer`, `is_valid_float`,
  `is_numeric`, `has_non_space`, `is_valid_string`) and `Console`, a
  line-based prompt wrapper over any pair of text streams.
- `autoslocos.vehicles`: `Vehicle`, the nine presets (`preset`), the
  validation rules, `sprite_for`, and `Garage` with `add`, `remove`,
  `search`, `at`, `invalid_vehicles`, `load` and `save`.
- `autoslocos.track`: `Track` with `add_lane`, `generate_obstacles`,
  `render`, `advance`, `run` and `standings`; `format_standings` and
  `save_standings`. `Track.run` takes a clock, a sleep function and an
  optional callback that receives each frame. `Track.standings` sorts
  vehicles by race time, unfinished ones last.
- `autoslocos.vehicle_console` and `autoslocos.menus`: the interactive
  screens; `RaceApp` runs the whole game over a `Console`.

## What it does not do

- No vehicle file ships with the package. Without a `VehiculosDefault.txt`
  in the data directory the game starts with an empty garage, and you have
  to add vehicles before building a track.
- There is no betting: you choose vehicles and watch them race, but no
  wagers are taken or settled.

## Running the tests

```
pip install .[test]
pytest
```