"""Race track: lanes of kilometres with obstacles, the race itself and its standings."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Callable, Iterable

from autoslocos.vehicles import Vehicle

TRACK_LENGTH = 80
OBSTACLE_ROLL = 40
TICK_PROGRESS = 0.2
MOVE_THRESHOLD = 0.3
FRAME_DELAY = 0.1


class Obstacle(IntEnum):
    NONE = 0
    BOMB = 1
    STONE = 2
    LIQUID = 3

    @property
    def symbol(self) -> str:
        return _OBSTACLE_SYMBOLS[self]


_OBSTACLE_SYMBOLS = {
    Obstacle.NONE: "-",
    Obstacle.BOMB: "¤",
    Obstacle.STONE: "¶",
    Obstacle.LIQUID: "#",
}


@dataclass
class Kilometer:
    """One cell of a lane."""

    ordinal: int
    obstacle: Obstacle = Obstacle.NONE
    vehicle_present: bool = False

    @property
    def obstacle_present(self) -> bool:
        return self.obstacle is not Obstacle.NONE


@dataclass
class Lane:
    """A lane holding one vehicle and the kilometres it has to cover."""

    vehicle: Vehicle
    kilometers: list[Kilometer]
    position: int = 0
    finished: bool = False

    @property
    def location(self) -> Kilometer:
        return self.kilometers[self.position]

    def arrived(self) -> bool:
        """Return True once the vehicle stands on the last kilometre."""
        return self.position == len(self.kilometers) - 1


@dataclass(frozen=True)
class Standing:
    """A row of the results table."""

    name_es: str
    name_en: str
    driver: str
    tire_type: int
    tire_size: int
    speed_kmh: int
    sprite: str
    race_time_ms: int | None


def _resistance(vehicle: Vehicle, obstacle: Obstacle) -> int:
    if obstacle is Obstacle.BOMB:
        return vehicle.res_bomb
    if obstacle is Obstacle.STONE:
        return vehicle.res_stone
    if obstacle is Obstacle.LIQUID:
        return vehicle.res_liquid
    return 0


class Track:
    """A named track made of lanes of equal length."""

    def __init__(self, name: str = "", length: int = TRACK_LENGTH):
        if length < 1:
            raise ValueError(f"track length must be positive: {length}")
        self.name = name
        self.length = length
        self.lanes: list[Lane] = []
        self.start_time: float = 0.0
        self.finished = False

    def add_lane(self, vehicle: Vehicle) -> Lane:
        """Append a lane for ``vehicle``, which starts on the first kilometre."""
        kilometers = [Kilometer(ordinal) for ordinal in range(self.length)]
        kilometers[0].vehicle_present = True
        lane = Lane(vehicle, kilometers)
        self.lanes.append(lane)
        return lane

    def generate_obstacles(self, rng: random.Random | None = None) -> None:
        """Scatter obstacles: at most one bomb and one stone per lane, one liquid per track."""
        rng = rng if rng is not None else random.Random()
        liquid_used = False
        for lane in self.lanes:
            bomb_used = False
            stone_used = False
            for kilometer in lane.kilometers:
                roll = rng.randrange(OBSTACLE_ROLL)
                kilometer.obstacle = Obstacle.NONE
                if roll == Obstacle.BOMB and not bomb_used:
                    kilometer.obstacle = Obstacle.BOMB
                    bomb_used = True
                elif roll == Obstacle.STONE and not stone_used:
                    kilometer.obstacle = Obstacle.STONE
                    stone_used = True
                elif roll == Obstacle.LIQUID and not liquid_used:
                    kilometer.obstacle = Obstacle.LIQUID
                    liquid_used = True

    def render(self) -> str:
        """Return the track drawing, one header and one row per lane."""
        rows = []
        for lane in self.lanes:
            cells = "".join(
                lane.vehicle.sprite if km.vehicle_present else km.obstacle.symbol
                for km in lane.kilometers
            )
            rows.append(f"Carril {lane.vehicle.name_es}\n{cells}\n")
        return "".join(rows)

    def all_arrived(self) -> bool:
        """Record and return whether every vehicle stands on its last kilometre."""
        self.finished = all(lane.arrived() for lane in self.lanes)
        return self.finished

    def can_move(self, lane: Lane) -> bool:
        """Spend the vehicle's progress on leaving its kilometre if it has enough."""
        vehicle = lane.vehicle
        needed = self.length / vehicle.speed_kmh
        obstacle = lane.location.obstacle
        if obstacle is not Obstacle.NONE:
            needed += vehicle.speed_kmh * _resistance(vehicle, obstacle) / 1000
        if vehicle.progress < needed:
            return False
        vehicle.progress -= needed
        return True

    def start(self, now: float) -> None:
        """Mark ``now`` (in seconds) as the start of the race."""
        self.start_time = now
        self.finished = False

    def advance_lane(self, lane: Lane, now: float) -> None:
        """Give one tick of progress to a lane and move its vehicle as far as it can."""
        vehicle = lane.vehicle
        vehicle.progress += TICK_PROGRESS
        while vehicle.progress >= MOVE_THRESHOLD and not lane.finished:
            if not lane.arrived():
                if not self.can_move(lane):
                    break
                lane.location.vehicle_present = False
                lane.position += 1
                lane.location.vehicle_present = True
            else:
                lane.finished = True
                vehicle.race_time_ms = int((now - self.start_time) * 1000)
                self.all_arrived()

    def advance(self, now: float) -> None:
        """Advance every lane by one tick."""
        for lane in self.lanes:
            self.advance_lane(lane, now)

    def run(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        on_frame: Callable[[str], None] | None = None,
    ) -> None:
        """Run the race until it is over, handing each drawing to ``on_frame``."""
        if not self.lanes:
            raise ValueError("the track has no lanes")
        self.start(clock())
        while not self.finished:
            if on_frame is not None:
                on_frame(self.render())
            sleep(FRAME_DELAY)
            self.advance(clock())

    def standings(self) -> list[Standing]:
        """Return one row per lane, fastest first; unfinished vehicles come last."""
        if not self.lanes:
            raise ValueError("the track has no lanes")
        rows = [
            Standing(
                lane.vehicle.name_es,
                lane.vehicle.name_en,
                lane.vehicle.driver,
                lane.vehicle.tire_type,
                lane.vehicle.tire_size,
                lane.vehicle.speed_kmh,
                lane.vehicle.sprite,
                lane.vehicle.race_time_ms,
            )
            for lane in self.lanes
        ]
        return sorted(
            rows,
            key=lambda row: (row.race_time_ms is None, row.race_time_ms or 0),
        )


def format_standings(standings: Iterable[Standing]) -> str:
    """Return the results table as shown on screen."""
    blocks = []
    for row in standings:
        blocks.append(
            f"Nombre: {row.name_es}\n"
            f"Nombre en ingles: {row.name_en}\n"
            f"Conductor: {row.driver}\n"
            f"Tipo de caucho: {row.tire_type}\n"
            f"Tamano de caucho: {row.tire_size}\n"
            f"Velocidad: {row.speed_kmh}\n"
            f"Vehiculo en pantalla: {row.sprite}\n"
            f"Duracion en pista: {row.race_time_ms}\n\n"
        )
    return "".join(blocks)


def save_standings(standings: Iterable[Standing], path) -> None:
    """Write the numbered results table to ``path``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        for number, row in enumerate(standings, start=1):
            handle.write(
                f"{number}. {row.name_es}/{row.name_en}/{row.driver}/{row.race_time_ms}\n"
            )