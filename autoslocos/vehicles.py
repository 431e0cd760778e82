"""Vehicles, their presets and validation rules, and the garage that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Iterable, Iterator

UNKNOWN_LABEL = "Error"


class TireType(IntEnum):
    ALL_TERRAIN = 1
    NORMAL = 2
    ANTI_SKID = 3

    @property
    def label(self) -> str:
        return _TIRE_TYPE_LABELS[self]


class TireSize(IntEnum):
    MONSTER_TRUCK = 1
    NORMAL = 2
    GROUNDED = 3

    @property
    def label(self) -> str:
        return _TIRE_SIZE_LABELS[self]


class Speed(IntEnum):
    LAZY = 1
    CRUISE = 2
    SUPER_FERRARI = 3
    DELOREAN = 4

    @property
    def label(self) -> str:
        return _SPEED_LABELS[self]


_TIRE_TYPE_LABELS = {
    TireType.ALL_TERRAIN: "Todoterreno",
    TireType.NORMAL: "Normal",
    TireType.ANTI_SKID: "Anticoleo",
}
_TIRE_SIZE_LABELS = {
    TireSize.MONSTER_TRUCK: "Monstertruck",
    TireSize.NORMAL: "Normal",
    TireSize.GROUNDED: "Pegado al piso",
}
_SPEED_LABELS = {
    Speed.LAZY: "Perezoso",
    Speed.CRUISE: "Crucero",
    Speed.SUPER_FERRARI: "SuperFerrari",
    Speed.DELOREAN: "Delorean",
}


def _label(enum_cls, value: int) -> str:
    try:
        return enum_cls(value).label
    except ValueError:
        return UNKNOWN_LABEL


SPRITES = ("¥", "@", "©", "£", "Ç", "$", "Ø", "æ", "þ", "§", "®", "ª", "º", "Æ", "Ð")


def sprite_for(choice: int) -> str:
    """Return the on-screen character for sprite menu choice 1..15."""
    if not 1 <= choice <= len(SPRITES):
        raise ValueError(f"sprite choice must be between 1 and {len(SPRITES)}: {choice}")
    return SPRITES[choice - 1]


@dataclass(frozen=True)
class Preset:
    """One of the fixed vehicle configurations offered when building a car."""

    tire_type: int
    tire_size: int
    monster: int
    speed: int
    speed_kmh: int
    res_bomb: int
    res_stone: int
    res_liquid: int


PRESETS = (
    Preset(1, 1, 1, 1, 140, 15, 20, 30),
    Preset(1, 1, 2, 1, 120, 12, 17, 25),
    Preset(1, 1, 3, 1, 110, 10, 15, 20),
    Preset(1, 1, 4, 1, 100, 7, 10, 15),
    Preset(1, 1, 5, 1, 80, 5, 5, 10),
    Preset(2, 2, 0, 1, 120, 15, 20, 30),
    Preset(2, 2, 0, 2, 140, 20, 25, 35),
    Preset(3, 3, 0, 3, 160, 25, 30, 20),
    Preset(3, 3, 0, 4, 180, 35, 40, 15),
)


def preset(number: int) -> Preset:
    """Return preset ``number`` (1..9) from the new-vehicle table."""
    if not 1 <= number <= len(PRESETS):
        raise ValueError(f"preset must be between 1 and {len(PRESETS)}: {number}")
    return PRESETS[number - 1]


def validate_vehicle(tire_type: int, tire_size: int, monster: int, speed: int) -> bool:
    """Check that tire type, tire size, monster level and speed fit together."""
    return (
        (speed == 1 and tire_size == 1 and tire_type == 1 and 0 < monster < 6)
        or (speed in (1, 2) and tire_size == 2 and tire_type == 2 and monster == 0)
        or (speed in (3, 4) and tire_size == 3 and tire_type == 3 and monster == 0)
    )


_MONSTER_RESISTANCES = {
    1: (15, 20, 30, 140),
    2: (12, 17, 25, 120),
    3: (10, 15, 20, 110),
    4: (7, 10, 15, 100),
    5: (5, 5, 10, 80),
}

_REGULAR_RESISTANCES = {
    1: (15, 20, 30, 120),
    2: (20, 25, 35, 140),
    3: (25, 30, 20, 160),
    4: (35, 40, 15, 180),
}


def validate_resistances_monster(
    monster: int, res_bomb: int, res_stone: int, res_liquid: int, speed_kmh: int
) -> bool:
    """Check the resistances and km/h of a monster-truck vehicle."""
    return _MONSTER_RESISTANCES.get(monster) == (res_bomb, res_stone, res_liquid, speed_kmh)


def validate_resistances_regular(
    speed: int, monster: int, res_bomb: int, res_stone: int, res_liquid: int, speed_kmh: int
) -> bool:
    """Check the resistances and km/h of a vehicle that is not a monster truck."""
    if monster != 0:
        return False
    return _REGULAR_RESISTANCES.get(speed) == (res_bomb, res_stone, res_liquid, speed_kmh)


@dataclass
class Vehicle:
    """A competitor: names, driver, mechanical data and race state."""

    name_es: str
    name_en: str
    driver: str
    tire_type: int = 0
    tire_size: int = 0
    monster: int = 0
    speed: int = 0
    speed_kmh: int = 0
    res_bomb: int = 0
    res_stone: int = 0
    res_liquid: int = 0
    sprite: str = ""
    progress: float = field(default=0.0, compare=False, repr=False)
    race_time_ms: int | None = field(default=None, compare=False, repr=False)

    def apply_preset(self, preset: Preset) -> None:
        """Copy the mechanical data of ``preset`` onto this vehicle."""
        self.tire_type = preset.tire_type
        self.tire_size = preset.tire_size
        self.monster = preset.monster
        self.speed = preset.speed
        self.speed_kmh = preset.speed_kmh
        self.res_bomb = preset.res_bomb
        self.res_stone = preset.res_stone
        self.res_liquid = preset.res_liquid

    def is_valid(self) -> bool:
        """Return True if the vehicle's data form an allowed configuration."""
        return validate_vehicle(self.tire_type, self.tire_size, self.monster, self.speed) and (
            validate_resistances_monster(
                self.monster, self.res_bomb, self.res_stone, self.res_liquid, self.speed_kmh
            )
            or validate_resistances_regular(
                self.speed, self.monster, self.res_bomb, self.res_stone,
                self.res_liquid, self.speed_kmh,
            )
        )

    def describe(self) -> str:
        """Return the multi-line description shown for a single vehicle."""
        size = _label(TireSize, self.tire_size)
        if self.monster != 0:
            size = f"{size} {self.monster}"
        return (
            f"nombre en espanol:[{self.name_es}]\n"
            f"nombre en ingles:[{self.name_en}]\n"
            f"nombre del conductor:[{self.driver}]\n"
            f"tipo de caucho:[{_label(TireType, self.tire_type)}]\n"
            f"tamano de caucho:[{size}]\n"
            f"velocidad del vehiculo:[{_label(Speed, self.speed)}]\n"
            f"como se ve el vehiculo: [{self.sprite}]\n"
        )

    def to_line(self) -> str:
        """Serialise to the slash-separated line used in vehicle files."""
        fields = (
            self.name_es, self.name_en, self.driver,
            self.tire_type, self.tire_size, self.monster, self.speed, self.speed_kmh,
            self.res_bomb, self.res_stone, self.res_liquid, self.sprite,
        )
        return "/".join(str(value) for value in fields)

    @classmethod
    def from_line(cls, line: str) -> "Vehicle":
        """Parse a slash-separated vehicle line; raise ValueError if malformed."""
        parts = line.rstrip("\r\n").split("/", 11)
        if len(parts) != 12:
            raise ValueError(f"expected 12 fields separated by '/': {line!r}")
        name_es, name_en, driver, *numbers, sprite = parts
        try:
            values = [int(number) for number in numbers]
        except ValueError as exc:
            raise ValueError(f"bad numeric field in vehicle line: {line!r}") from exc
        return cls(name_es, name_en, driver, *values, sprite=sprite)


class Garage:
    """Ordered collection of competitors; new vehicles go to the front."""

    def __init__(self, vehicles: Iterable[Vehicle] = ()):
        self._vehicles = list(vehicles)

    def __len__(self) -> int:
        return len(self._vehicles)

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(self._vehicles)

    def add(self, vehicle: Vehicle) -> None:
        """Insert ``vehicle`` at the front of the garage."""
        self._vehicles.insert(0, vehicle)

    def remove(self, vehicle: Vehicle) -> None:
        """Remove this exact vehicle; raise ValueError if it is not here."""
        for index, held in enumerate(self._vehicles):
            if held is vehicle:
                del self._vehicles[index]
                return
        raise ValueError("vehicle is not in the garage")

    def search(self, query: str) -> list[Vehicle]:
        """Return vehicles whose Spanish or English name contains ``query``."""
        return [v for v in self._vehicles if query in v.name_es or query in v.name_en]

    def invalid_vehicles(self) -> list[Vehicle]:
        return [v for v in self._vehicles if not v.is_valid()]

    def at(self, position: int) -> Vehicle:
        """Return the vehicle at 1-based ``position``."""
        if not 1 <= position <= len(self._vehicles):
            raise IndexError(f"no vehicle at position {position}")
        return self._vehicles[position - 1]

    def simple_listing(self) -> str:
        """Return a numbered list of names and drivers, or 'NULL' when empty."""
        if not self._vehicles:
            return "NULL"
        return "\n".join(
            f"{number}. {v.name_es} conducido por {v.driver}"
            for number, v in enumerate(self._vehicles, start=1)
        )

    @classmethod
    def load(cls, path) -> "Garage":
        """Read vehicles from ``path``; a missing file gives an empty garage."""
        path = Path(path)
        if not path.exists():
            return cls()
        with path.open(encoding="utf-8") as handle:
            return cls(Vehicle.from_line(line) for line in handle if line.strip())

    def save(self, path) -> None:
        """Write every vehicle to ``path``, one line each."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            for vehicle in self._vehicles:
                handle.write(vehicle.to_line() + "\n")