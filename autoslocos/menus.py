"""Main menus of the racing game and the command that starts it."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import replace
from pathlib import Path

from autoslocos.inputs import Console
from autoslocos.track import Standing, Track, format_standings, save_standings
from autoslocos.vehicle_console import (
    consult_vehicle,
    delete_vehicle,
    modify_vehicle,
    request_new_vehicle,
    show_all,
)
from autoslocos.vehicles import Garage

DEFAULT_VEHICLES_FILE = "VehiculosDefault.txt"
VEHICLES_FILE = "vehiculos.txt"
STANDINGS_FILE = "tablaDePosiciones.txt"
DEFAULT_DATA_DIR = "archivos"

OPTION_PROMPT = "Ingrese una opcion: "
INVALID_MENU_OPTION = "Opcion invalida. Por favor, seleccione una opcion valida.\n"
LEAVING = "Saliendo.\n"

_MAIN_MENU = (
    "Bienvenido al juego de Autos Locos. Apuesta por tu carro favorito\n"
    "\n\n 1. Gestion de vehiculos\n"
    " 2. Juego principal y gestion de pistas\n"
    " 0. Salir\n"
    "\n Nota: Si entra al juego sin pasar por gestion de vehiculos, "
    "se cargaran los vehiculos por defecto.\n"
)

_VEHICLE_MENU = (
    "1. Agregar vehiculo\n"
    "2. Modificar vehiculo\n"
    "3. Eliminar vehiculo\n"
    "4. Consultar vehiculo\n"
    "5. Mostrar todos los vehiculos\n"
    "0. Salir\n"
)

_TRACK_MENU = (
    "\n 1. Ingresar datos para generar la pista"
    "\n 2. Generar pista aleatoria"
    "\n 0. regresar\n"
)

_RACE_MENU = "\n 1. Mostrar pista\n 2. iniciar carrera\n 0. regresar\n"

_STANDINGS_QUESTION = "Quieres ver y guardar la tabla de posiciones?\n0. No\n1. Si\n"


class RaceApp:
    """The interactive game: vehicle management, track building and races."""

    def __init__(self, garage: Garage, console: Console | None = None,
                 data_dir=DEFAULT_DATA_DIR, rng: random.Random | None = None):
        self.garage = garage
        self.console = console if console is not None else Console()
        self.data_dir = Path(data_dir)
        self.rng = rng if rng is not None else random.Random()
        self.clock = time.monotonic
        self.sleep = time.sleep

    @property
    def vehicles_path(self) -> Path:
        return self.data_dir / VEHICLES_FILE

    @property
    def standings_path(self) -> Path:
        return self.data_dir / STANDINGS_FILE

    def _ask_option(self, pause: bool = True) -> int:
        option = self.console.ask_int(OPTION_PROMPT)
        self.console.clear()
        self.console.write(f"\n la opcion fue: {option}\n")
        if pause:
            self.console.pause()
        return option

    def _warn_invalid(self) -> None:
        invalid = self.garage.invalid_vehicles()
        for vehicle in invalid:
            self.console.write(f"El vehiculo: {vehicle.name_es} no es valido\n")
        if invalid:
            self.console.write("\n Por favor modificar los vehiculos mencionados \n\n")

    def _save_garage(self) -> None:
        self.garage.save(self.vehicles_path)

    def run(self) -> None:
        """Show the main menu until the user leaves."""
        while True:
            self.console.write(_MAIN_MENU)
            self._warn_invalid()
            option = self._ask_option()
            if option == 1:
                self.vehicle_management()
            elif option == 2:
                self.track_menu()
            elif option == 0:
                self.console.write(LEAVING)
                for vehicle in list(self.garage):
                    self.garage.remove(vehicle)
                self.console.write("la tListaVehiculos fue eliminada exitosamente\n")
                return
            else:
                self.console.write(INVALID_MENU_OPTION)

    def vehicle_management(self) -> None:
        """Menu to add, modify, delete, consult and list vehicles."""
        while True:
            self.console.write(_VEHICLE_MENU)
            self._warn_invalid()
            option = self._ask_option(pause=False)
            if option == 1:
                request_new_vehicle(self.garage, self.console)
                self._save_garage()
            elif option == 2:
                modify_vehicle(self.garage, self.console)
                self._save_garage()
            elif option == 3:
                delete_vehicle(self.garage, self.console)
                self._save_garage()
            elif option == 4:
                consult_vehicle(self.garage, self.console)
            elif option == 5:
                show_all(self.garage, self.console)
            elif option == 0:
                self.console.write(LEAVING)
                self.console.pause()
                return
            else:
                self.console.write(INVALID_MENU_OPTION)

    def track_menu(self) -> None:
        """Menu to build a track by hand or at random and then race on it."""
        while True:
            self.console.clear()
            self.console.write(_TRACK_MENU)
            option = self._ask_option()
            if option in (1, 2):
                try:
                    track = self.build_track(random_lanes=option == 2)
                except ValueError as exc:
                    self.console.write(f"{exc}\n")
                    continue
                self.race_menu(track)
                return
            if option == 0:
                self.console.write(LEAVING)
                return
            self.console.write(INVALID_MENU_OPTION)

    def build_track(self, random_lanes: bool) -> Track:
        """Ask for the track's name and lanes and return it with obstacles placed."""
        if len(self.garage) == 0:
            raise ValueError("No hay vehiculos para generar la pista")
        self.console.write("Ingrese el nombre de la pista: ")
        words = self.console.read_line().split()
        track = Track(words[0] if words else "")
        while True:
            lanes = self.console.ask_int("Ingrese la cantidad de carriles: ")
            if lanes >= 1:
                break
        for lane_number in range(lanes):
            if random_lanes:
                position = self.rng.randrange(len(self.garage)) + 1
            else:
                self.console.write("\n\n\n\t\t" + self.garage.simple_listing() + "\n\n\t")
                position = self.console.ask_int_in_range(
                    f"Selecciona el vehiculo para el carril {lane_number}"
                    "(ingrese el numero a un lado): ",
                    1,
                    len(self.garage),
                )
            racer = replace(self.garage.at(position), progress=0.0, race_time_ms=None)
            track.add_lane(racer)
        track.generate_obstacles(self.rng)
        return track

    def _show_frame(self, frame: str) -> None:
        self.console.write(frame)
        self.console.clear()

    def race_menu(self, track: Track) -> list[Standing] | None:
        """Show or race ``track``; return the standings if they were saved."""
        while True:
            self.console.clear()
            self.console.write(_RACE_MENU)
            option = self._ask_option()
            if option == 1:
                self.console.write(track.render())
                self.console.pause()
            elif option == 2:
                track.run(clock=self.clock, sleep=self.sleep, on_frame=self._show_frame)
                self.console.write("\n\nLa carrera ha finalizado.\n")
                self.console.pause()
                self.console.clear()
                return self._offer_standings(track)
            elif option == 0:
                self.console.write(LEAVING)
                return None
            else:
                self.console.write(INVALID_MENU_OPTION)

    def _offer_standings(self, track: Track) -> list[Standing] | None:
        while True:
            self.console.write(_STANDINGS_QUESTION)
            option = self._ask_option()
            if option == 1:
                standings = track.standings()
                self.console.write(format_standings(standings))
                self.console.pause()
                save_standings(standings, self.standings_path)
                return standings
            if option == 0:
                return None
            self.console.write(INVALID_MENU_OPTION)


def main(argv=None) -> int:
    """Load the default vehicles and start the game."""
    parser = argparse.ArgumentParser(prog="autoslocos", description="Autos Locos racing game")
    parser.add_argument(
        "--data-dir",
        default=DEFAULT_DATA_DIR,
        help="directory holding the vehicle and standings files",
    )
    args = parser.parse_args(argv)
    data_dir = Path(args.data_dir)
    garage = Garage.load(data_dir / DEFAULT_VEHICLES_FILE)
    garage.save(data_dir / VEHICLES_FILE)
    console = Console()
    app = RaceApp(garage, console, data_dir, random.Random())
    try:
        app.run()
        console.write("\n\n")
        console.pause()
    except EOFError:
        console.write("\n")
    return 0