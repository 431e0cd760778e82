"""Interactive screens for listing, adding, consulting, editing and deleting vehicles."""

from __future__ import annotations

from dataclasses import replace

from autoslocos.inputs import INVALID_OPTION, Console, is_integer
from autoslocos.vehicles import (
    PRESETS,
    SPRITES,
    UNKNOWN_LABEL,
    Garage,
    Speed,
    TireSize,
    TireType,
    Vehicle,
    preset,
    sprite_for,
)

SEARCH_PROMPT = "Ingrese el nombre del vehiculo en español o en ingles: "
NOT_FOUND = "No se encontró ningún vehículo que coincida con la búsqueda.\n"
INVALID_SELECTION = "Selección inválida.\n"

_TABLE_ROWS = (
    ("1. Perezoso ", "Todo Terreno ", "Monster Truck 1 ", "140"),
    ("2. Perezoso ", "Todo Terreno ", "Monster Truck 2 ", "120"),
    ("3. Perezoso ", "Todo Terreno ", "Monster Truck 3 ", "110"),
    ("4. Perezoso ", "Todo Terreno ", "Monster Truck 4 ", "100"),
    ("5. Perezoso ", "Todo Terreno ", "Monster Truck 5 ", "80"),
    ("6. Perezoso ", "Normales ", "Normales ", "120"),
    ("7. Crucero ", "Normales ", "Normales ", "140"),
    ("8. super ferrari ", "Anti Coleo ", "Pegado al piso ", "160"),
    ("9. Delorean ", "Anti Coleo ", "Pegado al piso ", "180"),
)


def _label(enum_cls, value: int) -> str:
    try:
        return enum_cls(value).label
    except ValueError:
        return UNKNOWN_LABEL


def sprite_menu() -> str:
    """Return the menu listing the characters a vehicle can be drawn with."""
    lines = ["Ingrese como se ve el vehiculo en pantalla: \n"]
    for number, sprite in enumerate(SPRITES, start=1):
        lines.append(f"{str(number).ljust(2)} =  {sprite}\n")
    lines.append("opcion : ")
    return "".join(lines)


def new_vehicle_table() -> str:
    """Return the table of the preset vehicle configurations."""
    header = (
        "\n"
        + "Velocidad ".ljust(17)
        + "Tipo Caucho ".ljust(13)
        + "Tamano Caucho".ljust(16)
        + "Velocidad km/h".ljust(13)
        + "\n"
    )
    rows = []
    last = len(_TABLE_ROWS) - 1
    for index, (speed, tire_type, tire_size, kmh) in enumerate(_TABLE_ROWS):
        ending = "\n\n" if index == last else "\n"
        rows.append(
            speed.ljust(17) + tire_type.ljust(13) + tire_size.ljust(16)
            + (kmh + ending if index == last else kmh.ljust(5) + ending)
        )
    return header + "".join(rows)


def _framed(vehicle: Vehicle) -> str:
    return "\n\n\n" + vehicle.describe() + "\n\n\n"


def show_all(garage: Garage, console: Console) -> None:
    """Write the full description of every vehicle, or 'NULL' when there are none."""
    console.write("\n\n\n")
    for vehicle in garage:
        console.write(_framed(vehicle))
        console.write("\n\n\n")
    if len(garage) == 0:
        console.write("NULL\n\n")


def choose_vehicle(garage: Garage, console: Console, query: str) -> Vehicle | None:
    """Find the vehicle matching ``query``, asking for the driver when several match."""
    matches = garage.search(query)
    if not matches:
        console.write(NOT_FOUND)
        return None
    if len(matches) == 1:
        return matches[0]
    console.write(
        "Se encontraron varios vehículos con ese nombre. Por favor seleccione el "
        "conductor del vehículo que desea buscar:\n"
    )
    for number, vehicle in enumerate(matches, start=1):
        console.write(f"{number}. {vehicle.driver}\n")
    console.write(
        "Coloque el numero que acompana al piloto que desea ver la informacion de su vehiculo\n"
    )
    selection = console.ask_int("opcion: ")
    if not 1 <= selection <= len(matches):
        console.write(INVALID_SELECTION)
        return None
    return matches[selection - 1]


def _ask_query(console: Console) -> str:
    console.write(SEARCH_PROMPT)
    return console.read_line()


def consult_vehicle(garage: Garage, console: Console) -> Vehicle | None:
    """Ask for a name and show the matching vehicle."""
    vehicle = choose_vehicle(garage, console, _ask_query(console))
    if vehicle is None:
        return None
    console.write(_framed(vehicle) + "\n")
    console.pause()
    return vehicle


def delete_vehicle(garage: Garage, console: Console) -> Vehicle | None:
    """Ask for a name and remove the matching vehicle from the garage."""
    vehicle = choose_vehicle(garage, console, _ask_query(console))
    if vehicle is None:
        return None
    at_head = next(iter(garage)) is vehicle
    garage.remove(vehicle)
    if at_head:
        console.write("el elemento a eliminar estaba en la primera casilla\n")
    else:
        console.write("el elemento a eliminar estaba por la tListaVehiculos\n")
    console.write("el elemento fue eliminado exitosamente\n")
    console.pause()
    return vehicle


def _ask_sprite(console: Console) -> int:
    while True:
        console.write(sprite_menu())
        answer = console.read_line()
        while not is_integer(answer):
            answer = console.read_line()
        choice = int(answer)
        if 1 <= choice <= len(SPRITES):
            return choice


def _ask_preset(console: Console) -> int:
    while True:
        console.write(new_vehicle_table())
        choice = console.ask_int("\n Elija como quiere su vehiculo:")
        in_range = 1 <= choice <= len(PRESETS)
        if not in_range:
            console.write(INVALID_OPTION)
        console.write(f"Opcion: {choice}\n")
        if in_range:
            return choice


def _ask_yes_no(console: Console, header: str) -> bool:
    while True:
        console.write(header)
        answer = console.ask_int("\n opcion :")
        if answer in (1, 2):
            return answer == 1


def _edit_screen(draft: Vehicle) -> str:
    size = _label(TireSize, draft.tire_size)
    if draft.monster != 0:
        size = f"{size} {draft.monster}"
    return (
        "\n\ndatos del vehiculo\n\n"
        f"1.  nombre en espanol:[{draft.name_es}]\n"
        f"2.  nombre en ingles:[{draft.name_en}]\n"
        f"3.  nombre del conductor:[{draft.driver}]\n"
        f"4.  como se ve el vehiculo:[{draft.sprite}]\n"
        "5.  Datos del vehiculo:\n"
        f"\t\t tipo de caucho:[{_label(TireType, draft.tire_type)}]\n"
        f"\t\t tamano de caucho:[{size}]\n"
        f"\t\t velocidad del vehiculo:[{_label(Speed, draft.speed)}]\n"
        f"\t\t velocidad del vehiculo por kilometro:[{draft.speed_kmh}]\n"
        "6. ninguno \n\n"
        "\n\n que elementos deseas modificar?\n\n"
    )


def edit_vehicle(vehicle: Vehicle, console: Console) -> None:
    """Let the user change fields of ``vehicle`` until they choose to stop."""
    draft = replace(vehicle)
    while True:
        console.write(_edit_screen(draft))
        while True:
            choice = console.ask_int("elija su opcion: ")
            in_range = 1 <= choice <= 6
            if not in_range:
                console.write(INVALID_OPTION)
            console.write(f"Opcion: {choice}\n")
            if in_range:
                break
        if choice == 1:
            console.write(f"Nombre en español: {draft.name_es}\nEscribe nuevo nombre:")
            draft.name_es = console.read_line()
        elif choice == 2:
            console.write(f"Nombre en ingles: {draft.name_en}\nEscribe nuevo nombre:")
            draft.name_en = console.read_line()
        elif choice == 3:
            console.write(f"Conductor: {draft.driver}\nescribe nuevo nombre de conductor")
            draft.driver = console.read_line()
        elif choice == 4:
            console.write("\n\tnuevo\t\n")
            draft.sprite = sprite_for(_ask_sprite(console))
        elif choice == 5:
            draft.apply_preset(preset(_ask_preset(console)))
        else:
            console.write("\n\nNo se modifico ningun dato \n\n")
        if not _ask_yes_no(
            console, "Desea seguir modificando datos del vehiculo? \n1. Si 2. No"
        ):
            break
    vehicle.name_es = draft.name_es
    vehicle.name_en = draft.name_en
    vehicle.driver = draft.driver
    vehicle.sprite = draft.sprite
    vehicle.apply_preset(
        preset_from(draft)
    )
    console.write("\n\n vehiculo modificado con exito \n\n")


def preset_from(vehicle: Vehicle):
    """Return the mechanical data of ``vehicle`` as a preset record."""
    return type(PRESETS[0])(
        vehicle.tire_type, vehicle.tire_size, vehicle.monster, vehicle.speed,
        vehicle.speed_kmh, vehicle.res_bomb, vehicle.res_stone, vehicle.res_liquid,
    )


def modify_vehicle(garage: Garage, console: Console) -> Vehicle | None:
    """Ask for a name and edit the matching vehicle."""
    vehicle = choose_vehicle(garage, console, _ask_query(console))
    if vehicle is None:
        return None
    edit_vehicle(vehicle, console)
    console.pause()
    return vehicle


def request_new_vehicle(garage: Garage, console: Console) -> Vehicle:
    """Ask for the data of a new vehicle and add it to the front of the garage."""
    console.write("\nIngrese el nombre del vehiculo en español: ")
    name_es = console.read_line()
    console.write("\nIngrese el nombre del vehiculo en ingles: ")
    name_en = console.read_line()
    console.write("\nIngrese el nombre del conductor: ")
    driver = console.read_line()
    sprite = sprite_for(_ask_sprite(console))
    chosen = preset(_ask_preset(console))
    vehicle = Vehicle(name_es, name_en, driver, sprite=sprite)
    vehicle.apply_preset(chosen)
    garage.add(vehicle)
    console.write("\n Los datos agregados fueron: \n")
    console.write(_framed(vehicle))
    console.write("\n Desea cambiar algo?\n")
    if _ask_yes_no(console, "\n 1. Si 2. No\n"):
        edit_vehicle(vehicle, console)
    console.write("\n todo se agrego correctamente \n")
    return vehicle