import pytest

from autoslocos.track import (
    Obstacle,
    Standing,
    Track,
    format_standings,
    save_standings,
)
from autoslocos.vehicles import Vehicle, preset


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        assert stop == 40
        return self.value


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        self.now += 0.1
        return self.now


def make_vehicle(name, preset_number, sprite="@"):
    vehicle = Vehicle(name, name + " en", "Piloto " + name, sprite=sprite)
    vehicle.apply_preset(preset(preset_number))
    return vehicle


def test_add_lane_places_vehicle_on_first_kilometre():
    track = Track("Circuito")
    lane = track.add_lane(make_vehicle("Rayo", 8))
    assert len(lane.kilometers) == 80
    assert [km.ordinal for km in lane.kilometers] == list(range(80))
    assert lane.kilometers[0].vehicle_present
    assert not any(km.vehicle_present for km in lane.kilometers[1:])
    assert not lane.arrived()


def test_invalid_length_rejected():
    with pytest.raises(ValueError):
        Track("x", 0)


def test_render_without_obstacles():
    track = Track("Circuito", 5)
    track.add_lane(make_vehicle("Rayo", 8, sprite="@"))
    assert track.render() == "Carril Rayo\n@----\n"


def test_obstacle_symbols():
    assert [o.symbol for o in Obstacle] == ["-", "¤", "¶", "#"]
    track = Track("Circuito", 5)
    lane = track.add_lane(make_vehicle("Rayo", 8, sprite="@"))
    for km, obstacle in zip(lane.kilometers[1:], Obstacle):
        km.obstacle = obstacle
    assert track.render() == "Carril Rayo\n@-¤¶#\n"


def test_bombs_limited_to_one_per_lane():
    track = Track("x", 10)
    track.add_lane(make_vehicle("A", 8))
    track.add_lane(make_vehicle("B", 9))
    track.generate_obstacles(FixedRng(1))
    for lane in track.lanes:
        obstacles = [km.obstacle for km in lane.kilometers]
        assert obstacles.count(Obstacle.BOMB) == 1
        assert obstacles[0] is Obstacle.BOMB
        assert obstacles.count(Obstacle.NONE) == 9


def test_stones_limited_to_one_per_lane():
    track = Track("x", 10)
    track.add_lane(make_vehicle("A", 8))
    track.add_lane(make_vehicle("B", 9))
    track.generate_obstacles(FixedRng(2))
    for lane in track.lanes:
        assert [km.obstacle for km in lane.kilometers].count(Obstacle.STONE) == 1


def test_liquid_appears_once_on_whole_track():
    track = Track("x", 10)
    track.add_lane(make_vehicle("A", 8))
    track.add_lane(make_vehicle("B", 9))
    track.generate_obstacles(FixedRng(3))
    total = sum(
        km.obstacle is Obstacle.LIQUID for lane in track.lanes for km in lane.kilometers
    )
    assert total == 1
    assert track.lanes[0].kilometers[0].obstacle is Obstacle.LIQUID


def test_high_roll_means_no_obstacle():
    track = Track("x", 10)
    track.add_lane(make_vehicle("A", 8))
    track.generate_obstacles(FixedRng(39))
    assert not any(km.obstacle_present for km in track.lanes[0].kilometers)


def test_can_move_spends_progress_on_clear_kilometre():
    track = Track("x")
    lane = track.add_lane(make_vehicle("A", 8))
    lane.vehicle.progress = 0.5
    assert track.can_move(lane)
    assert lane.vehicle.progress == pytest.approx(0.0)


def test_can_move_refuses_when_obstacle_costs_too_much():
    track = Track("x")
    lane = track.add_lane(make_vehicle("A", 8))
    lane.kilometers[0].obstacle = Obstacle.BOMB
    lane.vehicle.progress = 1.0
    assert not track.can_move(lane)
    assert lane.vehicle.progress == 1.0
    clear_cost = track.length / lane.vehicle.speed_kmh
    lane.vehicle.progress = 10.0
    assert track.can_move(lane)
    assert lane.vehicle.progress < 10.0 - clear_cost


def test_first_tick_does_not_move():
    track = Track("x")
    lane = track.add_lane(make_vehicle("A", 9))
    track.start(0.0)
    track.advance(0.1)
    assert lane.position == 0
    assert lane.vehicle.progress == pytest.approx(0.2)


def test_moving_updates_vehicle_flags():
    track = Track("x")
    lane = track.add_lane(make_vehicle("A", 9))
    track.start(0.0)
    lane.vehicle.progress = 1.0
    track.advance_lane(lane, 0.1)
    assert lane.position >= 1
    assert lane.location.vehicle_present
    assert sum(km.vehicle_present for km in lane.kilometers) == 1


def test_finishing_records_race_time():
    track = Track("x", 3)
    lane = track.add_lane(make_vehicle("A", 9))
    track.start(10.0)
    lane.vehicle.progress = 5.0
    track.advance_lane(lane, 12.5)
    assert lane.arrived()
    assert lane.finished
    assert lane.vehicle.race_time_ms == 2500
    assert track.finished


def test_run_finishes_every_lane_and_sorts_standings():
    track = Track("Circuito")
    track.add_lane(make_vehicle("Lento", 5, sprite="$"))
    track.add_lane(make_vehicle("Rapido", 9, sprite="@"))
    frames = []
    track.run(clock=FakeClock(), sleep=lambda delay: None, on_frame=frames.append)
    assert track.all_arrived()
    assert frames
    assert frames[0].startswith("Carril Lento\n$")
    rows = track.standings()
    assert [row.name_es for row in rows] == ["Rapido", "Lento"]
    times = [row.race_time_ms for row in rows]
    assert times == sorted(times)


def test_run_without_lanes_raises():
    with pytest.raises(ValueError):
        Track("x").run(clock=FakeClock(), sleep=lambda delay: None)


def test_standings_without_lanes_raises():
    with pytest.raises(ValueError):
        Track("x").standings()


def test_unfinished_vehicles_come_last():
    track = Track("x", 3)
    track.add_lane(make_vehicle("Sin", 9))
    done = track.add_lane(make_vehicle("Con", 9))
    done.vehicle.race_time_ms = 1200
    rows = track.standings()
    assert [row.name_es for row in rows] == ["Con", "Sin"]
    assert rows[1].race_time_ms is None


def test_format_standings():
    row = Standing("Rayo", "Ray", "Ana", 3, 3, 180, "@", 1500)
    assert format_standings([row]) == (
        "Nombre: Rayo\n"
        "Nombre en ingles: Ray\n"
        "Conductor: Ana\n"
        "Tipo de caucho: 3\n"
        "Tamano de caucho: 3\n"
        "Velocidad: 180\n"
        "Vehiculo en pantalla: @\n"
        "Duracion en pista: 1500\n\n"
    )


def test_save_standings(tmp_path):
    rows = [
        Standing("Rayo", "Ray", "Ana", 3, 3, 180, "@", 1500),
        Standing("Roca", "Rock", "Luis", 1, 1, 80, "$", 4000),
    ]
    path = tmp_path / "out" / "tabla.txt"
    save_standings(rows, path)
    assert path.read_text(encoding="utf-8") == (
        "1. Rayo/Ray/Ana/1500\n2. Roca/Rock/Luis/4000\n"
    )