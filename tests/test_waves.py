import pytest

from dungeonrun.monster import Monster, MonsterFactory
from dungeonrun.player import Player
from dungeonrun.slime import Slime
from dungeonrun.waves import WaveManager, default_factory


def _plain_factory(calls=None):
    factory = MonsterFactory()

    def create(x, y, w, h, path, player, level):
        if calls is not None:
            calls.append((x, y, w, h, path))
        return Monster(x, y, w, h, path, player, level)

    factory.register("SLIME", create)
    return factory


def _write_wave(directory, room, number, lines):
    (directory / f"{room}_{number}.waves").write_text("\n".join(lines) + "\n")


@pytest.fixture
def player():
    return Player(500, 500, 32, 32)


def test_load_stops_at_first_missing_file(tmp_path):
    _write_wave(tmp_path, "room", 1, ["{1, 1}, slime"])
    _write_wave(tmp_path, "room", 2, ["{2, 2}, slime", "{3, 3}, slime"])
    _write_wave(tmp_path, "room", 4, ["{4, 4}, slime"])
    manager = WaveManager(_plain_factory(), tmp_path)
    manager.load_room_waves("room")
    assert manager.total_waves == 2
    assert len(manager.waves[1]) == 2
    assert manager.current_wave_index == 0


def test_spawn_uses_tile_coordinates_and_texture(tmp_path, player):
    calls = []
    _write_wave(tmp_path, "room", 1, ["{2, 3}, slime"])
    manager = WaveManager(_plain_factory(calls), tmp_path)
    manager.load_room_waves("room")
    manager.spawn_next_wave(player)
    assert calls == [(64.0, 96.0, 32.0, 32.0, "image/slime.png")]
    assert len(manager.monsters) == 1
    assert manager.current_wave_index == 1


def test_unknown_monster_type_is_skipped(tmp_path, player):
    _write_wave(tmp_path, "room", 1, ["{1, 1}, dragon", "{2, 2}, slime"])
    manager = WaveManager(_plain_factory(), tmp_path)
    manager.load_room_waves("room")
    manager.spawn_next_wave(player)
    assert len(manager.monsters) == 1
    assert manager.monsters[0].position() == (64.0, 64.0)


def test_spawn_past_last_wave_changes_nothing(tmp_path, player):
    manager = WaveManager(_plain_factory(), tmp_path)
    manager.load_room_waves("empty")
    manager.spawn_next_wave(player)
    assert manager.current_wave_index == 0
    assert manager.monsters == []
    assert manager.are_all_waves_done()


def test_wave_cleared_when_monsters_dead(tmp_path, player):
    _write_wave(tmp_path, "room", 1, ["{1, 1}, slime"])
    manager = WaveManager(_plain_factory(), tmp_path)
    manager.load_room_waves("room")
    manager.spawn_next_wave(player)
    assert not manager.is_wave_cleared()
    manager.monsters[0].life = False
    assert manager.is_wave_cleared()
    assert not manager.are_all_waves_done()
    manager.update(0.01)
    assert manager.monsters == []
    assert manager.are_all_waves_done()


def test_first_wave_starts_immediately(tmp_path, player):
    _write_wave(tmp_path, "room", 1, ["{1, 1}, slime"])
    manager = WaveManager(_plain_factory(), tmp_path)
    manager.load_room_waves("room")
    manager.start_next_wave(player)
    assert not manager.is_waiting()
    assert len(manager.monsters) == 1


def test_later_wave_waits_for_delay(tmp_path, player):
    _write_wave(tmp_path, "room", 1, ["{1, 1}, slime"])
    _write_wave(tmp_path, "room", 2, ["{2, 2}, slime", "{3, 3}, slime"])
    manager = WaveManager(_plain_factory(), tmp_path)
    manager.load_room_waves("room")
    manager.spawn_next_wave(player)
    manager.monsters[0].life = False
    manager.start_next_wave(player)
    assert manager.is_waiting()
    assert manager.remaining_delay == WaveManager.WAVE_DELAY
    manager.update(4.0)
    assert manager.is_waiting()
    assert manager.monsters == []
    manager.update(1.5)
    assert not manager.is_waiting()
    assert len(manager.monsters) == 2
    assert manager.current_wave_index == 2


def test_start_next_wave_after_last_does_not_wait(tmp_path, player):
    _write_wave(tmp_path, "room", 1, ["{1, 1}, slime"])
    manager = WaveManager(_plain_factory(), tmp_path)
    manager.load_room_waves("room")
    manager.spawn_next_wave(player)
    manager.start_next_wave(player)
    assert not manager.is_waiting()


def test_default_factory_builds_known_monsters(player):
    factory = default_factory()
    for name in ("SLIME", "GHOST", "SKELETON"):
        assert name in factory
    slime = factory.create("SLIME", 32.0, 32.0, 32.0, 32.0, "image/slime.png", player, None)
    assert isinstance(slime, Slime)
    assert factory.create("slime", 0, 0, 32, 32, "", player, None) is None