import pytest

from dungeonrun.entity import Entity
from dungeonrun.level import LevelManager
from dungeonrun.projectiles import Arrow, Bone


class _Hero(Entity):
    is_player = True


def _walled_level():
    return LevelManager(["b   ", "    ", "    ", "    "])


def test_arrow_waits_before_colliding_then_moves():
    shooter = Entity(0, 0, 32, 32)
    arrow = Arrow((0, 0), (10, 0), 100, 5, shooter, None)
    assert not arrow.can_collide
    arrow.update(0.1)
    assert arrow.can_collide
    assert arrow.x == pytest.approx(100 * 0.1)
    assert arrow.y == 0
    assert arrow.owner is shooter


def test_arrow_rotation_points_along_flight():
    arrow = Arrow((0, 0), (10, 0), 100, 5, None, None)
    assert arrow.rotation == pytest.approx(90)
    up = Arrow((0, 0), (0, -10), 100, 5, None, None)
    assert up.rotation == pytest.approx(0)


def test_arrow_with_same_target_has_no_velocity():
    arrow = Arrow((5, 5), (5, 5), 100, 5, None, None)
    assert arrow.velocity == (0, 0)


def test_arrow_explodes_after_max_distance():
    arrow = Arrow((0, 0), (1, 0), 1000, 5, None, None)
    arrow.update(0.2)
    assert arrow.life
    arrow.update(0.3)
    assert not arrow.life
    x = arrow.x
    arrow.update(1.0)
    assert arrow.x == x


def test_arrow_hits_target_but_not_owner():
    shooter = Entity(0, 0, 32, 32)
    target = Entity(20, 0, 32, 32)
    arrow = Arrow((10, 0), (20, 0), 100, 7.9, shooter, None)
    arrow.on_collision(shooter)
    assert arrow.life
    assert shooter.hp == 100
    start = target.hp
    arrow.on_collision(target)
    assert target.hp == start - 7
    assert not arrow.life


def test_arrow_check_collision_needs_overlap():
    arrow = Arrow((0, 0), (1, 0), 100, 5, None, None)
    assert arrow.check_collision(Entity(10, 0, 32, 32))
    assert not arrow.check_collision(Entity(200, 0, 32, 32))


def test_player_arrow_explodes_in_wall():
    hero = _Hero(100, 100, 32, 32)
    arrow = Arrow((16, 16), (100, 16), 10, 5, hero, _walled_level())
    arrow.update(0.2)
    assert not arrow.life


def test_monster_arrow_ignores_walls():
    shooter = Entity(100, 100, 32, 32)
    arrow = Arrow((16, 16), (100, 16), 10, 5, shooter, _walled_level())
    arrow.update(0.2)
    assert arrow.life


def test_out_of_screen():
    arrow = Arrow((50, 50), (60, 50), 100, 5, None, None)
    assert not arrow.is_out_of_screen(100, 100)
    assert arrow.is_out_of_screen(40, 100)
    arrow.x = -1
    assert arrow.is_out_of_screen(100, 100)


def test_bone_only_hurts_player_after_spawn_delay():
    skeleton = Entity(0, 0, 32, 32)
    hero = _Hero(20, 0, 32, 32)
    other = Entity(20, 0, 32, 32)
    bone = Bone((0, 0), (20, 0), 100, 15, skeleton, None)
    bone.on_collision(hero)
    assert hero.hp == 100
    bone.update(0.1)
    bone.on_collision(other)
    assert other.hp == 100 and bone.life
    bone.on_collision(hero)
    assert hero.hp == 100 - 15
    assert not bone.life


def test_bone_check_collision_only_with_player():
    bone = Bone((0, 0), (20, 0), 100, 15, None, None)
    assert not bone.check_collision(Entity(5, 0, 32, 32))
    assert bone.check_collision(_Hero(5, 0, 32, 32))
    assert not bone.check_collision(_Hero(300, 0, 32, 32))


def test_bone_spins_while_flying():
    bone = Bone((0, 0), (10, 0), 100, 15, None, None)
    before = bone.rotation
    bone.update(0.05)
    assert bone.rotation == pytest.approx(before + bone.rotation_speed * 0.05)


def test_bone_explodes_in_wall_whatever_the_owner():
    bone = Bone((16, 16), (100, 16), 10, 15, Entity(0, 0, 32, 32), _walled_level())
    bone.update(0.2)
    assert not bone.life


def test_bone_range_longer_than_arrow():
    assert Bone.max_distance > Arrow.max_distance
    bone = Bone((0, 0), (1, 0), 1000, 15, None, None)
    bone.update(0.42)
    assert bone.life
    bone.update(0.1)
    assert not bone.life