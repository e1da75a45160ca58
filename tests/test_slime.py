import random

import pytest

from dungeonrun.player import Player
from dungeonrun.slime import ATTACK_ORIGINS, SLIME_FRAMES, Slime


def make_pair(player_x, player_y=100.0):
    player = Player(player_x, player_y, 32, 32, "", None)
    slime = Slime(100.0, 100.0, 32, 32, "image/slime.png", player, None, rng=random.Random(3))
    return player, slime


@pytest.mark.parametrize(
    "dx, dy",
    [(1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (-1.0, 1.0), (-1.0, 0.0), (-1.0, -1.0), (0.0, -1.0), (1.0, -1.0)],
)
def test_frame_tables_cover_every_row(dx, dy):
    _, slime = make_pair(1000.0)
    slime.dx, slime.dy = dx, dy
    row = slime.animation_row()
    assert len(SLIME_FRAMES) == 16 + 8 * 5
    assert len(ATTACK_ORIGINS) == 8 * 5
    assert 16 + row * 5 + 4 < len(SLIME_FRAMES)
    assert row * 5 + 4 < len(ATTACK_ORIGINS)


@pytest.mark.parametrize(
    "dx, dy, row",
    [(0.0, 0.0, 0), (1.0, 0.0, 6), (0.0, 1.0, 0), (-1.0, 0.0, 2), (0.0, -1.0, 4)],
)
def test_animation_row_follows_direction(dx, dy, row):
    _, slime = make_pair(1000.0)
    slime.dx, slime.dy = dx, dy
    assert slime.animation_row() == row


def test_animation_row_always_indexes_a_frame():
    _, slime = make_pair(1000.0)
    for step in range(36):
        slime.dx = (step - 18) / 7.0
        slime.dy = (step % 5) - 2.0
        row = slime.animation_row()
        assert 0 <= row * 2 + 1 < 16
        assert 0 <= 16 + row * 5 + 4 < len(SLIME_FRAMES)


def test_chasing_slime_moves_towards_player():
    player, slime = make_pair(200.0)
    slime.update(0.1)
    assert 100.0 < slime.x < 200.0
    assert slime.y == 100.0
    assert slime.texture_rect in SLIME_FRAMES[:16]


def test_idle_slime_shows_walking_frame():
    _, slime = make_pair(1000.0)
    slime.update(0.1)
    assert slime.texture_rect in SLIME_FRAMES[:16]
    assert slime.x == 100.0


def test_attack_cycle_damages_player_once():
    player, slime = make_pair(110.0)
    slime.update(0.01)
    assert slime.attacking
    assert slime.texture_rect in SLIME_FRAMES[16:]
    slime.update(0.25)
    assert slime.attack_frame() == 2
    assert player.hp == 100 - slime.damage
    slime.update(0.15)
    slime.update(0.35)
    assert not slime.attacking
    assert slime.current_cooldown == slime.attack_cooldown
    assert player.hp == 100 - slime.damage


def test_death_pays_reward_after_fade():
    player, slime = make_pair(1000.0)
    slime.take_damage(slime.hp)
    assert slime.is_dying and not slime.can_collide
    slime.update(0.3)
    assert slime.life
    slime.update(0.25)
    assert slime.life is False
    assert player.money == slime.reward


def test_start_dying_twice_keeps_first_position():
    _, slime = make_pair(1000.0)
    slime.start_dying()
    first = slime.death_position
    slime.x += 50
    slime.start_dying()
    assert slime.death_position == first