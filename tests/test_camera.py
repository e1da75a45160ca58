from dungeonrun.camera import View, view_for_player
from dungeonrun.level import LevelManager

BIG = LevelManager(["w" * 100] * 100)


def test_view_size_is_screen_size():
    view = view_for_player(1000, 1000, BIG, 800, 600)
    assert (view.width, view.height) == (800, 600)


def test_player_in_middle_is_centered():
    view = view_for_player(1000, 1200, BIG, 800, 600)
    assert view == View(1000, 1200, 800, 600)


def test_clamped_at_top_left():
    view = view_for_player(0, 0, BIG, 800, 600)
    assert view.center_x == 800 / 2
    assert view.center_y == 600 / 2


def test_clamped_at_bottom_right_stays_inside_map():
    view = view_for_player(10**6, 10**6, BIG, 800, 600)
    map_size = BIG.width * 32
    assert view.center_x + view.width / 2 == map_size
    assert view.center_y + view.height / 2 == map_size


def test_clamp_range_is_monotonic():
    xs = [view_for_player(px, 500, BIG, 800, 600).center_x for px in range(0, 4000, 100)]
    assert xs == sorted(xs)