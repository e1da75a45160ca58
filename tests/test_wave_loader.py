from dungeonrun.wave_loader import SpawnPoint, load_waves


def test_parses_spawn_lines(tmp_path):
    path = tmp_path / "room1_1.waves"
    path.write_text("{3, 4}, slime\n{10,2},ghost\n")
    assert load_waves(path) == [SpawnPoint(3, 4, "slime"), SpawnPoint(10, 2, "ghost")]


def test_skips_comments_blank_and_bad_lines(tmp_path):
    path = tmp_path / "w.waves"
    path.write_text("// header\n\n{x, 1}, slime\n{1, 2}\n(5,6) : skeleton\n")
    assert load_waves(path) == [SpawnPoint(5, 6, "skeleton")]


def test_negative_coordinates(tmp_path):
    path = tmp_path / "w.waves"
    path.write_text("{-1, +2}, slime\n")
    assert load_waves(path) == [SpawnPoint(-1, 2, "slime")]


def test_missing_file_gives_empty(tmp_path):
    assert load_waves(tmp_path / "nope.waves") == []


def test_windows_line_endings(tmp_path):
    path = tmp_path / "w.waves"
    path.write_bytes(b"{1, 2}, slime\r\n{3, 4}, ghost\r\n")
    kinds = [spawn.kind for spawn in load_waves(path)]
    assert kinds == ["slime", "ghost"]