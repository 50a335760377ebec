import pytest

from solong.level import (
    Level,
    MapError,
    check_characters,
    check_extension,
    check_playable,
    check_rectangular,
    check_walls,
    flood_fill,
    load_level,
    missing_textures,
    read_map,
)

VALID = ["111111", "1P0C01", "1000E1", "111111"]


def write_map(tmp_path, lines, name="level.ber"):
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n")
    return str(path)


def test_check_extension_accepts_ber():
    check_extension("maps/level.ber")
    with pytest.raises(MapError, match="Wrong file extension"):
        check_extension("maps/level.txt")


@pytest.mark.parametrize("path", ["ber", ".ber", "maps/.ber", "level.bers", "level.be"])
def test_check_extension_rejects(path):
    with pytest.raises(MapError, match="Wrong file extension"):
        check_extension(path)


def test_read_map_strips_newlines(tmp_path):
    path = write_map(tmp_path, VALID)
    assert read_map(path) == VALID


def test_read_map_without_final_newline(tmp_path):
    path = tmp_path / "a.ber"
    path.write_text("111\n1P1")
    assert read_map(path) == ["111", "1P1"]


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="Invalid map"):
        read_map(tmp_path / "absent.ber")


def test_check_rectangular():
    check_rectangular(VALID)
    with pytest.raises(MapError):
        check_rectangular(["1111", "111"])


def test_check_rectangular_rejects_blank_line():
    with pytest.raises(MapError):
        check_rectangular(["111", ""])


def test_check_characters_valid():
    check_characters(VALID)
    with pytest.raises(MapError):
        check_characters(["1PP", "CE1"])


@pytest.mark.parametrize(
    "lines",
    [
        ["1P01", "1E01"],
        ["1PCE", "1E01"],
        ["1PCX", "1E01"],
        ["1C0E"],
    ],
)
def test_check_characters_rejects(lines):
    with pytest.raises(MapError, match="Invalid map"):
        check_characters(lines)


def test_check_walls():
    check_walls(VALID)
    with pytest.raises(MapError):
        check_walls(["111111", "0P0C01", "1000E1", "111111"])


def test_check_walls_bottom_row():
    with pytest.raises(MapError):
        check_walls(["111111", "1P0C01", "1000E1", "111101"])


def test_flood_fill_marks_reachable_and_blocks_exit():
    grid = [list(row) for row in VALID]
    flood_fill(grid, 1, 1)
    rows = ["".join(row) for row in grid]
    assert rows[1] == "1****1"
    assert rows[2] == "1***11"
    check_playable(grid)


def test_check_playable_reports_leftovers():
    grid = [list(row) for row in ["11111", "1P1C1", "1E111", "11111"]]
    flood_fill(grid, 1, 1)
    with pytest.raises(MapError, match="Map not playable"):
        check_playable(grid)


def test_load_level_valid(tmp_path):
    level = load_level(write_map(tmp_path, VALID))
    assert level == Level(tuple(VALID))
    assert (level.width, level.height) == (6, 4)


def test_load_level_collectible_behind_exit(tmp_path):
    lines = ["111111", "1P0EC1", "111111"]
    with pytest.raises(MapError, match="Map not playable"):
        load_level(write_map(tmp_path, lines))


def test_load_level_open_border(tmp_path):
    lines = ["111111", "1P0C0E", "111111"]
    with pytest.raises(MapError, match="Invalid map"):
        load_level(write_map(tmp_path, lines))


def test_load_level_bad_extension(tmp_path):
    with pytest.raises(MapError, match="Wrong file extension"):
        load_level(write_map(tmp_path, VALID, name="level.txt"))


def test_missing_textures(tmp_path):
    (tmp_path / "wall.xpm").write_text("x")
    (tmp_path / "floor.xpm").write_text("x")
    assert missing_textures(tmp_path) == [
        tmp_path / "collectible.xpm",
        tmp_path / "player.xpm",
        tmp_path / "exit.xpm",
    ]


def test_missing_textures_none_missing(tmp_path):
    for name in ("wall", "collectible", "player", "floor", "exit"):
        (tmp_path / f"{name}.xpm").write_text("x")
    assert missing_textures(tmp_path) == []