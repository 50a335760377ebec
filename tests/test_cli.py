import pytest

from solong.cli import main
from solong.level import TEXTURES

VALID_MAP = "11111\n1PCE1\n11111\n"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "textures").mkdir()
    for name in TEXTURES:
        (tmp_path / "textures" / f"{name}.xpm").write_text("not an image")
    return tmp_path


def _write(path, text):
    path.write_text(text)
    return str(path.name)


def test_wrong_argument_count(workdir, capsys):
    assert main([]) == 0
    assert capsys.readouterr().err == "Error\nInvalid number of arguments\n"
    assert main(["a.ber", "b.ber"]) == 0
    assert "Invalid number of arguments" in capsys.readouterr().err


def test_missing_textures(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "map.ber").write_text(VALID_MAP)
    assert main(["map.ber"]) == 0
    assert capsys.readouterr().err == "Error\nAsset file missing\n"


def test_wrong_extension(workdir, capsys):
    name = _write(workdir / "map.txt", VALID_MAP)
    main([name])
    assert capsys.readouterr().err == "Error\nWrong file extension\n"


def test_invalid_map(workdir, capsys):
    name = _write(workdir / "map.ber", "11111\n1PCX1\n11111\n")
    main([name])
    assert capsys.readouterr().err == "Error\nInvalid map\n"


def test_missing_map_file(workdir, capsys):
    main(["absent.ber"])
    assert capsys.readouterr().err == "Error\nInvalid map\n"


def test_unplayable_map(workdir, capsys):
    name = _write(workdir / "map.ber", "1111111\n1P01CE1\n1111111\n")
    main([name])
    assert capsys.readouterr().err == "Error\nMap not playable\n"


def test_invalid_asset(workdir, capsys):
    name = _write(workdir / "map.ber", VALID_MAP)
    assert main([name]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Error\nInvalid asset\n"
    assert captured.err == ""