import pytest

from solong.cli import main
from solong.display import TEXTURE_FILES


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    textures = tmp_path / "textures"
    textures.mkdir()
    for name in TEXTURE_FILES.values():
        (textures / name).write_text("")
    return tmp_path


def test_wrong_argument_count(workdir, capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "Wrong argument\n"
    assert main(["a.ber", "b.ber"]) == 1
    assert capsys.readouterr().err == "Wrong argument\n"


def test_missing_textures(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "map.ber").write_text("11111\n1PCE1\n11111\n")
    assert main(["map.ber"]) == 1
    assert capsys.readouterr().err == "Wrong texture"


def test_wrong_file_name(workdir, capsys):
    (workdir / "map.txt").write_text("11111\n1PCE1\n11111\n")
    assert main(["map.txt"]) == 1
    assert capsys.readouterr().err == "Wrong file name\n"


def test_unreadable_map(workdir, capsys):
    assert main(["missing.ber"]) == 1
    assert capsys.readouterr().err == "Map couldn't read!\n"


def test_bad_contents(workdir, capsys):
    (workdir / "map.ber").write_text("11111\n1PXE1\n11111\n")
    assert main(["map.ber"]) == 1
    assert capsys.readouterr().err == "Incorrect Map Contents!\n"


def test_open_walls(workdir, capsys):
    (workdir / "map.ber").write_text("11111\n1PCE0\n11111\n")
    assert main(["map.ber"]) == 1
    assert capsys.readouterr().err == "Map walls not correct!\n"


def test_unreachable_target(workdir, capsys):
    (workdir / "map.ber").write_text("1111111\n1P01CE1\n1111111\n")
    assert main(["map.ber"]) == 1
    assert capsys.readouterr().err == "Map target not correct!\n"