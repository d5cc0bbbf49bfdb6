from cubkit.cli import main

GOOD = (
    "NO ./n.xpm\n"
    "SO ./s.xpm\n"
    "WE ./w.xpm\n"
    "EA ./e.xpm\n"
    "\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n"
    " 1111\n"
    " 1N01\n"
    " 1111\n"
)


def test_wrong_argument_count(capsys):
    assert main(["cub3D"]) == 1
    assert "Usage: cub3D <cub_file>" in capsys.readouterr().out


def test_wrong_extension(capsys):
    assert main(["cub3D", "map.txt"]) == 1
    assert ".cub extension" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main(["cub3D", str(tmp_path / "missing.cub")]) == 1
    assert "Failed to read the file" in capsys.readouterr().out


def test_valid_scene(tmp_path, capsys):
    path = tmp_path / "scene.cub"
    path.write_text(GOOD)
    assert main(["cub3D", str(path)]) == 0
    assert "Parsing completed successfully!" in capsys.readouterr().out


def test_duplicate_element(tmp_path, capsys):
    path = tmp_path / "scene.cub"
    path.write_text("F 1,2,3\n" + GOOD)
    assert main(["cub3D", str(path)]) == 1
    out = capsys.readouterr().out
    assert "Duplicate F color" in out
    assert "Parsing failed" in out


def test_missing_map(tmp_path, capsys):
    path = tmp_path / "scene.cub"
    path.write_text(GOOD.split("\n 1111")[0])
    assert main(["cub3D", str(path)]) == 1
    assert "No map found" in capsys.readouterr().out