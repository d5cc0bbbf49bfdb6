import pytest

from cubkit.cubfile import CubError
from cubkit.scene import (
    SceneElements,
    find_map_start,
    parse_texture_colors,
    scan_elements,
)

ELEMENT_LINES = [
    "NO ./n.xpm\n",
    "SO ./s.xpm\n",
    "WE ./w.xpm\n",
    "EA ./e.xpm\n",
    "\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
]
MAP_LINES = [" 1111\n", " 1N01\n", " 1111\n"]


def _write(tmp_path, lines, name="scene.cub"):
    path = tmp_path / name
    path.write_text("".join(lines))
    return path


def _loaded():
    elements = SceneElements()
    for line in ELEMENT_LINES:
        elements.register(line.rstrip("\n"))
    return elements


def test_register_returns_key_and_stores_value():
    elements = SceneElements()
    assert elements.register("NO ./north.xpm") == "NO"
    assert elements.values["NO"] == "./north.xpm"


def test_register_ignores_other_lines():
    elements = SceneElements()
    assert elements.register("NOtexture") is None
    assert elements.register(" 1111") is None
    assert elements.values == {}


def test_all_loaded_only_after_six_elements():
    elements = SceneElements()
    for line in ELEMENT_LINES[:-2]:
        elements.register(line.rstrip("\n"))
    assert not elements.all_loaded()
    elements.register("C 225,30,0")
    assert elements.all_loaded()


def test_duplicate_texture_raises():
    elements = SceneElements()
    elements.register("NO a.xpm")
    with pytest.raises(CubError, match="Duplicate NO texture"):
        elements.register("NO b.xpm")


def test_duplicate_color_raises():
    elements = SceneElements()
    elements.register("F 1,2,3")
    with pytest.raises(CubError, match="Duplicate F color"):
        elements.register("F 4,5,6")


def test_scan_elements_reads_file_with_indentation(tmp_path):
    path = _write(tmp_path, ["   NO a.xpm\n", "\tF 1,2,3\n"])
    elements = scan_elements(path)
    assert elements.values == {"NO": "a.xpm", "F": "1,2,3"}


def test_scan_elements_missing_file(tmp_path):
    with pytest.raises(CubError, match="Cannot open file"):
        scan_elements(tmp_path / "missing.cub")


def test_find_map_start_after_elements():
    lines = ELEMENT_LINES + MAP_LINES
    assert find_map_start(_loaded(), lines) == len(ELEMENT_LINES)


def test_find_map_start_requires_all_elements():
    elements = SceneElements()
    elements.register("NO a.xpm")
    with pytest.raises(CubError, match="Invalid data before map"):
        find_map_start(elements, ["NO a.xpm\n", " 111\n"])


def test_find_map_start_without_map():
    with pytest.raises(CubError, match="No map found"):
        find_map_start(_loaded(), ELEMENT_LINES)


def test_parse_texture_colors_returns_map_start(tmp_path):
    lines = ELEMENT_LINES + MAP_LINES
    path = _write(tmp_path, lines)
    assert parse_texture_colors(lines, path) == len(ELEMENT_LINES)


def test_parse_texture_colors_rejects_empty_line_in_map(tmp_path):
    lines = ELEMENT_LINES + [" 1111\n", "\n", " 1111\n"]
    path = _write(tmp_path, lines)
    with pytest.raises(CubError, match="Contains space"):
        parse_texture_colors(lines, path)


def test_parse_texture_colors_rejects_bad_map_character(tmp_path):
    lines = ELEMENT_LINES + [" 1111\n", " 1X01\n"]
    path = _write(tmp_path, lines)
    with pytest.raises(CubError, match="Invalid characters"):
        parse_texture_colors(lines, path)


def test_parse_texture_colors_rejects_duplicates(tmp_path):
    lines = ELEMENT_LINES + ["SO other.xpm\n"] + MAP_LINES
    path = _write(tmp_path, lines)
    with pytest.raises(CubError, match="Duplicate SO"):
        parse_texture_colors(lines, path)