import io

import pytest

from chromatic.io_utils import load_edge_list_csv, load_palette, parse_assignments


def test_load_edge_list_from_text():
    src = io.StringIO("# comment\na,b\n\nb,c\nc,c\n d , e \n")
    assert load_edge_list_csv(src) == [("a", "b"), ("b", "c"), ("d", "e")]


def test_load_edge_list_from_bytes_and_path(tmp_path):
    assert load_edge_list_csv(io.BytesIO(b"1,2\n2,3\n")) == [("1", "2"), ("2", "3")]
    path = tmp_path / "edges.csv"
    path.write_text("x,y\n")
    assert load_edge_list_csv(str(path)) == [("x", "y")]
    assert load_edge_list_csv(path) == [("x", "y")]


def test_load_edge_list_rejects_unknown_source():
    with pytest.raises(TypeError):
        load_edge_list_csv(42)


def test_load_palette():
    src = io.StringIO("red\n# skip\ngreen\n\nred\nblue\n")
    assert load_palette(src) == ["red", "green", "blue"]


def test_parse_assignments_matches_integer_palette():
    partial = parse_assignments(["a=1", " b = 2 ", "c=red"], palette=(0, 1, 2))
    assert partial.get_color("a") == 1
    assert partial.get_color("b") == 2
    assert partial.get_color("c") == "red"


def test_parse_assignments_keeps_strings_for_string_palette():
    partial = parse_assignments(["a=1"], palette=["1", "2"])
    assert partial.get_color("a") == "1"


@pytest.mark.parametrize("bad", ["a", "=1", "a="])
def test_parse_assignments_rejects_malformed(bad):
    with pytest.raises(ValueError):
        parse_assignments([bad])
