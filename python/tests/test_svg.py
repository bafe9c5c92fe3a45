import pytest

from lindenmayer import PathCommand, PathInstruction
from lindenmayer.svg import fit_to_viewbox, fmt, make_svg, path_data

M = PathCommand.MOVE_TO
L = PathCommand.LINE_TO


def test_fmt_strips_trailing_zeros():
    assert fmt(10.0) == "10"
    assert fmt(0.5) == "0.5"
    assert fmt(-0.0) == "0"
    assert fmt(-0.0001) == "0"
    assert fmt(-2.25) == "-2.25"


def test_path_data():
    path = (
        PathInstruction(M, 0.0, 0.0),
        PathInstruction(L, 10.0, 0.0),
        PathInstruction(M, 5.0, -2.5),
    )
    assert path_data(path) == "M 0 0 L 10 0 M 5 -2.5"


def test_make_svg_defaults():
    svg = make_svg("M 0 0 L 10 0")
    assert svg.startswith('<?xml version="1.0"')
    assert 'viewBox="-1000 -1000 2000 2000"' in svg
    assert 'd="M 0 0 L 10 0"' in svg
    assert 'fill="none"' in svg
    assert 'stroke="black"' in svg
    assert 'stroke-width="3"' in svg


def test_fit_to_viewbox_centers_path():
    path = (PathInstruction(M, 0.0, 0.0), PathInstruction(L, 10.0, 10.0))
    fitted = fit_to_viewbox(path, size=100, margin=10)
    assert fitted == [PathInstruction(M, 10.0, 10.0), PathInstruction(L, 90.0, 90.0)]


def test_fit_to_viewbox_keeps_commands_of_flat_path():
    path = (PathInstruction(M, 0.0, 0.0), PathInstruction(L, 20.0, 0.0))
    fitted = fit_to_viewbox(path, size=100, margin=0)
    assert [ins.command for ins in fitted] == [M, L]
    assert fitted[0].y == fitted[1].y == 50.0


@pytest.mark.parametrize("size", [64, 20])
def test_fit_to_viewbox_needs_room_inside_margin(size):
    path = (PathInstruction(M, 0.0, 0.0), PathInstruction(L, 10.0, 10.0))
    with pytest.raises(ValueError):
        fit_to_viewbox(path, size=size, margin=32)
