"""SVG serialization of turtle paths."""

from __future__ import annotations

from typing import Iterable, Sequence, TextIO

from .path import PathInstruction, bounds

DEFAULT_VIEW_BOX = (-1000, -1000, 2000, 2000)
DEFAULT_STROKE = 3.0
FIT_MARGIN = 32.0


def fmt(v: float) -> str:
    s = f"{v:.3f}".rstrip("0").rstrip(".")
    return "0" if s in ("", "-0") else s


def fit_to_viewbox(
    instructions: Sequence[PathInstruction], size: int, margin: float = FIT_MARGIN
) -> list[PathInstruction]:
    """Scale and center a path inside a ``size`` x ``size`` canvas.

    Parameters:
        instructions (Sequence[PathInstruction]): The path to fit
        size (int): The size of the SVG canvas
        margin (float): The margin to apply (default 32.0), size must exceed
            twice the margin

    Returns:
        list[PathInstruction]: The transformed path, same commands
    """
    if size <= 2 * margin:
        raise ValueError(f"size {size} leaves no room inside a margin of {margin}")
    xmin, ymin, xmax, ymax = bounds(instructions)
    w = max(1e-9, xmax - xmin)
    h = max(1e-9, ymax - ymin)
    scale = (size - 2 * margin) / max(w, h)
    cx = (xmin + xmax) / 2.0
    cy = (ymin + ymax) / 2.0
    out = []
    for ins in instructions:
        sx = (ins.x - cx) * scale + size / 2.0
        sy = (ins.y - cy) * scale + size / 2.0
        out.append(ins._replace(x=sx, y=sy))
    return out


def path_data(instructions: Iterable[PathInstruction]) -> str:
    """Generate the ``d`` attribute text for a path.

    Parameters:
        instructions (Iterable[PathInstruction]): The path to convert

    Returns:
        str: The SVG path string, e.g. ``"M 0 0 L 10 0"``
    """
    return " ".join(
        f"{ins.command.value} {fmt(ins.x)} {fmt(ins.y)}" for ins in instructions
    )


def make_svg(
    path_d: str,
    view_box: tuple[float, float, float, float] = DEFAULT_VIEW_BOX,
    stroke: float = DEFAULT_STROKE,
) -> str:
    """Generate an SVG document holding a single unfilled black path.

    Parameters:
        path_d (str): The SVG path data
        view_box (tuple): min-x, min-y, width, height of the viewport
        stroke (float): The stroke width for the path

    Returns:
        str: The SVG string
    """
    vb = " ".join(fmt(v) for v in view_box)
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<svg viewBox="{vb}" xmlns="http://www.w3.org/2000/svg" version="1.1">
  <path d="{path_d}" fill="none" stroke="black" stroke-width="{fmt(stroke)}" />
</svg>
"""


def write_svg(document: str, sink: TextIO) -> None:
    sink.write(document)
    sink.flush()
