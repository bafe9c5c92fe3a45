"""generate_lsystem.py — render a preset L-system (dragon, plant, tree) as SVG.

Usage:
  python generate_lsystem.py [-p PRESET] [-n GENERATIONS] [-o OUT.svg] [--step 10]
Examples:
  python generate_lsystem.py > out.svg          (pick a preset interactively)
  python generate_lsystem.py -p h -o dragon.svg
  python generate_lsystem.py -p plant -n 5 --fit --size 1024 -o plant.svg
"""

import argparse
import math
import sys

from lindenmayer import Grammar, LSystemError, PathInstruction, expand, get_preset, interpret
from lindenmayer.presets import PRESETS, PRESET_KEYS
from lindenmayer.svg import DEFAULT_STROKE, FIT_MARGIN, fit_to_viewbox, make_svg, path_data, write_svg
from lindenmayer.turtle import DEFAULT_STEP

def read_selection(stream=None, prompt=None) -> str:
    """Ask for a preset on ``prompt`` and read its key from ``stream``.

    Parameters:
        stream: Text stream to read the selection from (default stdin)
        prompt: Text stream the menu and re-prompts go to (default stderr)

    Returns:
        str: The name of the selected preset
    """
    stream = sys.stdin if stream is None else stream
    prompt = sys.stderr if prompt is None else prompt
    print("select a preset by pressing its character:", file=prompt)
    for preset in PRESETS.values():
        print(f"\t[{preset.key}] {preset.title}", file=prompt)
    for line in stream:
        preset = PRESET_KEYS.get(line.strip())
        if preset is not None:
            return preset.name
        print("unrecognized. reinput:", file=prompt)
    raise SystemExit("no preset selected")


def generate(
    grammar: Grammar, generations: int, step_length: float = DEFAULT_STEP
) -> tuple[PathInstruction, ...]:
    """Expand the grammar and walk the result with the turtle.

    Parameters:
        grammar (Grammar): The L-system to run
        generations (int): Number of rewriting steps
        step_length (float): The step size for the turtle

    Returns:
        tuple[PathInstruction, ...]: The emitted path
    """
    symbols = expand(grammar.axiom, grammar.rules, generations)
    return interpret(symbols, grammar.actions, grammar.angle_delta, step_length)


def main(argv=None):
    """Generate a preset L-system and write it as an SVG document."""
    ap = argparse.ArgumentParser(
        description="Render a preset L-system (Heighway dragon, plant, tree) as SVG."
    )
    ap.add_argument(
        "-p",
        "--preset",
        help="preset name or key: "
        + ", ".join(f"{p.name} ({p.key})" for p in PRESETS.values())
        + "; read from stdin when omitted",
    )
    ap.add_argument(
        "-n",
        "--generations",
        type=int,
        default=None,
        help="rewriting steps (default: the preset's recommendation)",
    )
    ap.add_argument(
        "-o", "--output", default="-", help="output SVG path (default: stdout)"
    )
    ap.add_argument(
        "--step", type=float, default=DEFAULT_STEP, help="turtle step length (default 10)"
    )
    ap.add_argument(
        "--stroke", type=float, default=DEFAULT_STROKE, help="stroke width (default 3)"
    )
    ap.add_argument(
        "--fit", action="store_true", help="scale the drawing into a square canvas"
    )
    ap.add_argument(
        "--size", type=int, default=2000, help="canvas size used by --fit (default 2000)"
    )
    args = ap.parse_args(argv)

    try:
        preset = get_preset(args.preset or read_selection())
        generations = preset.generations if args.generations is None else args.generations
        if generations < 0 or generations > preset.max_generations:
            raise SystemExit(
                f"Choose a generation count between 0 and {preset.max_generations} "
                f"for {preset.name}."
            )
        if not math.isfinite(args.step) or args.step <= 0:
            raise SystemExit("--step must be a finite number > 0")
        if args.fit and args.size <= 2 * FIT_MARGIN:
            raise SystemExit(f"--size must be > {2 * FIT_MARGIN:g} with --fit")

        path = generate(preset.grammar, generations, step_length=args.step)
    except LSystemError as e:
        raise SystemExit(f"error: {e}") from e

    if args.fit:
        svg = make_svg(
            path_data(fit_to_viewbox(path, size=args.size)),
            view_box=(0, 0, args.size, args.size),
            stroke=args.stroke,
        )
    else:
        svg = make_svg(path_data(path), stroke=args.stroke)

    if args.output == "-":
        write_svg(svg, sys.stdout)
    else:
        with open(args.output, "w", encoding="utf-8") as f:
            write_svg(svg, f)
    print(
        f"Wrote {args.output} (preset={preset.name}, generations={generations}, "
        f"instructions={len(path)})",
        file=sys.stderr,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
