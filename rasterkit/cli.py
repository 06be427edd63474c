"""Command line front end: interactive line and circle drawing, mesh rendering."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, Iterator, Optional, Sequence

from . import colors
from .antialias import line_bresenham_mod, line_wu
from .model import Model
from .raster import (
    circle_bresenham,
    circle_dda,
    circle_parametric,
    draw_line,
    draw_line_dda_step,
)
from .render import render_flat_shaded, render_random_colors, render_wireframe
from .tga import Format, TGAColor, TGAImage

WHITE = TGAColor.from_rgba(255, 255, 255, 255)
RED = TGAColor.from_rgba(255, 0, 0, 255)
CANVAS_SIZE = 100
DEFAULT_OUTPUT = "output.tga"
DEFAULT_MODEL = "obj/african_head.obj"

Drawer = Callable[..., None]

_SHAPES: dict[int, tuple[Drawer, int]] = {
    1: (draw_line, 4),
    2: (draw_line_dda_step, 4),
    3: (circle_dda, 3),
    4: (circle_parametric, 3),
    5: (circle_bresenham, 3),
}

_ANTIALIASED: dict[int, tuple[Drawer, int]] = {
    1: (line_bresenham_mod, 4),
    2: (line_wu, 4),
}

_SHAPES_MENU = (
    "1 - Bresenham's line algorithm\n"
    "2 - simple DDA line algorithm\n"
    "3 - DDA circle algorithm\n"
    "4 - Parametric circle algorithm\n"
    "5 - Bresenham's circle algorithm\n"
    "enter the number ->  "
)

_ANTIALIAS_MENU = (
    "1 - Bresenham's modified line algorithm\n"
    "2 - Xiaolin Wu\n"
    "-> "
)

_PROMPTS = {4: "\nenter x1, y1, x2, y2  ->  ", 3: "\nenter x0, y0, R  ->  "}


def _draw(table: dict[int, tuple[Drawer, int]], choice: int,
          values: Sequence[int]) -> TGAImage:
    image = TGAImage(CANVAS_SIZE, CANVAS_SIZE, Format.RGB)
    entry = table.get(choice)
    if entry is not None:
        drawer, arity = entry
        numbers = [int(v) for v in values]
        if len(numbers) != arity:
            raise ValueError(f"choice {choice} needs {arity} values, got {len(numbers)}")
        drawer(image, *numbers, WHITE)
        marks = [numbers[0:2], numbers[2:4]] if arity == 4 else [numbers[0:2]]
        for x, y in marks:
            image.set(x, y, RED)
    image.flip_vertically()
    return image


def draw_shapes(choice: int, values: Sequence[int]) -> TGAImage:
    """Draw one line or circle on a 100x100 canvas; unknown choices leave it blank."""
    return _draw(_SHAPES, choice, values)


def draw_antialiased(choice: int, values: Sequence[int]) -> TGAImage:
    """Draw one anti-aliased line on a 100x100 canvas; unknown choices leave it blank."""
    return _draw(_ANTIALIASED, choice, values)


def _tokens() -> Iterator[str]:
    for text in sys.stdin:
        yield from text.split()


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _interactive(table: dict[int, tuple[Drawer, int]], menu: str, output: str) -> int:
    out = sys.stdout
    tokens = _tokens()
    try:
        out.write(menu)
        out.flush()
        choice = _next_int(tokens)
        values: list[int] = []
        entry = table.get(choice)
        if entry is not None:
            arity = entry[1]
            out.write(_PROMPTS[arity])
            out.flush()
            values = [_next_int(tokens) for _ in range(arity)]
        image = _draw(table, choice, values)
        image.write(output)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    out.write("\n")
    return 0


def _render(style: str, model_path: str, size: int, seed: Optional[int], output: str) -> int:
    try:
        model = Model.load(model_path)
        if style == "wireframe":
            image = render_wireframe(model, size, size)
        elif style == "shaded":
            image = render_flat_shaded(model, size, size)
        else:
            image = render_random_colors(model, size, size, random.Random(seed))
        image.write(output)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"# v# {model.nverts()} f# {model.nfaces()}", file=sys.stderr)
    return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rasterkit", description=__doc__)
    commands = parser.add_subparsers(dest="command")

    shapes = commands.add_parser("shapes", help="draw a line or circle interactively")
    shapes.add_argument("-o", "--output", default=DEFAULT_OUTPUT)

    antialias = commands.add_parser("antialias", help="draw an anti-aliased line interactively")
    antialias.add_argument("-o", "--output", default=DEFAULT_OUTPUT)

    render = commands.add_parser("render", help="render an OBJ mesh")
    render.add_argument("style", choices=("wireframe", "shaded", "random"))
    render.add_argument("model", nargs="?", default=DEFAULT_MODEL)
    render.add_argument("--size", type=int, default=800)
    render.add_argument("--seed", type=int, default=None)
    render.add_argument("-o", "--output", default=DEFAULT_OUTPUT)

    commands.add_parser("colors", help="convert colours between models interactively")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool; with no command, draw shapes interactively."""
    args = _parser().parse_args(argv)
    command = args.command or "shapes"
    output = getattr(args, "output", DEFAULT_OUTPUT)
    if command == "shapes":
        return _interactive(_SHAPES, _SHAPES_MENU, output)
    if command == "antialias":
        return _interactive(_ANTIALIASED, _ANTIALIAS_MENU, output)
    if command == "render":
        return _render(args.style, args.model, args.size, args.seed, output)
    return colors.main([])


if __name__ == "__main__":
    sys.exit(main())