"""
Command-line interface.

Run:
  chaosgame                      # open the GUI
  chaosgame gui --iterations 5000 --interval 20 --mode uniform
  chaosgame export out.svg --start 250 300 --iterations 20000
  chaosgame --help
"""
from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

from chaosgame import config
from chaosgame.logging_config import setup_logging
from chaosgame.main import AppConfig, main as run_gui
from chaosgame.model.engine import generate_sequence, random_corners
from chaosgame.model.geometry import Point, is_inside_triangle, triangle_corners
from chaosgame.model.render import RenderMode, render_prefix
from chaosgame.model.svg import export_svg


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class UsageError(ValueError):
    pass


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _iteration_count(text: str) -> int:
    value = _positive_int(text)
    if value > config.MAX_ITERATIONS:
        raise argparse.ArgumentTypeError(f"must be <= {config.MAX_ITERATIONS}, got {value}")
    return value


def _interval_ms(text: str) -> int:
    value = _positive_int(text)
    if value > config.MAX_TICK_INTERVAL_MS:
        raise argparse.ArgumentTypeError(f"must be <= {config.MAX_TICK_INTERVAL_MS}, got {value}")
    return value


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="chaosgame",
        description="Sierpinski triangle via the chaos game.",
    )
    p.add_argument("--log-level", choices=LOG_LEVELS, default="INFO", help="Logging verbosity.")
    p.add_argument("--log-file", default=None, help="Also write logs to this file.")

    sub = p.add_subparsers(dest="cmd")

    pg = sub.add_parser("gui", help="Open the interactive window (default).")
    pg.add_argument(
        "--iterations", type=_iteration_count, default=config.DEFAULT_ITERATIONS,
        help=f"Steps generated per start point (1..{config.MAX_ITERATIONS}).",
    )
    pg.add_argument(
        "--interval", type=_interval_ms, default=config.TICK_INTERVAL_MS,
        help=f"Playback step interval in milliseconds (1..{config.MAX_TICK_INTERVAL_MS}).",
    )
    pg.add_argument(
        "--mode", choices=[m.value for m in RenderMode], default=RenderMode.HIGHLIGHTED_LATEST.value,
        help="Rendering mode.",
    )

    pe = sub.add_parser("export", help="Render a sequence prefix to an SVG file without the GUI.")
    pe.add_argument("output", help="Path to write the SVG output.")
    pe.add_argument(
        "--start", type=float, nargs=2, metavar=("X", "Y"), required=True,
        help="Starting point in canvas pixels (y grows downwards).",
    )
    pe.add_argument("--iterations", type=_iteration_count, default=config.DEFAULT_ITERATIONS)
    pe.add_argument(
        "--position", type=int, default=None,
        help="Number of steps to draw (default: all).",
    )
    pe.add_argument(
        "--mode", choices=[m.value for m in RenderMode], default=RenderMode.UNIFORM.value,
    )
    pe.add_argument("--seed", type=int, default=None, help="Seed for repeatable corner choices.")
    pe.add_argument(
        "--size", type=_positive_int, nargs=2, metavar=("W", "H"),
        default=(config.CANVAS_WIDTH, config.CANVAS_HEIGHT), help="Canvas size in pixels.",
    )

    return p


# -------------------------
# Commands
# -------------------------


def cmd_export(
    output_path: str,
    start: Point,
    iterations: int,
    position: int | None,
    mode: RenderMode,
    seed: int | None,
    size: tuple[int, int],
) -> None:
    width, height = size
    corners = triangle_corners(width, height)
    if not is_inside_triangle(start, *corners):
        raise UsageError(f"start point ({start.x:g}, {start.y:g}) lies outside the triangle")

    if position is None:
        position = iterations
    if not 0 <= position <= iterations:
        raise UsageError(f"--position must be between 0 and {iterations}, got {position}")

    rng = np.random.default_rng(seed)
    sequence = generate_sequence(
        start, iterations, corners, lambda c, n: random_corners(c, n, rng)
    )
    export_svg(render_prefix(sequence, position, mode), output_path, width, height, title="Chaos Game")


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    log_level = getattr(logging, args.log_level)

    try:
        if args.cmd == "export":
            setup_logging(level=log_level, log_file=args.log_file)
            cmd_export(
                args.output,
                Point(*args.start),
                args.iterations,
                args.position,
                RenderMode(args.mode),
                args.seed,
                tuple(args.size),
            )
        else:
            app_config = AppConfig(log_level=log_level, log_file=args.log_file)
            if args.cmd == "gui":
                app_config.iterations = args.iterations
                app_config.interval_ms = args.interval
                app_config.render_mode = RenderMode(args.mode)
            return run_gui(app_config)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"File error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
