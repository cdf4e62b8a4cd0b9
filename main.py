"""
Bonsai - grow an ASCII bonsai tree in the terminal

Growth advances one step every --time-scale milliseconds. Keys:

    r       grow a new tree (same seed if one was given)
    q, Esc  quit

A summary of the last tree is printed after the terminal is restored.
"""

import argparse
import curses
import time

from pydantic import ValidationError

from bonsai import BonsaiTree, ConfigError, CursesCanvas, GrowOptions

ESCAPE = 27
POLL_MS = 10


def parse_options(argv: list[str] | None = None) -> GrowOptions:
    parser = argparse.ArgumentParser(description="Grow an ASCII bonsai tree.")
    parser.add_argument("-w", "--width", type=int, default=0,
                        help="starting width of the trunk (0 = random)")
    parser.add_argument("-t", "--time-scale", type=int, default=100,
                        help="milliseconds between growth steps")
    parser.add_argument("-s", "--seed", type=int, default=0,
                        help="seed of the tree; same seeds grow same trees (0 = random)")
    parser.add_argument("-n", "--max-frames", type=int, default=None,
                        help="quit after this many frames")
    args = parser.parse_args(argv)
    try:
        return GrowOptions(
            width=args.width,
            time_scale=args.time_scale,
            seed=args.seed,
            max_frames=args.max_frames,
        )
    except ValidationError as e:
        parser.error(str(e))


def new_tree(options: GrowOptions, canvas: CursesCanvas) -> BonsaiTree:
    canvas.clear()
    width, height = canvas.size
    return BonsaiTree(options.tree_config(width, height), sink=canvas)


def run(window: "curses.window", options: GrowOptions) -> BonsaiTree:
    """Animate trees until the user quits; returns the last tree."""
    curses.curs_set(0)
    if curses.has_colors():
        curses.use_default_colors()
    window.nodelay(True)
    window.timeout(POLL_MS)

    canvas = CursesCanvas(window)
    tree = new_tree(options, canvas)
    frames = 0
    last_step = time.monotonic()

    while options.max_frames is None or frames < options.max_frames:
        now = time.monotonic()
        if (now - last_step) * 1000.0 >= options.time_scale:
            tree.step()
            canvas.refresh()
            frames += 1
            last_step = now

        key = window.getch()
        if key in (ESCAPE, ord("q")):
            break
        if key == ord("r"):
            tree = new_tree(options, canvas)

    return tree


def main() -> None:
    options = parse_options()
    try:
        tree = curses.wrapper(run, options)
    except ConfigError as e:
        print(f"Cannot grow a tree here: {e}")
        raise SystemExit(1)
    tree.print_summary()


if __name__ == "__main__":
    main()
