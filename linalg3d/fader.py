"""A window that smoothly fades its background between colours."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Sequence

import pygame

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480
DEFAULT_TITLE = "examples/renderer/clear"


def frame_color(now: float) -> tuple[float, float, float]:
    """Return the (red, green, blue) colour, each in [0, 1], for time ``now`` in seconds."""
    return tuple(
        0.5 + 0.5 * math.sin(now + math.pi * 2 * k / 3) for k in range(3)
    )


def run(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    title: str = DEFAULT_TITLE,
) -> int:
    """Open the window and redraw it every frame until it is closed; return 0."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
            color = frame_color(pygame.time.get_ticks() / 1000.0)
            screen.fill(tuple(round(channel * 255) for channel in color))
            pygame.display.flip()
    finally:
        pygame.quit()


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Fade a window between colours.")
    parser.add_argument("--width", type=_positive, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=_positive, default=DEFAULT_HEIGHT)
    parser.add_argument("--title", default=DEFAULT_TITLE)
    args = parser.parse_args(argv)
    try:
        return run(args.width, args.height, args.title)
    except pygame.error as exc:
        print(f"Couldn't create window: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())