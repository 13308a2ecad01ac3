"""Block color sources.

The core never looks inside a color; it just asks a source for the next one.
"""

import random
from itertools import cycle
from typing import Iterable, Optional, Sequence, Tuple

Color = Tuple[int, int, int]

PALETTE: Tuple[Color, ...] = (
    (220, 20, 60),    # crimson
    (255, 69, 0),     # orange red
    (255, 215, 0),    # gold
    (50, 205, 50),    # lime green
    (0, 191, 255),    # deep sky blue
    (123, 104, 238),  # medium slate blue
    (218, 112, 214),  # orchid
    (255, 127, 80),   # coral
    (127, 255, 0),    # chartreuse
    (0, 255, 255),    # aqua
    (30, 144, 255),   # dodger blue
    (106, 90, 205),   # slate blue
    (255, 105, 180),  # hot pink
    (199, 21, 133),   # medium violet red
    (255, 99, 71),    # tomato
    (0, 255, 127),    # spring green
    (64, 224, 208),   # turquoise
    (95, 158, 160),   # cadet blue
    (221, 160, 221),  # plum
)


class RandomColorSource:
    """Uniform pick from a palette, driven by an injectable RNG."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        palette: Sequence[Color] = PALETTE,
    ) -> None:
        if not palette:
            raise ValueError("Palette must not be empty")
        self._rng = rng or random.Random()
        self._palette = tuple(palette)

    def __call__(self) -> Color:
        return self._rng.choice(self._palette)


class CycleColorSource:
    """Replays a fixed sequence forever. Handy for tests and demos."""

    def __init__(self, colors: Iterable[Color]) -> None:
        colors = list(colors)
        if not colors:
            raise ValueError("Need at least one color")
        self._colors = cycle(colors)

    def __call__(self) -> Color:
        return next(self._colors)
