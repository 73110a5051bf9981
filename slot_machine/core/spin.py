import random
from typing import Mapping

from slot_machine.core.symbols import SYMBOLS

ROWS = 3
COLS = 3

Grid = list[list[str]]


class SpinEngine:
    """Draws 3x3 grids from the symbol table.

    One generator is kept for the engine's lifetime; without an explicit
    ``rng`` it is seeded from system entropy.
    """

    def __init__(self, symbols: Mapping[str, int] = SYMBOLS, rng: random.Random | None = None,
                 weighted: bool = False):
        if not symbols:
            raise ValueError("symbol table is empty")
        self.keys = list(symbols)
        self.weights = [symbols[k] for k in self.keys]
        self.weighted = weighted
        self.rng = rng or random.Random()

    def draw(self) -> str:
        if self.weighted:
            return self.rng.choices(self.keys, weights=self.weights, k=1)[0]
        return self.rng.choice(self.keys)

    def spin(self) -> Grid:
        return [[self.draw() for _ in range(COLS)] for _ in range(ROWS)]


def format_grid(grid: Grid) -> str:
    return "\n".join(" ".join(row) for row in grid)


def compute_winnings(grid: Grid, bet: float) -> float:
    # TODO: no paytable is defined yet, so every spin pays nothing
    return 0.0
