# src/ellers/mapgen/generator.py
# Streaming driver: initial row, iterations - 2 transitions, closing row.

from typing import Iterator, List, Optional

from ..cell import Cell
from ..config import MazeConfig
from ..rng import Coin
from .ellers import MazeBuilder


def generate_rows(config: MazeConfig, coin: Optional[Coin] = None) -> Iterator[List[Cell]]:
    builder = MazeBuilder(config, coin)
    yield builder.snapshot()

    for _ in range(config.iterations - 2):
        builder.ellers()
        yield builder.snapshot()

    builder.end()
    yield builder.snapshot()
