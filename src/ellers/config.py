# src/ellers/config.py
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidArgument
from .render.text import number_of_digits

MIN_WIDTH = 1
# One initial row plus one closing row.
MIN_ITERATIONS = 2


def _parse_int(name: str, raw) -> int:
    if isinstance(raw, bool):
        raise InvalidArgument(f"{name} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if not (text.isascii() and text.isdigit()):
        raise InvalidArgument(f"{name} must be a positive decimal integer, got {raw!r}")
    return int(text, 10)


@dataclass(frozen=True)
class MazeConfig:
    width: int
    iterations: int
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("width", "iterations"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidArgument(f"{name} must be an integer, got {v!r}")
        if self.width < MIN_WIDTH:
            raise InvalidArgument(f"width must be >= {MIN_WIDTH}, got {self.width}")
        if self.iterations < MIN_ITERATIONS:
            raise InvalidArgument(
                f"iterations must be >= {MIN_ITERATIONS}, got {self.iterations}"
            )
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise InvalidArgument(f"seed must be an integer, got {self.seed!r}")

    @classmethod
    def from_strings(cls, width, iterations, seed=None) -> "MazeConfig":
        return cls(
            width=_parse_int("width", width),
            iterations=_parse_int("iterations", iterations),
            seed=None if seed is None else _parse_int("seed", seed),
        )

    @property
    def label_digits(self) -> int:
        # Set ids are allocated at most once per cell, so width * iterations bounds them.
        return number_of_digits(self.width * self.iterations)
