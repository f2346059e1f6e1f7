import random
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

A = 16807
M = 0x7FFFFFFF  # 2^31-1

Coin = Callable[[], bool]

def pm_next(state: int) -> int:
    return (state * A) % M

def normalize_seed(seed: int) -> int:
    # 0 and multiples of M are fixed points of the Park–Miller step.
    s = seed % M
    return s if s else 1

@dataclass
class PMRandom:
    state: int

    def __post_init__(self) -> None:
        self.state = normalize_seed(self.state)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def coin(self) -> bool:
        # Bit 15 of the state; the low bits of a multiplicative LCG are weak.
        return bool((self.next32() >> 15) & 1)

def system_seed() -> int:
    return random.SystemRandom().randrange(1, M)

def make_coin(seed: Optional[int] = None) -> Coin:
    """
    Production coin: a uniformly distributed boolean source.
    The same seed always replays the same maze.
    """
    return PMRandom(system_seed() if seed is None else seed).coin

class ScriptedCoins:
    """
    Deterministic coin for tests: returns the scripted outcomes in order.
    When the script runs out it either repeats `fill` or raises.
    """
    def __init__(self, outcomes: Iterable[bool], fill: Optional[bool] = None):
        self._it: Iterator[bool] = iter(outcomes)
        self.fill = fill
        self.drawn = 0

    def __call__(self) -> bool:
        try:
            v = next(self._it)
        except StopIteration:
            if self.fill is None:
                raise RuntimeError(f"scripted coin exhausted after {self.drawn} draws")
            v = self.fill
        self.drawn += 1
        return bool(v)
