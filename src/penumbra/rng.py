from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Sequence

logger = logging.getLogger(__name__)


@dataclass
class RandomSource:
    """
    A thin wrapper around random.Random to:
    - keep each generation call on its own generator instance
    - support optional deterministic seeding for tests
    - provide the dice helpers used by the level generators

    Tests can subclass it and override the helpers to script exact sequences.
    """

    seed: int | str | None = None

    def __post_init__(self) -> None:
        if self.seed is not None:
            self._rng = random.Random(self.seed)
            logger.debug("Initialized RandomSource with deterministic seed=%s", self.seed)
        else:
            self._rng = random.Random()
            logger.debug("Initialized RandomSource with non-deterministic seed")

    def randint(self, a: int, b: int) -> int:
        """Uniform integer in [a, b], both inclusive."""
        return self._rng.randint(a, b)

    def random(self) -> float:
        return self._rng.random()

    def roll_dice(self, n: int, sides: int) -> int:
        """Sum of n dice with the given number of sides (each 1..sides)."""
        if n < 1 or sides < 1:
            raise ValueError("roll_dice requires n >= 1 and sides >= 1")
        return sum(self._rng.randint(1, sides) for _ in range(n))

    def coin_flip(self) -> bool:
        return self._rng.random() < 0.5

    def choice(self, seq: Sequence[Any]) -> Any:
        if not seq:
            raise ValueError("RandomSource.choice() received an empty sequence")
        return seq[self._rng.randrange(0, len(seq))]


__all__ = ["RandomSource"]
