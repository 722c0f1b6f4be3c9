"""Seedable pseudo-random source shared by all value generators."""

import random

from quickprop.common.exceptions import InvalidRangeError
from quickprop.constants import INT_MAX, INT_MIN


class RandomSource:
    """
    Explicit random source passed to every generator.

    Each source owns its own ``random.Random``, so independent runners never
    share state. When no seed is given one is drawn from system entropy and
    kept, which makes any run reproducible from the reported seed.
    """

    def __init__(self, seed: int | None = None):
        if seed is None:
            seed = random.SystemRandom().randrange(2**32)
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int:
        """Seed this source was created with."""
        return self._seed

    def random_range(self, low: int, high: int) -> int:
        """
        Return an integer ``v`` with ``low <= v < high``.

        Args:
            low: Inclusive lower bound
            high: Exclusive upper bound

        Raises:
            InvalidRangeError: If ``high <= low``
        """
        if high <= low:
            raise InvalidRangeError(
                f"Invalid range: upper bound {high} must be greater than lower bound {low}",
                low=low,
                high=high,
            )
        return self._random.randrange(low, high)

    def integer(self) -> int:
        """Return an integer from the full signed 64-bit range."""
        return self._random.randint(INT_MIN, INT_MAX)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed!r})"
