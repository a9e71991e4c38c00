import random
import secrets
from typing import Optional, Protocol


class RandomSource(Protocol):
    def uniform_int(self, low: int, high_exclusive: int) -> int: ...

    def uniform_float01(self) -> float: ...

    def secure_uniform_int(self, low: int, high_exclusive: int) -> int: ...


class SystemRandomSource:
    """
    Process-wide random source shared by every request.

    Integer and float draws use a private Mersenne Twister (fast, seedable);
    `secure_uniform_int` goes to the OS CSPRNG through `secrets`.
    Every method is a single draw, so instances are safe to share
    between threads.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seeded = seed is not None
        self._rng = random.Random(seed)

    def uniform_int(self, low: int, high_exclusive: int) -> int:
        return self._rng.randrange(low, high_exclusive)

    def uniform_float01(self) -> float:
        return self._rng.random()

    def secure_uniform_int(self, low: int, high_exclusive: int) -> int:
        if high_exclusive <= low:
            raise ValueError(f"empty range [{low}, {high_exclusive})")
        return low + secrets.randbelow(high_exclusive - low)
