"""
Random sources used for every draw made while generating passwords.

Generation code never touches a global RNG directly; it takes a RandomSource
so tests can substitute a seeded one.
"""

import random
import secrets
from typing import List, MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Uniform random integers in [0, bound)."""

    def random_int(self, bound: int) -> int:
        raise NotImplementedError

    @staticmethod
    def _check_bound(bound: int) -> None:
        if bound < 1:
            raise ValueError(f"bound must be >= 1, got {bound}")


class SecureRandomSource(RandomSource):
    """
    Cryptographically secure source backed by the OS CSPRNG.

    secrets.randbelow rejects out-of-range words instead of reducing them
    modulo the bound, so there is no modulo bias for any alphabet size.
    """

    def random_int(self, bound: int) -> int:
        self._check_bound(bound)
        return secrets.randbelow(bound)


class SeededRandomSource(RandomSource):
    """
    Deterministic source for tests and reproducible demos.

    Not suitable for real passwords.
    """

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def random_int(self, bound: int) -> int:
        self._check_bound(bound)
        return self._random.randrange(bound)


default_source = SecureRandomSource()


def pick(sequence: Sequence[T], source: RandomSource) -> T:
    """Pick one element uniformly at random."""
    return sequence[source.random_int(len(sequence))]


def shuffle(items: MutableSequence[T], source: RandomSource) -> None:
    """Shuffle in place with Fisher-Yates."""
    for i in range(len(items) - 1, 0, -1):
        j = source.random_int(i + 1)
        items[i], items[j] = items[j], items[i]


def draw(pool: str, count: int, source: RandomSource) -> List[str]:
    """Draw count characters from pool independently, with replacement."""
    return [pick(pool, source) for _ in range(count)]
