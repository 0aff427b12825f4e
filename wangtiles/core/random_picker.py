"""
Wang Autotile - Weighted Random Selection

RandomPicker draws weighted values with replacement, RandomTaker draws them
without replacement. Both share one process-wide random source unless a
random.Random instance is passed in.
"""

from __future__ import annotations

import random
from bisect import bisect_left
from typing import Generic, TypeVar

T = TypeVar("T")

# Seeded once from OS entropy
_global_random = random.Random()


def global_random() -> random.Random:
    """Process-wide random source shared by pickers created without an rng."""
    return _global_random


class RandomPicker(Generic[T]):
    """
    Picks random values, each weighted by the probability it was added with.

    Values are stored against the running sum of probabilities. If two
    entries end up with the same running sum, the later one replaces the
    earlier one.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else global_random()
        self._sum = 0.0
        self._thresholds: list[float] = []
        self._values: list[T] = []

    def add(self, value: T, probability: float = 1.0) -> None:
        if probability <= 0:
            return

        self._sum += probability
        if self._thresholds and self._thresholds[-1] == self._sum:
            self._values[-1] = value
        else:
            self._thresholds.append(self._sum)
            self._values.append(value)

    def is_empty(self) -> bool:
        return not self._thresholds

    @property
    def total(self) -> float:
        return self._sum

    def __len__(self) -> int:
        return len(self._thresholds)

    def pick(self) -> T:
        """
        Pick a value at random.

        Raises:
            IndexError: If nothing has been added
        """
        if self.is_empty():
            raise IndexError("pick from an empty RandomPicker")

        if len(self._values) == 1:
            return self._values[0]

        threshold = self._rng.random() * self._sum
        i = bisect_left(self._thresholds, threshold)
        if i == len(self._thresholds):
            i -= 1

        return self._values[i]

    def clear(self) -> None:
        self._sum = 0.0
        self._thresholds.clear()
        self._values.clear()


class RandomTaker(Generic[T]):
    """
    Takes random values, each weighted by the probability it was added with.
    Each added value can only be taken once.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else global_random()
        self._sum = 0.0
        self._entries: list[tuple[T, float]] = []

    def add(self, value: T, probability: float = 1.0) -> None:
        if probability <= 0:
            return

        self._sum += probability
        self._entries.append((value, probability))

    def is_empty(self) -> bool:
        return not self._entries

    @property
    def total(self) -> float:
        return self._sum

    def __len__(self) -> int:
        return len(self._entries)

    def take(self) -> T:
        """
        Remove and return a value at random.

        Raises:
            IndexError: If nothing is left to take
        """
        if self.is_empty():
            raise IndexError("take from an empty RandomTaker")

        threshold = self._rng.random() * self._sum

        total = 0.0
        i = len(self._entries) - 1
        while i > 0:
            total += self._entries[i][1]
            if total > threshold:
                break
            i -= 1

        # Swap the chosen entry to the end so removal is O(1)
        last = len(self._entries) - 1
        if i != last:
            self._entries[i], self._entries[last] = self._entries[last], self._entries[i]

        value, probability = self._entries.pop()
        self._sum -= probability
        return value

    def clear(self) -> None:
        self._sum = 0.0
        self._entries.clear()
