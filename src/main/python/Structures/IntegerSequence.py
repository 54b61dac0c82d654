import logging
from typing import Iterable, Optional, Union

import numpy as np

logger = logging.getLogger(__name__)


class IntegerSequence:
    """
    A growable sequence of signed integers with a fixed catalog of
    positional, search, statistics and generation operations.

    The sequence can also be *absent* (``None``), which is a different state
    from being empty. Only reset_from_fractional(None) produces it; queries
    then answer as if the sequence were empty.
    """

    def __init__(self, rng: Union[np.random.Generator, int, None] = None):
        self._values: Optional[list[int]] = []
        # Accepts a Generator or anything default_rng() takes as a seed
        self._rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)

    def _present(self) -> list[int]:
        # Mutations bring an absent sequence back as an empty one
        if self._values is None:
            self._values = []
        return self._values

    def is_absent(self) -> bool:
        return self._values is None

    def copy(self) -> Optional[list[int]]:
        """
        Returns an independent copy of the values, or None if absent.
        """
        if self._values is None:
            return None
        return list(self._values)

    def size(self) -> int:
        if self._values is None:
            return 0
        return len(self._values)

    def append(self, value: int) -> None:
        self._present().append(value)

    def remove_all_of(self, value: int) -> None:
        """
        Removes every occurrence of value. Survivors keep their relative order.
        """
        if self._values is None:
            return
        self._values = [v for v in self._values if v != value]

    def insert_at(self, value: int, position: int) -> None:
        """
        Inserts value so that it ends up at the given position.
        Negative positions insert at the front, positions past the end append.
        """
        values = self._present()
        if position < 0:
            position = 0
        elif position > len(values):
            position = len(values)

        values.insert(position, value)

    def remove_at(self, position: int) -> None:
        """
        Removes the element at position. Out-of-range positions are ignored.
        """
        # Python lists accept negative indexes, so they are rejected explicitly.
        if self._values is None or position < 0 or position >= len(self._values):
            return
        del self._values[position]

    def reset_from_fractional(self, values: Optional[Iterable[float]]) -> None:
        """
        Replaces the contents with the truncated integer part of each value.
        Passing None leaves the sequence absent rather than empty.
        NaN raises ValueError and infinities raise OverflowError; the
        contents are left untouched in both cases.
        """
        if values is None:
            logger.debug("Integer sequence reset to absent")
            self._values = None
            return

        self._values = [int(v) for v in values]
        logger.debug("Integer sequence reset with %d values", len(self._values))

    def normalize_signs(self) -> None:
        if self._values is None:
            return
        for i, value in enumerate(self._values):
            if value < 0:
                self._values[i] = -value

    def sort_ascending(self) -> None:
        """
        Bubble sort, in place.
        """
        if self._values is None:
            return
        values = self._values
        n = len(values)
        for i in range(n - 1):
            swapped = False
            for j in range(n - 1 - i):
                if values[j] > values[j + 1]:
                    values[j], values[j + 1] = values[j + 1], values[j]
                    swapped = True
            if not swapped:
                break

    def count_occurrences(self, value: int) -> int:
        count = 0
        for v in self._values or []:
            if v == value:
                count += 1
        return count

    def find_positions(self, value: int) -> list[int]:
        """
        Returns the ascending positions holding value, or an empty list.
        """
        return [i for i, v in enumerate(self._values or []) if v == value]

    def range(self) -> list[int]:
        """
        Returns [minimum, maximum], or an empty list when there are no values.
        """
        if not self._values:
            return []

        minimum = maximum = self._values[0]
        for value in self._values[1:]:
            if value < minimum:
                minimum = value
            if value > maximum:
                maximum = value
        return [minimum, maximum]

    def histogram(self) -> dict[int, int]:
        histogram: dict[int, int] = {}
        for value in self._values or []:
            if value in histogram:
                histogram[value] += 1
            else:
                histogram[value] = 1
        return histogram

    def count_repeated_values(self) -> int:
        """
        Number of distinct values appearing more than once.
        """
        return sum(1 for count in self.histogram().values() if count > 1)

    def equals_ordered(self, other: Optional[list[int]]) -> bool:
        if self._values is None or other is None:
            return False
        if len(self._values) != len(other):
            return False

        for mine, theirs in zip(self._values, other):
            if mine != theirs:
                return False
        return True

    def equals_as_multiset(self, other: Optional[list[int]]) -> bool:
        """
        True when both sides hold the same values with the same
        multiplicities, in any order. Two absent sequences are equal.
        """
        if self._values is None and other is None:
            return True
        if self._values is None or other is None:
            return False
        if len(self._values) != len(other):
            return False

        used = [False] * len(other)
        for value in self._values:
            for j, candidate in enumerate(other):
                if not used[j] and candidate == value:
                    used[j] = True
                    break
            else:
                return False
        return True

    def regenerate(self, count: int, minimum: int, maximum: int) -> None:
        """
        Replaces the contents with count integers drawn uniformly
        from [minimum, maximum], both ends included.
        """
        if count < 0:
            raise ValueError(f"Count cannot be negative: {count}")
        if minimum > maximum:
            raise ValueError(f"Minimum {minimum} is greater than maximum {maximum}")

        draws = self._rng.integers(minimum, maximum, size=count, endpoint=True)
        self._values = [int(v) for v in draws]
        logger.debug("Integer sequence regenerated with %d values in [%d, %d]", count, minimum, maximum)
