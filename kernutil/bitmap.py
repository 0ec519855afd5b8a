"""A fixed-size bitmap for tracking allocation of numbered resources."""

from __future__ import annotations

import sys

BITS_IN_BYTE = 8
BITS_IN_WORD = 4 * BITS_IN_BYTE


def _trunc_div(n: int, s: int) -> int:
    quotient = abs(n) // abs(s)
    return quotient if (n >= 0) == (s >= 0) else -quotient


def div_round_down(n: int, s: int) -> int:
    """Divide, rounding toward zero."""
    return _trunc_div(n, s)


def div_round_up(n: int, s: int) -> int:
    """Divide, adding one when the remainder (truncated division) is positive."""
    quotient = _trunc_div(n, s)
    remainder = n - quotient * s
    return quotient + (1 if remainder > 0 else 0)


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise AssertionError(message)


class BitMap:
    """An array of bits, each of which can be set, cleared and tested.

    Useful for managing allocation of disk sectors or memory pages: each
    bit says whether the corresponding item is in use.
    """

    def __init__(self, num_items: int) -> None:
        if num_items <= 0:
            raise ValueError("a bitmap needs at least one bit")
        self.num_bits = num_items
        self._bits = 0

    @property
    def num_words(self) -> int:
        """Words of storage a word-based representation would need."""
        return div_round_up(self.num_bits, BITS_IN_WORD)

    def __len__(self) -> int:
        return self.num_bits

    def _check_index(self, which: int) -> None:
        if not 0 <= which < self.num_bits:
            raise IndexError(f"bit {which} out of range 0..{self.num_bits - 1}")

    def mark(self, which: int) -> None:
        """Set bit ``which``."""
        self._check_index(which)
        self._bits |= 1 << which

    def clear(self, which: int) -> None:
        """Clear bit ``which``."""
        self._check_index(which)
        self._bits &= ~(1 << which)

    def test(self, which: int) -> bool:
        """Return True if bit ``which`` is set."""
        self._check_index(which)
        return bool((self._bits >> which) & 1)

    def find_and_set(self) -> int | None:
        """Set the lowest clear bit and return its number, or None if all are set."""
        free = ~self._bits & ((1 << self.num_bits) - 1)
        if not free:
            return None
        which = (free & -free).bit_length() - 1
        self._bits |= 1 << which
        return which

    def num_clear(self) -> int:
        """Return how many bits are clear."""
        return self.num_bits - bin(self._bits).count("1")

    def format(self) -> str:
        """Return the listing of set bits that ``print`` writes."""
        listed = "".join(f"{i}, " for i in range(self.num_bits) if (self._bits >> i) & 1)
        return f"BitMap set:\n{listed}\n"

    def print(self) -> None:
        """Write the numbers of all set bits to standard output."""
        sys.stdout.write(self.format())

    def self_test(self) -> None:
        """Exercise the bitmap; it must be empty and at least a word long."""
        _check(self.num_bits >= BITS_IN_WORD, "bitmap must be at least one word long")
        _check(self.num_clear() == self.num_bits, "bitmap must start empty")
        _check(self.find_and_set() == 0, "first allocation must be bit 0")
        self.mark(31)
        _check(self.test(0) and self.test(31), "marked bits must test set")
        _check(self.find_and_set() == 1, "second allocation must be bit 1")
        self.clear(0)
        self.clear(1)
        self.clear(31)
        for i in range(self.num_bits):
            self.mark(i)
        _check(self.find_and_set() is None, "full bitmap must have no free bit")
        for i in range(self.num_bits):
            self.clear(i)