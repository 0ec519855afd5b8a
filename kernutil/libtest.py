"""Self-test driver for the bitmap, list, sorted list and hash table."""

from __future__ import annotations

import argparse
import re
import sys

from kernutil.bitmap import BitMap
from kernutil.hashtable import HashTable
from kernutil.linkedlist import List, SortedList

LIST_TEST_VECTOR = (9, 5, 7)
HASH_TEST_VECTOR = tuple(str(n) for n in range(15))
"""Enough entries to make the hash table grow."""

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def int_compare(x: int, y: int) -> int:
    """Three-way comparison of two integers: -1, 0 or 1."""
    if x < y:
        return -1
    if x == y:
        return 0
    return 1


def hash_int(key: int) -> int:
    """Hash an integer to its value as an unsigned 32-bit number."""
    return key & 0xFFFFFFFF


def hash_key(text: str) -> int:
    """Return the integer at the start of ``text``, or 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def lib_self_test() -> None:
    """Run the self tests of every library structure; raise AssertionError on failure."""
    BitMap(200).self_test()
    List().self_test(LIST_TEST_VECTOR)
    SortedList(int_compare).self_test(LIST_TEST_VECTOR)
    HashTable(hash_key, hash_int).self_test(HASH_TEST_VECTOR)


def main(argv: list[str] | None = None) -> int:
    """Run the library self tests and report the outcome."""
    parser = argparse.ArgumentParser(description="Run the library self tests.")
    parser.parse_args(argv)
    try:
        lib_self_test()
    except AssertionError as error:
        print(f"Library self-test failed: {error}", file=sys.stderr)
        return 1
    print("Library self-test passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())