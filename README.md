# kernutil

Small data structures and host helpers of the kind a teaching operating
system kernel needs.

## Modules

- `kernutil.bitmap`: `BitMap(num_items)` is a fixed-size array of bits,
  for allocating disk sectors or memory pages. It has `mark`, `clear`,
  `test`, `find_and_set` (sets and returns the lowest clear bit, or `None`
  when every bit is set), `num_clear`, `format` and `print`. Out-of-range
  bit numbers raise `IndexError`. The module also has `div_round_up` and
  `div_round_down`.
- `kernutil.linkedlist`: `List` holds distinct items in order, with
  `append`, `prepend`, `front`, `remove_front`, `remove`, `is_in_list`,
  `is_empty` and `apply`. Adding an item that is already present raises
  `ValueError`. `SortedList(compare)` keeps its items in the order given
  by a three-way comparison function; `insert`, `append` and `prepend`
  all put an item in its sorted place.
- `kernutil.hashtable`: `HashTable(get_key, hash_func)` is a chained hash
  table that grows as items are added. Each item's key comes from
  `get_key` and the key's hash from `hash_func`. It has `insert`,
  `remove` (raises `KeyError` for a missing key), `find` (returns `None`
  for a missing key), `is_in_table`, `is_empty` and `apply`.
- `kernutil.debug`: `Debug(flags)` turns debug messages on or off by flag
  character; the flag `+` turns on all of them, and `None` turns off all.
  `message(flag, text)` prints `text` to standard error when the flag is
  enabled.
- `kernutil.sysdep`: thin helpers for files, Unix-domain datagram sockets,
  random numbers and process control on the host. Transfers that move
  fewer bytes than required raise `ShortTransferError`.
- `kernutil.libtest`: the comparison and hash helpers `int_compare`,
  `hash_int` and `hash_key`, and `lib_self_test`, which runs the built-in
  checks of every structure above.

Each structure also has `sanity_check` and `self_test` methods, which
raise `AssertionError` when something is wrong.

## Installation

```
pip install .
```

## Example

```python
from kernutil.bitmap import BitMap
from kernutil.linkedlist import SortedList
from kernutil.hashtable import HashTable
from kernutil.libtest import int_compare, hash_int, hash_key

pages = BitMap(64)
first = pages.find_and_set()      # 0
print(pages.num_clear())          # 63

queue = SortedList(int_compare)
for n in (9, 5, 7):
    queue.insert(n)
print(queue.remove_front())       # 5

table = HashTable(hash_key, hash_int)
table.insert("42")
print(table.find(42))             # "42"
```

## Self test

To run the built-in self tests of the bitmap, the list, the sorted list
and the hash table:

```
kernutil-selftest
```

The command prints whether the checks passed and exits with status 0
when every check passes, 1 otherwise.

## What it does not do

The lists and the hash table do no locking of their own; callers that
share them between threads must provide mutual exclusion. The socket
helpers use Unix-domain sockets and so need a POSIX host.

## Running the tests

```
pip install .[test]
pytest
```