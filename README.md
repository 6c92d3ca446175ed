# txbutil

This is a small library of general-purpose helpers written in plain Python. It has no runtime dependencies.

## Contents

| Module | What it provides |
| --- | --- |
| `txbutil.log2` | `uint32_log2(v)` returns the floor of log base 2 of a 32-bit unsigned integer. Zero yields 255. Values outside the 32-bit unsigned range raise `ValueError`, and non-integers raise `TypeError`. |
| `txbutil.md5` | The `MD5` class hashes incrementally through `update`, `finalize`, `digest`, `hexdigest` and `reset`. The one-shot helpers `md5_bytes`, `md5_string` and `md5_file` return the 16-byte digest. |
| `txbutil.permute` | `permute_next(ints)` advances a list in place to its next lexicographic permutation. It returns `False` when no permutation is left. `permutations(items)` yields the given arrangement and then every permutation that follows it. |
| `txbutil.strutil` | `split_string` splits text at runs of separator characters and never yields empty pieces. The module also has `count_char`, `pos_char`, `equal_string`, `less_than_string` and `greater_than_string`. The three comparisons return `False` if either argument is `None`. |
| `txbutil.readstream` | `StringReadStream` reads a string one character at a time. It offers `getc`, `ungetc`, `peekc`, an fgets-like `gets`, `seek`, `skip`, `rewind`, `clone` and `from_file`. |
| `txbutil.linkedlist` | `LinkedList` holds payloads in order. You can add and remove them at either end. |
| `txbutil.fifo` | `Queue` is a first-in, first-out queue. |
| `txbutil.keyedlist` | `KeyedList` keeps unique keys in order using a comparison function you supply, and it has a read position. Failures raise `KeyedListError`. |
| `txbutil.dynarray` | `DynamicArray` is an array indexed by position. Its capacity doubles on demand, and the default capacity is 512. |

## Installation

Install the package with pip. The tests use pytest and hypothesis, which are available through the `test` extra.

## Examples

```python
from txbutil.log2 import uint32_log2
from txbutil.md5 import MD5, md5_string
from txbutil.permute import permutations, permute_next
from txbutil.strutil import split_string, pos_char
from txbutil.readstream import StringReadStream
from txbutil.fifo import Queue

uint32_log2(1024)                     # 10

md5_string("abc").hex()               # '900150983cd24fb0d6963f7d28e17f72'
h = MD5(b"ab")
h.update(b"c")
h.finalize()
h.hexdigest()                         # same digest as above

ints = [0, 1, 2]
permute_next(ints)                    # True, ints is now [0, 2, 1]
len(list(permutations(range(4))))     # 24

split_string("and, now, for, something! else?", " ,?")
# ['and', 'now', 'for', 'something!', 'else']
pos_char("this not that", 1, "t")     # 7

rs = StringReadStream("this is a test\nanother line\n")
rs.gets(255)                          # 'this is a test\n'
rs.getc()                             # 'a'

q = Queue()
q.enqueue("one")
q.enqueue("two")
q.dequeue()                           # 'one'
len(q)                                # 1
```

## Behaviour worth knowing

- `StringReadStream` returns `None` from `getc` and `peekc` at the end of the text. `at_end()` becomes true only after a read has gone past the end. `gets` returns `""` when nothing is left. `seek` and `skip` raise `ValueError` if the target lies outside the text.
- Removing from or peeking into an empty `LinkedList` or `Queue` raises `IndexError`.
- `DynamicArray` allows reads of any slot within its capacity. A slot that was never written returns `None`. A read beyond the capacity raises `IndexError`. `len()` is one more than the highest index that has been written.

## Keyed lists

```python
from txbutil.keyedlist import KeyedList

def compare(a, b):
    return (a > b) - (a < b)

kl = KeyedList(compare)
kl.insert(2, "two")
kl.insert(1, "one")
kl.get_first()                        # (1, 'one'), positions the list
kl.get_next()                         # (2, 'two')
kl.update(2, "TWO")                   # the key must match the positioned item
list(kl)                              # [(1, 'one'), (2, 'TWO')]
```

When you insert or delete an item, the position is cleared.

## What it does not do

This is a library only. It provides no command-line program.