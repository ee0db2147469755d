# containerkit

Small container types, most of them with an explicit capacity. Each one checks its
arguments and raises an ordinary Python exception (`ValueError`, `IndexError`,
`KeyError`, `OverflowError`, `LookupError`, `EOFError`) when it is used wrongly.
The package has no dependencies outside the standard library.

## Installation

```
pip install containerkit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Names | Purpose |
| --- | --- | --- |
| `containerkit.array` | `FixedArray`, `compare_ints` | Immutable, non-empty array with bounds-checked `get` and a sorted copy |
| `containerkit.bounded_string` | `BoundedString` | Non-empty text no longer than its capacity: `split`, `concat`, `substring`, `update` |
| `containerkit.pair` | `Pair` | Frozen key/value pair; `is_null()` is true when either part is `None` |
| `containerkit.dictionary` | `BoundedDictionary` | Ordered key/value pairs with a fixed capacity; lookups find the earliest matching key |
| `containerkit.linked_list` | `SinglyLinkedList` | Append and pop at the end, indexed `get` |
| `containerkit.doubly_linked_list` | `DoublyLinkedList` | The same with a tail reference and `reversed()` iteration |
| `containerkit.binary_tree` | `BinaryTree`, `TreeNode` | Unbalanced binary search tree ordered by a comparison function; iterates in order |
| `containerkit.hash_map` | `HashMap`, `EntryState`, `simple_hash` | Open addressing with linear probing over `str` or `bytes` keys; doubles its table at 70% load |
| `containerkit.cursor` | `Cursor` | Bidirectional cursor over a sequence with `peek`, `jump` and `before` |
| `containerkit.circular_queue` | `CircularQueue` | Fixed-capacity FIFO queue |
| `containerkit.stack` | `Stack` | Fixed-capacity LIFO stack |
| `containerkit.vector` | `Vector` | Growable array whose capacity doubles when full and halves after removals (while above four) |
| `containerkit.common` | `read_line`, `parse_unsigned` | Prompted line input with a length limit, and strict 32-bit unsigned parsing |

## Examples

```python
from containerkit.array import FixedArray

arr = FixedArray([3, 1, 2])
arr.get(0)            # 3
list(arr.sorted())    # [1, 2, 3]
```

```python
from containerkit.bounded_string import BoundedString

s = BoundedString("a,b;;c", capacity=10)
s.split(",;")                          # ['a', 'b', 'c']
str(s.substring(2, 3))                 # 'b;;'
str(s.concat(BoundedString("!", 1), 8))  # 'a,b;;c!'
```

```python
from containerkit.pair import Pair
from containerkit.dictionary import BoundedDictionary

d = BoundedDictionary(Pair("one", 1), capacity=2)
d.append(Pair("two", 2))
d.get("two").value    # 2
"one" in d            # True
print(d.format_items(), end="")
# one : 1
# two : 2
```

```python
from containerkit.hash_map import HashMap

m = HashMap(capacity=4)
m.insert("apple", 1)
m.get("apple")        # 1
m.delete("apple")
m.get("apple")        # None
len(m)                # 0
```

```python
from containerkit.binary_tree import BinaryTree

tree = BinaryTree(cmp=lambda a, b: (a > b) - (a < b))
for value in (10, 5, 15):
    tree.insert(value)
tree.search(5).data   # 5
tree.delete(10)
list(tree)            # [5, 15]
```

```python
from containerkit.doubly_linked_list import DoublyLinkedList

lst = DoublyLinkedList()
for value in ("x", "y", "z"):
    lst.append(value)
list(reversed(lst))   # ['z', 'y', 'x']
lst.pop()             # 'z'
```

```python
from containerkit.circular_queue import CircularQueue

q = CircularQueue(capacity=2)
q.enqueue("a")
q.enqueue("b")
q.is_full()           # True
q.peek_back()         # 'b'
q.dequeue()           # 'a'
```

```python
from containerkit.vector import Vector

v = Vector(capacity=1)
v.push_back(1)
v.push_back(2)
v.capacity            # 2
v.search(2, lambda element, key: element == key)  # 2
v.pop_index(0)        # 1
```

```python
from containerkit.cursor import Cursor

cur = Cursor([10, 20, 30])
cur.next()            # 10
cur.peek(1)           # 30
cur.before()          # 10
```

```python
from containerkit.common import parse_unsigned

parse_unsigned("42")  # 42
parse_unsigned("-1")  # raises ValueError
```

## Things to know

- `clear()` on `CircularQueue` and `Stack` releases the container: further use raises
  `ValueError`. On `BoundedDictionary`, `Vector` and `BoundedString` it also drops the
  capacity (or content) to zero. `HashMap.clear()` keeps the capacity.
- `HashMap` hashes the UTF-8 bytes of a key and stops at the first NUL character; keys
  that are neither `str` nor `bytes` raise `TypeError` on insert.
- `BinaryTree` does no balancing; equal values go to the right.
- This is a library only: it installs no command-line program.