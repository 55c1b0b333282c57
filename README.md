# roartree

`roartree` provides `RoaringTreemap`, a set of unsigned 64-bit integers.
Each value is split into a high 32-bit partition key and a low 32-bit part.
Each partition keeps its low parts in a sorted set, and the partitions are kept in key order.

## Installation

```
pip install roartree
```

## Modules

- `roartree.treemap`: `RoaringTreemap` and `TreemapIterator`.
- `roartree.core`: `TreemapBase`. It holds the single-value operations, the queries and the comparisons that `RoaringTreemap` inherits.
- `roartree.util`: `split`, `join`, `convert_range_to_inclusive`, and the `NonSortedIntegers` exception.

## Usage

```python
from roartree.treemap import RoaringTreemap

rb = RoaringTreemap([2, 3, 5, 7])
rb.insert(11)          # True: the value was new
rb.insert(11)          # False: it was already there
11 in rb               # True
len(rb)                # 5
rb.min(), rb.max()     # (2, 11)
rb.rank(5)             # 3: the number of values <= 5
rb.select(0)           # 2: the value at index 0, or None past the end
list(rb)               # [2, 3, 5, 7, 11]
rb.remove(11)          # True
rb.copy() == rb        # True
```

Values must be integers in `0 .. 2**64 - 1`. A value outside that range raises `ValueError`, and a value that is not an `int` raises `TypeError`.

`repr()` lists the values when there are fewer than 16 of them. For larger sets it gives the count, the minimum and the maximum.

`push(value)` adds a value only when it is greater than the largest value already in that value's 32-bit partition. It returns whether the value was added.

Iterating a treemap, or calling `rb.iter()`, returns a `TreemapIterator`. The values come out in ascending order. `size_hint()` returns `(remaining, remaining)`, and the count of remaining values stays exact while the iterator is consumed.

### Set operations

The operators return new treemaps. The in-place forms change the left-hand treemap.

```python
a = RoaringTreemap(range(1, 4))
b = RoaringTreemap(range(3, 6))

a | b   # union
a & b   # intersection
a - b   # difference
a ^ b   # symmetric difference

a |= b
a.is_subset(b), a.is_superset(b), a.is_disjoint(b)
```

`union_with`, `intersect_with`, `difference_with` and `symmetric_difference_with` do the same work as the in-place operators. Each of them emits a `DeprecationWarning`.

### Sorted input

`from_sorted_iter` and `append` take values in strictly increasing order, and every value must be greater than the current maximum. `append` returns the number of values it added.

If a value breaks that order, `NonSortedIntegers` (a subclass of `ValueError`) is raised. Its `valid_until` attribute gives how many values were appended before the bad one.

```python
from roartree.util import NonSortedIntegers

rb = RoaringTreemap.from_sorted_iter(range(10))
try:
    rb.append([20, 21, 21])
except NonSortedIntegers as err:
    err.valid_until    # 2
```

### Ranges and partitions

```python
rb = RoaringTreemap(range(100))
rb.remove_range(10, 20)                       # removes [10, 20) and returns 10
rb.remove_range(0, 5, end_inclusive=True)     # removes [0, 5] and returns 6

for key, bitmap in rb.bitmaps():              # bitmap is a sortedcontainers.SortedSet
    ...

clone = RoaringTreemap.from_bitmaps(rb.bitmaps())
```

With `remove_range`, either bound may be left out. A missing start means 0, and a missing end means the largest 64-bit value.

`from_bitmaps` copies each bitmap it is given. When a partition key appears more than once, the later one replaces the earlier.

## What it does not do

Treemaps exist only in memory. The package has no binary serialization format and no way to save a treemap to a file or load one from a file.