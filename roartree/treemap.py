"""The full 64-bit set: iteration, bulk construction and set operators."""

from __future__ import annotations

import warnings

from sortedcontainers import SortedDict, SortedSet

from .core import TreemapBase
from .util import NonSortedIntegers, _check_u32, join


class TreemapIterator:
    """Iterator over the values of a treemap in ascending order.

    It knows how many values remain, so ``size_hint`` and ``len``-style
    hints stay exact while it is consumed.
    """

    def __init__(self, partitions):
        pairs = [(key, bitmap) for key, bitmap in partitions]
        self._remaining = sum(len(bitmap) for _, bitmap in pairs)
        self._values = (join(key, lo) for key, bitmap in pairs for lo in bitmap)

    def __iter__(self):
        return self

    def __next__(self):
        value = next(self._values)
        self._remaining = max(0, self._remaining - 1)
        return value

    def __length_hint__(self):
        return self._remaining

    def size_hint(self):
        """Return the lower and upper bound of the values still to come."""
        return self._remaining, self._remaining


class RoaringTreemap(TreemapBase):
    """A compressed set of unsigned 64-bit integers."""

    def __init__(self, values=None):
        super().__init__()
        if values is not None:
            self.extend(values)

    def __iter__(self):
        return TreemapIterator(self._map.items())

    def iter(self):
        """Return an iterator over the values in ascending order."""
        return TreemapIterator(self._map.items())

    def bitmaps(self):
        """Yield ``(partition, bitmap)`` pairs; the partition is the high 32 bits."""
        yield from self._map.items()

    @classmethod
    def from_bitmaps(cls, pairs):
        """Build a treemap from ``(partition, bitmap)`` pairs.

        A repeated partition replaces the one given before it.
        """
        treemap = cls()
        treemap._map = SortedDict(
            (_check_u32(key, "partition"), SortedSet(bitmap)) for key, bitmap in pairs
        )
        return treemap

    def extend(self, values):
        """Insert every value from an iterable."""
        for value in values:
            self.insert(value)

    @classmethod
    def from_sorted_iter(cls, values):
        """Build a treemap from strictly increasing values.

        Raises NonSortedIntegers if the values are not strictly increasing.
        """
        treemap = cls()
        treemap.append(values)
        return treemap

    def append(self, values):
        """Append strictly increasing values that all exceed the current maximum.

        Returns how many values were appended. On the first value that breaks
        the order, stops and raises NonSortedIntegers carrying how many were
        appended before it.
        """
        iterator = iter(values)
        try:
            first = next(iterator)
        except StopIteration:
            return 0
        current_max = self.max()
        if current_max is not None and first <= current_max:
            raise NonSortedIntegers(0)

        self._push_unchecked(first)
        previous = first
        count = 1
        for value in iterator:
            if value <= previous:
                raise NonSortedIntegers(count)
            self._push_unchecked(value)
            previous = value
            count += 1
        return count

    def __or__(self, other):
        if not isinstance(other, TreemapBase):
            return NotImplemented
        result = self.copy()
        result |= other
        return result

    def __ior__(self, other):
        if not isinstance(other, TreemapBase):
            return NotImplemented
        if other is self:
            return self
        for key, theirs in other._map.items():
            mine = self._map.get(key)
            if mine is None:
                self._map[key] = SortedSet(theirs)
            else:
                mine |= theirs
        return self

    def __and__(self, other):
        if not isinstance(other, TreemapBase):
            return NotImplemented
        result = self.copy()
        result &= other
        return result

    def __iand__(self, other):
        if not isinstance(other, TreemapBase):
            return NotImplemented
        if other is self:
            return self
        for key in list(self._map):
            theirs = other._map.get(key)
            if theirs is None:
                del self._map[key]
                continue
            mine = self._map[key]
            mine &= theirs
            if not mine:
                del self._map[key]
        return self

    def __sub__(self, other):
        if not isinstance(other, TreemapBase):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __isub__(self, other):
        if not isinstance(other, TreemapBase):
            return NotImplemented
        if other is self:
            self.clear()
            return self
        for key, theirs in other._map.items():
            mine = self._map.get(key)
            if mine is None:
                continue
            mine -= theirs
            if not mine:
                del self._map[key]
        return self

    def __xor__(self, other):
        if not isinstance(other, TreemapBase):
            return NotImplemented
        result = self.copy()
        result ^= other
        return result

    def __ixor__(self, other):
        if not isinstance(other, TreemapBase):
            return NotImplemented
        if other is self:
            self.clear()
            return self
        for key, theirs in other._map.items():
            mine = self._map.get(key)
            if mine is None:
                self._map[key] = SortedSet(theirs)
                continue
            mine ^= theirs
            if not mine:
                del self._map[key]
        return self

    def union_with(self, other):
        """Union in place with ``other``; deprecated in favour of ``|=``."""
        warnings.warn(
            "union_with is deprecated; use the |= operator",
            DeprecationWarning,
            stacklevel=2,
        )
        self |= other

    def intersect_with(self, other):
        """Intersect in place with ``other``; deprecated in favour of ``&=``."""
        warnings.warn(
            "intersect_with is deprecated; use the &= operator",
            DeprecationWarning,
            stacklevel=2,
        )
        self &= other

    def difference_with(self, other):
        """Remove the values of ``other`` in place; deprecated in favour of ``-=``."""
        warnings.warn(
            "difference_with is deprecated; use the -= operator",
            DeprecationWarning,
            stacklevel=2,
        )
        self -= other

    def symmetric_difference_with(self, other):
        """Replace with ``self XOR other``; deprecated in favour of ``^=``."""
        warnings.warn(
            "symmetric_difference_with is deprecated; use the ^= operator",
            DeprecationWarning,
            stacklevel=2,
        )
        self ^= other