"""The 64-bit integer set: partitions of 32-bit sets keyed by the high half."""

from __future__ import annotations

from sortedcontainers import SortedDict, SortedSet

from .util import U32_MAX, convert_range_to_inclusive, join, split


class TreemapBase:
    """A set of unsigned 64-bit integers stored as sorted 32-bit partitions."""

    __hash__ = None

    def __init__(self):
        self._map = SortedDict()

    def _values(self):
        for hi, bitmap in self._map.items():
            for lo in bitmap:
                yield join(hi, lo)

    def insert(self, value):
        """Add a value; return True if it was not already present."""
        hi, lo = split(value)
        bitmap = self._map.get(hi)
        if bitmap is None:
            bitmap = self._map[hi] = SortedSet()
        if lo in bitmap:
            return False
        bitmap.add(lo)
        return True

    def push(self, value):
        """Add a value only if it is above the maximum of its partition."""
        hi, lo = split(value)
        bitmap = self._map.get(hi)
        if bitmap is None:
            bitmap = self._map[hi] = SortedSet()
        if bitmap and bitmap[-1] >= lo:
            return False
        bitmap.add(lo)
        return True

    def _push_unchecked(self, value):
        """Add a value the caller knows to be above the current maximum."""
        hi, lo = split(value)
        if self._map:
            key, bitmap = self._map.peekitem(-1)
            if key == hi:
                bitmap.add(lo)
                return
            if key > hi:
                raise ValueError("last partition key is greater than the value's")
        self._map[hi] = SortedSet([lo])

    def remove(self, value):
        """Remove a value; return True if it was present."""
        hi, lo = split(value)
        bitmap = self._map.get(hi)
        if bitmap is None or lo not in bitmap:
            return False
        bitmap.remove(lo)
        if not bitmap:
            del self._map[hi]
        return True

    def remove_range(self, start=None, end=None, end_inclusive=False):
        """Remove every value in the range and return how many were removed."""
        bounds = convert_range_to_inclusive(start, end, end_inclusive)
        if bounds is None:
            return 0
        start_key, start_index = split(bounds[0])
        end_key, end_index = split(bounds[1])

        removed = 0
        emptied = []
        for key in list(self._map.irange(start_key, end_key)):
            bitmap = self._map[key]
            low = start_index if key == start_key else 0
            high = end_index if key == end_key else U32_MAX
            i = bitmap.bisect_left(low)
            j = bitmap.bisect_right(high)
            removed += j - i
            del bitmap[i:j]
            if not bitmap:
                emptied.append(key)
        for key in emptied:
            del self._map[key]
        return removed

    def __contains__(self, value):
        try:
            hi, lo = split(value)
        except (ValueError, TypeError):
            return False
        bitmap = self._map.get(hi)
        return bitmap is not None and lo in bitmap

    def clear(self):
        """Remove every value."""
        self._map.clear()

    def is_empty(self):
        """Return True if the set holds no values."""
        return all(not bitmap for bitmap in self._map.values())

    def __len__(self):
        return sum(len(bitmap) for bitmap in self._map.values())

    def __bool__(self):
        return not self.is_empty()

    def min(self):
        """Return the smallest value, or None if the set is empty."""
        for hi, bitmap in self._map.items():
            if bitmap:
                return join(hi, bitmap[0])
        return None

    def max(self):
        """Return the largest value, or None if the set is empty."""
        for hi in reversed(self._map):
            bitmap = self._map[hi]
            if bitmap:
                return join(hi, bitmap[-1])
        return None

    def rank(self, value):
        """Return how many values are less than or equal to ``value``."""
        hi, lo = split(value)
        total = 0
        for key in self._map.irange(maximum=hi):
            bitmap = self._map[key]
            total += bitmap.bisect_right(lo) if key == hi else len(bitmap)
        return total

    def select(self, n):
        """Return the n-th smallest value (from 0), or None if there is none."""
        if n < 0:
            raise ValueError("n must not be negative")
        for key, bitmap in self._map.items():
            size = len(bitmap)
            if size > n:
                return join(key, bitmap[n])
            n -= size
        return None

    def copy(self):
        """Return an independent copy of this set."""
        clone = type(self)()
        clone._map = SortedDict(
            (key, SortedSet(bitmap)) for key, bitmap in self._map.items()
        )
        return clone

    def __copy__(self):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, TreemapBase):
            return NotImplemented
        return self._map == other._map

    def __repr__(self):
        size = len(self)
        if size < 16:
            return f"RoaringTreemap<{list(self._values())!r}>"
        return f"RoaringTreemap<{size} values between {self.min()} and {self.max()}>"

    def _pairs(self, other):
        keys = sorted(set(self._map) | set(other._map))
        for key in keys:
            yield self._map.get(key), other._map.get(key)

    def is_disjoint(self, other):
        """Return True if the two sets share no value."""
        return all(
            mine.isdisjoint(theirs)
            for mine, theirs in self._pairs(other)
            if mine is not None and theirs is not None
        )

    def is_subset(self, other):
        """Return True if every value of this set is in ``other``."""
        for mine, theirs in self._pairs(other):
            if mine is None:
                continue
            if theirs is None or not mine.issubset(theirs):
                return False
        return True

    def is_superset(self, other):
        """Return True if every value of ``other`` is in this set."""
        return other.is_subset(self)