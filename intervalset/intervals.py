#!/usr/bin/env python3
"""
Normalized sets of pairwise disjoint intervals, closed under union, intersection, complement,
difference and symmetric difference.
"""
import logging
import functools

from . import formatting
from .interval import Interval, RealInterval, IntegerInterval

logger = logging.getLogger(__name__)


@functools.total_ordering
class DisjointIntervalSet(object):
    """
    Sorted sequence of non-empty intervals, none of which overlap or are adjacent.

    Every operation returns a new, normalized set. In-place mutators replace the content of
    self with the result of the corresponding operation.

    The class attribute *interval_class* is used to build intervals (e.g., complements) and
    decides whether operations requiring an infinity sentinel are available. Non-empty sets
    use the class of their stored intervals instead.
    """
    interval_class = Interval

    def __init__(self, *intervals, **kwargs):
        '''If keyword *sane* is True (default: False), intervals are taken as normalized.'''
        for i in intervals:
            if not isinstance(i, Interval):
                raise TypeError("Only Interval objects can be stored, got {!r}.".format(i))
        self._data = [i for i in intervals if not i.is_empty()]
        if not kwargs.get('sane', False):
            self._enforce_order()
            self._enforce_no_overlap()

    @classmethod
    def from_intervals(cls, intervals):
        """Build set from any finite iterable of intervals."""
        return cls(*intervals)

    @classmethod
    def point(cls, value):
        return cls(cls.interval_class.point(value))

    @classmethod
    def unbounded(cls):
        return cls(cls.interval_class.unbounded())

    @classmethod
    def from_string(cls, text):
        """Parse set expression *text*, e.g. '[0,5) U (10,20]'."""
        from .parser import parse_set
        return parse_set(text, set_class=cls)

    def _enforce_order(self):
        '''Enforces the order of all entries in internal storage'''
        self._data.sort()

    def _enforce_no_overlap(self, start_at=0):
        '''Enforces that no entries overlap or touch in internal storage, requires order'''
        if len(self._data) <= start_at + 1:
            return
        count = len(self._data)
        merged = self._data[:start_at + 1]
        for interval in self._data[start_at + 1:]:
            hull = merged[-1].hull(interval)
            if hull is None:
                merged.append(interval)
            else:
                # interval overlaps or touches the previous one, thus combine both
                merged[-1] = hull
        self._data = merged
        if logger.isEnabledFor(logging.DEBUG) and count != len(merged):
            logger.debug("merged %d intervals into %d components", count, len(merged))

    def _interval_type(self):
        '''Class of the stored intervals, or *interval_class* if empty.'''
        if self._data:
            return type(self._data[0])
        return self.interval_class

    def _coerce(self, other):
        if isinstance(other, DisjointIntervalSet):
            return other
        if isinstance(other, Interval):
            return self.__class__(other)
        return None

    # Queries
    def is_empty(self):
        return not self._data

    def size(self):
        '''Number of components.'''
        return len(self._data)

    component_count = size

    def components(self):
        '''Returns list of components in ascending order'''
        return list(self._data)

    def front(self):
        return self._data[0]

    def back(self):
        return self._data[-1]

    def contains(self, needle):
        """
        Return True if *needle* (a value or an interval) is contained in this set.

        An interval is only contained if a single component covers it. Values are located by
        binary search over the components' upper bounds.
        """
        if isinstance(needle, Interval):
            if needle.is_empty():
                return True
            return any(needle.subset_of(c) for c in self._data)

        # first component with upper bound >= needle
        low, high = 0, len(self._data)
        while low < high:
            middle = (low + high) // 2
            if self._data[middle].upper_bound() < needle:
                low = middle + 1
            else:
                high = middle
        return low < len(self._data) and self._data[low].contains(needle)

    def subset_of(self, other):
        other = self._coerce(other)
        return all(other.contains(c) for c in self._data)

    def superset_of(self, other):
        return self._coerce(other).subset_of(self)

    def disjoint_from(self, other):
        return self.intersect(other).is_empty()

    def overlaps(self, other):
        return not self.disjoint_from(other)

    # Boolean algebra
    def unite(self, other):
        """Return union of both sets."""
        other = self._coerce(other)
        if other.is_empty():
            return self.__class__(*self._data, sane=True)
        if self.is_empty():
            return self.__class__(*other._data, sane=True)
        return self.__class__(*(self._data + other._data))

    def intersect(self, other):
        """
        Return intersection of both sets.

        Both component lists are swept in parallel, always advancing the component that
        ends first, so only pairs that can overlap get intersected.
        """
        other = self._coerce(other)
        result = []
        i = j = 0
        while i < len(self._data) and j < len(other._data):
            a, b = self._data[i], other._data[j]
            c = a.intersect(b)
            if not c.is_empty():
                result.append(c)
            if (a.upper_bound() < b.upper_bound() or
                    (a.upper_bound() == b.upper_bound() and not a.is_right_closed())):
                i += 1
            else:
                j += 1
        return self.__class__(*result)

    def _complement(self, interval_type, operation='complement()'):
        interval_type.require_infinity(operation)
        if self.is_empty():
            return self.__class__(interval_type.unbounded(), sane=True)

        infinity = interval_type.infinity
        result = []
        first = self._data[0]
        if first.lower_bound() != -infinity:
            result.append(interval_type(
                -infinity, first.lower_bound(), False, not first.is_left_closed()))
        result.extend(self._gaps(interval_type))
        last = self._data[-1]
        if last.upper_bound() != infinity:
            result.append(interval_type(
                last.upper_bound(), infinity, not last.is_right_closed(), False))
        return self.__class__(*result, sane=True)

    def complement(self):
        """Return all values not in this set. Requires an infinity sentinel."""
        return self._complement(self._interval_type())

    def difference(self, other):
        """Return all values in self but not in *other*. Requires an infinity sentinel."""
        other = self._coerce(other)
        return self.intersect(other._complement(self._interval_type(), 'difference()'))

    def symmetric_difference(self, other):
        """Return all values in exactly one of both sets. Requires an infinity sentinel."""
        other = self._coerce(other)
        self._interval_type().require_infinity('symmetric_difference()')
        return self.unite(other).difference(self.intersect(other))

    # Analytics
    def span(self):
        """Return the interval from the lowest to the highest value, keeping end closures."""
        if self.is_empty():
            return self.interval_class.empty()
        first, last = self._data[0], self._data[-1]
        return type(first)(first.lower_bound(), last.upper_bound(),
                           first.is_left_closed(), last.is_right_closed())

    def _gaps(self, interval_type):
        return [interval_type(left.upper_bound(), right.lower_bound(),
                              not left.is_right_closed(), not right.is_left_closed())
                for left, right in zip(self._data, self._data[1:])]

    def gaps(self):
        '''Returns set of the holes between consecutive components'''
        return self.__class__(*self._gaps(self._interval_type()), sane=True)

    def measure(self):
        '''Returns sum of component lengths'''
        return sum(c.length() for c in self._data)

    def gap_measure(self):
        return self.gaps().measure()

    def density(self):
        """
        Return measure relative to the length of the span.

        Empty sets have a density of 0, sets whose span has no length (single points) of 1.
        """
        if self.is_empty():
            return 0.0
        span_length = self.span().length()
        if span_length == 0:
            return 1.0
        return self.measure() / span_length

    # Mutators
    def insert(self, *intervals):
        """Add *intervals* to this set."""
        self._data = self.unite(self.__class__(*intervals))._data
        return self

    def add(self, lower, upper):
        '''Adds closed interval [lower, upper]'''
        return self.insert(self._interval_type().closed(lower, upper))

    def subtract(self, other):
        """Remove all values of *other* (a set or an interval) from this set."""
        self._data = self.difference(other)._data
        return self

    remove = subtract

    def erase(self, interval):
        '''Removes component equal to *interval*, returns number of removed components'''
        try:
            self._data.remove(interval)
        except ValueError:
            return 0
        return 1

    def clear(self):
        self._data = []
        return self

    def coalesce(self):
        self._enforce_order()
        self._enforce_no_overlap()
        return self

    # Functional helpers
    def filter(self, predicate):
        '''Returns set of all components for which *predicate* is True'''
        return self.__class__(*[c for c in self._data if predicate(c)], sane=True)

    def map(self, function):
        return self.__class__(*[function(c) for c in self._data])

    def for_each(self, action):
        for c in self._data:
            action(c)

    # Operators
    def __or__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.unite(other)

    def __and__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.symmetric_difference(other)

    def __invert__(self):
        return self.complement()

    def __ior__(self, other):
        self._data = (self | other)._data
        return self

    def __iand__(self, other):
        self._data = (self & other)._data
        return self

    def __isub__(self, other):
        self._data = (self - other)._data
        return self

    def __ixor__(self, other):
        self._data = (self ^ other)._data
        return self

    def __eq__(self, other):
        if not isinstance(other, DisjointIntervalSet):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other):
        if not isinstance(other, DisjointIntervalSet):
            return NotImplemented
        return self._data < other._data

    __hash__ = None

    def __contains__(self, needle):
        return self.contains(needle)

    def __iter__(self):
        return iter(self._data)

    def __reversed__(self):
        return reversed(self._data)

    def __len__(self):
        return len(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __bool__(self):
        return bool(self._data)

    def __repr__(self):
        return '{}({})'.format(self.__class__.__name__, ', '.join(repr(d) for d in self._data))

    def __str__(self):
        return formatting.format_set(self)


class RealSet(DisjointIntervalSet):
    interval_class = RealInterval


class IntegerSet(DisjointIntervalSet):
    interval_class = IntegerInterval
