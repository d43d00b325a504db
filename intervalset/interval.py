#!/usr/bin/env python3
"""Single interval over a totally ordered value type, with open or closed ends."""
import math
import functools

from . import formatting


class CapabilityError(TypeError):
    """Raised if an operation needs a capability the interval's value type does not offer."""

    def __init__(self, interval_class, operation, capability='an infinity sentinel'):
        self.interval_class = interval_class
        self.operation = operation
        self.capability = capability
        super(CapabilityError, self).__init__(
            "{} requires {}, which {} does not provide.".format(
                operation, capability, interval_class.__name__))


INFINITY_LITERALS = {
    'inf': 1, '+inf': 1, 'infinity': 1, '+infinity': 1, '∞': 1, '+∞': 1,
    '-inf': -1, '-infinity': -1, '-∞': -1}


@functools.total_ordering
class Interval(object):
    """
    Immutable interval from *lower* to *upper*, each end closed or open.

    All empty intervals are normalized to one canonical state, in which both bounds are None
    and both ends are open. This happens if *lower* > *upper*, or if *lower* == *upper* and
    not both ends are closed.

    The class attribute *infinity* is the positive infinity sentinel of the value type. It is
    None for value types without one (e.g., strings or dates), in which case unbounded
    constructors and everything depending on them raise CapabilityError.
    """
    infinity = None

    def __init__(self, lower=None, upper=None, left_closed=True, right_closed=True):
        if (lower is None or upper is None or lower > upper or
                (lower == upper and not (left_closed and right_closed))):
            lower = upper = None
            left_closed = right_closed = False
        self._lower = lower
        self._upper = upper
        self._left_closed = bool(left_closed)
        self._right_closed = bool(right_closed)

    # Named constructors
    @classmethod
    def closed(cls, lower, upper):
        '''[lower, upper]'''
        return cls(lower, upper, True, True)

    @classmethod
    def open(cls, lower, upper):
        '''(lower, upper)'''
        return cls(lower, upper, False, False)

    @classmethod
    def left_open(cls, lower, upper):
        '''(lower, upper]'''
        return cls(lower, upper, False, True)

    @classmethod
    def right_open(cls, lower, upper):
        '''[lower, upper)'''
        return cls(lower, upper, True, False)

    @classmethod
    def point(cls, value):
        return cls(value, value, True, True)

    @classmethod
    def empty(cls):
        '''Return the canonical empty interval.'''
        return cls()

    @classmethod
    def has_infinity(cls):
        return cls.infinity is not None

    @classmethod
    def require_infinity(cls, operation):
        """Raise CapabilityError if *operation* can not be done without an infinity sentinel."""
        if not cls.has_infinity():
            raise CapabilityError(cls, operation)

    @classmethod
    def unbounded(cls):
        '''(-inf, inf)'''
        cls.require_infinity('unbounded()')
        return cls(-cls.infinity, cls.infinity, False, False)

    @classmethod
    def at_least(cls, lower):
        '''[lower, inf)'''
        cls.require_infinity('at_least()')
        return cls(lower, cls.infinity, True, False)

    @classmethod
    def at_most(cls, upper):
        '''(-inf, upper]'''
        cls.require_infinity('at_most()')
        return cls(-cls.infinity, upper, False, True)

    @classmethod
    def greater_than(cls, lower):
        '''(lower, inf)'''
        cls.require_infinity('greater_than()')
        return cls(lower, cls.infinity, False, False)

    @classmethod
    def less_than(cls, upper):
        '''(-inf, upper)'''
        cls.require_infinity('less_than()')
        return cls(-cls.infinity, upper, False, False)

    @classmethod
    def parse_value(cls, text):
        """Convert textual bound *text* to a value of this interval's type."""
        return text.strip()

    # Queries
    def is_empty(self):
        return self._lower is None

    def contains(self, value):
        """Return True if *value* lies within this interval."""
        if self.is_empty():
            return False
        left_ok = value >= self._lower if self._left_closed else value > self._lower
        right_ok = value <= self._upper if self._right_closed else value < self._upper
        return left_ok and right_ok

    def is_point(self):
        return not self.is_empty() and self._lower == self._upper

    def is_bounded(self):
        """Return True if non-empty and neither bound is infinite."""
        if self.is_empty():
            return False
        if not self.has_infinity():
            return True
        return self._lower != -self.infinity and self._upper != self.infinity

    def lower_bound(self):
        '''Lower bound, or None if empty.'''
        return self._lower

    def upper_bound(self):
        '''Upper bound, or None if empty.'''
        return self._upper

    def is_left_closed(self):
        return self._left_closed

    def is_right_closed(self):
        return self._right_closed

    # Relations
    def subset_of(self, other):
        """
        Return True if every value of this interval is also in *other*.

        At equal bounds, a closed end of *other* covers both an open and a closed end of
        self, while an open end of *other* only covers an open end of self.
        """
        if self.is_empty():
            return True
        if other.is_empty():
            return False
        left_ok = (other._lower < self._lower or
                   (other._lower == self._lower and (other._left_closed or
                                                     not self._left_closed)))
        right_ok = (other._upper > self._upper or
                    (other._upper == self._upper and (other._right_closed or
                                                      not self._right_closed)))
        return left_ok and right_ok

    def superset_of(self, other):
        return other.subset_of(self)

    def overlaps(self, other):
        """Return True if both intervals share at least one value."""
        if self.is_empty() or other.is_empty():
            return False
        if self._upper < other._lower or self._lower > other._upper:
            return False
        # touching bounds only share the value if both ends are closed
        if self._upper == other._lower:
            return self._right_closed and other._left_closed
        if self._lower == other._upper:
            return self._left_closed and other._right_closed
        return True

    def disjoint_from(self, other):
        return not self.overlaps(other)

    def adjacent_to(self, other):
        """Return True if both intervals touch without a gap and without sharing a value."""
        if self.is_empty() or other.is_empty():
            return False
        if self._upper == other._lower:
            return self._right_closed != other._left_closed
        if self._lower == other._upper:
            return self._left_closed != other._right_closed
        return False

    # Operations
    def intersect(self, other):
        """Return the interval of all values in both intervals (may be empty)."""
        if self.is_empty() or other.is_empty():
            return self.empty()

        lower = max(self._lower, other._lower)
        upper = min(self._upper, other._upper)
        if lower > upper:
            return self.empty()

        if self._lower == other._lower:
            left_closed = self._left_closed and other._left_closed
        elif lower == self._lower:
            left_closed = self._left_closed
        else:
            left_closed = other._left_closed

        if self._upper == other._upper:
            right_closed = self._right_closed and other._right_closed
        elif upper == self._upper:
            right_closed = self._right_closed
        else:
            right_closed = other._right_closed

        # degenerate results collapse to empty in the constructor
        return self.__class__(lower, upper, left_closed, right_closed)

    def hull(self, other):
        """
        Return the smallest interval enclosing both intervals.

        Returns None if the intervals neither overlap nor are adjacent. An empty operand
        leaves the other one unchanged.
        """
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        if not self.overlaps(other) and not self.adjacent_to(other):
            return None

        lower = min(self._lower, other._lower)
        upper = max(self._upper, other._upper)

        if self._lower == other._lower:
            left_closed = self._left_closed or other._left_closed
        elif lower == self._lower:
            left_closed = self._left_closed
        else:
            left_closed = other._left_closed

        if self._upper == other._upper:
            right_closed = self._right_closed or other._right_closed
        elif upper == self._upper:
            right_closed = self._right_closed
        else:
            right_closed = other._right_closed

        return self.__class__(lower, upper, left_closed, right_closed)

    # Measures, only for numeric value types
    def length(self):
        if self.is_empty():
            return 0
        return self._upper - self._lower

    def midpoint(self):
        if self.is_empty():
            return None
        return self._lower + self.length() / 2

    def distance_to(self, other):
        """Return size of the gap between both intervals (0 if overlapping or empty)."""
        if self.is_empty() or other.is_empty() or self.overlaps(other):
            return 0
        if self._upper <= other._lower:
            return other._lower - self._upper
        return self._lower - other._upper

    # Comparison
    def _compare(self, other):
        '''Three-way comparison, empty intervals sort first.'''
        if self.is_empty() or other.is_empty():
            return int(not self.is_empty()) - int(not other.is_empty())
        if self._lower != other._lower:
            return -1 if self._lower < other._lower else 1
        # [x,... before (x,...
        if self._left_closed != other._left_closed:
            return -1 if self._left_closed else 1
        if self._upper != other._upper:
            return -1 if self._upper < other._upper else 1
        # ...,y) before ...,y]
        if self._right_closed != other._right_closed:
            return 1 if self._right_closed else -1
        return 0

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return (self._lower == other._lower and self._upper == other._upper and
                self._left_closed == other._left_closed and
                self._right_closed == other._right_closed)

    def __lt__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self._compare(other) < 0

    def __hash__(self):
        return hash((self._lower, self._upper, self._left_closed, self._right_closed))

    def __contains__(self, value):
        return self.contains(value)

    def __and__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self.intersect(other)

    def __bool__(self):
        return not self.is_empty()

    def __repr__(self):
        if self.is_empty():
            return '{}()'.format(self.__class__.__name__)
        return '{}({!r}, {!r}, {!r}, {!r})'.format(
            self.__class__.__name__, self._lower, self._upper,
            self._left_closed, self._right_closed)

    def __str__(self):
        return formatting.format_interval(self)


class RealInterval(Interval):
    '''Interval over real numbers (floats), unbounded forms use math.inf.'''
    infinity = math.inf

    @classmethod
    def parse_value(cls, text):
        text = text.strip()
        if text.lower() in INFINITY_LITERALS:
            return INFINITY_LITERALS[text.lower()] * cls.infinity
        return float(text)


class IntegerInterval(Interval):
    '''Interval over integers, unbounded forms use math.inf which compares with any int.'''
    infinity = math.inf

    @classmethod
    def parse_value(cls, text):
        text = text.strip()
        if text.lower() in INFINITY_LITERALS:
            return INFINITY_LITERALS[text.lower()] * cls.infinity
        return int(text)
