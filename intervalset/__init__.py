"""Intervals with open and closed ends and Boolean algebra on sets of disjoint intervals."""
__version__ = '0.1.0'

from .interval import Interval, RealInterval, IntegerInterval, CapabilityError
from .intervals import DisjointIntervalSet, RealSet, IntegerSet
from .parser import parse_interval, parse_set, IntervalSyntaxError
from .formatting import format_interval, format_set, visualize

__all__ = ['Interval', 'RealInterval', 'IntegerInterval', 'CapabilityError',
           'DisjointIntervalSet', 'RealSet', 'IntegerSet',
           'parse_interval', 'parse_set', 'IntervalSyntaxError',
           'format_interval', 'format_set', 'visualize']
