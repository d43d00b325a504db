#!/usr/bin/env python3
"""
Parser for mathematical interval notation.

Supported notation:
 * [a,b], (a,b), [a,b), (a,b] for intervals, {a} for points, {} or ∅ for the empty set
 * ∪, U or | for union, ∩ or & for intersection, \\ or - for difference, ∆ or ^ for
   symmetric difference
 * parentheses for grouping, e.g. ([0,10] \\ [2,3]) ∩ [1,5]

Intersection binds tighter than all other operations, which share one precedence level and
are evaluated left to right.
"""
import re
import logging

from .interval import RealInterval
from .intervals import RealSet

logger = logging.getLogger(__name__)

UNION_OPERATORS = ['∪', 'U', '|']
INTERSECTION_OPERATORS = ['∩', '&']
DIFFERENCE_OPERATORS = ['\\', '-']
SYMMETRIC_DIFFERENCE_OPERATORS = ['∆', '^']
EMPTY_LITERALS = ['∅', '{}']

# value text ends at the next separator or closing bracket
VALUE_PATTERN = re.compile(r'\s*(?P<value>[^,\[\]\(\)\{\}]+?)\s*(?=[,\]\)\}])')


class IntervalSyntaxError(ValueError):
    """Raised if interval notation could not be parsed."""

    def __init__(self, message, text, position):
        self.text = text
        self.position = position
        super(IntervalSyntaxError, self).__init__(
            '{} at position {}: {!r}'.format(message, position, text))


class Parser(object):
    """Recursive descent parser for a single interval set expression."""

    def __init__(self, text, set_class=RealSet, interval_class=None):
        self.text = text
        self.set_class = set_class
        self.interval_class = interval_class or set_class.interval_class
        self.pos = 0

    def error(self, message):
        raise IntervalSyntaxError(message, self.text, self.pos)

    def skip_whitespace(self):
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def at_end(self):
        self.skip_whitespace()
        return self.pos >= len(self.text)

    def peek(self, *tokens):
        '''Returns first of *tokens* found at current position, None otherwise'''
        self.skip_whitespace()
        for token in tokens:
            if self.text.startswith(token, self.pos):
                return token
        return None

    def expect(self, *tokens):
        token = self.peek(*tokens)
        if token is None:
            self.error('Expected {}'.format(' or '.join(repr(t) for t in tokens)))
        self.pos += len(token)
        return token

    def parse(self):
        if self.at_end():
            return self.set_class()
        result = self.parse_expression()
        if not self.at_end():
            self.error('Unexpected input')
        return result

    def parse_expression(self):
        result = self.parse_term()
        while True:
            operator = self.peek(*(UNION_OPERATORS + DIFFERENCE_OPERATORS +
                                   SYMMETRIC_DIFFERENCE_OPERATORS))
            if operator is None:
                return result
            self.pos += len(operator)
            right = self.parse_term()
            logger.debug("applying %r at position %d", operator, self.pos)
            if operator in UNION_OPERATORS:
                result = result.unite(right)
            elif operator in DIFFERENCE_OPERATORS:
                result = result.difference(right)
            else:
                result = result.symmetric_difference(right)

    def parse_term(self):
        result = self.parse_factor()
        while self.peek(*INTERSECTION_OPERATORS) is not None:
            self.expect(*INTERSECTION_OPERATORS)
            result = result.intersect(self.parse_factor())
        return result

    def parse_factor(self):
        if self.peek('(') is not None and self.is_grouping():
            self.expect('(')
            result = self.parse_expression()
            self.expect(')')
            return result
        return self.set_class(self.parse_interval())

    def is_grouping(self):
        '''Checks if parenthesis at current position opens a group instead of an interval'''
        position = self.pos + 1
        while position < len(self.text) and self.text[position].isspace():
            position += 1
        return self.text.startswith(tuple('[({') + tuple(EMPTY_LITERALS), position)

    def parse_value(self):
        m = VALUE_PATTERN.match(self.text, self.pos)
        if not m:
            self.error('Expected value')
        try:
            value = self.interval_class.parse_value(m.group('value'))
        except ValueError:
            self.error('Invalid value {!r}'.format(m.group('value')))
        self.pos = m.end()
        return value

    def parse_interval(self):
        if self.peek(*EMPTY_LITERALS) is not None:
            self.expect(*EMPTY_LITERALS)
            return self.interval_class.empty()

        if self.peek('{') is not None:
            self.expect('{')
            value = self.parse_value()
            self.expect('}')
            return self.interval_class.point(value)

        left_closed = self.expect('[', '(') == '['
        lower = self.parse_value()
        self.expect(',')
        upper = self.parse_value()
        right_closed = self.expect(']', ')') == ']'
        return self.interval_class(lower, upper, left_closed, right_closed)


def parse_interval(text, interval_class=RealInterval):
    """Parse single interval from *text*, e.g. '[0,5)', '{3}' or '∅'."""
    parser = Parser(text, interval_class=interval_class)
    if parser.at_end():
        return interval_class.empty()
    interval = parser.parse_interval()
    if not parser.at_end():
        parser.error('Unexpected input')
    return interval


def parse_set(text, set_class=RealSet):
    """Parse set expression from *text* into an instance of *set_class*."""
    logger.debug("parsing %r as %s", text, set_class.__name__)
    return Parser(text, set_class).parse()
