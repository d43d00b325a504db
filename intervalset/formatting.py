#!/usr/bin/env python3
"""Textual and ASCII-art representations of intervals and interval sets."""
import math

import numpy as np

STYLES = ['mathematical', 'unicode', 'programming', 'latex', 'verbose']

EMPTY_INTERVAL = {'unicode': '∅', 'latex': '\\emptyset', 'verbose': 'empty interval'}
EMPTY_SET = {'unicode': '∅', 'latex': '\\emptyset', 'verbose': 'empty set'}
UNION = {'unicode': ' ∪ ', 'latex': ' \\cup ', 'verbose': ' union '}


def _check_style(style):
    if style not in STYLES:
        raise ValueError('Invalid style selected ({}), valid options are {}'.format(
            style, ', '.join(STYLES)))


def format_value(value):
    """Return string of bound *value*, with infinities as ∞ and -∞ and 5.0 as 5."""
    if value == math.inf:
        return '∞'
    if value == -math.inf:
        return '-∞'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_interval(interval, style='mathematical'):
    """
    Return *interval* in notation *style*.

    Styles: 'mathematical' ([0,5)), 'unicode' (as mathematical, but ∅ for empty),
    'programming' (interval(0, 5, true, false)), 'latex' ([0, 5)) and 'verbose'.
    """
    _check_style(style)
    if interval.is_empty():
        return EMPTY_INTERVAL.get(style, '{}')

    lower = format_value(interval.lower_bound())
    upper = format_value(interval.upper_bound())
    left = '[' if interval.is_left_closed() else '('
    right = ']' if interval.is_right_closed() else ')'

    if interval.is_point():
        if style == 'latex':
            return '\\{' + lower + '\\}'
        elif style == 'verbose':
            return 'point at ' + lower
        return '{' + lower + '}'

    if style == 'programming':
        return 'interval({}, {}, {}, {})'.format(
            lower, upper, str(interval.is_left_closed()).lower(),
            str(interval.is_right_closed()).lower())
    elif style == 'latex':
        return '{}{}, {}{}'.format(left, lower, upper, right)
    elif style == 'verbose':
        return 'interval from {} ({}) to {} ({})'.format(
            lower, 'inclusive' if interval.is_left_closed() else 'exclusive',
            upper, 'inclusive' if interval.is_right_closed() else 'exclusive')
    return '{}{},{}{}'.format(left, lower, upper, right)


def format_set(interval_set, style='mathematical'):
    """Return all components of *interval_set* in notation *style*, joined by union."""
    _check_style(style)
    if interval_set.is_empty():
        return EMPTY_SET.get(style, '{}')
    return UNION.get(style, ' U ').join(format_interval(i, style) for i in interval_set)


def visualize(interval_set, min_value, max_value, width=80):
    """
    Return ASCII ruler of *interval_set* between *min_value* and *max_value*.

    The first line marks components with their brackets and '=' in between, the second line
    holds minimum, middle and maximum value. *width* is at least 20.
    """
    width = max(20, width)
    line = np.full(width, '.', dtype='<U1')

    components = interval_set.components()
    if components:
        bounds = np.array([[c.lower_bound(), c.upper_bound()] for c in components], dtype=float)
        columns = (bounds - min_value) / (max_value - min_value) * (width - 1)
        # infinite bounds end up at the outer columns
        columns = np.clip(np.nan_to_num(columns), 0, width - 1).astype(int)
        for c, (start, end) in zip(components, columns):
            line[start + 1:end] = '='
            line[start] = '[' if c.is_left_closed() else '('
            line[end] = ']' if c.is_right_closed() else ')'

    middle_value = min_value + (max_value - min_value) / 2
    low, middle, high = format_value(min_value), format_value(middle_value), \
        format_value(max_value)
    middle_pos = width // 2
    scale = low + ' ' * max(1, middle_pos - len(low) - len(middle) // 2) + middle
    scale += ' ' * max(1, width - len(scale) - len(high)) + high
    return ''.join(line) + '\n' + scale
