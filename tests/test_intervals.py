#!/usr/bin/env python3
"""
Unit tests for intervals module
"""
import itertools
import math
import unittest

from intervalset.interval import Interval, RealInterval, IntegerInterval, CapabilityError
from intervalset.intervals import DisjointIntervalSet, RealSet, IntegerSet

I = IntegerInterval
R = RealInterval


class TestDisjointIntervalSet(unittest.TestCase):
    def assertNormalized(self, interval_set):
        components = interval_set.components()
        for c in components:
            self.assertFalse(c.is_empty())
        for a, b in zip(components, components[1:]):
            self.assertLess(a, b)
            self.assertFalse(a.overlaps(b))
            self.assertFalse(a.adjacent_to(b))

    def test_init(self):
        self.assertEqual(IntegerSet(I.closed(0, 10)).components(), [I.closed(0, 10)])
        self.assertEqual(IntegerSet(I.closed(0, 10), I.closed(1, 9)).components(),
                         [I.closed(0, 10)])
        self.assertEqual(IntegerSet(I.closed(0, 10), I.closed(5, 15)).components(),
                         [I.closed(0, 15)])
        self.assertEqual(IntegerSet(I.closed(-5, 5), I.closed(0, 10)).components(),
                         [I.closed(-5, 10)])
        self.assertEqual(IntegerSet(I.closed(0, 9), I.closed(10, 11)).components(),
                         [I.closed(0, 9), I.closed(10, 11)])
        self.assertEqual(IntegerSet(I.closed(0, 10), I.closed(10, 11)).components(),
                         [I.closed(0, 11)])
        self.assertTrue(IntegerSet().is_empty())
        self.assertTrue(IntegerSet(I(), I(3, 1)).is_empty())
        self.assertEqual(IntegerSet(I(), I.point(2)).size(), 1)

    def test_init_type_check(self):
        with self.assertRaises(TypeError):
            RealSet((0, 1))

    def test_from_intervals(self):
        intervals = (R.closed(i, i + 1) for i in range(0, 10, 3))
        s = RealSet.from_intervals(intervals)
        self.assertEqual(s.size(), 4)
        self.assertIsInstance(s, RealSet)

    def test_merge_on_overlap(self):
        s = IntegerSet(I.closed(1, 3), I.closed(5, 7), I.closed(2, 4))
        self.assertEqual(s.components(), [I.closed(1, 4), I.closed(5, 7)])

    def test_merge_on_adjacency(self):
        s = RealSet(R.right_open(0, 5)).unite(RealSet(R.closed(5, 10)))
        self.assertEqual(s.components(), [R.closed(0, 10)])

    def test_no_merge_on_gap(self):
        s = RealSet(R.right_open(0, 5)).unite(RealSet(R.left_open(5, 10)))
        self.assertEqual(s.components(), [R.right_open(0, 5), R.left_open(5, 10)])

    def test_merge_closed_before_open(self):
        # [5,7] has to be merged before (5,6) is looked at
        s = RealSet(R.left_open(5, 6), R.right_open(0, 5), R.closed(5, 7))
        self.assertEqual(s.components(), [R.closed(0, 7)])

    def test_order_independence(self):
        intervals = [R.right_open(0, 5), R.left_open(5, 10), R.point(5), R.open(20, 30),
                     R.closed(12, 20)]
        expected = RealSet(*intervals)
        self.assertEqual(expected.components(), [R.closed(0, 10), R.right_open(12, 30)])
        for permutation in itertools.permutations(intervals):
            self.assertEqual(RealSet(*permutation), expected)

    def test_idempotence(self):
        s = RealSet(R.open(0, 2), R.closed(1, 3), R.left_open(3, 4), R.point(8), R.closed(6, 7))
        self.assertNormalized(s)
        self.assertEqual(RealSet(*s), s)
        self.assertEqual(RealSet(*s.components()).coalesce(), s)

    def test_disjointness(self):
        intervals = [Interval(i % 7, i % 7 + i % 3, i % 2 == 0, i % 5 != 0) for i in range(40)]
        s = DisjointIntervalSet(*intervals)
        self.assertNormalized(s)
        self.assertNormalized(s.gaps())

    def test_contains(self):
        s = IntegerSet(I.closed(0, 10), I.closed(20, 30))
        self.assertFalse(s.contains(15))
        self.assertTrue(s.contains(10))
        self.assertTrue(s.contains(20))
        self.assertTrue(s.contains(30))
        self.assertFalse(s.contains(31))
        self.assertFalse(s.contains(-1))
        self.assertTrue(5 in s)
        self.assertFalse(IntegerSet().contains(0))

        s = RealSet(R.right_open(0, 5), R.left_open(5, 10))
        self.assertFalse(5 in s)
        self.assertTrue(4.9 in s)
        self.assertTrue(5.1 in s)

    def test_contains_consistency(self):
        s = RealSet(R.open(0, 2), R.closed(4, 6), R.left_open(9, 10), R.point(12),
                    R.right_open(15, 20))
        for v in [x / 2 for x in range(-4, 50)]:
            self.assertEqual(s.contains(v), any(c.contains(v) for c in s), v)

    def test_contains_interval(self):
        s = IntegerSet(I.closed(0, 10), I.closed(20, 30))
        self.assertTrue(s.contains(I.closed(2, 3)))
        self.assertTrue(s.contains(I.open(20, 30)))
        self.assertFalse(s.contains(I.closed(5, 25)))
        self.assertFalse(s.contains(I.closed(9, 11)))
        self.assertTrue(s.contains(I()))
        self.assertTrue(IntegerSet().contains(I()))
        self.assertTrue(I.closed(21, 22) in s)

    def test_subset_superset(self):
        a = IntegerSet(I.closed(0, 10), I.closed(20, 30))
        b = IntegerSet(I.closed(1, 2), I.closed(21, 22))
        self.assertTrue(b.subset_of(a))
        self.assertTrue(a.superset_of(b))
        self.assertFalse(a.subset_of(b))
        self.assertTrue(IntegerSet().subset_of(b))
        self.assertTrue(a.superset_of(I.point(5)))

    def test_overlaps_disjoint(self):
        a = RealSet(R.closed(0, 10))
        self.assertTrue(a.overlaps(RealSet(R.closed(10, 11))))
        self.assertFalse(a.overlaps(RealSet(R.left_open(10, 11))))
        self.assertTrue(a.disjoint_from(RealSet(R.closed(11, 12))))
        self.assertTrue(a.disjoint_from(RealSet()))

    def test_unite(self):
        a = RealSet(R.closed(0, 10))
        b = RealSet(R.closed(5, 20), R.closed(30, 40))
        self.assertEqual(a.unite(b), RealSet(R.closed(0, 20), R.closed(30, 40)))
        self.assertEqual(a.unite(RealSet()), a)
        self.assertEqual(RealSet().unite(a), a)
        self.assertEqual(a.unite(R.closed(10, 12)), RealSet(R.closed(0, 12)))
        # inputs stay untouched
        self.assertEqual(a.components(), [R.closed(0, 10)])

    def test_measure_additivity(self):
        a = RealSet(R.closed(0, 10), R.closed(12, 14))
        b = RealSet(R.closed(5, 20))
        self.assertEqual(a.measure(), sum(c.length() for c in a))
        self.assertEqual(a.unite(b).measure(),
                         a.measure() + b.measure() - a.intersect(b).measure())

    def test_intersect(self):
        a = IntegerSet(I.closed(0, 10), I.closed(20, 30))
        b = IntegerSet(I.closed(5, 25))
        self.assertEqual(a.intersect(b), IntegerSet(I.closed(5, 10), I.closed(20, 25)))
        self.assertEqual(b.intersect(a), a.intersect(b))
        self.assertTrue(a.intersect(IntegerSet()).is_empty())

        c = RealSet(R.right_open(0, 5), R.left_open(5, 10))
        self.assertTrue(c.intersect(RealSet(R.point(5))).is_empty())
        self.assertEqual(c.intersect(RealSet(R.closed(4, 6), R.point(8), R.closed(10, 11))),
                         RealSet(R.right_open(4, 5), R.left_open(5, 6), R.point(8),
                                 R.point(10)))

    def test_intersect_matches_pairwise(self):
        a = RealSet(*[R(i, i + 2, i % 2 == 0, i % 3 == 0) for i in range(0, 40, 3)])
        b = RealSet(*[R(i, i + 4, i % 3 == 0, i % 2 == 0) for i in range(1, 40, 5)])
        pairwise = RealSet(*[x.intersect(y) for x in a for y in b])
        self.assertEqual(a.intersect(b), pairwise)

    def test_complement(self):
        s = IntegerSet(I.closed(0, 10))
        self.assertEqual(s.complement().components(), [I.less_than(0), I.greater_than(10)])
        self.assertEqual(IntegerSet().complement(), IntegerSet.unbounded())
        self.assertTrue(IntegerSet.unbounded().complement().is_empty())
        self.assertEqual(RealSet(R.at_least(3)).complement(), RealSet(R.less_than(3)))

        s = RealSet(R.right_open(0, 5), R.left_open(5, 10), R.point(20))
        self.assertEqual(s.complement().components(),
                         [R.less_than(0), R.point(5), R.open(10, 20), R.greater_than(20)])

    def test_algebra_laws(self):
        sets = [RealSet(), RealSet.unbounded(), RealSet(R.closed(0, 10)),
                RealSet(R.right_open(0, 5), R.left_open(5, 10), R.point(20)),
                RealSet(R.at_most(-3), R.open(1, 2), R.at_least(7))]
        for s in sets:
            self.assertEqual(s.complement().complement(), s)
            self.assertEqual(s.unite(s.complement()), RealSet.unbounded())
            self.assertTrue(s.intersect(s.complement()).is_empty())
            self.assertNormalized(s.complement())
            for t in sets:
                self.assertEqual(s.difference(t), s.intersect(t.complement()))
                self.assertEqual(s.complement().intersect(t.complement()),
                                 s.unite(t).complement())

    def test_difference(self):
        a = RealSet(R.closed(0, 10))
        self.assertEqual(a.difference(RealSet(R.closed(3, 5))),
                         RealSet(R.right_open(0, 3), R.left_open(5, 10)))
        self.assertEqual(a.difference(RealSet()), a)
        self.assertTrue(a.difference(a).is_empty())
        self.assertEqual(a.difference(R.open(0, 10)), RealSet(R.point(0), R.point(10)))

    def test_symmetric_difference(self):
        a = RealSet(R.closed(0, 10))
        b = RealSet(R.closed(5, 15))
        self.assertEqual(a.symmetric_difference(b),
                         RealSet(R.right_open(0, 5), R.left_open(10, 15)))
        self.assertTrue(a.symmetric_difference(a).is_empty())
        self.assertEqual(a.symmetric_difference(RealSet()), a)

    def test_missing_infinity(self):
        s = DisjointIntervalSet(Interval.closed('a', 'c'))
        other = DisjointIntervalSet(Interval.point('b'))
        with self.assertRaises(CapabilityError):
            s.complement()
        with self.assertRaises(CapabilityError):
            s.difference(other)
        with self.assertRaises(CapabilityError):
            s.symmetric_difference(other)
        with self.assertRaises(CapabilityError):
            ~s
        with self.assertRaises(CapabilityError):
            DisjointIntervalSet.unbounded()
        # all other operations work without infinity
        self.assertEqual(s.unite(DisjointIntervalSet(Interval.closed('b', 'f'))),
                         DisjointIntervalSet(Interval.closed('a', 'f')))
        self.assertEqual(s.intersect(other), other)
        self.assertTrue('b' in s)
        self.assertTrue(s.superset_of(other))

    def test_stored_interval_type(self):
        s = DisjointIntervalSet(RealInterval.closed(0, 1))
        self.assertEqual(s.complement(),
                         DisjointIntervalSet(R.less_than(0), R.greater_than(1)))

    def test_span(self):
        s = RealSet(R.open(0, 1), R.closed(5, 6))
        self.assertEqual(s.span(), R(0, 6, False, True))
        self.assertEqual(RealSet(R.point(3)).span(), R.point(3))
        self.assertTrue(RealSet().span().is_empty())

    def test_gaps(self):
        s = RealSet(R.right_open(0, 5), R.left_open(5, 10), R.closed(20, 30))
        self.assertEqual(s.gaps(), RealSet(R.point(5), R.open(10, 20)))
        self.assertEqual(s.gap_measure(), 10)
        self.assertTrue(RealSet(R.closed(0, 1)).gaps().is_empty())
        self.assertTrue(RealSet().gaps().is_empty())

    def test_measure_and_density(self):
        s = IntegerSet(I.closed(0, 10), I.closed(20, 30))
        self.assertEqual(s.measure(), 20)
        self.assertAlmostEqual(s.density(), 2 / 3)
        self.assertEqual(IntegerSet().measure(), 0)
        self.assertEqual(IntegerSet().density(), 0)
        self.assertEqual(IntegerSet(I.point(4)).density(), 1.0)
        self.assertEqual(IntegerSet(I.closed(0, 4)).density(), 1.0)
        self.assertEqual(RealSet(R.at_least(0)).measure(), math.inf)

    def test_mutators(self):
        s = RealSet()
        self.assertIs(s.insert(R.closed(0, 5), R.closed(3, 8)), s)
        self.assertEqual(s.components(), [R.closed(0, 8)])
        s.add(10, 12)
        self.assertEqual(s.components(), [R.closed(0, 8), R.closed(10, 12)])
        s.subtract(R.closed(2, 3))
        self.assertEqual(s.components(),
                         [R.right_open(0, 2), R.left_open(3, 8), R.closed(10, 12)])
        self.assertEqual(s.erase(R.closed(10, 11)), 0)
        self.assertEqual(s.erase(R.closed(10, 12)), 1)
        self.assertEqual(s.erase(R.closed(10, 12)), 0)
        self.assertEqual(s, RealSet(R.right_open(0, 2), R.left_open(3, 8)))
        s.remove(RealSet(R.closed(0, 1)))
        self.assertEqual(s, RealSet(R.open(1, 2), R.left_open(3, 8)))
        self.assertTrue(s.clear().is_empty())
        s.insert(R())
        self.assertTrue(s.is_empty())

    def test_pure_operations(self):
        a = RealSet(R.closed(0, 10))
        b = RealSet(R.closed(5, 15))
        results = [a.unite(b), a.intersect(b), a.difference(b), a.symmetric_difference(b),
                   a.complement()]
        self.assertEqual(a, RealSet(R.closed(0, 10)))
        self.assertEqual(b, RealSet(R.closed(5, 15)))
        results[0].add(100, 200)
        self.assertEqual(a, RealSet(R.closed(0, 10)))

    def test_operators(self):
        a = RealSet(R.closed(0, 10))
        b = RealSet(R.closed(5, 15))
        self.assertEqual(a | b, a.unite(b))
        self.assertEqual(a & b, a.intersect(b))
        self.assertEqual(a - b, a.difference(b))
        self.assertEqual(a ^ b, a.symmetric_difference(b))
        self.assertEqual(~a, a.complement())
        self.assertEqual(a | R.closed(20, 21), RealSet(R.closed(0, 10), R.closed(20, 21)))

        c = RealSet(R.closed(0, 10))
        c |= b
        self.assertEqual(c, RealSet(R.closed(0, 15)))
        c &= a
        self.assertEqual(c, a)
        c -= R.closed(0, 5)
        self.assertEqual(c, RealSet(R.left_open(5, 10)))
        c ^= a
        self.assertEqual(c, RealSet(R.closed(0, 5)))

        with self.assertRaises(TypeError):
            a | 5

    def test_comparison(self):
        self.assertLess(RealSet(R.closed(0, 1)), RealSet(R.closed(2, 3)))
        self.assertLess(RealSet(), RealSet(R.closed(2, 3)))
        self.assertEqual(RealSet(R.closed(0, 1)), IntegerSet(I.closed(0, 1)))
        self.assertNotEqual(RealSet(R.closed(0, 1)), [R.closed(0, 1)])
        with self.assertRaises(TypeError):
            hash(RealSet())

    def test_functional_helpers(self):
        s = RealSet(R.closed(0, 1), R.closed(3, 6), R.point(8))
        self.assertEqual(s.filter(lambda c: c.length() > 1), RealSet(R.closed(3, 6)))
        widened = s.map(lambda c: R.closed(c.lower_bound() - 1, c.upper_bound() + 1))
        self.assertEqual(widened, RealSet(R.closed(-1, 9)))
        seen = []
        s.for_each(seen.append)
        self.assertEqual(seen, s.components())

    def test_sequence_protocol(self):
        s = RealSet(R.closed(3, 4), R.closed(0, 1))
        self.assertEqual(len(s), 2)
        self.assertEqual(list(s), [R.closed(0, 1), R.closed(3, 4)])
        self.assertEqual(list(reversed(s)), [R.closed(3, 4), R.closed(0, 1)])
        self.assertEqual(s[1], R.closed(3, 4))
        self.assertEqual(s.front(), R.closed(0, 1))
        self.assertEqual(s.back(), R.closed(3, 4))
        self.assertTrue(s)
        self.assertFalse(RealSet())
        self.assertEqual(s.component_count(), 2)

    def test_named_constructors(self):
        self.assertEqual(IntegerSet.point(3).components(), [I.point(3)])
        self.assertEqual(RealSet.unbounded().components(), [R.unbounded()])
        self.assertEqual(RealSet.from_string('[0,5) U (10,20]'),
                         RealSet(R.right_open(0, 5), R.left_open(10, 20)))

    def test_str_and_repr(self):
        s = RealSet(R.closed(0, 1), R.point(3))
        self.assertEqual(str(s), '[0,1] U {3}')
        self.assertEqual(str(RealSet()), '{}')
        self.assertEqual(repr(s),
                         'RealSet(RealInterval(0, 1, True, True), RealInterval(3, 3, True, True))')
