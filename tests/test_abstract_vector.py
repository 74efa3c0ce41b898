from unittest import TestCase
import math
import random

from vmath.util import CardinalityException, IndexException, UnboundLabelException, \
    InvalidArgumentException, MaxFunction, abs_function, negate, square
from vmath.linalg import DenseVector, VectorView, equivalent, strict_equivalence


# -----------------------------------------------------------------------------


def _random_vector(rng: 'random.Random', size: 'int') -> 'DenseVector':
    return DenseVector([rng.choice([0.0, rng.uniform(-5.0, 5.0)]) for _ in range(size)])


class TestArithmetic(TestCase):
    def test_dot(self):
        a = DenseVector([1.0, 0.0, 3.0])
        b = DenseVector([4.0, 5.0, 6.0])
        self.assertEqual(22.0, a.dot(b))
        self.assertEqual(22.0, b.dot(a))

    def test_dot_commutes(self):
        rng = random.Random(0)
        for _ in range(20):
            a, b = _random_vector(rng, 7), _random_vector(rng, 7)
            self.assertAlmostEqual(a.dot(b), b.dot(a))

    def test_dot_cardinality(self):
        with self.assertRaises(CardinalityException) as cm:
            DenseVector(2).dot(DenseVector(3))
        self.assertEqual(2, cm.exception.expected)
        self.assertEqual(3, cm.exception.actual)

    def test_plus_scalar(self):
        v = DenseVector([1.0, 0.0])
        r = v.plus(2.0)
        self.assertEqual([3.0, 2.0], list(r))
        self.assertEqual([1.0, 0.0], list(v))

    def test_plus_minus_vector(self):
        a = DenseVector([1.0, 0.0, 3.0])
        b = DenseVector([0.0, 2.0, 1.0])
        self.assertEqual([1.0, 2.0, 4.0], list(a.plus(b)))
        self.assertEqual([1.0, -2.0, 2.0], list(a.minus(b)))
        self.assertEqual([1.0, 0.0, 3.0], list(a))

    def test_plus_minus_round_trip(self):
        rng = random.Random(1)
        for _ in range(20):
            a, b = _random_vector(rng, 6), _random_vector(rng, 6)
            r = a.plus(b).minus(b)
            for x, y in zip(r, a):
                self.assertAlmostEqual(x, y)

    def test_plus_cardinality(self):
        with self.assertRaises(CardinalityException):
            DenseVector(3).plus(DenseVector(4))
        with self.assertRaises(CardinalityException):
            DenseVector(3).minus(DenseVector(4))
        with self.assertRaises(CardinalityException):
            DenseVector(3).times(DenseVector(4))

    def test_times(self):
        a = DenseVector([1.0, 0.0, -2.0])
        self.assertEqual([3.0, 0.0, -6.0], list(a.times(3.0)))
        self.assertEqual([2.0, 0.0, -8.0], list(a.times(DenseVector([2.0, 7.0, 4.0]))))

    def test_divide(self):
        self.assertEqual([0.5, 0.0, 2.0], list(DenseVector([1.0, 0.0, 4.0]).divide(2.0)))

    def test_divide_by_zero(self):
        with self.assertRaises(ZeroDivisionError):
            DenseVector([1.0]).divide(0.0)

    def test_operators(self):
        a = DenseVector([1.0, 2.0])
        b = DenseVector([3.0, 5.0])
        self.assertEqual([4.0, 7.0], list(a + b))
        self.assertEqual([2.0, 3.0], list(b - a))
        self.assertEqual([2.0, 4.0], list(a * 2))
        self.assertEqual([2.0, 4.0], list(2 * a))
        self.assertEqual([0.5, 1.0], list(a / 2))
        self.assertEqual([0.0, 1.0], list(a - 1))
        self.assertEqual([-1.0, -2.0], list(-a))

    def test_z_sum(self):
        self.assertEqual(4.0, DenseVector([1.0, 0.0, -2.0, 5.0]).z_sum())
        self.assertEqual(0.0, DenseVector(0).z_sum())

    def test_max_value(self):
        v = DenseVector([-3.0, -1.0, -2.0])
        self.assertEqual(-1.0, v.max_value())
        self.assertEqual(1, v.max_value_index())
        self.assertEqual(4.0, DenseVector([0.0, 4.0, 4.0]).max_value())
        self.assertEqual(1, DenseVector([0.0, 4.0, 4.0]).max_value_index())

    def test_max_value_empty(self):
        v = DenseVector(0)
        self.assertEqual(-math.inf, v.max_value())
        self.assertEqual(-1, v.max_value_index())


# -----------------------------------------------------------------------------


class TestAssign(TestCase):
    def test_assign_value(self):
        v = DenseVector(3)
        self.assertIs(v, v.assign(2.5))
        self.assertEqual([2.5, 2.5, 2.5], list(v))

    def test_assign_sequence(self):
        v = DenseVector(3)
        v.assign([1.0, 2.0, 3.0])
        self.assertEqual([1.0, 2.0, 3.0], list(v))
        with self.assertRaises(CardinalityException):
            v.assign([1.0, 2.0])

    def test_assign_vector(self):
        v = DenseVector(2)
        v.assign(DenseVector([4.0, 5.0]))
        self.assertEqual([4.0, 5.0], list(v))
        with self.assertRaises(CardinalityException):
            v.assign(DenseVector(3))

    def test_assign_unary(self):
        v = DenseVector([-1.0, 2.0, -3.0])
        v.assign(abs_function)
        self.assertEqual([1.0, 2.0, 3.0], list(v))
        v.assign(negate)
        self.assertEqual([-1.0, -2.0, -3.0], list(v))
        v.assign(square)
        self.assertEqual([1.0, 4.0, 9.0], list(v))

    def test_assign_binary_with_scalar(self):
        v = DenseVector([1.0, 5.0, 3.0])
        v.assign(2.0, MaxFunction())
        self.assertEqual([2.0, 5.0, 3.0], list(v))
        v.assign(10.0, lambda a, b: a * b)
        self.assertEqual([20.0, 50.0, 30.0], list(v))

    def test_assign_binary_on_view(self):
        parent = DenseVector([1.0, 2.0, 3.0, 4.0])
        view = parent.view_part(1, 2)
        view.assign(DenseVector([10.0, 20.0]), lambda a, b: a + b)
        self.assertEqual([1.0, 12.0, 23.0, 4.0], list(parent))

    def test_add_to_without_size_check(self):
        view = DenseVector([1.0, 0.0, 3.0]).view_part(0, 2)
        target = DenseVector([1.0, 1.0, 1.0])
        view.add_to(target)
        self.assertEqual([2.0, 1.0, 1.0], list(target))


# -----------------------------------------------------------------------------


class TestNorms(TestCase):
    def test_norm_zero_counts_non_zero(self):
        self.assertEqual(2.0, DenseVector([0.0, 5.0, 0.0, 3.0]).norm(0))

    def test_norm_one(self):
        v = DenseVector([1.0, 0.0, 2.0, 3.0])
        self.assertEqual(v.z_sum(), v.norm(1))

    def test_norm_two(self):
        self.assertAlmostEqual(5.0, DenseVector([3.0, 4.0]).norm(2))

    def test_norm_infinite(self):
        self.assertEqual(7.0, DenseVector([1.0, 7.0, 3.0]).norm(math.inf))

    def test_norm_general(self):
        self.assertAlmostEqual(3.0, DenseVector([1.0, 2.0, 2.0]).norm(2.0))
        self.assertAlmostEqual(9.0 ** (1.0 / 3.0), DenseVector([1.0, 2.0, 0.0]).norm(3.0))

    def test_norm_negative_power(self):
        with self.assertRaises(InvalidArgumentException):
            DenseVector([1.0]).norm(-1.0)
        with self.assertRaises(ValueError):
            DenseVector([1.0]).norm(-0.5)

    def test_normalize(self):
        rng = random.Random(2)
        for _ in range(20):
            v = _random_vector(rng, 5)
            if v.norm(0) == 0:
                continue
            self.assertAlmostEqual(1.0, v.normalize().norm(2))

    def test_normalize_power(self):
        v = DenseVector([1.0, 3.0]).normalize(1)
        self.assertEqual([0.25, 0.75], list(v))

    def test_normalize_zero_vector(self):
        v = DenseVector(3).normalize()
        self.assertEqual([0.0, 0.0, 0.0], list(v))

    def test_norm_negative_slots_fractional_power(self):
        r = DenseVector([-1.0, 4.0]).norm(0.5)
        self.assertIsInstance(r, float)
        self.assertTrue(math.isnan(r))

    def test_norm_negative_sum_odd_power(self):
        r = DenseVector([-2.0, 1.0]).norm(3)
        self.assertIsInstance(r, float)
        self.assertTrue(math.isnan(r))
        self.assertAlmostEqual(7.0 ** (1.0 / 3.0), DenseVector([-1.0, 2.0]).norm(3))

    def test_normalize_zero_norm_with_non_zero_slots(self):
        v = DenseVector([1.0, -1.0]).normalize(1)
        self.assertEqual([math.inf, -math.inf], list(v))
        v = DenseVector([0.0, -1.0]).normalize(math.inf)
        self.assertEqual([0.0, -math.inf], list(v))

    def test_normalize_zero_norm_leaves_source(self):
        v = DenseVector([1.0, -1.0])
        v.normalize(1)
        self.assertEqual([1.0, -1.0], list(v))


# -----------------------------------------------------------------------------


class TestDistance(TestCase):
    def test_view_distance_visits_own_non_zero_slots(self):
        a = DenseVector([1.0, 0.0]).view_part(0, 2)
        b = DenseVector([1.0, 2.0])
        self.assertEqual(0.0, a.get_distance_squared(b))
        self.assertEqual(4.0, b.get_distance_squared(a))


# -----------------------------------------------------------------------------


class TestLabels(TestCase):
    def test_unbound_without_bindings(self):
        v = DenseVector(3)
        self.assertIsNone(v.label_bindings)
        with self.assertRaises(UnboundLabelException):
            v.get("x")
        with self.assertRaises(UnboundLabelException):
            v.set("x", 1.0)

    def test_set_labeled(self):
        v = DenseVector(3)
        v.set_labeled("x", 1, 4.0)
        self.assertEqual(4.0, v.get("x"))
        self.assertEqual(4.0, v["x"])
        v.set("x", 5.0)
        self.assertEqual(5.0, v.get(1))
        with self.assertRaises(UnboundLabelException) as cm:
            v.get("y")
        self.assertEqual("y", cm.exception.label)

    def test_last_write_wins(self):
        v = DenseVector(3)
        v.set_labeled("x", 0, 1.0)
        v.set_labeled("x", 2, 3.0)
        self.assertEqual(3.0, v.get("x"))
        self.assertEqual({"x": 2}, v.label_bindings)

    def test_bound_index_out_of_range(self):
        v = DenseVector(2)
        v.label_bindings = {"far": 10}
        with self.assertRaises(IndexException):
            v.get("far")

    def test_bindings_do_not_affect_equality(self):
        a = DenseVector([1.0, 2.0])
        b = DenseVector([1.0, 2.0])
        a.set_labeled("x", 0, 1.0)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))


# -----------------------------------------------------------------------------


class TestEquivalence(TestCase):
    def test_equivalent_ignores_name_and_type(self):
        a = DenseVector([1.0, 2.0], name="a")
        b = DenseVector([0.0, 1.0, 2.0]).view_part(1, 2)
        self.assertTrue(equivalent(a, b))
        self.assertFalse(equivalent(a, DenseVector([1.0, 2.0, 0.0])))
        self.assertFalse(equivalent(a, DenseVector([1.0, 2.5])))

    def test_strict_equivalence(self):
        a = DenseVector([1.0, 2.0], name="a")
        self.assertTrue(strict_equivalence(a, DenseVector([1.0, 2.0], name="a")))
        self.assertFalse(strict_equivalence(a, DenseVector([1.0, 2.0], name="b")))
        self.assertFalse(strict_equivalence(a, DenseVector([1.0, 2.0])))
        self.assertTrue(strict_equivalence(DenseVector([1.0]), DenseVector([1.0])))

    def test_strict_equivalence_requires_same_type(self):
        a = DenseVector([1.0, 2.0])
        view = DenseVector([1.0, 2.0]).view_part(0, 2)
        self.assertIsInstance(view, VectorView)
        self.assertTrue(equivalent(a, view))
        self.assertFalse(strict_equivalence(a, view))

    def test_hash_depends_on_name(self):
        a = DenseVector([1.0, 2.0], name="a")
        b = DenseVector([1.0, 2.0], name="a")
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(hash(DenseVector([1.0, 2.0])), hash(DenseVector([1.0, 2.0])))

    def test_clone_equals_source(self):
        v = DenseVector([1.0, 0.0, 2.0], name="v")
        self.assertEqual(v, v.clone())
        self.assertTrue(strict_equivalence(v, v.clone()))


# -----------------------------------------------------------------------------


class TestFormatString(TestCase):
    def test_round_trip(self):
        v = DenseVector([1.0, 0.0, 2.5], name="point")
        decoded = DenseVector.decode_vector(v.as_format_string())
        self.assertTrue(strict_equivalence(v, decoded))

    def test_repr(self):
        self.assertEqual("DenseVector([1.0, 2.0])", repr(DenseVector([1.0, 2.0])))
        self.assertEqual("DenseVector('p', [1.0])", repr(DenseVector([1.0], name="p")))


# -----------------------------------------------------------------------------
