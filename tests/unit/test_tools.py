import unittest

import numpy as np
from numpy.testing import assert_allclose, assert_array_equal
from parameterized import parameterized

from xrot.tools.array import (communalities, has_nonfinite, is_orthogonal,
                              kaiser_weights)
from xrot.tools.rotation import (MAX_PRECISION, Equimax, Quartimax, Varimax,
                                 get_criterion, pairwise_rotation)


class TestArrayTools(unittest.TestCase):

    def test_communalities(self):
        A = np.array([[1., 2.], [0., 0.], [-3., 4.]])
        assert_allclose(communalities(A), [5., 0., 25.])

    def test_kaiser_weights_zero_communality(self):
        h, h_inv = kaiser_weights(np.array([4., 0., 0.25]))
        assert_allclose(h, [2., 0., .5])
        assert_allclose(h_inv, [.5, 0., 2.])
        self.assertTrue(np.isfinite(h_inv).all())

    def test_has_nonfinite(self):
        self.assertFalse(has_nonfinite(np.array([[1., -2.], [0., .5]])))
        self.assertTrue(has_nonfinite(np.array([[1., np.nan], [0., .5]])))
        self.assertTrue(has_nonfinite(np.array([[1., np.inf], [.5, .2]])))

    def test_is_orthogonal(self):
        phi = 0.7
        R = np.array([[np.cos(phi), -np.sin(phi)], [np.sin(phi), np.cos(phi)]])
        self.assertTrue(is_orthogonal(R))
        self.assertFalse(is_orthogonal(2 * R))
        self.assertFalse(is_orthogonal(np.ones((2, 3))))


class TestCriteria(unittest.TestCase):

    def setUp(self):
        self.args = (0.3, -0.2, 1.1, 0.4)
        self.n = 10
        self.m = 4

    def test_varimax(self):
        a, b, c, d = self.args
        crit = Varimax()
        self.assertAlmostEqual(crit.x(*self.args, self.n, self.m), d - 2 * a * b / 10)
        self.assertAlmostEqual(crit.y(*self.args, self.n, self.m), c - (a**2 - b**2) / 10)

    def test_equimax(self):
        a, b, c, d = self.args
        crit = Equimax()
        self.assertAlmostEqual(crit.x(*self.args, self.n, self.m), d - 4 * a * b / 10)
        self.assertAlmostEqual(crit.y(*self.args, self.n, self.m), c - 4 * (a**2 - b**2) / 20)

    def test_quartimax(self):
        a, b, c, d = self.args
        crit = Quartimax()
        self.assertEqual(crit.x(*self.args, self.n, self.m), d)
        self.assertEqual(crit.y(*self.args, self.n, self.m), c)

    def test_equimax_equals_varimax_for_two_factors(self):
        v, e = Varimax(), Equimax()
        self.assertAlmostEqual(v.x(*self.args, self.n, 2), e.x(*self.args, self.n, 2))
        self.assertAlmostEqual(v.y(*self.args, self.n, 2), e.y(*self.args, self.n, 2))

    @parameterized.expand([
        ('varimax', Varimax),
        ('VARIMAX', Varimax),
        ('equimax', Equimax),
        ('Quartimax', Quartimax),
    ])
    def test_get_criterion_by_name(self, name, cls):
        self.assertIsInstance(get_criterion(name), cls)

    def test_get_criterion_by_object(self):
        self.assertIsInstance(get_criterion(Equimax), Equimax)
        crit = Quartimax()
        self.assertIs(get_criterion(crit), crit)

    def test_get_criterion_invalid(self):
        with self.assertRaises(ValueError):
            get_criterion('promax')
        with self.assertRaises(TypeError):
            get_criterion(42)


class TestPairwiseRotation(unittest.TestCase):

    def test_precision_constant(self):
        self.assertEqual(MAX_PRECISION, 1e-15)

    def test_already_simple_structure(self):
        BH = np.eye(2)
        BH_rot, T, iterations, converged = pairwise_rotation(BH, Varimax())
        self.assertTrue(converged)
        self.assertEqual(iterations, 1)
        assert_array_equal(T, np.eye(2))
        assert_array_equal(BH_rot, np.eye(2))

    def test_two_factors_single_step(self):
        # rows of a planar rotation by alpha are rotated back by -alpha
        alpha = 0.3
        R = np.array([
            [np.cos(alpha), -np.sin(alpha)],
            [np.sin(alpha), np.cos(alpha)]
        ])
        BH_rot, T, iterations, converged = pairwise_rotation(R.copy(), Varimax())
        self.assertTrue(converged)
        self.assertLessEqual(iterations, 3)
        assert_allclose(BH_rot, np.eye(2), atol=1e-10)
        assert_allclose(T, R.T, atol=1e-10)

    def test_stops_after_max_iter(self):
        np.random.seed(777)
        BH = np.random.randn(50, 6)
        BH = BH / np.linalg.norm(BH, axis=1)[:, np.newaxis]
        _, T, iterations, converged = pairwise_rotation(BH, Varimax(), max_iter=1)
        self.assertFalse(converged)
        self.assertEqual(iterations, 2)
        self.assertTrue(is_orthogonal(T))
