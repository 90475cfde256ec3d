import unittest
import numpy as np
import sympy
import xarray as xr
from numpy.testing import assert_almost_equal
from pymueller import mueller_product, to_dataarray, stokes_vector, degree_of_polarisation, polarisation_angle, \
    linear_polariser, ARBITRARY


class TestMueller(unittest.TestCase):
    def setUp(self):
        self.rng = np.random.default_rng(7)

    def test_mueller_product(self, ):
        """
        basic Mueller matrix multiplication test

        """
        mdims = ('mueller_v', 'mueller_h')
        mm_1 = xr.DataArray(self.rng.random((4, 4, )), dims=mdims, )
        mm_2 = xr.DataArray(np.identity(4, ), dims=mdims, )
        sv_1 = xr.DataArray(self.rng.random(4, ), dims=('stokes', ), )

        assert_almost_equal(mm_1.values, mueller_product(mm_1, mm_2).values, )
        assert_almost_equal(mm_1.values, mueller_product(mm_2, mm_1).values, )
        assert_almost_equal(sv_1.values, mueller_product(mm_2, sv_1).data, )

    def test_product_order(self, ):
        mm_1 = self.rng.normal(size=(4, 4))
        mm_2 = self.rng.normal(size=(4, 4))
        sv = self.rng.normal(size=4)

        mat = mueller_product(to_dataarray(mm_1), to_dataarray(mm_2))
        self.assertEqual(mat.dims, ('mueller_v', 'mueller_h'))
        assert_almost_equal(mat.values, mm_1 @ mm_2)

        vec = mueller_product(to_dataarray(mm_1), to_dataarray(sv))
        self.assertEqual(vec.dims, ('stokes', ))
        assert_almost_equal(vec.values, mm_1 @ sv)

    def test_not_understood(self, ):
        with self.assertRaises(ValueError):
            mueller_product(to_dataarray(np.identity(4)), xr.DataArray(np.ones(4), dims=('x', )))

    def test_arbitrary_precision_product(self, ):
        sv = mueller_product(to_dataarray(linear_polariser(dtype='arbitrary')),
                             to_dataarray(stokes_vector(1, 1, 0, 0, dtype='arbitrary')))
        self.assertTrue(all(isinstance(x, ARBITRARY.type) for x in sv.values))
        assert_almost_equal(np.array(sv.values, dtype=float), [1, 1, 0, 0])


class TestStokes(unittest.TestCase):
    def test_stokes_vector(self, ):
        sv = stokes_vector(1, 0.5)
        self.assertEqual(sv.dtype, np.float64)
        assert_almost_equal(sv, [1, 0.5, 0, 0])
        with self.assertRaises(ValueError):
            sv[0] = 2

        self.assertEqual(stokes_vector(1, dtype=np.float32).dtype, np.float32)
        sv = stokes_vector(1, 0, 0, 1, dtype='symbolic')
        self.assertIsInstance(sv, sympy.ImmutableMatrix)
        self.assertEqual(sv.shape, (4, 1))

    def test_stokes_vector_mismatch(self, ):
        with self.assertRaises(TypeError):
            stokes_vector(np.float64(1), dtype=np.float32)

    def test_to_dataarray(self, ):
        self.assertEqual(to_dataarray(np.identity(4)).dims, ('mueller_v', 'mueller_h'))
        self.assertEqual(to_dataarray([1, 0, 0, 0]).dims, ('stokes', ))
        self.assertEqual(to_dataarray(stokes_vector(1, dtype='symbolic')).dims, ('stokes', ))
        self.assertEqual(to_dataarray(linear_polariser(dtype='symbolic')).dims, ('mueller_v', 'mueller_h'))
        with self.assertRaises(ValueError):
            to_dataarray(np.ones(3))

    def test_degree_of_polarisation(self, ):
        assert_almost_equal(degree_of_polarisation([1, 0.6, 0, 0.8]), 1)
        assert_almost_equal(degree_of_polarisation([2, 0, 0, 0]), 0)
        assert_almost_equal(degree_of_polarisation([2, 0, 1, 0]), 0.5)
        assert_almost_equal(degree_of_polarisation(to_dataarray([1, 0, 0.5, 0])), 0.5)
        dop = degree_of_polarisation(stokes_vector(1, 0.6, 0, 0.8, dtype='arbitrary'), dtype='arbitrary')
        self.assertIsInstance(dop, ARBITRARY.type)
        with self.assertRaises(ValueError):
            degree_of_polarisation([1, 0, 0])

    def test_degree_of_polarisation_blocked(self, ):
        """
        light blocked by a crossed polariser has no degree of polarisation, whatever the precision
        """
        for dtype in [np.float32, np.float64, np.longdouble, 'arbitrary', 'symbolic']:
            with self.subTest(dtype=dtype):
                blocked = linear_polariser(dtype=dtype) @ stokes_vector(1, -1, dtype=dtype)
                with self.assertRaises(ValueError):
                    degree_of_polarisation(blocked, dtype=dtype)
        with self.assertRaises(ValueError):
            degree_of_polarisation(to_dataarray([0, 0, 0, 0]))

    def test_polarisation_angle(self, ):
        assert_almost_equal(polarisation_angle([1, 1, 0, 0]), 0)
        assert_almost_equal(polarisation_angle([1, 0, 1, 0]), np.pi / 4)
        assert_almost_equal(polarisation_angle([1, -1, 0, 0]), np.pi / 2)
        assert_almost_equal(polarisation_angle([1, 0, -1, 0]), -np.pi / 4)
        angle = polarisation_angle(stokes_vector(1, 0, 1, 0, dtype='symbolic'), dtype='symbolic')
        self.assertEqual(angle, sympy.pi / 4)


if __name__ == '__main__':
    unittest.main()
