import unittest
import sympy
from sympy import pi, cos, sin, simplify
from pymueller import linear_polariser, waveplate, quarter_waveplate, get_output_intensity, S_UNPOLARISED, \
    S_GENERAL, s0, s1, s2, s3


def polariser(rho):
    return linear_polariser(rho, dtype='symbolic')


def retarder(rho, phi):
    return waveplate(rho, phi, dtype='symbolic')


class TestSymbolic(unittest.TestCase):
    def setUp(self):
        self.phi, self.rho = sympy.symbols('phi rho', real=True)

    def test_1retarder_linear(self, ):
        """
        single-delay interferometer between parallel polarisers
        """
        mueller = polariser(0) * retarder(pi / 4, self.phi) * polariser(0)
        i_out = get_output_intensity(mueller)
        self.assertEqual(simplify(i_out - s0 * (1 + cos(self.phi)) / 4), 0)

    def test_1retarder_linear_rotated(self, ):
        """
        rotating the whole interferometer changes nothing for unpolarised input
        """
        mueller = polariser(self.rho) * retarder(self.rho + pi / 4, self.phi) * polariser(self.rho)
        diff = get_output_intensity(mueller, S_UNPOLARISED) - s0 * (1 + cos(self.phi)) / 4
        for phi, rho in [(0.3, 0.1), (2.1, -0.7), (-1.4, 1.9)]:
            value = diff.subs({self.phi: phi, self.rho: rho, s0: 1.7}).evalf()
            self.assertAlmostEqual(float(value), 0)

    def test_polariser_general_input(self, ):
        i_out = get_output_intensity(polariser(self.rho), S_GENERAL)
        expected = (s0 + s1 * cos(2 * self.rho) + s2 * sin(2 * self.rho)) / 2
        self.assertEqual(simplify(i_out - expected), 0)

    def test_circular_analyser(self, ):
        """
        quarter-wave plate followed by a polariser at -45 degrees transmits V = +1 light only
        """
        mueller = polariser(-pi / 4) * quarter_waveplate(0, dtype='symbolic')
        i_out = get_output_intensity(mueller, S_GENERAL)
        self.assertEqual(simplify(i_out - (s0 + s3) / 2), 0)


if __name__ == '__main__':
    unittest.main()
