"""
Symbolic Mueller calculus, used to derive closed-form expressions for the light leaving an optical train.

The generators in pymueller.model.mueller return exact sympy matrices when called with dtype='symbolic', and accept
sympy symbols for their angles. e.g. basic birefringent interferometer signal:

    phi = sympy.symbols('phi', real=True)
    pol = linear_polariser(0, dtype='symbolic')
    m = pol * waveplate(sympy.pi / 4, phi, dtype='symbolic') * pol
    get_output_intensity(m)  # s0 * (1 + cos(phi)) / 4
"""
import xarray as xr
from sympy import ImmutableMatrix, symbols, trigsimp

__all__ = ['s0', 's1', 's2', 's3', 'S_UNPOLARISED', 'S_GENERAL', 'get_output_intensity', ]


# ----------------------------------------------------------------------------------------------------------------------
# STOKES VECTORS
s0, s1, s2, s3 = symbols('s0 s1 s2 s3', real=True)
S_UNPOLARISED = ImmutableMatrix([s0, 0, 0, 0])
S_GENERAL = ImmutableMatrix([s0, s1, s2, s3])


def get_output_intensity(matrix, stokes=S_UNPOLARISED):
    """
    Total intensity of the light leaving a component

    :param matrix: Symbolic Mueller matrix, as a sympy matrix or an xr.DataArray of sympy expressions.
    :param stokes: Symbolic Stokes vector of the input light, unpolarised by default.
    :return: Trig-simplified expression for the first Stokes parameter of the output.
    """
    if isinstance(matrix, xr.DataArray):
        matrix = ImmutableMatrix(matrix.values.tolist())
    return trigsimp((matrix * stokes)[0])
