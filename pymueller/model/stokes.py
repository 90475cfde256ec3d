import numpy as np
import xarray as xr
import sympy
from pymueller.model.precision import get_precision

__all__ = ['stokes_vector', 'to_dataarray', 'mueller_product', 'degree_of_polarisation', 'polarisation_angle', ]

MUELLER_DIMS = ('mueller_v', 'mueller_h', )
STOKES_DIMS = ('stokes', )


def stokes_vector(i, q=0, u=0, v=0, dtype=np.float64):
    """
    Stokes vector in the given precision

    Physical realisability (i >= sqrt(q^2 + u^2 + v^2)) is not checked.

    :param i: Total intensity.
    :param q: Linear polarisation, 0 / 90 degrees.
    :param u: Linear polarisation, +45 / -45 degrees.
    :param v: Circular polarisation.
    :param dtype: numeric precision.
    :return: Stokes vector (read-only numpy array, or a sympy column matrix for the symbolic precision).
    """
    return get_precision(dtype).vector([i, q, u, v])


def to_dataarray(values):
    """
    Label a Mueller matrix or Stokes vector for use with mueller_product

    :param values: 4x4 Mueller matrix or 4-element Stokes vector (numpy array, sympy matrix or sequence).
    :return: (xr.DataArray) with dims ('mueller_v', 'mueller_h') or ('stokes', ).
    """
    if isinstance(values, xr.DataArray):
        return values
    if isinstance(values, sympy.MatrixBase):
        values = np.array(values.tolist(), dtype=object)
    else:
        values = np.asarray(values)

    if values.shape == (4, 4):
        return xr.DataArray(values, dims=MUELLER_DIMS, )
    elif values.size == 4:
        return xr.DataArray(values.reshape(4), dims=STOKES_DIMS, )
    else:
        raise ValueError('pymueller: expected a 4x4 Mueller matrix or a Stokes vector, got shape {0}'.format(
            values.shape))


def mueller_product(mat1, mat2):
    """
    Compute the product of a Mueller matrix with a Mueller matrix / Stokes vector

    :param xarray.DataArray mat1: Mueller matrix.
    :param xarray.DataArray mat2: Mueller matrix or Stokes vector.
    :return: (xarray.DataArray) mat1 @ mat2, a Mueller matrix or a Stokes vector, depending on the dimensions of mat2.
    """

    if 'mueller_v' in mat2.dims and 'mueller_h' in mat2.dims:
        mat2_i = mat2.rename({'mueller_h': 'mueller_i', 'mueller_v': 'mueller_h'})
        return mat1.dot(mat2_i, dim='mueller_h', ).rename({'mueller_i': 'mueller_h'})

    elif 'stokes' in mat2.dims:
        mat2_i = mat2.rename({'stokes': 'mueller_h'})
        return mat1.dot(mat2_i, dim='mueller_h', ).rename({'mueller_v': 'stokes'})

    else:
        raise ValueError('pymueller: arguments not understood')


def _get_components(stokes, precision):
    if isinstance(stokes, xr.DataArray):
        stokes = stokes.values
    if isinstance(stokes, np.ndarray):
        stokes = stokes.ravel()
    values = list(stokes)
    if len(values) != 4:
        raise ValueError('pymueller: expected a Stokes vector of length 4, got {0}'.format(len(values)))
    return [precision.scalar(value) for value in values]


def degree_of_polarisation(stokes, dtype=np.float64):
    """
    Degree of polarisation, sqrt(Q^2 + U^2 + V^2) / I

    It is undefined for fully blocked light (I = 0), which raises a ValueError in every precision.

    :param stokes: Stokes vector.
    :param dtype: numeric precision of the Stokes vector.
    :return: Degree of polarisation. Not clipped to [0, 1].
    """
    precision = get_precision(dtype)
    i, q, u, v = _get_components(stokes, precision)
    if precision.is_zero(i):
        raise ValueError('pymueller: degree of polarisation is undefined for zero intensity')
    return precision.sqrt(q ** 2 + u ** 2 + v ** 2) / i


def polarisation_angle(stokes, dtype=np.float64):
    """
    Angle of the linearly polarised part, 0.5 * atan2(U, Q)

    :param stokes: Stokes vector.
    :param dtype: numeric precision of the Stokes vector.
    :return: Angle in radians, in (-pi / 2, pi / 2].
    """
    precision = get_precision(dtype)
    i, q, u, v = _get_components(stokes, precision)
    return precision.atan2(u, q) / 2
