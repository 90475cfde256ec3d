"""
Mueller matrices for ideal polarisation optics.

Angles are in radians, measured anti-clockwise from the x-axis, and are not normalised. Every function takes a 'dtype'
argument (see pymueller.model.precision) that sets the precision of both the arithmetic and the returned matrix,
float64 by default. Matrices compose right-to-left: for light passing through m1 and then m2, the total matrix is
m2 @ m1.
"""
import numpy as np
from pymueller.model.precision import get_precision, infer_precision

__all__ = [
    'rotation_matrix', 'rotate', 'linear_polariser', 'waveplate', 'half_waveplate', 'quarter_waveplate', 'mirror',
]


def _double_angle(precision, theta):
    theta2 = 2 * precision.scalar(theta)
    return precision.cos(theta2), precision.sin(theta2)


# ----------------------------------------------------------------------------------------------------------------------
# FRAME ROTATION
def rotation_matrix(theta=0, dtype=np.float64):
    """
    Mueller matrix for frame rotation (anti-clockwise from x-axis)

    The angles appear doubled since the polarisation angle has a period of 180 degrees.

    :param theta: rotation angle in radians.
    :param dtype: numeric precision.
    :return: 4x4 frame rotation Mueller matrix, the identity for theta = 0.
    """
    precision = get_precision(dtype)
    c2, s2 = _double_angle(precision, theta)
    return precision.matrix([[1, 0, 0, 0],
                             [0, c2, s2, 0],
                             [0, -s2, c2, 0],
                             [0, 0, 0, 1]])


def rotate(matrix, theta, dtype=None):
    """
    Rotate an optical component about the optical axis

    Computes R(theta)^T @ matrix @ R(theta), so that for any generator g with an axis angle,
    rotate(g(phi), theta) == g(phi + theta), and rotate(rotate(matrix, theta), -theta) == matrix.

    :param matrix: 4x4 Mueller matrix.
    :param theta: rotation angle in radians.
    :param dtype: numeric precision. If None, it is taken from a numpy floating dtype or a sympy matrix. Required for
        arbitrary precision (object) arrays.
    :return: Rotated Mueller matrix.
    """
    precision = infer_precision(matrix) if dtype is None else get_precision(dtype)
    precision.check_matrix(matrix)
    if tuple(matrix.shape) != (4, 4):
        raise ValueError('pymueller: expected a 4x4 Mueller matrix, got shape {0}'.format(tuple(matrix.shape)))

    rot_mat = rotation_matrix(theta, dtype=precision)
    return precision.matmul(rot_mat.T, matrix, rot_mat)


# ----------------------------------------------------------------------------------------------------------------------
# POLARISERS
def linear_polariser(theta=0, p=1, dtype=np.float64):
    """
    Linear polariser Mueller matrix

    Closed form of the axis-aligned polariser (p^2 / 2) [[1, 1, 0, 0], [1, 1, 0, 0], [0, ...], [0, ...]] rotated by
    theta. Light polarised along the transmission axis passes unattenuated, orthogonal light is blocked.

    :param theta: angle in radians of the transmission axis about the x-axis.
    :param p: amplitude transmission of the polarised component, 1 for an ideal polariser.
    :param dtype: numeric precision.
    :return: Mueller matrix.
    """
    precision = get_precision(dtype)
    c2, s2 = _double_angle(precision, theta)
    i0 = precision.scalar(p) ** 2 / 2
    return precision.matrix([[i0, i0 * c2, i0 * s2, 0],
                             [i0 * c2, i0 * c2 * c2, i0 * c2 * s2, 0],
                             [i0 * s2, i0 * c2 * s2, i0 * s2 * s2, 0],
                             [0, 0, 0, 0]])


# ----------------------------------------------------------------------------------------------------------------------
# RETARDERS
def waveplate(theta=0, delta=0, p=1, dtype=np.float64):
    """
    Linear retarder Mueller matrix

    Closed form of the axis-aligned retarder p^2 [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, cos(delta), -sin(delta)],
    [0, 0, sin(delta), cos(delta)]] rotated by theta. With this sign convention a quarter-wave plate at theta = 0 turns
    +45 degree linear polarisation into V = +1 circular polarisation.

    :param theta: angle in radians of the fast axis about the x-axis.
    :param delta: retardance in radians imparted to the slow axis.
    :param p: amplitude transmission, 1 for a lossless plate.
    :param dtype: numeric precision.
    :return: Mueller matrix, the identity for delta = 0 and p = 1.
    """
    precision = get_precision(dtype)
    c2, s2 = _double_angle(precision, theta)
    delta = precision.scalar(delta)
    cd, sd = precision.cos(delta), precision.sin(delta)
    tx = precision.scalar(p) ** 2
    return precision.matrix([[tx, 0, 0, 0],
                             [0, tx * (c2 * c2 + s2 * s2 * cd), tx * c2 * s2 * (1 - cd), tx * s2 * sd],
                             [0, tx * c2 * s2 * (1 - cd), tx * (c2 * c2 * cd + s2 * s2), -tx * c2 * sd],
                             [0, -tx * s2 * sd, tx * c2 * sd, tx * cd]])


def half_waveplate(theta=0, p=1, dtype=np.float64):
    """
    Half-wave plate Mueller matrix

    Mirrors linear polarisation through the fast axis: rotating the plate by theta rotates the output polarisation angle
    by 2 theta.

    :param theta: angle in radians of the fast axis about the x-axis.
    :param p: amplitude transmission.
    :param dtype: numeric precision.
    :return: Mueller matrix.
    """
    precision = get_precision(dtype)
    return waveplate(theta, precision.pi, p, dtype=precision)


def quarter_waveplate(theta=0, p=1, dtype=np.float64):
    """
    Quarter-wave plate Mueller matrix

    :param theta: angle in radians of the fast axis about the x-axis.
    :param p: amplitude transmission.
    :param dtype: numeric precision.
    :return: Mueller matrix.
    """
    precision = get_precision(dtype)
    return waveplate(theta, precision.pi / 2, p, dtype=precision)


# ----------------------------------------------------------------------------------------------------------------------
# REFLECTORS
def mirror(r=1, theta=0, delta=None, dtype=np.float64):
    """
    Mirror Mueller matrix

    Closed form of the axis-aligned reflector [[a, b, 0, 0], [b, a, 0, 0], [0, 0, k cos(delta), -k sin(delta)],
    [0, 0, k sin(delta), k cos(delta)]] rotated by theta, with a = (r + 1) / 2, b = (r - 1) / 2 and k = sqrt(r). The
    defaults give an ideal metallic mirror, which passes I and Q and negates U and V.

    :param r: reflectance of the p-component relative to the s-component, in [0, 1]. 1 is lossless.
    :param theta: angle in radians of the plane of incidence about the x-axis.
    :param delta: phase shift in radians between the s- and p-components. Defaults to pi.
    :param dtype: numeric precision.
    :return: Mueller matrix.
    """
    precision = get_precision(dtype)
    r = precision.scalar(r)
    if precision.is_negative(r):
        raise ValueError('pymueller: mirror reflectance must be non-negative, got {0}'.format(r))

    delta = precision.pi if delta is None else precision.scalar(delta)
    theta = precision.scalar(theta)
    c2, s2 = _double_angle(precision, theta)
    cs = precision.sin(4 * theta) / 2

    a = (r + 1) / 2
    b = (r - 1) / 2
    k = precision.sqrt(r)
    kc = k * precision.cos(delta)
    ks = k * precision.sin(delta)

    return precision.matrix([[a, b * c2, b * s2, 0],
                             [b * c2, a * c2 * c2 + kc * s2 * s2, (a - kc) * cs, ks * s2],
                             [b * s2, (a - kc) * cs, a * s2 * s2 + kc * c2 * c2, -ks * c2],
                             [0, -ks * s2, ks * c2, kc]])
