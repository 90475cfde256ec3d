import numpy as np
import xarray as xr
import matplotlib.pyplot as plt
from numba import vectorize, f8

__all__ = ['get_ellipse_parameters', 'get_ellipse', 'plot_polarisation_ellipse', ]


def _as_float_stokes(stokes):
    if isinstance(stokes, xr.DataArray):
        stokes = stokes.values
    stokes = np.asarray(stokes, dtype=np.float64).ravel()
    if stokes.size != 4:
        raise ValueError('pymueller: expected a Stokes vector of length 4, got {0}'.format(stokes.size))
    return stokes


def get_ellipse_parameters(stokes):
    """
    Polarisation ellipse parameters of a Stokes vector

    :param stokes: Stokes vector [I, Q, U, V] in any precision. Evaluated in float64.
    :return: (tuple) semi-major axis a, semi-minor axis b and rotation angle theta in radians.
    """
    _, q, u, v = _as_float_stokes(stokes)
    lin = np.hypot(q, u)
    pol = np.hypot(lin, v)
    a = np.sqrt(0.5 * (pol + lin))
    b = np.sqrt(0.5 * (pol - lin))
    theta = 0.5 * np.arctan2(u, q)
    return a, b, theta


@vectorize([f8(f8, f8, f8, f8), ], nopython=True, fastmath=True, cache=True, )
def _ellipse_x(t, a, b, theta):
    return a * np.cos(t) * np.cos(theta) - b * np.sin(t) * np.sin(theta)


@vectorize([f8(f8, f8, f8, f8), ], nopython=True, fastmath=True, cache=True, )
def _ellipse_y(t, a, b, theta):
    return a * np.cos(t) * np.sin(theta) + b * np.sin(t) * np.cos(theta)


def get_ellipse(stokes, n=1000):
    """
    Path of the electric field over one period, for the polarised part of the light.

    :param stokes: Stokes vector [I, Q, U, V].
    :param int n: Number of points, spanning [0, 2 pi] inclusive.
    :return: (tuple) x and y coordinates as numpy arrays.
    """
    a, b, theta = get_ellipse_parameters(stokes)
    t = np.linspace(0, 2 * np.pi, n)
    return _ellipse_x(t, a, b, theta), _ellipse_y(t, a, b, theta)


def plot_polarisation_ellipse(stokes, ax=None, n=1000, **kwargs):
    """
    Plot the polarisation ellipse for the given Stokes parameters

    :param stokes: Stokes vector [I, Q, U, V].
    :param matplotlib.axes.Axes ax: Axes to plot on. A new figure is made if None.
    :param int n: Number of points.
    :param kwargs: Passed on to ax.plot().
    :return: (matplotlib.axes.Axes)
    """
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111)

    x, y = get_ellipse(stokes, n=n)
    ax.plot(x, y, **kwargs)
    ax.set_aspect('equal')
    ax.set_xlabel('x')
    ax.set_ylabel('y')

    lim = max(np.abs(x).max(), np.abs(y).max())
    if lim > 0:
        ax.set_xlim(-1.05 * lim, 1.05 * lim)
        ax.set_ylim(-1.05 * lim, 1.05 * lim)
    return ax
