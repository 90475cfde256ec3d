import numpy as np
from pymueller.model.precision import get_precision

__all__ = ['deg2rad', ]


def deg2rad(angle, dtype=np.float64):
    """
    Convert an angle from degrees to radians, in the given precision.

    math.radians() would always go through a float64, so the conversion is done with the precision's own pi.

    :param angle: Angle in degrees.
    :param dtype: numeric precision.
    :return: Angle in radians.
    """
    precision = get_precision(dtype)
    return precision.scalar(angle) * precision.pi / 180
