import numpy as np
from pymueller.model.precision import get_precision
from pymueller.model.mueller import rotate, linear_polariser, waveplate, mirror
from pymueller.model.stokes import to_dataarray
from pymueller.tools.units import deg2rad

__all__ = [
    'Component', 'OrientableComponent', 'LinearPolariser', 'LinearRetarder', 'Waveplate', 'QuarterWaveplate',
    'HalfWaveplate', 'Mirror',
]


class Component:
    """
    Base class for an optical component

    """

    def __eq__(self, other_component):
        if type(self) == type(other_component) and vars(self) == vars(other_component):
            return True
        else:
            return False

    def get_mueller_matrix(self, dtype=np.float64):
        raise NotImplementedError


class OrientableComponent(Component):
    """
    Base class for component with orientation-dependent behaviour

    Subclasses provide get_aligned_matrix(), the Mueller matrix of the component with its axis along the x-axis.

    :param float orientation: Orientation of the component axis in degrees, anti-clockwise from the x-axis.
    """
    def __init__(self, orientation=0, **kwargs):
        super().__init__(**kwargs)
        self.orientation = orientation

    def get_aligned_matrix(self, precision):
        raise NotImplementedError

    def orient(self, matrix, dtype=np.float64):
        """
        Calculate component Mueller matrix at the set orientation.

        :param matrix: Component Mueller matrix with its axis along the x-axis.
        :param dtype: numeric precision.
        :return: Component Mueller matrix at the set orientation.
        """
        precision = get_precision(dtype)
        return rotate(matrix, deg2rad(self.orientation, dtype=precision), dtype=precision)

    def get_mueller_matrix(self, dtype=np.float64):
        """
        Mueller matrix of the component at its set orientation

        :param dtype: numeric precision.
        :return: (xr.DataArray) Mueller matrix with dims ('mueller_v', 'mueller_h').
        """
        precision = get_precision(dtype)
        return to_dataarray(self.orient(self.get_aligned_matrix(precision), dtype=precision))


class LinearPolariser(OrientableComponent):
    """
    Linear polariser

    :param float orientation: \
        Orientation in degrees of the transmission axis relative to the x-axis.

    :param float p: \
        Amplitude transmission of the polarised component. [0, 1] - default is 1.

    """
    def __init__(self, p=1, **kwargs):
        super().__init__(**kwargs)

        assert 0 <= p <= 1
        self.p = p

    def get_aligned_matrix(self, precision):
        return linear_polariser(0, self.p, dtype=precision)


class LinearRetarder(OrientableComponent):
    """
    Base class for a linear retarder

    :param float orientation: Orientation of component fast axis in degrees, relative to the x-axis.
    :param float p: Amplitude transmission. [0, 1] - default is 1.
    """
    def __init__(self, p=1, **kwargs):
        super().__init__(**kwargs)

        assert 0 <= p <= 1
        self.p = p

    def get_delay(self, precision):
        raise NotImplementedError

    def get_aligned_matrix(self, precision):
        return waveplate(0, self.get_delay(precision), self.p, dtype=precision)


class Waveplate(LinearRetarder):
    """
    Ideal waveplate imparting a given delay.

    :param float delay: Imparted delay in radians.
    """
    def __init__(self, delay=0, **kwargs):
        super().__init__(**kwargs)
        self.delay = delay

    def get_delay(self, precision):
        return precision.scalar(self.delay)


class QuarterWaveplate(LinearRetarder):
    """
    Ideal quarter-wave plate.
    """
    def get_delay(self, precision):
        return precision.pi / 2


class HalfWaveplate(LinearRetarder):
    """
    Ideal half-wave plate.
    """
    def get_delay(self, precision):
        return precision.pi


class Mirror(OrientableComponent):
    """
    Mirror with partial p-reflectance and a phase shift on reflection.

    :param float orientation: Orientation of the plane of incidence in degrees, relative to the x-axis.
    :param float reflectance: Reflectance of the p-component relative to the s-component. [0, 1] - default is 1.
    :param float phase: Phase shift in radians between the s- and p-components. Default (None) is pi, an ideal metallic
        mirror.
    """
    def __init__(self, reflectance=1, phase=None, **kwargs):
        super().__init__(**kwargs)

        assert 0 <= reflectance <= 1
        self.reflectance = reflectance
        self.phase = phase

    def get_aligned_matrix(self, precision):
        return mirror(self.reflectance, 0, self.phase, dtype=precision)
