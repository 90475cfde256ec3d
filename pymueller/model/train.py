import os
import logging
import yaml
from datetime import datetime
import numpy as np
import pymueller
from pymueller.model import components as _components
from pymueller.model.components import Component
from pymueller.model.mueller import rotation_matrix
from pymueller.model.precision import get_precision
from pymueller.model.stokes import mueller_product, to_dataarray
from pymueller.tools.config_tools import MyDumper

__all__ = ['OpticalTrain', ]

logger = logging.getLogger(__name__)


class OpticalTrain:
    """
    A sequence of optical components

    :param str config: \
        Path to a .yaml optical train configuration file.

    :param list components: \
        A list of instances of pymueller.model.Component, where the first entry is the first
        component that the light passes through.

    """
    def __init__(self, config=None, components=None):

        if config is not None:
            self.components = self.read_config(config)
        else:
            self.components = list(components) if components is not None else []

        self.check_inputs()

    def read_config(self, config):
        """
        Tries loading config as an absolute path to a .yaml file. Failing that, try it as a relative path to a .yaml file
        from the current working directory. Finally, try looking for config as a .yaml file saved in
        pymueller/model/config/.
        """

        fpaths = [
            config,
            os.path.join(os.getcwd(), config),
            os.path.join(pymueller.config_path, config),
        ]
        for fpath in fpaths:
            try:
                with open(fpath) as f:
                    config = yaml.load(f, Loader=yaml.FullLoader)
                found = True
                break
            except FileNotFoundError:
                found = False

        if not found:
            raise FileNotFoundError('pymueller: could not find config file')
        logger.info('Loaded optical train config from %s', fpath)

        try:
            cc = config['components']
            components = []
            for entry in cc:
                (name, kwargs), = entry.items()
                cls = getattr(_components, name)
                assert isinstance(cls, type) and issubclass(cls, Component)
                components.append(cls(**(kwargs or {})))

        except (KeyError, TypeError, ValueError, AttributeError, AssertionError) as e:
            raise ValueError('pymueller: could not interpret config file') from e

        return components

    def write_config(self, fpath):
        """
        Write the current optical train config to a .yaml config file that can then be reloaded at a later date.

        :param str fpath:
        """

        if not fpath.endswith('.yaml'):
            raise ValueError('pymueller: config file must have a .yaml extension')

        config = {
            'components': [dict([(type(c).__name__, _to_builtin(vars(c)))]) for c in self.components]
        }

        with open(fpath, 'w') as f:
            f.write('# This file was generated automatically at ' + datetime.now().strftime("%H:%M:%S, %m/%d/%Y") + '\n')
            yaml.dump(config, f, Dumper=MyDumper)
        logger.info('Wrote optical train config with %d components to %s', len(self.components), fpath)

    def check_inputs(self):
        assert all(isinstance(co, Component) for co in self.components)

    def get_mueller_matrix(self, dtype=np.float64):
        """
        Calculate total Mueller matrix for the optical train

        :param dtype: numeric precision.
        :return: (xr.DataArray) Mueller matrix.
        """
        precision = get_precision(dtype)
        mat_total = to_dataarray(rotation_matrix(0, dtype=precision))
        for component in self.components:
            mat_component = component.get_mueller_matrix(dtype=precision)
            mat_total = mueller_product(mat_component, mat_total)
        return mat_total

    def propagate(self, stokes, dtype=np.float64):
        """
        Stokes vector of the light leaving the optical train

        :param stokes: Stokes vector of the light entering the first component.
        :param dtype: numeric precision.
        :return: (xr.DataArray) Stokes vector with dim 'stokes'.
        """
        return mueller_product(self.get_mueller_matrix(dtype=dtype), to_dataarray(stokes))

    def __eq__(self, train_other):
        if len(self.components) != len(train_other.components):
            return False
        return all([c == c_other for c, c_other in zip(self.components, train_other.components)])


def _to_builtin(attrs):
    # numpy scalars would be dumped as python/object tags
    return dict([(k, v.item() if isinstance(v, np.generic) else v) for k, v in attrs.items()])
