"""
Numeric precisions for Mueller calculus.

Every generator in pymueller.model.mueller takes a 'dtype' argument that is resolved here to a Precision object. The
precision owns the arithmetic (sin, cos, sqrt, pi) and the container type of the output, so that all intermediate
values of a calculation stay in the requested precision:

- 'float32', 'float64', 'longdouble': read-only numpy arrays of that dtype.
- 'arbitrary' / 'mpmath': read-only numpy arrays of dtype object holding mpmath floats with a fixed number of decimal
  digits. Each ArbitraryPrecision owns a private mpmath context.
- 'symbolic' / 'sympy': sympy.ImmutableMatrix, for deriving closed-form expressions.

Plain Python ints and floats are accepted by every precision. Values that already carry a precision of their own (numpy
floating scalars, mpmath floats, sympy expressions) must match the requested precision or a TypeError is raised.
The arbitrary precision also accepts decimal strings.
"""
import numbers
from functools import reduce
import numpy as np
import mpmath
import sympy

__all__ = [
    'Precision', 'NumpyPrecision', 'ArbitraryPrecision', 'SymbolicPrecision', 'get_precision', 'infer_precision',
    'FLOAT32', 'FLOAT64', 'LONGDOUBLE', 'ARBITRARY', 'SYMBOLIC',
]


def _is_literal(value):
    """ Plain Python numbers (and numpy integers) carry no floating precision of their own. """
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, np.generic):
        return isinstance(value, np.integer)
    return isinstance(value, (numbers.Integral, float))


def _as_builtin(value):
    if isinstance(value, numbers.Integral):
        return int(value)
    return value


class Precision:
    """
    Base class for a numeric precision.

    Subclasses convert scalars into the precision, provide its elementary functions and build the matrix / vector
    containers that the generators return.
    """
    name = None
    type = None

    def scalar(self, value):
        raise NotImplementedError

    def sin(self, x):
        raise NotImplementedError

    def cos(self, x):
        raise NotImplementedError

    def sqrt(self, x):
        raise NotImplementedError

    def atan2(self, y, x):
        raise NotImplementedError

    @property
    def pi(self):
        raise NotImplementedError

    def matrix(self, rows):
        raise NotImplementedError

    def vector(self, values):
        raise NotImplementedError

    def check_matrix(self, matrix):
        raise NotImplementedError

    def matmul(self, *matrices):
        raise NotImplementedError

    def is_negative(self, value):
        return value < 0

    def is_zero(self, value):
        return value == 0

    def _mismatch(self, value):
        return TypeError('pymueller: {0} value {1!r} given for {2} precision'.format(type(value).__name__, value,
                                                                                       self.name))

    def __repr__(self):
        return '{0}({1!r})'.format(type(self).__name__, self.name)


class NumpyPrecision(Precision):
    """
    Fixed-width floating point precision backed by a numpy dtype.

    :param dtype: numpy floating dtype, e.g. numpy.float32.
    """
    def __init__(self, dtype):
        self.dtype = np.dtype(dtype)
        self.name = self.dtype.name
        self.type = self.dtype.type

    def scalar(self, value):
        if _is_literal(value):
            return self.type(_as_builtin(value))
        if isinstance(value, np.floating) and value.dtype == self.dtype:
            return value
        raise self._mismatch(value)

    def sin(self, x):
        return np.sin(x)

    def cos(self, x):
        return np.cos(x)

    def sqrt(self, x):
        return np.sqrt(x)

    def atan2(self, y, x):
        return np.arctan2(y, x)

    @property
    def pi(self):
        # np.pi is a float64: take arccos(-1) so that longdouble gets all of its digits
        return np.arccos(self.type(-1))

    def _freeze(self, array):
        array.flags.writeable = False
        return array

    def matrix(self, rows):
        return self._freeze(np.array(rows, dtype=self.dtype))

    def vector(self, values):
        return self._freeze(np.array([self.scalar(v) for v in values], dtype=self.dtype))

    def check_matrix(self, matrix):
        if not isinstance(matrix, np.ndarray) or matrix.dtype != self.dtype:
            raise TypeError('pymueller: expected a {0} matrix, got {1}'.format(
                self.name, getattr(matrix, 'dtype', type(matrix).__name__)))

    def matmul(self, *matrices):
        return self._freeze(reduce(np.matmul, matrices))


class ArbitraryPrecision(Precision):
    """
    Arbitrary precision floating point, backed by a private mpmath context.

    Matrices are numpy object arrays whose elements are all of this precision's mpf type, so matrices made with two
    different ArbitraryPrecision instances do not mix. Scalars follow the same rule: mpf values are accepted only when
    they come from this precision's own context. Decimal strings such as '0.1' are also accepted, and are read at the
    full working precision.

    :param int dps: Number of decimal digits of working precision.
    """
    def __init__(self, dps=50):
        self.ctx = mpmath.MPContext()
        self.ctx.dps = dps
        self.dps = dps
        self.name = 'arbitrary'
        self.type = self.ctx.mpf

    def scalar(self, value):
        if isinstance(value, self.type):
            return value
        if _is_literal(value) or isinstance(value, str):
            return self.ctx.mpf(_as_builtin(value))
        raise self._mismatch(value)

    def sin(self, x):
        return self.ctx.sin(x)

    def cos(self, x):
        return self.ctx.cos(x)

    def sqrt(self, x):
        return self.ctx.sqrt(x)

    def atan2(self, y, x):
        return self.ctx.atan2(y, x)

    @property
    def pi(self):
        return +self.ctx.pi

    def _freeze(self, array):
        array.flags.writeable = False
        return array

    def matrix(self, rows):
        array = np.empty((len(rows), len(rows[0])), dtype=object)
        for i, row in enumerate(rows):
            for j, value in enumerate(row):
                array[i, j] = self.ctx.mpf(value)
        return self._freeze(array)

    def vector(self, values):
        array = np.empty(len(values), dtype=object)
        for i, value in enumerate(values):
            array[i] = self.scalar(value)
        return self._freeze(array)

    def check_matrix(self, matrix):
        if not isinstance(matrix, np.ndarray) or matrix.dtype != object \
                or not all(isinstance(x, self.type) for x in matrix.flat):
            raise TypeError('pymueller: expected a matrix of {0}-digit mpmath floats'.format(self.dps))

    def matmul(self, *matrices):
        return self._freeze(reduce(np.matmul, matrices))

    def __repr__(self):
        return 'ArbitraryPrecision(dps={0})'.format(self.dps)


class SymbolicPrecision(Precision):
    """
    Exact symbolic 'precision' backed by sympy. Angles and other parameters may be sympy symbols.
    """
    name = 'symbolic'
    type = sympy.Expr

    def scalar(self, value):
        if _is_literal(value):
            return sympy.sympify(_as_builtin(value))
        if isinstance(value, sympy.Basic):
            return value
        raise self._mismatch(value)

    def sin(self, x):
        return sympy.sin(x)

    def cos(self, x):
        return sympy.cos(x)

    def sqrt(self, x):
        return sympy.sqrt(x)

    def atan2(self, y, x):
        return sympy.atan2(y, x)

    @property
    def pi(self):
        return sympy.pi

    def matrix(self, rows):
        return sympy.ImmutableMatrix(rows)

    def vector(self, values):
        return sympy.ImmutableMatrix([self.scalar(v) for v in values])

    def check_matrix(self, matrix):
        if not isinstance(matrix, sympy.MatrixBase):
            raise TypeError('pymueller: expected a sympy matrix, got {0}'.format(type(matrix).__name__))

    def matmul(self, *matrices):
        return sympy.ImmutableMatrix(reduce(lambda m1, m2: m1 * m2, matrices))

    def is_negative(self, value):
        # unknown sign (e.g. a bare symbol) is not an error
        return value.is_negative is True

    def is_zero(self, value):
        return value.is_zero is True


FLOAT32 = NumpyPrecision(np.float32)
FLOAT64 = NumpyPrecision(np.float64)
LONGDOUBLE = NumpyPrecision(np.longdouble)
ARBITRARY = ArbitraryPrecision()
SYMBOLIC = SymbolicPrecision()

_NUMPY_PRECISIONS = {}
# float64 goes in last so that it keeps the key where longdouble is only 64 bits wide
for _precision in (LONGDOUBLE, FLOAT32, FLOAT64, ):
    _NUMPY_PRECISIONS[_precision.dtype] = _precision

_NAMED_PRECISIONS = {
    'arbitrary': ARBITRARY,
    'mpmath': ARBITRARY,
    'symbolic': SYMBOLIC,
    'sympy': SYMBOLIC,
}


def get_precision(dtype=np.float64):
    """
    Resolve a dtype argument to a Precision.

    :param dtype: A Precision instance, a numpy floating type / dtype / name ('float32', 'float64', 'longdouble'), or
        one of the names 'arbitrary', 'mpmath', 'symbolic', 'sympy'.
    :return: (Precision)
    """
    if isinstance(dtype, Precision):
        return dtype
    if isinstance(dtype, str) and dtype.lower() in _NAMED_PRECISIONS:
        return _NAMED_PRECISIONS[dtype.lower()]
    try:
        np_dtype = np.dtype(dtype)
    except TypeError:
        raise ValueError('pymueller: precision {0!r} not understood'.format(dtype))
    if np_dtype not in _NUMPY_PRECISIONS:
        raise ValueError('pymueller: precision {0!r} not understood'.format(dtype))
    return _NUMPY_PRECISIONS[np_dtype]


def infer_precision(matrix):
    """
    Precision of an existing Mueller matrix, where its container alone determines it.

    Object arrays are ambiguous (their mpmath context is not recorded on the array) so the precision has to be given
    explicitly for them.

    :param matrix: numpy.ndarray or sympy matrix.
    :return: (Precision)
    """
    if isinstance(matrix, sympy.MatrixBase):
        return SYMBOLIC
    if isinstance(matrix, np.ndarray) and matrix.dtype in _NUMPY_PRECISIONS:
        return _NUMPY_PRECISIONS[matrix.dtype]
    raise TypeError('pymueller: cannot infer the precision of a {0}, pass dtype explicitly'.format(
        getattr(matrix, 'dtype', type(matrix).__name__)))
