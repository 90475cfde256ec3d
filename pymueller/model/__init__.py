from .precision import *
from .mueller import *
from .stokes import *
from .components import *
from .train import *
from .symbolic import *
