from .units import *
from .config_tools import *
