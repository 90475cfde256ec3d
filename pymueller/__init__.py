from .paths import *
from .model import *
from .tools import *
from .vis import *
