from .ellipse import *
