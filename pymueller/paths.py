import os, inspect

"""
Saved optical train configurations can be loaded by name using pymueller.OpticalTrain(config=...) or accessed directly
using pymueller.paths.config_path

"""

root = os.path.dirname(os.path.abspath(inspect.getfile(inspect.currentframe())))
config_path = os.path.join(root, 'model', 'config')
