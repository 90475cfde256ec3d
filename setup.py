import setuptools

setuptools.setup(
    name='pymueller',
    version='0.1',
    description='Mueller calculus for polarisation optics: polarisers, waveplates, mirrors and frame rotations in '
                'fixed, arbitrary or symbolic precision',
    install_requires=['numpy', 'matplotlib', 'xarray', 'numba', 'sympy', 'mpmath', 'pyyaml'],
    extras_require={'test': ['pytest']},
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    package_data={'pymueller': ['model/config/*.yaml']},
)
