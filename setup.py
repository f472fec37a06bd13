import setuptools

setuptools.setup(
    name = 'splinedit',
    version = '1.0',
    description = 'natural cubic spline curve editing tools',
    packages = setuptools.find_packages(exclude=['tests']),
    install_requires=['numpy', 'scipy'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['splinedit=splinedit.cli:main']},
)
