#!/usr/bin/env python

from setuptools import setup, find_packages

requirements = [
    "numpy",
    "numba",
    "pandas",
    "xarray",
    "dask[array]",
]

test_requirements = ['pytest>=3', ]

setup(
    author="",
    author_email='WFP-VAM',
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
    ],
    description="Whittaker-Eilers smoother for numpy and xarray",
    install_requires=requirements,
    extras_require={"test": test_requirements},
    license="MIT license",
    long_description="",
    keywords='whittaker_xr',
    name='whittaker_xr',
    packages=find_packages(include=['whittaker_xr', 'whittaker_xr.*']),
    test_suite='tests',
    tests_require=test_requirements,
    url='https://github.com/WFP-VAM/',
    version='0.1.0',
    zip_safe=False,
)
