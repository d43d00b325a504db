#!/usr/bin/env python3
# Always prefer setuptools over distutils
import io
import os
import re
from codecs import open  # To use a consistent encoding

from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))


# Stolen from pip
def read(*names, **kwargs):
    with io.open(
            os.path.join(os.path.dirname(__file__), *names),
            encoding=kwargs.get("encoding", "utf8")
    ) as fp:
        return fp.read()


# Stolen from pip
def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


# Get the long description from the relevant file
with open(os.path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='intervalset',

    # Versions should comply with PEP440.
    version=find_version('intervalset', '__init__.py'),

    description='Intervals with open and closed ends and Boolean algebra on disjoint interval '
                'sets',
    long_description=long_description,

    # Choose your license
    license='MIT',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 4 - Beta',

        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries',

        'License :: OSI Approved :: MIT License',

        'Programming Language :: Python :: 3',
    ],

    keywords='interval set algebra union intersection complement',

    packages=find_packages(exclude=['contrib', 'docs', 'tests*']),

    # https://packaging.python.org/en/latest/requirements.html
    install_requires=[
        'ruamel.yaml>=0.17',
        'numpy',
    ],
    python_requires='>=3.6',

    # $ pip install -e .[test]
    extras_require={
        'test': ['pytest'],
    },

    package_data={
        'tests': ['test_files/*.yml', '*.py'],
    },
    include_package_data=True,

    entry_points={
        'console_scripts': [
            'intervalset=intervalset.intervalset:main',
        ],
    },
)
