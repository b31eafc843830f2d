# coding: utf-8

import io
import os

from setuptools import find_packages, setup

NAME = 'phipps'
DESCRIPTION = 'Base command class for phipps command line tools, with dry-run, timing and styled output.'
EMAIL = ''
AUTHOR = 'The phipps Authors'

REQUIRES = [
    'coloredlogs>=15.0.0,<16.0.0',
    'humanfriendly>=9.1',
]

DEV_REQUIRES = [
    'flake8>=6.0.0',
    'tox>=4.0.0',
    'isort>=5.0.0',
    'pytest>=7.0.0',
] + REQUIRES

here = os.path.abspath(os.path.dirname(__file__))

try:
    with io.open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
        long_description = '\n' + f.read()
except IOError:
    long_description = DESCRIPTION

about = {}
with io.open(os.path.join(here, 'phipps/__version__.py')) as f:
    exec(f.read(), about)

setup(
    name=NAME,
    version=about['__version__'],
    description=DESCRIPTION,
    long_description=long_description,
    long_description_content_type='text/markdown',
    author=AUTHOR,
    author_email=EMAIL,
    classifiers=[
        # Trove classifiers
        # Full list: https://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
    ],
    keywords='cli command dry-run',
    packages=find_packages(exclude=['docs', 'tests']),
    install_requires=REQUIRES,
    tests_require=[
        'pytest>=7.0.0'
    ],
    python_requires='>=3.8',
    extras_require={
        'dev': DEV_REQUIRES,
        'test': ['pytest>=7.0.0'],
    },
    entry_points={
        'console_scripts': [
            'phipps=phipps.main:main',
        ]
    },
    package_data={
        # for PEP484 & PEP561
        NAME: ['py.typed', '*.pyi'],
    },
)
