#!/usr/bin/env python


"""
Setup script for ais-seqmaker
"""


import codecs
import os

from setuptools import find_packages
from setuptools import setup


with codecs.open('README.rst', encoding='utf-8') as f:
    readme = f.read().strip()


version = None
author = None
with open(os.path.join('ais_seqmaker', '__init__.py')) as f:
    for line in f:
        if line.strip().startswith('__version__'):
            version = line.split('=')[1].strip().replace('"', '').replace("'", '')
        elif line.strip().startswith('__author__'):
            author = line.split('=')[1].strip().replace('"', '').replace("'", '')
        elif None not in (version, author):
            break


setup(
    author=author,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: GIS',
        'Topic :: Scientific/Engineering :: Information Analysis',
        'Topic :: Utilities',
    ],
    description="Split per vessel AIS position reports into fixed rate, "
                "gap aware sequences.",
    entry_points='''
        [console_scripts]
        seqmaker=ais_seqmaker.cli:main
    ''',
    extras_require={
        'dev': [
            'pytest>=3.6',
            'pytest-cov',
            'coverage'
        ]
    },
    include_package_data=True,
    install_requires=[
        'click>=8.0',
        'numpy',
    ],
    keywords='AIS GIS trajectory resampling',
    license="Apache 2.0",
    long_description=readme,
    name='ais-seqmaker',
    packages=find_packages(exclude=['test*.*', 'tests']),
    python_requires='>=3.6',
    version=version,
    zip_safe=True
)
