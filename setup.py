#!/usr/bin/env python3
"""Distribution and installation of xdg-basedir."""

from pathlib import Path

from setuptools import find_packages, setup

def readme():
    with open(Path(__file__).parent / 'README.rst') as file:
        return file.read()

setup(
    name='xdg-basedir',
    version='0.1.0',
    packages=find_packages(exclude=['*.tests', '*.tests.*']),
    install_requires=[
        'pyyaml',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    python_requires='>=3.8',
    scripts=['bin/xdg-basedir'],
    include_package_data=True,

    # metadata for upload to PyPI
    description='Resolve and validate XDG base directories.',
    long_description=readme(),
    license="MIT",
    keywords="unix xdg basedir configuration directories",

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
    ]
)
