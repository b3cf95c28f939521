# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

long_description = "Incremental (streaming) time-series analytics: ring windows, stateful methods and quantized trade signals"

setup(
    name = "streaming_ta",
    packages = find_packages(exclude=["tests", "tests.*"]),
    version = "0.1.0",
    description=long_description,
    long_description=long_description,
    keywords = ['technical analysis', 'streaming', 'incremental', 'python3'],
    license="The MIT License (MIT)",
    classifiers = [
        'Programming Language :: Python :: 3',
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Intended Audience :: Developers',
        'Intended Audience :: Financial and Insurance Industry',
        'Topic :: Office/Business :: Financial :: Investment',
    ],
    python_requires=">=3.8",
    install_requires=['numpy', 'pandas'],

    # List additional groups of dependencies here (e.g. development dependencies).
    # You can install these using the following syntax, for example:
    # $ pip install -e .[dev,test]
    extras_require = {
        'dev': ['pytest'],
        'test': ['pytest'],
    },
)
