#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

import itertools

from setuptools import find_packages, setup  # type: ignore

with open("requirements.txt") as req_file:
    requirements = req_file.read().splitlines()

version: dict = {}
with open("lanpluscrypt/__version__.py") as version_file:
    exec(version_file.read(), version)  # nosec

with open("README.md", "r") as f:
    long_description = f.read()

extras_require = {
    "test": ["pytest>=7.0"],
}
# specify all option that contains all extras
extras_require["all"] = list(itertools.chain.from_iterable(extras_require.values()))

setup(
    name="lanpluscrypt",
    version=version["__version__"],
    description="Cryptographic primitives for IPMI v2.0 RMCP+ (LAN+) sessions",
    author="lanpluscrypt developers",
    license="BSD-3-Clause",
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms="Windows, Linux, Mac OSX",
    python_requires=">=3.9",
    install_requires=requirements,
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: POSIX :: Linux",
        "License :: OSI Approved :: BSD License",
        "Topic :: Security :: Cryptography",
        "Topic :: System :: Hardware",
        "Topic :: System :: Networking",
    ],
    packages=find_packages(exclude=["tests.*", "tests"]),
    extras_require=extras_require,
)
