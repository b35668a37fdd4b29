# pylint: disable=missing-class-docstring
from __future__ import annotations
import os
import re

from setuptools import find_packages, setup


def read_version():
    with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "jadnames", "__init__.py")) as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    if match is None:
        raise RuntimeError("Unable to find the version string of jadnames")
    return match.group(1)


setup(
    name="jadnames",
    version=read_version(),
    description="JAD-style variable naming for bytecode decompilers",
    license="BSD-2-Clause",
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "archinfo",
        "networkx",
        "sortedcontainers",
    ],
    extras_require={
        "testing": [
            "pytest",
        ],
    },
)
