# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.

from setuptools import setup, find_packages
import version

REQUIRES = [
    # only used to fetch word lists given as http(s) URLs on the command line
    "requests >= 2.9.1",
]

setup(
    author="dictspell authors",
    entry_points={
        "console_scripts": [
            "dictspell = dictspell.__main__:main",
        ],
    },
    install_requires=REQUIRES,
    extras_require={
        "test": ["pytest"],
    },
    license="Apache 2.0",
    name="dictspell",
    packages=find_packages(exclude=["tests"]),
    platforms=["POSIX", "MacOS", "Windows"],
    description="Spell checking and suggestions over sorted word lists",
    long_description=open("README.rst", encoding="utf-8").read(),
    python_requires=">=3.9",
    version=version.get_project_version("dictspell/version.py"),
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Text Processing :: Linguistic",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
