# Copyright 2015, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.

from setuptools import setup, find_packages
import version

REQUIRES = [
    "requests >= 2.9.1",
]

EXTRAS_REQUIRE = {
    "completion": ["argcomplete >= 1.12"],
    "test": ["pytest >= 6.0"],
}

setup(
    author="Aiven",
    author_email="support@aiven.io",
    entry_points={
        "console_scripts": [
            "didyoumean = didyoumean.__main__:main",
        ],
    },
    install_requires=REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    license="Apache 2.0",
    name="didyoumean",
    packages=find_packages(exclude=["tests"]),
    platforms=["POSIX", "MacOS", "Windows"],
    description="Did-you-mean suggestions for mistyped identifiers, library and command-line tool",
    long_description=open("README.rst", encoding="utf-8").read(),
    python_requires=">=3.8",
    url="https://aiven.io/",
    version=version.get_project_version("didyoumean/version.py"),
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "Topic :: Text Processing",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
