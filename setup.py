#!/usr/bin/env python

from setuptools import setup, find_packages

with open("replshell/_version.py") as f:
    exec(f.read())

CLASSIFIERS = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Programming Language :: Python",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: Implementation :: CPython",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]

REQUIREMENTS = ["appdirs~=1.4.3", "click>=7.0"]

setup(
    classifiers=CLASSIFIERS,
    description="Shell-like commands for interactive Python sessions",
    install_requires=REQUIREMENTS,
    extras_require={"test": ["pytest", "parameterized"]},
    license="MIT",
    name="replshell",
    packages=find_packages(exclude=("tests",)),
    python_requires=">=3.6",
    entry_points={"console_scripts": ["rsh = replshell.commands:rsh"]},
    zip_safe=False,
    platforms=["any"],
    version=__version__,
)
