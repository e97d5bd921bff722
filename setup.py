#!/usr/bin/env python3
"""
Setup script for the docdb-response package.
"""

import re

from setuptools import setup, find_packages

# Read metadata from package without importing it
with open("docdb_response/__init__.py") as f:
    metadata = dict(re.findall(r'^(__\w+__) = "([^"]*)"', f.read(), re.MULTILINE))

# Read requirements
with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="docdb-response",
    version=metadata["__version__"],
    author=metadata["__author__"],
    description="Quota-aware resource responses for a document database service",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["docdb_response", "docdb_response.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "docdb-quota=docdb_response.cli.main:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Database",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="document database response quota headers",
)
