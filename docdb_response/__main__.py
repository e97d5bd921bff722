#!/usr/bin/env python3
"""
Enable execution of the docdb_response package as a module.

This allows running the package with: python -m docdb_response
"""

from .cli.main import run

if __name__ == "__main__":
    run()
