#!/usr/bin/env python3
"""
CLI package for the document response package.

This package provides the docdb-quota command: argument parsing and the
main application flow.
"""

from .parser import (
    create_argument_parser,
)

from .main import (
    main,
    load_captured_response,
    format_quota_table,
)

__all__ = [
    "create_argument_parser",
    "main",
    "load_captured_response",
    "format_quota_table",
]
