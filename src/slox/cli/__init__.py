"""
slox Command-Line Interface
===========================

This package provides the ``slox`` command: scan a Lox script, or start
an interactive prompt when no script is given.

The tool is a Click-based CLI application with help and error reporting.
"""

__all__ = ["slox"]
