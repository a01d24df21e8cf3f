"""
parenc Command-Line Interface
=============================

This package provides the command-line tool for the compiler:

- **parenc**: compile s-expressions from a file, an inline expression,
  or one line typed at a prompt

The tool is a Click-based CLI application layered on top of
parenc.compile; it adds input/output handling and nothing else.
"""

__all__ = ["parenc"]
