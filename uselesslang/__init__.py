"""Useless Programming Language.

A tokenizer, parser and tree-walking interpreter for a language that
computes anything except what you asked for, unless told otherwise.


File: __init__.py
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
