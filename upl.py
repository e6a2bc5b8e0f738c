"""
Useless Programming Language Interpreter

This is the main entry point for the interpreter when run from a checkout:

    python upl.py <script.upl>

The installed package provides the same command as ``upl``.
"""
import sys

from uselesslang.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv))
