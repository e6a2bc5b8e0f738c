"""
Useless Programming Language command line.

Workflow:
1. The source script is read from the file given on the command line.
2. The Lexer tokenizes the source code and the token list is printed.
3. The Parser builds the AST from the tokens and the AST is printed.
4. The Interpreter walks the AST, and the outcome is reported.

Set ``UPLDEBUG`` in the environment to see the interpreter's debug log.


File: cli.py
Version: 0.1.0
License: MIT
"""
import logging
import os
import sys

from uselesslang.config import load_config
from uselesslang.exceptions import ParseError, UselessError
from uselesslang.interpreter import Interpreter
from uselesslang.lexer import tokenize
from uselesslang.parser import Parser

EXIT_OK = 0
EXIT_RUNTIME_ERROR = 1
EXIT_PARSE_ERROR = 2


def print_usage(stream=None):
    """
    Print usage.
    """
    stream = stream if stream is not None else sys.stdout
    print("Useless Programming Language Interpreter", file=stream)
    print(file=stream)
    print("Usage:", file=stream)
    print("    upl <script.upl>", file=stream)
    print(file=stream)
    print("Arguments:", file=stream)
    print("    <script.upl>", file=stream)
    print("        Path to a source file to run. Start it with", file=stream)
    print("        #[directive(disable_all_useless_shit)] if you want it to work.", file=stream)
    print(file=stream)
    print("Options:", file=stream)
    print("    -h, --help", file=stream)
    print("        Show this help message and exit.", file=stream)


def configure_logging():
    """
    Configure the root logger from the ``UPLDEBUG`` environment variable.
    """
    level = logging.DEBUG if os.environ.get('UPLDEBUG') else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def run_script(script_name: str) -> int:
    """
    Run a script and return the process exit code.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"Could not read {script_name}: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        tokens, token_map_literals = tokenize(code)
        parser = Parser(tokens, token_map_literals, script_name)
        ast = parser.parse()
    except ParseError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    try:
        config = load_config()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    print_tokens_ast(tokens, ast)

    interpreter = Interpreter(script_name, config=config)
    try:
        interpreter.interpret(ast)
    except UselessError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    print("Program finished successfully (suspiciously)")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = sys.argv[1:] if argv is None else argv[1:]
    configure_logging()
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return EXIT_OK
    if len(args) == 1:
        return run_script(args[0])
    print_usage(sys.stderr)
    return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main(sys.argv))
