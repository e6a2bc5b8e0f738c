"""
Utility functions shared across Useless Programming Language tests.
"""
from uselesslang.config import ChaosConfig
from uselesslang.interpreter import Interpreter
from uselesslang.lexer import tokenize
from uselesslang.parser import Parser

NORMAL_MODE_HEADER = "#[directive(disable_all_useless_shit)];\n"


class FixedRandom:
    """
    Random source that always draws the same numbers.

    ``random()`` returns ``value``, ``choice()`` picks ``choice_index`` and
    ``randint()`` returns ``randint_value`` (or the lower bound).
    """
    def __init__(self, value=0.99, choice_index=0, randint_value=None):
        self.value = value
        self.choice_index = choice_index
        self.randint_value = randint_value

    def random(self):
        return self.value

    def choice(self, seq):
        return seq[self.choice_index]

    def randint(self, a, b):
        return a if self.randint_value is None else self.randint_value


class RecordingHost:
    """
    Host that records side effects instead of performing them.
    """
    def __init__(self, browser_works=True):
        self.browser_works = browser_works
        self.lines = []
        self.urls = []
        self.sleeps = []

    def open_url(self, url):
        self.urls.append(url)
        return self.browser_works

    def sleep(self, milliseconds):
        self.sleeps.append(milliseconds)

    def write_line(self, text):
        self.lines.append(text)


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    tokens, token_map = tokenize(source)
    parser = Parser(tokens, token_map, "<test>")
    return parser.parse()


def make_interpreter(config=None, rng=None, host=None) -> Interpreter:
    """
    Build an interpreter wired to a recording host.
    """
    return Interpreter(
        "<test>",
        config=config if config is not None else ChaosConfig.tame(),
        rng=rng if rng is not None else FixedRandom(),
        host=host if host is not None else RecordingHost(),
    )


def run_source(source: str, config=None, rng=None, host=None) -> Interpreter:
    """
    Interpret a whole program and return the interpreter afterwards.
    """
    interpreter = make_interpreter(config, rng, host)
    interpreter.interpret(parse_source(source))
    return interpreter


def execute_source(source: str, config=None, rng=None, host=None) -> Interpreter:
    """
    Execute statements one by one, without the program-level checks.
    """
    interpreter = make_interpreter(config, rng, host)
    interpreter.execute(parse_source(source))
    return interpreter


def run_normal(source: str, host=None) -> Interpreter:
    """
    Run a program in normal mode with a random source that would trigger
    every chaotic behaviour if it were ever consulted.
    """
    return run_source(
        NORMAL_MODE_HEADER + source,
        config=ChaosConfig(),
        rng=FixedRandom(value=0.0),
        host=host,
    )
