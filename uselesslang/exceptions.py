"""Errors.

Two disjoint families live here. :class:`ParseError` (a ``SyntaxError``) is
raised by the parser and always aborts parsing. :class:`UselessError` (a
``RuntimeError``) is raised while a program runs and is the only kind of
error a ``try``/``catch`` statement recovers from.


File: exceptions.py
Version: 0.1.0
License: MIT
"""


class ParseError(SyntaxError):
    """
    Base class for parse errors.
    """
    def __init__(self, message, line=None, file=None):
        self.line = line
        self.file = file
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class UnexpectedTokenError(ParseError):
    """
    Error for a token the grammar does not allow at this position.
    """
    def __init__(self, token, expected=None, file=None):
        self.token = token
        self.expected = expected
        if token.type == 'EOF':
            message = "Unexpected end of input"
        else:
            message = f"Unexpected token '{token.value}' of type {token.type}"
        if expected is not None:
            message += f", expected {expected}"
        super().__init__(message, token.line, file)


class UnexpectedEofError(ParseError):
    """
    Error for input that ends inside an unfinished construct.
    """
    def __init__(self, line=None, file=None):
        super().__init__("Expected token, but got none", line, file)


class InvalidStringLiteralError(ParseError):
    def __init__(self, text, line=None, file=None):
        self.text = text
        super().__init__(f"Invalid string literal {text}", line, file)


class InvalidNumberLiteralError(ParseError):
    def __init__(self, text, line=None, file=None):
        self.text = text
        super().__init__(f"Invalid number literal {text}", line, file)


class UselessError(RuntimeError):
    """
    Base class for errors raised while running a program.
    """
    message = "Something went wrong, which is to say everything went right"

    def __init__(self, message=None):
        super().__init__(message if message is not None else self.message)


class UndefinedVariableError(UselessError):
    """
    Error for undefined (or vacationing) variables.
    """
    def __init__(self, varname):
        self.varname = varname
        super().__init__(
            f"Variable '{varname}' not found. Have you tried looking under the couch?"
        )


class DivisionByZeroError(UselessError):
    message = "Division by zero. Congratulations, you've broken mathematics! 🎉"


class BrowserError(UselessError):
    message = (
        "Failed to open browser tab. Either your internet is as reliable as a chocolate "
        "teapot, or the universe is working exactly as intended."
    )


class SaveError(UselessError):
    message = "Saving is overrated. Maybe try writing it down with a crayon instead? 📝"


class GenericError(UselessError):
    """
    Free-form error for everything that has no better name.
    """
    def __init__(self, detail):
        self.detail = detail
        super().__init__(f"You've achieved the impossible: {detail}. Here's a virtual cookie 🍪")


class TaskFailedSuccessfully(UselessError):
    message = "Task failed successfully! Error code: 42"


class PerfectlyWrongError(UselessError):
    message = "Your code is running exactly as intended... which means everything is wrong"


class TeapotError(UselessError):
    message = "Error 418: I'm a teapot. Yes, really. No, I won't make coffee. ☕"


class StylePointsError(UselessError):
    message = "Your code is so bad, it's good. Task failed successfully with style! 🎨"


class CreativeBreakageError(UselessError):
    message = "Congratulations! You've discovered a new way to break things! 🎈"


class PromiseRejectedError(UselessError):
    message = "The promise was rejected. It's not you, it's the promise. 💔"


class ArrayChaosError(UselessError):
    message = "The array elements have gone on vacation to the Bermuda Triangle ✈️"


class ObjectChaosError(UselessError):
    message = "The object has reorganised itself and can no longer find that key 🗝️"


class AsyncTimeoutError(UselessError):
    message = "The promise took too long and went fishing instead 🎣"
