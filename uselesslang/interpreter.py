"""Interpreter.

This is a tree-walk interpreter for evaluating the AST produced by the parser. It supports
variables, builtin operations, conditionals, loops, declarations, try/catch, promises and
directives. By default it is deliberately unhelpful.

1. Execution Model
The interpreter evaluates the AST in a top-down, recursive manner. Statements are executed
via `execute_statement()` (or `execute()` for a list), and expressions are evaluated using
`evaluate_expression()`. `interpret()` runs a whole program.

2. Environment
The interpreter owns three pieces of state: a dictionary `vars` of variable bindings (there
is no scoping, every binding is visible everywhere), a set `directives` of active directive
names, and the `normal_mode` flag. Nothing is shared between interpreter instances.

3. Evaluation Strategies
Every statement and expression is evaluated with one of two strategies, chosen at the time
of the call:
- deterministic, when `normal_mode` is set or a `disable_useless` directive is active. The
  interpreter then behaves conventionally: `add` adds, `if` takes the branch its condition
  selects, nothing fails at random.
- chaotic, otherwise. `add` subtracts, `multiply` divides, `if` always takes the else
  branch, and most constructs fail at random with one of the comedic runtime errors.
All probabilities come from `ChaosConfig` and all draws go through the injected random
source, so a test can force either outcome.

4. Control Flow
- `if`/`else`: a conditional (see above for the chaotic variant).
- `loop`: runs the first statement of its body exactly once. It never iterates.
- `try`/`catch`: the only construct that recovers from a runtime error.
- `#[directive(name)]`: scopes a directive to the statement that follows it.

5. Host Side Effects
Printing, opening browser tabs and sleeping go through the injected host object
(`SystemHost` by default).

6. Error Handling
Runtime errors are subclasses of `UselessError` and propagate statement by statement until
a `try`/`catch` handles them or they reach the caller of `interpret()`.


File: interpreter.py
Version: 0.1.0
License: MIT
"""

import logging
import random

from uselesslang.config import ChaosConfig
from uselesslang.exceptions import (
    ArrayChaosError,
    AsyncTimeoutError,
    BrowserError,
    CreativeBreakageError,
    DivisionByZeroError,
    GenericError,
    ObjectChaosError,
    PerfectlyWrongError,
    PromiseRejectedError,
    SaveError,
    StylePointsError,
    TaskFailedSuccessfully,
    TeapotError,
    UndefinedVariableError,
    UselessError,
)
from uselesslang.host import Host, SystemHost
from uselesslang.nodes import (
    Access,
    ArrayLiteral,
    AsyncFunction,
    Attributed,
    AwaitExpr,
    AwaitStatement,
    BinaryOp,
    BooleanLiteral,
    Directive,
    ExpressionStatement,
    Function,
    FunctionCall,
    Identifier,
    If,
    Let,
    Loop,
    Module,
    NullLiteral,
    NumberLiteral,
    ObjectLiteral,
    Print,
    PromiseExpr,
    Save,
    StringLiteral,
    TryCatch,
    Use,
)
from uselesslang.operations import Op
from uselesslang.values import (
    INT64_MAX,
    INT64_MIN,
    Promise,
    format_value,
    function_descriptor,
    is_number,
    type_name,
    values_equal,
)

logger = logging.getLogger(__name__)

DISABLE_ALL = 'disable_all_useless_shit'
DETERMINISTIC_DIRECTIVES = frozenset({'disable_useless', DISABLE_ALL})
KNOWN_DIRECTIVES = DETERMINISTIC_DIRECTIVES | {'experimental'}

PLACEHOLDER = "🎉🎊🎈"
MIND_CHANGED = "The promise changed its mind"
MATH_IS_HARD = "Math is hard, let's go shopping! 🛍️"
EXIT_FAILED = "exit() failed to exit. The program enjoys your company too much"
EXIT_MESSAGES = (
    "Are you sure you want to exit?",
    "Really sure?",
    "Like, really really sure?",
    "Okay, but think about it one more time...",
    "Exiting is a big step. Let's talk about it.",
)

# Errors a chaotic catch block may claim happened instead of the real one.
MISREPORTED_ERRORS = (
    TaskFailedSuccessfully,
    TeapotError,
    PerfectlyWrongError,
    StylePointsError,
)
SAVE_ERRORS = (SaveError, CreativeBreakageError, StylePointsError)


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class Interpreter:
    """Tree-walk interpreter for the Useless Programming Language."""

    def __init__(self, file: str = "<input>", config: ChaosConfig | None = None,
                 rng=None, host: Host | None = None):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Name of the script, used in log messages.
            config (ChaosConfig): Probabilities and limits. Defaults to ``ChaosConfig()``.
            rng: Random source with ``random()``, ``choice()`` and ``randint()``.
                Defaults to ``random.Random`` seeded from the config.
            host: Side-effect host. Defaults to ``SystemHost()``.
        """
        self.vars = {}
        self.directives: set[str] = set()
        self.normal_mode = False
        self.file = file
        self.config = config if config is not None else ChaosConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.host = host if host is not None else SystemHost()

    @property
    def deterministic(self) -> bool:
        """
        True when the current call must use the deterministic strategy.
        """
        return self.normal_mode or not self.directives.isdisjoint(DETERMINISTIC_DIRECTIVES)

    def has_directive(self, name: str) -> bool:
        return name in self.directives

    def _chance(self, probability: float) -> bool:
        return probability > 0 and self.rng.random() < probability

    # ------------------------------------------------------------------
    # Programs
    # ------------------------------------------------------------------

    def interpret(self, program: list):
        """
        Run a whole program.

        A program whose first statement is the ``disable_all_useless_shit``
        directive switches the interpreter into normal mode for good and runs
        the rest conventionally. Any other program may fail before its first
        statement or after its last one.

        Raises:
            UselessError: The first runtime error raised by the program.
        """
        statements = list(program)
        if statements and self._is_disable_all(statements[0]):
            first = statements.pop(0)
            self.normal_mode = True
            logger.info("Normal mode enabled for %s", self.file)
            if isinstance(first, Attributed):
                self.execute_statement(first.statement)
            self.execute(statements)
            return

        if not self.deterministic and self._chance(self.config.teapot):
            raise TeapotError()

        self.execute(statements)

        if not self.deterministic and self._chance(self.config.perfectly_wrong):
            raise PerfectlyWrongError()

    @staticmethod
    def _is_disable_all(stmt) -> bool:
        return isinstance(stmt, (Directive, Attributed)) and stmt.name == DISABLE_ALL

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def execute(self, statements: list):
        """
        Execute a list of statements, stopping at the first error.
        """
        for stmt in statements:
            self.execute_statement(stmt)

    def execute_statement(self, stmt):
        """
        Execute a single statement.

        Parameters:
            stmt: A statement node.

        Raises:
            UselessError: When the statement fails, on purpose or otherwise.
            TypeError: For objects that are not statement nodes.
        """
        logger.debug(
            "Executing %s (%s)", type(stmt).__name__,
            "deterministic" if self.deterministic else "chaotic",
        )
        config = self.config

        match stmt:
            case Let(name=name, value=value_expr):
                value = self.evaluate_expression(value_expr)
                if not self.deterministic and self._chance(config.let_vacation):
                    raise UndefinedVariableError(name)
                self.vars[name] = value

            case Print(value=value_expr):
                value = self.evaluate_expression(value_expr)
                if not self.deterministic:
                    if self._chance(config.print_browser):
                        url = self.rng.choice(config.urls)
                        if not self.host.open_url(url):
                            raise BrowserError()
                    if self._chance(config.print_style_points):
                        raise StylePointsError()
                self.host.write_line(format_value(value))

            case ExpressionStatement(expression=expr_node):
                self.evaluate_expression(expr_node)

            case If(condition=cond_node, then_branch=then_branch, else_branch=else_branch):
                if self.deterministic:
                    condition = self.evaluate_expression(cond_node)
                    if not isinstance(condition, bool):
                        raise GenericError(
                            f"an if condition must be a Boolean, not {type_name(condition)}"
                        )
                    branch = then_branch if condition else else_branch
                    if branch:
                        self.execute(branch)
                else:
                    # The condition is never consulted.
                    if else_branch is not None:
                        if self._chance(config.if_breakage):
                            raise CreativeBreakageError()
                        self.execute(else_branch)

            case Loop(body=body):
                if not self.deterministic and self._chance(config.loop_failure):
                    raise TaskFailedSuccessfully()
                self.execute(body[:1])

            case Function(name=name, parameters=params):
                self.vars[name] = function_descriptor("function", name, params)

            case AsyncFunction(name=name, parameters=params):
                self.vars[name] = function_descriptor("async_function", name, params)

            case TryCatch():
                self._execute_try(stmt)

            case Module(name=name, body=body):
                logger.debug("Inlining module %s", name)
                self.execute(body)

            case Use(path=path):
                logger.debug("Ignoring use of %s", path)

            case Directive(name=name):
                if name in KNOWN_DIRECTIVES:
                    self.directives.add(name)
                else:
                    logger.warning("Unknown directive '%s' in %s ignored", name, self.file)

            case Save():
                if self.deterministic:
                    raise SaveError()
                raise self.rng.choice(SAVE_ERRORS)()

            case AwaitStatement(expression=expr_node):
                value = self.evaluate_expression(expr_node)
                if not self.deterministic and self._chance(config.await_timeout):
                    raise AsyncTimeoutError()
                if isinstance(value, Promise) and not value.resolved:
                    raise AsyncTimeoutError()

            case Attributed(name=name, statement=inner):
                self._execute_attributed(name, inner)

            case _:
                raise TypeError(f"Unknown statement type: {type(stmt).__name__} in {self.file}")

    def _execute_try(self, stmt: TryCatch):
        try:
            self.execute(stmt.try_block)
            return
        except UselessError as e:
            caught = e

        message = str(caught)
        if not self.deterministic and self._chance(self.config.catch_misreport):
            others = [cls for cls in MISREPORTED_ERRORS if not isinstance(caught, cls)]
            message = str(self.rng.choice(others)())
        if stmt.error_var is not None:
            self.vars[stmt.error_var] = message
        self.execute(stmt.catch_block)

    def _execute_attributed(self, name: str, inner):
        """
        Run ``inner`` with ``name`` in the active directive set.

        A directive that was already active before the statement stays active
        afterwards.
        """
        if name not in KNOWN_DIRECTIVES:
            logger.warning("Unknown directive '%s' in %s", name, self.file)
        already_active = name in self.directives
        self.directives.add(name)
        try:
            self.execute_statement(inner)
        finally:
            if not already_active:
                self.directives.discard(name)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def evaluate_expression(self, node):
        """
        Recursively evaluate an expression node and return its value.

        Parameters:
            node: An expression node.

        Returns:
            The runtime value: str, int, bool, list, dict, Promise or None.

        Raises:
            UselessError: If evaluation fails.
            TypeError: For objects that are not expression nodes.
        """
        match node:
            case (StringLiteral() | NumberLiteral() | BooleanLiteral() | NullLiteral()
                  | ArrayLiteral() | ObjectLiteral()):
                return self._eval_literal(node)

            case Identifier(name=name):
                if not self.deterministic and self._chance(self.config.identifier_vacation):
                    raise UndefinedVariableError(f"{name} (it's on vacation)")
                if name not in self.vars:
                    raise UndefinedVariableError(name)
                return self.vars[name]

            case BinaryOp(op=op, left=left, right=right):
                lhs = self.evaluate_expression(left)
                rhs = self.evaluate_expression(right)
                return self._binary_op(op, lhs, rhs)

            case Access(object=obj_node, key=key_node):
                container = self.evaluate_expression(obj_node)
                key = self.evaluate_expression(key_node)
                return self._access(container, key)

            case FunctionCall(name=name):
                if name == 'exit':
                    return self._exit()
                return self._call(name)

            case PromiseExpr():
                return self._promise(node)

            case AwaitExpr(promise=promise_node):
                return self._await(promise_node)

        raise TypeError(f"Invalid expression node: {node!r}")

    def _eval_literal(self, node):
        if not self.deterministic and self._chance(self.config.literal_chaos):
            return self._substitute_literal(node)

        match node:
            case StringLiteral(value=value) | NumberLiteral(value=value) | BooleanLiteral(value=value):
                return value
            case NullLiteral():
                return None
            case ArrayLiteral(elements=elements):
                return [self.evaluate_expression(elem) for elem in elements]
            case ObjectLiteral(pairs=pairs):
                return {key: self.evaluate_expression(value) for key, value in pairs}
        raise TypeError(f"Invalid literal node: {node!r}")

    def _substitute_literal(self, node):
        """
        Return a value of another kind in place of the literal's own value.
        """
        match node:
            case BooleanLiteral(value=value):
                return self.rng.choice((
                    not value,
                    "false" if value else "true",
                    0 if value else 1,
                ))
            case NumberLiteral():
                return self.rng.random() < 0.5
        return PLACEHOLDER

    def _binary_op(self, op: Op, lhs, rhs):
        """Apply a builtin operation. Numbers must stay within signed 64 bits."""
        result = self._apply_op(op, lhs, rhs)
        if is_number(result) and not INT64_MIN <= result <= INT64_MAX:
            raise GenericError(f"{op.value} overflowed a 64-bit Number with {result}")
        return result

    def _apply_op(self, op: Op, lhs, rhs):
        """
        Apply a builtin operation.

        The chaotic strategy computes a different operation than the one
        named: add subtracts (or multiplies), multiply divides (or adds),
        equals guesses, and lessThan compares the wrong way round.
        """
        deterministic = self.deterministic
        match op:
            case Op.ADD:
                self._require_numbers(lhs, rhs)
                if deterministic:
                    return lhs + rhs
                if self._chance(self.config.add_alternate):
                    return lhs * rhs
                return lhs - rhs
            case Op.MULTIPLY:
                self._require_numbers(lhs, rhs)
                if rhs == 0:
                    raise DivisionByZeroError()
                if deterministic:
                    return lhs * rhs
                if self._chance(self.config.multiply_alternate):
                    return lhs + rhs
                return _truncating_div(lhs, rhs)
            case Op.EQUALS:
                if deterministic:
                    return values_equal(lhs, rhs)
                return self.rng.random() < 0.5
            case Op.LESS_THAN:
                self._require_numbers(lhs, rhs)
                if deterministic:
                    return lhs < rhs
                return lhs > rhs
            case Op.INDEX | Op.ACCESS:
                return self._access(lhs, rhs)
        raise TypeError(f"Unknown operation '{op}'")

    @staticmethod
    def _require_numbers(lhs, rhs):
        if not (is_number(lhs) and is_number(rhs)):
            raise GenericError(MATH_IS_HARD)

    def _access(self, container, key):
        """
        Look up an array element or object field.

        Arrays take a Number index and objects take a String key. The chaotic
        strategy may hand back a random element, refuse outright, or swap two
        of an object's fields in place and then refuse.
        """
        if isinstance(container, list) and is_number(key):
            chaos_error = ArrayChaosError
        elif isinstance(container, dict) and isinstance(key, str):
            chaos_error = ObjectChaosError
        else:
            raise GenericError(
                f"cannot look up a {type_name(key)} in a {type_name(container)}"
            )

        if not self.deterministic:
            config = self.config
            if container and self._chance(config.access_random):
                items = list(container.values()) if isinstance(container, dict) else container
                return self.rng.choice(items)
            if self._chance(config.access_impossible):
                raise chaos_error()
            if isinstance(container, dict) and self._chance(config.object_key_swap):
                self._swap_fields(container)
                raise ObjectChaosError()

        if isinstance(container, list):
            if not 0 <= key < len(container):
                raise ArrayChaosError(
                    f"Array index {key} is out of bounds for an array of length {len(container)}"
                )
            return container[key]
        if key not in container:
            raise ObjectChaosError(f"Key '{key}' not found in object")
        return container[key]

    def _swap_fields(self, obj: dict):
        keys = list(obj)
        if len(keys) < 2:
            return
        first = self.rng.choice(keys)
        second = self.rng.choice([k for k in keys if k != first])
        obj[first], obj[second] = obj[second], obj[first]
        logger.debug("Swapped fields '%s' and '%s'", first, second)

    def _call(self, name: str):
        """
        Call a function other than ``exit``.

        Declared functions are never invoked and arguments are ignored.
        """
        if self.deterministic:
            return None
        roll = self.rng.random()
        if roll < self.config.call_task_failed:
            raise TaskFailedSuccessfully()
        if roll < self.config.call_task_failed + self.config.call_coffee:
            raise GenericError(f"Function {name} went to get coffee ☕")
        return None

    def _exit(self):
        """
        Try very hard not to exit.

        Writes a rotation of messages until the chaotic escape chance fires
        or ``exit_max_iterations`` is reached; either way the result is the
        same error.
        """
        for i in range(self.config.exit_max_iterations):
            if not self.deterministic and self._chance(self.config.exit_escape):
                break
            self.host.write_line(EXIT_MESSAGES[i % len(EXIT_MESSAGES)])
        raise GenericError(EXIT_FAILED)

    def _promise(self, node: PromiseExpr) -> Promise:
        value = self.evaluate_expression(node.value)
        timeout = None
        if node.timeout is not None:
            timeout = self.evaluate_expression(node.timeout)
            if not is_number(timeout):
                raise GenericError(f"a promise timeout must be a Number, not {type_name(timeout)}")

        if self.deterministic:
            return Promise(value)

        delay = self.rng.randint(0, self.config.promise_max_delay_ms)
        if timeout is not None and delay > timeout:
            self.host.sleep(max(timeout, 0))
            raise AsyncTimeoutError()
        self.host.sleep(delay)
        if self._chance(self.config.promise_reject):
            raise PromiseRejectedError()
        if self._chance(self.config.promise_pending):
            return Promise(value, resolved=False)
        return Promise(value)

    def _await(self, promise_node):
        promise = self.evaluate_expression(promise_node)
        if not isinstance(promise, Promise):
            raise GenericError(f"only a Promise can be awaited, not {type_name(promise)}")
        if not promise.resolved:
            raise AsyncTimeoutError()
        if not self.deterministic and self._chance(self.config.await_mind_change):
            return MIND_CHANGED
        return promise.value
