"""Interpreter configuration.

Every probability the chaotic evaluation strategy draws against lives on
:class:`ChaosConfig`, together with the bounds that keep ``exit()`` and
``promise()`` finite. A probability of ``0.0`` never fires and ``1.0`` always
fires, which is how the tests pin behaviour down.


File: config.py
Version: 0.1.0
License: MIT
"""

import os
from dataclasses import dataclass, field, fields, replace
from typing import Mapping, Optional

DEFAULT_URLS = (
    "https://example.com",
    "https://nyancat.com",
    "https://zombo.com",
    "https://crouton.net",
    "https://theuselessweb.com",
    "https://cat-bounce.com",
    "https://pointerpointer.com",
    "https://findtheinvisiblecow.com",
    "https://thatsthefinger.com",
    "https://heeeeeeeey.com",
)


@dataclass(frozen=True)
class ChaosConfig:
    """Probabilities and limits for the chaotic evaluation strategy."""

    # Program pre/post-amble
    teapot: float = 0.1
    perfectly_wrong: float = 0.2

    # Statements
    print_browser: float = 0.5
    print_style_points: float = 0.3
    let_vacation: float = 0.2
    if_breakage: float = 0.15
    loop_failure: float = 0.25
    catch_misreport: float = 0.2
    await_timeout: float = 0.1

    # Expressions
    literal_chaos: float = 0.25
    identifier_vacation: float = 0.15
    add_alternate: float = 0.2
    multiply_alternate: float = 0.2
    call_task_failed: float = 0.3
    call_coffee: float = 0.4
    access_random: float = 0.3
    access_impossible: float = 0.3
    object_key_swap: float = 0.2
    promise_reject: float = 0.2
    promise_pending: float = 0.1
    await_mind_change: float = 0.1
    exit_escape: float = 0.01

    # Limits
    exit_max_iterations: int = 100
    promise_max_delay_ms: int = 100

    seed: Optional[int] = None
    urls: tuple = field(default=DEFAULT_URLS)

    @classmethod
    def tame(cls, **overrides) -> "ChaosConfig":
        """
        Return a config where no failure or substitution is ever injected.

        Operator inversion is not probabilistic and still applies: ``add``
        subtracts and ``multiply`` divides.
        """
        probabilities = {
            f.name: 0.0 for f in fields(cls) if f.type in (float, 'float')
        }
        probabilities.update(overrides)
        return cls(**probabilities)

    def with_overrides(self, **overrides) -> "ChaosConfig":
        return replace(self, **overrides)


def _int_from_env(environ: Mapping[str, str], name: str,
                  non_negative: bool = False) -> Optional[int]:
    raw = environ.get(name)
    if raw is None or raw.strip() == '':
        return None
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if non_negative and value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


def load_config(environ: Optional[Mapping[str, str]] = None) -> ChaosConfig:
    """
    Build a config from ``UPL_*`` environment variables.

    Recognised variables:
        UPL_SEED: seed for the interpreter's random source.
        UPL_EXIT_MAX_ITERATIONS: cap on the ``exit()`` loop.
        UPL_PROMISE_MAX_DELAY_MS: upper bound of a promise's random delay.
    """
    environ = os.environ if environ is None else environ
    overrides = {}
    seed = _int_from_env(environ, 'UPL_SEED')
    if seed is not None:
        overrides['seed'] = seed
    exit_limit = _int_from_env(environ, 'UPL_EXIT_MAX_ITERATIONS', non_negative=True)
    if exit_limit is not None:
        overrides['exit_max_iterations'] = exit_limit
    max_delay = _int_from_env(environ, 'UPL_PROMISE_MAX_DELAY_MS', non_negative=True)
    if max_delay is not None:
        overrides['promise_max_delay_ms'] = max_delay
    return ChaosConfig(**overrides)
