import pytest

from uselesslang.config import ChaosConfig
from uselesslang.exceptions import GenericError
from uselesslang.interpreter import EXIT_FAILED, EXIT_MESSAGES
from uselesslang.tests.utils import execute_source, run_normal


def test_exit_gives_up_after_max_iterations():
    with pytest.raises(GenericError) as exc_info:
        execute_source("exit();", config=ChaosConfig.tame(exit_max_iterations=7))
    assert EXIT_FAILED in str(exc_info.value)


def test_exit_rotates_messages():
    interpreter = execute_source(
        "try { exit(); } catch e { }", config=ChaosConfig.tame(exit_max_iterations=7)
    )
    assert interpreter.host.lines == list(EXIT_MESSAGES) + list(EXIT_MESSAGES[:2])
    assert EXIT_FAILED in interpreter.vars["e"]


def test_exit_in_normal_mode_is_bounded():
    with pytest.raises(GenericError):
        run_normal("exit();")


def test_exit_escape_ends_the_loop_early():
    interpreter = execute_source(
        "try { let code = exit(); } catch e { }",
        config=ChaosConfig.tame(exit_escape=1.0),
    )
    assert interpreter.host.lines == []
    assert "code" not in interpreter.vars
