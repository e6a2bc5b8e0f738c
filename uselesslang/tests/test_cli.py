"""Tests for the ``upl`` command line."""

from uselesslang import cli


def test_help(capsys):
    assert cli.main(["upl", "--help"]) == 0
    out = capsys.readouterr().out
    assert "Usage:" in out


def test_no_arguments_prints_usage(capsys):
    assert cli.main(["upl"]) == 1
    captured = capsys.readouterr()
    assert "Usage:" in captured.err
    assert captured.out == ""


def test_too_many_arguments(capsys):
    assert cli.main(["upl", "a.upl", "b.upl"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_unreadable_file(tmp_path, capsys):
    missing = tmp_path / "missing.upl"
    assert cli.main(["upl", str(missing)]) == 1
    assert "Could not read" in capsys.readouterr().err


def test_runs_script_in_normal_mode(tmp_path, capsys):
    script = tmp_path / "sum.upl"
    script.write_text(
        "#[directive(disable_all_useless_shit)];\nlet x = 5;\nprint(add(x, 3));\n",
        encoding="utf-8",
    )
    assert cli.main(["upl", str(script)]) == 0
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "AST:" in out
    assert "\n8\n" in out
    assert out.rstrip().endswith("Program finished successfully (suspiciously)")


def test_parse_error_exit_code(tmp_path, capsys):
    script = tmp_path / "broken.upl"
    script.write_text("let = 5;", encoding="utf-8")
    assert cli.main(["upl", str(script)]) == 2
    captured = capsys.readouterr()
    assert "UnexpectedTokenError" in captured.err
    assert str(script) in captured.err
    assert "Tokens:" not in captured.out


def test_runtime_error_exit_code(tmp_path, capsys):
    script = tmp_path / "save.upl"
    script.write_text(
        '#[directive(disable_all_useless_shit)];\nsave("a.txt");\n', encoding="utf-8"
    )
    assert cli.main(["upl", str(script)]) == 1
    captured = capsys.readouterr()
    assert "SaveError" in captured.err
    assert "suspiciously" not in captured.out


def test_invalid_environment_config(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("UPL_SEED", "not-a-number")
    script = tmp_path / "empty.upl"
    script.write_text("", encoding="utf-8")
    assert cli.main(["upl", str(script)]) == 1
    assert "UPL_SEED must be an integer" in capsys.readouterr().err


def test_negative_promise_delay_is_rejected(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("UPL_PROMISE_MAX_DELAY_MS", "-5")
    script = tmp_path / "promise.upl"
    script.write_text("let p = promise(1);", encoding="utf-8")
    assert cli.main(["upl", str(script)]) == 1
    assert "UPL_PROMISE_MAX_DELAY_MS must not be negative" in capsys.readouterr().err
