import logging

import pytest

from ueval.errors import UevalSyntaxError, UevalArityError
from ueval.interpreter import Interpreter
from ueval.types.refcount import release
from ueval.debug_utils.pprint import print_atom
from ueval.__main__ import main_with_args


@pytest.fixture
def interp(runner):
    with Interpreter(runner=runner) as i:
        yield i


def _eval(interp, code):
    result = interp.eval(code)
    try:
        return print_atom(result)
    finally:
        release(result)


@pytest.mark.parametrize(
    "code,expected",
    [
        ("(+ 1 2)", "3"),
        ("(+ 1 2) (* 3 4)", "12"),
        ("", "()"),
        ('(if (eq "add" "add") (run "notify"))', "#t"),
        ("(not 1)", "ERR:not: expected boolean, got number"),
        ("(+ 1", "ERR:Unmatched '('"),
    ]
)
def test_eval(interp, code, expected):
    assert _eval(interp, code) == expected


def test_rule_reacts_to_matching_event(interp, runner):
    rule = """
    ; react only to "add" events of block devices
    (if (and (eq "add" "add") (eq "block" "block"))
        (run "mount-helper" "notify-user"))
    """
    assert _eval(interp, rule) == "#t"
    assert runner.commands == ["mount-helper", "notify-user"]


def test_rule_ignores_other_events(interp, runner):
    assert _eval(interp, '(if (eq "remove" "add") (run "mount-helper") #f)') == "#f"
    assert runner.commands == []


def test_multiline_command(interp, runner):
    script = '(run "echo a\necho b")'
    assert _eval(interp, script) == "#t"
    assert runner.commands == ["echo a\necho b"]


def test_eval_or_raise(interp):
    with pytest.raises(UevalSyntaxError):
        interp.eval_or_raise("(a b")
    with pytest.raises(UevalArityError):
        interp.eval_or_raise("(if #t)")


def test_extra_procedures_shadow_builtins(runner):
    def always_true(args, env, evaluate_fn):
        return env.true()

    with Interpreter({"not": always_true}, runner=runner) as interp:
        assert _eval(interp, "(not #t)") == "#t"


def test_observer_sees_each_top_level_result(runner):
    seen = []
    with Interpreter(runner=runner, observer=lambda a: seen.append(print_atom(a))) as interp:
        release(interp.eval("1 (+ 1 1) (eq 3 3)"))
    assert seen == ["1", "2", "#t"]


def test_cli_prints_result(capsys):
    assert main_with_args("(+ 1 2)") == 0
    assert capsys.readouterr().out == "3\n"


def test_cli_false_exit_status(capsys):
    assert main_with_args("(not #t)") == 1
    assert capsys.readouterr().out == "#f\n"


def test_cli_error_exit_status(capsys):
    assert main_with_args("(undefined 1)") == 2
    assert capsys.readouterr().out == "ERR:Cannot resolve unbound symbol undefined\n"


def test_cli_dry_run_echoes_commands(capsys):
    assert main_with_args('(run "reboot")', dry_run=True) == 0
    assert capsys.readouterr().out == "EXEC: reboot\n#t\n"


def test_cli_error_is_logged_by_module_logger(caplog, capsys):
    with caplog.at_level(logging.ERROR, logger="ueval.__main__"):
        assert main_with_args("(+ 1 #t)") == 2
    assert [r.name for r in caplog.records] == ["ueval.__main__"]
    assert caplog.records[0].levelno == logging.ERROR
    capsys.readouterr()
