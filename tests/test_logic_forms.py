import pytest
from hypothesis import given, strategies as st

from ueval.types.environment import create_environment
from ueval.evaluation.evaluator import evaluate
from ueval.reader.parser import read
from ueval.types.refcount import release
from ueval.debug_utils.pprint import print_atom


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(not #t)", "#f"),
        ("(not #f)", "#t"),
        ("(not (not #t))", "#t"),
        ("(not (and #t #f))", "#t"),
        ("(not 1)", "ERR:not: expected boolean, got number"),
        ('(not "yes")', "ERR:not: expected boolean, got string"),
        ("(not)", "ERR:not: more arguments required"),
        ("(not #t #f)", "ERR:not: too many arguments"),
    ]
)
def test_not(eval_text, source, expected):
    assert eval_text(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and)", "#t"),
        ("(and #t)", "#t"),
        ("(and #t #t #t)", "#t"),
        ("(and #t #f #t)", "#f"),
        ("(and #f)", "#f"),
        # First non-boolean value short-circuits and is returned as-is.
        ("(and #t 5)", "5"),
        ("(and 5 #f)", "5"),
        ('(and #t "s" #f)', '"s"'),
        ("(and #f 5)", "#f"),
    ]
)
def test_and(eval_text, source, expected):
    assert eval_text(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(or)", "#f"),
        ("(or #f)", "#f"),
        ("(or #f #f #f)", "#f"),
        ("(or #f #t)", "#t"),
        ("(or #t #f)", "#t"),
        ('(or #f "x")', '"x"'),
        ("(or 5 #t)", "5"),
        ("(or #t 5)", "#t"),
    ]
)
def test_or(eval_text, source, expected):
    assert eval_text(source) == expected


def test_and_short_circuits_side_effects(eval_text, runner):
    assert eval_text('(and #f (run "should-not-run"))') == "#f"
    assert runner.commands == []


def test_or_short_circuits_side_effects(eval_text, runner):
    assert eval_text('(or #t (run "should-not-run"))') == "#t"
    assert runner.commands == []


def test_and_evaluates_left_to_right(eval_text, runner):
    assert eval_text('(and (run "first") (run "second") #f (run "third"))') == "#f"
    assert runner.commands == ["first", "second"]


def test_and_propagates_errors(eval_text):
    assert eval_text("(and #t (not 3))") == "ERR:not: expected boolean, got number"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if #t 1 2)", "1"),
        ("(if #f 1 2)", "2"),
        ("(if #t 1)", "1"),
        ("(if #f 1)", "#t"),
        ("(if (not #t) 1 2)", "2"),
        ("(if (and #t #t) (+ 1 1) (+ 2 2))", "2"),
        # Any non-boolean test counts as true.
        ("(if 0 1 2)", "1"),
        ('(if "" 1 2)', "1"),
        ("(if () 1 2)", "1"),
        ("(if #t)", "ERR:if requires a test and a consequent"),
        ("(if)", "ERR:if requires a test and a consequent"),
        ("(if #t 1 2 3)", "ERR:if takes at most a test, a consequent and an alternative"),
    ]
)
def test_if(eval_text, source, expected):
    assert eval_text(source) == expected


def test_if_never_evaluates_branch_not_taken(eval_text, runner):
    assert eval_text('(if #t 1 (run "alternative"))') == "1"
    assert eval_text('(if #f (run "consequent") 2)') == "2"
    assert runner.commands == []


def test_if_runs_selected_branch(eval_text, runner):
    assert eval_text('(if (eq 1 1) (run "react"))') == "#t"
    assert runner.commands == ["react"]


@given(st.booleans())
def test_double_negation(flag):
    source = "#t" if flag else "#f"
    with create_environment(runner=lambda _: True) as env:
        tree = read(f"(not (not {source}))")
        result = evaluate(tree, env)
        try:
            assert print_atom(result) == source
            # Boolean results are the environment singletons.
            assert result is (env.atom_true if flag else env.atom_false)
        finally:
            release(result)
            release(tree)
