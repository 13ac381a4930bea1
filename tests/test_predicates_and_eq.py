import pytest

from ueval.types.atom import make_number, make_string, make_symbol, make_bool, make_list
from ueval.types.refcount import release
from ueval.evaluation.procedures.eq_form import atoms_equal


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(number? 1)", "#t"),
        ('(number? "1")', "#f"),
        ("(number? (+ 1 2))", "#t"),
        ('(string? "a")', "#t"),
        ("(string? 1)", "#f"),
        ("(boolean? #f)", "#t"),
        ("(boolean? (not #f))", "#t"),
        ("(boolean? 0)", "#f"),
        ("(procedure? not)", "#t"),
        ("(procedure? run)", "#t"),
        ("(procedure? (not #t))", "#f"),
        ("(symbol? 1)", "#f"),
        ("(symbol? not)", "#f"),
        ("(number?)", "#f"),
        ("(string?)", "#f"),
        ("(number? ())", "#f"),
        ("(symbol? undefined-name)", "ERR:Cannot resolve unbound symbol undefined-name"),
    ]
)
def test_type_predicates(eval_text, source, expected):
    assert eval_text(source) == expected


def test_predicates_ignore_extra_arguments(eval_text, runner):
    assert eval_text('(number? 1 (run "extra"))') == "#t"
    assert runner.commands == []


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(eq 1 1)", "#t"),
        ("(eq 1 1 1)", "#t"),
        ("(eq 1 1 2)", "#f"),
        ("(eq 1 2 1)", "#f"),
        ('(eq "a" "a")', "#t"),
        ('(eq "a" "b")', "#f"),
        ('(eq 1 "1")', "#f"),
        ("(eq #t #t)", "#t"),
        ("(eq #t #f)", "#f"),
        ("(eq #t (not #f))", "#t"),
        ("(eq #t 1)", "#f"),
        ("(eq (+ 1 2) (* 3 1) (- 4 1))", "#t"),
        ("(eq not not)", "#t"),
        ("(eq not and)", "#f"),
        ("(eq () ())", "#t"),
        ("(eq 1)", "ERR:eq: more arguments required"),
        ("(eq)", "ERR:eq: more arguments required"),
    ]
)
def test_eq(eval_text, source, expected):
    assert eval_text(source) == expected


def test_eq_stops_at_first_mismatch(eval_text, runner):
    assert eval_text('(eq 1 2 (run "never"))') == "#f"
    assert runner.commands == []


def test_atoms_equal_structural_lists():
    a = make_list(make_symbol("x"), make_number(1), make_string("s"))
    b = make_list(make_symbol("x"), make_number(1), make_string("s"))
    c = make_list(make_symbol("x"), make_number(1))
    try:
        assert atoms_equal(a, b)
        assert not atoms_equal(a, c)
        assert not atoms_equal(c, a)
    finally:
        for lst in (a, b, c):
            release(lst)


def test_atoms_equal_distinguishes_bool_from_number():
    t = make_bool(True)
    one = make_number(1)
    try:
        assert not atoms_equal(t, one)
    finally:
        release(t)
        release(one)
