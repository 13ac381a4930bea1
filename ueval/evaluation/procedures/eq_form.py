from __future__ import annotations
from typing import Optional

from ueval import EvaluatorFn
from ueval.errors import UevalArityError
from ueval.types.atom import Atom, iter_list
from ueval.types.environment import Environment
from ueval.types.refcount import release
from ueval.types.tag import Tag, PAIR_TAGS, TEXT_TAGS


def atoms_equal(a: Optional[Atom], b: Optional[Atom]) -> bool:
    if a is b:
        return True
    if a is None or b is None:
        return False
    if a.tag is not b.tag:
        return False
    if a.tag in (Tag.BOOL, Tag.NUMBER) or a.tag in TEXT_TAGS:
        return a.value == b.value
    if a.tag is Tag.PROCEDURE:
        return a.value is b.value
    if a.tag in PAIR_TAGS:
        # Structural: walk the cdr chain, recurse into cars.
        while a is not None and b is not None and a.tag in PAIR_TAGS and a.tag is b.tag:
            if not atoms_equal(a.car, b.car):
                return False
            a, b = a.cdr, b.cdr
        return atoms_equal(a, b)
    return False


def eq_form(args: Optional[Atom], env: Environment, evaluate_fn: EvaluatorFn) -> Atom:
    """(eq a b ...): #t when every later argument equals the first.

    Evaluation stops at the first argument that differs.
    """
    exprs = list(iter_list(args))
    if len(exprs) < 2:
        raise UevalArityError("eq: more arguments required")

    first = evaluate_fn(exprs[0], env)
    try:
        for expr in exprs[1:]:
            other = evaluate_fn(expr, env)
            try:
                if not atoms_equal(first, other):
                    return env.false()
            finally:
                release(other)
        return env.true()
    finally:
        release(first)
