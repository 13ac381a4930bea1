from __future__ import annotations
from typing import Optional

from ueval import EvaluatorFn
from ueval.errors import UevalArityError, UevalTypeError
from ueval.types.atom import Atom, iter_list
from ueval.types.environment import Environment
from ueval.types.refcount import release
from ueval.types.tag import Tag
from ueval.debug_utils.pprint import type_of


def _is_bool(val: Optional[Atom]) -> bool:
    return val is not None and val.tag is Tag.BOOL


def not_form(args: Optional[Atom], env: Environment, evaluate_fn: EvaluatorFn) -> Atom:
    exprs = list(iter_list(args))
    if not exprs:
        raise UevalArityError("not: more arguments required")
    if len(exprs) > 1:
        raise UevalArityError("not: too many arguments")

    val = evaluate_fn(exprs[0], env)
    try:
        if not _is_bool(val):
            raise UevalTypeError(f"not: expected boolean, got {type_of(val)}")
        return env.boolean(not val.value)
    finally:
        release(val)


def and_form(args: Optional[Atom], env: Environment, evaluate_fn: EvaluatorFn) -> Optional[Atom]:
    """Short-circuiting logical AND.

    (and a b c ...) evaluates operands left-to-right. The first #f stops
    evaluation and yields #f; the first non-boolean value stops evaluation and
    is returned as-is. If every operand is #t, or there are none, yields #t.
    """
    for expr in iter_list(args):
        val = evaluate_fn(expr, env)
        if not _is_bool(val):
            return val
        is_false = not val.value
        release(val)
        if is_false:
            return env.false()
    return env.true()


def or_form(args: Optional[Atom], env: Environment, evaluate_fn: EvaluatorFn) -> Optional[Atom]:
    """Short-circuiting logical OR.

    (or a b c ...) evaluates operands left-to-right. The first #t stops
    evaluation and yields #t; the first non-boolean value stops evaluation and
    is returned as-is. If every operand is #f, or there are none, yields #f.
    """
    for expr in iter_list(args):
        val = evaluate_fn(expr, env)
        if not _is_bool(val):
            return val
        is_true = bool(val.value)
        release(val)
        if is_true:
            return env.true()
    return env.false()
