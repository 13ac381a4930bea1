"""Integer arithmetic over signed 64-bit numbers.

Results wrap around on overflow (two's complement), there is no big-integer
fallback. Every argument must evaluate to a number; the first one that does not
raises UevalTypeError naming its 1-based position.
"""

from __future__ import annotations
from typing import Optional

from ueval import EvaluatorFn
from ueval.errors import UevalArityError, UevalTypeError
from ueval.types.atom import Atom, iter_list, make_number, to_int64
from ueval.types.environment import Environment
from ueval.types.refcount import release
from ueval.types.tag import Tag


def _numbers(op: str, args: Optional[Atom], env: Environment, evaluate_fn: EvaluatorFn) -> list[int]:
    values: list[int] = []
    for position, expr in enumerate(iter_list(args), start=1):
        val = evaluate_fn(expr, env)
        try:
            if val is None or val.tag is not Tag.NUMBER:
                raise UevalTypeError(f"{op}: wrong type in position {position}")
            values.append(val.value)
        finally:
            release(val)
    return values


def add_form(args: Optional[Atom], env: Environment, evaluate_fn: EvaluatorFn) -> Atom:
    result = 0
    for n in _numbers("+", args, env, evaluate_fn):
        result = to_int64(result + n)
    return make_number(result)


def sub_form(args: Optional[Atom], env: Environment, evaluate_fn: EvaluatorFn) -> Atom:
    if args is None:
        raise UevalArityError("- requires at least 1 argument")
    values = _numbers("-", args, env, evaluate_fn)
    if len(values) == 1:
        return make_number(-values[0])
    result = values[0]
    for n in values[1:]:
        result = to_int64(result - n)
    return make_number(result)


def mul_form(args: Optional[Atom], env: Environment, evaluate_fn: EvaluatorFn) -> Atom:
    result = 1
    for n in _numbers("*", args, env, evaluate_fn):
        result = to_int64(result * n)
    return make_number(result)
