"""Core evaluator for ueval.

`evaluate0` is the recursive dispatcher used everywhere inside the interpreter;
it raises UevalError subclasses on malformed scripts. `evaluate` is the public
boundary: it runs `evaluate0` and turns any UevalError into an owned ERROR atom,
leaving the decision to abort or report with the host.

Calls hand procedures their *unevaluated* argument list together with this
evaluator, so every builtin decides which of its arguments get evaluated and in
what order (this is what makes `and`, `or`, `if` short-circuit).
"""

from __future__ import annotations

import logging
from typing import Optional

from ueval.errors import UevalError, UevalNotAProcedure
from ueval.types.atom import Atom, make_error, iter_list
from ueval.types.tag import Tag
from ueval.types.environment import Environment
from ueval.types.refcount import acquire, release
from ueval.debug_utils.pprint import print_atom

logger = logging.getLogger(__name__)


def evaluate(expr: Optional[Atom], env: Environment) -> Optional[Atom]:
    """
    Evaluate `expr`, returning an owned result. Script errors come back as
    an ERROR atom instead of being raised.
    """
    try:
        return evaluate0(expr, env)
    except UevalError as exc:
        logger.debug("evaluation failed: %s: %s", type(exc).__name__, exc)
        return make_error(str(exc))


def evaluate0(expr: Optional[Atom], env: Environment) -> Optional[Atom]:
    """
    Core evaluator: returns an owned result or raises UevalError.
    """
    if expr is None:
        return None

    match expr.tag:
        case Tag.NUMBER | Tag.BOOL | Tag.STRING | Tag.PROCEDURE | Tag.ERROR:
            return acquire(expr)
        case Tag.SYMBOL:
            return env.resolve(expr.value)
        case Tag.PAIR:
            return _apply(expr, env)
        case Tag.BEGIN:
            return _evaluate_sequence(expr, env)
    raise UevalError(f"Cannot evaluate atom with tag {expr.tag!r}")


def _apply(expr: Atom, env: Environment) -> Optional[Atom]:
    head = evaluate0(expr.car, env)
    try:
        if head is None or head.tag is not Tag.PROCEDURE:
            raise UevalNotAProcedure(f"procedure expected, got {print_atom(expr.car)}")
        fn = head.value
        logger.debug("call %s", getattr(fn, "__name__", fn))
        return fn(expr.cdr, env, evaluate0)
    finally:
        release(head)


def _evaluate_sequence(expr: Atom, env: Environment) -> Optional[Atom]:
    # Every element's result is observed; all but the last are released.
    result: Optional[Atom] = None
    try:
        for element in iter_list(expr.cdr):
            release(result)
            result = None
            result = evaluate0(element, env)
            env.observer(result)
    except BaseException:
        release(result)
        raise
    return result
