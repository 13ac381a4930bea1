from __future__ import annotations
from typing import Optional

from ueval import EvaluatorFn
from ueval.errors import UevalArityError
from ueval.types.atom import Atom, iter_list
from ueval.types.environment import Environment
from ueval.types.refcount import release


def if_form(args: Optional[Atom], env: Environment, evaluate_fn: EvaluatorFn) -> Optional[Atom]:
    exprs = list(iter_list(args))
    if len(exprs) < 2:
        raise UevalArityError("if requires a test and a consequent")
    if len(exprs) > 3:
        raise UevalArityError("if takes at most a test, a consequent and an alternative")

    test = evaluate_fn(exprs[0], env)
    # Only #f selects the alternative; any non-boolean counts as true.
    take_alternative = test is not None and test.is_bool(False)
    release(test)

    if not take_alternative:
        return evaluate_fn(exprs[1], env)
    elif len(exprs) > 2:
        return evaluate_fn(exprs[2], env)
    else:
        return env.true()
