from __future__ import annotations

import logging
from typing import Optional

from ueval import EvaluatorFn
from ueval.errors import UevalTypeError
from ueval.types.atom import Atom, iter_list
from ueval.types.environment import Environment
from ueval.types.refcount import release
from ueval.types.tag import Tag
from ueval.debug_utils.pprint import type_of

logger = logging.getLogger(__name__)


def run_form(args: Optional[Atom], env: Environment, evaluate_fn: EvaluatorFn) -> Atom:
    """(run "cmd" ...): hand each command, in order, to the environment's runner.

    Yields #t when every command succeeded. The first failing command yields #f
    and the remaining arguments are left unevaluated.
    """
    for position, expr in enumerate(iter_list(args), start=1):
        val = evaluate_fn(expr, env)
        try:
            if val is None or val.tag is not Tag.STRING:
                raise UevalTypeError(f"run: expected string in position {position}, got {type_of(val)}")
            command = val.value
        finally:
            release(val)

        if not env.runner(command):
            logger.info("run: command failed: %s", command)
            return env.false()
    return env.true()
