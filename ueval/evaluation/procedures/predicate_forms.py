from __future__ import annotations
from typing import Optional

from ueval import EvaluatorFn, ProcedureFn
from ueval.types.atom import Atom, iter_list
from ueval.types.environment import Environment
from ueval.types.refcount import release
from ueval.types.tag import Tag


def _tag_predicate(name: str, tag: Tag) -> ProcedureFn:
    """(name x ...) is #t when x evaluates to an atom tagged `tag`.

    Only the first argument is looked at; the rest are not evaluated. With no
    argument the answer is #f.
    """
    def predicate(args: Optional[Atom], env: Environment, evaluate_fn: EvaluatorFn) -> Atom:
        for expr in iter_list(args):
            val = evaluate_fn(expr, env)
            try:
                return env.boolean(val is not None and val.tag is tag)
            finally:
                release(val)
        return env.false()

    predicate.__name__ = f"is_{tag.value}"
    predicate.__qualname__ = predicate.__name__
    predicate.__doc__ = f"({name} x): is x a {tag.value}?"
    return predicate


is_symbol = _tag_predicate("symbol?", Tag.SYMBOL)
is_boolean = _tag_predicate("boolean?", Tag.BOOL)
is_string = _tag_predicate("string?", Tag.STRING)
is_number = _tag_predicate("number?", Tag.NUMBER)
is_procedure = _tag_predicate("procedure?", Tag.PROCEDURE)
