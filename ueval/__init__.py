# Core type aliases for ueval's data model.
# Code and data share one representation: the reference-counted Atom
# (ueval.types.atom). Argument lists handed to procedures are the unevaluated
# cdr chain of the call, or None for an empty list.
#
# Naming guidance:
# - ProcedureFn: a native procedure, (args, env, evaluate_fn) -> owned Atom.
# - EvaluatorFn: the evaluator handed to procedures so they can evaluate the
#   arguments they need, (atom, env) -> owned Atom.
# - CommandRunner: executes one `run` command and reports success.
# - Observer: receives every intermediate result of a Begin sequence.

from typing import Any, Callable

EvaluatorFn = Callable[..., Any]
ProcedureFn = Callable[..., Any]
CommandRunner = Callable[[str], bool]
Observer = Callable[[Any], None]

from ueval.errors import (  # noqa: E402
    UevalError,
    UevalUnboundSymbol,
    UevalNotAProcedure,
    UevalArityError,
    UevalTypeError,
    UevalSyntaxError,
    UevalRefcountError,
)
from ueval.types.tag import Tag  # noqa: E402
from ueval.types.atom import (  # noqa: E402
    Atom,
    make_number,
    make_bool,
    make_string,
    make_symbol,
    make_error,
    make_procedure,
    cons,
    make_list,
    make_begin,
)
from ueval.types.refcount import acquire, release, live_atoms  # noqa: E402
from ueval.types.environment import (  # noqa: E402
    Environment,
    create_environment,
    destroy_environment,
)
from ueval.evaluation.evaluator import evaluate, evaluate0  # noqa: E402
from ueval.debug_utils.pprint import print_atom, type_name  # noqa: E402
from ueval.reader.parser import read, read_program  # noqa: E402
from ueval.interpreter import Interpreter  # noqa: E402
