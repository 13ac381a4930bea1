"""Registry of builtin procedures.

Every builtin is a special form: it receives its argument list unevaluated,
together with the environment and the evaluator, and evaluates only what it
needs. `create_environment` registers these in order, so a later entry with the
same name would shadow an earlier one.
"""

from ueval.evaluation.procedures.logic_forms import not_form, and_form, or_form
from ueval.evaluation.procedures.if_form import if_form
from ueval.evaluation.procedures.arithmetic_forms import add_form, sub_form, mul_form
from ueval.evaluation.procedures.predicate_forms import (
    is_symbol,
    is_boolean,
    is_string,
    is_number,
    is_procedure,
)
from ueval.evaluation.procedures.eq_form import eq_form
from ueval.evaluation.procedures.run_form import run_form

BUILTINS = [
    ("not", not_form),
    ("and", and_form),
    ("or", or_form),
    ("if", if_form),
    ("+", add_form),
    ("-", sub_form),
    ("*", mul_form),
    ("symbol?", is_symbol),
    ("boolean?", is_boolean),
    ("string?", is_string),
    ("number?", is_number),
    ("procedure?", is_procedure),
    ("eq", eq_form),
    ("run", run_form),
]
