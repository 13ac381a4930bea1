from __future__ import annotations
from typing import Mapping, Optional

from ueval import CommandRunner, Observer, ProcedureFn
from ueval.errors import UevalError
from ueval.reader.parser import read_program
from ueval.types.atom import Atom, make_error
from ueval.types.environment import Environment, create_environment
from ueval.evaluation.evaluator import evaluate0


class Interpreter:
    """
    Reads and evaluates ueval source against one Environment.

    Each call to `eval` reads the whole source as a Begin program and returns
    the value of its last expression as an owned atom; release it when done.
    The environment lives until `close()` (or the end of a `with` block).
    """

    def __init__(
        self,
        procedures: Mapping[str, ProcedureFn] | None = None,
        *,
        runner: CommandRunner | None = None,
        observer: Observer | None = None,
    ):
        self.env: Environment = create_environment(procedures, runner=runner, observer=observer)

    def eval(self, code: str) -> Optional[Atom]:
        """Evaluate `code`; syntax and script errors come back as an ERROR atom."""
        try:
            return self.eval_or_raise(code)
        except UevalError as exc:
            return make_error(str(exc))

    def eval_or_raise(self, code: str) -> Optional[Atom]:
        program = read_program(code)
        # The environment owns the program until the next eval or close().
        self.env.retain(program)
        return evaluate0(program, self.env)

    def close(self) -> None:
        self.env.destroy()

    def __enter__(self) -> Interpreter:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
