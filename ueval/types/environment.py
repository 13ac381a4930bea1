"""Runtime environment for ueval.

The Environment is the procedure table: an ordered set of name -> Procedure atom
bindings, searched front to back so a later registration shadows an earlier one
of the same name. It also owns the two boolean singletons that every boolean
result refers to, the command runner used by `run`, and the observer that sees
each intermediate result of a Begin sequence.

The table is written once while the environment is built and is frozen
afterwards; lookups never mutate it.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Mapping, Optional

from ueval import CommandRunner, Observer, ProcedureFn
from ueval.errors import UevalError, UevalUnboundSymbol
from ueval.types.atom import Atom, make_bool, make_procedure
from ueval.types.refcount import acquire, release
from ueval.debug_utils.pprint import print_atom
from ueval.host import default_runner

logger = logging.getLogger(__name__)


def log_observer(atom: Optional[Atom]) -> None:
    """Default Begin observer: report each intermediate result at DEBUG."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("=> %s", print_atom(atom))


class Environment:
    """Procedure table plus the per-environment singletons."""

    __slots__ = (
        "bindings",
        "atom_true",
        "atom_false",
        "runner",
        "observer",
        "root",
        "frozen",
        "destroyed",
    )

    def __init__(self, runner: CommandRunner | None = None, observer: Observer | None = None):
        if runner is None:
            runner = default_runner()
        # Front of the list is the most recent binding.
        self.bindings: list[tuple[str, Atom]] = []
        self.atom_true: Atom = make_bool(True)
        self.atom_false: Atom = make_bool(False)
        self.runner: CommandRunner = runner
        self.observer: Observer = observer or log_observer
        self.root: Optional[Atom] = None
        self.frozen = False
        self.destroyed = False

    def register(self, name: str, fn: ProcedureFn) -> None:
        """Bind `name` to a new Procedure atom wrapping `fn`, shadowing any older binding."""
        if self.frozen:
            raise UevalError(f"Cannot register {name}: procedure table is frozen")
        self.bindings.insert(0, (name, make_procedure(fn)))

    def freeze(self) -> None:
        self.frozen = True

    def resolve(self, name: str) -> Atom:
        """Owned reference to the procedure bound to `name`.

        Raises UevalUnboundSymbol if no binding matches.
        """
        for bound_name, atom in self.bindings:
            if bound_name == name:
                return acquire(atom)
        raise UevalUnboundSymbol(f"Cannot resolve unbound symbol {name}")

    def names(self) -> list[str]:
        return [name for name, _ in self.bindings]

    # -------------------------------
    # Boolean singletons
    # -------------------------------
    def true(self) -> Atom:
        return acquire(self.atom_true)

    def false(self) -> Atom:
        return acquire(self.atom_false)

    def boolean(self, flag: bool) -> Atom:
        return self.true() if flag else self.false()

    # -------------------------------
    # Lifetime
    # -------------------------------
    def retain(self, root: Optional[Atom]) -> None:
        """Keep `root` alive until destroy(), taking over the caller's reference."""
        old, self.root = self.root, root
        release(old)

    def destroy(self) -> None:
        """Release every binding, both singletons and the retained root."""
        if self.destroyed:
            return
        self.destroyed = True
        bindings, self.bindings = self.bindings, []
        for _, atom in bindings:
            release(atom)
        self.retain(None)
        release(self.atom_true)
        release(self.atom_false)

    def __enter__(self) -> Environment:
        return self

    def __exit__(self, *exc_info) -> None:
        self.destroy()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            buffer.write("[" + ", ".join(self.names()) + "]")
            if self.destroyed:
                buffer.write(" destroyed")
            buffer.write(">")
            return buffer.getvalue()


def create_environment(
    procedures: Mapping[str, ProcedureFn] | None = None,
    *,
    runner: CommandRunner | None = None,
    observer: Observer | None = None,
) -> Environment:
    """Build an environment with the builtin procedures installed.

    Extra `procedures` are registered after the builtins, so they shadow
    builtins of the same name. The table is frozen before it is returned.
    """
    # Lazy import: the procedures import this module for their signatures.
    from ueval.evaluation.procedures import BUILTINS

    env = Environment(runner=runner, observer=observer)
    for name, fn in BUILTINS:
        env.register(name, fn)
    for name, fn in (procedures or {}).items():
        env.register(name, fn)
    env.freeze()
    logger.debug("environment created with %d procedures", len(env.bindings))
    return env


def destroy_environment(env: Environment) -> None:
    env.destroy()
