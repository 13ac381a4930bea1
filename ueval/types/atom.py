"""The Atom: ueval's single tagged value for both code and data.

An atom carries exactly one payload chosen by its tag:

    NUMBER, BOOL              -> value: int (signed 64-bit, BOOL is 0 or 1)
    STRING, SYMBOL, ERROR     -> value: str
    PROCEDURE                 -> value: the native procedure callable
    PAIR, BEGIN               -> car, cdr: Atom | None

Payloads never change after construction; only the reference count moves.
Every constructor returns an owned reference (count 1). `cons`, `make_list`
and `make_begin` take over the references passed in for their slots, so trees
are built bottom-up without extra bookkeeping:

    tree = make_list(make_symbol("+"), make_number(1), make_number(2))
    ...
    release(tree)
"""

from __future__ import annotations

from typing import Iterator, Optional

from ueval import ProcedureFn
from ueval.errors import UevalTypeError
from ueval.types.tag import Tag
from ueval.types.refcount import track_created

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def to_int64(n: int) -> int:
    """Wrap an arbitrary Python int into the signed 64-bit range."""
    return ((n - INT64_MIN) & 0xFFFFFFFFFFFFFFFF) + INT64_MIN


class Atom:
    __slots__ = ("tag", "refcount", "value", "car", "cdr")

    def __init__(self, tag: Tag, value=None, car: Optional[Atom] = None, cdr: Optional[Atom] = None):
        self.tag = tag
        self.refcount = 1
        self.value = value
        self.car = car
        self.cdr = cdr
        track_created()

    @property
    def is_error(self) -> bool:
        return self.tag is Tag.ERROR

    def is_bool(self, flag: bool) -> bool:
        """True when this is a BOOL atom holding `flag`."""
        return self.tag is Tag.BOOL and bool(self.value) is flag

    def __repr__(self) -> str:
        from ueval.debug_utils.pprint import print_atom
        if self.refcount <= 0:
            return f"<Atom {self.tag.name} destroyed>"
        return f"<Atom {self.tag.name} {print_atom(self)} refcount={self.refcount}>"


# -------------------------------
# Constructors
# -------------------------------
def make_number(n: int) -> Atom:
    if isinstance(n, bool) or not isinstance(n, int):
        raise UevalTypeError(f"number atom needs an int, got {type(n).__name__}")
    return Atom(Tag.NUMBER, to_int64(n))


def make_bool(flag: bool) -> Atom:
    """A fresh BOOL atom; evaluation results use the environment singletons instead."""
    return Atom(Tag.BOOL, 1 if flag else 0)


def make_string(text: str) -> Atom:
    return Atom(Tag.STRING, str(text))


def make_symbol(name: str) -> Atom:
    return Atom(Tag.SYMBOL, str(name))


def make_error(message: str) -> Atom:
    return Atom(Tag.ERROR, str(message))


def make_procedure(fn: ProcedureFn) -> Atom:
    if not callable(fn):
        raise UevalTypeError(f"procedure atom needs a callable, got {type(fn).__name__}")
    return Atom(Tag.PROCEDURE, fn)


def cons(car: Optional[Atom], cdr: Optional[Atom]) -> Atom:
    """New PAIR owning `car` and `cdr` (the caller's references are taken over)."""
    return Atom(Tag.PAIR, car=car, cdr=cdr)


def make_list(*items: Optional[Atom]) -> Optional[Atom]:
    """Proper list of `items`, taking over each reference. No items gives None."""
    result: Optional[Atom] = None
    for item in reversed(items):
        result = cons(item, result)
    return result


def make_begin(*exprs: Optional[Atom]) -> Atom:
    """Program root: a BEGIN whose cdr chains the top-level expressions."""
    return Atom(Tag.BEGIN, car=None, cdr=make_list(*exprs))


# -------------------------------
# List helpers
# -------------------------------
def iter_list(lst: Optional[Atom]) -> Iterator[Optional[Atom]]:
    """Yield the cars of a cdr chain (borrowed references)."""
    node = lst
    while node is not None:
        if node.tag is not Tag.PAIR:
            raise UevalTypeError("improper argument list")
        yield node.car
        node = node.cdr
