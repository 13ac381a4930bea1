"""Reference counting for atoms.

Ownership convention, applied everywhere in ueval: every function that hands
out an atom hands out an *owned* reference, and the receiver releases it
exactly once. Constructors start atoms at a count of one, `acquire` adds an
owner, `release` drops one. When the count reaches zero the atom is destroyed:
its pair children are released and its payload dropped. A count of zero
therefore marks a dead atom, and touching it again raises UevalRefcountError.

`None` stands for the absent atom (an empty list or a missing optional slot)
and both operations accept it as a no-op.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ueval.errors import UevalRefcountError
from ueval.types.tag import PAIR_TAGS

if TYPE_CHECKING:
    from ueval.types.atom import Atom


class _AtomStats:
    __slots__ = ("created", "destroyed")

    def __init__(self):
        self.created = 0
        self.destroyed = 0


_stats = _AtomStats()


def track_created() -> None:
    """Called by the atom constructors once per new atom."""
    _stats.created += 1


def live_atoms() -> int:
    """Number of atoms constructed and not yet destroyed in this process."""
    return _stats.created - _stats.destroyed


def acquire(atom: Optional[Atom]) -> Optional[Atom]:
    if atom is None:
        return None
    if atom.refcount <= 0:
        raise UevalRefcountError(f"acquire of destroyed {atom.tag.value} atom")
    atom.refcount += 1
    return atom


def release(atom: Optional[Atom]) -> None:
    # Iterative so that long cdr chains cannot exhaust the Python stack.
    pending = [atom]
    while pending:
        a = pending.pop()
        if a is None:
            continue
        if a.refcount <= 0:
            raise UevalRefcountError(f"release of destroyed {a.tag.value} atom")
        a.refcount -= 1
        if a.refcount:
            continue
        if a.tag in PAIR_TAGS:
            pending.append(a.cdr)
            pending.append(a.car)
            a.car = None
            a.cdr = None
        a.value = None
        _stats.destroyed += 1
