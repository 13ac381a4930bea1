r"""Debug printer for atoms.

Grammar:
    PAIR       (x y z)        improper tail: (x . y)
    BEGIN      {x y z}
    STRING     "text"         \\ \" \n \t \r escaped
    SYMBOL     text
    BOOL       #t / #f
    NUMBER     decimal
    PROCEDURE  #<procedure NAME 0xID>
    ERROR      ERR:message
    None       ()
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from ueval.types.atom import Atom
from ueval.types.tag import Tag

_TYPE_NAMES = {
    Tag.BOOL: "boolean",
    Tag.ERROR: "error",
    Tag.NUMBER: "number",
    Tag.PROCEDURE: "procedure",
    Tag.STRING: "string",
    Tag.SYMBOL: "symbol",
    Tag.PAIR: "expression",
    Tag.BEGIN: "begin",
}


def type_name(tag: Tag) -> str:
    return _TYPE_NAMES[tag]


def type_of(atom: Optional[Atom]) -> str:
    """Type name of an atom for error messages; None is the empty list."""
    if atom is None:
        return "empty list"
    return type_name(atom.tag)


_QUOTE_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"})


def _quote(text: str) -> str:
    return '"' + text.translate(_QUOTE_ESCAPES) + '"'


def _write(atom: Optional[Atom], buffer: StringIO) -> None:
    if atom is None:
        buffer.write("()")
        return

    match atom.tag:
        case Tag.NUMBER:
            buffer.write(str(atom.value))
        case Tag.BOOL:
            buffer.write("#t" if atom.value else "#f")
        case Tag.STRING:
            buffer.write(_quote(atom.value))
        case Tag.SYMBOL:
            buffer.write(atom.value)
        case Tag.ERROR:
            buffer.write(f"ERR:{atom.value}")
        case Tag.PROCEDURE:
            name = getattr(atom.value, "__name__", "anonymous")
            buffer.write(f"#<procedure {name} {id(atom.value):#x}>")
        case Tag.PAIR | Tag.BEGIN:
            open_, close = ("{", "}") if atom.tag is Tag.BEGIN else ("(", ")")
            buffer.write(open_)
            # BEGIN ignores its car; its elements live in the cdr chain.
            node = atom.cdr if atom.tag is Tag.BEGIN else atom
            first = True
            while node is not None and node.tag is Tag.PAIR:
                if not first:
                    buffer.write(" ")
                _write(node.car, buffer)
                first = False
                node = node.cdr
            if node is not None:
                buffer.write(" . ")
                _write(node, buffer)
            buffer.write(close)


def print_atom(atom: Optional[Atom]) -> str:
    """Render `atom` in the debug grammar above."""
    with StringIO() as buffer:
        _write(atom, buffer)
        return buffer.getvalue()
