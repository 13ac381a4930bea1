from __future__ import annotations
from enum import Enum


class Tag(Enum):
    BEGIN = "begin"
    BOOL = "bool"
    ERROR = "error"
    NUMBER = "number"
    PROCEDURE = "procedure"
    STRING = "string"
    SYMBOL = "symbol"
    PAIR = "pair"


# Kinds whose payload is a (car, cdr) pair of atom references.
PAIR_TAGS = frozenset({Tag.PAIR, Tag.BEGIN})

# Kinds whose payload is a text buffer.
TEXT_TAGS = frozenset({Tag.STRING, Tag.SYMBOL, Tag.ERROR})
