

class UevalError(Exception):
    """ Base class for all script-level errors"""
    pass

class UevalUnboundSymbol(UevalError):
    """ Raised when a symbol has no procedure bound to it"""
    pass

class UevalNotAProcedure(UevalError):
    """ Raised when the head of a call does not evaluate to a procedure"""

class UevalSyntaxError(UevalError):
    """ Raised when source text cannot be read into atoms"""

class UevalArityError(UevalError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class UevalTypeError(UevalError):
    """ Raised when the types of arguments passed to a procedure are incorrect"""


class UevalRefcountError(RuntimeError):
    """ Raised when a destroyed atom is acquired or released again.

    Signals an ownership bug in host code rather than a script error; it is
    never converted into an Error atom.
    """
