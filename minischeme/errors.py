from __future__ import annotations


class SchemeError(Exception):
    """ Base class for all minischeme errors"""
    pass


class ReadError(SchemeError):
    """ Raised when source text cannot be turned into an expression"""

    def __init__(self, message: str, line: int | None = None, col: int | None = None):
        super().__init__(message)
        # 0-based source position of the offending token, when known
        self.line = line
        self.col = col


class UnexpectedEOF(ReadError):
    """ Raised when the input ends in the middle of an expression"""


class UnmatchedCloseParen(ReadError):
    """ Raised when a ')' appears where an expression was expected"""


class EvalError(SchemeError):
    """ Raised when evaluation of a well-formed expression fails"""


class UnboundSymbol(EvalError):
    """ Raised when a symbol is used before it is bound"""


class EmptyApplication(EvalError):
    """ Raised when the empty list is evaluated as a call"""


class ArityMismatch(EvalError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""


class TypeMismatch(EvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class NotCallable(EvalError):
    """ Raised when the head of an application does not evaluate to a function"""


class EmptyList(EvalError):
    """ Raised when car/cdr is applied to the empty list"""
