from __future__ import annotations


class KappaError(Exception):
    """ Base class for all Kappa errors"""
    pass


class KappaParseError(KappaError):
    """ Raised when the source text is malformed"""

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.message = message
        self.offset = offset


class KappaEvalError(KappaError):
    """ Raised when a form cannot be built or evaluated"""


class KappaUnknownSymbol(KappaEvalError):
    """ Raised when a bare symbol is not a local of the current scope"""


class KappaArityError(KappaEvalError):
    """ Raised when a special form or a function gets the wrong number of arguments"""


class KappaSyntaxError(KappaEvalError):
    """ Raised when a special form argument has the wrong shape"""


class KappaTypeError(KappaEvalError):
    """ Raised when a value has the wrong type for an operation"""


class KappaUnboundFunction(KappaEvalError):
    """ Raised when calling a function that was never defined"""


class KappaDivisionByZero(KappaEvalError):
    """ Raised when dividing by zero"""
