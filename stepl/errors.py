class SteplError(Exception):
    """ Base class for all stepl errors"""
    pass

class EvalError(SteplError):
    """ Raised for any failure a user program can provoke during evaluation"""
    pass

class UnresolvedSymbol(EvalError):
    """ Raised when a symbol is bound neither in the active frames nor in globals"""

class SpecialFormError(EvalError):
    """ Raised when a special form has the wrong number or shape of operands"""

class NotAFunction(EvalError):
    """ Raised when the head of an application does not evaluate to a function"""

class ArityError(EvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class LispTypeError(EvalError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""

class InternalInvariantViolation(SteplError):
    """ Raised for states that cannot be built from well-formed, expanded input.

    Signals a bug in macro expansion or in the special-form recognizer, never
    a user error. Not an EvalError.
    """

class LispSyntaxError(SteplError):
    """ Raised when the reader meets malformed source text"""
