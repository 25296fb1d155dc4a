

class MiniLispError(Exception):
    """ Base class for all minilisp errors"""
    pass

class MiniLispSyntaxError(MiniLispError):
    """ Raised when the token stream cannot be parsed"""

class MiniLispInvalidSymbol(MiniLispError):
    """ Raised when a non-symbol is used where a name is required"""
    pass

class MiniLispUnboundSymbol(MiniLispError):
    """ Raised when a symbol is used before it is bound"""
    pass

class MiniLispArityError(MiniLispError):
    """ Raised when a form or function receives the wrong number of arguments"""

class MiniLispTypeError(MiniLispError):
    """ Raised when an operand has the wrong type"""

class MiniLispZeroDivisionError(MiniLispError):
    """ Raised on integer division by zero"""

class MiniLispOverflowError(MiniLispError):
    """ Raised when an integer result leaves the signed 64-bit range"""

class MiniLispRecursionError(MiniLispError):
    """ Raised when user-function calls nest deeper than allowed"""
