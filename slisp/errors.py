class SlispError(Exception):
    """ Base class for all slisp errors"""
    pass

class SlispSyntaxError(SlispError):
    """ Raised when source text or a special form is malformed"""

class SlispIncompleteInput(SlispSyntaxError):
    """ Raised when input ends inside an open list"""

class SlispInvalidSymbol(SlispError):
    """ Raised when a binding target is not a symbol"""

class SlispUnboundSymbol(SlispError):
    """ Raised when a symbol is used before it is bound"""

class SlispArityError(SlispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class SlispValueError(SlispError):
    """ Raised when an argument has the wrong kind of value"""

class SlispRuntimeError(SlispError):
    """ Raised when evaluation cannot continue (division by zero, no cond match, ...)"""
