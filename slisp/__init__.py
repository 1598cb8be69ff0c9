# Core type aliases for slisp's data model.
# Atoms are plain Python values (int, float, str, bool). Code read from source
# is nested Python lists; data lists built at runtime are Cons chains.
#
# Naming guidance:
# - SExpression: forms as produced by the reader (code-as-data).
# - LispValue:  evaluated runtime values.

from typing import Any, Callable

from loguru import logger

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms
EvaluatorFn = Callable[..., LispValue]

# Library code stays quiet until an application calls setup_logging()
logger.disable("slisp")
