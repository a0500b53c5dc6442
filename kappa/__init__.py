# Core type aliases for Kappa's data model.
# Runtime values are plain Python objects where one fits (int, str, bool) and
# small dedicated classes where the language needs a distinct tag (BigInt,
# Symbol, LispList).
#
# Naming guidance:
# - SExpression: use in reader/builder code to denote parsed forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; they document intent, not structure.

import logging
import sys
from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Parsed form alias (same representation as runtime values)
SExpression = LispValue

# Output primitive consumed by (print ...)
OutputFn = Callable[[str], None]

# BigInt numerals and printed results are not bounded by a digit count
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
