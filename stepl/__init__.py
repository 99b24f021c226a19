# Core type aliases for stepl's data model.
# Plain Python types (int, float, str, bool, list) represent both code (forms)
# and runtime values. Symbols are the only dedicated atom type, and functions
# are the three variants in stepl.types.function.
#
# Naming guidance:
# - SExpression: use in reader/macro code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any

LispValue = Any
SExpression = LispValue
