# ScientificEngine
"""""
Numeric kernels behind evaluate().

Python's float operators raise on several domain errors (0 / 0, 0 ** -1,
math.log(0), math.sin(inf), ...). The expression tree is meant to follow
plain IEEE double semantics instead, so every kernel here returns inf or
nan where IEEE 754 arithmetic would, and never raises.
"""""
import math

from . import Tokenizer as T
from . import error as E


INF = math.inf
NAN = math.nan


def _is_odd_integer(value):
    return math.isfinite(value) and value == int(value) and int(value) % 2 == 1


def divide(left_value, right_value):
    if right_value == 0:
        if left_value == 0 or math.isnan(left_value):
            return NAN
        # Sign follows both operands, including a signed zero divisor
        sign = math.copysign(1.0, left_value) * math.copysign(1.0, right_value)
        return math.copysign(INF, sign)
    return left_value / right_value


def power(base, exponent):
    if base == 0 and exponent < 0:
        if _is_odd_integer(-exponent):
            return math.copysign(INF, base)
        return INF
    try:
        return math.pow(base, exponent)
    except ValueError:
        # Negative base with a non-integer exponent
        return NAN
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -INF
        return INF


def natural_log(value):
    if value == 0:
        return -INF
    if value < 0 or math.isnan(value):
        return NAN
    return math.log(value)


def _periodic(function, value):
    if math.isinf(value):
        return NAN
    return function(value)


def sine(value):
    return _periodic(math.sin, value)


def cosine(value):
    return _periodic(math.cos, value)


def tangent(value):
    return _periodic(math.tan, value)


def cotangent(value):
    return divide(1.0, tangent(value))


# Function name -> numeric kernel
Function_Kernels = {
    T.SIN: sine,
    T.COS: cosine,
    T.TAN: tangent,
    T.COT: cotangent,
    T.NEG: lambda value: -value,
    T.LN: natural_log,
}


def apply_function(name, value):
    """Apply the unary function `name` to a float."""
    return Function_Kernels[name](value)


def apply_operator(operator, left_value, right_value):
    """Apply a BinaryOperator to two floats."""
    if operator is T.SUM:
        return left_value + right_value
    elif operator is T.DIFF:
        return left_value - right_value
    elif operator is T.MULT:
        return left_value * right_value
    elif operator is T.DIV:
        return divide(left_value, right_value)
    elif operator is T.POW:
        return power(left_value, right_value)
    raise E.MathError(f"Unknown operator: {operator}", code="9999")
