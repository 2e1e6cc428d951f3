# Printer.py
"""""
Infix rendering of expression trees with as few parentheses as possible.

Binary children are wrapped only when the grouping would otherwise change:
    left child:  lower priority, or same priority under a right-assoc operator
    right child: lower priority, or same priority under a left-assoc operator
So "x - sin(x) - cos(x)" stays bare, while "x - (sin(x) - cos(x))" and
"(x ^ 2) ^ 3" keep theirs. Negation prints as "-(...)" and, like a negative
constant, is always wrapped when it is an operand of a binary operator.
"""""

from . import config_manager
from . import error as E
from . import ExpressionTree as Tree
from . import Tokenizer as T


def format_number(value, precision=None):
    """Render a float with `precision` significant digits ("%g" style)."""
    if precision is None:
        precision = config_manager.get_precision()
    if value == 0:
        # Avoid printing "-0"
        value = 0.0
    return f"{value:.{precision}g}"


def _is_negative_constant(node):
    value = node.constant_value()
    return value is not None and value < 0


def braces_needed_left(node, operator):
    if isinstance(node, Tree.BinOp):
        return (node.operator.priority < operator.priority
                or (node.operator.priority == operator.priority and not operator.left_assoc))
    return Tree.is_function(node, T.NEG) or _is_negative_constant(node)


def braces_needed_right(node, operator):
    if isinstance(node, Tree.BinOp):
        return (node.operator.priority < operator.priority
                or (node.operator.priority == operator.priority and operator.left_assoc))
    return Tree.is_function(node, T.NEG) or _is_negative_constant(node)


def _wrapped(text, needed):
    if needed:
        return f"({text})"
    return text


def to_text(node, precision=None):
    """Return the infix text for `node`."""
    if precision is None:
        precision = config_manager.get_precision()

    if isinstance(node, Tree.Constant):
        return format_number(node.value, precision)

    elif isinstance(node, Tree.Variable):
        return "x"

    elif isinstance(node, Tree.BinOp):
        left_text = _wrapped(to_text(node.left, precision), braces_needed_left(node.left, node.operator))
        right_text = _wrapped(to_text(node.right, precision), braces_needed_right(node.right, node.operator))
        return f"{left_text} {node.operator.symbol} {right_text}"

    elif isinstance(node, Tree.UnaryFunc):
        child_text = to_text(node.child, precision)
        if node.function == T.NEG:
            return f"-({child_text})"
        return f"{node.function}({child_text})"

    raise E.MathError(f"Not an expression node: {node!r}", code="9999")
