# Differentiator.py
"""""
Symbolic differentiation with respect to x.

derivative(node) never touches `node`: every piece of the input tree that
reappears in the result is a copy(), every other piece is a freshly built
derivative. Each rule builds its formula and hands it to the simplifier,
so the returned tree is always simplified.
"""""

from . import ExpressionTree as Tree
from . import error as E
from . import Simplifier
from . import Tokenizer as T


def derivative(node):
    """Return d(node)/dx as a new, simplified tree."""
    if isinstance(node, Tree.Constant):
        result = Tree.Constant(0)

    elif isinstance(node, Tree.Variable):
        result = Tree.Constant(1)

    elif isinstance(node, Tree.BinOp):
        result = _binary_derivative(node)

    elif isinstance(node, Tree.UnaryFunc):
        result = _function_derivative(node)

    else:
        raise E.MathError(f"Not an expression node: {node!r}", code="9999")

    return Simplifier.make_simplified(result)


def _binary_derivative(node):
    operator = node.operator
    left, right = node.left, node.right

    if operator is T.SUM:
        return Tree.Sum(derivative(left), derivative(right))

    elif operator is T.DIFF:
        return Tree.Diff(derivative(left), derivative(right))

    elif operator is T.MULT:
        # (uv)' = u'v + uv'
        return Tree.Sum(
            Tree.Mult(derivative(left), right.copy()),
            Tree.Mult(left.copy(), derivative(right)),
        )

    elif operator is T.DIV:
        # (u/v)' = (u'v - uv') / v^2
        return Tree.Div(
            Tree.Diff(
                Tree.Mult(derivative(left), right.copy()),
                Tree.Mult(left.copy(), derivative(right)),
            ),
            Tree.Pow(right.copy(), Tree.Constant(2)),
        )

    elif operator is T.POW:
        exponent = right.constant_value()
        if exponent is not None:
            # Plain power rule, keeps ln() out of polynomials: p u^(p-1) u'
            return Tree.Mult(
                Tree.Mult(
                    Tree.Constant(exponent),
                    Tree.Pow(left.copy(), Tree.Constant(exponent - 1)),
                ),
                derivative(left),
            )
        # (u^v)' = u^v * (u'v / u + ln(u) v')
        return Tree.Mult(
            node.copy(),
            Tree.Sum(
                Tree.Div(Tree.Mult(derivative(left), right.copy()), left.copy()),
                Tree.Mult(Tree.Ln(left.copy()), derivative(right)),
            ),
        )

    raise E.MathError(f"Unknown operator: {operator}", code="9999")


def _function_derivative(node):
    function = node.function
    child = node.child

    if function == T.SIN:
        outer = Tree.Cos(child.copy())

    elif function == T.COS:
        outer = Tree.Neg(Tree.Sin(child.copy()))

    elif function == T.TAN:
        outer = Tree.Div(Tree.Constant(1), Tree.Pow(Tree.Cos(child.copy()), Tree.Constant(2)))

    elif function == T.COT:
        outer = Tree.Neg(Tree.Div(Tree.Constant(1), Tree.Pow(Tree.Sin(child.copy()), Tree.Constant(2))))

    elif function == T.NEG:
        return Tree.Neg(derivative(child))

    elif function == T.LN:
        outer = Tree.Div(Tree.Constant(1), child.copy())

    else:
        raise E.MathError(f"Unknown function: {function}", code="9999")

    # Chain rule
    return Tree.Mult(outer, derivative(child))
