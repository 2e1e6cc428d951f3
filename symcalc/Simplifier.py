# Simplifier.py
"""""
Bottom-up rewriting of expression trees into their canonical, minimal form.

make_simplified(node) is the only place where trees are restructured.
Per node:
1) already simplified -> returned untouched
2) children are simplified first
3) all children constant -> folded into a single Constant
4) otherwise the elimination rules of the node's operator apply
5) the resulting node is flagged as simplified

Rules (EPSILON = 1e-10, absolute difference):
    a + b   constant moved to the right,   a + 0 -> a
    a - b   0 - b -> -(b),                  a - 0 -> a
    a * b   constant moved to the left,     0 * b -> 0,   1 * b -> b
    a / b   0 / b -> 0,                     a / 1 -> a
    a ^ b   0 ^ b -> 0,  1 ^ b -> 1,        a ^ 0 -> 1,   a ^ 1 -> a
    f(a)    folding only
The swaps run before the eliminations so those always see the canonical side.
"""""

from . import ExpressionTree as Tree
from . import Tokenizer as T


EPSILON = 1e-10


def is_close(node, value):
    """True if `node` is a Constant within EPSILON of `value`."""
    constant = node.constant_value()
    return constant is not None and abs(constant - value) < EPSILON


def _done(node):
    node.simplified = True
    return node


def _folded(node):
    # Input-independent: any x gives the same value
    return _done(Tree.Constant(node.evaluate(0.0)))


def make_simplified(node):
    """Return the simplified form of `node` (may rewrite `node` in place)."""
    if node.simplified:
        return node

    if isinstance(node, Tree.BinOp):
        node.left = make_simplified(node.left)
        node.right = make_simplified(node.right)
        if node.left.is_constant() and node.right.is_constant():
            return _folded(node)
        return _simplify_binary(node)

    elif isinstance(node, Tree.UnaryFunc):
        node.child = make_simplified(node.child)
        if node.child.is_constant():
            return _folded(node)
        return _done(node)

    # Constant / Variable leaves
    return _done(node)


def _simplify_binary(node):
    operator = node.operator

    if operator is T.SUM:
        if node.left.is_constant():
            node.left, node.right = node.right, node.left
        if is_close(node.right, 0):
            return node.left

    elif operator is T.DIFF:
        if is_close(node.left, 0):
            return make_simplified(Tree.Neg(node.right))
        if is_close(node.right, 0):
            return node.left

    elif operator is T.MULT:
        if node.right.is_constant():
            node.left, node.right = node.right, node.left
        if is_close(node.left, 0):
            return _done(Tree.Constant(0))
        if is_close(node.left, 1):
            return node.right

    elif operator is T.DIV:
        if is_close(node.left, 0):
            return _done(Tree.Constant(0))
        if is_close(node.right, 1):
            return node.left

    elif operator is T.POW:
        if is_close(node.left, 0):
            return _done(Tree.Constant(0))
        if is_close(node.left, 1):
            return _done(Tree.Constant(1))
        if is_close(node.right, 0):
            return _done(Tree.Constant(1))
        if is_close(node.right, 1):
            return node.left

    return _done(node)
