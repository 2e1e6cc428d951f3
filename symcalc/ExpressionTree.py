# ExpressionTree.py
"""""
AST node types for expressions in the single variable 'x'.

Every node owns its children exclusively: a subtree is never referenced
from two places. Code that needs the same subexpression twice (the
derivative rules, for example) must take a copy() of it.

`simplified` is False until Simplifier.make_simplified has processed the
node; copy() carries the flag over since a copy of a simplified tree is
just as simplified.
"""""

from . import ScientificEngine
from . import Tokenizer as T


class Node:
    """Common base for all expression nodes."""
    simplified = False

    def evaluate(self, x):
        raise NotImplementedError

    def copy(self):
        raise NotImplementedError

    def constant_value(self):
        """Return the value of a Constant node, None for anything else."""
        return None

    def is_constant(self):
        return self.constant_value() is not None


class Constant(Node):
    """Numeric literal (leaf)."""
    def __init__(self, value):
        self.value = float(value)

    def evaluate(self, x):
        return self.value

    def copy(self):
        duplicate = Constant(self.value)
        duplicate.simplified = self.simplified
        return duplicate

    def constant_value(self):
        return self.value

    def __eq__(self, other):
        if not isinstance(other, Constant):
            return NotImplemented
        return self.value == other.value

    def __repr__(self):
        return f"Constant({self.value!r})"


class Variable(Node):
    """The independent variable x (leaf)."""
    def evaluate(self, x):
        return float(x)

    def copy(self):
        duplicate = Variable()
        duplicate.simplified = self.simplified
        return duplicate

    def __eq__(self, other):
        if not isinstance(other, Variable):
            return NotImplemented
        return True

    def __repr__(self):
        return "Variable('x')"


class BinOp(Node):
    """Binary operation: left <operator> right."""
    def __init__(self, operator, left, right):
        self.operator = operator
        self.left = left
        self.right = right

    def evaluate(self, x):
        left_value = self.left.evaluate(x)
        right_value = self.right.evaluate(x)
        return ScientificEngine.apply_operator(self.operator, left_value, right_value)

    def copy(self):
        duplicate = BinOp(self.operator, self.left.copy(), self.right.copy())
        duplicate.simplified = self.simplified
        return duplicate

    def __eq__(self, other):
        if not isinstance(other, BinOp):
            return NotImplemented
        return (self.operator is other.operator
                and self.left == other.left
                and self.right == other.right)

    def __repr__(self):
        return f"BinOp({self.operator.symbol!r}, left={self.left}, right={self.right})"


class UnaryFunc(Node):
    """Unary function application: function(child)."""
    def __init__(self, function, child):
        self.function = function
        self.child = child

    def evaluate(self, x):
        return ScientificEngine.apply_function(self.function, self.child.evaluate(x))

    def copy(self):
        duplicate = UnaryFunc(self.function, self.child.copy())
        duplicate.simplified = self.simplified
        return duplicate

    def __eq__(self, other):
        if not isinstance(other, UnaryFunc):
            return NotImplemented
        return self.function == other.function and self.child == other.child

    def __repr__(self):
        return f"UnaryFunc({self.function!r}, {self.child})"


# -----------------------------
# Small constructors used by the rule bodies
# -----------------------------

def Sum(left, right):
    return BinOp(T.SUM, left, right)

def Diff(left, right):
    return BinOp(T.DIFF, left, right)

def Mult(left, right):
    return BinOp(T.MULT, left, right)

def Div(left, right):
    return BinOp(T.DIV, left, right)

def Pow(left, right):
    return BinOp(T.POW, left, right)

def Sin(child):
    return UnaryFunc(T.SIN, child)

def Cos(child):
    return UnaryFunc(T.COS, child)

def Tan(child):
    return UnaryFunc(T.TAN, child)

def Cot(child):
    return UnaryFunc(T.COT, child)

def Neg(child):
    return UnaryFunc(T.NEG, child)

def Ln(child):
    return UnaryFunc(T.LN, child)


def is_function(node, function):
    return isinstance(node, UnaryFunc) and node.function == function


def iter_nodes(node):
    """Yield every node of the tree, parents before children."""
    yield node
    if isinstance(node, BinOp):
        yield from iter_nodes(node.left)
        yield from iter_nodes(node.right)
    elif isinstance(node, UnaryFunc):
        yield from iter_nodes(node.child)
