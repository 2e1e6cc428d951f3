# MathEngine.py
"""""
Core pipeline of the derivative calculator.

Pipeline
--------
1) Tokenizer: raw input string -> flat list of tokens (Tokenizer.py).
2) Converter: infix tokens -> postfix tokens (shunting-yard).
3) Tree builder: postfix tokens -> expression tree, simplified once.
4) Operations on trees: evaluate at x, derivative, print.
"""""

from . import config_manager as config_manager
from . import Differentiator
from . import error as E
from . import ExpressionTree as Tree
from . import Printer
from . import Simplifier
from . import Tokenizer as T


# -----------------------------
# Tokenizer
# -----------------------------

def tokenize(text):
    """Convert raw input text into a token list (unary minus already resolved)."""
    tokens = T.tokenize(text)
    if config_manager.is_debug():
        print("Tokens:", tokens)
    return tokens


# -----------------------------
# Infix -> postfix (shunting-yard)
# -----------------------------

def _pops_before(stack_token, operator):
    """True if the operator on the stack has to be output before `operator` is pushed."""
    if not stack_token.is_operator():
        return False
    stack_operator = stack_token.value
    return (stack_operator.priority > operator.priority
            or (stack_operator.priority == operator.priority and operator.left_assoc))


def to_postfix(tokens):
    """Reorder an infix token list into postfix order.

    Functions are only ever popped by their closing ')', never by precedence.
    Raises:
        E.SyntaxError on unbalanced braces.
    """
    output = []
    stack = []

    for token in tokens:
        if token.kind in (T.NUMBER, T.VARIABLE):
            output.append(token)

        elif token.kind in (T.FUNCTION, T.OPEN_BRACE):
            stack.append(token)

        elif token.kind == T.OPERATOR:
            while stack and _pops_before(stack[-1], token.value):
                output.append(stack.pop())
            stack.append(token)

        elif token.kind == T.CLOSE_BRACE:
            while stack and stack[-1].kind != T.OPEN_BRACE:
                output.append(stack.pop())
            if not stack:
                raise E.SyntaxError("Invalid expression", code="3001")
            stack.pop()
            # A function application ends with its own ')'
            if stack and stack[-1].kind == T.FUNCTION:
                output.append(stack.pop())

        else:
            raise E.MathError(f"Unexpected token: {token!r}", code="9999")

    while stack:
        token = stack.pop()
        if token.kind == T.OPEN_BRACE:
            raise E.SyntaxError("Invalid expression", code="3002")
        output.append(token)

    if config_manager.is_debug():
        print("Postfix:", output)
    return output


# -----------------------------
# Tree builder
# -----------------------------

def build_tree(postfix):
    """Build the expression tree for a postfix token list and simplify it once.

    Raises:
        E.SyntaxError if an operator or function lacks operands, or if the
        tokens do not reduce to exactly one expression.
    """
    stack = []

    for token in postfix:
        if token.kind == T.NUMBER:
            stack.append(Tree.Constant(token.value))

        elif token.kind == T.VARIABLE:
            stack.append(Tree.Variable())

        elif token.kind == T.FUNCTION:
            if not stack:
                raise E.SyntaxError("Invalid expression", code="3004")
            stack.append(Tree.UnaryFunc(token.value, stack.pop()))

        elif token.kind == T.OPERATOR:
            if len(stack) < 2:
                raise E.SyntaxError("Invalid expression", code="3003")
            right = stack.pop()
            left = stack.pop()
            stack.append(Tree.BinOp(token.value, left, right))

        else:
            # Braces never survive to_postfix
            raise E.SyntaxError("Invalid expression", code="3005")

    if not stack:
        raise E.SyntaxError("Invalid expression", code="3006")
    if len(stack) != 1:
        raise E.SyntaxError("Invalid expression", code="3005")

    final_tree = Simplifier.make_simplified(stack.pop())

    if config_manager.is_debug():
        print("Final AST:")
        print(final_tree)

    return final_tree


# -----------------------------
# Public entry points
# -----------------------------

def _too_deep():
    # Every tree walk recurses once per level
    return E.SyntaxError("Expression too deep", code="3007")


def parse(text):
    """Main API: text -> simplified expression tree."""
    try:
        return build_tree(to_postfix(tokenize(text)))
    except E.MathError as e:
        # Attach the source text for error reporting
        e.equation = text
        raise e
    except RecursionError:
        error = _too_deep()
        error.equation = text
        raise error


def evaluate(tree, x):
    """Value of `tree` at x (IEEE semantics: may be inf or nan, never raises)."""
    try:
        return tree.evaluate(float(x))
    except RecursionError:
        raise _too_deep()


def derivative(tree):
    """Simplified derivative of `tree`; `tree` itself is left untouched."""
    try:
        return Differentiator.derivative(tree)
    except RecursionError:
        raise _too_deep()


def simplify(tree):
    try:
        return Simplifier.make_simplified(tree)
    except RecursionError:
        raise _too_deep()


def copy(tree):
    try:
        return tree.copy()
    except RecursionError:
        raise _too_deep()


def print_tree(tree, precision=None):
    """Infix text of `tree` with minimal parentheses."""
    try:
        return Printer.to_text(tree, precision)
    except RecursionError:
        raise _too_deep()
