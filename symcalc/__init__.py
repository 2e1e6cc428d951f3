"""""
Derivative calculator: parse expressions in x, differentiate, evaluate and print them.

    from symcalc import MathEngine
    tree = MathEngine.parse("x ^ 2 + sin(x)")
    MathEngine.print_tree(MathEngine.derivative(tree))   # '2 * x + cos(x)'
"""""

from .MathEngine import tokenize, to_postfix, build_tree, parse, evaluate, derivative, simplify, print_tree
from .Calculator import Calculator
from .error import MathError, LexicalError, SyntaxError, CommandError, ConfigurationError
