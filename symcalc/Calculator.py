# Calculator.py
"""""
Session state and the line-oriented command interpreter.

Commands (case-insensitive command word):
    EXPR <expression>   parse and remember as the last expression
    SAVE <name>         store a copy of the last expression under <name>
    DER [name]          derivative of the last (or saved) expression, becomes the last one
    EVAL [name] <x>     value of the last (or saved) expression at x
    PRINT [name]        print the last expression; a saved one becomes the last one
"""""

import sys

from . import config_manager as config_manager
from . import error as E
from . import MathEngine
from . import Printer


def _validate_new_name(arguments):
    """Name for SAVE: one word starting with a letter."""
    if not arguments:
        raise E.CommandError("Variable name must not be empty", code="6002")
    if len(arguments) > 1:
        raise E.CommandError("Variable name must not contain spaces", code="6003")
    name = arguments[0]
    if not name[0].isalpha():
        raise E.CommandError("Variable name must start with a letter", code="6004")
    return name


def _parse_x(text):
    try:
        return float(text)
    except ValueError:
        raise E.CommandError("Invalid query", code="6006")


def _is_digit_name(text):
    """A word like "2f": starts with a digit but is not a number."""
    if not text[0].isdigit():
        return False
    try:
        float(text)
    except ValueError:
        return True
    return False


class Calculator:
    def __init__(self):
        self.last = None  # Last expression tree
        self.saved = {}   # name -> expression tree

    # --- Session operations ---

    def new_expr(self, tree):
        self.last = tree

    def save(self, name):
        # Saved trees never share nodes with the session's last tree
        self.saved[name] = MathEngine.copy(self.last)

    def derivative(self, name=None):
        source = self.last if name is None else self.saved[name]
        self.last = MathEngine.derivative(source)
        return self.last

    def evaluate(self, x, name=None):
        source = self.last if name is None else self.saved[name]
        return MathEngine.evaluate(source, x)

    def get(self, name=None):
        if name is not None:
            self.last = MathEngine.copy(self.saved[name])
        return self.last

    def var_exists(self, name):
        return name in self.saved

    # --- Command interpreter ---

    def _require_expression(self):
        if self.last is None:
            raise E.CommandError("Enter expression", code="6001")

    def _existing_name(self, arguments):
        """Optional name argument that must refer to a saved expression."""
        if not arguments:
            return None
        if len(arguments) > 1:
            raise E.CommandError("Variable name must not contain spaces", code="6003")
        name = arguments[0]
        if not self.var_exists(name):
            raise E.CommandError(f"No variable with name: {name}", code="6005")
        return name

    def _format(self, value):
        return Printer.format_number(value, config_manager.get_precision())

    def execute(self, line):
        """Run one command line; returns the text to show or None."""
        parts = line.strip().split(maxsplit=1)
        if not parts:
            raise E.CommandError("Invalid command", code="6000")
        command = parts[0].upper()
        rest = parts[1] if len(parts) > 1 else ""
        arguments = rest.split()

        if command == "EXPR":
            self.new_expr(MathEngine.parse(rest))
            return None

        elif command == "SAVE":
            self._require_expression()
            self.save(_validate_new_name(arguments))
            return None

        elif command == "DER":
            self._require_expression()
            name = self._existing_name(arguments)
            return MathEngine.print_tree(self.derivative(name))

        elif command == "EVAL":
            self._require_expression()
            if arguments and _is_digit_name(arguments[0]):
                raise E.CommandError("Variable name must not start with a digit", code="6007")
            if len(arguments) == 1:
                return self._format(self.evaluate(_parse_x(arguments[0])))
            elif len(arguments) == 2:
                name, x_text = arguments
                if name[0].isdigit():
                    # Two numbers: "EVAL 1 2"
                    raise E.CommandError("Invalid query", code="6006")
                x = _parse_x(x_text)
                if not self.var_exists(name):
                    raise E.CommandError(f"No variable with name: {name}", code="6005")
                return self._format(self.evaluate(x, name))
            raise E.CommandError("Invalid query", code="6006")

        elif command == "PRINT":
            self._require_expression()
            name = self._existing_name(arguments)
            return MathEngine.print_tree(self.get(name))

        raise E.CommandError("Invalid command", code="6000")

    def run(self, lines, out=None):
        """REPL loop: one command per line, errors are reported and skipped."""
        if out is None:
            out = sys.stdout
        for line in lines:
            if not line.strip():
                continue
            try:
                response = self.execute(line)
            except E.MathError as e:
                response = e.message
            if response is not None:
                out.write(response + "\n")
