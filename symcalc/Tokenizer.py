# Tokenizer.py
"""""
Lexical layer of the derivative calculator.

Turns the raw input text into a flat list of Token objects:
numbers, the variable 'x', braces, unary functions and binary operators.
A '-' that opens the expression or directly follows '(' is reclassified
as the unary function 'neg' while the token list is being built.
"""""

import re

from . import error as E


# -----------------------------
# Binary operators
# -----------------------------

class BinaryOperator:
    """Operator kind with its priority and associativity (shared, never mutated)."""
    def __init__(self, name, symbol, priority, left_assoc=True):
        self.name = name
        self.symbol = symbol
        self.priority = priority
        self.left_assoc = left_assoc

    def __repr__(self):
        return f"BinaryOperator({self.symbol!r})"


SUM = BinaryOperator("sum", "+", 1)
DIFF = BinaryOperator("diff", "-", 1)
MULT = BinaryOperator("mult", "*", 2)
DIV = BinaryOperator("div", "/", 2)
POW = BinaryOperator("pow", "^", 3, left_assoc=False)

# Symbol -> operator, used for quick membership checks
Operations = {op.symbol: op for op in (SUM, DIFF, MULT, DIV, POW)}

# Unary functions; 'neg' has no spelling of its own, it comes from '-'
SIN, COS, TAN, COT, NEG, LN = "sin", "cos", "tan", "cot", "neg", "ln"
Unary_Functions = [SIN, COS, TAN, COT, NEG, LN]
Function_Names = [SIN, COS, TAN, COT, LN]


# -----------------------------
# Token
# -----------------------------

NUMBER = "number"
VARIABLE = "variable"
OPEN_BRACE = "("
CLOSE_BRACE = ")"
FUNCTION = "function"
OPERATOR = "operator"


class Token:
    """Tagged token: `kind` selects which payload `value` carries.

    NUMBER   -> float
    VARIABLE -> None
    braces   -> None
    FUNCTION -> one of Unary_Functions
    OPERATOR -> BinaryOperator
    """
    def __init__(self, kind, value=None):
        self.kind = kind
        self.value = value

    def is_operator(self, operator=None):
        if self.kind != OPERATOR:
            return False
        return operator is None or self.value is operator

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __repr__(self):
        if self.kind == NUMBER:
            return f"Token({self.value!r})"
        elif self.kind == VARIABLE:
            return "Token('x')"
        elif self.kind == FUNCTION:
            return f"Token({self.value})"
        elif self.kind == OPERATOR:
            return f"Token({self.value.symbol!r})"
        return f"Token({self.kind!r})"


def number(value):
    return Token(NUMBER, float(value))

def variable():
    return Token(VARIABLE)

def open_brace():
    return Token(OPEN_BRACE)

def close_brace():
    return Token(CLOSE_BRACE)

def function(name):
    return Token(FUNCTION, name)

def operator(symbol):
    return Token(OPERATOR, Operations[symbol])


# -----------------------------
# Tokenizer
# -----------------------------

# Digits, optional fraction, optional exponent (like reading a double from a stream)
NUMBER_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?")
LETTERS_PATTERN = re.compile(r"[A-Za-z]+")
DIGITS = "0123456789"


class Tokenizer:
    """Pull-style tokenizer over a string.

    Each call to next_token() skips whitespace and returns one Token,
    or None once the input is exhausted.
    """
    def __init__(self, text):
        self.text = text
        self.position = 0

    def __iter__(self):
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def skip_whitespace(self):
        while self.position < len(self.text) and self.text[self.position].isspace():
            self.position += 1

    def at_end(self):
        self.skip_whitespace()
        return self.position >= len(self.text)

    def next_token(self):
        if self.at_end():
            return None

        current_char = self.text[self.position]

        # --- 1. Numbers ---
        if current_char in DIGITS:
            match = NUMBER_PATTERN.match(self.text, self.position)
            self.position = match.end()
            return number(match.group())

        # --- 2. The variable (not the start of a longer word) ---
        if current_char == "x":
            following = self.text[self.position + 1:self.position + 2]
            if not LETTERS_PATTERN.match(following):
                self.position += 1
                return variable()

        # --- 3. Binary operators ---
        if current_char in Operations:
            self.position += 1
            return operator(current_char)

        # --- 4. Function names ---
        letters = LETTERS_PATTERN.match(self.text, self.position)
        if letters and letters.group() in Function_Names:
            self.position = letters.end()
            return function(letters.group())

        # --- 5. Braces ---
        if current_char == "(":
            self.position += 1
            return open_brace()
        if current_char == ")":
            self.position += 1
            return close_brace()

        # --- 6. Anything else aborts the whole parse ---
        if letters:
            raise E.LexicalError(letters.group(), equation=self.text)
        raise E.LexicalError(current_char, equation=self.text)


def tokenize(text):
    """Return the token list for `text`, with unary minus already resolved."""
    tokens = []
    for token in Tokenizer(text):
        # A '-' with nothing (or only '(') before it has no left operand
        if token.is_operator(DIFF) and (not tokens or tokens[-1].kind == OPEN_BRACE):
            tokens.append(function(NEG))
        else:
            tokens.append(token)
    return tokens
