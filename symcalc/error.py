

class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

class LexicalError(MathError):
    def __init__(self, fragment, code="3000", equation=None):
        super().__init__(f"Invalid token: {fragment}", code=code, equation=equation)
        self.fragment = fragment

class SyntaxError(MathError):
    pass

class CommandError(MathError):
    pass

class ConfigurationError(MathError):
    pass










Error_Dictionary= {

    "1" : "Missing Files",
    "3" : "Expression Error",
    "4" : "UI Error",
    "5" : "Configuration Error",
    "6" : "Command Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Category
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "1000" : "Missing package files: ", # + file names

    "3000" : "Invalid token: ", # + fragment
    "3001" : "Invalid expression (missing '(').",
    "3002" : "Invalid expression (missing ')').",
    "3003" : "Invalid expression (operator without two operands).",
    "3004" : "Invalid expression (function without operand).",
    "3005" : "Invalid expression (dangling operands).",
    "3006" : "Invalid expression (empty).",
    "3007" : "Expression too deep",

    "4002" : "Command already Running!",
    "4501" : "Not all Settings could be saved: ", # + Error raising setting

    "5001" : "Invalid precision setting: ", # + value

    "6000" : "Invalid command",
    "6001" : "Enter expression",
    "6002" : "Variable name must not be empty",
    "6003" : "Variable name must not contain spaces",
    "6004" : "Variable name must start with a letter",
    "6005" : "No variable with name: ", # + name
    "6006" : "Invalid query",
    "6007" : "Variable name must not start with a digit",


    "9999" : "Unexpected Error: " #+error
}
