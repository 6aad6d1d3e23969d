"""
clsx-specific exception types
"""


class ClsxError(Exception):
    """Base exception for all clsx errors"""
    pass


class InvalidClassItemError(ClsxError, TypeError):
    """An argument is neither a class value nor a (value, condition) pair"""
    def __init__(self, message: str, item: object = None):
        super().__init__(message)
        self.item = item


class ExpressionError(ClsxError):
    """Base exception for class expression errors"""
    pass


class ExpressionSyntaxError(ExpressionError):
    """Class expression text could not be parsed"""
    def __init__(self, message: str, expression: str = "", position: int = 0):
        super().__init__(f"{message} (at position {position})")
        self.expression = expression
        self.position = position


class UndefinedNameError(ExpressionError, NameError):
    """A name used in a class expression is not defined in the context"""
    def __init__(self, name: str):
        super().__init__(f"name '{name}' is not defined")
        self.name = name


class ContextError(ClsxError):
    """Evaluation context could not be loaded"""
    pass
