"""
Error taxonomy for formula processing.

Every user-facing failure is a ValidationError raised before any parsing
or evaluation work starts. PostfixArityError marks a broken internal
precondition and is not reachable through ``proplogic.process``.
"""


class ValidationError(ValueError):
    """A formula was rejected; ``message`` is human readable."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyExpression(ValidationError):
    def __init__(self):
        super().__init__("empty expression")


class InvalidCharacter(ValidationError):
    def __init__(self, char: str, position: int = -1):
        super().__init__(f"invalid character: {char!r}")
        self.char = char
        self.position = position


class UnbalancedParentheses(ValidationError):
    def __init__(self):
        super().__init__("unbalanced parentheses")


class MalformedToken(ValidationError):
    """Adjacent letters with no operator between them, e.g. ``PQ``."""

    def __init__(self, token: str):
        super().__init__(f"malformed token: {token!r}")
        self.token = token


class MalformedExpression(ValidationError):
    """Token stream that cannot be reduced, e.g. ``P∧`` or ``()``."""

    def __init__(self, detail: str):
        super().__init__(f"malformed expression: {detail}")
        self.detail = detail


class PostfixArityError(RuntimeError):
    """Postfix sequence with an operator lacking operands."""
    pass
