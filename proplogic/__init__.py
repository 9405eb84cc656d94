from .errors import (
    EmptyExpression,
    InvalidCharacter,
    MalformedExpression,
    MalformedToken,
    UnbalancedParentheses,
    ValidationError,
)
from .pipeline import ProcessResult, process
from .latex import to_latex, from_latex
