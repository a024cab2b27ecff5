"""
Parsers that turn source text into the statement model.
"""

from codehealth.parsing.syntax import (
    FunctionDefinition,
    ParsedSource,
    ParseError,
    SourceParser,
    Statement,
    StatementKind,
)
from codehealth.parsing.rust import RustParser

__all__ = [
    "FunctionDefinition",
    "ParsedSource",
    "ParseError",
    "SourceParser",
    "Statement",
    "StatementKind",
    "RustParser",
]
