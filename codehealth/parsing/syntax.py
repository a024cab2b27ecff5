"""
Language-neutral parse model consumed by the metrics engine.

A parser turns source text into top-level function definitions, each holding
a tree of statements. The engine never sees the concrete syntax tree, so it
can be driven by any parser (or by hand-built trees in tests).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class StatementKind(Enum):
    """Shape of a statement's outermost expression."""

    CONDITIONAL = "conditional"
    MATCH = "match"
    LOOP = "loop"
    BLOCK = "block"
    OTHER = "other"


BRANCH_KINDS = frozenset({StatementKind.CONDITIONAL, StatementKind.MATCH, StatementKind.LOOP})


@dataclass(frozen=True)
class Statement:
    """
    One statement of a function body.

    ``children`` holds the statements of every block nested inside this
    statement. For a ``BLOCK`` statement these are the block's own statements.
    """

    kind: StatementKind = StatementKind.OTHER
    children: Tuple["Statement", ...] = ()

    @property
    def is_branch(self) -> bool:
        return self.kind in BRANCH_KINDS

    @property
    def is_block(self) -> bool:
        return self.kind is StatementKind.BLOCK


@dataclass(frozen=True)
class FunctionDefinition:
    name: str
    body: Tuple[Statement, ...] = ()
    start_line: int = 0

    @property
    def statement_count(self) -> int:
        return len(self.body)


@dataclass(frozen=True)
class ParsedSource:
    """Result of parsing one file."""

    path: str
    functions: Tuple[FunctionDefinition, ...] = ()
    operators: Tuple[str, ...] = ()
    operands: Tuple[str, ...] = ()


class ParseError(Exception):
    """Raised when source text cannot be parsed."""

    def __init__(self, path: str, message: str = "syntax error") -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class SourceParser(ABC):
    """Turns source text into a :class:`ParsedSource`."""

    name: str = "generic"
    extensions: Tuple[str, ...] = ()

    @abstractmethod
    def parse(self, path: str, source: str) -> ParsedSource:
        """Parse ``source`` or raise :class:`ParseError`."""
