from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from codehealth.parsing.syntax import Statement


EASY_LIMIT = 5
MODERATE_LIMIT = 10


@dataclass(frozen=True)
class ComplexityResult:
    complexity: int
    max_nesting: int


def analyze_complexity(body: Iterable[Statement]) -> ComplexityResult:
    """
    Cyclomatic complexity and maximum block nesting of a function body.

    Complexity is 1 plus one for every conditional, match or loop statement,
    however deeply nested. Branches that appear inside an expression (an
    ``if`` on the right of a ``let``, an ``else if`` arm, a match arm without
    braces) are not statements and are not counted.

    Nesting counts only bare block statements ``{ ... }``.
    """
    complexity = 1
    max_nesting = 0
    stack: List[Tuple[Statement, int]] = [(statement, 0) for statement in reversed(tuple(body))]
    while stack:
        statement, depth = stack.pop()
        if statement.is_branch:
            complexity += 1
        if statement.is_block:
            depth += 1
            max_nesting = max(max_nesting, depth)
        stack.extend((child, depth) for child in reversed(statement.children))
    return ComplexityResult(complexity=complexity, max_nesting=max_nesting)


def complexity_bucket(complexity: int) -> int:
    """Index into the ``[<=5, 6-10, >10]`` distribution."""
    if complexity <= EASY_LIMIT:
        return 0
    if complexity <= MODERATE_LIMIT:
        return 1
    return 2
