"""
Tests for the complexity visitor and the distribution buckets.
"""

import pytest
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from codehealth.analysis.complexity import analyze_complexity, complexity_bucket
from codehealth.parsing.syntax import Statement, StatementKind


def other(*children):
    return Statement(StatementKind.OTHER, tuple(children))


def conditional(*children):
    return Statement(StatementKind.CONDITIONAL, tuple(children))


def loop(*children):
    return Statement(StatementKind.LOOP, tuple(children))


def match(*children):
    return Statement(StatementKind.MATCH, tuple(children))


def block(*children):
    return Statement(StatementKind.BLOCK, tuple(children))


class TestAnalyzeComplexity:
    """Tests for cyclomatic complexity and nesting."""

    def test_empty_body(self):
        """An empty function has the single baseline path."""
        result = analyze_complexity(())
        assert result.complexity == 1
        assert result.max_nesting == 0

    def test_straight_line_code(self):
        """No branches means complexity 1."""
        result = analyze_complexity((other(), other(), other(other())))
        assert result.complexity == 1

    def test_two_ifs_and_a_while(self):
        """Each branching statement adds one path."""
        result = analyze_complexity((conditional(), conditional(), loop()))
        assert result.complexity == 4

    def test_nested_branches_are_counted(self):
        """Branches inside other statements' blocks still count."""
        body = (
            loop(
                match(
                    conditional(),
                ),
            ),
            other(conditional()),
        )
        assert analyze_complexity(body).complexity == 5

    def test_nesting_counts_block_statements_only(self):
        """Only bare blocks push nesting depth."""
        body = (
            conditional(block(other())),
            block(block(other()), other()),
        )
        result = analyze_complexity(body)
        assert result.max_nesting == 2
        assert result.complexity == 2

    def test_nesting_depth_is_maximum_not_sum(self):
        """Sibling blocks do not accumulate depth."""
        body = (block(other()), block(other()), block(block(block())))
        assert analyze_complexity(body).max_nesting == 3

    def test_deep_nesting_does_not_recurse(self):
        """Very deep statement trees are walked without hitting the recursion limit."""
        statement = conditional()
        for _ in range(5000):
            statement = block(statement)
        result = analyze_complexity((statement,))
        assert result.max_nesting == 5000
        assert result.complexity == 2

    def test_accepts_any_iterable(self):
        """The body may be a generator."""
        result = analyze_complexity(conditional() for _ in range(3))
        assert result.complexity == 4


class TestComplexityBucket:
    """Tests for the [<=5, 6-10, >10] histogram."""

    @pytest.mark.parametrize(
        "complexity,bucket",
        [(1, 0), (5, 0), (6, 1), (10, 1), (11, 2), (40, 2)],
    )
    def test_bucket_boundaries(self, complexity, bucket):
        assert complexity_bucket(complexity) == bucket
