"""Reads, parses and measures a single source file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from codehealth.analysis.complexity import analyze_complexity, complexity_bucket
from codehealth.analysis.halstead import HalsteadCounts, count_tokens
from codehealth.core.metrics import CodeMetrics, FileMetrics, FunctionMetric
from codehealth.parsing.rust import RustParser
from codehealth.parsing.syntax import ParseError, SourceParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileContribution:
    """What one file adds to the project totals."""

    metrics: CodeMetrics
    detail: FileMetrics
    halstead: HalsteadCounts = field(default_factory=HalsteadCounts)

    @classmethod
    def empty(cls, path: str) -> "FileContribution":
        return cls(metrics=CodeMetrics(), detail=FileMetrics.empty(path))


def count_lines(text: str) -> int:
    """Number of ``\\n``-delimited lines; a trailing newline ends the last line."""
    if not text:
        return 0
    lines = text.count("\n")
    return lines if text.endswith("\n") else lines + 1


def count_comment_lines(text: str, marker: str = "//") -> int:
    """Lines whose first non-blank characters are ``marker``. Block comments are not seen."""
    return sum(1 for line in text.split("\n") if line.lstrip().startswith(marker))


class FileAnalyzer:
    """Runs the parser and the complexity visitor over one file."""

    def __init__(
        self,
        parser: Optional[SourceParser] = None,
        encoding: str = "utf-8",
        comment_marker: str = "//",
    ) -> None:
        self.parser = parser or RustParser()
        self.encoding = encoding
        self.comment_marker = comment_marker

    def analyze(self, path: str, source: Optional[str] = None) -> FileContribution:
        text = source if source is not None else self._read_file(path)
        if text is None:
            return FileContribution.empty(path)

        loc = count_lines(text)
        comments = count_comment_lines(text, self.comment_marker)
        try:
            parsed = self.parser.parse(path, text)
        except ParseError as exc:
            logger.debug("Skipping function analysis for %s: %s", path, exc)
            return FileContribution(
                metrics=CodeMetrics(loc=loc, comments=comments),
                detail=FileMetrics.empty(path),
            )

        functions: List[FunctionMetric] = []
        distribution = [0, 0, 0]
        longest = 0
        max_nesting = 0
        for definition in parsed.functions:
            result = analyze_complexity(definition.body)
            statement_count = definition.statement_count
            longest = max(longest, statement_count)
            max_nesting = max(max_nesting, result.max_nesting)
            distribution[complexity_bucket(result.complexity)] += 1
            functions.append(
                FunctionMetric(
                    file=path,
                    function_name=definition.name,
                    complexity=result.complexity,
                    loc=statement_count,
                )
            )

        total_complexity = sum(function.complexity for function in functions)
        halstead = count_tokens(parsed.operators, parsed.operands)
        metrics = CodeMetrics(
            loc=loc,
            cyclomatic_complexity=total_complexity,
            functions=len(functions),
            comments=comments,
            longest_function_loc=longest,
            max_nesting_depth=max_nesting,
            halstead_operators=halstead.total_operators,
            halstead_operands=halstead.total_operands,
            halstead_unique_operators=halstead.unique_operators,
            halstead_unique_operands=halstead.unique_operands,
            cyclomatic_distribution=(distribution[0], distribution[1], distribution[2]),
        )
        detail = FileMetrics(
            file=path,
            total_complexity=total_complexity,
            functions=tuple(functions),
        )
        logger.debug(
            "%s: %d lines, %d functions, complexity %d",
            path,
            loc,
            len(functions),
            total_complexity,
        )
        return FileContribution(metrics=metrics, detail=detail, halstead=halstead)

    def _read_file(self, path: str) -> Optional[str]:
        try:
            with open(path, "r", encoding=self.encoding, newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Could not read %s: %s", path, exc)
            return None
