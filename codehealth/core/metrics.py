"""
Metric records produced by the analyzers.

Every record is immutable. ``to_dict`` yields the JSON shape of the report,
with keys in the order downstream tooling expects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class FunctionMetric:
    """Complexity and statement count of one top-level function."""

    file: str
    function_name: str
    complexity: int = 1
    loc: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.file,
            "function": self.function_name,
            "complexity": self.complexity,
            "loc": self.loc,
        }


@dataclass(frozen=True)
class FileMetrics:
    """Per-file detail: every function found and their summed complexity."""

    file: str
    total_complexity: int = 0
    functions: Tuple[FunctionMetric, ...] = ()

    @classmethod
    def empty(cls, path: str) -> "FileMetrics":
        return cls(file=path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.file,
            "total_complexity": self.total_complexity,
            "functions": [function.to_dict() for function in self.functions],
        }


@dataclass(frozen=True)
class CodeMetrics:
    """
    Counters and extremal trackers for a file or a whole project.

    ``cyclomatic_distribution`` buckets functions by complexity:
    ``[<=5, 6-10, >10]``. Its sum always equals ``functions``.
    """

    loc: int = 0
    cyclomatic_complexity: int = 0
    functions: int = 0
    comments: int = 0
    longest_function_loc: int = 0
    max_nesting_depth: int = 0
    file_with_max_complexity: str = ""
    max_file_complexity: int = 0
    halstead_operators: int = 0
    halstead_operands: int = 0
    halstead_unique_operators: int = 0
    halstead_unique_operands: int = 0
    cyclomatic_distribution: Tuple[int, int, int] = field(default=(0, 0, 0))

    @property
    def kloc(self) -> float:
        return self.loc / 1000.0

    @property
    def average_complexity(self) -> float:
        return self.cyclomatic_complexity / max(self.functions, 1)

    @property
    def comment_density(self) -> float:
        """Comment lines as a percentage of all lines."""
        return self.comments / max(self.loc, 1) * 100.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "loc": self.loc,
            "kloc": self.kloc,
            "cyclomatic_complexity": self.cyclomatic_complexity,
            "functions": self.functions,
            "comments": self.comments,
            "longest_function_loc": self.longest_function_loc,
            "max_nesting_depth": self.max_nesting_depth,
            "file_with_max_complexity": self.file_with_max_complexity,
            "max_file_complexity": self.max_file_complexity,
            "halstead_operators": self.halstead_operators,
            "halstead_operands": self.halstead_operands,
            "halstead_unique_operators": self.halstead_unique_operators,
            "halstead_unique_operands": self.halstead_unique_operands,
            "cyclomatic_distribution": list(self.cyclomatic_distribution),
        }


@dataclass(frozen=True)
class Report:
    metrics: CodeMetrics
    maintainability_index: float
    files: Tuple[FileMetrics, ...] = ()
    top_functions: Tuple[FunctionMetric, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metrics": self.metrics.to_dict(),
            "maintainability_index": self.maintainability_index,
            "files": [detail.to_dict() for detail in self.files],
            "top_functions": [function.to_dict() for function in self.top_functions],
        }
