"""
Folds per-file contributions into project totals.

``merge`` is pure: it returns new totals and never touches its inputs, so a
run is just ``functools.reduce(merge, contributions, ProjectTotals())``
followed by ``build_report``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import FrozenSet, Iterable, Tuple

from codehealth.analysis.file_analyzer import FileContribution
from codehealth.analysis.maintainability import calculate_maintainability_index
from codehealth.core.metrics import CodeMetrics, FileMetrics, FunctionMetric, Report


TOP_FUNCTIONS_LIMIT = 20


@dataclass(frozen=True)
class ProjectTotals:
    metrics: CodeMetrics = CodeMetrics()
    operators: FrozenSet[str] = frozenset()
    operands: FrozenSet[str] = frozenset()
    files: Tuple[FileMetrics, ...] = ()
    functions: Tuple[FunctionMetric, ...] = ()


def merge_metrics(total: CodeMetrics, part: CodeMetrics, file: str) -> CodeMetrics:
    """
    Combine project metrics with one file's metrics.

    Counters add up, extremal trackers keep the maximum. The file with the
    highest complexity only changes when ``part`` is strictly greater, so on
    a tie the earlier file wins.
    """
    merged = replace(
        total,
        loc=total.loc + part.loc,
        cyclomatic_complexity=total.cyclomatic_complexity + part.cyclomatic_complexity,
        functions=total.functions + part.functions,
        comments=total.comments + part.comments,
        halstead_operators=total.halstead_operators + part.halstead_operators,
        halstead_operands=total.halstead_operands + part.halstead_operands,
        longest_function_loc=max(total.longest_function_loc, part.longest_function_loc),
        max_nesting_depth=max(total.max_nesting_depth, part.max_nesting_depth),
        cyclomatic_distribution=tuple(
            a + b for a, b in zip(total.cyclomatic_distribution, part.cyclomatic_distribution)
        ),
    )
    if part.cyclomatic_complexity > total.max_file_complexity:
        merged = replace(
            merged,
            max_file_complexity=part.cyclomatic_complexity,
            file_with_max_complexity=file,
        )
    return merged


def merge(totals: ProjectTotals, contribution: FileContribution) -> ProjectTotals:
    operators = totals.operators | contribution.halstead.operators
    operands = totals.operands | contribution.halstead.operands
    metrics = merge_metrics(totals.metrics, contribution.metrics, contribution.detail.file)
    return ProjectTotals(
        metrics=replace(
            metrics,
            halstead_unique_operators=len(operators),
            halstead_unique_operands=len(operands),
        ),
        operators=operators,
        operands=operands,
        files=totals.files + (contribution.detail,),
        functions=totals.functions + contribution.detail.functions,
    )


def top_functions(
    functions: Iterable[FunctionMetric], limit: int = TOP_FUNCTIONS_LIMIT
) -> Tuple[FunctionMetric, ...]:
    ranked = sorted(functions, key=lambda function: function.complexity, reverse=True)
    return tuple(ranked[:limit])


def build_report(totals: ProjectTotals, limit: int = TOP_FUNCTIONS_LIMIT) -> Report:
    return Report(
        metrics=totals.metrics,
        maintainability_index=calculate_maintainability_index(totals.metrics),
        files=totals.files,
        top_functions=top_functions(totals.functions, limit),
    )
