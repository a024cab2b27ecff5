"""
Metric computations: complexity, Halstead counts, per-file analysis,
project aggregation and the maintainability index.
"""

from codehealth.analysis.complexity import ComplexityResult, analyze_complexity, complexity_bucket
from codehealth.analysis.file_analyzer import FileAnalyzer, FileContribution
from codehealth.analysis.aggregate import ProjectTotals, build_report, merge, top_functions
from codehealth.analysis.maintainability import calculate_maintainability_index

__all__ = [
    "ComplexityResult",
    "analyze_complexity",
    "complexity_bucket",
    "FileAnalyzer",
    "FileContribution",
    "ProjectTotals",
    "build_report",
    "merge",
    "top_functions",
    "calculate_maintainability_index",
]
