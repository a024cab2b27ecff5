"""
CodeHealth

Static code-health metrics for Rust codebases: cyclomatic complexity,
nesting depth, comment density, maintainability index and the most complex
functions and files. Intended for CI gates and developer diagnostics.
"""

__version__ = "2.0.0"
__author__ = "CodeHealth Team"

from codehealth.core.config import Config
from codehealth.core.engine import MetricsEngine
from codehealth.core.metrics import CodeMetrics, FileMetrics, FunctionMetric, Report

__all__ = [
    "Config",
    "MetricsEngine",
    "CodeMetrics",
    "FileMetrics",
    "FunctionMetric",
    "Report",
]
