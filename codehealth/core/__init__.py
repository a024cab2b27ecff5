"""
Core components: configuration, metric records and the metrics engine.
"""

from codehealth.core.config import Config, find_config
from codehealth.core.metrics import CodeMetrics, FileMetrics, FunctionMetric, Report
from codehealth.core.engine import MetricsEngine

__all__ = [
    "Config",
    "find_config",
    "CodeMetrics",
    "FileMetrics",
    "FunctionMetric",
    "Report",
    "MetricsEngine",
]
