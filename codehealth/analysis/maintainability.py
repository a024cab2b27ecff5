"""
Maintainability Index.

    MI = 171 - 5.2 * log2(V) - 0.23 * CC - 16.2 * log2(LOC)

where ``V = n * log2(n)`` with ``n`` the Halstead vocabulary (distinct
operators plus distinct operands), ``CC`` the average cyclomatic complexity
per function and ``LOC`` the total line count. The result is clamped to
``[0, 100]``.
"""

from __future__ import annotations

import math

from codehealth.core.metrics import CodeMetrics


MI_MAX = 100.0
MI_MIN = 0.0


def halstead_volume(metrics: CodeMetrics) -> float:
    vocabulary = metrics.halstead_unique_operators + metrics.halstead_unique_operands
    if vocabulary <= 0:
        return 0.0
    return vocabulary * math.log2(vocabulary)


def calculate_maintainability_index(metrics: CodeMetrics) -> float:
    if metrics.functions == 0:
        return 0.0

    volume = halstead_volume(metrics)
    # log2 is undefined here; an empty vocabulary or an empty project scores 0.
    if volume <= 0 or metrics.loc <= 0:
        return 0.0

    avg_cyclomatic = metrics.cyclomatic_complexity / metrics.functions
    index = (
        171.0
        - 5.2 * math.log2(volume)
        - 0.23 * avg_cyclomatic
        - 16.2 * math.log2(metrics.loc)
    )
    return max(MI_MIN, min(MI_MAX, index))
