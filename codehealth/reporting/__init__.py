"""
Report renderers.

- ``text``: human-readable summary with a top-offenders leaderboard
- ``json``: the full report for dashboards and CI annotators
"""

from codehealth.reporting.formatters import format_json, format_text

__all__ = [
    "format_json",
    "format_text",
]
