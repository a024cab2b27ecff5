from __future__ import annotations

import json

from codehealth.core.metrics import Report


def format_text(report: Report, leaderboard_size: int = 5) -> str:
    metrics = report.metrics
    easy, moderate, high = metrics.cyclomatic_distribution
    lines = [
        "Code Metrics:",
        f"Lines of Code (LOC): {metrics.loc}",
        f"KLOC: {metrics.kloc:.2f}",
        f"Cyclomatic Complexity: {metrics.cyclomatic_complexity}",
        f"Average Cyclomatic Complexity per Function: {metrics.average_complexity:.2f}",
        (
            "Cyclomatic Complexity Distribution: "
            f"[Easy (<=5): {easy}, Moderate (6-10): {moderate}, High (>10): {high}]"
        ),
        f"Number of Functions: {metrics.functions}",
        f"Longest Function (LOC): {metrics.longest_function_loc}",
        f"Maximum Nesting Depth: {metrics.max_nesting_depth}",
        f"Comment Density: {metrics.comment_density:.2f}%",
        f"Maintainability Index: {report.maintainability_index:.2f} (0-100)",
        f"File with Maximum Complexity: {metrics.file_with_max_complexity}",
        f"Maximum Cyclomatic Complexity in a File: {metrics.max_file_complexity}",
        "",
        f"⚠️ Top {leaderboard_size} Most Complex Functions:",
    ]
    for rank, function in enumerate(report.top_functions[:leaderboard_size], start=1):
        lines.append(
            f"{rank}. {function.file}::{function.function_name} "
            f"→ complexity={function.complexity} LOC={function.loc}"
        )
    return "\n".join(lines) + "\n"


def format_json(report: Report) -> str:
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False) + "\n"
