from __future__ import annotations

import logging
from functools import reduce
from typing import Iterable, Optional

from codehealth.analysis.aggregate import ProjectTotals, build_report, merge
from codehealth.analysis.file_analyzer import FileAnalyzer
from codehealth.core.config import Config
from codehealth.core.metrics import Report
from codehealth.utils.files import iter_source_files

logger = logging.getLogger(__name__)


class MetricsEngine:
    """Walks a source tree, analyzes each file in turn and builds the report."""

    def __init__(
        self,
        config: Optional[Config] = None,
        file_analyzer: Optional[FileAnalyzer] = None,
    ) -> None:
        self.config = config or Config.load(None)
        self.file_analyzer = file_analyzer or FileAnalyzer(
            encoding=self.config.encoding(),
            comment_marker=self.config.comment_marker(),
        )

    def analyze(self, path: str) -> Report:
        paths = iter_source_files(
            path,
            extensions=self.config.extensions(),
            exclude_dirs=self.config.exclude_dirs(),
        )
        return self.analyze_paths(paths)

    def analyze_paths(self, paths: Iterable[str]) -> Report:
        contributions = (self.file_analyzer.analyze(path) for path in paths)
        totals = reduce(merge, contributions, ProjectTotals())
        report = build_report(totals, limit=self.config.top_functions())
        logger.info(
            "Analyzed %d files, %d functions, total complexity %d",
            len(report.files),
            report.metrics.functions,
            report.metrics.cyclomatic_complexity,
        )
        return report
