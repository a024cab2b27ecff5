"""
Tests for configuration loading and the source file walker.
"""

import json
import os
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from codehealth.core.config import DEFAULT_CONFIG, Config, find_config
from codehealth.core.engine import MetricsEngine
from codehealth.utils.files import iter_source_files


class TestConfig:
    """Tests for Config."""

    def test_defaults(self):
        config = Config.load(None)
        assert config.data == DEFAULT_CONFIG
        assert config.extensions() == {".rs"}
        assert config.report_format() == "text"
        assert config.top_functions() == 20
        assert config.leaderboard_size() == 5
        assert config.max_complexity() is None

    def test_yaml_overrides_are_merged(self, tmp_path):
        path = tmp_path / "codehealth.yaml"
        path.write_text("analysis:\n  exclude_dirs: [target]\n", encoding="utf-8")
        config = Config.load(str(path))
        assert config.exclude_dirs() == {"target"}
        assert config.extensions() == {".rs"}
        assert config.comment_marker() == "//"

    def test_json_config(self, tmp_path):
        path = tmp_path / "codehealth.json"
        path.write_text(json.dumps({"reporting": {"max_complexity": 12}}), encoding="utf-8")
        assert Config.load(str(path)).max_complexity() == 12

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.load(str(tmp_path / "missing.yaml"))

    @pytest.mark.parametrize(
        "overrides",
        [
            {"reporting": {"format": "xml"}},
            {"reporting": {"max_complexity": -3}},
            {"reporting": {"leaderboard_size": "five"}},
            {"analysis": {"top_functions": -1}},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            Config.load(None).with_overrides(overrides)

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "codehealth.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ValueError):
            Config.load(str(path))

    def test_find_config_searches_parents(self, tmp_path):
        (tmp_path / ".codehealth.yml").write_text("version: 1\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(str(nested)) == str((tmp_path / ".codehealth.yml").resolve())


class TestSourceFiles:
    """Tests for iter_source_files."""

    def test_walks_in_name_order(self, tmp_path):
        for name in ["b.rs", "a.rs", "notes.txt", "C.RS"]:
            (tmp_path / name).write_text("", encoding="utf-8")
        sub = tmp_path / "sub"
        sub.mkdir()
        (sub / "z.rs").write_text("", encoding="utf-8")
        found = [os.path.relpath(p, str(tmp_path)) for p in iter_source_files(str(tmp_path))]
        assert found == ["C.RS", "a.rs", "b.rs", os.path.join("sub", "z.rs")]

    def test_excluded_directories(self, tmp_path):
        target = tmp_path / "target"
        target.mkdir()
        (target / "gen.rs").write_text("", encoding="utf-8")
        (tmp_path / "main.rs").write_text("", encoding="utf-8")
        found = list(iter_source_files(str(tmp_path), exclude_dirs={"target"}))
        assert found == [os.path.join(str(tmp_path), "main.rs")]

    def test_single_file(self, tmp_path):
        path = tmp_path / "main.rs"
        path.write_text("", encoding="utf-8")
        assert list(iter_source_files(str(path))) == [str(path)]
        other = tmp_path / "main.py"
        other.write_text("", encoding="utf-8")
        assert list(iter_source_files(str(other))) == []

    def test_missing_path(self, tmp_path):
        assert list(iter_source_files(str(tmp_path / "nowhere"))) == []


class TestMetricsEngine:
    """Tests for the engine driving the walker and the fold."""

    def test_analyze_paths_with_external_path_source(self, tmp_path):
        first = tmp_path / "first.rs"
        first.write_text("fn a() {\n    if true {}\n}\n", encoding="utf-8")
        second = tmp_path / "second.rs"
        second.write_text("fn b() {\n    if true {}\n}\n", encoding="utf-8")
        report = MetricsEngine().analyze_paths([str(second), str(first)])
        assert report.metrics.functions == 2
        assert report.metrics.file_with_max_complexity == str(second)
        assert [f.function_name for f in report.top_functions] == ["b", "a"]

    def test_configured_top_functions(self, tmp_path):
        source = "".join(f"fn f{i}() {{}}\n" for i in range(5))
        (tmp_path / "lib.rs").write_text(source, encoding="utf-8")
        config = Config.load(None).with_overrides({"analysis": {"top_functions": 3}})
        report = MetricsEngine(config).analyze(str(tmp_path))
        assert report.metrics.functions == 5
        assert len(report.top_functions) == 3
