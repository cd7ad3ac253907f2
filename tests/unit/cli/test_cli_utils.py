"""Unit tests for CLI utilities."""

import json

import pytest

from repolens.cli.utils import echo_error, echo_warning, load_analysis_input
from repolens.core.exceptions import InputFileNotFoundError, InvalidInputError


class TestLoadAnalysisInput:
    def test_from_json_file(self, snapshot_file):
        snapshot = load_analysis_input(str(snapshot_file))

        assert snapshot.tree is not None
        assert len(snapshot.dependencies) == 4
        assert snapshot.dependencies[3].weight == 3
        assert "src/lib/api.ts" in snapshot.contents

    def test_from_directory(self, tmp_path):
        repolens_dir = tmp_path / ".repolens"
        repolens_dir.mkdir()
        (repolens_dir / "analysis.json").write_text(json.dumps({"dependencies": []}))

        snapshot = load_analysis_input(str(tmp_path))
        assert snapshot.tree is None
        assert snapshot.dependencies == []

    def test_directory_without_snapshot(self, tmp_path):
        with pytest.raises(InputFileNotFoundError):
            load_analysis_input(str(tmp_path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputFileNotFoundError, match="Input file not found"):
            load_analysis_input(str(tmp_path / "missing.json"))

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "analysis.json"
        path.write_text("{not json")

        with pytest.raises(InvalidInputError, match="malformed JSON"):
            load_analysis_input(str(path))

    def test_validation_error(self, tmp_path):
        path = tmp_path / "analysis.json"
        path.write_text(json.dumps({"dependencies": [{"source": "a.ts"}]}))

        with pytest.raises(InvalidInputError) as exc_info:
            load_analysis_input(str(path))
        assert exc_info.value.path == str(path)

    def test_unknown_keys_are_ignored(self, tmp_path):
        path = tmp_path / "analysis.json"
        path.write_text(json.dumps({"contents": {"a.ts": "x"}, "generated_at": "2024-01-01"}))

        assert load_analysis_input(str(path)).contents == {"a.ts": "x"}


class TestEcho:
    def test_error_goes_to_stderr(self, capsys):
        echo_error("boom")
        captured = capsys.readouterr()

        assert "boom" in captured.err
        assert captured.out == ""

    def test_warning_goes_to_stdout(self, capsys):
        echo_warning("careful")
        assert "careful" in capsys.readouterr().out
