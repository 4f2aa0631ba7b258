"""Tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from classfinder.cli import USAGE, main
from classfinder.config import CONFIG_ENV_VAR


class TestCLIUsage:
    @pytest.mark.parametrize("argv", [[], ["classes.txt"], ["a", "b", "c"]])
    def test_wrong_argument_count_prints_usage(
        self, argv: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(argv) == 0
        assert capsys.readouterr().out == USAGE + "\n"


class TestCLISearch:
    def test_prints_sorted_matches(
        self, names_file: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([names_file, "FB"]) == 0
        assert capsys.readouterr().out.splitlines() == ["c.d.FooBar", "a.b.FooBarBaz"]

    def test_no_matches_prints_nothing(
        self, names_file: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([names_file, "Xyz"]) == 0
        assert capsys.readouterr().out == ""


class TestCLIErrors:
    @pytest.mark.parametrize("pattern", ["", " "])
    def test_invalid_pattern(
        self, names_file: str, pattern: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([names_file, pattern]) == 0
        assert capsys.readouterr().out == f"Error: Pattern format: '<pattern>' \"{pattern}\"\n"

    def test_missing_names_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(tmp_path / "classes.txt"), "FooBar"]) == 0
        assert capsys.readouterr().out.startswith("Error: Cannot read names from ")

    def test_empty_path_and_pattern(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["", ""]) == 0
        assert capsys.readouterr().out.startswith("Error: ")

    def test_bad_config_reported(
        self,
        names_file: str,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))
        assert main([names_file, "FB"]) == 0
        assert capsys.readouterr().out.startswith("Error: Configuration file not found")

    def test_unknown_encoding_in_config_reported(
        self,
        names_file: str,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "classfinder.yaml"
        path.write_text("input:\n  encoding: nope\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert main([names_file, "FB"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Error: Invalid configuration")
        assert "unknown encoding: nope" in out

    def test_unreadable_config_reported(
        self,
        names_file: str,
        config_yaml: str,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def deny(*args: object, **kwargs: object) -> None:
            raise PermissionError("permission denied")

        monkeypatch.setenv(CONFIG_ENV_VAR, config_yaml)
        monkeypatch.setattr("classfinder.config.open", deny, raising=False)
        assert main([names_file, "FB"]) == 0
        assert capsys.readouterr().out.startswith(f"Error: Cannot read {config_yaml}")
