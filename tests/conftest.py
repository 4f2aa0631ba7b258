"""Shared test fixtures for the classfinder test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from classfinder.config import CONFIG_ENV_VAR

CLASS_NAMES = [
    "a.b.FooBarBaz",
    "c.d.FooBar",
    "codeborne.WishMaker",
    "codeborne.MindReader",
    "TelephoneOperator",
    "ScubaArgentineOperator",
    "YoureLeavingUsHere",
    "YouveComeToTheRightPlace",
    "CodeborneAssistant",
    "java.util.HashMap",
    "java.util.concurrent.ConcurrentHashMap",
    "java.util.List",
    "a.ListB",
    "jdk.ListAdapter",
]


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's CLASSFINDER_CONFIG out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def class_names() -> list[str]:
    return list(CLASS_NAMES)


@pytest.fixture
def names_file(tmp_path: Path) -> str:
    """Write the sample class names, one per line, and return the path."""
    path = tmp_path / "classes.txt"
    path.write_text("\n".join(CLASS_NAMES) + "\n")
    return str(path)


@pytest.fixture
def config_yaml(tmp_path: Path) -> str:
    content = """
input:
  encoding: utf-8
search:
  workers: 4
  min_parallel: 2
logging:
  level: DEBUG
"""
    path = tmp_path / "classfinder.yaml"
    path.write_text(content)
    return str(path)
