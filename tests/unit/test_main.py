"""Tests for the command line entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

import main


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def _write_settings(path: Path, delimiter_type: str, value: str) -> Path:
    path.write_text(
        "splitter:\n"
        "  type: delimiter\n"
        "  delimiter:\n"
        f"    type: {delimiter_type}\n"
        f"    value: \"{value}\"\n"
        "observability:\n"
        "  log_level: WARNING\n",
        encoding="utf-8",
    )
    return path


def test_main_with_command_line_delimiter(capsys: pytest.CaptureFixture[str]) -> None:
    assert main.main(["a b c d ", "--delimiter", " "]) == 0

    assert capsys.readouterr().out.strip() == "['a', 'b', 'c', 'd', '']"


def test_main_until(capsys: pytest.CaptureFixture[str]) -> None:
    assert main.main(["abcde", "-d", "c", "--until"]) == 0

    assert capsys.readouterr().out.strip() == "ab"


def test_main_reads_delimiter_from_settings(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = _write_settings(tmp_path / "settings.yaml", "charset", ";,")

    assert main.main(["a;b,c", "--config", str(config)]) == 0

    assert capsys.readouterr().out.strip() == "['a', 'b', 'c']"


def test_main_until_with_settings(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = _write_settings(tmp_path / "settings.yaml", "str", "::")

    assert main.main(["key::value::rest", "-c", str(config), "-u"]) == 0

    assert capsys.readouterr().out.strip() == "key"


def test_main_default_text_uses_bundled_settings(capsys: pytest.CaptureFixture[str]) -> None:
    assert main.main([]) == 0

    assert capsys.readouterr().out.strip() == "['a', 'b', 'c', 'd', 'e']"


def test_main_missing_settings_returns_error(tmp_path: Path) -> None:
    assert main.main(["a b", "--config", str(tmp_path / "missing.yaml")]) == 1


def test_main_unknown_delimiter_type_returns_error(tmp_path: Path) -> None:
    config = _write_settings(tmp_path / "settings.yaml", "regex", ".*")

    assert main.main(["a b", "--config", str(config)]) == 1


@pytest.mark.parametrize("delimiter_type", ["char", "str", "charset"])
def test_main_numeric_delimiter_value_returns_error(tmp_path: Path, delimiter_type: str) -> None:
    config = tmp_path / "settings.yaml"
    config.write_text(
        "splitter:\n"
        "  type: delimiter\n"
        "  delimiter:\n"
        f"    type: {delimiter_type}\n"
        "    value: 1\n"
        "observability:\n"
        "  log_level: WARNING\n",
        encoding="utf-8",
    )

    assert main.main(["a1b", "--config", str(config)]) == 1
    assert main.main(["a1b", "--config", str(config), "--until"]) == 1
