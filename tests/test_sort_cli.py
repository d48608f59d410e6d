"""Tests for the class-sort command-line entry point."""

import io
from pathlib import Path

import pytest
import yaml

from class_sort.sort_cli import main


@pytest.fixture
def order_file(tmp_path: Path) -> Path:
    """Write a small canonical class order to disk."""
    path = tmp_path / "order.txt"
    path.write_text("block\nflex\ntext-sm\nitalic\np-4\n")
    return path


def test_main_sorts_arguments(
    order_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that each positional class string is sorted and printed."""
    assert main(["--order-file", str(order_file), "p-4 flex block", "italic p-4"]) == 0
    assert capsys.readouterr().out == "block flex p-4\nitalic p-4\n"


def test_main_reads_stdin(
    order_file: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verify that class strings are read from stdin when none are given."""
    monkeypatch.setattr("sys.stdin", io.StringIO("flex block\np-4 p-4\n"))
    assert main(["--order-file", str(order_file)]) == 0
    assert capsys.readouterr().out == "block flex\np-4\n"


def test_main_flags(order_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the ignore and duplicate flags."""
    main(["--order-file", str(order_file), "--ignore-first", "p-4 flex block"])
    main(["--order-file", str(order_file), "--keep-duplicates", "p-4 flex p-4"])
    assert capsys.readouterr().out == "p-4 block flex\nflex p-4 p-4\n"


def test_main_multiline_from_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that config options and inline class order are honoured."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.dump(
            {
                "class_order": ["block", "flex", "p-4"],
                "options": {"multiline_classes": True, "multiline_min_class_count": 3},
            }
        )
    )
    main(["--config", str(config_file), "p-4 flex block"])
    assert capsys.readouterr().out == "block\nflex\np-4\n"


def test_main_missing_order_file(tmp_path: Path) -> None:
    """Verify that an unreadable order file exits with a message."""
    with pytest.raises(SystemExit, match="Cannot read class order file"):
        main(["--order-file", str(tmp_path / "missing.txt"), "a b"])


def test_main_invalid_config(tmp_path: Path) -> None:
    """Verify that a malformed config exits with a message."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("- not\n- a mapping\n")
    with pytest.raises(SystemExit, match="Invalid config"):
        main(["--config", str(config_file), "a b"])


def test_main_rejects_scalar_collapse_whitespace(tmp_path: Path) -> None:
    """Verify that a scalar collapse_whitespace setting exits with a message."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("sorting:\n  collapse_whitespace: 0\n")
    with pytest.raises(SystemExit, match="Invalid config"):
        main(["--config", str(config_file), "a b"])


def test_main_accepts_empty_sections(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that null 'options' and 'sorting' sections use the defaults."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("options:\nsorting:\nclass_order: [a, b]\n")
    assert main(["--config", str(config_file), "b a b"]) == 0
    assert capsys.readouterr().out == "a b\n"
