"""
Tests for the command-line entry point.
"""

import logging
from pathlib import Path

import pytest

from lnxconfig.__main__ import main
from lnxconfig.logging import ROOT_LOGGER


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root_logger = logging.getLogger(ROOT_LOGGER)
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()


def test_check_valid_config(example_config_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert main([str(example_config_path), "--no-color"]) == 0

    out = capsys.readouterr().out
    assert "Routing mode: rip" in out
    assert "if0: 10.0.0.2/24 (udp 127.0.0.1:5001)" in out
    assert "RIP advertise to: 10.0.0.1, 10.1.0.2" in out
    assert "Configuration is valid!" in out


def test_check_prints_warnings(write_config, capsys: pytest.CaptureFixture) -> None:
    path = write_config("neighbor 10.0.0.2 at 127.0.0.1:5001 via if0\n")

    assert main([str(path), "-q"]) == 0

    out = capsys.readouterr().out
    assert "Configuration warnings (1):" in out


def test_check_invalid_config(write_config, capsys: pytest.CaptureFixture) -> None:
    path = write_config("routing static\nroute 10.0.0.0/24 via\n")

    assert main([str(path)]) == 1

    err = capsys.readouterr().err
    assert "Invalid line: route 10.0.0.0/24 via" in err
    assert "Bad format" in err


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert main([str(tmp_path / "nope.lnx")]) == 1
    assert "Error reading file" in capsys.readouterr().err


def test_log_file(example_config_path: Path, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "lnxconfig.log"

    assert main([str(example_config_path), "-d", "--log-file", str(log_file)]) == 0

    logging.getLogger(ROOT_LOGGER).handlers[-1].flush()
    assert "Loaded" in log_file.read_text()


def test_unusual_suffix_is_reported(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    path = tmp_path / "node.conf"
    path.write_text("routing static\n", encoding="utf-8")

    assert main([str(path), "--no-color"]) == 0

    assert "does not have the usual .lnx suffix" in capsys.readouterr().err


def test_lnx_suffix_is_not_reported(write_config, capsys: pytest.CaptureFixture) -> None:
    path = write_config("routing static\n")

    assert main([str(path)]) == 0

    assert "suffix" not in capsys.readouterr().err
