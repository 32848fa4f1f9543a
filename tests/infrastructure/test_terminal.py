import subprocess
from unittest.mock import MagicMock, patch

import pytest

from typestats.domain.errors import TerminalWidthError
from typestats.infrastructure.adapters.terminal import FixedWidthProvider, TputWidthProvider


@patch("typestats.infrastructure.adapters.terminal.subprocess.run")
def test_tput_width(mock_run):
    mock_run.return_value = MagicMock(stdout="157\n")

    assert TputWidthProvider().get_width() == 157
    mock_run.assert_called_once_with(
        ["tput", "cols"], capture_output=True, text=True, check=True
    )


@patch("typestats.infrastructure.adapters.terminal.subprocess.run")
def test_tput_missing_binary(mock_run):
    mock_run.side_effect = FileNotFoundError("tput")

    with pytest.raises(TerminalWidthError, match="Could not query"):
        TputWidthProvider().get_width()


@patch("typestats.infrastructure.adapters.terminal.subprocess.run")
def test_tput_failure(mock_run):
    mock_run.side_effect = subprocess.CalledProcessError(1, ["tput", "cols"])

    with pytest.raises(TerminalWidthError):
        TputWidthProvider().get_width()


@patch("typestats.infrastructure.adapters.terminal.subprocess.run")
def test_tput_garbage_output(mock_run):
    mock_run.return_value = MagicMock(stdout="unknown terminal")

    with pytest.raises(TerminalWidthError, match="Unexpected"):
        TputWidthProvider().get_width()


def test_fixed_width():
    assert FixedWidthProvider(140).get_width() == 140
