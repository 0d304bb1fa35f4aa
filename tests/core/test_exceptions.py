"""
Unit tests for the binkit exception hierarchy.
"""

import pytest

from binkit.core.exceptions import (
    DownloadCommandError,
    FetchError,
    InvalidNameError,
    ValidationError,
)


@pytest.mark.unit
class TestDownloadCommandError:
    def test_message(self):
        error = DownloadCommandError(["curl", "-fsSL", "x"], 22)
        assert str(error) == "Command failed with exit status 22: curl -fsSL x"
        assert isinstance(error, FetchError)

    def test_exit_status_passthrough(self):
        assert DownloadCommandError("false", 1).exit_status == 1

    def test_exit_status_for_signal(self):
        # subprocess reports death by SIGKILL as -9
        assert DownloadCommandError("sleep 60", -9).exit_status == 137


@pytest.mark.unit
class TestValidationDiagnostic:
    def test_with_command(self):
        error = InvalidNameError("bogus", "install")
        assert isinstance(error, ValidationError)
        assert error.diagnostic("binkit") == (
            "binkit: install: binary name 'bogus' is invalid. "
            "See 'binkit install help'."
        )

    def test_without_command(self):
        error = InvalidNameError("bogus")
        assert error.diagnostic("binkit") == (
            "binkit: binary name 'bogus' is invalid. See 'binkit help'."
        )
