"""
Unit tests for the validation gate.
"""

import pytest

from binkit.binaries.validation import (
    is_help_token,
    is_valid_name,
    is_valid_version,
    validate,
    validate_version,
)
from binkit.core.exceptions import InvalidNameError, InvalidVersionError


@pytest.mark.unit
@pytest.mark.parametrize("version", ["1.2.3", "0.0.0", "10.20.30", "01.2.3"])
def test_valid_versions(version):
    assert is_valid_version(version) is True


@pytest.mark.unit
@pytest.mark.parametrize(
    "version",
    ["v1.2.3", "1.2", "1.2.3-rc1", "1.2.3+build", "", "1.2.3.4", "a.b.c", "1.2.3\n", " 1.2.3"],
)
def test_invalid_versions(version):
    assert is_valid_version(version) is False


@pytest.mark.unit
def test_none_version_is_invalid():
    assert is_valid_version(None) is False
    with pytest.raises(InvalidVersionError) as exc_info:
        validate_version(None, "install")
    assert exc_info.value.version == ""


@pytest.mark.unit
def test_name_membership_is_exact(config):
    assert is_valid_name(config, "tool") is True
    assert is_valid_name(config, "Tool") is False
    assert is_valid_name(config, "too") is False
    assert is_valid_name(config, None) is False


@pytest.mark.unit
def test_help_token():
    assert is_help_token("help") is True
    assert is_help_token("HELP") is False
    assert is_help_token(None) is False


@pytest.mark.unit
def test_validate_checks_name_first(config):
    with pytest.raises(InvalidNameError) as exc_info:
        validate(config, "bogus", "not-a-version", "install")

    assert exc_info.value.name == "bogus"
    assert exc_info.value.command == "install"


@pytest.mark.unit
def test_validate_version_after_name(config):
    with pytest.raises(InvalidVersionError):
        validate(config, "tool", "v1.0.0", "link")


@pytest.mark.unit
def test_validate_ok(config):
    validate(config, "tool", "1.0.0")


@pytest.mark.unit
def test_diagnostic_messages():
    name_error = InvalidNameError("bogus", "download")
    assert name_error.diagnostic("binkit") == (
        "binkit: download: binary name 'bogus' is invalid. "
        "See 'binkit download help'."
    )

    version_error = InvalidVersionError("1.2", "unlink")
    assert version_error.diagnostic("binkit") == (
        "binkit: unlink: binary version '1.2' is invalid. See 'binkit unlink help'."
    )

    assert InvalidNameError("x").diagnostic("binkit") == (
        "binkit: binary name 'x' is invalid. See 'binkit help'."
    )
