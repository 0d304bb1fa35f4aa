"""Binary lifecycle management: validation, fetching, linking."""

from binkit.binaries.lifecycle import (
    BinaryLifecycle,
    OperationResult,
    StepOutcome,
)
from binkit.binaries.fetcher import CommandRunner, fetch_artifact
from binkit.binaries.linking import BinaryLinkManager
from binkit.binaries.validation import (
    HELP_TOKEN,
    is_help_token,
    is_valid_name,
    is_valid_version,
    validate,
)

__all__ = [
    "BinaryLifecycle",
    "OperationResult",
    "StepOutcome",
    "CommandRunner",
    "fetch_artifact",
    "BinaryLinkManager",
    "HELP_TOKEN",
    "is_help_token",
    "is_valid_name",
    "is_valid_version",
    "validate",
]
