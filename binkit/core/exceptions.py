"""
Centralized exception hierarchy for binkit.

Validation and configuration errors abort an invocation; "already in that
state" results are not exceptions at all (see ``binkit.binaries.lifecycle``).
Plain ``OSError`` from filesystem work is never wrapped.
"""

from typing import List, Optional, Union


# ============================================================================
# Base Exceptions
# ============================================================================


class BinKitError(Exception):
    """Base exception for all binkit errors."""

    pass


# ============================================================================
# Validation Exceptions
# ============================================================================


class ValidationError(BinKitError):
    """Base exception for rejected command arguments."""

    def __init__(self, message: str, command: Optional[str] = None):
        self.command = command
        super().__init__(message)

    def help_hint(self, prog: str) -> str:
        """Return the help command the user should consult."""
        if self.command:
            return f"{prog} {self.command} help"
        return f"{prog} help"

    def diagnostic(self, prog: str) -> str:
        """Format the one-line diagnostic printed by the CLI."""
        prefix = f"{prog}: {self.command}: " if self.command else f"{prog}: "
        return f"{prefix}{self}. See '{self.help_hint(prog)}'."


class InvalidNameError(ValidationError):
    """Raised when a binary name is not part of the catalog."""

    def __init__(self, name: str, command: Optional[str] = None):
        self.name = name
        super().__init__(f"binary name '{name}' is invalid", command)


class InvalidVersionError(ValidationError):
    """Raised when a version is not strict MAJOR.MINOR.PATCH."""

    def __init__(self, version: str, command: Optional[str] = None):
        self.version = version
        super().__init__(f"binary version '{version}' is invalid", command)


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(BinKitError):
    """Catalog parsing or validation error."""

    pass


class CatalogMissingConfigError(ConfigError):
    """Raised when the catalog lacks a required directory setting."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"'{key}' must not be 'null'")


# ============================================================================
# Fetch Exceptions
# ============================================================================


class FetchError(BinKitError):
    """Base exception for artifact fetch errors."""

    pass


class DownloadCommandError(FetchError):
    """Raised when a catalog download command exits with non-zero status."""

    def __init__(self, command: Union[str, List[str]], returncode: int):
        self.command = command
        self.returncode = returncode
        shown = command if isinstance(command, str) else " ".join(command)
        super().__init__(f"Command failed with exit status {returncode}: {shown}")

    @property
    def exit_status(self) -> int:
        """Process exit status to report; death by signal N maps to 128 + N."""
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode
