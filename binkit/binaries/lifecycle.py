"""
Binary lifecycle operations.

A (name, version) pair has two independent, filesystem-derived facts:
whether its artifact exists and whether the name's link slot points at it.
The operations below move between those states. Each one validates its
arguments first, re-reads state under the per-binary lock, and only acts
when the state is not already what the operation would produce:

    download   fetch the artifact unless it exists
    link       point the link slot at the artifact unless it already does
    install    download, then link (each step checked on its own)
    remove     delete the artifact directory if the artifact exists
    unlink     delete the link slot if it points at this version
    uninstall  remove, then unlink (each step checked on its own)

Running any operation twice leaves the same end state; the second run only
reports that nothing needed doing.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..config.parser import BinKitConfig
from ..core.filesystem import safe_rmtree
from ..core.locking import LockManager, get_lock_dir
from ..core.state import artifact_exists, is_linked
from .fetcher import CommandRunner, fetch_artifact
from .linking import BinaryLinkManager
from .validation import validate

logger = logging.getLogger(__name__)

DEFAULT_PROG = "binkit"


class StepOutcome(Enum):
    """Result of a single lifecycle step."""

    DOWNLOADED = "downloaded"
    ALREADY_EXISTS = "already_exists"
    LINKED = "linked"
    ALREADY_LINKED = "already_linked"
    REMOVED = "removed"
    DOES_NOT_EXIST = "does_not_exist"
    UNLINKED = "unlinked"
    NOT_LINKED = "not_linked"

    @property
    def changed(self) -> bool:
        """Whether this step modified the filesystem."""
        return self in (
            StepOutcome.DOWNLOADED,
            StepOutcome.LINKED,
            StepOutcome.REMOVED,
            StepOutcome.UNLINKED,
        )


@dataclass
class OperationResult:
    """Result of a lifecycle operation."""

    operation: str
    name: str
    version: str
    outcomes: List[StepOutcome] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return any(outcome.changed for outcome in self.outcomes)


class BinaryLifecycle:
    """Runs validated, idempotent lifecycle operations for catalog binaries."""

    def __init__(
        self,
        config: BinKitConfig,
        runner: Optional[CommandRunner] = None,
        lock_manager: Optional[LockManager] = None,
        prog: str = DEFAULT_PROG,
    ):
        """
        Initialize lifecycle manager.

        Args:
            config: Loaded configuration
            runner: Command runner for download commands (default: subprocess)
            lock_manager: Lock manager (default: locks under parent_dir/.locks)
            prog: Program name used in messages
        """
        self.config = config
        self.paths = config.paths
        self.runner = runner or CommandRunner()
        self.lock_manager = lock_manager or LockManager(
            get_lock_dir(config.parent_dir)
        )
        self.links = BinaryLinkManager(self.paths)
        self.prog = prog

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def download(self, name: str, version: str) -> OperationResult:
        """Fetch a binary version unless it already exists."""
        return self._run("download", name, version, self._download_step)

    def link(self, name: str, version: str) -> OperationResult:
        """Point the name's link slot at this version unless it already does."""
        return self._run("link", name, version, self._link_step)

    def install(self, name: str, version: str) -> OperationResult:
        """Download, then link. The link check runs whatever the download did."""
        return self._run(
            "install", name, version, self._download_step, self._link_step
        )

    def remove(self, name: str, version: str) -> OperationResult:
        """Delete a binary version's directory. The link slot is not touched."""
        return self._run("remove", name, version, self._remove_step)

    def unlink(self, name: str, version: str) -> OperationResult:
        """Delete the link slot if it points at this version."""
        return self._run("unlink", name, version, self._unlink_step)

    def uninstall(self, name: str, version: str) -> OperationResult:
        """Remove, then unlink. The unlink check runs whatever the remove did."""
        return self._run(
            "uninstall", name, version, self._remove_step, self._unlink_step
        )

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _run(self, operation: str, name: str, version: str, *steps) -> OperationResult:
        """
        Validate, then run each step under the binary's lock.

        Raises:
            InvalidNameError: If name is not in the catalog
            InvalidVersionError: If version syntax is invalid
            LockTimeout: If another process holds the lock too long
        """
        validate(self.config, name, version, operation)

        result = OperationResult(operation=operation, name=name, version=version)

        with self.lock_manager.binary_lock(name, timeout=self.config.lock_timeout):
            for step in steps:
                result.outcomes.append(step(operation, name, version))

        logger.debug(
            f"{operation} {name} {version}: "
            f"{', '.join(o.value for o in result.outcomes)}"
        )
        return result

    def _report(self, operation: str, name: str, version: str, state: str) -> None:
        logger.info(
            f"{self.prog}: {operation}: binary '{name}' at version '{version}' {state}."
        )

    def _download_step(self, operation: str, name: str, version: str) -> StepOutcome:
        if artifact_exists(self.paths, name, version):
            self._report(operation, name, version, "already exists on your machine")
            return StepOutcome.ALREADY_EXISTS

        spec = self.config.binaries[name]
        fetch_artifact(spec, self.paths, version, self.runner)
        return StepOutcome.DOWNLOADED

    def _link_step(self, operation: str, name: str, version: str) -> StepOutcome:
        if is_linked(self.paths, name, version):
            self._report(operation, name, version, "is already linked")
            return StepOutcome.ALREADY_LINKED

        previous = self.links.resolve_link(name)
        if previous is not None:
            logger.debug(f"Replacing link target for {name}: {previous}")

        self.links.create_link(name, version)
        return StepOutcome.LINKED

    def _remove_step(self, operation: str, name: str, version: str) -> StepOutcome:
        if not artifact_exists(self.paths, name, version):
            self._report(operation, name, version, "does not exist on your machine")
            return StepOutcome.DOES_NOT_EXIST

        bin_dir = self.paths.artifact_dir(name, version)

        logger.info("# removing ...")
        logger.info(f"BIN_NAME    : {name}")
        logger.info(f"BIN_VERSION : {version}")
        logger.info(f"BIN_DIR     : {bin_dir}")

        safe_rmtree(bin_dir, require_prefix=self.config.parent_dir)
        return StepOutcome.REMOVED

    def _unlink_step(self, operation: str, name: str, version: str) -> StepOutcome:
        if not is_linked(self.paths, name, version):
            self._report(operation, name, version, "is not linked")
            return StepOutcome.NOT_LINKED

        self.links.remove_link(name, version)
        return StepOutcome.UNLINKED
