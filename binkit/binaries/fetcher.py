"""
Artifact fetching for binkit.

The catalog describes how to obtain a binary as an ordered list of opaque
commands. This module runs those commands inside the artifact directory
through a single narrow capability (``CommandRunner.run``: run a command,
report its exit status) and leaves exactly one executable behind.

Each command is either a list of argv tokens or a string. Strings are split
with ``shlex`` unless the catalog entry opts into ``shell: true``, which is
needed for pipelines such as ``curl ... | tar xz``.

Entries with ``script: true`` (the default for legacy data.json catalogs)
are instead joined with ``"; "`` and run as one bash script under
``set -eo pipefail``, so variables and ``cd`` carry from one command to the
next. Script text is passed to bash verbatim; it reads ``$BIN_NAME``,
``$BIN_VERSION`` and ``$BIN_DIR`` from the environment.
"""

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..config.parser import BinarySpec
from ..core.exceptions import DownloadCommandError
from ..core.filesystem import clear_directory, ensure_directory, make_executable
from ..core.paths import BinaryPaths

logger = logging.getLogger(__name__)

Command = Union[str, List[str]]

PLACEHOLDERS = ("name", "version", "dir")

SCRIPT_SHELL = "bash"
SCRIPT_PRELUDE = "set -eo pipefail"


class CommandRunner:
    """Runs a single catalog command and reports its exit status."""

    def run(
        self,
        command: Command,
        cwd: Path,
        env: Optional[Dict[str, str]] = None,
        shell: bool = False,
    ) -> int:
        """
        Run a command to completion.

        Output is not captured; it goes straight to the terminal. There is
        no timeout.

        Args:
            command: Argv list, or a string when shell is True
            cwd: Working directory
            env: Full environment for the child process
            shell: Pass a string command to the system shell

        Returns:
            Exit status of the command
        """
        logger.debug(f"Running: {command} (cwd={cwd})")
        result = subprocess.run(command, cwd=str(cwd), env=env, shell=shell)
        return result.returncode


def substitute(token: str, values: Dict[str, str]) -> str:
    """
    Replace {name}, {version} and {dir} placeholders in a token.

    Other braces are left alone so shell syntax like ${VAR} survives.

    Example:
        >>> substitute("tool-{version}.tar.gz", {"version": "1.0.0"})
        'tool-1.0.0.tar.gz'
    """
    for key, value in values.items():
        token = token.replace("{" + key + "}", value)
    return token


def render_command(command: Command, values: Dict[str, str], shell: bool) -> Command:
    """
    Prepare a catalog command for execution.

    Args:
        command: Command as written in the catalog
        values: Placeholder values
        shell: Whether the command will run through the shell

    Returns:
        A string for shell execution, otherwise an argv list
    """
    if isinstance(command, list):
        argv = [substitute(token, values) for token in command]
        return shlex.join(argv) if shell else argv

    rendered = substitute(command, values)
    return rendered if shell else shlex.split(rendered)


def command_environment(values: Dict[str, str]) -> Dict[str, str]:
    """Build the child environment with BIN_NAME, BIN_VERSION and BIN_DIR."""
    env = dict(os.environ)
    env.update(
        {
            "BIN_NAME": values["name"],
            "BIN_VERSION": values["version"],
            "BIN_DIR": values["dir"],
        }
    )
    return env


def run_commands(
    commands: List[Command],
    values: Dict[str, str],
    cwd: Path,
    runner: CommandRunner,
    shell: bool = False,
) -> None:
    """
    Run commands in order, stopping at the first failure.

    Raises:
        DownloadCommandError: If a command exits with non-zero status
    """
    env = command_environment(values)

    for command in commands:
        rendered = render_command(command, values, shell)
        returncode = runner.run(rendered, cwd=cwd, env=env, shell=shell)
        if returncode != 0:
            logger.debug(f"Command exited with {returncode}: {rendered}")
            raise DownloadCommandError(rendered, returncode)


def render_script(commands: List[Command]) -> List[str]:
    """
    Join commands into a single bash invocation.

    Example:
        >>> render_script(["cd src", "make"])
        ['bash', '-c', 'set -eo pipefail; cd src; make']
    """
    parts = [c if isinstance(c, str) else shlex.join(c) for c in commands]
    return [SCRIPT_SHELL, "-c", "; ".join([SCRIPT_PRELUDE] + parts)]


def run_script(
    commands: List[Command],
    values: Dict[str, str],
    cwd: Path,
    runner: CommandRunner,
) -> None:
    """
    Run all commands as one bash script.

    Raises:
        DownloadCommandError: If the script exits with non-zero status
    """
    if not commands:
        return

    argv = render_script(commands)
    returncode = runner.run(argv, cwd=cwd, env=command_environment(values))
    if returncode != 0:
        raise DownloadCommandError(argv[-1], returncode)


def fetch_artifact(
    spec: BinarySpec,
    paths: BinaryPaths,
    version: str,
    runner: Optional[CommandRunner] = None,
) -> Path:
    """
    Download one version of a binary into its artifact directory.

    Steps:
    1. Create the artifact directory (with parents) and clear its contents
    2. Run the catalog download commands inside it
    3. Mark the artifact executable
    4. Delete everything else in the directory

    Checksum commands are reserved in the catalog and not run.

    Args:
        spec: Catalog entry
        paths: Path resolver
        version: Validated version
        runner: Command runner (default: subprocess-based)

    Returns:
        Path to the installed artifact

    Raises:
        DownloadCommandError: If a download command fails
        OSError: If the artifact was not produced or the filesystem fails
    """
    runner = runner or CommandRunner()
    name = spec.name
    bin_dir = paths.artifact_dir(name, version)
    artifact = paths.artifact_file(name, version)

    logger.info("# downloading ...")
    logger.info(f"BIN_NAME    : {name}")
    logger.info(f"BIN_VERSION : {version}")
    logger.info(f"BIN_DIR     : {bin_dir}")

    ensure_directory(bin_dir)
    clear_directory(bin_dir)

    values = {"name": name, "version": version, "dir": str(bin_dir)}
    if spec.script:
        run_script(spec.download_commands, values, bin_dir, runner)
    else:
        run_commands(spec.download_commands, values, bin_dir, runner, shell=spec.shell)

    make_executable(artifact)
    clear_directory(bin_dir, keep=name)

    logger.debug(f"Fetched {artifact}")
    return artifact
