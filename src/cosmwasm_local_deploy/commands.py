"""External command execution for cosmwasm-local-deploy."""

import logging
import subprocess
from typing import Callable, List, Sequence

from .exceptions import CommandError, MissingToolError

logger = logging.getLogger(__name__)

# Signature shared by run_command and the fakes used in tests
Runner = Callable[..., "subprocess.CompletedProcess[str]"]


def run_command(args: Sequence[str], check: bool = True) -> "subprocess.CompletedProcess[str]":
    """
    Run an external command synchronously and capture its output.

    Args:
        args: Command and arguments
        check: Raise CommandError on a non-zero exit status

    Returns:
        Completed process with text stdout/stderr

    Raises:
        MissingToolError: If the executable does not exist
        CommandError: If check is True and the command fails
    """
    logger.debug("Running: %s", " ".join(args))
    try:
        result = subprocess.run(list(args), capture_output=True, text=True)
    except FileNotFoundError as e:
        raise MissingToolError(f"{args[0]} not found", hint=f"Install {args[0]} and retry") from e

    if check and result.returncode != 0:
        raise CommandError(args, result.returncode, result.stdout, result.stderr)
    return result


def docker_exec(container: str, *args: str) -> List[str]:
    """Build a `docker exec -i` command line targeting container."""
    return ["docker", "exec", "-i", container, *args]
