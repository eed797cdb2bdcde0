"""Bounded condition polling for cosmwasm-local-deploy."""

import logging
import time
from typing import Callable, Optional, TypeVar

from .exceptions import WaitTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def wait_until(
    condition: Callable[[], Optional[T]],
    timeout: float,
    interval: float,
    description: str,
) -> T:
    """
    Poll condition until it returns a truthy value.

    The condition is evaluated at least once, even with a zero timeout.

    Args:
        condition: Callable returning a truthy value when satisfied
        timeout: Maximum seconds to keep polling
        interval: Seconds to sleep between attempts
        description: What is being waited for (used in log and error messages)

    Returns:
        The first truthy value returned by condition

    Raises:
        WaitTimeoutError: If timeout expires first
    """
    deadline = time.monotonic() + timeout
    attempts = 0
    while True:
        attempts += 1
        value = condition()
        if value:
            return value
        if time.monotonic() >= deadline:
            raise WaitTimeoutError(
                f"Timed out after {timeout:g}s ({attempts} attempts) waiting for {description}"
            )
        logger.debug("Still waiting for %s", description)
        time.sleep(interval)
