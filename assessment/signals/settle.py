"""Fan-out helper: run a provider, fall back to its default on failure."""

from collections.abc import Awaitable
from typing import TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


async def settle(awaitable: Awaitable[T], default: T, *, name: str) -> T:
    """
    Await a provider call, returning ``default`` if it raises.

    Providers already degrade on the failures they expect; this catches
    everything else so one signal can never abort the assessment.
    """
    try:
        return await awaitable
    except Exception as e:
        logger.warning("signal_failed", signal=name, error=str(e), error_type=type(e).__name__)
        return default
