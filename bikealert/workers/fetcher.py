"""
Concurrent Listings Fetch
=========================

Fans out the bikes and hubs requests as two asyncio tasks and waits for
both.

Deadlines
---------
* Each branch runs under its own ``asyncio.wait_for`` deadline.  When it
  fires, the branch is **cancelled**: ``CancelledError`` is delivered into
  the in-flight httpx request, which closes the connection instead of
  leaving it running in the background.
* If either branch fails for any reason, the sibling is cancelled and
  awaited before the error propagates.  There are no partial results.

The branches share nothing; each task owns its own result.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, TypeVar

from bikealert.domain.enums import ResourceKind
from bikealert.domain.errors import FetchTimeoutError
from bikealert.infrastructure.jump_client import JumpClient
from bikealert.infrastructure.schemas import Bike, Hub

logger = logging.getLogger(__name__)

DEFAULT_DEADLINE_SECONDS = 5.0

T = TypeVar("T")


@dataclass(frozen=True)
class Listings:
    bikes: list[Bike]
    hubs: list[Hub]


# ── Public API ────────────────────────────────────────────────────────


async def fetch_listings(
    client: JumpClient, deadline: float = DEFAULT_DEADLINE_SECONDS
) -> Listings:
    """Fetch bikes and hubs concurrently, each bounded by *deadline* seconds."""
    bikes_task = asyncio.create_task(
        _bounded(ResourceKind.BIKES, client.bikes(), deadline),
        name="fetch-bikes",
    )
    hubs_task = asyncio.create_task(
        _bounded(ResourceKind.HUBS, client.hubs(), deadline),
        name="fetch-hubs",
    )

    try:
        await asyncio.wait(
            {bikes_task, hubs_task}, return_when=asyncio.FIRST_EXCEPTION
        )
        for task in (bikes_task, hubs_task):
            if task.done() and task.exception() is not None:
                raise task.exception()
    except BaseException:
        await _cancel_all(bikes_task, hubs_task)
        raise

    return Listings(bikes=bikes_task.result(), hubs=hubs_task.result())


# ── Internals ─────────────────────────────────────────────────────────


async def _bounded(kind: ResourceKind, work: Awaitable[T], deadline: float) -> T:
    try:
        return await asyncio.wait_for(work, timeout=deadline)
    except asyncio.TimeoutError as exc:
        logger.warning("Gave up on %s after %gs", kind.value, deadline)
        raise FetchTimeoutError(
            f"fetch.{kind.value}",
            f"timed out waiting for {kind.value} response",
        ) from exc


async def _cancel_all(*tasks: asyncio.Task) -> None:
    pending = [t for t in tasks if not t.done()]
    for task in pending:
        task.cancel()
        logger.debug("Cancelled %s", task.get_name())
    # Let cancellations unwind; their results are discarded
    await asyncio.gather(*tasks, return_exceptions=True)
