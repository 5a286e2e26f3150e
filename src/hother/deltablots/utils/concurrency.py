"""
Parsing many documents concurrently.
"""

from collections.abc import Iterable, Sequence
from typing import Any

import anyio

from hother.deltablots.core.group import BlotGroup
from hother.deltablots.core.parser import DeltaParser
from hother.deltablots.core.registry import ParserRegistry

from .logging import get_logger

logger = get_logger(__name__)


async def parse_many(
    documents: Sequence[Iterable[Any]],
    registry: ParserRegistry | None = None,
    max_workers: int = 4,
) -> list[list[BlotGroup]]:
    """
    Parse independent documents in worker threads.

    Parsing only reads the registry, so documents can be parsed in parallel
    without locking. Cancelling the surrounding scope cancels the batch.

    Args:
        documents: One operation sequence per document
        registry: Registered variants. Defaults to the built-in ones
        max_workers: Maximum number of documents parsed at once

    Returns:
        The groups of each document, in input order

    Example:
        ```python
        results = await parse_many([post.body for post in posts], max_workers=8)
        ```
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    parser = DeltaParser(registry)
    limiter = anyio.CapacityLimiter(max_workers)
    results: list[list[BlotGroup]] = [[] for _ in documents]

    async def _parse_one(index: int, operations: Iterable[Any]) -> None:
        results[index] = await anyio.to_thread.run_sync(parser.parse, operations, limiter=limiter)

    async with anyio.create_task_group() as tg:
        for index, operations in enumerate(documents):
            tg.start_soon(_parse_one, index, operations)

    logger.debug("Parsed documents", document_count=len(documents), max_workers=max_workers)
    return results
