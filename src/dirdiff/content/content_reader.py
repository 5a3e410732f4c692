"""Asynchronous text reading of leaf files.

Files are decoded as strict UTF-8 with newline translation disabled, so the text
returned is exactly what is stored on disk. Reads run in worker threads and may
overlap, but results are always returned in the order they were requested.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

from dirdiff.concurrency import gather_or_cancel
from dirdiff.content.flattener import LeafReference
from dirdiff.exceptions import DiffIOError
from dirdiff.types import PathType

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def read_text(path: PathType) -> str:
    """Read a whole file as text.

    Args:
        path: File to read.

    Returns:
        The file content.

    Raises:
        DiffIOError: If the file cannot be opened or read, or is not valid UTF-8.
    """
    try:
        with open(path, "r", encoding=ENCODING, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DiffIOError(path, e) from e


async def read_file(path: PathType) -> str:
    """Read a whole file as text without blocking the event loop.

    Raises:
        DiffIOError: If the file cannot be read or decoded.
    """
    return await asyncio.to_thread(read_text, path)


async def read_all(leaves: Sequence[LeafReference], max_concurrency: Optional[int] = None) -> List[str]:
    """Read the content of every leaf, concurrently.

    This is an ordered concurrent map: the i-th result is the content of the i-th leaf
    whatever order the reads complete in. A single failing read fails the whole call.

    Args:
        leaves: Files to read.
        max_concurrency: Maximum number of reads in flight. None means no limit.

    Returns:
        The contents, in the same order as ``leaves``.

    Raises:
        ValueError: If max_concurrency is not a positive integer.
        DiffIOError: If any file cannot be read or decoded.
    """
    if max_concurrency is not None and max_concurrency < 1:
        raise ValueError(f"max_concurrency must be a positive integer, got {max_concurrency}")

    logger.debug("Reading %d files", len(leaves))

    if max_concurrency is None:
        return await gather_or_cancel(*(read_file(leaf.file_path) for leaf in leaves))

    semaphore = asyncio.Semaphore(max_concurrency)

    async def read_limited(leaf: LeafReference) -> str:
        async with semaphore:
            return await read_file(leaf.file_path)

    return await gather_or_cancel(*(read_limited(leaf) for leaf in leaves))
