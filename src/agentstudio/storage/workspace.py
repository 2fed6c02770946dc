"""Scoped temporary workspaces for media assembly."""

import asyncio
import logging
import shutil
import tempfile
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

logger = logging.getLogger(__name__)

WORKSPACE_PREFIX = "agentic-"


def create_workspace(base_dir: Path | None = None) -> Path:
    """Create a uniquely named directory; never reused across runs."""
    if base_dir is not None:
        base_dir.mkdir(parents=True, exist_ok=True)
    return Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=base_dir))


def remove_workspace(path: Path) -> None:
    """Best-effort recursive delete. Never raises."""
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        return
    except OSError as e:
        logger.warning("Workspace %s could not be fully removed: %s", path, e)
        return
    logger.debug("Removed workspace %s", path)


@asynccontextmanager
async def scoped_workspace(base_dir: Path | None = None) -> AsyncIterator[Path]:
    """Yield a fresh workspace and delete it on every exit path.

    `base_dir` of None uses the system temp directory.
    """
    path = await asyncio.to_thread(create_workspace, base_dir)
    logger.debug("Created workspace %s", path)
    try:
        yield path
    finally:
        await asyncio.to_thread(remove_workspace, path)
