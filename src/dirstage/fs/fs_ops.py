"""Commit and rollback primitives for staged artifacts.

``move_into_place`` commits a staged path to its destination with a single
rename. ``discard`` removes a staged path after a failed attempt and never
raises.
"""

import os
import shutil
from pathlib import Path

import structlog

from dirstage.fs.paths import ensure_dir
from dirstage.utils.debug import debug

logger = structlog.get_logger(__name__)


def move_into_place(src: Path, dst: Path) -> None:
    """Rename ``src`` to ``dst``, creating the destination parent first.

    Identical paths are a no-op. This happens when the temporary root equals
    the destination root and the temporary suffix is empty.

    Args:
        src: Staged path
        dst: Final destination path

    Raises:
        OSError: If the parent directory cannot be created or the rename
            fails (cross-device, permission, incompatible destination type)
    """
    if src == dst:
        debug(f"Identity move skipped: {src}")
        return

    ensure_dir(dst.parent)
    os.rename(src, dst)
    debug(f"Renamed: {src} -> {dst}")


def discard(path: Path, *, is_dir: bool) -> None:
    """Remove a staged artifact, swallowing any error.

    Args:
        path: Staged file or directory
        is_dir: Remove recursively when True, as a single file otherwise
    """
    try:
        if is_dir:
            shutil.rmtree(path)
        else:
            os.remove(path)
        debug(f"Discarded staged artifact: {path}")
    except FileNotFoundError:
        debug(f"Nothing to discard at: {path}")
    except OSError as e:
        logger.warning(
            "stage.cleanup_failed",
            path=str(path),
            is_dir=is_dir,
            error=str(e),
        )
