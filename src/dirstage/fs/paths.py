"""Path utilities for staging operations.

This module provides the lexical path helpers used to derive temporary and
destination paths. Nothing here touches the filesystem except
``path_exists`` and ``ensure_dir``.
"""

import os
from pathlib import Path

from dirstage.core.constants import DIR_MODE
from dirstage.utils.debug import debug


def clean_join(root: str | Path, name: str | Path) -> Path:
    """Join ``name`` onto ``root`` and normalize the result lexically.

    A leading separator in ``name`` does not discard ``root``; the two parts
    are concatenated, then redundant separators, ``.`` and ``..`` segments
    are collapsed.

    Args:
        root: Base directory (may be empty)
        name: Relative name, possibly containing separators

    Returns:
        Normalized path
    """
    root_str = os.fspath(root)
    name_str = os.fspath(name)

    if not root_str:
        joined = name_str
    elif not name_str:
        joined = root_str
    else:
        # normpath keeps a leading "//" on POSIX, so avoid producing one.
        joined = root_str.rstrip(os.sep) + os.sep + name_str

    if not joined:
        return Path(".")
    return Path(os.path.normpath(joined))


def path_exists(path: Path) -> bool:
    """Return True if anything stat-able lives at ``path``."""
    try:
        path.stat()
    except OSError:
        return False
    return True


def ensure_dir(path: Path) -> None:
    """Create ``path`` and any missing parents with the staging mode.

    Args:
        path: Directory to create

    Raises:
        OSError: If the directory cannot be created
    """
    path.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    debug(f"Ensured directory: {path}")


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory of ``path`` exists.

    The current directory and the filesystem root are left alone.

    Raises:
        OSError: If the parent directory cannot be created
    """
    parent = path.parent
    if parent == Path(".") or parent == Path(parent.anchor):
        return
    ensure_dir(parent)
