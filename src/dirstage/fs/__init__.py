"""Filesystem staging with commit-or-rollback semantics.

This module provides staging contexts that build files and directories at a
temporary path and commit them with a single rename, along with the path,
commit, and rollback primitives they are built on.
"""

from dirstage.fs.fs_ops import discard, move_into_place
from dirstage.fs.paths import clean_join
from dirstage.fs.workspace import StagingContext, configure

__all__ = [
    "StagingContext",
    "clean_join",
    "configure",
    "discard",
    "move_into_place",
]
