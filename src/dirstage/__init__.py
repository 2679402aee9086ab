"""Atomic creation of files and directories through a staging area."""

from dirstage.fs.workspace import StagingContext, configure

__all__ = ["StagingContext", "configure"]
