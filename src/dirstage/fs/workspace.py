"""Staging contexts for atomic creation of files and directories.

A ``StagingContext`` is an immutable configuration value. Each call to
``stage_directory`` or ``stage_file`` creates its artifact at a temporary
path, hands it to a caller callback, and then either commits it to the
destination with a single rename or discards it.

Staging calls are synchronous and hold no locks. Two calls that stage the
same name under the same roots race on the same paths; callers must
serialize those themselves.
"""

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ValidationError, field_validator

from dirstage.core.errors import InvalidConfiguration
from dirstage.fs.fs_ops import discard, move_into_place
from dirstage.fs.paths import clean_join, ensure_dir, ensure_parent_dir, path_exists
from dirstage.utils.debug import debug

logger = structlog.get_logger(__name__)


class StagingContext(BaseModel):
    """Where staged artifacts are built and where they are committed.

    Attributes:
        destination_root: Root under which final artifacts are placed
        temp_root: Root under which temporary artifacts are placed; None
            means the destination root is used
        temp_suffix: Appended to a name to form its temporary name
        cleanup: Whether failed attempts remove the artifact they created
    """

    destination_root: Path
    temp_root: Path | None = None
    temp_suffix: str = ""
    cleanup: bool = False

    model_config = {"frozen": True}

    @field_validator("destination_root", mode="before")
    @classmethod
    def validate_destination_root(cls, value: Any) -> Any:
        if value is None or value == "":
            raise ValueError("destination_root must not be empty")
        return value

    @field_validator("temp_root", mode="before")
    @classmethod
    def empty_temp_root_is_unset(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    def dest_path(self, name: str | Path) -> Path:
        """Return the final path for ``name``."""
        return clean_join(self.destination_root, name)

    def temp_path(self, name: str | Path) -> Path:
        """Return the staging path for ``name``."""
        root = self.temp_root if self.temp_root is not None else self.destination_root
        return clean_join(root, os.fspath(name) + self.temp_suffix)

    def sub_context(self, staged_dir: Path) -> "StagingContext":
        """Derive the context handed to a directory build callback.

        Nested artifacts are staged directly inside ``staged_dir``, so the
        temporary root is cleared rather than inherited.
        """
        return self.model_copy(
            update={"destination_root": staged_dir, "temp_root": None}
        )

    def stage_directory(
        self,
        name: str | Path,
        build: Callable[["StagingContext"], object],
    ) -> Path:
        """Build a directory at a temporary path and commit it to ``name``.

        Args:
            name: Destination name relative to the destination root
            build: Populates the staged directory through the sub-context it
                receives. Raising marks the attempt as failed.

        Returns:
            The destination path

        Raises:
            OSError: If the staged directory cannot be created or the commit
                rename fails
            BaseException: Whatever ``build`` raised, unchanged
        """
        dest = self.dest_path(name)
        temp = self.temp_path(name)
        log = logger.bind(kind="directory", name=os.fspath(name), temp=str(temp))

        # A leftover from an earlier attempt is not ours to delete.
        need_cleanup = self.cleanup and not path_exists(temp)
        ensure_dir(temp)
        debug(f"Staging {temp} -> {dest} (need_cleanup={need_cleanup})")

        try:
            build(self.sub_context(temp))
        except BaseException as e:
            self._rollback(log, temp, is_dir=True, need_cleanup=need_cleanup, exc=e)
            raise

        self._commit(log, temp, dest)
        return dest

    def stage_file(
        self,
        name: str | Path,
        write: Callable[[str], object],
    ) -> Path:
        """Write a file at a temporary path and commit it to ``name``.

        The staged file itself is not created here; ``write`` receives its
        path and is responsible for creating it.

        Args:
            name: Destination name relative to the destination root
            write: Creates and fills the file at the given path. Raising
                marks the attempt as failed.

        Returns:
            The destination path

        Raises:
            OSError: If the staging parent directory cannot be created or the
                commit rename fails
            BaseException: Whatever ``write`` raised, unchanged
        """
        dest = self.dest_path(name)
        temp = self.temp_path(name)
        log = logger.bind(kind="file", name=os.fspath(name), temp=str(temp))

        need_cleanup = self.cleanup and not path_exists(temp)
        ensure_parent_dir(temp)
        debug(f"Staging {temp} -> {dest} (need_cleanup={need_cleanup})")

        try:
            write(str(temp))
        except BaseException as e:
            self._rollback(log, temp, is_dir=False, need_cleanup=need_cleanup, exc=e)
            raise

        self._commit(log, temp, dest)
        return dest

    @staticmethod
    def _rollback(
        log: Any,
        temp: Path,
        *,
        is_dir: bool,
        need_cleanup: bool,
        exc: BaseException,
    ) -> None:
        try:
            if need_cleanup:
                discard(temp, is_dir=is_dir)
            log.info("stage.rollback", removed=need_cleanup, error=repr(exc))
        except Exception:
            # Never replace the exception that triggered the rollback.
            pass

    @staticmethod
    def _commit(log: Any, temp: Path, dest: Path) -> None:
        # Nested staging may already have consumed the temporary path.
        if not path_exists(temp):
            debug(f"Staged path consumed, nothing to commit: {temp}")
            return
        move_into_place(temp, dest)
        log.info("stage.commit", dest=str(dest))


def configure(
    destination_root: str | Path,
    temp_root: str | Path | None = None,
    temp_suffix: str = "",
    cleanup: bool = False,
) -> StagingContext:
    """Build a staging context, reporting bad options as InvalidConfiguration.

    Args:
        destination_root: Base directory for final artifacts
        temp_root: Base directory for staged artifacts (default: destination)
        temp_suffix: Suffix appended to names for staged artifacts
        cleanup: Remove the staged artifact when an attempt fails

    Returns:
        A frozen StagingContext

    Raises:
        InvalidConfiguration: If an option is rejected
    """
    try:
        return StagingContext(
            destination_root=destination_root,
            temp_root=temp_root,
            temp_suffix=temp_suffix,
            cleanup=cleanup,
        )
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "staging_context"
        raise InvalidConfiguration(field, first["msg"]) from e
