"""Helpers for resolving staging options from the environment."""

from __future__ import annotations

import os
from pathlib import Path

from dirstage.core.constants import (
    ENV_CLEANUP,
    ENV_DEST_ROOT,
    ENV_TEMP_ROOT,
    ENV_TEMP_SUFFIX,
    FALSY_VALUES,
    TRUTHY_VALUES,
)
from dirstage.core.errors import InvalidConfiguration
from dirstage.fs.workspace import StagingContext, configure

__all__ = ["load_context", "parse_bool"]


def parse_bool(field: str, raw: str) -> bool:
    """Interpret an environment value as a boolean.

    Raises:
        InvalidConfiguration: If the value is not a recognised spelling
    """
    value = raw.strip().lower()
    if value in TRUTHY_VALUES:
        return True
    if value in FALSY_VALUES:
        return False
    raise InvalidConfiguration(field, f"expected a boolean, got {raw!r}")


def load_context(
    destination_root: str | Path | None = None,
    temp_root: str | Path | None = None,
    temp_suffix: str | None = None,
    cleanup: bool | None = None,
) -> StagingContext:
    """Build a staging context, filling unset options from the environment.

    Explicit arguments always win over ``DIRSTAGE_*`` variables.

    Args:
        destination_root: Base directory for final artifacts
        temp_root: Base directory for staged artifacts
        temp_suffix: Suffix appended to names for staged artifacts
        cleanup: Remove the staged artifact when an attempt fails

    Returns:
        A frozen StagingContext

    Raises:
        InvalidConfiguration: If no destination root is available or a value
            is rejected
    """

    chosen_dest: str | Path | None = destination_root
    if chosen_dest is None:
        chosen_dest = os.getenv(ENV_DEST_ROOT)
    if not chosen_dest:
        raise InvalidConfiguration(
            "destination_root",
            f"not given and {ENV_DEST_ROOT} is not set",
        )

    chosen_temp: str | Path | None = temp_root
    if chosen_temp is None:
        chosen_temp = os.getenv(ENV_TEMP_ROOT) or None

    chosen_suffix = temp_suffix
    if chosen_suffix is None:
        chosen_suffix = os.getenv(ENV_TEMP_SUFFIX, "")

    chosen_cleanup = cleanup
    if chosen_cleanup is None:
        chosen_cleanup = parse_bool(ENV_CLEANUP, os.getenv(ENV_CLEANUP, ""))

    return configure(
        destination_root=Path(chosen_dest).expanduser(),
        temp_root=Path(chosen_temp).expanduser() if chosen_temp else None,
        temp_suffix=chosen_suffix,
        cleanup=chosen_cleanup,
    )
