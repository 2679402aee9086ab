"""Debug utility for dirstage.

Provides a single debug() function that can be toggled via the
DIRSTAGE_DEBUG environment variable. Used for low-level filesystem steps
(directory creation, renames, removals) that are too chatty for the
structured log.

Usage:
    from dirstage.utils.debug import debug

    debug(f"Renamed {src} -> {dst}")

Environment:
    DIRSTAGE_DEBUG: Set to '1', 'true', 'yes' (case-insensitive) to enable
                    debug output. Any other value or unset disables it.
"""

import os
import sys
from typing import Any

from dirstage.core.constants import ENV_DEBUG

# Determine if debug mode is enabled at module import time
_DEBUG_ENABLED = os.environ.get(ENV_DEBUG, "").lower() in (
    "1",
    "true",
    "yes",
)


def debug(msg: Any) -> None:
    """Print debug message if DIRSTAGE_DEBUG is enabled.

    Args:
        msg: Message to print. Will be converted to string.

    Note:
        The environment variable is read at module import time. Changing it
        afterwards has no effect unless the module is reloaded.
    """
    if _DEBUG_ENABLED:
        print(f"[DEBUG] {msg}", file=sys.stdout)
