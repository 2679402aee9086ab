"""Core constants for dirstage.

This module defines constants used throughout the package:
- Filesystem modes for directories created while staging
- Environment variable names read by the configuration loader
- Accepted spellings for boolean environment values
"""

# ============================================================================
# Filesystem
# ============================================================================

#: Mode for every directory created by a staging operation
DIR_MODE: int = 0o755

# ============================================================================
# Environment Configuration
# ============================================================================

#: Destination root used when none is passed explicitly
ENV_DEST_ROOT: str = "DIRSTAGE_DEST_ROOT"

#: Temporary root; unset means "stage next to the destination"
ENV_TEMP_ROOT: str = "DIRSTAGE_TEMP_ROOT"

#: Suffix appended to names when forming temporary paths
ENV_TEMP_SUFFIX: str = "DIRSTAGE_TEMP_SUFFIX"

#: Whether failed staging attempts remove their temporary artifact
ENV_CLEANUP: str = "DIRSTAGE_CLEANUP"

#: Toggles the print-style debug helper
ENV_DEBUG: str = "DIRSTAGE_DEBUG"

TRUTHY_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})
FALSY_VALUES: frozenset[str] = frozenset({"0", "false", "no", "off", ""})
