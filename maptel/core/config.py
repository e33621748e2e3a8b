"""
Maptel configuration constants.

Constants are organized into:
- NORMATIVE: Fixed by the phone number format, not deployment-tunable
- OPERATIONAL: Deployment-specific settings (env vars)
"""

import os

# =============================================================================
# NORMATIVE CONSTANTS
# =============================================================================

# Maximum number of digits in a phone number (keys and values alike)
TEL_NUM_MAX_LEN: int = 22

# =============================================================================
# OPERATIONAL CONFIGURATION (env vars)
# =============================================================================

# Diagnostic trace of every operation call and outcome (DEBUG records)
DEBUG: bool = os.getenv("MAPTEL_DEBUG", "false").lower() == "true"

# Root log level; MAPTEL_DEBUG turns on the maptel trace independently
LOG_LEVEL: str = os.getenv("MAPTEL_LOG_LEVEL", "INFO").upper()

# Optional log file; console only when unset
LOG_FILE: str = os.getenv("MAPTEL_LOG_FILE", "")

# Runtime log-level endpoint
ADMIN_ENDPOINT_ENABLED: bool = (
    os.getenv("MAPTEL_ADMIN_ENDPOINT_ENABLED", "true").lower() == "true"
)

# Version tracking (injected at deploy time)
GIT_SHA: str = os.getenv("GIT_SHA", "unknown")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_config() -> list[str]:
    """Validate configuration and return list of issues."""
    issues = []

    if LOG_LEVEL not in VALID_LOG_LEVELS:
        issues.append(f"Invalid MAPTEL_LOG_LEVEL: {LOG_LEVEL}")

    if LOG_FILE and os.path.isdir(LOG_FILE):
        issues.append(f"MAPTEL_LOG_FILE is a directory: {LOG_FILE}")

    return issues
