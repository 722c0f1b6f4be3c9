"""Constants and default values for QuickProp.

This module centralizes the generator policies, runner defaults and
environment variable names used by QuickProp.
"""

import os
from typing import Final

# =============================================================================
# Environment Variable Names
# =============================================================================

ENV_VAR_PREFIX: Final[str] = "QUICKPROP_"

ENV_TRIALS: Final[str] = f"{ENV_VAR_PREFIX}TRIALS"
ENV_QUICK_TRIALS: Final[str] = f"{ENV_VAR_PREFIX}QUICK_TRIALS"
ENV_MAX_SHRINK_STEPS: Final[str] = f"{ENV_VAR_PREFIX}MAX_SHRINK_STEPS"
ENV_SEED: Final[str] = f"{ENV_VAR_PREFIX}SEED"
ENV_LIST_MAX_LENGTH: Final[str] = f"{ENV_VAR_PREFIX}LIST_MAX_LENGTH"


# =============================================================================
# Runner Defaults
# =============================================================================

DEFAULT_TRIALS: Final[int] = 10
DEFAULT_QUICK_TRIALS: Final[int] = 100
DEFAULT_MAX_SHRINK_STEPS: Final[int] = 1000


# =============================================================================
# Generator Policies
# =============================================================================

# 64-bit signed range for unconstrained integers
INT_MIN: Final[int] = -(2**63)
INT_MAX: Final[int] = 2**63 - 1

FLOAT_LOW: Final[int] = -100
FLOAT_HIGH: Final[int] = 100

# Uppercase A-Z, upper bound exclusive
CHAR_LOW: Final[int] = ord("A")
CHAR_HIGH: Final[int] = ord("Z") + 1

STRING_MAX_LENGTH: Final[int] = 40
LIST_MAX_LENGTH: Final[int] = 50


# =============================================================================
# Configuration Files
# =============================================================================

FILE_EXT_YAML: Final[str] = "yaml"
FILE_EXT_YML: Final[str] = "yml"
FILE_EXT_JSON: Final[str] = "json"

SUPPORTED_EXTENSIONS: Final[tuple[str, ...]] = (
    FILE_EXT_YAML,
    FILE_EXT_YML,
    FILE_EXT_JSON,
)


# =============================================================================
# Helper Functions
# =============================================================================


def get_env_int(name: str, default: int | None) -> int | None:
    """Read an integer environment variable, falling back to ``default``.

    Raises:
        ValueError: If the variable is set but is not an integer
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw.strip())


def get_trials() -> int | None:
    """Get the default number of shrinking trials from the environment."""
    return get_env_int(ENV_TRIALS, DEFAULT_TRIALS)


def get_quick_trials() -> int | None:
    """Get the default number of non-shrinking trials from the environment."""
    return get_env_int(ENV_QUICK_TRIALS, DEFAULT_QUICK_TRIALS)


def get_max_shrink_steps() -> int | None:
    """Get the shrink step budget from the environment."""
    return get_env_int(ENV_MAX_SHRINK_STEPS, DEFAULT_MAX_SHRINK_STEPS)


def get_seed() -> int | None:
    """Get the random seed from the environment, if any."""
    return get_env_int(ENV_SEED, None)


def get_list_max_length() -> int | None:
    """Get the exclusive maximum length of generated lists."""
    return get_env_int(ENV_LIST_MAX_LENGTH, LIST_MAX_LENGTH)
