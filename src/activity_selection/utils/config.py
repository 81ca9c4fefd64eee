"""
Global / experimental configuration flags.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ASConfig:
    debug: bool = False
    # re-check every engine result with the validators before returning it
    validate_results: bool = False

    @classmethod
    def from_env(cls) -> "ASConfig":
        return cls(
            debug=_env_flag("ACTIVITY_SELECTION_DEBUG"),
            validate_results=_env_flag("ACTIVITY_SELECTION_VALIDATE"),
        )


config = ASConfig.from_env()
