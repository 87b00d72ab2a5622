"""
Settings for the keyed registry demo.

- Pure Python (frozen dataclass), defaults defined in code.
- No config files, no environment variables.
- Validation in __post_init__.
- Singleton via functools.lru_cache.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from typing import Literal

# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------
DuplicatePolicy = Literal["overwrite", "error"]

DUPLICATE_POLICIES: tuple[str, ...] = ("overwrite", "error")


def _validate_choice(value: str, *, choices: tuple[str, ...], key: str) -> str:
    if value not in choices:
        raise ValueError(f"{key} must be one of {choices}, got {value!r}")
    return value


# ------------------------------------------------------------------------------
# Settings dataclass (immutable)
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Settings:
    # Observability
    log_level: str = "WARNING"
    json_logs: bool = False

    # Registry
    on_duplicate: DuplicatePolicy = "overwrite"

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "on_duplicate",
            _validate_choice(self.on_duplicate, choices=DUPLICATE_POLICIES, key="on_duplicate"),
        )

        # Log level basic check
        if not re.fullmatch(r"(?i)DEBUG|INFO|WARNING|ERROR|CRITICAL", self.log_level.strip()):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        object.__setattr__(self, "log_level", self.log_level.strip().upper())

    def safe_dict(self) -> dict:
        return {
            "log_level": self.log_level,
            "json_logs": self.json_logs,
            "on_duplicate": self.on_duplicate,
        }


# ------------------------------------------------------------------------------
# Loader (singleton)
# ------------------------------------------------------------------------------
@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
