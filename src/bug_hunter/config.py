"""Settings read from the environment."""

import os
from dataclasses import dataclass

DEFAULT_MAX_CODE_BYTES = 1_000_000
DEFAULT_HISTORY_SIZE = 500


def _int_from_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class Settings:
    max_code_bytes: int = DEFAULT_MAX_CODE_BYTES
    history_size: int = DEFAULT_HISTORY_SIZE

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            max_code_bytes=_int_from_env("BUG_HUNTER_MAX_CODE_BYTES", DEFAULT_MAX_CODE_BYTES),
            history_size=_int_from_env("BUG_HUNTER_HISTORY_SIZE", DEFAULT_HISTORY_SIZE),
        )
