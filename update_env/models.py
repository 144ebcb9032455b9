"""Data models for update-env."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """One KEY=VALUE pair of an environment file."""

    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}={self.value}"
