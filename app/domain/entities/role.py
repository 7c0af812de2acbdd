"""Domain entity representing a user role."""

from dataclasses import dataclass


@dataclass
class Role:
    """Role granted to a user, identified by its alias."""

    id: int
    name: str
    alias: str


__all__ = ["Role"]
