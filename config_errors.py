"""Exceptions raised while composing the game configuration."""

from __future__ import annotations

from typing import Iterable, List


class ConfigurationError(ValueError):
    """Raised when a builder or patch produces a record outside the schema."""

    def __init__(self, path: str, message: str, keys: Iterable[str] = ()) -> None:
        self.path = path
        self.keys: List[str] = list(keys)
        super().__init__(f"{path}: {message}")


class DanglingReferenceError(ConfigurationError):
    """Raised when identifiers used in one section have no entry in another."""

    def __init__(self, problems: Iterable[str]) -> None:
        self.problems: List[str] = list(problems)
        detail = "; ".join(self.problems)
        super().__init__("config", f"{len(self.problems)} problem(s): {detail}")
