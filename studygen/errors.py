"""Exception hierarchy for studygen.

Every failure a generation run can hit maps onto one of these classes so the
CLI can report it and exit non-zero with a single ``except`` clause.
"""

from __future__ import annotations

from pathlib import Path


class StudyGenError(Exception):
    """Base class for all studygen failures."""


class ConfigNotFoundError(StudyGenError):
    """Raised when the study description is missing or cannot be read."""

    def __init__(self, path: str | Path, reason: str = "file not found") -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read study config {self.path}: {reason}")


class ConfigMalformedError(StudyGenError):
    """Raised when the study description does not decode into a valid ``Study``.

    Attributes:
        path: The offending configuration file.
        problems: One ``"<location>: <message>"`` entry per decoding error.
    """

    def __init__(self, path: str | Path, problems: list[str]) -> None:
        self.path = Path(path)
        self.problems = list(problems)
        details = "\n".join(f"  - {p}" for p in self.problems)
        super().__init__(f"Malformed study config {self.path}:\n{details}")


class OutputWriteError(StudyGenError):
    """Raised when a generated file cannot be written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to write {self.path}: {reason}")
