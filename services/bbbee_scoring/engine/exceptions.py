"""
Scoring Engine Errors
=====================

Version: 0.1.0
"""


class ScoringError(Exception):
    """Base error raised by the scoring engine."""


class UnrecognizedOccupationalLevelError(ScoringError, LookupError):
    """An employee record names an occupational level outside the fixed set."""

    def __init__(self, level: str, record_index: int | None = None) -> None:
        self.level = level
        self.record_index = record_index
        location = f" (record {record_index})" if record_index is not None else ""
        super().__init__(f"Unrecognized occupational level: {level!r}{location}")
