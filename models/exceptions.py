"""
Exceptions raised by the Kalamela rules.
"""

from typing import Any, Iterable, List, Optional


class KalamelaError(Exception):
    """Base class for all Kalamela rule errors."""


class ConfigurationError(KalamelaError, ValueError):
    """A rule value in the configuration could not be used."""

    def __init__(self, message: str, rule_key: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.rule_key = rule_key
        self.value = value


InvalidRuleValue = ConfigurationError


class OverlappingAgeIntervalsError(ConfigurationError):
    """The junior and senior date-of-birth intervals overlap."""


class MarksOutOfRangeError(KalamelaError, ValueError):
    """Marks outside 0-100."""

    def __init__(self, marks: float):
        super().__init__(f"Marks must be between 0 and 100, got {marks}")
        self.marks = marks


class ScoreBatchError(KalamelaError, ValueError):
    """A batch of score entries cannot be submitted."""


class EmptyScoreBatchError(ScoreBatchError):
    def __init__(self):
        super().__init__("Please enter at least one valid score")


class DuplicatePositionError(ScoreBatchError):
    def __init__(self, positions: Iterable[int]):
        self.positions: List[int] = sorted(set(positions))
        super().__init__(f"Cannot have duplicate positions: {self.positions}")
