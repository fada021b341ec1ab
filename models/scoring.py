"""
Score models for the Kalamela system.
"""

from dataclasses import dataclass
from enum import Enum


class Grade(str, Enum):
    A = 'A'
    B = 'B'
    C = 'C'
    NO_GRADE = 'No Grade'


class GradePolicy(Enum):
    """Grade boundary conventions.

    STRICT is the official calculator: A from 60%, B above 50%, C above 40%.
    INCLUSIVE_RANGE is the score-entry preview: A 60+, B 50-59, C 40-49.
    """
    STRICT = 'strict'
    INCLUSIVE_RANGE = 'inclusive_range'


@dataclass(frozen=True)
class ScoreInput:
    """Marks and finishing position entered for one participant or team."""
    marks: float
    position: int
    is_group_event: bool = False
    participant: str = ''
    unit: str = ''


@dataclass(frozen=True)
class ScoreResult:
    grade: Grade
    position_points: int
    grade_points: int
    total_points: int


PointsResult = ScoreResult
