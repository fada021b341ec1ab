"""
Models package for the Kalamela rules.

This package contains the dataclasses, enums and exceptions shared by the rules,
configuration and report modules.
"""

from .exceptions import (
    KalamelaError, ConfigurationError, InvalidRuleValue, OverlappingAgeIntervalsError,
    MarksOutOfRangeError, ScoreBatchError, EmptyScoreBatchError, DuplicatePositionError
)
from .member import Category, MemberSnapshot
from .results import LimitCheckResult, ValidationResult, FeeResult
from .rules import AgeRestrictions, ParticipationLimits, Fees, KalamelaRules
from .scoring import Grade, GradePolicy, ScoreInput, ScoreResult, PointsResult

__all__ = [
    'KalamelaError', 'ConfigurationError', 'InvalidRuleValue', 'OverlappingAgeIntervalsError',
    'MarksOutOfRangeError', 'ScoreBatchError', 'EmptyScoreBatchError', 'DuplicatePositionError',
    'Category', 'MemberSnapshot',
    'LimitCheckResult', 'ValidationResult', 'FeeResult',
    'AgeRestrictions', 'ParticipationLimits', 'Fees', 'KalamelaRules',
    'Grade', 'GradePolicy', 'ScoreInput', 'ScoreResult', 'PointsResult',
]
