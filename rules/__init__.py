"""
Rules package for the Kalamela system.

This package contains the eligibility, participation limit, scoring and fee rules.
"""

from .eligibility import classify_by_date_of_birth, is_eligible_category
from .fees import calculate_total_fee, get_appeal_fee
from .limits import (
    can_register_for_more_events, has_unit_quota, can_add_more_groups, validate_participant_addition
)
from .scoring import (
    calculate_grade, calculate_points, calculate_grade_points, calculate_rank_points,
    check_marks, score, validate_score_batch
)

__all__ = [
    'classify_by_date_of_birth', 'is_eligible_category',
    'calculate_total_fee', 'get_appeal_fee',
    'can_register_for_more_events', 'has_unit_quota', 'can_add_more_groups',
    'validate_participant_addition',
    'calculate_grade', 'calculate_points', 'calculate_grade_points', 'calculate_rank_points',
    'check_marks', 'score', 'validate_score_batch',
]
