"""
Participation limit checks for Kalamela registrations.

The caller supplies the current counts. These functions only compare them
with the configured caps.
"""

import logging
from typing import Any, List, Mapping, Union

from models.member import Category, MemberSnapshot
from models.results import LimitCheckResult, ValidationResult
from models.rules import ParticipationLimits, parse_rule_int

logger = logging.getLogger(__name__)

LimitsLike = Union[ParticipationLimits, Mapping[str, Any]]


def _limit(limits: LimitsLike, rule_key: str) -> int:
    # Raw rule mappings only need to carry the key being checked
    if isinstance(limits, ParticipationLimits):
        return getattr(limits, rule_key)
    return parse_rule_int(rule_key, limits.get(rule_key))


def _check(current_count: int, maximum: int) -> LimitCheckResult:
    return LimitCheckResult(
        allowed=current_count < maximum,
        max=maximum,
        remaining=max(0, maximum - current_count),
    )


def can_register_for_more_events(current_count: int, limits: LimitsLike) -> LimitCheckResult:
    """Check a person's individual event count against the per-person cap."""
    return _check(current_count, _limit(limits, 'max_individual_events_per_person'))


def has_unit_quota(current_unit_count: int, limits: LimitsLike) -> LimitCheckResult:
    """Check a unit's participant count in one individual event against the per-unit cap."""
    return _check(current_unit_count, _limit(limits, 'max_participants_per_unit_per_event'))


def can_add_more_groups(current_group_count: int, limits: LimitsLike) -> LimitCheckResult:
    """Check a unit's team count in one group event against the per-unit group cap."""
    return _check(current_group_count, _limit(limits, 'max_groups_per_unit_per_group_event'))


def validate_participant_addition(member: MemberSnapshot, unit_count_in_event: int,
                                  limits: LimitsLike) -> ValidationResult:
    """
    Collect every reason the member cannot be added to an individual event.
    Errors are reported in a fixed order: category, exclusion,
    per-person cap, per-unit cap.
    """
    errors: List[str] = []

    if member.participation_category == Category.INELIGIBLE:
        errors.append('Member is not eligible (outside age range)')

    if member.is_excluded:
        errors.append('Member is excluded from Kalamela')

    event_check = can_register_for_more_events(member.registered_events_count or 0, limits)
    if not event_check.allowed:
        errors.append(f"Already registered for {event_check.max} events (maximum)")

    quota_check = has_unit_quota(unit_count_in_event, limits)
    if not quota_check.allowed:
        errors.append(f"Unit quota reached (max {quota_check.max} participants per unit per event)")

    if errors:
        logger.debug(f"Participant addition rejected: {errors}")
    return ValidationResult(is_valid=not errors, errors=errors)
