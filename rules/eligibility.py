"""
Age category classification for Kalamela participants.
"""

import logging
from typing import Any, Mapping, Union

from models.member import Category
from models.rules import AgeRestrictions
from utils.date_utils import DateUtils

logger = logging.getLogger(__name__)


def _as_age_restrictions(rules: Union[AgeRestrictions, Mapping[str, Any]]) -> AgeRestrictions:
    if isinstance(rules, AgeRestrictions):
        return rules
    # Disjointness is checked when the configuration is loaded, not per classification
    return AgeRestrictions.from_config(rules, validate=False)


def classify_by_date_of_birth(dob: Any, rules: Union[AgeRestrictions, Mapping[str, Any]]) -> Category:
    """
    Determine the participation category for a date of birth.
    Both intervals are inclusive. The junior interval is checked first,
    so a date inside both intervals is classified as Junior.
    """
    birth_date = DateUtils.parse_date(dob)
    if birth_date is None:
        logger.debug(f"Date of birth {dob!r} missing or unparseable")
        return Category.UNKNOWN

    restrictions = _as_age_restrictions(rules)
    if restrictions.junior_dob_start <= birth_date <= restrictions.junior_dob_end:
        return Category.JUNIOR
    if restrictions.senior_dob_start <= birth_date <= restrictions.senior_dob_end:
        return Category.SENIOR
    return Category.INELIGIBLE


def is_eligible_category(category: Category) -> bool:
    """Only Junior and Senior members can be registered for events."""
    return category in (Category.JUNIOR, Category.SENIOR)
