"""
Fee calculation for Kalamela registrations and appeals.
"""

from typing import Any, Mapping, Union

from models.results import FeeResult
from models.rules import Fees, parse_rule_int
from utils.format_utils import FormatUtils

FeesLike = Union[Fees, Mapping[str, Any]]


def _fee(fees: FeesLike, rule_key: str) -> int:
    if isinstance(fees, Fees):
        return getattr(fees, rule_key)
    return parse_rule_int(rule_key, fees.get(rule_key))


def calculate_total_fee(individual_count: int, group_count: int, fees: FeesLike) -> FeeResult:
    """Registration fee for a unit's individual and group event entries."""
    individual_fee = _fee(fees, 'individual_event_fee')
    group_fee = _fee(fees, 'group_event_fee')
    individual_total = individual_count * individual_fee
    group_total = group_count * group_fee
    total = individual_total + group_total

    currency = FormatUtils.format_currency
    breakdown = (f"{individual_count} × {currency(individual_fee)} + "
                 f"{group_count} × {currency(group_fee)} = {currency(total)}")

    return FeeResult(
        total=total,
        individual_total=individual_total,
        group_total=group_total,
        breakdown=breakdown,
    )


def get_appeal_fee(fees: FeesLike) -> int:
    return _fee(fees, 'appeal_fee')
