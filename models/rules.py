"""
Rule configuration models for the Kalamela system.

Rule values arrive as strings from the rules store. They are parsed once here,
so the rule functions only ever see ints and dates.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from models.exceptions import ConfigurationError, OverlappingAgeIntervalsError
from utils.date_utils import DateUtils


def parse_rule_int(rule_key: str, value: Any) -> int:
    """Parse a non-negative integer rule value, raising ConfigurationError otherwise."""
    if isinstance(value, bool):
        raise ConfigurationError(f"Rule '{rule_key}' must be a whole number, got {value!r}",
                                 rule_key, value)
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and value.strip().isdecimal():
        parsed = int(value.strip())
    else:
        raise ConfigurationError(f"Rule '{rule_key}' must be a whole number, got {value!r}",
                                 rule_key, value)
    if parsed < 0:
        raise ConfigurationError(f"Rule '{rule_key}' must not be negative, got {value!r}",
                                 rule_key, value)
    return parsed


def parse_rule_date(rule_key: str, value: Any) -> date:
    """Parse a date rule value, raising ConfigurationError otherwise."""
    parsed = DateUtils.parse_date(value)
    if parsed is None:
        raise ConfigurationError(f"Rule '{rule_key}' must be a date, got {value!r}",
                                 rule_key, value)
    return parsed


def _require(section: Mapping[str, Any], rule_key: str) -> Any:
    if rule_key not in section:
        raise ConfigurationError(f"Missing rule '{rule_key}'", rule_key)
    return section[rule_key]


@dataclass(frozen=True)
class AgeRestrictions:
    """Date-of-birth intervals for the junior and senior categories."""
    senior_dob_start: date
    senior_dob_end: date
    junior_dob_start: date
    junior_dob_end: date

    @classmethod
    def from_config(cls, section: Mapping[str, Any], validate: bool = True) -> "AgeRestrictions":
        restrictions = cls(
            senior_dob_start=parse_rule_date('senior_dob_start', _require(section, 'senior_dob_start')),
            senior_dob_end=parse_rule_date('senior_dob_end', _require(section, 'senior_dob_end')),
            junior_dob_start=parse_rule_date('junior_dob_start', _require(section, 'junior_dob_start')),
            junior_dob_end=parse_rule_date('junior_dob_end', _require(section, 'junior_dob_end')),
        )
        if validate:
            restrictions.validate()
        return restrictions

    def overlaps(self) -> bool:
        return (self.junior_dob_start <= self.senior_dob_end
                and self.senior_dob_start <= self.junior_dob_end)

    def validate(self) -> None:
        if self.senior_dob_start > self.senior_dob_end:
            raise ConfigurationError(
                f"Senior interval is inverted: {self.senior_dob_start} > {self.senior_dob_end}",
                'senior_dob_start', self.senior_dob_start)
        if self.junior_dob_start > self.junior_dob_end:
            raise ConfigurationError(
                f"Junior interval is inverted: {self.junior_dob_start} > {self.junior_dob_end}",
                'junior_dob_start', self.junior_dob_start)
        if self.overlaps():
            raise OverlappingAgeIntervalsError(
                f"Junior interval {self.junior_dob_start}..{self.junior_dob_end} overlaps "
                f"senior interval {self.senior_dob_start}..{self.senior_dob_end}",
                'junior_dob_start', self.junior_dob_start)


@dataclass(frozen=True)
class ParticipationLimits:
    """Registration caps per person, per unit per event and per unit per group event."""
    max_individual_events_per_person: int
    max_participants_per_unit_per_event: int
    max_groups_per_unit_per_group_event: int

    @classmethod
    def from_config(cls, section: Mapping[str, Any]) -> "ParticipationLimits":
        return cls(**{
            key: parse_rule_int(key, _require(section, key))
            for key in ('max_individual_events_per_person',
                        'max_participants_per_unit_per_event',
                        'max_groups_per_unit_per_group_event')
        })


@dataclass(frozen=True)
class Fees:
    """Registration and appeal fees in rupees."""
    individual_event_fee: int
    group_event_fee: int
    appeal_fee: int

    @classmethod
    def from_config(cls, section: Mapping[str, Any]) -> "Fees":
        return cls(**{
            key: parse_rule_int(key, _require(section, key))
            for key in ('individual_event_fee', 'group_event_fee', 'appeal_fee')
        })


@dataclass(frozen=True)
class KalamelaRules:
    """All rule sections, parsed and validated."""
    age_restrictions: AgeRestrictions
    participation_limits: ParticipationLimits
    fees: Fees
