"""
Result models returned by the limit checks and fee calculator.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class LimitCheckResult:
    """Outcome of a quota check against a configured maximum."""
    allowed: bool
    max: int
    remaining: int


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class FeeResult:
    total: int
    individual_total: int
    group_total: int
    breakdown: str
