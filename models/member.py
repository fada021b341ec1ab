"""
Member models for the Kalamela system.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Category(str, Enum):
    """Participation category derived from a member's date of birth."""
    JUNIOR = 'Junior'
    SENIOR = 'Senior'
    INELIGIBLE = 'Ineligible'
    UNKNOWN = 'Unknown'


@dataclass(frozen=True)
class MemberSnapshot:
    """The part of a unit member that participant validation looks at."""
    participation_category: Category
    is_excluded: bool = False
    registered_events_count: Optional[int] = 0
