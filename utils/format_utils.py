"""
Formatting utilities for fees, chest numbers and rule records.
"""

from typing import Any

from .date_utils import DateUtils


class FormatUtils:
    """Utilities for presenting amounts, chest numbers and rule values."""

    RULE_CATEGORY_NAMES = {
        'age_restriction': 'Age Restrictions',
        'participation_limit': 'Participation Limits',
        'fee': 'Fees',
    }

    @staticmethod
    def group_indian_digits(amount: int) -> str:
        """Group digits the Indian way: 1,00,000 rather than 100,000."""
        sign = '-' if amount < 0 else ''
        digits = str(abs(int(amount)))
        if len(digits) <= 3:
            return sign + digits

        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        return sign + ','.join(groups + [tail])

    @staticmethod
    def format_currency(amount: int) -> str:
        return f"₹{FormatUtils.group_indian_digits(amount)}"

    @staticmethod
    def generate_chest_number(district_code: str, event_type: str, event_id: int, sequence: int) -> str:
        """Build a chest number such as 'KOT-IE12-007'.

        event_type is 'IE' for individual events and 'GE' for group events.
        """
        if event_type not in ('IE', 'GE'):
            raise ValueError(f"Event type must be 'IE' or 'GE', got {event_type!r}")
        return f"{district_code[:3].upper()}-{event_type}{event_id}-{sequence:03d}"

    @staticmethod
    def get_rule_category_display_name(category: str) -> str:
        return FormatUtils.RULE_CATEGORY_NAMES.get(category, category)

    @staticmethod
    def get_rule_input_type(rule_key: str) -> str:
        """Return 'date', 'number' or 'text' for editing a rule value."""
        if 'dob' in rule_key or 'date' in rule_key:
            return 'date'
        if any(token in rule_key for token in ('fee', 'max', 'limit', 'count')):
            return 'number'
        return 'text'

    @staticmethod
    def format_rule_value(rule_key: str, rule_value: Any) -> str:
        if FormatUtils.get_rule_input_type(rule_key) == 'date':
            return DateUtils.format_date(rule_value)
        if 'fee' in rule_key:
            return f"₹{rule_value}"
        return str(rule_value)
