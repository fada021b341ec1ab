"""
Utility functions package for the Kalamela system.
"""

from .date_utils import DateUtils
from .format_utils import FormatUtils

__all__ = ['DateUtils', 'FormatUtils']
