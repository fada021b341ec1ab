"""
Reports package for the Kalamela system.
"""

from .report_generator import ReportGenerator

__all__ = ['ReportGenerator']
