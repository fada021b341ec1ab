"""
Configuration package for the Kalamela rules.
"""

from .config_manager import ConfigManager

__all__ = ['ConfigManager']
