"""
Configuration package for VolleyStats system.
"""

from .config_manager import ConfigManager

__all__ = ['ConfigManager']
