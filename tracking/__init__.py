"""
Attempt tracking package for VolleyStats system.
"""

from .attempt_manager import AttemptManager

__all__ = ['AttemptManager']
