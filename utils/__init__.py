"""
Utility functions package for VolleyStats system.
"""

from .text_utils import TextUtils

__all__ = ['TextUtils']
