"""
Reports package for VolleyStats system.
"""

from .report_generator import ReportGenerator

__all__ = ['ReportGenerator']
