"""
Coaching analysis package for VolleyStats system.
"""

from .coach_analyzer import CoachAnalyzer, build_prompt

__all__ = ['CoachAnalyzer', 'build_prompt']
