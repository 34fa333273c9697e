"""
Models package for the VolleyStats system.

This package contains all data models, enums and constants used throughout the system.
"""

from .score import (
    ScoreValue, ScoreOption, SCORE_OPTIONS, SKILL_NAMES, POSITIONS, MAX_ATTEMPTS,
    SKILL_LABELS_PT
)
from .athlete import Athlete
from .match_data import SkillStats, MatchData, create_empty_skill_stats, create_empty_match_data
from .analysis import AnalysisFailure, AnalysisResult

__all__ = [
    'ScoreValue', 'ScoreOption', 'SCORE_OPTIONS', 'SKILL_NAMES', 'POSITIONS', 'MAX_ATTEMPTS',
    'SKILL_LABELS_PT',
    'Athlete', 'SkillStats', 'MatchData', 'create_empty_skill_stats', 'create_empty_match_data',
    'AnalysisFailure', 'AnalysisResult'
]
