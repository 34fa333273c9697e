"""
Aggregate calculations over attempt slots.
"""

from typing import Dict, List, Sequence, Tuple, Union

from models.score import ScoreValue, SKILL_NAMES
from models.match_data import SkillStats, MatchData

MAX_POINTS_PER_ATTEMPT = int(ScoreValue.EXCELLENT)

HIGH_EFFICIENCY = 70
MEDIUM_EFFICIENCY = 40


def calculate_stats(attempts: Sequence[ScoreValue]) -> Tuple[int, int, float]:
    """
    Reduce attempt slots to (success_count, error_count, efficiency).
    EMPTY slots are ignored; efficiency is 0 when nothing is recorded.
    """
    recorded = [value for value in attempts if value != ScoreValue.EMPTY]
    success_count = sum(1 for value in recorded if value >= ScoreValue.GOOD)
    error_count = sum(1 for value in recorded if value == ScoreValue.ERROR)

    if not recorded:
        return success_count, error_count, 0.0

    total_points = sum(int(value) for value in recorded)
    efficiency = total_points / (len(recorded) * MAX_POINTS_PER_ATTEMPT) * 100
    return success_count, error_count, efficiency


def apply_stats(skill_stats: SkillStats) -> SkillStats:
    """Refresh the cached aggregates of a SkillStats from its attempts."""
    success_count, error_count, efficiency = calculate_stats(skill_stats.attempts)
    skill_stats.success_count = success_count
    skill_stats.error_count = error_count
    skill_stats.efficiency = efficiency
    return skill_stats


def recorded_count(attempts: Sequence[ScoreValue]) -> int:
    return sum(1 for value in attempts if value != ScoreValue.EMPTY)


def format_efficiency(efficiency: float) -> str:
    """Format an efficiency percentage with one decimal, e.g. '55.6'."""
    return f"{efficiency:.1f}"


def efficiency_band(efficiency: float) -> str:
    """Colour band of a chart bar."""
    if efficiency >= HIGH_EFFICIENCY:
        return 'high'
    if efficiency >= MEDIUM_EFFICIENCY:
        return 'medium'
    return 'low'


def bar_chart_data(match_data: MatchData) -> List[Dict[str, Union[str, float]]]:
    """Skill name, efficiency rounded to one decimal and colour band, in display order."""
    data = []
    for skill in SKILL_NAMES:
        skill_stats = match_data.get(skill)
        efficiency = skill_stats.efficiency if skill_stats else 0.0
        data.append({
            'skill': skill,
            'efficiency': round(efficiency, 1),
            'band': efficiency_band(efficiency)
        })
    return data


def overall_efficiency(match_data: MatchData) -> float:
    """Mean efficiency over the skills with at least one recorded attempt."""
    efficiencies = [
        skill_stats.efficiency
        for skill_stats in match_data.values()
        if recorded_count(skill_stats.attempts) > 0
    ]
    if not efficiencies:
        return 0.0
    return sum(efficiencies) / len(efficiencies)
