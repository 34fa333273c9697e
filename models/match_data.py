"""
Per-skill attempt records for the VolleyStats system.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from models.score import ScoreValue, SKILL_NAMES, MAX_ATTEMPTS


def _empty_attempts() -> List[ScoreValue]:
    return [ScoreValue.EMPTY] * MAX_ATTEMPTS


@dataclass
class SkillStats:
    """Attempt slots for one (athlete, skill) pair plus their cached aggregates.

    The counts and efficiency are projections of ``attempts`` and are only ever
    written by the stats calculator.
    """
    attempts: List[ScoreValue] = field(default_factory=_empty_attempts)
    success_count: int = 0
    error_count: int = 0
    efficiency: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'attempts': [int(value) for value in self.attempts],
            'successCount': self.success_count,
            'errorCount': self.error_count,
            'efficiency': self.efficiency
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SkillStats':
        return cls(
            attempts=[ScoreValue(int(value)) for value in data['attempts']],
            success_count=int(data.get('successCount', 0)),
            error_count=int(data.get('errorCount', 0)),
            efficiency=float(data.get('efficiency', 0.0))
        )


# One SkillStats per entry of SKILL_NAMES, keyed by skill name.
MatchData = Dict[str, SkillStats]


def create_empty_skill_stats() -> SkillStats:
    """Return a SkillStats with every slot EMPTY."""
    return SkillStats()


def create_empty_match_data() -> MatchData:
    """Return a fresh MatchData with all six skills unrecorded."""
    return {skill: create_empty_skill_stats() for skill in SKILL_NAMES}
