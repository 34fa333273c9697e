"""
Score values and fixed volleyball vocabularies for the VolleyStats system.
"""

from dataclasses import dataclass
from enum import IntEnum


class ScoreValue(IntEnum):
    """Marker recorded in a single attempt slot. The ordinal doubles as the point value."""
    EMPTY = -1
    ERROR = 0
    POOR = 1
    GOOD = 2
    EXCELLENT = 3


@dataclass(frozen=True)
class ScoreOption:
    """A selectable scored value with its display label."""
    value: ScoreValue
    label: str


MAX_ATTEMPTS = 10

SKILL_NAMES = ('Serve', 'Pass', 'Attack', 'Block', 'Set', 'Teamwork')

POSITIONS = ('Setter', 'Outside Hitter', 'Middle Blocker', 'Opposite', 'Libero')

SCORE_OPTIONS = (
    ScoreOption(ScoreValue.ERROR, 'Error'),
    ScoreOption(ScoreValue.POOR, 'Fair'),
    ScoreOption(ScoreValue.GOOD, 'Good'),
    ScoreOption(ScoreValue.EXCELLENT, 'Excellent'),
)

# Brazilian Portuguese labels
SKILL_LABELS_PT = {
    'Serve': 'Saque',
    'Pass': 'Passe',
    'Attack': 'Ataque',
    'Block': 'Bloqueio',
    'Set': 'Levantamento',
    'Teamwork': 'Coletividade',
}
