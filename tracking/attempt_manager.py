"""
Attempt recording for the VolleyStats system.
"""

import logging
from typing import Dict, Iterable, Optional

from models.score import ScoreValue, MAX_ATTEMPTS
from models.match_data import MatchData, SkillStats, create_empty_match_data
from stats.stats_calculator import apply_stats

logger = logging.getLogger(__name__)


class AttemptManager:
    """Owns the athlete id -> MatchData store and every write to it."""

    def __init__(self, stats_by_athlete: Optional[Dict[str, MatchData]] = None):
        self.stats_by_athlete: Dict[str, MatchData] = stats_by_athlete if stats_by_athlete is not None else {}

    def get_match_data(self, athlete_id: str) -> Optional[MatchData]:
        return self.stats_by_athlete.get(athlete_id)

    def ensure_match_data(self, athlete_id: str) -> MatchData:
        """Return the athlete's MatchData, creating an empty one if missing."""
        if athlete_id not in self.stats_by_athlete:
            self.stats_by_athlete[athlete_id] = create_empty_match_data()
        return self.stats_by_athlete[athlete_id]

    def drop_match_data(self, athlete_id: str) -> None:
        self.stats_by_athlete.pop(athlete_id, None)

    def retain_only(self, athlete_ids: Iterable[str]) -> None:
        """Drop stats for ids not in ``athlete_ids`` and create missing ones."""
        keep = list(athlete_ids)
        for athlete_id in list(self.stats_by_athlete):
            if athlete_id not in keep:
                del self.stats_by_athlete[athlete_id]
        for athlete_id in keep:
            self.ensure_match_data(athlete_id)

    def clear(self) -> None:
        self.stats_by_athlete.clear()

    def _get_skill_stats(self, athlete_id: str, skill: str) -> Optional[SkillStats]:
        match_data = self.stats_by_athlete.get(athlete_id)
        if match_data is None:
            logger.debug(f"No stats for athlete {athlete_id}")
            return None
        skill_stats = match_data.get(skill)
        if skill_stats is None:
            logger.debug(f"Unknown skill '{skill}'")
        return skill_stats

    def set_attempt(self, athlete_id: str, skill: str, index: int, value: ScoreValue) -> Optional[int]:
        """
        Write ``value`` into slot ``index`` and refresh the skill's aggregates.
        Writing EMPTY clears the slot. Out-of-range indexes are ignored.
        Returns the index written, or None if nothing changed.
        """
        if not 0 <= index < MAX_ATTEMPTS:
            logger.debug(f"Ignoring attempt index {index} for {skill}")
            return None

        skill_stats = self._get_skill_stats(athlete_id, skill)
        if skill_stats is None:
            return None

        skill_stats.attempts[index] = ScoreValue(value)
        apply_stats(skill_stats)
        logger.debug(f"Set {skill}[{index}] = {ScoreValue(value).name} for athlete {athlete_id}")
        return index

    def quick_add(self, athlete_id: str, skill: str, value: ScoreValue) -> Optional[int]:
        """Record ``value`` in the lowest EMPTY slot; no-op when all slots are filled."""
        skill_stats = self._get_skill_stats(athlete_id, skill)
        if skill_stats is None:
            return None

        for index, current in enumerate(skill_stats.attempts):
            if current == ScoreValue.EMPTY:
                return self.set_attempt(athlete_id, skill, index, value)

        logger.debug(f"All {MAX_ATTEMPTS} attempts of {skill} already recorded")
        return None

    def undo_last(self, athlete_id: str, skill: str) -> Optional[int]:
        """Clear the highest recorded slot; other slots keep their positions."""
        skill_stats = self._get_skill_stats(athlete_id, skill)
        if skill_stats is None:
            return None

        for index in range(len(skill_stats.attempts) - 1, -1, -1):
            if skill_stats.attempts[index] != ScoreValue.EMPTY:
                return self.set_attempt(athlete_id, skill, index, ScoreValue.EMPTY)

        logger.debug(f"Nothing to undo for {skill}")
        return None

    def reset_skills_for_athlete(self, athlete_id: str) -> MatchData:
        """Replace the athlete's MatchData with a fresh, unrecorded one."""
        self.stats_by_athlete[athlete_id] = create_empty_match_data()
        logger.info(f"Reset all skill stats for athlete {athlete_id}")
        return self.stats_by_athlete[athlete_id]
