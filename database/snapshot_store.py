"""
Snapshot persistence for the roster and its stats.
"""

import json
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from models.athlete import Athlete
from models.match_data import MatchData, SkillStats, create_empty_skill_stats
from models.score import ScoreValue, SKILL_NAMES, POSITIONS, MAX_ATTEMPTS
from stats.stats_calculator import apply_stats
from utils.text_utils import TextUtils

logger = logging.getLogger(__name__)

DARK_THEME = 'dark'
LIGHT_THEME = 'light'


@dataclass
class Snapshot:
    """Whole persisted state: roster plus stats keyed by athlete id."""
    athletes: List[Athlete]
    stats_by_athlete: Dict[str, MatchData]


class SnapshotStore:
    """
    Saves and loads the whole roster/stats snapshot under one storage key.
    ``storage`` is anything with get_item/set_item/remove_item.
    """

    def __init__(self, storage, data_key: str = 'volleyball_stats_pro_data',
                 theme_key: str = 'volleyball_stats_pro_theme', default_position: str = 'Outside Hitter'):
        self.storage = storage
        self.default_position = default_position if default_position in POSITIONS else POSITIONS[0]
        self.data_key = data_key
        self.theme_key = theme_key

    def save(self, athletes: List[Athlete], stats_by_athlete: Dict[str, MatchData]) -> None:
        """Overwrite the stored snapshot."""
        payload = {
            'athletes': [athlete.to_dict() for athlete in athletes],
            'statsByAthlete': {
                athlete_id: {skill: stats.to_dict() for skill, stats in match_data.items()}
                for athlete_id, match_data in stats_by_athlete.items()
            }
        }
        self.storage.set_item(self.data_key, json.dumps(payload, ensure_ascii=False))
        logger.info(f"Saved snapshot with {len(athletes)} athletes")

    def load(self) -> Optional[Snapshot]:
        """Return the stored snapshot, or None if absent or unreadable."""
        raw = self.storage.get_item(self.data_key)
        if raw is None:
            logger.info("No saved snapshot found")
            return None

        try:
            snapshot = self._decode(json.loads(raw))
        except (json.JSONDecodeError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(f"Error loading saved snapshot: {e}")
            return None

        if snapshot is None:
            logger.warning("Saved snapshot has an empty roster, ignoring it")
            return None

        logger.info(f"Loaded snapshot with {len(snapshot.athletes)} athletes")
        return snapshot

    def clear(self) -> None:
        """Purge the stored snapshot. The theme preference is kept."""
        self.storage.remove_item(self.data_key)

    def save_theme(self, is_dark: bool) -> None:
        self.storage.set_item(self.theme_key, DARK_THEME if is_dark else LIGHT_THEME)

    def load_theme(self) -> Optional[bool]:
        """True for dark, False for light, None when nothing valid is stored."""
        value = self.storage.get_item(self.theme_key)
        if value == DARK_THEME:
            return True
        if value == LIGHT_THEME:
            return False
        if value is not None:
            logger.warning(f"Ignoring unknown theme preference '{value}'")
        return None

    def _decode_athlete(self, item: dict) -> Optional[Athlete]:
        """Validate one stored athlete; None when it has no usable name."""
        name = item.get('name')
        clean_name = TextUtils.clean_name(name) if isinstance(name, str) else ""
        if not clean_name:
            logger.warning(f"Skipping athlete {item.get('id')} without a name")
            return None

        position = item.get('position')
        if position not in POSITIONS:
            logger.warning(f"Unknown position '{position}' for athlete {item.get('id')}, "
                           f"using {self.default_position}")
            position = self.default_position

        return Athlete.from_dict({'id': item['id'], 'name': clean_name, 'position': position})

    def _decode(self, payload: dict) -> Optional[Snapshot]:
        athletes = []
        seen_ids = set()
        for item in payload['athletes']:
            athlete = self._decode_athlete(item)
            if athlete is None:
                continue
            if athlete.id in seen_ids:
                logger.warning(f"Skipping duplicate athlete id {athlete.id}")
                continue
            seen_ids.add(athlete.id)
            athletes.append(athlete)

        if not athletes:
            return None

        raw_stats = payload.get('statsByAthlete') or {}
        stats_by_athlete = {}
        for athlete in athletes:
            stats_by_athlete[athlete.id] = self._decode_match_data(raw_stats.get(athlete.id) or {})

        orphaned = set(raw_stats) - seen_ids
        if orphaned:
            logger.warning(f"Dropping stats for {len(orphaned)} unknown athlete ids")

        return Snapshot(athletes=athletes, stats_by_athlete=stats_by_athlete)

    @staticmethod
    def _decode_match_data(raw_match_data: dict) -> MatchData:
        """Rebuild all six skills, recomputing aggregates from the attempts."""
        match_data = {}
        for skill in SKILL_NAMES:
            raw_skill = raw_match_data.get(skill)
            if raw_skill is None:
                match_data[skill] = create_empty_skill_stats()
                continue

            skill_stats = SkillStats.from_dict(raw_skill)
            attempts = skill_stats.attempts[:MAX_ATTEMPTS]
            attempts.extend([ScoreValue.EMPTY] * (MAX_ATTEMPTS - len(attempts)))
            skill_stats.attempts = attempts
            match_data[skill] = apply_stats(skill_stats)
        return match_data
