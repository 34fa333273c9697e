"""
Athlete roster management for the VolleyStats system.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from models.athlete import Athlete
from models.score import POSITIONS
from tracking.attempt_manager import AttemptManager
from utils.text_utils import TextUtils

logger = logging.getLogger(__name__)


class RosterError(Exception):
    """Raised for roster operations on athletes that do not exist."""


class LastAthleteRemovalError(RosterError):
    """Raised when a removal would leave the roster empty."""


class AthleteManager:
    """Manages the athlete roster and keeps the stats store keyed to it."""

    def __init__(self, attempt_manager: AttemptManager, config: Dict[str, Any],
                 athletes: Optional[List[Athlete]] = None):
        self.attempt_manager = attempt_manager
        self.config = config
        self.athletes: List[Athlete] = list(athletes) if athletes else []
        if not self.athletes:
            self._init_default_roster()
        self.attempt_manager.retain_only(self.athlete_ids())

    def _init_default_roster(self) -> None:
        """Reset to the single default athlete."""
        default = self.config.get('roster', {}).get('default_athlete', {})
        athlete = Athlete(
            id=str(default.get('id', '1')),
            name=default.get('name', 'Sample Athlete'),
            position=self._resolve_position(default.get('position'))
        )
        self.athletes = [athlete]
        logger.info(f"Initialized roster with default athlete {athlete.name}")

    def _resolve_position(self, position: Optional[str]) -> str:
        if position in POSITIONS:
            return position
        default_position = self.config.get('roster', {}).get('default_position', 'Outside Hitter')
        if position:
            logger.warning(f"Unknown position '{position}', using {default_position}")
        return default_position if default_position in POSITIONS else POSITIONS[0]

    def _generate_id(self) -> str:
        """Millisecond timestamp id, bumped until it is unused."""
        existing = set(self.athlete_ids())
        candidate = int(time.time() * 1000)
        while str(candidate) in existing:
            candidate += 1
        return str(candidate)

    def athlete_ids(self) -> List[str]:
        return [athlete.id for athlete in self.athletes]

    def get_athlete(self, athlete_id: str) -> Optional[Athlete]:
        for athlete in self.athletes:
            if athlete.id == athlete_id:
                return athlete
        return None

    def require_athlete(self, athlete_id: str) -> Athlete:
        athlete = self.get_athlete(athlete_id)
        if athlete is None:
            raise RosterError(f"Unknown athlete id '{athlete_id}'")
        return athlete

    def add_athlete(self, name: str, position: Optional[str] = None) -> Optional[Athlete]:
        """
        Append a new athlete with empty stats.
        Returns None without changes when the name is blank.
        """
        clean_name = TextUtils.clean_name(name)
        if not clean_name:
            logger.debug("Ignoring athlete without a name")
            return None

        athlete = Athlete(
            id=self._generate_id(),
            name=clean_name,
            position=self._resolve_position(position)
        )
        self.athletes.append(athlete)
        self.attempt_manager.ensure_match_data(athlete.id)

        logger.info(f"Added athlete {athlete.name} ({athlete.position})")
        return athlete

    def edit_athlete(self, athlete_id: str, name: str, position: Optional[str] = None) -> Optional[Athlete]:
        """
        Replace an athlete's name and position; id and stats are untouched.
        Returns None without changes when the name is blank.
        """
        athlete = self.require_athlete(athlete_id)

        clean_name = TextUtils.clean_name(name)
        if not clean_name:
            logger.debug(f"Ignoring blank name for athlete {athlete_id}")
            return None

        athlete.name = clean_name
        athlete.position = self._resolve_position(position or athlete.position)

        logger.info(f"Updated athlete {athlete.id}: {athlete.name} ({athlete.position})")
        return athlete

    def remove_athlete(self, athlete_id: str) -> Athlete:
        """Remove an athlete together with its stats."""
        athlete = self.require_athlete(athlete_id)

        if len(self.athletes) <= 1:
            logger.warning(f"Refusing to remove {athlete.name}: last athlete on the roster")
            raise LastAthleteRemovalError("Cannot remove the only registered athlete.")

        self.athletes = [a for a in self.athletes if a.id != athlete_id]
        self.attempt_manager.drop_match_data(athlete_id)

        logger.info(f"Removed athlete {athlete.name}")
        return athlete

    def full_reset(self) -> Athlete:
        """Clear roster and stats and return the new default athlete."""
        self.attempt_manager.clear()
        self._init_default_roster()
        self.attempt_manager.retain_only(self.athlete_ids())
        logger.info("Roster and stats fully reset")
        return self.athletes[0]
