"""
Application session for the VolleyStats system.

Holds the explicit application state (roster, stats store, selected athlete,
theme, analysis slot) and exposes the operations the presentation layer calls.
"""

import copy
import logging
import threading
from concurrent.futures import Future
from typing import Any, Dict, List, Optional

from models.analysis import AnalysisResult
from models.athlete import Athlete
from models.match_data import MatchData, create_empty_match_data
from models.score import ScoreValue
from roster.athlete_manager import AthleteManager, LastAthleteRemovalError
from tracking.attempt_manager import AttemptManager
from database.snapshot_store import SnapshotStore
from stats.stats_calculator import bar_chart_data
from session.feedback_tracker import FeedbackTracker

logger = logging.getLogger(__name__)

SAVED_BADGE = 'saved'


class SessionManager:
    """Single-user session state plus the operations that mutate it."""

    def __init__(self, config: Dict[str, Any], snapshot_store: SnapshotStore,
                 coach_analyzer=None, feedback: Optional[FeedbackTracker] = None):
        self.config = config
        self.snapshot_store = snapshot_store
        self.coach_analyzer = coach_analyzer
        self.feedback = feedback if feedback is not None else FeedbackTracker()

        self.attempt_manager = AttemptManager()
        self.athlete_manager: Optional[AthleteManager] = None
        self.selected_athlete_id: Optional[str] = None
        self.is_dark_mode = False

        self.analysis_result: Optional[AnalysisResult] = None
        self.is_analyzing = False
        self._analysis_token = 0
        self._analysis_lock = threading.Lock()

    def start(self) -> None:
        """Load the saved snapshot and theme, falling back to the default roster."""
        snapshot = self.snapshot_store.load()
        if snapshot:
            self.attempt_manager = AttemptManager(snapshot.stats_by_athlete)
            self.athlete_manager = AthleteManager(self.attempt_manager, self.config, snapshot.athletes)
        else:
            self.attempt_manager = AttemptManager()
            self.athlete_manager = AthleteManager(self.attempt_manager, self.config)
        self.selected_athlete_id = self.athlete_manager.athletes[0].id

        saved_theme = self.snapshot_store.load_theme()
        if saved_theme is None:
            saved_theme = self.config.get('theme', {}).get('default', 'light') == 'dark'
        self.is_dark_mode = saved_theme

        logger.info(f"Session started with {len(self.athletes)} athletes")

    # Roster

    @property
    def athletes(self) -> List[Athlete]:
        return self.athlete_manager.athletes

    @property
    def stats_by_athlete(self) -> Dict[str, MatchData]:
        return self.attempt_manager.stats_by_athlete

    def current_athlete(self) -> Athlete:
        return self.athlete_manager.get_athlete(self.selected_athlete_id) or self.athletes[0]

    def current_match_data(self) -> MatchData:
        return self.attempt_manager.get_match_data(self.selected_athlete_id) or create_empty_match_data()

    def select_athlete(self, athlete_id: str) -> Athlete:
        athlete = self.athlete_manager.require_athlete(athlete_id)
        self.selected_athlete_id = athlete.id
        return athlete

    def add_athlete(self, name: str, position: Optional[str] = None) -> Optional[Athlete]:
        """Add and select a new athlete, then persist. Blank names are ignored."""
        athlete = self.athlete_manager.add_athlete(name, position)
        if athlete is None:
            return None
        self.selected_athlete_id = athlete.id
        self._persist()
        return athlete

    def edit_current_athlete(self, name: str, position: Optional[str] = None) -> Optional[Athlete]:
        athlete = self.athlete_manager.edit_athlete(self.selected_athlete_id, name, position)
        if athlete is not None:
            self._persist()
        return athlete

    def delete_current_athlete(self) -> Optional[str]:
        """
        Remove the selected athlete and select the first remaining one.
        Returns a message for the user when the removal is refused.
        """
        removed_id = self.selected_athlete_id
        try:
            self.athlete_manager.remove_athlete(removed_id)
        except LastAthleteRemovalError as e:
            return str(e)

        self.feedback.discard(lambda key: isinstance(key, tuple) and key[0] == removed_id)
        self.selected_athlete_id = self.athletes[0].id
        self._discard_analysis()
        self._persist()
        return None

    def reset_current_stats(self) -> MatchData:
        match_data = self.attempt_manager.reset_skills_for_athlete(self.selected_athlete_id)
        self._discard_analysis()
        return match_data

    def full_reset(self) -> Athlete:
        """Drop every athlete and stat, purge the stored snapshot and start over."""
        self.snapshot_store.clear()
        athlete = self.athlete_manager.full_reset()
        self.selected_athlete_id = athlete.id
        self._discard_analysis()
        self.feedback.clear()
        return athlete

    # Attempts

    def _highlight(self, skill: str, index: Optional[int]) -> Optional[int]:
        if index is not None:
            duration = self.config.get('feedback', {}).get('highlight_ms', 600)
            self.feedback.mark((self.selected_athlete_id, skill, index), duration)
        return index

    def record_attempt(self, skill: str, index: int, value: ScoreValue) -> Optional[int]:
        return self._highlight(skill, self.attempt_manager.set_attempt(self.selected_athlete_id, skill, index, value))

    def quick_score(self, skill: str, value: ScoreValue) -> Optional[int]:
        return self._highlight(skill, self.attempt_manager.quick_add(self.selected_athlete_id, skill, value))

    def undo_last(self, skill: str) -> Optional[int]:
        return self._highlight(skill, self.attempt_manager.undo_last(self.selected_athlete_id, skill))

    def is_recently_updated(self, skill: str, index: int) -> bool:
        return self.feedback.is_active((self.selected_athlete_id, skill, index))

    def bar_chart_data(self) -> List[Dict[str, Any]]:
        return bar_chart_data(self.current_match_data())

    # Persistence and theme

    def _persist(self) -> None:
        self.snapshot_store.save(self.athletes, self.stats_by_athlete)

    def save(self) -> None:
        """Explicit save of the whole snapshot; shows the saved badge."""
        self._persist()
        self.feedback.mark(SAVED_BADGE, self.config.get('feedback', {}).get('saved_badge_ms', 2000))

    def is_saved_badge_visible(self) -> bool:
        return self.feedback.is_active(SAVED_BADGE)

    def toggle_theme(self) -> bool:
        self.is_dark_mode = not self.is_dark_mode
        self.snapshot_store.save_theme(self.is_dark_mode)
        return self.is_dark_mode

    # Coaching analysis

    def _discard_analysis(self) -> None:
        with self._analysis_lock:
            self._analysis_token += 1
            self.analysis_result = None
            self.is_analyzing = False

    def request_analysis(self) -> Future:
        """
        Ask the analyzer about the current athlete's stats in the background.
        The result lands in ``analysis_result`` unless a newer request, a
        deletion or a reset superseded it.
        """
        if self.coach_analyzer is None:
            raise RuntimeError("No coach analyzer configured")

        with self._analysis_lock:
            self._analysis_token += 1
            token = self._analysis_token
            self.is_analyzing = True

        future = self.coach_analyzer.analyze_async(copy.deepcopy(self.current_match_data()))
        stored: Future = Future()

        def _store_result(done: Future) -> None:
            error = done.exception()
            if error is not None:
                with self._analysis_lock:
                    if token == self._analysis_token:
                        self.is_analyzing = False
                stored.set_exception(error)
                return
            result = done.result()
            with self._analysis_lock:
                if token == self._analysis_token:
                    self.analysis_result = result
                    self.is_analyzing = False
                else:
                    logger.debug("Discarding superseded coach analysis")
            stored.set_result(result)

        future.add_done_callback(_store_result)
        return stored
