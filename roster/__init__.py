"""
Roster package for VolleyStats system.
"""

from .athlete_manager import AthleteManager, RosterError, LastAthleteRemovalError

__all__ = ['AthleteManager', 'RosterError', 'LastAthleteRemovalError']
