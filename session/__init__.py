"""
Session package for VolleyStats system.
"""

from .feedback_tracker import FeedbackTracker
from .session_manager import SessionManager

__all__ = ['FeedbackTracker', 'SessionManager']
