"""
Coaching analysis result model.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AnalysisFailure(Enum):
    """Why an analysis fell back to a fixed message."""
    MISSING_API_KEY = 'missing_api_key'
    REQUEST_FAILED = 'request_failed'
    INVALID_RESPONSE = 'invalid_response'
    EMPTY_RESPONSE = 'empty_response'


@dataclass(frozen=True)
class AnalysisResult:
    """Text shown to the user, plus the failure kind when it is a fallback message."""
    text: str
    failure_reason: Optional[AnalysisFailure] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure_reason is None
