"""
Text processing utilities for the VolleyStats system.
"""

import re


class TextUtils:
    """Utilities for text processing and normalization."""

    @staticmethod
    def clean_name(name: str) -> str:
        """Trim a display name and collapse internal whitespace."""
        if not name:
            return ""

        return re.sub(r'\s+', ' ', name).strip()

    @staticmethod
    def slugify(text: str) -> str:
        """Lowercase ASCII slug used for report file names."""
        if not text:
            return ""

        normalized = text.lower().strip()
        normalized = re.sub(r'[^a-z0-9]+', '_', normalized)

        return normalized.strip('_')
