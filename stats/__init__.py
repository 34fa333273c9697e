"""
Statistics package for VolleyStats system.
"""

from .stats_calculator import (
    calculate_stats, apply_stats, recorded_count, format_efficiency,
    efficiency_band, bar_chart_data, overall_efficiency
)

__all__ = [
    'calculate_stats', 'apply_stats', 'recorded_count', 'format_efficiency',
    'efficiency_band', 'bar_chart_data', 'overall_efficiency'
]
