"""
Report generator for the VolleyStats system.
"""

import os
import pandas as pd
import logging
from typing import Dict, List
from models.athlete import Athlete
from models.match_data import MatchData
from models.score import ScoreValue, SKILL_NAMES, SCORE_OPTIONS, MAX_ATTEMPTS
from stats.stats_calculator import recorded_count, overall_efficiency
from utils.text_utils import TextUtils

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    'Athlete ID', 'Athlete', 'Position', 'Skill', 'Recorded', 'Successes', 'Errors', 'Efficiency', 'Sheet'
]

SCORE_LABELS = {option.value: option.label for option in SCORE_OPTIONS}


def format_sheet(attempts) -> str:
    """Slot-by-slot labels, '-' for EMPTY, e.g. 'Excellent|Error|-'."""
    return '|'.join(SCORE_LABELS.get(ScoreValue(value), '-') for value in attempts)


class ReportGenerator:
    """Generates CSV reports of recorded attempts."""

    def _athlete_rows(self, athlete: Athlete, match_data: MatchData) -> List[Dict]:
        rows = []
        for skill in SKILL_NAMES:
            stats = match_data[skill]
            rows.append({
                'Athlete ID': athlete.id,
                'Athlete': athlete.name,
                'Position': athlete.position,
                'Skill': skill,
                'Recorded': f"{recorded_count(stats.attempts)}/{MAX_ATTEMPTS}",
                'Successes': stats.success_count,
                'Errors': stats.error_count,
                'Efficiency': round(stats.efficiency, 1),
                'Sheet': format_sheet(stats.attempts)
            })
        return rows

    def generate_athlete_report(self, athlete: Athlete, match_data: MatchData, output_file: str) -> int:
        """
        Generate a per-skill report for one athlete.
        Returns the number of rows written.
        """
        df = pd.DataFrame(self._athlete_rows(athlete, match_data), columns=REPORT_COLUMNS)
        df.to_csv(output_file, index=False, encoding='utf-8')

        logger.info(f"Generated athlete report for {athlete.name} "
                    f"(overall efficiency {overall_efficiency(match_data):.1f}%): {output_file}")
        return len(df)

    def generate_roster_report(self, athletes: List[Athlete], stats_by_athlete: Dict[str, MatchData],
                               output_file: str) -> int:
        """Generate a report with one row per athlete and skill."""
        data = []
        for athlete in athletes:
            data.extend(self._athlete_rows(athlete, stats_by_athlete[athlete.id]))

        if not data:
            logger.warning("No athletes found for report generation")
            return 0

        df = pd.DataFrame(data, columns=REPORT_COLUMNS)
        df.to_csv(output_file, index=False, encoding='utf-8')

        logger.info(f"Generated roster report with {len(athletes)} athletes: {output_file}")
        return len(df)

    def skill_summary(self, athletes: List[Athlete], stats_by_athlete: Dict[str, MatchData]) -> pd.DataFrame:
        """
        Roster-wide totals per skill. Efficiency is the mean over athletes
        with at least one recorded attempt in that skill.
        """
        data = []
        for athlete in athletes:
            for skill, stats in stats_by_athlete[athlete.id].items():
                recorded = recorded_count(stats.attempts)
                data.append({
                    'Skill': skill,
                    'Recorded': recorded,
                    'Successes': stats.success_count,
                    'Errors': stats.error_count,
                    'Efficiency': stats.efficiency if recorded else None
                })

        df = pd.DataFrame(data, columns=['Skill', 'Recorded', 'Successes', 'Errors', 'Efficiency'])
        df['Efficiency'] = pd.to_numeric(df['Efficiency'])
        summary = df.groupby('Skill', sort=False).agg(
            Recorded=('Recorded', 'sum'),
            Successes=('Successes', 'sum'),
            Errors=('Errors', 'sum'),
            Efficiency=('Efficiency', 'mean')
        )
        summary['Efficiency'] = summary['Efficiency'].fillna(0.0).round(1)
        return summary.reindex(list(SKILL_NAMES)).fillna(0)

    def generate_all_reports(self, athletes: List[Athlete], stats_by_athlete: Dict[str, MatchData],
                             output_directory: str = "reports") -> Dict[str, int]:
        """Generate the roster report, the skill summary and one report per athlete."""
        os.makedirs(output_directory, exist_ok=True)

        report_results = {}

        roster_report = os.path.join(output_directory, "roster_report.csv")
        report_results['roster'] = self.generate_roster_report(athletes, stats_by_athlete, roster_report)

        summary_report = os.path.join(output_directory, "skill_summary.csv")
        summary = self.skill_summary(athletes, stats_by_athlete)
        summary.to_csv(summary_report, encoding='utf-8')
        report_results['skill_summary'] = len(summary)

        for athlete in athletes:
            safe_name = TextUtils.slugify(athlete.name) or 'athlete'
            athlete_report = os.path.join(output_directory, f"athlete_{athlete.id}_{safe_name}.csv")
            report_results[f'athlete_{athlete.id}'] = self.generate_athlete_report(
                athlete, stats_by_athlete[athlete.id], athlete_report
            )

        logger.info(f"Generated {len(report_results)} reports in {output_directory}")
        return report_results
