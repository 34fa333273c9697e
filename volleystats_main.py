"""
Main application for the VolleyStats system.
"""

import logging
import sys

from config.config_manager import ConfigManager
from database.database_manager import DatabaseManager
from database.snapshot_store import SnapshotStore
from analysis.coach_analyzer import CoachAnalyzer
from session.session_manager import SessionManager
from stats.stats_calculator import format_efficiency, overall_efficiency
from reports.report_generator import ReportGenerator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_session(config_file: str = "config.yaml") -> SessionManager:
    """Wire configuration, storage and analyzer into a started session."""
    config = ConfigManager.load_config(config_file)
    storage_config = config['storage']

    db_manager = DatabaseManager(storage_config['db_path'])
    snapshot_store = SnapshotStore(
        db_manager, storage_config['data_key'], storage_config['theme_key'],
        config['roster']['default_position']
    )
    coach_analyzer = CoachAnalyzer(config)

    session = SessionManager(config, snapshot_store, coach_analyzer)
    session.start()
    return session


def main(config_file: str = "config.yaml") -> None:
    """Main application entry point."""
    try:
        logger.info("Starting VolleyStats...")

        session = build_session(config_file)
        logger.info(f"Storage statistics: {session.snapshot_store.storage.get_database_stats()}")

        for athlete in session.athletes:
            match_data = session.stats_by_athlete[athlete.id]
            logger.info(f"{athlete.name} ({athlete.position}): "
                        f"overall efficiency {format_efficiency(overall_efficiency(match_data))}%")

        for bar in session.bar_chart_data():
            logger.info(f"{session.current_athlete().name} - {bar['skill']}: {bar['efficiency']}%")

        logger.info("Generating reports...")
        report_generator = ReportGenerator()
        output_dir = session.config.get('reports', {}).get('output_dir', 'reports')
        report_results = report_generator.generate_all_reports(
            session.athletes, session.stats_by_athlete, output_dir
        )
        logger.info(f"Generated reports: {report_results}")

        session.coach_analyzer.close()
        logger.info("VolleyStats completed successfully")

    except Exception as e:
        logger.error(f"Error in VolleyStats: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "config.yaml")
