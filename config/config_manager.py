"""
Configuration management for the VolleyStats system.
"""

import copy
import logging
import yaml
from typing import Dict, Any

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading and provides default values."""

    @staticmethod
    def load_config(config_file: str) -> Dict[str, Any]:
        """Load configuration from YAML file, filling missing keys from the defaults."""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning(f"Configuration file '{config_file}' not found. Using default configuration.")
            return ConfigManager.get_default_config()
        except yaml.YAMLError as e:
            logger.warning(f"Error parsing configuration file: {e}. Using default configuration.")
            return ConfigManager.get_default_config()

        if not isinstance(loaded, dict):
            logger.warning(f"Configuration file '{config_file}' is not a mapping. Using default configuration.")
            return ConfigManager.get_default_config()

        return ConfigManager.merge_with_defaults(loaded)

    @staticmethod
    def merge_with_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
        """Shallow merge per top-level section."""
        merged = ConfigManager.get_default_config()
        for section, values in config.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = values
        return merged

    @staticmethod
    def get_default_config() -> Dict[str, Any]:
        """Return default configuration if config file is not available."""
        return copy.deepcopy({
            'storage': {
                'db_path': 'volleystats.db',
                'data_key': 'volleyball_stats_pro_data',
                'theme_key': 'volleyball_stats_pro_theme'
            },
            'roster': {
                'default_athlete': {'id': '1', 'name': 'Sample Athlete', 'position': 'Setter'},
                'default_position': 'Outside Hitter'
            },
            'analysis': {
                'model': 'gemini-3-flash-preview',
                'api_key_env': 'API_KEY',
                'endpoint': 'https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent',
                'timeout': 30,
                'language': 'pt-BR'
            },
            'feedback': {
                'highlight_ms': 600,
                'saved_badge_ms': 2000
            },
            'theme': {
                'default': 'light'
            },
            'reports': {
                'output_dir': 'reports'
            }
        })
