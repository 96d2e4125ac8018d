# dreamtrack/config/config_manager.py
import copy
import logging
import os

import yaml

from dreamtrack.utils.constants import (
    scoring_defaults,
    quality_band_thresholds,
    insight_thresholds,
    recommendation_thresholds,
    insight_messages,
    recommendation_messages,
    default_values,
    tip_score_bands,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'config/config.yaml'

DEFAULT_CONFIG = {
    'scoring': scoring_defaults,
    'quality_bands': quality_band_thresholds,
    'insights': {**insight_thresholds, 'messages': insight_messages},
    'recommendations': {**recommendation_thresholds, 'messages': recommendation_messages},
    'history': {'window': default_values['history_window']},
    'app': {
        'initial_sleep_score': default_values['initial_sleep_score'],
        'initial_last_night_sleep': default_values['initial_last_night_sleep'],
    },
    'tips': tip_score_bands,
    'api': {'host': '0.0.0.0', 'port': 8000},
}


def _merge(base, override):
    """Recursively merge override into a copy of base"""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigManager:
    """Central configuration manager"""

    def __init__(self, config_path=None):
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self.config = self._load_config(explicit=config_path is not None)

    def _load_config(self, explicit=False):
        """Load configuration from file, layered over the built-in defaults"""
        if not os.path.exists(self.config_path):
            if explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
            logger.info(f"No configuration file at {self.config_path}, using defaults")
            return copy.deepcopy(DEFAULT_CONFIG)

        with open(self.config_path, 'r') as file:
            loaded = yaml.safe_load(file) or {}
        logger.info(f"Loaded configuration from {self.config_path}")
        return _merge(DEFAULT_CONFIG, loaded)

    def get(self, key, default=None):
        """Get configuration value"""
        # Support nested keys with dot notation
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value
