import logging
import math
from typing import Dict, Optional

import numpy as np

from dreamtrack.core.models.output_models import QualityBand
from dreamtrack.utils.constants import scoring_defaults, quality_band_thresholds

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up"""
    return int(math.floor(value + 0.5))


class SleepScoreCalculator:
    """
    Sleep score calculator for duration and restlessness entries.
    All score and quality band calculations should use this class.
    """

    def __init__(self, config: Optional[Dict] = None):
        """Initialize the calculator with score weights and band thresholds"""
        config = config or {}
        self.scoring = {**scoring_defaults, **config.get('scoring', {})}
        self.bands = {**quality_band_thresholds, **config.get('quality_bands', {})}

        logger.info("Sleep score calculator initialized")

    def base_score(self, restlessness: int) -> float:
        """Score from restlessness alone, 100 for a calm night"""
        return self.scoring['max_score'] - restlessness * self.scoring['restlessness_weight']

    def duration_score(self, duration: float) -> float:
        """Score from duration, 0 at the floor and linear up to 100"""
        raw = (duration - self.scoring['duration_floor_hours']) * self.scoring['duration_slope']
        return float(np.clip(raw, self.scoring['min_score'], self.scoring['max_score']))

    def calculate_score(self, duration: float, restlessness: int) -> int:
        """
        Calculate the 0-100 sleep score.

        The score is the half-up rounded mean of the restlessness and duration
        components, clamped to the score range even for out of range input.

        Args:
            duration: Hours slept
            restlessness: Restlessness rating, expected in [0, 10]

        Returns:
            int: Sleep score
        """
        base = self.base_score(restlessness)
        duration_component = self.duration_score(duration)
        score = round_half_up((base + duration_component) / 2)

        logger.debug(f"  Base score: {base}")
        logger.debug(f"  Duration score: {duration_component}")

        final_score = int(min(self.scoring['max_score'], max(self.scoring['min_score'], score)))
        logger.debug(f"  Final score: {final_score}")
        return final_score

    def classify_quality(self, duration: float, restlessness: int) -> QualityBand:
        """Classify a night into a quality band with the threshold table"""
        if (duration < self.bands['poor_duration_below']
                or restlessness > self.bands['poor_restlessness_above']):
            return QualityBand.POOR
        if (duration < self.bands['average_duration_below']
                or restlessness > self.bands['average_restlessness_above']):
            return QualityBand.AVERAGE
        return QualityBand.GOOD

    def record_quality(self, restlessness: int) -> int:
        """Quality percentage stored with a record, derived from restlessness only"""
        quality = self.base_score(restlessness)
        return int(min(self.scoring['max_score'], max(self.scoring['min_score'], quality)))
