import logging
from typing import Dict, Iterable, Optional, Union

from dreamtrack.core.analysis.sleep_metrics import calculate_historical_averages
from dreamtrack.core.models.data_models import SleepSample
from dreamtrack.core.models.output_models import SleepAnalysis
from dreamtrack.core.recommendation.recommendation_generator import (
    generate_insights,
    generate_recommendations,
)
from dreamtrack.core.scoring.sleep_score import SleepScoreCalculator

logger = logging.getLogger(__name__)


class SleepAnalyzer:
    """
    Evaluates one night of sleep against recent history.

    Holds only configuration, so a single instance can serve concurrent callers.
    """

    def __init__(self, config: Optional[Dict] = None, calculator: Optional[SleepScoreCalculator] = None):
        self.config = config or {}
        self.calculator = calculator or SleepScoreCalculator(self.config)

    def analyze(
        self,
        duration: float,
        restlessness: int,
        history: Iterable[Union[SleepSample, Dict]] = (),
    ) -> SleepAnalysis:
        """
        Score a night and generate insights and recommendations.

        Restlessness is expected in [0, 10]; it is not checked here.

        Args:
            duration: Hours slept
            restlessness: Restlessness rating
            history: Previous nights as SleepSample or dicts

        Returns:
            SleepAnalysis: Score, quality band, insights and recommendations
        """
        history = list(history)
        averages = calculate_historical_averages(history)

        score = self.calculator.calculate_score(duration, restlessness)
        quality = self.calculator.classify_quality(duration, restlessness)

        analysis = SleepAnalysis(
            duration=duration,
            quality=quality,
            score=score,
            insights=generate_insights(duration, restlessness, averages, self.config),
            recommendations=generate_recommendations(duration, restlessness, self.config),
        )

        logger.debug(
            f"Analyzed {duration:.2f}h / restlessness {restlessness} against "
            f"{len(history)} samples: {quality.value}, score {score}"
        )
        return analysis


def analyze_sleep(duration, restlessness, history=(), config=None) -> SleepAnalysis:
    """Evaluate one night with a default-configured analyzer"""
    return SleepAnalyzer(config).analyze(duration, restlessness, history)
