from dreamtrack.core.scoring.duration import calculate_sleep_duration
from dreamtrack.core.scoring.sleep_score import SleepScoreCalculator

__all__ = ['calculate_sleep_duration', 'SleepScoreCalculator']
