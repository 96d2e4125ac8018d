# dreamtrack/core/services/sleep_service.py
import logging
from datetime import datetime, timezone

from dreamtrack.core.analysis.sleep_analysis import SleepAnalyzer
from dreamtrack.core.analysis.sleep_metrics import calculate_dashboard_metrics
from dreamtrack.core.models.data_models import AppState, SleepForm, SleepRecord
from dreamtrack.core.recommendation.recommendation_generator import get_sleep_tips
from dreamtrack.core.scoring.duration import calculate_sleep_duration
from dreamtrack.core.scoring.sleep_score import SleepScoreCalculator
from dreamtrack.utils.constants import default_values

logger = logging.getLogger(__name__)


def format_timestamp(moment):
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix"""
    return moment.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class SleepService:
    def __init__(self, config=None, analyzer=None):
        self.config = config or {}
        self.calculator = SleepScoreCalculator(self.config)
        self.analyzer = analyzer or SleepAnalyzer(self.config, self.calculator)
        window = self.config.get('history', {}).get('window', default_values['history_window'])
        # At least the newest record is always kept
        self.history_window = max(1, int(window))

    def new_state(self):
        """Initial dashboard state"""
        app = self.config.get('app', {})
        return AppState(
            sleep_score=app.get('initial_sleep_score', default_values['initial_sleep_score']),
            last_night_sleep=app.get('initial_last_night_sleep', default_values['initial_last_night_sleep']),
        )

    def build_record(self, form: SleepForm, now=None) -> SleepRecord:
        """Turn a submitted form into the stored record shape"""
        now = now or datetime.now(timezone.utc)
        sleep_hours = calculate_sleep_duration(form.bedtime, form.wake_time)

        return SleepRecord(
            bedtime=form.bedtime,
            wake_time=form.wake_time,
            restlessness=form.restlessness,
            timestamp=format_timestamp(now),
            sleep_hours=sleep_hours,
            quality=self.calculator.record_quality(form.restlessness),
        )

    def log_sleep_entry(self, form: SleepForm, state: AppState = None, now=None):
        """
        Record a night and analyze it against the nights already in the state.

        Returns the new record and a new state; the given state is left untouched.
        """
        state = state or self.new_state()
        record = self.build_record(form, now)

        # History is what was known before this entry
        history = [r.to_sample() for r in state.recent_records[:self.history_window]]
        analysis = self.analyzer.analyze(record.sleep_hours, record.restlessness, history)

        new_state = state.model_copy(update={
            'recent_records': [record] + list(state.recent_records)[:self.history_window - 1],
            'sleep_score': analysis.score,
            'last_night_sleep': record.sleep_hours,
            'analysis': analysis,
        })

        logger.info(
            f"Sleep entry logged: {record.sleep_hours:.1f}h, restlessness {record.restlessness}, "
            f"score {analysis.score} ({analysis.quality.value})"
        )
        return record, new_state

    def evaluate(self, duration, restlessness, history=()):
        return self.analyzer.analyze(duration, restlessness, history)

    def get_tips(self, score):
        return get_sleep_tips(score, self.config)

    def dashboard(self, state: AppState):
        return calculate_dashboard_metrics(state.recent_records)
