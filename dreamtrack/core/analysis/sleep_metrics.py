"""
Module for calculating sleep metrics and statistics for the dashboard.
"""

import logging

import pandas as pd

from dreamtrack.core.models.data_models import SleepRecord, SleepSample
from dreamtrack.core.models.output_models import DashboardDay, DashboardSummary, LastNight
from dreamtrack.core.scoring.sleep_score import round_half_up

logger = logging.getLogger(__name__)


def calculate_historical_averages(history):
    """
    Calculate average duration and restlessness over past samples.

    Args:
        history: List of SleepSample (or dicts with duration and restlessness)

    Returns:
        dict: avg_duration and avg_restlessness, or None when there is no history
    """
    if not history:
        return None

    samples = [s if isinstance(s, SleepSample) else SleepSample(**s) for s in history]
    data = pd.DataFrame([s.model_dump() for s in samples])

    return {
        'avg_duration': float(data['duration'].mean()),
        'avg_restlessness': float(data['restlessness'].mean()),
    }


def records_to_frame(records):
    """Build a DataFrame from sleep records, keeping their order"""
    columns = ['bedtime', 'wake_time', 'restlessness', 'timestamp', 'sleep_hours', 'quality']
    if not records:
        return pd.DataFrame(columns=columns)

    rows = [r if isinstance(r, SleepRecord) else SleepRecord(**r) for r in records]
    data = pd.DataFrame([r.model_dump() for r in rows], columns=columns)
    data['timestamp'] = pd.to_datetime(data['timestamp'], utc=True, format='ISO8601')
    return data


def calculate_dashboard_metrics(records):
    """
    Calculate the figures shown on the trend dashboard.

    Args:
        records: Recent SleepRecord list, newest first

    Returns:
        DashboardSummary: Counts, averages, last night and per-day trend bars

    Trend day labels are the UTC weekday of each record timestamp, so they do
    not depend on the server's local timezone.
    """
    data = records_to_frame(records)

    if data.empty:
        return DashboardSummary()

    # Overall averages
    weekly_average = float(data['sleep_hours'].mean())
    average_quality = round_half_up(float(data['quality'].mean()))

    latest = data.iloc[0]
    last_night = LastNight(bedtime=latest['bedtime'], wake_time=latest['wake_time'])

    trend = [
        DashboardDay(
            day=row.timestamp.strftime('%a'),
            sleep_hours=float(row.sleep_hours),
            quality=int(row.quality),
            bedtime=row.bedtime,
            wake_time=row.wake_time,
        )
        for row in data.itertuples(index=False)
    ]

    logger.debug(f"Dashboard metrics for {len(data)} records: avg {weekly_average:.1f}h")

    return DashboardSummary(
        days_recorded=len(data),
        weekly_average_hours=weekly_average,
        average_quality=average_quality,
        last_night=last_night,
        trend=trend,
    )
