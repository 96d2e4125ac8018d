"""Global test fixtures for dreamtrack tests"""
from datetime import datetime, timezone

import pytest

from dreamtrack.core.analysis.sleep_analysis import SleepAnalyzer
from dreamtrack.core.models.data_models import SleepForm, SleepRecord, SleepSample
from dreamtrack.core.scoring.sleep_score import SleepScoreCalculator
from dreamtrack.core.services.sleep_service import SleepService


# ============================================================================
# Component Fixtures
# ============================================================================

@pytest.fixture
def calculator():
    """Default-configured score calculator"""
    return SleepScoreCalculator()


@pytest.fixture
def analyzer():
    """Default-configured analyzer"""
    return SleepAnalyzer()


@pytest.fixture
def service():
    """Sleep service with built-in defaults"""
    return SleepService()


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def fixed_now():
    """Monday 2026-10-19 08:00 UTC"""
    return datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_form():
    """Overnight entry of 8 hours with low restlessness"""
    return SleepForm(bedtime="23:00", wake_time="07:00", restlessness=2)


@pytest.fixture
def sample_history():
    """Two previous nights averaging 7 hours and restlessness 3"""
    return [
        SleepSample(duration=8.0, restlessness=2),
        SleepSample(duration=6.0, restlessness=4),
    ]


@pytest.fixture
def sample_records():
    """Three recent records, newest first"""
    return [
        SleepRecord(
            bedtime="23:00", wake_time="07:00", restlessness=2,
            timestamp="2026-10-19T08:00:00.000Z", sleep_hours=8.0, quality=80
        ),
        SleepRecord(
            bedtime="00:30", wake_time="07:00", restlessness=5,
            timestamp="2026-10-18T08:00:00.000Z", sleep_hours=6.5, quality=50
        ),
        SleepRecord(
            bedtime="23:45", wake_time="07:00", restlessness=3,
            timestamp="2026-10-17T08:00:00.000Z", sleep_hours=7.25, quality=75
        ),
    ]
