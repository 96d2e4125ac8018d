# dreamtrack/core/models/data_models.py

import re
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dreamtrack.core.models.output_models import SleepAnalysis
from dreamtrack.utils.constants import default_values

TIME_PATTERN = re.compile(r'^\d{2}:\d{2}(:\d{2})?$')
MAX_RESTLESSNESS = default_values['max_restlessness']


def validate_clock_time(value: str) -> str:
    """Check that a value is a 24h HH:MM (or HH:MM:SS) clock time"""
    if not isinstance(value, str) or not TIME_PATTERN.match(value):
        raise ValueError('Time must use the HH:MM format')
    fmt = '%H:%M:%S' if value.count(':') == 2 else '%H:%M'
    try:
        datetime.strptime(value, fmt)
    except ValueError:
        raise ValueError(f'Invalid clock time: {value}')
    return value


# Sleep Data Models
class SleepSample(BaseModel):
    """One historical night used for averaging"""
    model_config = ConfigDict(frozen=True)

    duration: float = Field(..., ge=0.0)
    restlessness: int = Field(..., ge=0, le=MAX_RESTLESSNESS)


class SleepForm(BaseModel):
    """Sleep entry as submitted from the record form"""
    model_config = ConfigDict(populate_by_name=True)

    bedtime: str
    wake_time: str = Field(..., alias='wakeTime')
    restlessness: int = Field(0, ge=0, le=MAX_RESTLESSNESS)

    @field_validator('bedtime', 'wake_time')
    @classmethod
    def validate_times(cls, v):
        return validate_clock_time(v)


class SleepRecord(BaseModel):
    """Stored shape of one recorded night"""
    model_config = ConfigDict(populate_by_name=True)

    bedtime: str
    wake_time: str = Field(..., alias='wakeTime')
    restlessness: int = Field(..., ge=0, le=MAX_RESTLESSNESS)
    timestamp: str
    sleep_hours: float = Field(..., ge=0.0, alias='sleepHours')
    # Restlessness-derived scalar, not the analysis quality band
    quality: int = Field(..., ge=0, le=100)

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v):
        try:
            datetime.fromisoformat(v.replace('Z', '+00:00'))
        except ValueError:
            raise ValueError('Timestamp must be an ISO-8601 string')
        return v

    def to_sample(self) -> SleepSample:
        return SleepSample(duration=self.sleep_hours, restlessness=self.restlessness)


class AppState(BaseModel):
    """Dashboard state passed into and returned from the sleep service"""
    model_config = ConfigDict(populate_by_name=True)

    sleep_score: int = Field(default_values['initial_sleep_score'], ge=0, le=100, alias='sleepScore')
    last_night_sleep: float = Field(
        default_values['initial_last_night_sleep'], ge=0.0, alias='lastNightSleep'
    )
    recent_records: List[SleepRecord] = Field([], alias='recentRecords')  # Newest first
    analysis: Optional[SleepAnalysis] = None
