# dreamtrack/core/models/output_models.py

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dreamtrack.utils.constants import tip_icons


class QualityBand(str, Enum):
    POOR = "Poor"
    AVERAGE = "Average"
    GOOD = "Good"


class SleepAnalysis(BaseModel):
    """Result of evaluating one night against recent history"""
    duration: float
    quality: QualityBand
    score: int = Field(..., ge=0, le=100)
    insights: List[str] = Field(default_factory=list, max_length=2)
    recommendations: List[str] = Field(default_factory=list, max_length=3)


class SleepTip(BaseModel):
    """Static sleep hygiene tip shown for a score band"""
    title: str
    description: str
    icon: str

    @field_validator('icon')
    @classmethod
    def validate_icon(cls, v):
        if v not in tip_icons:
            raise ValueError(f'Unknown tip icon: {v}')
        return v


class LastNight(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bedtime: str
    wake_time: str = Field(..., alias="wakeTime")


class DashboardDay(BaseModel):
    """One bar of the sleep pattern chart"""
    model_config = ConfigDict(populate_by_name=True)

    day: str
    sleep_hours: float = Field(..., alias="sleepHours")
    quality: int = Field(..., ge=0, le=100)
    bedtime: str
    wake_time: str = Field(..., alias="wakeTime")


class DashboardSummary(BaseModel):
    """Aggregated figures behind the trend dashboard"""
    model_config = ConfigDict(populate_by_name=True)

    days_recorded: int = Field(0, ge=0, alias="daysRecorded")
    weekly_average_hours: float = Field(0.0, ge=0.0, alias="weeklyAverageHours")
    average_quality: int = Field(0, ge=0, le=100, alias="averageQuality")
    last_night: Optional[LastNight] = Field(None, alias="lastNight")
    trend: List[DashboardDay] = []
