# dreamtrack/api/routes/sleep_routes.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field, field_validator

from dreamtrack.config.config_manager import ConfigManager
from dreamtrack.core.models.data_models import (
    MAX_RESTLESSNESS,
    AppState,
    SleepForm,
    SleepRecord,
    SleepSample,
    validate_clock_time,
)
from dreamtrack.core.models.output_models import DashboardSummary, SleepAnalysis, SleepTip
from dreamtrack.core.scoring.duration import calculate_sleep_duration
from dreamtrack.core.services.sleep_service import SleepService

logger = logging.getLogger(__name__)


class DurationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bedtime: str
    wake_time: str = Field(..., alias="wakeTime")

    @field_validator('bedtime', 'wake_time')
    @classmethod
    def validate_times(cls, v):
        return validate_clock_time(v)


class AnalyzeRequest(BaseModel):
    duration: float = Field(..., ge=0.0, le=24.0)
    restlessness: int = Field(..., ge=0, le=MAX_RESTLESSNESS)
    history: List[SleepSample] = []


class LogRequest(BaseModel):
    form: SleepForm
    state: Optional[AppState] = None


class LogResponse(BaseModel):
    record: SleepRecord
    state: AppState


class DashboardRequest(BaseModel):
    records: List[SleepRecord] = []


# Dependency
def get_sleep_service():
    config = ConfigManager()
    return SleepService(config.config)


router = APIRouter(
    prefix="/sleep",
    tags=["Sleep"],
    responses={404: {"description": "Not found"}}
)


@router.post("/duration")
async def sleep_duration(request: DurationRequest):
    """Hours between bedtime and wake time"""
    return {"duration": calculate_sleep_duration(request.bedtime, request.wake_time)}


@router.post("/analyze", response_model=SleepAnalysis)
async def analyze_sleep(request: AnalyzeRequest, service: SleepService = Depends(get_sleep_service)):
    """Score a night and generate insights against the given history"""
    try:
        return service.evaluate(request.duration, request.restlessness, request.history)
    except Exception as e:
        logger.error(f"Error analyzing sleep: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/log", response_model=LogResponse, status_code=201)
async def log_sleep(request: LogRequest, service: SleepService = Depends(get_sleep_service)):
    """Log a sleep entry and get analysis"""
    try:
        record, state = service.log_sleep_entry(request.form, request.state)
        return LogResponse(record=record, state=state)
    except Exception as e:
        logger.error(f"Error logging sleep entry: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/tips", response_model=List[SleepTip])
async def get_tips(
    score: int = Query(..., ge=0, le=100),
    service: SleepService = Depends(get_sleep_service)
):
    """Sleep tips for the band a score falls in"""
    return service.get_tips(score)


@router.post("/dashboard", response_model=DashboardSummary)
async def get_dashboard(request: DashboardRequest, service: SleepService = Depends(get_sleep_service)):
    """Figures for the trend dashboard from recent records"""
    try:
        return service.dashboard(AppState(recent_records=request.records))
    except Exception as e:
        logger.error(f"Error building dashboard: {e}")
        raise HTTPException(status_code=500, detail=str(e))
