# mood_insights/api/routes/insights_routes.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from mood_insights.config.config_manager import ConfigManager
from mood_insights.core.analysis.anomaly_detection import AnomalyDetector
from mood_insights.core.analysis.mood_prediction import MoodPredictor
from mood_insights.core.analysis.pattern_recognition import PatternRecognizer
from mood_insights.core.models.data_models import (
    ActivityObservation,
    MoodObservation,
    PredictionContext,
    SleepObservation,
)
from mood_insights.core.models.output_models import (
    DetectedAnomaly,
    DetectedPattern,
    InsightsReport,
    MoodPredictionOutput,
)
from mood_insights.core.repositories.data_repository import DataRepository
from mood_insights.core.services.insights_service import InsightsService

logger = logging.getLogger(__name__)


# Request bodies
class PredictionRequest(BaseModel):
    user_id: Optional[str] = None
    history: List[MoodObservation] = []
    sleep: List[SleepObservation] = []
    context: Optional[PredictionContext] = None


class PatternRequest(BaseModel):
    user_id: Optional[str] = None
    mood_history: List[MoodObservation]
    sleep_data: Optional[List[SleepObservation]] = None
    activity_data: Optional[List[ActivityObservation]] = None


class AnomalyRequest(BaseModel):
    user_id: str
    mood_history: List[MoodObservation]
    sleep_data: Optional[List[SleepObservation]] = None
    activity_data: Optional[List[ActivityObservation]] = None


# Dependency
def get_insights_service():
    config = ConfigManager()
    repository = DataRepository(config.get('repository.data_dir', 'data/sample'))
    return InsightsService(
        repository,
        MoodPredictor(config.mood_prediction_config()),
        PatternRecognizer(config.pattern_recognition_config()),
        AnomalyDetector(config.anomaly_detection_config())
    )


router = APIRouter(
    prefix="/insights",
    tags=["Insights"],
    responses={404: {"description": "Not found"}}
)


@router.post("/predict", response_model=MoodPredictionOutput)
async def predict_mood(request: PredictionRequest, service: InsightsService = Depends(get_insights_service)):
    """Predict tomorrow's mood from the supplied history"""
    try:
        return await service.predict_mood(request.history, request.sleep, request.context, user_id=request.user_id)
    except Exception as e:
        logger.exception("Mood prediction failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/patterns", response_model=List[DetectedPattern])
async def analyze_patterns(request: PatternRequest, service: InsightsService = Depends(get_insights_service)):
    """Detect circadian, weekly, correlation and trigger patterns"""
    try:
        return await service.analyze_patterns(
            request.mood_history, request.sleep_data, request.activity_data, user_id=request.user_id
        )
    except Exception as e:
        logger.exception("Pattern analysis failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/anomalies", response_model=List[DetectedAnomaly])
async def detect_anomalies(request: AnomalyRequest, service: InsightsService = Depends(get_insights_service)):
    """Flag unusual mood, sleep and activity records"""
    try:
        return await service.detect_anomalies(
            request.user_id, request.mood_history, request.sleep_data, request.activity_data
        )
    except Exception as e:
        logger.exception("Anomaly detection failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/report/{user_id}", response_model=InsightsReport)
async def get_report(
    user_id: str,
    days: int = Query(30, ge=1, le=365),
    service: InsightsService = Depends(get_insights_service)
):
    """Full insights report built from stored records"""
    try:
        result = await service.generate_report(user_id, days)
        if isinstance(result, dict) and result.get("status") == "error":
            raise HTTPException(status_code=404, detail=result["message"])
        return result
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Report generation failed for {user_id}")
        raise HTTPException(status_code=500, detail=str(e))
