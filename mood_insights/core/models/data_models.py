# mood_insights/core/models/data_models.py

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_aware(moment):
    """Attach UTC to naive datetimes so naive and offset timestamps can be ordered together"""
    if moment.utcoffset() is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


# Input records
class MoodObservation(BaseModel):
    """One user-logged emotional state"""
    model_config = ConfigDict(frozen=True)

    mood_id: str
    mood_label: str
    intensity: float = Field(..., allow_inf_nan=False)
    timestamp: datetime
    activities: List[str] = Field(default_factory=list)

    @field_validator('intensity')
    @classmethod
    def clamp_intensity(cls, v):
        # Intensity is always on the 1-10 scale once it reaches the analytics
        return max(1.0, min(10.0, v))

    @field_validator('timestamp')
    @classmethod
    def ensure_offset(cls, v):
        # The wall clock is kept; only the missing offset is filled in
        return as_aware(v)

    @field_validator('activities', mode='before')
    @classmethod
    def split_activities(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [a.strip() for a in v.split(';') if a.strip()]
        return v


class SleepObservation(BaseModel):
    """One aggregate sleep record per calendar day"""
    model_config = ConfigDict(frozen=True)

    date: str
    duration_minutes: float = Field(..., ge=0, allow_inf_nan=False)
    sleep_score: Optional[float] = None

    @field_validator('date')
    @classmethod
    def validate_date_format(cls, v):
        try:
            datetime.strptime(v, '%Y-%m-%d')
            return v
        except ValueError:
            raise ValueError('Invalid date format. Use YYYY-MM-DD')


class ActivityObservation(BaseModel):
    """One aggregate activity record per calendar day"""
    model_config = ConfigDict(frozen=True)

    date: str
    steps: int = Field(..., ge=0)
    active_minutes: float = Field(0, ge=0, allow_inf_nan=False)

    @field_validator('date')
    @classmethod
    def validate_date_format(cls, v):
        try:
            datetime.strptime(v, '%Y-%m-%d')
            return v
        except ValueError:
            raise ValueError('Invalid date format. Use YYYY-MM-DD')


class WellnessSession(BaseModel):
    """A completed meditation, yoga or music session"""
    model_config = ConfigDict(frozen=True)

    session_type: str
    completed_at: datetime


class PredictionContext(BaseModel):
    """When the prediction is for. day_of_week uses 0=Sunday..6=Saturday."""
    model_config = ConfigDict(frozen=True)

    day_of_week: int = Field(..., ge=0, le=6)
    is_weekend: bool
    hour_of_day: int = Field(..., ge=0, le=23)

    @classmethod
    def from_datetime(cls, moment):
        day_of_week = day_of_week_index(moment)
        return cls(
            day_of_week=day_of_week,
            is_weekend=day_of_week in (0, 6),
            hour_of_day=moment.hour,
        )

    @classmethod
    def for_day_after(cls, moment):
        return cls.from_datetime(moment + timedelta(days=1))


def day_of_week_index(moment):
    """Day of week with 0=Sunday, matching the app's calendar widgets"""
    return moment.isoweekday() % 7


def coerce_records(records, model_class):
    """
    Convert a sequence of dicts or model instances into model instances.

    Args:
        records: Iterable of dicts or instances of model_class (None allowed)
        model_class: Pydantic model to build

    Returns:
        list: Model instances, in input order
    """
    if not records:
        return []
    return [r if isinstance(r, model_class) else model_class.model_validate(r) for r in records]
