#!/usr/bin/env python3
"""
Pydantic Data Models for Synced Activities and Athlete Settings

Activities are accepted in the synced camelCase shape (``extendedStats``,
``heartRateData``...) as well as in snake_case. Unknown fields are kept so
that richer exports can be fed in untouched.

Measurement values are kept exactly as delivered, without coercion: whether a
value is usable as a number is decided per activity when scores are computed.
"""

from datetime import datetime
from typing import Any, Optional, Union
from pydantic import BaseModel, Field, ConfigDict
from enum import Enum


class Gender(str, Enum):
    """Athlete gender, selects the TRIMP weighting factor"""

    MEN = "men"
    WOMEN = "women"


class HeartRateDataModel(BaseModel):
    """Heart rate aggregate computed on an activity"""

    TRIMP: Any = Field(None, description="Training impulse of the activity")

    model_config = ConfigDict(extra="allow")


class PowerDataModel(BaseModel):
    """Power aggregate computed on an activity"""

    has_power_meter: bool = Field(False, alias="hasPowerMeter", description="Real power meter used")
    weighted_power: Any = Field(
        None, alias="weightedPower", description="Weighted average power in watts"
    )

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ExtendedStatsModel(BaseModel):
    """Extended statistics attached to a synced activity"""

    heart_rate_data: Optional[HeartRateDataModel] = Field(None, alias="heartRateData")
    power_data: Optional[PowerDataModel] = Field(None, alias="powerData")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class RawActivity(BaseModel):
    """Synced activity as delivered by the activity source"""

    id: Union[int, str] = Field(..., description="Activity identifier")
    name: Optional[str] = Field(None, description="Activity display name")
    type: str = Field(..., description="Activity type tag, e.g. Ride, Run, Swim")
    start_time: datetime = Field(..., description="Activity start time")
    distance_raw: Any = Field(None, description="Distance in meters")
    moving_time_raw: Any = Field(None, description="Moving time in seconds")
    elapsed_time_raw: Any = Field(None, description="Elapsed time in seconds")
    extended_stats: Optional[ExtendedStatsModel] = Field(None, alias="extendedStats")

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)


class LactateThresholdModel(BaseModel):
    """Per discipline lactate threshold heart rate overrides"""

    default: Optional[float] = Field(None, gt=0, description="Threshold used for any activity type")
    cycling: Optional[float] = Field(None, gt=0, description="Threshold for cycling activities")
    running: Optional[float] = Field(None, gt=0, description="Threshold for running activities")

    model_config = ConfigDict(allow_inf_nan=False)


class FitnessUserSettings(BaseModel):
    """Physiological parameters of the athlete"""

    user_gender: Gender = Field(..., alias="userGender")
    user_max_hr: float = Field(..., gt=0, alias="userMaxHr", description="Maximum heart rate")
    user_rest_hr: float = Field(..., ge=0, alias="userRestHr", description="Resting heart rate")
    user_lactate_threshold: Optional[LactateThresholdModel] = Field(None, alias="userLactateThreshold")
    cycling_ftp: Optional[float] = Field(None, alias="cyclingFtp", description="Cycling FTP in watts")
    swim_ftp: Optional[float] = Field(None, alias="swimFtp", description="Swim FTP pace in meters per minute")

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False, frozen=True)
