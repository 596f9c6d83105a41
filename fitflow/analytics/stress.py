#!/usr/bin/env python3
"""
Stress Score Models

Each model turns one activity into a single training stress number:

1. Power Stress Score (PSS): uses weighted power and cycling FTP
2. Heart Rate Stress Score (HRSS): normalizes the activity TRIMP on the TRIMP
   an hour at lactate threshold would produce
3. Swim Stress Score (SSS): uses normalized swim speed and swim FTP pace

Formulas:
- PSS = (seconds x WP x IF) / (FTP x 3600) x 100, with IF = WP / FTP
- HRSS = TRIMP / LT_TRIMP x 100, with
  LT_TRIMP = 60 x LTHR_reserve x 0.64 x e^(gender_factor x LTHR_reserve)
- SSS = IF^3 x elapsed hours x 100, with IF = (distance / moving minutes) / swim FTP

The models are plain math: thresholds <= 0 or a max HR equal to the rest HR
yield ZeroDivisionError, inf or nan. Callers check eligibility first.
"""

import math
from numbers import Number
from typing import Any

from ..const import (
    CYCLING_ACTIVITY_TYPES, RUNNING_ACTIVITY_TYPES,
    DEFAULT_LTHR_KARVONEN_HRR_FACTOR, TRIMP_MEN_FACTOR, TRIMP_WOMEN_FACTOR
)
from ..storage.model import FitnessUserSettings, Gender


def is_number(value: Any) -> bool:
    """True for int/float values, booleans excluded"""
    return isinstance(value, Number) and not isinstance(value, bool)


class StressScoreCalculator:
    """Training stress models for a single activity"""

    @staticmethod
    def compute_power_stress_score(moving_time: float, weighted_power: float, cycling_ftp: float) -> float:
        """
        Calculate Power Stress Score

        Args:
            moving_time: Moving time in seconds
            weighted_power: Weighted average power in watts
            cycling_ftp: Functional Threshold Power in watts

        Returns:
            Power stress score
        """
        return moving_time * weighted_power * (weighted_power / cycling_ftp) / (cycling_ftp * 3600) * 100

    @staticmethod
    def compute_swim_stress_score(distance: float, moving_time: float, elapsed_time: float,
                                  swim_ftp: float) -> float:
        """
        Calculate Swim Stress Score

        Args:
            distance: Distance in meters
            moving_time: Moving time in seconds (rest excluded)
            elapsed_time: Total elapsed time in seconds
            swim_ftp: Swim functional threshold pace in meters per minute

        Returns:
            Swim stress score
        """
        normalized_swim_speed = distance / (moving_time / 60)  # m/min
        swim_intensity = normalized_swim_speed / swim_ftp
        return math.pow(swim_intensity, 3) * (elapsed_time / 3600) * 100

    @staticmethod
    def compute_heart_rate_stress_score(user_gender: Gender, user_max_hr: float, user_rest_hr: float,
                                        lactate_threshold: float, activity_training_impulse: float) -> float:
        """
        Calculate Heart Rate Stress Score (HRSS)

        Args:
            user_gender: Athlete gender
            user_max_hr: Maximum heart rate
            user_rest_hr: Resting heart rate
            lactate_threshold: Lactate threshold heart rate
            activity_training_impulse: TRIMP of the activity

        Returns:
            Heart rate stress score
        """
        lactate_threshold_reserve = (lactate_threshold - user_rest_hr) / (user_max_hr - user_rest_hr)
        trimp_gender_factor = TRIMP_MEN_FACTOR if user_gender == Gender.MEN else TRIMP_WOMEN_FACTOR
        lactate_threshold_training_impulse = (60 * lactate_threshold_reserve * 0.64
                                              * math.exp(trimp_gender_factor * lactate_threshold_reserve))
        return activity_training_impulse / lactate_threshold_training_impulse * 100

    @staticmethod
    def resolve_lthr(activity_type: str, settings: FitnessUserSettings) -> float:
        """
        Resolve the lactate threshold heart rate for an activity type

        Discipline override first, then the default override, then the
        Karvonen estimate rest + 0.85 x (max - rest).
        """
        lactate_threshold = settings.user_lactate_threshold

        if lactate_threshold is not None:
            if activity_type in CYCLING_ACTIVITY_TYPES and is_number(lactate_threshold.cycling):
                return lactate_threshold.cycling

            if activity_type in RUNNING_ACTIVITY_TYPES and is_number(lactate_threshold.running):
                return lactate_threshold.running

            if is_number(lactate_threshold.default):
                return lactate_threshold.default

        return settings.user_rest_hr + DEFAULT_LTHR_KARVONEN_HRR_FACTOR * (settings.user_max_hr - settings.user_rest_hr)
