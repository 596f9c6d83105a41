#!/usr/bin/env python3
"""
Analytics
"""

from .interface import (
    AnalyticsType, HeartRateImpulseMode, AnalyticsResult,
    AnalyticsError, IncompatibleConfigurationError, InsufficientDataError
)

from .stress import StressScoreCalculator

from .fitness import (
    FitnessTrendCalculator, FitnessPreparedActivity, DayStress, DayFitnessTrend
)

__all__ = [
    # Data structures
    'AnalyticsType', 'HeartRateImpulseMode', 'AnalyticsResult',

    # Exceptions
    'AnalyticsError', 'IncompatibleConfigurationError', 'InsufficientDataError',

    # Stress models
    'StressScoreCalculator',

    # Fitness trend
    'FitnessTrendCalculator', 'FitnessPreparedActivity', 'DayStress', 'DayFitnessTrend',
]
