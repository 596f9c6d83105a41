#!/usr/bin/env python3
"""
FitFlow - Fitness Trend Engine
Turns synced activities into a daily training stress series and its
fitness (CTL), fatigue (ATL) and form (TSB) trend
"""

# Setup logging first
from .utils import setup_fitflow_logging
setup_fitflow_logging()

# Analytics
from .analytics import (
    HeartRateImpulseMode, AnalyticsResult,
    AnalyticsError, IncompatibleConfigurationError, InsufficientDataError,
    StressScoreCalculator, FitnessTrendCalculator,
    FitnessPreparedActivity, DayStress, DayFitnessTrend
)

# Activity sources and models
from .storage import (
    Gender, RawActivity, FitnessUserSettings,
    ActivitySource, InMemoryActivitySource, JsonFileActivitySource
)

# Services
from .services import FitnessTrendService

__version__ = "0.1.0"

__all__ = [
    # Analytics
    'HeartRateImpulseMode', 'AnalyticsResult',
    'AnalyticsError', 'IncompatibleConfigurationError', 'InsufficientDataError',
    'StressScoreCalculator', 'FitnessTrendCalculator',
    'FitnessPreparedActivity', 'DayStress', 'DayFitnessTrend',

    # Storage
    'Gender', 'RawActivity', 'FitnessUserSettings',
    'ActivitySource', 'InMemoryActivitySource', 'JsonFileActivitySource',

    # Services
    'FitnessTrendService',
]
