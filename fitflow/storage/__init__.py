"""
Storage package - activity sources and input data models
"""

from .model import (
    Gender, RawActivity, ExtendedStatsModel, HeartRateDataModel, PowerDataModel,
    FitnessUserSettings, LactateThresholdModel
)
from .interface import ActivitySource, InMemoryActivitySource, JsonFileActivitySource

__all__ = [
    # Models
    'Gender', 'RawActivity', 'ExtendedStatsModel', 'HeartRateDataModel', 'PowerDataModel',
    'FitnessUserSettings', 'LactateThresholdModel',

    # Sources
    'ActivitySource', 'InMemoryActivitySource', 'JsonFileActivitySource',
]
