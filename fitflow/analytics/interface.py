#!/usr/bin/env python3
"""
Analytics interface definitions and data structures.

This module defines the enums, result container and exception hierarchy
shared by the stress models and the fitness trend pipeline.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Any, Optional
import uuid


class AnalyticsType(Enum):
    """Types of analytics that can be performed"""
    TRAINING_LOAD = "training_load"


class HeartRateImpulseMode(str, Enum):
    """How heart rate data feeds the daily stress"""
    TRIMP = "TRIMP"  # raw training impulse
    HRSS = "HRSS"  # impulse normalized on lactate threshold


@dataclass
class AnalyticsResult:
    """Result container for analytics operations"""
    analytics_type: AnalyticsType
    data: Dict[str, Any]
    metadata: Dict[str, Any] = field(default_factory=dict)
    generated_at: datetime = field(default_factory=datetime.now)
    result_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary format"""
        return {
            'result_id': self.result_id,
            'analytics_type': self.analytics_type.value,
            'data': self.data,
            'metadata': self.metadata,
            'generated_at': self.generated_at.isoformat()
        }


# Exception classes
class AnalyticsError(Exception):
    """Base exception for analytics operations"""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class IncompatibleConfigurationError(AnalyticsError):
    """Raised when calculation methods cannot be combined"""
    FT_PSS_USED_WITH_TRIMP_CALC_METHOD = "FT_PSS_USED_WITH_TRIMP_CALC_METHOD"
    FT_SSS_USED_WITH_TRIMP_CALC_METHOD = "FT_SSS_USED_WITH_TRIMP_CALC_METHOD"


class InsufficientDataError(AnalyticsError):
    """Raised when there is insufficient data for analysis"""
    FT_NO_MINIMUM_REQUIRED_ACTIVITIES = "FT_NO_MINIMUM_REQUIRED_ACTIVITIES"

