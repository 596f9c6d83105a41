#!/usr/bin/env python3
"""
Fitness Trend Service - High-level service for fitness trend computation

This service wraps the fitness trend calculator with logging, a summary of
the current fitness state and an AnalyticsResult ready for a charting layer.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from ..analytics.fitness import FitnessTrendCalculator, DayFitnessTrend
from ..analytics.interface import (
    AnalyticsError, AnalyticsResult, AnalyticsType, HeartRateImpulseMode
)
from ..const import FORM_FRESH_THRESHOLD, FORM_NEUTRAL_THRESHOLD, FORM_OPTIMAL_THRESHOLD
from ..storage.interface import ActivitySource
from ..storage.model import FitnessUserSettings
from ..utils import get_logger

logger = get_logger(__name__)


class FitnessTrendService:
    """High-level service for fitness trend computation"""

    def __init__(self, activity_source: ActivitySource, clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize fitness trend service

        Args:
            activity_source: Source of the synced activities
            clock: Callable returning "now", datetime.now when omitted
        """
        self.activity_source = activity_source
        self.calculator = FitnessTrendCalculator(activity_source, clock=clock)

    def compute_trend(self, settings: FitnessUserSettings,
                      heart_rate_impulse_mode: HeartRateImpulseMode = HeartRateImpulseMode.HRSS,
                      power_meter_enable: bool = False,
                      swim_enable: bool = False,
                      skip_activity_types: Optional[List[str]] = None) -> List[DayFitnessTrend]:
        """
        Compute the day by day fitness trend

        Raises:
            AnalyticsError: configuration or data prevents a trend
        """
        logger.info(f"🧮 Computing fitness trend (mode: {heart_rate_impulse_mode.value}, "
                    f"power: {power_meter_enable}, swim: {swim_enable})")
        try:
            fitness_trend = self.calculator.compute_trend(settings, heart_rate_impulse_mode, power_meter_enable,
                                                          swim_enable, skip_activity_types)
        except AnalyticsError as e:
            logger.error(f"❌ Fitness trend not available: {e}")
            raise

        logger.info(f"✅ Fitness trend computed: {len(fitness_trend)} days")
        return fitness_trend

    def summarize(self, fitness_trend: List[DayFitnessTrend]) -> Dict[str, Any]:
        """
        Summarize the fitness state reached today

        Args:
            fitness_trend: Output of compute_trend

        Returns:
            Latest CTL/ATL/TSB, peak fitness and day counts
        """
        real_days = [day for day in fitness_trend if not day.preview_day]
        if not real_days:
            return {
                'total_days': 0,
                'active_days': 0,
                'rest_days': 0,
            }

        today = real_days[-1]
        peak = max(real_days, key=lambda day: day.ctl)
        active_days = sum(1 for day in real_days if day.ids)

        return {
            'date': today.date.isoformat(),
            'ctl': round(today.ctl, 1),
            'atl': round(today.atl, 1),
            'tsb': round(today.tsb, 1),
            'form': self._categorize_form(today.tsb),
            'peak_ctl': round(peak.ctl, 1),
            'peak_ctl_date': peak.date.isoformat(),
            'total_days': len(real_days),
            'active_days': active_days,
            'rest_days': len(real_days) - active_days,
            'total_stress': round(sum(day.final_stress_score or 0 for day in real_days), 1),
        }

    def analyze(self, settings: FitnessUserSettings,
                heart_rate_impulse_mode: HeartRateImpulseMode = HeartRateImpulseMode.HRSS,
                power_meter_enable: bool = False,
                swim_enable: bool = False,
                skip_activity_types: Optional[List[str]] = None) -> AnalyticsResult:
        """
        Compute the trend and pack it with its summary in an AnalyticsResult
        """
        fitness_trend = self.compute_trend(settings, heart_rate_impulse_mode, power_meter_enable,
                                           swim_enable, skip_activity_types)

        return AnalyticsResult(
            analytics_type=AnalyticsType.TRAINING_LOAD,
            data={
                'trend': [day.to_dict() for day in fitness_trend],
                'summary': self.summarize(fitness_trend),
            },
            metadata={
                'heart_rate_impulse_mode': heart_rate_impulse_mode.value,
                'power_meter_enable': power_meter_enable,
                'swim_enable': swim_enable,
                'skip_activity_types': list(skip_activity_types or []),
            }
        )

    def _categorize_form(self, tsb: float) -> str:
        """Categorize form based on training stress balance"""
        if tsb > FORM_FRESH_THRESHOLD:
            return "fresh"
        elif tsb >= FORM_NEUTRAL_THRESHOLD:
            return "neutral"
        elif tsb >= FORM_OPTIMAL_THRESHOLD:
            return "optimal"
        else:
            return "overreaching"
