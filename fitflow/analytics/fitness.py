#!/usr/bin/env python3
"""
Fitness Trend (Performance Management) Implementation

Builds a day by day athlete stress series from synced activities, then folds it
through two exponential moving averages:

- CTL (Chronic Training Load, fitness): 42 days time constant
- ATL (Acute Training Load, fatigue): 7 days time constant
- TSB (Training Stress Balance, form) = CTL - ATL

Every calendar day from the day before the first activity up to today is
present, rest days included with a zero stress. Fourteen preview days follow
today so the decay of fitness and fatigue can be displayed.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, date as date_type
from typing import Any, Callable, Dict, List, Optional, Union

from ..const import (
    CYCLING_ACTIVITY_TYPES, SWIM_ACTIVITY_TYPE, FUTURE_DAYS_PREVIEW,
    CTL_DECAY, ATL_DECAY
)
from ..storage.interface import ActivitySource
from ..storage.model import RawActivity, FitnessUserSettings
from ..utils import get_logger
from .interface import (
    HeartRateImpulseMode, IncompatibleConfigurationError, InsufficientDataError
)
from .stress import StressScoreCalculator, is_number


logger = get_logger(__name__)

SCORE_FIELDS = (
    "heart_rate_stress_score",
    "training_impulse_score",
    "power_stress_score",
    "swim_stress_score",
)


def _start_of_day(value: Union[datetime, date_type]) -> datetime:
    # Naive midnight of the calendar day the value falls on, tzinfo dropped
    return datetime(value.year, value.month, value.day)


def _scores_to_dict(source: Any) -> Dict[str, float]:
    return {name: getattr(source, name) for name in SCORE_FIELDS if getattr(source, name) is not None}


@dataclass(frozen=True)
class FitnessPreparedActivity:
    """Activity reduced to its calendar position and stress scores"""
    id: Union[int, str]
    date: datetime
    timestamp: int  # epoch milliseconds
    day_of_year: int
    year: int
    type: str
    activity_name: Optional[str] = None
    training_impulse_score: Optional[float] = None
    heart_rate_stress_score: Optional[float] = None
    power_stress_score: Optional[float] = None
    swim_stress_score: Optional[float] = None

    @property
    def has_stress_score(self) -> bool:
        return any(getattr(self, name) is not None for name in SCORE_FIELDS)


@dataclass
class DayStress:
    """Athlete stress on one calendar day"""
    date: datetime
    preview_day: bool = False
    ids: List[Union[int, str]] = field(default_factory=list)
    activities_name: List[Optional[str]] = field(default_factory=list)
    types: List[str] = field(default_factory=list)
    heart_rate_stress_score: Optional[float] = None
    training_impulse_score: Optional[float] = None
    power_stress_score: Optional[float] = None
    swim_stress_score: Optional[float] = None
    final_stress_score: float = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert day to a JSON ready dictionary, absent scores omitted"""
        return {
            'date': self.date.isoformat(),
            'preview_day': self.preview_day,
            'ids': list(self.ids),
            'activities_name': list(self.activities_name),
            'types': list(self.types),
            **_scores_to_dict(self),
            'final_stress_score': self.final_stress_score,
        }


@dataclass
class DayFitnessTrend:
    """Fitness, fatigue and form reached at the end of one day"""
    date: datetime
    ctl: float
    atl: float
    tsb: float
    preview_day: bool = False
    ids: List[Union[int, str]] = field(default_factory=list)
    activities_name: List[Optional[str]] = field(default_factory=list)
    types: List[str] = field(default_factory=list)
    heart_rate_stress_score: Optional[float] = None
    training_impulse_score: Optional[float] = None
    power_stress_score: Optional[float] = None
    swim_stress_score: Optional[float] = None
    final_stress_score: Optional[float] = None

    @classmethod
    def from_day_stress(cls, day_stress: DayStress, ctl: float, atl: float, tsb: float) -> "DayFitnessTrend":
        """Build the trend entry of a day, keeping only positive scores"""
        day_fitness_trend = cls(
            date=day_stress.date,
            ctl=ctl,
            atl=atl,
            tsb=tsb,
            preview_day=day_stress.preview_day,
            ids=list(day_stress.ids),
            activities_name=list(day_stress.activities_name),
            types=list(day_stress.types),
        )

        for name in SCORE_FIELDS + ("final_stress_score",):
            score = getattr(day_stress, name)
            if is_number(score) and score > 0:
                setattr(day_fitness_trend, name, score)

        return day_fitness_trend

    def to_dict(self) -> Dict[str, Any]:
        """Convert trend entry to a JSON ready dictionary, absent scores omitted"""
        result = {
            'date': self.date.isoformat(),
            'preview_day': self.preview_day,
            'ids': list(self.ids),
            'activities_name': list(self.activities_name),
            'types': list(self.types),
            **_scores_to_dict(self),
            'ctl': self.ctl,
            'atl': self.atl,
            'tsb': self.tsb,
        }
        if self.final_stress_score is not None:
            result['final_stress_score'] = self.final_stress_score
        return result


class FitnessTrendCalculator:
    """Fitness trend calculator class"""

    def __init__(self, activity_source: ActivitySource, clock: Optional[Callable[[], datetime]] = None):
        self.activity_source = activity_source
        self.clock = clock or datetime.now
        self.models = StressScoreCalculator()

    def get_today(self) -> datetime:
        """Read the clock once, truncated to the start of the day"""
        return _start_of_day(self.clock())

    def prepare(self, settings: FitnessUserSettings,
                heart_rate_impulse_mode: HeartRateImpulseMode,
                power_meter_enable: bool,
                swim_enable: bool,
                skip_activity_types: Optional[List[str]] = None) -> List[FitnessPreparedActivity]:
        """
        Prepare activities by assigning stress scores on each of them

        Args:
            settings: Athlete physiological settings
            heart_rate_impulse_mode: Use raw TRIMP or HRSS for heart rate data
            power_meter_enable: Compute power stress scores on rides
            swim_enable: Compute swim stress scores on swims
            skip_activity_types: Activity types left out entirely

        Returns:
            Prepared activities in the source order

        Raises:
            IncompatibleConfigurationError: TRIMP mode combined with power or swim scores
            InsufficientDataError: No activity carries any stress score
        """
        if heart_rate_impulse_mode == HeartRateImpulseMode.TRIMP:

            if power_meter_enable:
                raise IncompatibleConfigurationError(
                    "'Power Stress Score' calculation method cannot work with "
                    "'TRIMP (Training Impulse)' calculation method.",
                    code=IncompatibleConfigurationError.FT_PSS_USED_WITH_TRIMP_CALC_METHOD
                )

            if swim_enable:
                raise IncompatibleConfigurationError(
                    "'Swim Stress Score' calculation method cannot work with "
                    "'TRIMP (Training Impulse)' calculation method.",
                    code=IncompatibleConfigurationError.FT_SSS_USED_WITH_TRIMP_CALC_METHOD
                )

        activities = self.activity_source.fetch()

        prepared_activities: List[FitnessPreparedActivity] = []
        has_minimum_fitness_required_data = False
        skipped = 0

        for activity in activities:

            if skip_activity_types and activity.type in skip_activity_types:
                skipped += 1
                continue

            scores = self._compute_scores(activity, settings, heart_rate_impulse_mode,
                                          power_meter_enable, swim_enable)
            if scores:
                has_minimum_fitness_required_data = True

            start_time = activity.start_time
            prepared_activities.append(FitnessPreparedActivity(
                id=activity.id,
                date=start_time,
                timestamp=int(start_time.timestamp() * 1000),
                day_of_year=start_time.timetuple().tm_yday,
                year=start_time.year,
                type=activity.type,
                activity_name=activity.name,
                **scores
            ))

        logger.debug(f"Prepared {len(prepared_activities)} activities ({skipped} skipped)")

        if not has_minimum_fitness_required_data:
            logger.error("No activities has minimum required data to generate a fitness trend")
            raise InsufficientDataError(
                "No activities has minimum required data to generate a fitness trend",
                code=InsufficientDataError.FT_NO_MINIMUM_REQUIRED_ACTIVITIES
            )

        return prepared_activities

    def generate_daily_stress(self, settings: FitnessUserSettings,
                              heart_rate_impulse_mode: HeartRateImpulseMode,
                              power_meter_enable: bool,
                              swim_enable: bool,
                              skip_activity_types: Optional[List[str]] = None) -> List[DayStress]:
        """
        Return day by day the athlete stress. Active & rest days included,
        followed by the preview days.
        """
        prepared_activities = self.prepare(settings, heart_rate_impulse_mode, power_meter_enable,
                                           swim_enable, skip_activity_types)

        # One day before the first activity, so the graph starts from zero.
        # The first activity by position is used, the source is expected chronological.
        start_day = _start_of_day(prepared_activities[0].date - timedelta(days=1))
        today = self.get_today()

        daily_activity: List[DayStress] = []
        current_day = start_day

        while current_day <= today:

            daily_activity.append(self.day_stress_on_date(current_day, prepared_activities))

            if current_day == today:
                break

            current_day = current_day + timedelta(days=1)

        self.append_preview_days(current_day, daily_activity)

        logger.debug(f"Generated {len(daily_activity)} days of stress from {start_day.date()} to {today.date()}")
        return daily_activity

    def compute_trend(self, settings: FitnessUserSettings,
                      heart_rate_impulse_mode: HeartRateImpulseMode,
                      power_meter_enable: bool,
                      swim_enable: bool,
                      skip_activity_types: Optional[List[str]] = None) -> List[DayFitnessTrend]:
        """
        Compute the fitness trend (CTL, ATL, TSB) day by day
        """
        daily_activity = self.generate_daily_stress(settings, heart_rate_impulse_mode, power_meter_enable,
                                                    swim_enable, skip_activity_types)
        return self.fold_trend(daily_activity)

    @staticmethod
    def fold_trend(daily_activity: List[DayStress]) -> List[DayFitnessTrend]:
        """Run the CTL/ATL moving averages over chronologically ordered days"""
        ctl = 0.0
        atl = 0.0

        fitness_trend: List[DayFitnessTrend] = []

        for day_stress in daily_activity:
            ctl = ctl + (day_stress.final_stress_score - ctl) * CTL_DECAY
            atl = atl + (day_stress.final_stress_score - atl) * ATL_DECAY
            tsb = ctl - atl

            fitness_trend.append(DayFitnessTrend.from_day_stress(day_stress, ctl, atl, tsb))

        return fitness_trend

    @staticmethod
    def append_preview_days(start_from: datetime, daily_activity: List[DayStress]) -> None:
        """Append FUTURE_DAYS_PREVIEW empty days after start_from"""
        future_day = _start_of_day(start_from)
        for _ in range(FUTURE_DAYS_PREVIEW):
            future_day = future_day + timedelta(days=1)
            daily_activity.append(DayStress(date=future_day, preview_day=True))

    @staticmethod
    def day_stress_on_date(current_day: datetime,
                           prepared_activities: List[FitnessPreparedActivity]) -> DayStress:
        """
        Sum the stress of the activities done on current_day

        Every score is added to its own sum, but each activity brings a single
        score to the final stress: power, then HRSS, then TRIMP, then swim.
        """
        day_of_year = current_day.timetuple().tm_yday
        found_activities = [
            activity for activity in prepared_activities
            if activity.year == current_day.year and activity.day_of_year == day_of_year
        ]

        day_stress = DayStress(date=current_day, preview_day=False)

        for activity in found_activities:

            day_stress.ids.append(activity.id)
            day_stress.activities_name.append(activity.activity_name)
            day_stress.types.append(activity.type)

            for name in SCORE_FIELDS:
                score = getattr(activity, name)
                if is_number(score):
                    setattr(day_stress, name, (getattr(day_stress, name) or 0) + score)

            if activity.power_stress_score:
                day_stress.final_stress_score += activity.power_stress_score
            elif activity.heart_rate_stress_score:
                day_stress.final_stress_score += activity.heart_rate_stress_score
            elif activity.training_impulse_score:
                day_stress.final_stress_score += activity.training_impulse_score
            elif activity.swim_stress_score:
                day_stress.final_stress_score += activity.swim_stress_score

        return day_stress

    def _compute_scores(self, activity: RawActivity, settings: FitnessUserSettings,
                        heart_rate_impulse_mode: HeartRateImpulseMode,
                        power_meter_enable: bool, swim_enable: bool) -> Dict[str, float]:
        """Compute every stress score the activity is eligible to"""
        scores: Dict[str, float] = {}
        extended_stats = activity.extended_stats
        heart_rate_data = extended_stats.heart_rate_data if extended_stats else None
        power_data = extended_stats.power_data if extended_stats else None

        has_heart_rate_data = heart_rate_data is not None and is_number(heart_rate_data.TRIMP)

        is_power_meter_use_possible = (activity.type in CYCLING_ACTIVITY_TYPES
                                       and power_meter_enable
                                       and is_number(settings.cycling_ftp) and settings.cycling_ftp > 0
                                       and power_data is not None
                                       and power_data.has_power_meter
                                       and is_number(power_data.weighted_power))

        has_swimming_data = (swim_enable
                             and is_number(settings.swim_ftp) and settings.swim_ftp > 0
                             and activity.type == SWIM_ACTIVITY_TYPE
                             and is_number(activity.distance_raw)
                             and is_number(activity.moving_time_raw)
                             and activity.moving_time_raw > 0)

        if has_heart_rate_data:
            if heart_rate_impulse_mode == HeartRateImpulseMode.TRIMP:
                scores["training_impulse_score"] = heart_rate_data.TRIMP
            else:
                lthr = self.models.resolve_lthr(activity.type, settings)
                scores["heart_rate_stress_score"] = self.models.compute_heart_rate_stress_score(
                    settings.user_gender,
                    settings.user_max_hr,
                    settings.user_rest_hr,
                    lthr,
                    heart_rate_data.TRIMP
                )

        if is_power_meter_use_possible:
            scores["power_stress_score"] = self.models.compute_power_stress_score(
                activity.moving_time_raw, power_data.weighted_power, settings.cycling_ftp
            )

        if has_swimming_data:
            scores["swim_stress_score"] = self.models.compute_swim_stress_score(
                activity.distance_raw,
                activity.moving_time_raw,
                activity.elapsed_time_raw,
                settings.swim_ftp
            )

        return scores
