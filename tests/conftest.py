"""
Pytest configuration and fixtures for FitFlow tests.
"""

from datetime import datetime
from typing import Any, Dict, Optional

import pytest

from fitflow.storage.interface import InMemoryActivitySource
from fitflow.storage.model import FitnessUserSettings, Gender


TODAY = datetime(2024, 3, 10, 15, 30)


def make_activity(activity_id: Any, start_time: datetime, activity_type: str = "Run",
                  trimp: Optional[float] = None, weighted_power: Optional[float] = None,
                  has_power_meter: bool = True, distance: Optional[float] = 10000,
                  moving_time: Optional[float] = 3600, elapsed_time: Optional[float] = 3700,
                  name: Optional[str] = None) -> Dict[str, Any]:
    """Build a synced activity payload in its camelCase shape"""
    extended_stats = {}
    if trimp is not None:
        extended_stats["heartRateData"] = {"TRIMP": trimp}
    if weighted_power is not None:
        extended_stats["powerData"] = {"hasPowerMeter": has_power_meter, "weightedPower": weighted_power}

    activity = {
        "id": activity_id,
        "name": name or f"{activity_type} {activity_id}",
        "type": activity_type,
        "start_time": start_time.isoformat(),
        "distance_raw": distance,
        "moving_time_raw": moving_time,
        "elapsed_time_raw": elapsed_time,
    }
    if extended_stats:
        activity["extendedStats"] = extended_stats
    return activity


@pytest.fixture
def fixed_clock():
    """Clock always returning the same afternoon"""
    return lambda: TODAY


@pytest.fixture
def user_settings():
    """Athlete settings without lactate threshold overrides"""
    return FitnessUserSettings(
        user_gender=Gender.MEN,
        user_max_hr=190,
        user_rest_hr=60,
        cycling_ftp=250,
        swim_ftp=50,
    )


@pytest.fixture
def make_source():
    """Factory building an in-memory activity source"""
    def _make_source(*activities):
        return InMemoryActivitySource(activities)
    return _make_source
