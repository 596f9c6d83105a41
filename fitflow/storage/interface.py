#!/usr/bin/env python3
"""
Activity Source Abstract Interface - Separates the trend computation from
where synced activities come from
"""
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from .model import RawActivity
from ..utils import get_logger

logger = get_logger(__name__)


class ActivitySource(ABC):
    """Provides the synced activities of the athlete"""

    @abstractmethod
    def fetch(self) -> List[RawActivity]:
        """
        Fetch all synced activities, oldest first

        Failures are raised as is; the trend computation does not retry.
        """
        pass


class InMemoryActivitySource(ActivitySource):
    """Activity source backed by a list already in memory"""

    def __init__(self, activities: Iterable[Union[RawActivity, Dict[str, Any]]]):
        self.activities = [
            activity if isinstance(activity, RawActivity) else RawActivity.model_validate(activity)
            for activity in activities
        ]
        self.fetch_count = 0

    def fetch(self) -> List[RawActivity]:
        self.fetch_count += 1
        return list(self.activities)


class JsonFileActivitySource(ActivitySource):
    """Activity source reading a JSON array of synced activities"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def fetch(self) -> List[RawActivity]:
        with open(self.path, "r", encoding="utf-8") as f:
            payload = json.load(f)

        if not isinstance(payload, list):
            raise ValueError(f"Expected a JSON array of activities in {self.path}")

        activities = [RawActivity.model_validate(item) for item in payload]
        logger.info(f"📋 Loaded {len(activities)} activities from {self.path}")
        return activities
