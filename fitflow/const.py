import math
import os


# Logging
LOG_LEVEL = os.getenv('FITFLOW_LOG_LEVEL', 'INFO')
LOG_DIR = os.getenv('FITFLOW_LOG_DIR')
LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Activity type groups
CYCLING_ACTIVITY_TYPES = ("Ride", "VirtualRide", "EBikeRide")
RUNNING_ACTIVITY_TYPES = ("Run",)
SWIM_ACTIVITY_TYPE = "Swim"

# Lactate threshold fallback: rest + factor * heart rate reserve (Karvonen)
DEFAULT_LTHR_KARVONEN_HRR_FACTOR = 0.85

# TRIMP gender weighting
TRIMP_MEN_FACTOR = 1.92
TRIMP_WOMEN_FACTOR = 1.67

# Days appended after today to preview the trend decay
FUTURE_DAYS_PREVIEW = 14

# Exponential moving average time constants (days)
CTL_TIME_CONSTANT = 42
ATL_TIME_CONSTANT = 7
CTL_DECAY = 1 - math.exp(-1 / CTL_TIME_CONSTANT)
ATL_DECAY = 1 - math.exp(-1 / ATL_TIME_CONSTANT)

# Form (TSB) categories, lower bounds
FORM_FRESH_THRESHOLD = 5
FORM_NEUTRAL_THRESHOLD = -10
FORM_OPTIMAL_THRESHOLD = -30
