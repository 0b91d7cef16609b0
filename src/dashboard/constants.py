"""
Shared constants for dashboard derivation and HTML generation.
"""

WORKOUT_LIMIT = 12
BLOOD_LIMIT = 15
LAB_FLAG_LIMIT = 5

NO_FLAGS_TEXT = "No out-of-range labs recorded in the latest entries."
NO_WORKOUTS_TEXT = "No workout data yet."
NO_BLOOD_TEXT = "No blood report data yet."

WEIGHT_CHART_ID = "weightChart"
HR_CHART_ID = "hrChart"
