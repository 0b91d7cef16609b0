"""
Dashboard configuration and settings.
"""

import os
from typing import Optional


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not str(value).strip():
        return None
    return float(value)


class DashboardConfig:
    """Configuration for a dashboard build."""

    def __init__(
        self,
        data_source: str = "health_data.json",
        output_path: str = "index.html",
        log_file: str = "dashboard.log",
        fetch_timeout: Optional[float] = None,
        workout_limit: int = 12,
        blood_limit: int = 15,
        lab_flag_limit: int = 5,
        title: str = "Health Dashboard",
    ):
        self.data_source = data_source
        self.output_path = output_path
        self.log_file = log_file
        # None waits on the fetch indefinitely, like the browser does
        self.fetch_timeout = fetch_timeout
        self.workout_limit = workout_limit
        self.blood_limit = blood_limit
        self.lab_flag_limit = lab_flag_limit
        self.title = title

    @classmethod
    def from_env(cls) -> "DashboardConfig":
        """Create config from environment variables."""
        return cls(
            data_source=os.getenv("HEALTHDASH_DATA_SOURCE", "health_data.json"),
            output_path=os.getenv("HEALTHDASH_OUTPUT", "index.html"),
            log_file=os.getenv("HEALTHDASH_LOG_FILE", "dashboard.log"),
            fetch_timeout=_optional_float(os.getenv("HEALTHDASH_FETCH_TIMEOUT")),
            workout_limit=int(os.getenv("HEALTHDASH_WORKOUT_LIMIT", "12")),
            blood_limit=int(os.getenv("HEALTHDASH_BLOOD_LIMIT", "15")),
            lab_flag_limit=int(os.getenv("HEALTHDASH_FLAG_LIMIT", "5")),
            title=os.getenv("HEALTHDASH_TITLE", "Health Dashboard"),
        )

    @classmethod
    def from_config_file(cls, config_path: str = "dashboard.conf") -> "DashboardConfig":
        """Create config from configuration file."""
        config = {}
        if os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#"):
                        key, value = line.split("=", 1)
                        config[key.strip()] = value.strip()

        return cls(
            data_source=config.get("data_source", "health_data.json"),
            output_path=config.get("output_path", "index.html"),
            log_file=config.get("log_file", "dashboard.log"),
            fetch_timeout=_optional_float(config.get("fetch_timeout")),
            workout_limit=int(config.get("workout_limit", "12")),
            blood_limit=int(config.get("blood_limit", "15")),
            lab_flag_limit=int(config.get("lab_flag_limit", "5")),
            title=config.get("title", "Health Dashboard"),
        )
