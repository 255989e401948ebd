"""Configuration settings for the tdate application."""
import os
from dataclasses import dataclass
from datetime import timedelta, timezone


@dataclass
class Config:
    """Application configuration settings.

    Centralized configuration to avoid hardcoded values throughout the codebase.
    """
    # Offset in minutes applied to date strings that carry no zone (0 = UTC)
    naive_utc_offset_minutes: int = 0

    # Colors
    color_primary: str = "#0abdc6"  # Cyan - primary accent
    color_accent: str = "#ff006e"  # Pink - highlight
    color_secondary: str = "#8b5cf6"  # Purple - secondary accent
    color_bg_dark: str = "#1a1a2e"  # Dark background
    color_bg_medium: str = "#2d2d44"  # Medium background
    color_text: str = "#e2e8f0"  # Light text

    @property
    def naive_tzinfo(self) -> timezone:
        """Fixed zone used for date strings without an offset."""
        if self.naive_utc_offset_minutes == 0:
            return timezone.utc
        return timezone(timedelta(minutes=self.naive_utc_offset_minutes))

    @classmethod
    def load(cls) -> 'Config':
        """
        Load configuration.

        Reads TDATE_NAIVE_OFFSET (integer minutes east of UTC) from the
        environment. Missing or malformed values keep the defaults.

        Returns:
            Config instance with default or loaded values
        """
        settings = cls()
        raw_offset = os.environ.get("TDATE_NAIVE_OFFSET")
        if raw_offset:
            try:
                settings.naive_utc_offset_minutes = int(raw_offset)
            except ValueError:
                pass
        return settings


# Global config instance
config = Config.load()
