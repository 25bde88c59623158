"""
Configuration for the TrackGuide parser.

The heading names and label phrasings are a fixed contract with the
guidebook generator and are deliberately absent from here.
"""

import os


class Settings:
    # Logging
    log_level = os.getenv("TRACKGUIDE_LOG_LEVEL", "WARNING").upper()
    dev_mode = os.getenv("TRACKGUIDE_DEV_MODE", "").lower() in ("1", "true", "yes")

    # Guidebook validation thresholds
    min_guidebook_chars = 100
    min_guidebook_lines = 10


# Singleton instance
_settings = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
