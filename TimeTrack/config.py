from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- Parsing ---
    day_start_hour: int = Field(7, ge=1, le=12) # Bare hours below this are read as PM ("2" -> 14:00)

    # --- Report ---
    dead_time_alert_minutes: int = Field(90, ge=1) # Dead time at or above this is flagged "high"
    note_prefix: str = "- " # Prefix for each note line in clipboard-ready output

    # --- Logging ---
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TIMETRACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra='ignore'
    )
