# pharmacy_booking/config.py

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    pharmacy_timezone: str = "Pacific/Auckland"
    min_advance_minutes: int = 60
    override_rules_file: str | None = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_prefix="BOOKING_",
        extra="ignore",
    )

    @property
    def resolved_override_rules_file(self) -> Path | None:
        if not self.override_rules_file:
            return None
        path = Path(self.override_rules_file)
        if not path.is_absolute():
            # Relative paths are resolved against the project root
            path = BASE_DIR / path
        return path


settings = Settings()
