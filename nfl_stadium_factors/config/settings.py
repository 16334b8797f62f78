"""
Settings - Application settings and configuration.

This module contains:
- Settings: Application settings dataclass
- get_settings: Get current settings instance
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
import os
import json


@dataclass
class WeatherSettings:
    """
    Weather provider configuration.

    Attributes:
        api_key: OpenWeatherMap API key (lookups are skipped without one)
        base_url: Current weather endpoint
        timeout_seconds: Per-lookup timeout
        max_workers: Concurrent lookups
    """
    api_key: str = ""
    base_url: str = "https://api.openweathermap.org/data/2.5/weather"
    timeout_seconds: float = 3.0
    max_workers: int = 8


@dataclass
class ScheduleSettings:
    """
    Schedule provider configuration.

    Attributes:
        base_url: Scoreboard endpoint
        timeout_seconds: Request timeout
    """
    base_url: str = "https://site.api.espn.com/apis/site/v2/sports/football/nfl/scoreboard"
    timeout_seconds: float = 10.0


@dataclass
class OutputSettings:
    """
    Output configuration.

    Attributes:
        default_format: Default output format
        output_dir: Default output directory
        pretty_print: Pretty print JSON output
    """
    default_format: str = "json"
    output_dir: str = "./output"
    pretty_print: bool = True


@dataclass
class LoggingSettings:
    """
    Logging configuration.

    Attributes:
        level: Log level
        format: Log format string
        log_to_file: Whether to log to file
        log_file: Log file path
    """
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_to_file: bool = False
    log_file: str = "./logs/nfl_stadium_factors.log"


@dataclass
class Settings:
    """
    Application settings.

    Attributes:
        weather: Weather provider configuration
        schedule: Schedule provider configuration
        output: Output configuration
        logging: Logging configuration
        debug: Debug mode flag
    """
    weather: WeatherSettings = field(default_factory=WeatherSettings)
    schedule: ScheduleSettings = field(default_factory=ScheduleSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    debug: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary (the API key is not written out)."""
        return {
            "debug": self.debug,
            "weather": {
                "base_url": self.weather.base_url,
                "timeout_seconds": self.weather.timeout_seconds,
                "max_workers": self.weather.max_workers,
            },
            "schedule": {
                "base_url": self.schedule.base_url,
                "timeout_seconds": self.schedule.timeout_seconds,
            },
            "output": {
                "default_format": self.output.default_format,
                "output_dir": self.output.output_dir,
                "pretty_print": self.output.pretty_print,
            },
            "logging": {
                "level": self.logging.level,
                "log_to_file": self.logging.log_to_file,
                "log_file": self.logging.log_file,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Settings':
        """Create settings from dictionary."""
        settings = cls()

        settings.debug = data.get("debug", False)

        if "weather" in data:
            w = data["weather"]
            settings.weather = WeatherSettings(
                api_key=w.get("api_key", ""),
                base_url=w.get("base_url", WeatherSettings.base_url),
                timeout_seconds=float(w.get("timeout_seconds", 3.0)),
                max_workers=int(w.get("max_workers", 8)),
            )

        if "schedule" in data:
            s = data["schedule"]
            settings.schedule = ScheduleSettings(
                base_url=s.get("base_url", ScheduleSettings.base_url),
                timeout_seconds=float(s.get("timeout_seconds", 10.0)),
            )

        if "output" in data:
            out = data["output"]
            settings.output = OutputSettings(
                default_format=out.get("default_format", "json"),
                output_dir=out.get("output_dir", "./output"),
                pretty_print=out.get("pretty_print", True),
            )

        if "logging" in data:
            log = data["logging"]
            settings.logging = LoggingSettings(
                level=log.get("level", "INFO"),
                log_to_file=log.get("log_to_file", False),
                log_file=log.get("log_file", "./logs/nfl_stadium_factors.log"),
            )

        return settings

    def save_to_file(self, filepath: str) -> None:
        """Save settings to JSON file."""
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'Settings':
        """Load settings from JSON file, then apply environment overrides."""
        with open(filepath, "r") as f:
            data = json.load(f)
        return cls.from_dict(data).apply_env()

    @classmethod
    def load_from_env(cls) -> 'Settings':
        """Load settings from environment variables."""
        return cls().apply_env()

    def apply_env(self) -> 'Settings':
        """Override fields from environment variables, in place."""
        if "OPENWEATHER_API_KEY" in os.environ:
            self.weather.api_key = os.environ["OPENWEATHER_API_KEY"]
        if "NFL_WEATHER_TIMEOUT" in os.environ:
            self.weather.timeout_seconds = float(os.environ["NFL_WEATHER_TIMEOUT"])
        if "NFL_WEATHER_WORKERS" in os.environ:
            self.weather.max_workers = int(os.environ["NFL_WEATHER_WORKERS"])
        if "NFL_SCHEDULE_URL" in os.environ:
            self.schedule.base_url = os.environ["NFL_SCHEDULE_URL"]
        if "NFL_DEBUG" in os.environ:
            self.debug = os.environ["NFL_DEBUG"].lower() in ("true", "1", "yes")
        if "NFL_OUTPUT_DIR" in os.environ:
            self.output.output_dir = os.environ["NFL_OUTPUT_DIR"]
        if "NFL_LOG_LEVEL" in os.environ:
            self.logging.level = os.environ["NFL_LOG_LEVEL"]

        return self


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the current settings instance.

    Returns:
        Current Settings instance
    """
    global _settings

    if _settings is None:
        # Try to load from file, otherwise use defaults
        config_file = Path("./config/settings.json")
        if config_file.exists():
            _settings = Settings.load_from_file(str(config_file))
        else:
            _settings = Settings.load_from_env()

    return _settings


def set_settings(settings: Settings) -> None:
    """
    Set the global settings instance.

    Args:
        settings: Settings instance to use
    """
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to None, forcing reload on next access."""
    global _settings
    _settings = None
