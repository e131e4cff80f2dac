"""Configuration settings for naturaltime."""
from dataclasses import dataclass, field
from typing import List


@dataclass
class Config:
    """Resolver configuration settings.

    Centralized configuration for the dateparser-backed engine and the explorer.
    """
    # Parsing
    languages: List[str] = field(default_factory=lambda: ["en"])
    prefer_dates_from: str = "current_period"  # dateparser: past, future or current_period

    # Display
    display_format: str = "%a %Y-%m-%d %H:%M:%S"

    @classmethod
    def load(cls) -> 'Config':
        """
        Load configuration.

        Returns:
            Config instance with default values
        """
        return cls()


# Global config instance
config = Config.load()
