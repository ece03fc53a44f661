import os
from dataclasses import dataclass
from typing import Optional
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Tracked team
TEAM_ABBREV = os.getenv("SCHEDULE_TEAM_ABBREV", "NYR")
TEAM_NAME = os.getenv("SCHEDULE_TEAM_NAME", "New York Rangers")
HOME_VENUE = os.getenv("SCHEDULE_HOME_VENUE", "Madison Square Garden")

# NHL web API
API_URL = os.getenv(
    "SCHEDULE_API_URL",
    f"https://api-web.nhle.com/v1/club-schedule-season/{TEAM_ABBREV}/now",
)
REQUEST_TIMEOUT = int(os.getenv("SCHEDULE_REQUEST_TIMEOUT", 30))

# Display
TIMEZONE = os.getenv("SCHEDULE_TIMEZONE", "America/New_York")
TIMEZONE_LABEL = os.getenv("SCHEDULE_TIMEZONE_LABEL", "ET")
SEASON = os.getenv("SCHEDULE_SEASON")  # e.g. "2025-26"; derived from the date when unset
UPCOMING_LIMIT = int(os.getenv("SCHEDULE_UPCOMING_LIMIT", 6))

# Output
OUTPUT_PATH = os.getenv("SCHEDULE_OUTPUT", "index.html")


@dataclass(frozen=True)
class DisplayConfig:
    """Everything the fetcher and renderer need, passed explicitly."""

    team_abbrev: str = TEAM_ABBREV
    team_name: str = TEAM_NAME
    home_venue: str = HOME_VENUE
    api_url: str = API_URL
    request_timeout: int = REQUEST_TIMEOUT
    timezone: str = TIMEZONE
    timezone_label: str = TIMEZONE_LABEL
    season: Optional[str] = SEASON
    upcoming_limit: int = UPCOMING_LIMIT
    output_path: str = OUTPUT_PATH

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def from_settings(cls) -> "DisplayConfig":
        return cls()
