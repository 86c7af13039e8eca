"""Configuration for calendar-clone."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from calendar_clone.constants import ICS_PRODID, ICS_UID_DOMAIN, STORE_FILENAME


class CalendarConfig(BaseModel):
    """Calendar configuration with Pydantic validation."""

    # Storage paths
    store_path: Path = Field(default=Path("data") / STORE_FILENAME)
    export_dir: Path = Field(default=Path("."))
    log_dir: Path = Field(default=Path("logs"))

    # File naming
    log_filename: str = Field(default="calendar_clone.log")

    # ICS identity
    uid_domain: str = Field(default=ICS_UID_DOMAIN, min_length=1)
    prodid: str = Field(default=ICS_PRODID, min_length=1)

    @classmethod
    def from_env(cls) -> "CalendarConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Storage paths
        if "CALENDAR_STORE_PATH" in os.environ:
            config_dict["store_path"] = Path(os.environ["CALENDAR_STORE_PATH"])
        if "EXPORT_DIR" in os.environ:
            config_dict["export_dir"] = Path(os.environ["EXPORT_DIR"])
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])

        # File naming
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # ICS identity (blank values keep the defaults)
        if os.environ.get("ICS_UID_DOMAIN"):
            config_dict["uid_domain"] = os.environ["ICS_UID_DOMAIN"]
        if os.environ.get("ICS_PRODID"):
            config_dict["prodid"] = os.environ["ICS_PRODID"]

        return cls(**config_dict)
