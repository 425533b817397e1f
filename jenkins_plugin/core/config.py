"""
Plugin configuration using pydantic-settings.
All environment variables are validated and typed.
"""

import os
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Plugin settings loaded from environment variables.

    Parsed once at startup and handed to every component that needs it;
    the instance is frozen so nothing downstream can alter it.
    """

    # Jenkins server
    url: str
    username: str = ""
    password: str = ""

    # Job coordinates
    job_name: str

    # JSON object of trigger parameters, e.g. {"BRANCH": "GIT_MATERIAL_BRANCH"}
    job_trigger_params: str = ""

    # "<repo>,<checkoutPath>,<branch>,<commit>|<repo2>,..." - only the first repo is used
    git_material_request: str = ""

    # Minutes
    jenkins_plugin_timeout: int = Field(default=30, ge=1)
    build_status_poll_duration: int = Field(default=1, ge=0)

    # Transport
    request_timeout: float = Field(default=30.0, gt=0)
    verify_ssl: bool = True
    queue_poll_interval: float = Field(default=1.0, ge=0)

    # Exit non-zero when the build finishes with anything but SUCCESS
    fail_on_unsuccessful: bool = False

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("url", "job_name")
    @classmethod
    def _require_non_blank(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("must not be empty")
        return cleaned

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper() or "INFO"
        return value

    @property
    def timeout_seconds(self) -> float:
        """Overall plugin timeout in seconds."""
        return self.jenkins_plugin_timeout * 60.0

    @property
    def poll_interval_seconds(self) -> float:
        """Build status poll interval in seconds."""
        return self.build_status_poll_duration * 60.0

    model_config = {
        "env_file": os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), ".env"),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "frozen": True,
    }
