"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, caljan.toml only contains
overrides. An empty (or missing) file reproduces the stock janitor.
"""

from __future__ import annotations

from datetime import time
from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from caljan.domain.notifications import (
    DEFAULT_ATTRIBUTION,
    DEFAULT_BODY,
    DEFAULT_SUBJECT_TEMPLATE,
    DEFAULT_TIME_FORMAT,
)

Hour = Annotated[int, Field(ge=0, le=23)]
Minute = Annotated[int, Field(ge=0, le=59)]


class WindowConfig(BaseModel):
    """[window] section."""

    model_config = {"frozen": True}

    look_ahead_days: int = Field(default=14, ge=1)


class BlocksConfig(BaseModel):
    """[blocks] section.

    ``daily_start`` and ``daily_end`` are ``[hour, minute]`` pairs on the same
    day; a block never wraps past midnight.
    """

    model_config = {"frozen": True}

    marker: str = "DNS"
    daily_start: tuple[Hour, Minute] = (0, 0)
    daily_end: tuple[Hour, Minute] = (8, 0)

    @model_validator(mode="after")
    def _validate_order(self) -> BlocksConfig:
        if self.daily_start > self.daily_end:
            raise ValueError(
                f"daily_start {list(self.daily_start)} is later than "
                f"daily_end {list(self.daily_end)}"
            )
        return self

    @property
    def start_time(self) -> time:
        return time(*self.daily_start)

    @property
    def end_time(self) -> time:
        return time(*self.daily_end)


class GuestsConfig(BaseModel):
    """[guests] section."""

    model_config = {"frozen": True}

    large_event_min_guests: int = 24


class NotifyConfig(BaseModel):
    """[notify] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    subject_template: str = DEFAULT_SUBJECT_TEMPLATE
    time_format: str = DEFAULT_TIME_FORMAT
    body: str = DEFAULT_BODY
    attribution: str = DEFAULT_ATTRIBUTION


class StoreConfig(BaseModel):
    """[store] section. Relative paths resolve against the config directory."""

    model_config = {"frozen": True}

    path: str = "calendar.json"
