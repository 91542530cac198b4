"""
Data models and type definitions for helpkit.

Provides the small value types shared by the helpers and the configuration.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RoundingMode(str, Enum):
    """Single-decimal rounding policies."""

    HALF_EVEN = "half_even"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"


class ParsedLocale(BaseModel):
    """Primary language tag and first subtag of a locale string."""

    language_tag: str
    sub_tag: Optional[str] = Field(default=None)

    model_config = ConfigDict(frozen=True)
