# src/ownvsrent/api/schemas.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict, Field


# --------------------------------------------
# Compute / validate
# --------------------------------------------

class ScenarioRequest(BaseModel):
    """
    Parameter set for /scenario and /scenario/validate.

    Deliberately schema-less: fields arrive as snake_case or camelCase, as
    numbers or strings ("6.5%"), and missing / junk values are the engine's
    and validator's business, not a 422.
    """
    model_config = ConfigDict(extra="allow")


class ScenarioResponse(BaseModel):
    """
    result + summary + chart + formatted. Permissive so new result fields
    don't need a schema change.
    """
    model_config = ConfigDict(extra="allow")


class ValidationResponse(BaseModel):
    is_valid: bool
    errors: dict[str, str] = Field(default_factory=dict)
    missing: list[str] = Field(default_factory=list)


# --------------------------------------------
# Presets
# --------------------------------------------

class PresetOption(BaseModel):
    id: str
    name: str
    description: str


class PresetTemplate(PresetOption):
    parameters: dict[str, float]


# --------------------------------------------
# Share links
# --------------------------------------------

class ShareUrlRequest(BaseModel):
    parameters: dict[str, Any]
    base_url: str | None = None
    # drop values equal to the app defaults to keep links short
    only_changes: bool = True


class ShareUrlResponse(BaseModel):
    url: str


# --------------------------------------------
# Saved scenarios
# --------------------------------------------

class SaveScenarioRequest(BaseModel):
    name: str = Field(..., min_length=1)
    description: str | None = None
    parameters: dict[str, Any]


class SavedScenarioItem(BaseModel):
    id: str
    name: str
    description: str | None = None
    parameters: dict[str, Any]
    created_at: str
