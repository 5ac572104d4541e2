from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CoordinateSchema(BaseModel):
    """Field-named coordinate input, e.g. a decoded JSON object."""

    # Strict: "12.5" is not a number here.
    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    latitude: float = Field(..., allow_inf_nan=False)
    longitude: float = Field(..., allow_inf_nan=False)
    altitude: float = Field(0.0, allow_inf_nan=False)
