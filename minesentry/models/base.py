"""
Pydantic base models shared by all MineSentry entities.

The frontend speaks camelCase JSON (userId, validationVotes, photoUrl),
Python code uses snake_case attributes. Every model accepts either name
on input and serializes with the camelCase alias.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# A real JSON number: no numeric strings, no booleans, no NaN or Infinity.
Coordinate = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class CamelModel(BaseModel):
    """Base model with camelCase wire aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Location(CamelModel):
    """A finite WGS84 coordinate pair."""

    lat: Coordinate = Field(..., description="Latitude")
    lng: Coordinate = Field(..., description="Longitude")
