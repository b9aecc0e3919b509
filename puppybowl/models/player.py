from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Player(BaseModel):
    """A single roster entrant as returned by the API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: int  # Assigned by the API
    name: str
    breed: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")
    # Display name of the team; None means unassigned
    team: Optional[str] = None
    status: Optional[str] = None
    team_id: Optional[int] = Field(None, alias="teamId")

    @field_validator("team", mode="before")
    @classmethod
    def _team_name(cls, value: Any) -> Any:
        # Single-player responses embed the whole team object
        if isinstance(value, dict):
            return value.get("name")
        return value


class NewPlayer(BaseModel):
    """Draft sent to the API when creating a player."""

    model_config = ConfigDict(
        populate_by_name=True, extra="forbid", str_strip_whitespace=True
    )

    name: str = Field(..., min_length=1)
    breed: str = Field(..., min_length=1)
    image_url: Optional[str] = Field(None, alias="imageUrl")
    status: Optional[str] = None

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
