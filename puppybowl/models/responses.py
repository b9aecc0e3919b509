"""Typed shapes of the roster API responses.

The API answers either with the bare payload (``{"players": [...]}``) or with
an envelope of the form ``{"success": ..., "error": ..., "data": {...}}``.
The list and single-player models accept both; the creation response keeps
the envelope as-is.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .player import Player


def unwrap_envelope(value: Any) -> Any:
    """Returns the payload inside an API envelope, or the value unchanged."""
    if not isinstance(value, dict):
        return value
    if value.get("success") is False:
        raise ValueError(f"API reported failure: {value.get('error')}")
    data = value.get("data")
    if isinstance(data, dict):
        return data
    return value


class PlayerListResponse(BaseModel):
    """Body of ``GET /players``."""

    players: List[Player]

    @model_validator(mode="before")
    @classmethod
    def _unwrap(cls, value: Any) -> Any:
        return unwrap_envelope(value)


class PlayerResponse(BaseModel):
    """Body of ``GET /players/{id}``."""

    player: Optional[Player] = None

    @model_validator(mode="before")
    @classmethod
    def _unwrap(cls, value: Any) -> Any:
        return unwrap_envelope(value)


class NewPlayerData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    new_player: Optional[Player] = Field(None, alias="newPlayer")


class NewPlayerResponse(BaseModel):
    """Envelope returned by ``POST /players``, kept as the API sent it."""

    model_config = ConfigDict(extra="allow")

    success: bool = True
    error: Optional[Any] = None
    data: Optional[NewPlayerData] = None

    @property
    def created_player(self) -> Optional[Player]:
        """The player the API created, if the envelope carries one."""
        if self.data is None:
            return None
        return self.data.new_player
