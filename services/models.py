from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict


class SpotifyQuery(BaseModel):
    """Descriptor inmutable de una peticion a la API de Spotify."""

    model_config = ConfigDict(frozen=True)

    method: Literal["GET", "PUT", "POST", "DELETE"]
    endpoint: str
    body: Optional[dict[str, Any]] = None


class TrackRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri: str


class GetMeResponse(BaseModel):
    id: Optional[str] = None


class CreatePlaylistResponse(BaseModel):
    id: str


class SavedTrackItem(BaseModel):
    added_at: Optional[str] = None
    track: TrackRef


class GetTracksResponse(BaseModel):
    items: list[SavedTrackItem]
    next: Optional[str] = None
