import json
import logging

import requests
from pydantic import ValidationError

from services.models import SpotifyQuery
from utils.config import PAGE_SIZE, REQUESTS_TIMEOUT, SPOTIFY_API_URL

logger = logging.getLogger(__name__)


class SpotifyError(Exception):
    """Error base de las llamadas a Spotify."""


class SpotifyDecodeError(SpotifyError):
    """La respuesta no es JSON o no tiene la forma esperada."""

    def __init__(self, endpoint, cause):
        super().__init__(f"Could not decode response from {endpoint}: {cause}")
        self.endpoint = endpoint
        self.cause = cause


class SpotifyClient:
    # No se revisa el status HTTP ni se reintenta: la respuesta se decodifica siempre

    def __init__(self, token: str, session=None, timeout=REQUESTS_TIMEOUT):
        self.token = token
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _headers(self):
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }

    def request(self, query: SpotifyQuery, model=None):
        """Envia la peticion y devuelve el JSON, validado contra `model` si se indica."""
        logger.debug("%s %s", query.method, query.endpoint)
        data = None if query.body is None else json.dumps(query.body)
        resp = self.session.request(
            query.method,
            query.endpoint,
            headers=self._headers(),
            data=data,
            timeout=self.timeout,
        )

        if not resp.content:
            payload = None
        else:
            try:
                payload = resp.json()
            except ValueError as e:
                raise SpotifyDecodeError(query.endpoint, e) from e

        if model is None:
            return payload
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise SpotifyDecodeError(query.endpoint, e) from e


def get_spotify_client(token, session=None):
    return SpotifyClient(token, session=session)


# * ---------------- QUERIES ----------------
def get_me_query():
    return SpotifyQuery(method="GET", endpoint=f"{SPOTIFY_API_URL}/me")


def create_playlist_mutation(user_id, name):
    return SpotifyQuery(
        method="POST",
        endpoint=f"{SPOTIFY_API_URL}/users/{user_id}/playlists",
        body={"name": name},
    )


def get_saved_tracks_query(offset, limit=PAGE_SIZE):
    return SpotifyQuery(
        method="GET",
        endpoint=f"{SPOTIFY_API_URL}/me/tracks?limit={limit}&offset={offset}",
    )


def add_items_to_playlist_mutation(playlist_id, uris):
    return SpotifyQuery(
        method="POST",
        endpoint=f"{SPOTIFY_API_URL}/playlists/{playlist_id}/tracks",
        body={"uris": list(uris)},
    )
