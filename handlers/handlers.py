import enum
import random

from services.models import CreatePlaylistResponse, GetMeResponse
from services.saved_tracks import SavedTracksCursor
from services.spotify_service import (
    add_items_to_playlist_mutation,
    create_playlist_mutation,
    get_me_query,
)
from utils.config import BATCH_SIZE, PAGE_SIZE, PLAYLIST_NAME
from utils.utils import drain_batches, shuffle_tracks


class WorkflowState(enum.Enum):
    INIT = "init"
    IDENTITY_FETCHED = "identity_fetched"
    PLAYLIST_CREATED = "playlist_created"
    TRACKS_COLLECTED = "tracks_collected"
    SHUFFLED = "shuffled"
    PUBLISHING = "publishing"
    DONE = "done"


class Handlers:
    def __init__(self, client, playlist_name=PLAYLIST_NAME, rng=None,
                 page_size=PAGE_SIZE, batch_size=BATCH_SIZE):
        self.client = client
        self.playlist_name = playlist_name
        self.rng = rng if rng is not None else random.Random()
        self.page_size = page_size
        self.batch_size = batch_size
        self.state = WorkflowState.INIT
        self.batches_published = 0

    # * ---------------- USUARIO ----------------
    def fetch_user_id(self):
        me = self.client.request(get_me_query(), GetMeResponse)
        self.state = WorkflowState.IDENTITY_FETCHED
        return me.id

    # * ---------------- PLAYLIST ----------------
    def create_playlist(self, user_id):
        playlist = self.client.request(
            create_playlist_mutation(user_id, self.playlist_name),
            CreatePlaylistResponse,
        )
        self.state = WorkflowState.PLAYLIST_CREATED
        return playlist.id

    # * ---------------- CANCIONES ----------------
    def collect_tracks(self):
        tracks = list(SavedTracksCursor(self.client, page_size=self.page_size))
        self.state = WorkflowState.TRACKS_COLLECTED
        return tracks

    def shuffle_tracks(self, tracks):
        shuffled = shuffle_tracks(tracks, self.rng)
        self.state = WorkflowState.SHUFFLED
        return shuffled

    def publish_tracks(self, playlist_id, tracks):
        # Consume `tracks` desde el principio
        for block in drain_batches(tracks, self.batch_size):
            self.state = WorkflowState.PUBLISHING
            print("Publishing tracks: ", len(tracks) + len(block))
            uris = [t.uri for t in block]
            self.client.request(add_items_to_playlist_mutation(playlist_id, uris))
            self.batches_published += 1
        self.state = WorkflowState.DONE

    # * ---------------- FLUJO COMPLETO ----------------
    def run(self):
        """Copia las canciones guardadas a una playlist nueva en orden aleatorio.

        Devuelve el codigo de salida del proceso: 1 si el token no es valido.
        Cualquier otro error se propaga sin limpiar la playlist creada.
        """
        user_id = self.fetch_user_id()
        if user_id is None:
            print("\n\nDo you bark dog? Bad token.\n\n")
            return 1
        print("King of the castle!", user_id)

        playlist_id = self.create_playlist(user_id)
        print("I like!", playlist_id)

        tracks = self.collect_tracks()
        shuffled = self.shuffle_tracks(tracks)
        self.publish_tracks(playlist_id, shuffled)
        print("Very Naice!")
        return 0
