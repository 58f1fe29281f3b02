from services.models import GetTracksResponse
from services.spotify_service import get_saved_tracks_query
from utils.config import PAGE_SIZE


class SavedTracksCursor:
    """Recorre las canciones guardadas del usuario por paginas de offset.

    `next_batch()` devuelve una lista no vacia de TrackRef o None cuando
    una pagina llega vacia. Solo una pagina vacia termina el recorrido:
    una pagina corta se devuelve y se sigue pidiendo la siguiente.
    Una vez agotado no se reinicia.
    """

    def __init__(self, client, page_size=PAGE_SIZE):
        if page_size <= 0:
            raise ValueError(f"page size must be positive, got {page_size}")
        self.client = client
        self.page_size = page_size
        self._offset = 0
        self._exhausted = False
        self._pending = []

    @property
    def offset(self):
        return self._offset

    @property
    def exhausted(self):
        return self._exhausted

    def next_batch(self):
        if self._exhausted:
            return None

        resp = self.client.request(
            get_saved_tracks_query(self._offset, limit=self.page_size),
            GetTracksResponse,
        )
        print("Gathering tracks: ", self._offset)
        self._offset += self.page_size

        tracks = [item.track for item in resp.items]
        if not tracks:
            self._exhausted = True
            return None
        return tracks

    def __iter__(self):
        return self

    def __next__(self):
        while not self._pending:
            batch = self.next_batch()
            if batch is None:
                raise StopIteration
            self._pending = batch
        return self._pending.pop(0)
