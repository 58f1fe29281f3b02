import os
from dotenv import load_dotenv

load_dotenv()

TOKEN = os.getenv("TOKEN", "")

SPOTIFY_API_URL = "https://api.spotify.com/v1"
PLAYLIST_NAME = "What Type Of Dog Is This?"

# Limites de la API
PAGE_SIZE = 50
BATCH_SIZE = 100
REQUESTS_TIMEOUT = 10
