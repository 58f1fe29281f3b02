import logging
import sys
import traceback

from handlers.handlers import Handlers
from services.spotify_service import get_spotify_client
from utils.config import TOKEN


def main(token=None, client=None):
    logging.basicConfig(level=logging.WARNING)

    if client is None:
        client = get_spotify_client(TOKEN if token is None else token)
    handlers = Handlers(client)

    try:
        code = handlers.run()
    except Exception:
        print(f"Error durante el paso '{handlers.state.value}':")
        traceback.print_exc()
        raise
    sys.exit(code)


if __name__ == "__main__":
    main()
