import random


def shuffle_tracks(tracks, rng=None):
    """Devuelve una copia barajada de la lista (permutacion uniforme)"""
    shuffled = list(tracks)
    (rng or random).shuffle(shuffled)
    return shuffled


def drain_batches(items, n):
    # ? VACIA LA LISTA DESDE EL PRINCIPIO EN BLOQUES DE TAMAÑO n
    if n <= 0:
        raise ValueError(f"batch size must be positive, got {n}")
    while items:
        batch = items[:n]
        del items[:n]
        yield batch
