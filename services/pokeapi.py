import requests

from .core import POKEAPI_BASE, REQUEST_TIMEOUT


def fetch_json(url: str, timeout: int = REQUEST_TIMEOUT):
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r.json()


def listing_url(base: str = POKEAPI_BASE, limit: int = 1025) -> str:
    return f"{base.rstrip('/')}/pokemon?limit={int(limit)}"


def fetch_pokemon_listing(base: str = POKEAPI_BASE, limit: int = 1025,
                          timeout: int = REQUEST_TIMEOUT, fetch=fetch_json):
    """Return the [{name, url}] entries of the /pokemon listing, capped at limit."""
    data = fetch(listing_url(base, limit), timeout=timeout)
    results = (data or {}).get('results')
    if not isinstance(results, list):
        raise ValueError("PokeAPI listing response has no 'results' list")
    return results
