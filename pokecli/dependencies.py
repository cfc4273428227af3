from typing import Optional

from pokecli.clients import PokeAPIClient
from pokecli.services import PokemonService

_poke_client = None


def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client


def close_poke_client():
    global _poke_client
    if _poke_client is not None:
        _poke_client.close()
        _poke_client = None


def get_pokemon_service(poke_client: Optional[PokeAPIClient] = None) -> PokemonService:
    if poke_client is None:
        poke_client = get_poke_client()
    return PokemonService(poke_client=poke_client)
