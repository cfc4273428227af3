from typing import List

from pokecli.clients.pokeapi_client import PokeAPIClient
from pokecli.models import PokemonSummary


class PokemonService:
    # Service requires the PokeAPI client via Dependency Injection
    def __init__(self, poke_client: PokeAPIClient):
        self._poke_client = poke_client

    def get_summary(self, name: str) -> PokemonSummary:
        """
        Fetches the full Pokemon payload and projects the fields shown to the user.
        """
        pokemon = self._poke_client.fetch_by_name(name)

        return PokemonSummary(
            name=pokemon.name,
            order=pokemon.order,
            artwork=pokemon.sprites.other.official_artwork,
        )


def format_summary(summary: PokemonSummary) -> List[str]:
    """Renders the summary as the three output lines of the `get` command."""
    return [
        f"name:  {summary.name}",
        f"pokemon#:  {summary.order}",
        f"Artwork URL:  {summary.artwork}",
    ]
