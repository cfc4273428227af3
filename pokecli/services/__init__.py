from .pokemon_service import PokemonService, format_summary

__all__ = ['PokemonService', 'format_summary']
