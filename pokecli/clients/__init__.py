"""Client modules for external API communication."""
from .pokeapi_client import (
    DecodeError,
    NotFoundError,
    PokeAPIClient,
    PokeAPIError,
    TransportError,
    UnexpectedStatusError,
)

__all__ = [
    'PokeAPIClient',
    'PokeAPIError',
    'TransportError',
    'DecodeError',
    'UnexpectedStatusError',
    'NotFoundError',
]
