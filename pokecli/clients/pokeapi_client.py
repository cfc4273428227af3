import logging
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from pokecli.config import get_settings
from pokecli.models import Pokemon

logger = logging.getLogger(__name__)


# Base exception for every failure talking to PokeAPI
class PokeAPIError(Exception):
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class TransportError(PokeAPIError):
    """DNS, connection or timeout failure; no response was received."""


class DecodeError(PokeAPIError):
    """The response body is not JSON, or not shaped like a Pokemon."""


class UnexpectedStatusError(PokeAPIError):
    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code


class NotFoundError(UnexpectedStatusError):
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)


class PokeAPIClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        # Fall back to the environment-driven settings when not provided
        if base_url is None or timeout is None:
            settings = get_settings()
            if base_url is None:
                base_url = settings.pokeapi_base_url
            if timeout is None:
                timeout = settings.pokeapi_timeout
        self.client = httpx.Client(base_url=base_url, timeout=timeout)

    def _fetch_pokemon_response(self, name: str) -> httpx.Response:
        """Internal method performing the GET and mapping status/transport errors."""
        url = f"/pokemon/{quote(name, safe='')}"
        logger.info(f"Fetching Pokemon: {name}")

        try:
            response = self.client.get(url)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
            return response

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            if status_code == 404:
                logger.error(f"Pokemon '{name}' not found.")
                raise NotFoundError(detail=f"Pokemon '{name}' not found.") from e
            logger.error(f"PokeAPI failed with status {status_code} for '{name}'")
            raise UnexpectedStatusError(
                status_code=status_code,
                detail=f"PokeAPI failed with status {status_code}",
            ) from e
        except httpx.RequestError as e:
            # Handle network failures/timeouts
            logger.error(f"PokeAPI network error: {str(e)}")
            raise TransportError(detail=f"PokeAPI network error: {str(e)}") from e

    def fetch_by_name(self, name: str) -> Pokemon:
        """Fetches one Pokemon by name or id and decodes the full payload."""
        normalized_name = name.strip().lower()
        if not normalized_name:
            raise ValueError("Pokemon name must not be empty.")
        # "." and ".." would be resolved as dot segments and leave /pokemon/{name}
        if not normalized_name.strip("."):
            raise ValueError(f"Invalid Pokemon name: {name!r}.")

        response = self._fetch_pokemon_response(normalized_name)

        try:
            return Pokemon.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Can not decode PokeAPI response for '{normalized_name}': {e}")
            raise DecodeError(
                detail=f"PokeAPI returned an unexpected response format for '{normalized_name}'."
            ) from e

    def close(self):
        """Close the underlying HTTP connection pool."""
        self.client.close()

    def __enter__(self) -> "PokeAPIClient":
        return self

    def __exit__(self, *exc_info):
        self.close()
