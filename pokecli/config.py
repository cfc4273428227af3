import os
from dataclasses import dataclass
from typing import Optional


class ConfigurationError(Exception):
    """Raised when an environment setting cannot be used."""


@dataclass(frozen=True)
class Settings:
    """Runtime settings, overridable from the environment."""
    pokeapi_base_url: str = "https://pokeapi.co/api/v2"
    pokeapi_timeout: float = 10.0
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        raw_timeout = os.getenv("POKEAPI_TIMEOUT")
        timeout = cls.pokeapi_timeout
        if raw_timeout is not None:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"POKEAPI_TIMEOUT must be a number of seconds, got {raw_timeout!r}."
                ) from None
            if timeout <= 0:
                raise ConfigurationError(
                    f"POKEAPI_TIMEOUT must be greater than zero, got {raw_timeout!r}."
                )

        return cls(
            pokeapi_base_url=os.getenv("POKEAPI_BASE_URL", cls.pokeapi_base_url),
            pokeapi_timeout=timeout,
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Reads the environment on first use, so import never fails on a bad value."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
