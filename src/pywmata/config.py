"""Client configuration for pywmata."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pywmata._constants import API_KEY_PARAM, BASE_URL, USER_AGENT


@dataclasses.dataclass(frozen=True)
class WmataConfig:
    """Client configuration.

    Parameters
    ----------
    api_key : str or None
        WMATA developer API key.  May be left unset and registered later
        with :meth:`pywmata.WmataClient.register_api_key`.
    base_url : str
        API base URL.  Relative endpoint paths are joined onto it.
    api_key_param : str
        Name of the query parameter that carries the key.
    user_agent : str
        ``User-Agent`` header sent with every request.
    """

    api_key: str | None = None
    base_url: str = BASE_URL
    api_key_param: str = API_KEY_PARAM
    user_agent: str = USER_AGENT

    @classmethod
    def from_env(cls, **overrides: Any) -> WmataConfig:
        """Create configuration from environment variables.

        Reads ``WMATA_API_KEY`` and the optional ``WMATA_BASE_URL``,
        ``WMATA_API_KEY_PARAM`` and ``WMATA_USER_AGENT`` variables.
        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "WMATA_API_KEY": "api_key",
            "WMATA_BASE_URL": "base_url",
            "WMATA_API_KEY_PARAM": "api_key_param",
            "WMATA_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
