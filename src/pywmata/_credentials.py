"""API key holder shared by every request a client issues."""

from __future__ import annotations

from pywmata.exceptions import WmataConfigError


class CredentialStore:
    """Holds the single access token used to sign request URLs.

    ``register`` overwrites unconditionally and performs no validation.
    Concurrent registration is not coordinated: the last writer wins and
    a request built during a swap may carry either value.
    """

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def register(self, token: str) -> None:
        self._token = token

    def current_token(self) -> str:
        """Return the most recently registered token.

        Raises :class:`WmataConfigError` if no token was ever registered.
        """
        if self._token is None:
            raise WmataConfigError("No API key registered (set config.api_key or call register_api_key)")
        return self._token

    @property
    def is_set(self) -> bool:
        return self._token is not None
