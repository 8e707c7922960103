"""Custom exception hierarchy for pywmata."""

from __future__ import annotations


class WmataError(Exception):
    """Base exception for all pywmata errors."""


class WmataConfigError(WmataError):
    """Invalid or missing configuration (e.g. no API key registered)."""


class WmataNetworkError(WmataError):
    """Transport-level failure (DNS, refused connection, timeout, non-2xx)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class WmataParseError(WmataError):
    """Response body was received but is not well-formed XML."""

    def __init__(self, message: str, *, url: str = "") -> None:
        self.url = url
        super().__init__(message)


class WmataDecodeError(WmataError):
    """A document element could not be decoded into its model.

    Raised for values that are present but unusable (for example a
    non-numeric latitude).  Missing or empty fields never raise; they
    fall back to the model defaults.
    """

    def __init__(self, message: str, *, model: str = "", index: int | None = None) -> None:
        self.model = model
        self.index = index
        super().__init__(message)
