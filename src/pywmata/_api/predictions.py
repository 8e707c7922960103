"""Next-train prediction endpoint (StationPrediction.svc/GetPrediction)."""

from __future__ import annotations

from collections.abc import Iterable

from pywmata._api._common import Endpoint, fetch_many
from pywmata._constants import ALL_STATIONS
from pywmata._credentials import CredentialStore
from pywmata._transport import Transport
from pywmata.config import WmataConfig
from pywmata.models.prediction import TrainArrival


def predictions_endpoint(station_codes: Iterable[str]) -> Endpoint:
    """Predictions for a comma-joined list of codes, or ``All`` when empty."""
    codes = ",".join(code for code in station_codes if code)
    return Endpoint(f"StationPrediction.svc/GetPrediction/{codes or ALL_STATIONS}", "Trains")


async def fetch_arrival_times(
    config: WmataConfig,
    credentials: CredentialStore,
    transport: Transport,
    station_codes: Iterable[str],
) -> list[TrainArrival] | None:
    return await fetch_many(
        endpoint=predictions_endpoint(station_codes),
        model=TrainArrival,
        config=config,
        credentials=credentials,
        transport=transport,
    )
