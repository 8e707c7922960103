"""Rail incident endpoint (Incidents.svc/Incidents)."""

from __future__ import annotations

from pywmata._api._common import Endpoint, fetch_many
from pywmata._credentials import CredentialStore
from pywmata._transport import Transport
from pywmata.config import WmataConfig
from pywmata.models.incident import RailIncident

RAIL_INCIDENTS = Endpoint("Incidents.svc/Incidents", "Incidents")


async def fetch_rail_incidents(
    config: WmataConfig,
    credentials: CredentialStore,
    transport: Transport,
) -> list[RailIncident] | None:
    """Fetch current rail incidents.  An empty list means service is normal."""
    return await fetch_many(
        endpoint=RAIL_INCIDENTS,
        model=RailIncident,
        config=config,
        credentials=credentials,
        transport=transport,
    )
