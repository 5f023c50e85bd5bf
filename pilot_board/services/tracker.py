"""
Tracker service - the per-request call chain behind the board.

registry.list() -> client.fetch() -> match_pilots()

Nothing here is cached or shared between requests. A degraded fetch
still runs the matcher (on an empty pilot list) so callers always get
two lists, plus the failure reason for logging and the API.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Optional, List, Callable

from pilot_board.analytics import FlightRecord, match_pilots
from pilot_board.ingestion import WhazzupClient
from pilot_board.services.airport_registry import AirportRegistry, AirportInfo

logger = logging.getLogger(__name__)


@dataclass
class TrackerSnapshot:
    """Everything one board view needs."""
    airports: List[AirportInfo] = field(default_factory=list)
    departures: List[FlightRecord] = field(default_factory=list)
    arrivals: List[FlightRecord] = field(default_factory=list)
    degraded: bool = False
    reason: Optional[str] = None
    fetched_at: float = 0.0


class PilotTracker:
    """Composes the airport registry, the whazzup client and the matcher."""

    def __init__(
        self,
        registry: AirportRegistry,
        client: WhazzupClient,
        clock: Callable[[], float] = time.time,
    ):
        self.registry = registry
        self.client = client
        self.clock = clock

    def snapshot(self) -> TrackerSnapshot:
        airports = self.registry.list()
        fetch = self.client.fetch()

        if fetch.degraded:
            logger.warning(f'Whazzup fetch degraded: {fetch.reason}')

        now = int(self.clock())
        matched = match_pilots(
            fetch.pilots,
            {a.icao_code for a in airports},
            now=now,
        )

        return TrackerSnapshot(
            airports=airports,
            departures=matched.departures,
            arrivals=matched.arrivals,
            degraded=fetch.degraded,
            reason=fetch.reason,
            fetched_at=now,
        )
