"""
IVAO whazzup API client.

Performs the single outbound request made per board view and normalizes
the pilot list. Failures never propagate: they come back as a degraded
FetchResult carrying the reason, with an empty pilot list.

Whazzup pilot object (fields we read):
    callsign                      - Pilot callsign
    flightPlan.departureId        - Departure ICAO code
    flightPlan.arrivalId          - Arrival ICAO code
    flightPlan.departureTime      - Departure time (epoch-style seconds)
    flightPlan.arrivalTime        - Arrival time (epoch-style seconds)
    flightPlan.eet                - Estimated enroute time (seconds)
    lastTrack.arrivalDistance     - Distance to arrival (nautical miles)
    lastTrack.groundSpeed         - Ground speed (knots)
    lastTrack.timestamp           - Time of the last track report
    lastTrack.state               - Flight state (e.g., 'En Route')
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, List, Any

import requests

from pilot_board.config import WhazzupConfig, config

logger = logging.getLogger(__name__)


def _as_number(value: Any) -> Optional[float]:
    """Numeric feed value, or None if absent or malformed."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _as_text(value: Any) -> Optional[str]:
    """String feed value, or None if absent."""
    if value is None:
        return None
    return str(value)


def _section(raw: dict, key: str) -> dict:
    # flightPlan and lastTrack are null for pilots still connecting
    value = raw.get(key)
    return value if isinstance(value, dict) else {}


@dataclass
class PilotReport:
    """
    One pilot entry from the whazzup feed.

    Every field except callsign may be None if not reported.
    """
    callsign: str
    departure_icao: Optional[str] = None
    arrival_icao: Optional[str] = None
    departure_time: Optional[float] = None
    arrival_time: Optional[float] = None
    arrival_distance_nm: Optional[float] = None
    ground_speed_kt: Optional[float] = None
    last_track_timestamp: Optional[str] = None
    eet_seconds: Optional[float] = None
    track_state: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: dict) -> 'PilotReport':
        """Parse a whazzup pilot object into a PilotReport."""
        flight_plan = _section(raw, 'flightPlan')
        last_track = _section(raw, 'lastTrack')

        return cls(
            callsign=_as_text(raw.get('callsign')) or '',
            departure_icao=_as_text(flight_plan.get('departureId')),
            arrival_icao=_as_text(flight_plan.get('arrivalId')),
            departure_time=_as_number(flight_plan.get('departureTime')),
            arrival_time=_as_number(flight_plan.get('arrivalTime')),
            arrival_distance_nm=_as_number(last_track.get('arrivalDistance')),
            ground_speed_kt=_as_number(last_track.get('groundSpeed')),
            last_track_timestamp=_as_text(last_track.get('timestamp')),
            eet_seconds=_as_number(flight_plan.get('eet')),
            track_state=_as_text(last_track.get('state')),
        )


@dataclass
class FetchResult:
    """
    Outcome of one whazzup fetch.

    A degraded result always has an empty pilot list; reason says why.
    """
    pilots: List[PilotReport] = field(default_factory=list)
    degraded: bool = False
    reason: Optional[str] = None

    @classmethod
    def ok(cls, pilots: List[PilotReport]) -> 'FetchResult':
        return cls(pilots=list(pilots))

    @classmethod
    def failure(cls, reason: str) -> 'FetchResult':
        return cls(pilots=[], degraded=True, reason=reason)


class WhazzupClient:
    """
    Client for the IVAO whazzup tracker endpoint.

    Handles:
    - One GET per fetch(), no retries and no caching
    - JSON parsing and shape checks
    - Degrading every failure to an empty result
    """

    def __init__(
        self,
        url: str = 'https://api.ivao.aero/v2/tracker/whazzup',
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, whazzup_config: Optional[WhazzupConfig] = None) -> 'WhazzupClient':
        """Create client from application configuration."""
        whazzup_config = whazzup_config or config.whazzup
        return cls(
            url=whazzup_config.url,
            timeout=whazzup_config.timeout_seconds,
        )

    def fetch(self) -> FetchResult:
        """
        Fetch the current pilot list.

        Returns:
            FetchResult with the parsed pilots, or a degraded result with
            an empty pilot list on network, HTTP or parse errors.
        """
        logger.debug(f'Fetching whazzup: {self.url}')

        try:
            response = self.session.get(self.url, timeout=self.timeout)
        except requests.exceptions.Timeout:
            logger.error('Whazzup API timeout')
            return FetchResult.failure('timeout')
        except requests.exceptions.RequestException as e:
            logger.error(f'Whazzup request failed: {e}')
            return FetchResult.failure(f'request failed: {e}')

        # Anything outside 2xx degrades, including an unfollowed 3xx
        if not 200 <= response.status_code < 300:
            logger.error(f'Whazzup API error: {response.status_code}')
            return FetchResult.failure(f'http status {response.status_code}')

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f'Whazzup response is not valid JSON: {e}')
            return FetchResult.failure('invalid json')

        pilots_raw = self._extract_pilots(data)
        if pilots_raw is None:
            logger.error('Whazzup response has no clients.pilots list')
            return FetchResult.failure('unexpected response shape')

        pilots = [PilotReport.from_dict(raw) for raw in pilots_raw if isinstance(raw, dict)]

        logger.info(f'Received {len(pilots)} pilots from whazzup')

        return FetchResult.ok(pilots)

    @staticmethod
    def _extract_pilots(data: Any) -> Optional[list]:
        """Return data['clients']['pilots'] if it is a list, else None."""
        if not isinstance(data, dict):
            return None
        clients = data.get('clients')
        if not isinstance(clients, dict):
            return None
        pilots = clients.get('pilots')
        if not isinstance(pilots, list):
            return None
        return pilots
