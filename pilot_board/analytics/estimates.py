"""
Pilot matching and time estimation.

Single pass over the whazzup pilot list: each pilot gets ETD, EET and ETA
strings and is placed in the departures list, the arrivals list, both or
neither depending on the watched airport codes.

Time strings are UTC wall clock 'HH:MM UTC' or the sentinel 'N/A'.

Board output quirks:
- EET formats the feed's enroute duration as if it were a clock time.
- ETA converts distance and speed to km and km/h before dividing; the
  factors cancel.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, List, Iterable, Collection

from pilot_board.ingestion.whazzup_client import PilotReport

logger = logging.getLogger(__name__)

NOT_AVAILABLE = 'N/A'
UNKNOWN_STATE = 'Unknown'
KM_PER_NM = 1.852


def format_utc_clock(timestamp: float) -> str:
    """
    Format an epoch timestamp as 'HH:MM UTC'.

    Returns 'N/A' for values outside the platform's datetime range.
    """
    try:
        moment = datetime.fromtimestamp(int(timestamp), tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return NOT_AVAILABLE
    return moment.strftime('%H:%M') + ' UTC'


def calculate_etd(departure_time: Optional[float]) -> str:
    """ETD from the flight plan departure time (0 counts as absent)."""
    if departure_time:
        return format_utc_clock(departure_time)
    return NOT_AVAILABLE


def calculate_eet(eet_seconds: Optional[float]) -> str:
    """EET straight from the feed's eet value, rendered as a clock time."""
    if eet_seconds is not None:
        return format_utc_clock(eet_seconds)
    return NOT_AVAILABLE


def calculate_elapsed_eet(
    departure_time: Optional[float],
    arrival_time: Optional[float],
) -> str:
    """
    EET recomputed from flight plan departure and arrival times.

    Not used for the board, which prefers the feed's eet value.
    """
    if not departure_time or not arrival_time:
        return NOT_AVAILABLE
    eet_seconds = int(arrival_time - departure_time)
    hours = eet_seconds // 3600
    minutes = (eet_seconds % 3600) // 60
    return f'{hours:02d}:{minutes:02d} UTC'


def calculate_eta(
    arrival_distance_nm: Optional[float],
    ground_speed_kt: Optional[float],
    last_track_timestamp: Optional[str],
    now: Optional[float] = None,
) -> str:
    """
    ETA from remaining distance and current ground speed.

    Args:
        arrival_distance_nm: Distance to the arrival airport
        ground_speed_kt: Current ground speed
        last_track_timestamp: Must be present for an estimate
        now: Current epoch seconds (defaults to the wall clock)
    """
    if not (ground_speed_kt and ground_speed_kt > 0):
        return NOT_AVAILABLE
    if not (arrival_distance_nm and arrival_distance_nm > 0):
        return NOT_AVAILABLE
    # '0' counts as no timestamp, like an empty string
    if not last_track_timestamp or last_track_timestamp == '0':
        return NOT_AVAILABLE

    distance_km = arrival_distance_nm * KM_PER_NM
    speed_kmh = ground_speed_kt * KM_PER_NM
    eta_seconds = (distance_km / speed_kmh) * 3600

    current_time = int(time.time()) if now is None else now
    return format_utc_clock(current_time + eta_seconds)


@dataclass
class FlightRecord:
    """A matched pilot as shown in one board row."""
    callsign: str
    from_icao: str
    to_icao: str
    etd: str
    eet: str
    eta: str
    last_track: str

    def to_dict(self) -> dict:
        return {
            'callsign': self.callsign,
            'from': self.from_icao,
            'to': self.to_icao,
            'etd': self.etd,
            'eet': self.eet,
            'eta': self.eta,
            'last_track': self.last_track,
        }


@dataclass
class MatchResult:
    """Departures and arrivals, each in feed order."""
    departures: List[FlightRecord] = field(default_factory=list)
    arrivals: List[FlightRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'departures': [r.to_dict() for r in self.departures],
            'arrivals': [r.to_dict() for r in self.arrivals],
        }


def match_pilots(
    pilots: Iterable[PilotReport],
    airport_codes: Collection[str],
    now: Optional[float] = None,
) -> MatchResult:
    """
    Match pilots against the watched airport codes.

    A pilot lands in departures iff its departure code is watched and in
    arrivals iff its arrival code is watched; the two checks are
    independent. Order follows the input and duplicates are kept.

    Args:
        pilots: Parsed whazzup pilot reports
        airport_codes: ICAO codes of the watched airports
        now: Epoch seconds used for every ETA in this pass

    Returns:
        MatchResult with departures and arrivals lists.
    """
    codes = set(airport_codes)
    current_time = int(time.time()) if now is None else now
    result = MatchResult()

    for pilot in pilots:
        departure_id = pilot.departure_icao or ''
        arrival_id = pilot.arrival_icao or ''

        etd = calculate_etd(pilot.departure_time)
        eet = calculate_eet(pilot.eet_seconds)
        eta = calculate_eta(
            pilot.arrival_distance_nm,
            pilot.ground_speed_kt,
            pilot.last_track_timestamp,
            now=current_time,
        )
        last_track = pilot.track_state if pilot.track_state is not None else UNKNOWN_STATE

        if departure_id in codes:
            result.departures.append(FlightRecord(
                callsign=pilot.callsign,
                from_icao=departure_id,
                to_icao=arrival_id,
                etd=etd,
                eet=eet,
                eta=eta,
                last_track=last_track,
            ))

        if arrival_id in codes:
            result.arrivals.append(FlightRecord(
                callsign=pilot.callsign,
                from_icao=departure_id,
                to_icao=arrival_id,
                etd=etd,
                eet=eet,
                eta=eta,
                last_track=last_track,
            ))

    logger.debug(
        f'Matched {len(result.departures)} departures and '
        f'{len(result.arrivals)} arrivals against {len(codes)} airports'
    )

    return result
