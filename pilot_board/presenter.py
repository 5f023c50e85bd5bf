"""
Board presenter - groups matched flights by watched airport.

The matcher returns two flat lists; the board shows one departures table
and one arrivals table per airport, in registry order.
"""

from dataclasses import dataclass, field
from typing import List, Iterable

from pilot_board.analytics import FlightRecord
from pilot_board.services.airport_registry import AirportInfo


@dataclass
class AirportSection:
    """One airport block on the board."""
    icao_code: str
    name: str
    departures: List[FlightRecord] = field(default_factory=list)
    arrivals: List[FlightRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'icao_code': self.icao_code,
            'name': self.name,
            'departures': [r.to_dict() for r in self.departures],
            'arrivals': [r.to_dict() for r in self.arrivals],
        }


def build_sections(
    airports: Iterable[AirportInfo],
    departures: List[FlightRecord],
    arrivals: List[FlightRecord],
) -> List[AirportSection]:
    """Split the matched lists into per-airport sections."""
    sections = []
    for airport in airports:
        code = airport.icao_code
        sections.append(AirportSection(
            icao_code=code,
            name=airport.name,
            departures=[r for r in departures if r.from_icao == code],
            arrivals=[r for r in arrivals if r.to_icao == code],
        ))
    return sections
