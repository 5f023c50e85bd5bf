"""
Airport registry - the list of watched airports.

Wraps the airports table behind list/add/update/remove operations.
Validation mirrors the admin form rules (4-letter ICAO code, latitude
and longitude ranges) and is reported through RegistryResult instead of
exceptions.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional, List, Set, Tuple, Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from pilot_board.models import Airport, session_scope

logger = logging.getLogger(__name__)

ICAO_PATTERN = re.compile(r'^[A-Z]{4}$')
MAX_NAME_LENGTH = 100


@dataclass(frozen=True)
class AirportInfo:
    """Detached, read-only view of an airport row."""
    id: int
    icao_code: str
    name: str
    latitude: float
    longitude: float

    @classmethod
    def from_model(cls, airport: Airport) -> 'AirportInfo':
        return cls(
            id=airport.id,
            icao_code=airport.icao_code,
            name=airport.airport_name,
            latitude=airport.latitude,
            longitude=airport.longitude,
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'icao_code': self.icao_code,
            'name': self.name,
            'latitude': self.latitude,
            'longitude': self.longitude,
        }


@dataclass
class RegistryResult:
    """Outcome of a registry write."""
    ok: bool
    airport: Optional[AirportInfo] = None
    errors: List[str] = field(default_factory=list)
    not_found: bool = False
    conflict: bool = False

    @classmethod
    def success(cls, airport: Optional[AirportInfo] = None) -> 'RegistryResult':
        return cls(ok=True, airport=airport)

    @classmethod
    def failure(cls, *errors: str, not_found: bool = False, conflict: bool = False) -> 'RegistryResult':
        return cls(ok=False, errors=list(errors), not_found=not_found, conflict=conflict)


def _parse_coordinate(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    # NaN passes every range comparison
    if number != number:
        return None
    return number


def validate_airport(
    icao_code: Any,
    name: Any,
    latitude: Any,
    longitude: Any,
) -> Tuple[dict, List[str]]:
    """
    Validate and normalize admin input for an airport.

    Returns:
        Tuple of (cleaned values, list of error messages).
        The cleaned dict is only meaningful when the error list is empty.
    """
    errors = []

    code = str(icao_code or '').strip().upper()
    if not ICAO_PATTERN.match(code):
        errors.append('Please enter a valid ICAO code (4 letters).')

    airport_name = str(name or '').strip()
    if not airport_name:
        errors.append('Please enter an airport name.')
    elif len(airport_name) > MAX_NAME_LENGTH:
        errors.append(f'Airport name must be at most {MAX_NAME_LENGTH} characters.')

    lat = _parse_coordinate(latitude)
    if lat is None or lat < -90 or lat > 90:
        errors.append('Please enter a valid latitude (-90 to 90).')

    lon = _parse_coordinate(longitude)
    if lon is None or lon < -180 or lon > 180:
        errors.append('Please enter a valid longitude (-180 to 180).')

    cleaned = {
        'icao_code': code,
        'airport_name': airport_name,
        'latitude': lat,
        'longitude': lon,
    }
    return cleaned, errors


class AirportRegistry:
    """
    Watched-airport store backed by SQLAlchemy.

    The session factory is injected so the registry can be pointed at any
    database (tests use a temporary SQLite file).
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def list(self) -> List[AirportInfo]:
        """All watched airports in insertion order."""
        with session_scope(self.session_factory) as session:
            airports = session.scalars(select(Airport).order_by(Airport.id)).all()
            return [AirportInfo.from_model(a) for a in airports]

    def codes(self) -> Set[str]:
        """ICAO codes of all watched airports."""
        with session_scope(self.session_factory) as session:
            return set(session.scalars(select(Airport.icao_code)).all())

    def get(self, airport_id: int) -> Optional[AirportInfo]:
        with session_scope(self.session_factory) as session:
            airport = session.get(Airport, airport_id)
            return AirportInfo.from_model(airport) if airport else None

    def add(
        self,
        icao_code: Any,
        name: Any,
        latitude: Any,
        longitude: Any,
    ) -> RegistryResult:
        """Register a new watched airport."""
        values, errors = validate_airport(icao_code, name, latitude, longitude)
        if errors:
            return RegistryResult.failure(*errors)

        try:
            with session_scope(self.session_factory) as session:
                if self._code_taken(session, values['icao_code']):
                    return self._duplicate(values['icao_code'])

                airport = Airport(**values)
                session.add(airport)
                session.flush()
                info = AirportInfo.from_model(airport)
        except IntegrityError:
            return self._duplicate(values['icao_code'])

        logger.info(f'Added airport {info.icao_code} ({info.name})')
        return RegistryResult.success(info)

    def update(
        self,
        airport_id: int,
        icao_code: Any,
        name: Any,
        latitude: Any,
        longitude: Any,
    ) -> RegistryResult:
        """Replace the fields of an existing airport."""
        values, errors = validate_airport(icao_code, name, latitude, longitude)
        if errors:
            return RegistryResult.failure(*errors)

        try:
            with session_scope(self.session_factory) as session:
                airport = session.get(Airport, airport_id)
                if airport is None:
                    return RegistryResult.failure(f'Airport {airport_id} not found.', not_found=True)

                if self._code_taken(session, values['icao_code'], exclude_id=airport_id):
                    return self._duplicate(values['icao_code'])

                for key, value in values.items():
                    setattr(airport, key, value)
                session.flush()
                info = AirportInfo.from_model(airport)
        except IntegrityError:
            return self._duplicate(values['icao_code'])

        logger.info(f'Updated airport {airport_id} -> {info.icao_code}')
        return RegistryResult.success(info)

    def remove(self, airport_id: int) -> RegistryResult:
        """Stop watching an airport."""
        with session_scope(self.session_factory) as session:
            airport = session.get(Airport, airport_id)
            if airport is None:
                return RegistryResult.failure(f'Airport {airport_id} not found.', not_found=True)
            info = AirportInfo.from_model(airport)
            session.delete(airport)

        logger.info(f'Removed airport {info.icao_code}')
        return RegistryResult.success(info)

    @staticmethod
    def _code_taken(session, icao_code: str, exclude_id: Optional[int] = None) -> bool:
        stmt = select(Airport.id).where(Airport.icao_code == icao_code)
        if exclude_id is not None:
            stmt = stmt.where(Airport.id != exclude_id)
        return session.scalars(stmt).first() is not None

    @staticmethod
    def _duplicate(icao_code: str) -> RegistryResult:
        logger.warning(f'Rejected duplicate airport {icao_code}')
        return RegistryResult.failure(f'Airport {icao_code} is already registered.', conflict=True)
