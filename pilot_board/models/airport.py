"""
Airport model - the watched airports shown on the board.

Rows are managed through the admin API and read once per board request.
"""

from datetime import datetime, timezone

from sqlalchemy import String, Float, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from pilot_board.models.base import Base


class Airport(Base):
    """
    A watched airport keyed by its ICAO code.

    Fields:
        id: Surrogate key used by the admin surface
        icao_code: 4-letter uppercase ICAO identifier (e.g., 'KJFK')
        airport_name: Display name (e.g., 'John F Kennedy Intl')
        latitude: WGS84 latitude in decimal degrees
        longitude: WGS84 longitude in decimal degrees
    """

    __tablename__ = 'airports'

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    icao_code: Mapped[str] = mapped_column(
        String(4),
        nullable=False,
        unique=True,
        index=True,
        comment='ICAO airport code (e.g., KJFK)'
    )

    airport_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment='Airport display name'
    )

    latitude: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment='Latitude in decimal degrees'
    )

    longitude: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment='Longitude in decimal degrees'
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        comment='Record creation timestamp'
    )

    def __repr__(self) -> str:
        return f'<Airport {self.id} {self.icao_code}>'
