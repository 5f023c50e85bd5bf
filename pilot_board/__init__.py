"""
PilotBoard Package.

Departure and arrival boards for a curated list of airports, built from the
IVAO whazzup feed with Flask and SQLAlchemy.

Modules:
    api/         REST endpoints for the board and the watched-airport admin
    models/      SQLAlchemy ORM models (Airport) and session helpers
    ingestion/   IVAO whazzup client (one GET per board request)
    analytics/   Pilot matching and ETD/EET/ETA estimation
    services/    Airport registry and the tracker call chain
    presenter.py Groups matched flights into per-airport board sections
    config.py    Centralized configuration from environment variables
"""

__version__ = '1.0.0'
