import calendar

import pytest

from pilot_board.app import create_app
from pilot_board.config import DatabaseConfig
from pilot_board.ingestion import FetchResult
from pilot_board.models import build_engine, build_session_factory, init_db
from pilot_board.services import AirportRegistry

# 2024-01-01 00:00:00 UTC
MIDNIGHT = calendar.timegm((2024, 1, 1, 0, 0, 0))


def pilot_payload(
    callsign='IVA123',
    departure='KJFK',
    arrival='EGLL',
    departure_time=None,
    arrival_time=None,
    eet=None,
    arrival_distance=None,
    ground_speed=None,
    timestamp=None,
    state=None,
):
    """Whazzup-shaped pilot object, omitting fields left as None."""
    flight_plan = {'departureId': departure, 'arrivalId': arrival}
    if departure_time is not None:
        flight_plan['departureTime'] = departure_time
    if arrival_time is not None:
        flight_plan['arrivalTime'] = arrival_time
    if eet is not None:
        flight_plan['eet'] = eet

    last_track = {}
    if arrival_distance is not None:
        last_track['arrivalDistance'] = arrival_distance
    if ground_speed is not None:
        last_track['groundSpeed'] = ground_speed
    if timestamp is not None:
        last_track['timestamp'] = timestamp
    if state is not None:
        last_track['state'] = state

    return {'callsign': callsign, 'flightPlan': flight_plan, 'lastTrack': last_track}


class StubClient:
    """Stands in for WhazzupClient; returns a canned FetchResult."""

    def __init__(self, result=None):
        self.result = result or FetchResult.ok([])
        self.calls = 0

    def fetch(self):
        self.calls += 1
        return self.result


@pytest.fixture
def registry(tmp_path):
    engine = build_engine(DatabaseConfig(url=f"sqlite:///{tmp_path / 'test.db'}"))
    init_db(engine)
    yield AirportRegistry(build_session_factory(engine))
    engine.dispose()


@pytest.fixture
def stub_client():
    return StubClient()


@pytest.fixture
def app(registry, stub_client):
    app = create_app(registry=registry, client=stub_client)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def http(app):
    return app.test_client()
