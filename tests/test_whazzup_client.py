import json
from unittest import mock

import requests

from pilot_board.config import WhazzupConfig
from pilot_board.ingestion import FetchResult, PilotReport, WhazzupClient

from tests.conftest import pilot_payload


def make_response(body, status=200):
    response = requests.models.Response()
    response.status_code = status
    response._content = body.encode('utf-8')
    response.encoding = 'utf-8'
    response.url = 'https://example.test/whazzup'
    return response


def make_client(payload=None, status=200, body=None, get_error=None):
    session = mock.Mock()
    if get_error is not None:
        session.get.side_effect = get_error
    else:
        text = body if body is not None else json.dumps(payload)
        session.get.return_value = make_response(text, status)

    return WhazzupClient(url='https://example.test/whazzup', session=session)


class TestPilotReport:
    def test_parses_nested_fields(self):
        raw = pilot_payload(
            callsign='IVA1',
            departure='KJFK',
            arrival='EGLL',
            departure_time=52200,
            arrival_time=80000,
            eet=4500,
            arrival_distance=1200.5,
            ground_speed=450,
            timestamp='2024-01-01T12:00:00Z',
            state='En Route',
        )

        report = PilotReport.from_dict(raw)

        assert report == PilotReport(
            callsign='IVA1',
            departure_icao='KJFK',
            arrival_icao='EGLL',
            departure_time=52200,
            arrival_time=80000,
            arrival_distance_nm=1200.5,
            ground_speed_kt=450,
            last_track_timestamp='2024-01-01T12:00:00Z',
            eet_seconds=4500,
            track_state='En Route',
        )

    def test_null_sections(self):
        report = PilotReport.from_dict({'callsign': 'IVA2', 'flightPlan': None, 'lastTrack': None})

        assert report.callsign == 'IVA2'
        assert report.departure_icao is None
        assert report.ground_speed_kt is None
        assert report.track_state is None

    def test_malformed_numbers_are_absent(self):
        raw = pilot_payload(ground_speed='fast', arrival_distance=True, eet=[1])

        report = PilotReport.from_dict(raw)

        assert report.ground_speed_kt is None
        assert report.arrival_distance_nm is None
        assert report.eet_seconds is None

    def test_numeric_strings_accepted(self):
        report = PilotReport.from_dict(pilot_payload(ground_speed='420'))

        assert report.ground_speed_kt == 420.0

    def test_missing_callsign(self):
        assert PilotReport.from_dict({}).callsign == ''


class TestFetch:
    def test_success(self):
        payload = {'clients': {'pilots': [pilot_payload(callsign='A'), pilot_payload(callsign='B')]}}
        client = make_client(payload)

        result = client.fetch()

        assert not result.degraded
        assert result.reason is None
        assert [p.callsign for p in result.pilots] == ['A', 'B']
        client.session.get.assert_called_once_with('https://example.test/whazzup', timeout=None)

    def test_skips_non_object_entries(self):
        client = make_client({'clients': {'pilots': [pilot_payload(callsign='A'), 'junk', None]}})

        assert [p.callsign for p in client.fetch().pilots] == ['A']

    def test_http_error_degrades(self):
        result = make_client(status=500).fetch()

        assert result.degraded
        assert result.pilots == []
        assert '500' in result.reason

    def test_invalid_json_degrades(self):
        result = make_client(body='<html>not json</html>').fetch()

        assert result.degraded
        assert result.reason == 'invalid json'
        assert result.pilots == []

    def test_redirect_status_degrades(self):
        body = json.dumps({'clients': {'pilots': [pilot_payload()]}})

        result = make_client(body=body, status=302).fetch()

        assert result.degraded
        assert result.reason == 'http status 302'
        assert result.pilots == []

    def test_connection_error_degrades(self):
        result = make_client(get_error=requests.exceptions.ConnectionError('down')).fetch()

        assert result.degraded
        assert result.pilots == []

    def test_timeout_degrades(self):
        result = make_client(get_error=requests.exceptions.ReadTimeout('slow')).fetch()

        assert result.degraded
        assert result.reason == 'timeout'

    def test_unexpected_shape_degrades(self):
        for payload in ({}, {'clients': None}, {'clients': {'pilots': {}}}, []):
            result = make_client(payload).fetch()
            assert result.degraded
            assert result.pilots == []

    def test_single_request_per_fetch(self):
        client = make_client(status=503)

        client.fetch()

        assert client.session.get.call_count == 1


def test_from_config():
    client = WhazzupClient.from_config(WhazzupConfig(url='https://example.test/feed', timeout_seconds=5.0))

    assert client.url == 'https://example.test/feed'
    assert client.timeout == 5.0


def test_failure_result_is_empty():
    result = FetchResult.failure('boom')

    assert result.degraded
    assert result.pilots == []
    assert result.reason == 'boom'
