"""
Watched-airport admin endpoints.

Provides endpoints for:
- GET    /api/airports        - List watched airports
- POST   /api/airports        - Add an airport
- PUT    /api/airports/<id>   - Edit an airport
- DELETE /api/airports/<id>   - Remove an airport

Request body (JSON or form):
    {"icao_code": "KJFK", "name": "...", "latitude": 40.64, "longitude": -73.78}
"""

import logging

from flask import Blueprint, jsonify, request, current_app

logger = logging.getLogger(__name__)

airports_bp = Blueprint('airports', __name__, url_prefix='/api/airports')


def _registry():
    return current_app.config['AIRPORT_REGISTRY']


def _payload() -> dict:
    """Request body from JSON, falling back to form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def _write_response(result, success_status: int = 200):
    if result.ok:
        return jsonify({'airport': result.airport.to_dict()}), success_status
    if result.not_found:
        status = 404
    elif result.conflict:
        status = 409
    else:
        status = 400
    return jsonify({'errors': result.errors}), status


@airports_bp.route('', methods=['GET'])
def list_airports():
    airports = _registry().list()
    return jsonify({
        'airports': [a.to_dict() for a in airports],
        'count': len(airports),
    })


@airports_bp.route('', methods=['POST'])
def add_airport():
    """Add a watched airport. 400 on invalid input, 409 on duplicate ICAO."""
    data = _payload()
    result = _registry().add(
        data.get('icao_code'),
        data.get('name', data.get('airport_name')),
        data.get('latitude'),
        data.get('longitude'),
    )
    return _write_response(result, success_status=201)


@airports_bp.route('/<int:airport_id>', methods=['PUT'])
def update_airport(airport_id: int):
    data = _payload()
    result = _registry().update(
        airport_id,
        data.get('icao_code'),
        data.get('name', data.get('airport_name')),
        data.get('latitude'),
        data.get('longitude'),
    )
    return _write_response(result)


@airports_bp.route('/<int:airport_id>', methods=['DELETE'])
def delete_airport(airport_id: int):
    result = _registry().remove(airport_id)
    return _write_response(result)
