"""
Board endpoints.

Provides endpoints for:
- GET /           - HTML departures/arrivals board
- GET /api/board  - Same data as JSON

Both fetch the whazzup feed synchronously; a slow upstream slows the page.
"""

import logging
import time
from datetime import datetime, timezone

from flask import Blueprint, jsonify, render_template, current_app

from pilot_board.presenter import build_sections

logger = logging.getLogger(__name__)

board_bp = Blueprint('board', __name__)


def _tracker():
    return current_app.config['PILOT_TRACKER']


@board_bp.route('/', methods=['GET'])
def board_page():
    """Render the airport board."""
    snapshot = _tracker().snapshot()
    sections = build_sections(snapshot.airports, snapshot.departures, snapshot.arrivals)
    return render_template(
        'board.html',
        sections=sections,
        degraded=snapshot.degraded,
    )


@board_bp.route('/api/board', methods=['GET'])
def board_json():
    """
    Matched departures and arrivals as JSON.

    Response includes the grouped per-airport sections and, when the
    upstream fetch failed, degraded=true with the failure reason.
    """
    start_time = time.perf_counter()

    snapshot = _tracker().snapshot()
    sections = build_sections(snapshot.airports, snapshot.departures, snapshot.arrivals)

    query_time_ms = (time.perf_counter() - start_time) * 1000

    return jsonify({
        'departures': [r.to_dict() for r in snapshot.departures],
        'arrivals': [r.to_dict() for r in snapshot.arrivals],
        'sections': [s.to_dict() for s in sections],
        'degraded': snapshot.degraded,
        'reason': snapshot.reason,
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'query_time_ms': round(query_time_ms, 2),
    })
