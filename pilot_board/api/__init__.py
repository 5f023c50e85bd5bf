"""
API module for PilotBoard.

Provides endpoints for:
- The departures/arrivals board (HTML and JSON)
- Watched-airport administration
"""

from pilot_board.api.board import board_bp
from pilot_board.api.airports import airports_bp

__all__ = ['board_bp', 'airports_bp']
