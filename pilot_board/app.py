"""
PilotBoard Flask Application.

Main entry point for the web application. Initializes:
- Database schema
- Airport registry and whazzup client
- API routes and the HTML board

Usage:
    python -m pilot_board.app

Or with gunicorn:
    gunicorn 'pilot_board.app:create_app()'
"""

import logging
import os
from typing import Optional

from flask import Flask
from flask_cors import CORS

from pilot_board.config import AppConfig, config
from pilot_board.models import build_engine, build_session_factory, init_db
from pilot_board.api import board_bp, airports_bp
from pilot_board.ingestion import WhazzupClient
from pilot_board.services import AirportRegistry, PilotTracker

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


def create_app(
    app_config: Optional[AppConfig] = None,
    registry: Optional[AirportRegistry] = None,
    client: Optional[WhazzupClient] = None,
) -> Flask:
    """
    Application factory for Flask.

    Args:
        app_config: Configuration to use (module singleton if None)
        registry: Airport registry (built from the database config if None)
        client: Whazzup client (built from the whazzup config if None)

    Returns:
        Configured Flask application instance.
    """
    app_config = app_config or config

    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = app_config.secret_key

    # Enable CORS for API endpoints
    CORS(app, resources={r'/api/*': {'origins': '*'}})

    if registry is None:
        logger.info('Initializing database...')
        engine = build_engine(app_config.database, echo=app_config.debug)
        init_db(engine)
        registry = AirportRegistry(build_session_factory(engine))

    if client is None:
        client = WhazzupClient.from_config(app_config.whazzup)

    app.config['AIRPORT_REGISTRY'] = registry
    app.config['PILOT_TRACKER'] = PilotTracker(registry, client)

    # Register blueprints
    app.register_blueprint(board_bp)
    app.register_blueprint(airports_bp)

    @app.route('/health')
    def health():
        """Simple health check endpoint."""
        return {'status': 'ok'}

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Not found'}, 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return {'error': 'Method not allowed'}, 405

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return {'error': 'Internal server error'}, 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()

    # Get port from environment or default
    port = int(os.environ.get('PORT', 5000))

    logger.info(f'Starting PilotBoard on http://localhost:{port}')

    app.run(
        host='0.0.0.0',
        port=port,
        debug=config.debug,
    )


if __name__ == '__main__':
    run_development_server()
