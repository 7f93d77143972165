#!/usr/bin/env python3
"""
Catalogue API - REST surface for the video game catalogue.

Every route follows the same path: validate the JSON body, open a session,
delegate to :class:`~catalogue.services.VideoGameService`, translate the
result into a status code.  Unexpected failures are logged in full and
answered with a generic 500 message.

The resource is mounted under ``/videogames`` and ``/api/videogames``.
"""

import argparse
import logging
import os
from contextlib import contextmanager

from dotenv import load_dotenv
from flask import Blueprint, Flask, current_app, jsonify, request, url_for
from werkzeug.exceptions import HTTPException

import database
from catalogue.dtos import CreateVideoGameInput, UpdateVideoGameInput
from catalogue.errors import ValidationError
from catalogue.log import setup_logging
from catalogue.repositories import VideoGameRepository
from catalogue.services import VideoGameService

api_logger = logging.getLogger('catalogue.api')

bp = Blueprint('videogames', __name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

@contextmanager
def _service_scope():
    """Yield a service bound to a fresh session; the session is always closed."""
    db = current_app.config['SESSION_FACTORY']()
    try:
        repo = VideoGameRepository(db, clock=current_app.config['CLOCK'])
        yield VideoGameService(repo)
    finally:
        db.close()


def _invalid(exc: ValidationError):
    return jsonify({'error': 'Validation failed', 'errors': exc.errors}), 400


def _not_found(game_id: int):
    return jsonify({'error': f'Video game with ID {game_id} not found'}), 404


def _server_error(message: str):
    return jsonify({'error': message}), 500


# ---------------------------------------------------------------------------
# Video game endpoints
# ---------------------------------------------------------------------------

@bp.route('', methods=['GET'])
def list_videogames():
    """Return every video game ordered by title."""
    try:
        with _service_scope() as service:
            games = service.list_all()
    except Exception:
        api_logger.exception('Error retrieving all video games')
        return _server_error('An error occurred while retrieving video games')
    return jsonify([g.to_dict() for g in games])


@bp.route('/<int:game_id>', methods=['GET'])
def get_videogame(game_id: int):
    """Return a single video game."""
    try:
        with _service_scope() as service:
            game = service.get_by_id(game_id)
    except Exception:
        api_logger.exception('Error retrieving video game with ID %s', game_id)
        return _server_error('An error occurred while retrieving the video game')
    if game is None:
        api_logger.warning('Video game with ID %s not found', game_id)
        return _not_found(game_id)
    return jsonify(game.to_dict())


@bp.route('', methods=['POST'])
def create_videogame():
    """Create a video game.

    Body JSON: {"title": "...", "genre": ..., "releaseDate": "YYYY-MM-DD",
    "publisher": ..., "rating": 0-10, "price": 0-9999.99, "description": ...}
    """
    try:
        data = CreateVideoGameInput.from_dict(request.get_json(silent=True))
    except ValidationError as exc:
        return _invalid(exc)

    try:
        with _service_scope() as service:
            created = service.create(data)
    except Exception:
        api_logger.exception('Error creating video game with title %r', data.title)
        return _server_error('An error occurred while creating the video game')

    response = jsonify(created.to_dict())
    response.status_code = 201
    response.headers['Location'] = url_for('.get_videogame', game_id=created.id, _external=True)
    return response


@bp.route('/<int:game_id>', methods=['PUT'])
def update_videogame(game_id: int):
    """Replace every field of a video game (same body as create)."""
    try:
        data = UpdateVideoGameInput.from_dict(request.get_json(silent=True))
    except ValidationError as exc:
        return _invalid(exc)

    try:
        with _service_scope() as service:
            updated = service.update(game_id, data)
    except Exception:
        api_logger.exception('Error updating video game with ID %s', game_id)
        return _server_error('An error occurred while updating the video game')

    if updated is None:
        api_logger.warning('Attempted to update non-existent video game with ID %s', game_id)
        return _not_found(game_id)
    return jsonify(updated.to_dict())


@bp.route('/<int:game_id>', methods=['DELETE'])
def delete_videogame(game_id: int):
    """Delete a video game; 204 with no body on success."""
    try:
        with _service_scope() as service:
            deleted = service.delete(game_id)
    except Exception:
        api_logger.exception('Error deleting video game with ID %s', game_id)
        return _server_error('An error occurred while deleting the video game')

    if not deleted:
        api_logger.warning('Attempted to delete non-existent video game with ID %s', game_id)
        return _not_found(game_id)
    return '', 204


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = Flask(__name__)
app.config['SESSION_FACTORY'] = database.SessionLocal
app.config['CLOCK'] = database.utcnow
app.json.sort_keys = False
app.register_blueprint(bp, url_prefix='/videogames')
app.register_blueprint(bp, url_prefix='/api/videogames', name='api_videogames')


@app.errorhandler(HTTPException)
def handle_http_error(exc: HTTPException):
    """Answer unknown routes and wrong methods with JSON instead of HTML."""
    response = jsonify({'error': exc.description})
    response.status_code = exc.code or 500
    if exc.code == 405 and exc.valid_methods:
        response.headers['Allow'] = ', '.join(exc.valid_methods)
    return response


def main():
    """Main entry point for the API server"""
    parser = argparse.ArgumentParser(description='Video Game Catalogue API')
    parser.add_argument('--host', default='127.0.0.1', help='Interface to bind')
    parser.add_argument('--port', type=int, default=5000, help='Port to listen on')
    parser.add_argument('--debug', action='store_true', help='Enable the Flask debugger')
    parser.add_argument('--no-init-db', action='store_true',
                        help='Skip table creation and seeding on startup')
    args = parser.parse_args()

    load_dotenv()
    setup_logging(os.getenv('CATALOGUE_LOG_LEVEL', 'INFO'),
                  log_file=os.getenv('CATALOGUE_LOG_FILE', 'logs/catalogue_api.log'))

    # .env may point DATABASE_URL elsewhere than the import-time default
    engine = database.build_engine(os.getenv('DATABASE_URL', database.DATABASE_URL))
    app.config['SESSION_FACTORY'] = database.build_session_factory(engine)

    if not args.no_init_db:
        try:
            seeded = database.init_db(engine)
            api_logger.info('Database ready (%d games seeded)', seeded)
        except Exception:
            # Keep serving; every request will report the storage failure
            api_logger.exception('Database initialization failed')

    print("\n" + "=" * 60)
    print("Video Game Catalogue API is starting...")
    print("=" * 60)
    print(f"\n  http://{args.host}:{args.port}/videogames")
    print("\nPress Ctrl+C to stop the server")
    print("=" * 60 + "\n")

    try:
        app.run(host=args.host, port=args.port, debug=args.debug)
    except KeyboardInterrupt:
        print("\nVideo Game Catalogue API stopped")


if __name__ == "__main__":
    main()
