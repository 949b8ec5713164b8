from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(cors_allowed_origins='*', async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    origins = flask_app.config.get('CORS_ORIGINS', '*')
    CORS(flask_app, origins=origins, send_wildcard=(origins == '*'))

    socketio.init_app(flask_app, cors_allowed_origins=origins)

    from clicker.main import main
    flask_app.register_blueprint(main)

    from clicker.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix='/api')

    from clicker.api.achievements import achievements
    flask_app.register_blueprint(achievements, url_prefix='/api/achievements')

    from clicker.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    from clicker.errors import ClickerError, StorageError

    @flask_app.errorhandler(ClickerError)
    def handle_clicker_error(exc):
        if isinstance(exc, StorageError):
            flask_app.logger.error(f"[storage] {exc.message}")
        return jsonify(exc.to_dict()), exc.status_code

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from clicker.services.scoring import seed_achievements
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            added = seed_achievements(db.session)
            print(f'Database has been reset and seeded with {added} achievements!')

    @click.command('seed-achievements')
    def seed_achievements_command():
        """Adds any missing default achievement tiers."""
        from clicker.services.scoring import seed_achievements
        with flask_app.app_context():
            added = seed_achievements(db.session)
            print(f'Added {added} achievements.')

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(seed_achievements_command)

    return flask_app
